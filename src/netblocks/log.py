"""Logging setup helper.

The library itself only emits records through module loggers; call
ensure_logging() from an application or test session to see them.
"""

import logging
import sys

from netblocks.config import get_settings

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def ensure_logging(level: int | str | None = None, *, force: bool = False) -> None:
    """Ensure the netblocks logger writes to stdout.

    - With no level given, the configured log_level setting is used.
    - If the logger has no stream handler yet, one is added.
    - If handlers exist and `force` is True, they are replaced.

    This is safe to call multiple times.
    """
    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger("netblocks")
    stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]

    if force:
        for handler in stream_handlers:
            logger.removeHandler(handler)
        stream_handlers = []

    if not stream_handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT))
        logger.addHandler(handler)

    logger.setLevel(level)
