"""Pydantic configuration models for netblocks.

Uses pydantic-settings for environment variable loading
with validation and type coercion.
"""

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from netblocks.errors import ConfigValidationError


class NetblocksSettings(BaseSettings):
    """Library settings.

    Settings can be provided via:
    - Environment variables (prefixed with NETBLOCKS_)
    - .env file in the working directory
    - Direct instantiation
    """

    model_config = SettingsConfigDict(
        env_prefix="NETBLOCKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # IPv6 settings
    ipv6_network_bytes: int = Field(
        default=8,
        ge=1,
        le=16,
        description="Leading bytes of an IPv6 address that Net6 steps within",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper


@lru_cache(maxsize=1)
def get_settings() -> NetblocksSettings:
    """Get library settings singleton.

    Raises:
        ConfigValidationError: If the environment holds invalid values
    """
    try:
        return NetblocksSettings()
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid netblocks configuration: {e.error_count()} error(s)",
            {"errors": [err["msg"] for err in e.errors()]},
        ) from e


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    get_settings.cache_clear()
