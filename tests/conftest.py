"""Shared pytest fixtures."""

import pytest

from netblocks.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test freshly loaded settings from a clean environment."""
    monkeypatch.delenv("NETBLOCKS_IPV6_NETWORK_BYTES", raising=False)
    monkeypatch.delenv("NETBLOCKS_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
