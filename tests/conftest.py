"""Shared pytest fixtures for the campaign backoffice test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from backoffice.config import get_settings


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Start every test with fresh settings and default structlog config."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
