"""Shared fixtures for the datecore test suite.

Every test starts from a fresh default context and default logger
configuration. Tests that depend on "now" use the ``ctx`` fixture, whose
clock is pinned to Wednesday 2024-01-17 12:00 (the week runs from Sunday
the 14th to Saturday the 20th).
"""

from __future__ import annotations

from datetime import datetime

import pytest

from datecore.config import ErrorHandlingConfig
from datecore.context import DateContext, reset_default_context
from datecore.logging import reset_logger

FIXED_NOW = datetime(2024, 1, 17, 12, 0, 0)
FALLBACK_DATE = datetime(2020, 6, 1, 8, 5, 0)


@pytest.fixture(autouse=True)
def reset_datecore(monkeypatch):
    """Isolate global state between tests."""
    monkeypatch.setenv("DATECORE_ENV", "testing")
    reset_default_context()
    reset_logger()
    yield
    reset_default_context()
    reset_logger()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def ctx():
    """Context with a pinned clock and fallback date."""
    return DateContext(
        clock=lambda: FIXED_NOW,
        error_config=ErrorHandlingConfig(fallback_date=FALLBACK_DATE),
    )
