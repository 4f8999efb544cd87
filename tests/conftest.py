# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from datetime import UTC, datetime

import pytest

_SETTINGS_ENV = (
    "CRONLENS_DEFAULT_TIMEZONE",
    "CRONLENS_DEFAULT_COUNT",
    "CRONLENS_MAX_COUNT",
    "CRONLENS_RANGE_LIMIT",
    "CRONLENS_LOG_LEVEL",
    "CRONLENS_LOG_FORMAT",
)


@pytest.fixture
def monday() -> datetime:
    """Midnight UTC on Monday 2024-01-01."""
    return datetime(2024, 1, 1, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep ambient CRONLENS_* variables and any .env file out of tests."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
