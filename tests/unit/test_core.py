# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for settings, logging and result models."""

from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from cronlens.core.config import Settings, get_settings
from cronlens.core.exceptions import ConfigurationError, CronLensError
from cronlens.core.logging import JsonFormatter, setup_logging
from cronlens.cron.parser import parse


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.default_timezone == "local"
        assert settings.default_count == 5
        assert settings.max_count == 100
        assert settings.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CRONLENS_DEFAULT_TIMEZONE", "Europe/Paris")
        monkeypatch.setenv("CRONLENS_MAX_COUNT", "20")
        settings = get_settings()
        assert settings.default_timezone == "Europe/Paris"
        assert settings.max_count == 20

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("CRONLENS_DEFAULT_COUNT=7\n")
        assert get_settings().default_count == 7

    def test_blank_timezone_means_local(self, monkeypatch):
        monkeypatch.setenv("CRONLENS_DEFAULT_TIMEZONE", "   ")
        assert get_settings().default_timezone == "local"

    def test_non_positive_count_rejected(self, monkeypatch):
        monkeypatch.setenv("CRONLENS_RANGE_LIMIT", "0")
        with pytest.raises(ConfigurationError, match="range_limit"):
            get_settings()

    def test_configuration_error_is_cronlens_error(self):
        assert issubclass(ConfigurationError, CronLensError)


class TestLogging:
    def test_setup_replaces_handlers(self):
        setup_logging("DEBUG")
        setup_logging("INFO")
        logger = logging.getLogger("cronlens")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("LOUD")
        assert logging.getLogger("cronlens").level == logging.WARNING

    def test_json_formatter(self):
        record = logging.LogRecord(
            name="cronlens.cron.scheduler",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="found %d of %d",
            args=(2, 5),
            exc_info=None,
        )
        data = json.loads(JsonFormatter().format(record))
        assert data["level"] == "DEBUG"
        assert data["logger"] == "cronlens.cron.scheduler"
        assert data["message"] == "found 2 of 5"


class TestModels:
    def test_parsed_expression_is_frozen(self):
        parsed = parse("0 9 * * *")
        with pytest.raises(ValidationError):
            parsed.original = "changed"

    def test_computed_fields_serialize(self):
        data = parse("@reboot").model_dump()
        assert data["valid"] is True
        assert data["is_reboot"] is True

    def test_canonical(self):
        assert parse("@weekly").canonical() == "0 0 * * 0"
        assert parse(" @reboot ").canonical() == "@reboot"
