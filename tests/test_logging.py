"""Unit tests for hudconf.infra.observability.logging."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from hudconf.infra.observability.logging import (
    TRUNCATION_MARKER,
    LoggingSettings,
    RawValueTruncator,
    configure_logging,
    get_logger,
    get_logging_settings,
)


class TestLoggingSettings:
    @pytest.mark.unit
    def test_default_values(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "INFO"
            assert settings.log_format == "console"
            assert settings.use_json_logs is False

    @pytest.mark.unit
    def test_use_json_logs(self) -> None:
        settings = LoggingSettings(log_format="JSON")
        assert settings.use_json_logs is True

    @pytest.mark.unit
    def test_log_level_int(self) -> None:
        settings = LoggingSettings(log_level="DEBUG")
        assert settings.log_level_int == logging.DEBUG

    @pytest.mark.unit
    def test_normalize_log_level_lowercase(self) -> None:
        settings = LoggingSettings(log_level="debug")
        assert settings.log_level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_log_level(self) -> None:
        with pytest.raises(Exception):  # noqa: B017
            LoggingSettings(log_level="INVALID")

    @pytest.mark.unit
    def test_invalid_log_format(self) -> None:
        with pytest.raises(Exception):  # noqa: B017
            LoggingSettings(log_format="xml")

    @pytest.mark.unit
    def test_from_env_vars(self) -> None:
        env = {"LOG_LEVEL": "WARNING", "LOG_FORMAT": "json", "LOG_MAX_VALUE_LENGTH": "40"}
        with patch.dict("os.environ", env, clear=True):
            settings = LoggingSettings()
            assert settings.log_level == "WARNING"
            assert settings.use_json_logs is True
            assert settings.max_value_length == 40


class TestRawValueTruncator:
    @pytest.mark.unit
    def test_truncates_long_raw_value(self) -> None:
        processor = RawValueTruncator(max_length=10)
        event_dict: dict[str, object] = {"event": "config_field_ignored", "raw_value": "x" * 50}
        result = processor(None, "warning", event_dict)
        assert result["raw_value"] == "x" * 7 + TRUNCATION_MARKER
        assert len(result["raw_value"]) == 10

    @pytest.mark.unit
    def test_preserves_short_value(self) -> None:
        processor = RawValueTruncator(max_length=10)
        event_dict: dict[str, object] = {"event": "test", "value": "short"}
        assert processor(None, "info", event_dict)["value"] == "short"

    @pytest.mark.unit
    def test_ignores_other_fields(self) -> None:
        processor = RawValueTruncator(max_length=10)
        event_dict: dict[str, object] = {"event": "test", "reason": "y" * 50}
        assert processor(None, "info", event_dict)["reason"] == "y" * 50

    @pytest.mark.unit
    def test_ignores_missing_raw_value(self) -> None:
        processor = RawValueTruncator(max_length=10)
        event_dict: dict[str, object] = {"event": "test", "raw_value": None}
        assert processor(None, "info", event_dict)["raw_value"] is None


class TestConfigureLogging:
    @pytest.mark.unit
    def test_configure_with_default_settings(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            get_logging_settings.cache_clear()
            configure_logging()

    @pytest.mark.unit
    def test_configure_json(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG", log_format="json"))


class TestGetLogger:
    @pytest.mark.unit
    def test_returns_bound_logger(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        logger = get_logger("test.module")
        assert logger is not None

    @pytest.mark.unit
    def test_returns_unbound_logger_when_no_name(self) -> None:
        configure_logging(LoggingSettings(log_level="DEBUG"))
        assert get_logger() is not None
