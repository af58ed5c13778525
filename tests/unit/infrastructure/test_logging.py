"""Unit tests for structured logging configuration.

Tests the structlog configuration and the events valobj emits.
"""

import json
import logging
import os
from unittest.mock import patch

import pytest
import structlog

from valobj import ValidationFailures, ValueObject, build_deserialize
from valobj.domain.errors import UnknownTypeError, ValidationError
from valobj.infrastructure.observability.logging import (
    _get_log_level,
    configure_structlog,
    get_logger_for_service,
)


def _last_json_line(output: str) -> dict:
    lines = [line for line in output.strip().splitlines() if line.strip()]
    assert lines, "expected log output"
    return json.loads(lines[-1])


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_production_mode(self) -> None:
        """Production mode ends with the JSON renderer."""
        configure_structlog(environment="production")

        processors = structlog.get_config().get("processors", [])
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_development_mode(self) -> None:
        """Development mode ends with the console renderer."""
        configure_structlog(environment="development")

        processors = structlog.get_config().get("processors", [])
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_defaults_to_production(self) -> None:
        """The default environment is production."""
        configure_structlog()

        processors = structlog.get_config().get("processors", [])
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default_level_is_info(self) -> None:
        """Without LOG_LEVEL the level is INFO."""
        environ = {k: v for k, v in os.environ.items() if k != "LOG_LEVEL"}
        with patch.dict(os.environ, environ, clear=True):
            assert _get_log_level() == logging.INFO

    def test_level_from_environment(self) -> None:
        """LOG_LEVEL is read case-insensitively."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert _get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unknown level names give INFO."""
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
            assert _get_log_level() == logging.INFO


class TestLogOutput:
    """Tests for events emitted by valobj."""

    @pytest.fixture(autouse=True)
    def setup_production_logging(self) -> None:
        """Set up production logging at INFO for output tests."""
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO"}):
            configure_structlog(environment="production")

    def test_json_output_structure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Log output is JSON with event, level and timestamp."""
        structlog.get_logger().info("test_event", custom_field="value")

        log_entry = _last_json_line(capsys.readouterr().out)
        assert log_entry["event"] == "test_event"
        assert log_entry["level"] == "info"
        assert "timestamp" in log_entry
        assert log_entry["custom_field"] == "value"

    def test_validation_failure_is_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        """validate() logs the failure count before raising."""

        class Holiday(ValueObject.define({"name": "string"})):
            def add_validation_failures(self, failures: ValidationFailures) -> None:
                failures.add("is gloomy")

        with pytest.raises(ValidationError):
            Holiday({"name": "Monday"}).validate()

        log_entry = _last_json_line(capsys.readouterr().out)
        assert log_entry["event"] == "value_object_validation_failed"
        assert log_entry["type_name"] == "Holiday"
        assert log_entry["failure_count"] == 1

    def test_unknown_type_is_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A failed registry lookup logs a warning."""
        deserialize = build_deserialize([{}])

        with pytest.raises(UnknownTypeError):
            deserialize('{"__type__": "Ghost"}')

        log_entry = _last_json_line(capsys.readouterr().out)
        assert log_entry["event"] == "unknown_value_object_type"
        assert log_entry["level"] == "warning"
        assert log_entry["type_name"] == "Ghost"

    def test_non_object_payload_is_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A JSON payload that is not an object logs like a missing tag."""
        deserialize = build_deserialize([{}])

        with pytest.raises(UnknownTypeError) as exc_info:
            deserialize("[1, 2]")

        assert exc_info.value.type_name is None
        log_entry = _last_json_line(capsys.readouterr().out)
        assert log_entry["event"] == "unknown_value_object_type"
        assert log_entry["type_name"] is None

    def test_debug_events_filtered_at_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Successful deserialization logs at debug, hidden at INFO."""

        class Day(ValueObject.define({"name": "string"})):
            pass

        deserialize = build_deserialize([{"Day": Day}])
        deserialize('{"name": "Sunday", "__type__": "Day"}')

        assert "value_object_deserialized" not in capsys.readouterr().out


class TestGetLoggerForService:
    """Tests for get_logger_for_service."""

    def test_binds_service_and_component(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Bound fields appear in every entry."""
        configure_structlog(environment="production")

        get_logger_for_service("Registry").info("registry_loaded")

        log_entry = _last_json_line(capsys.readouterr().out)
        assert log_entry["service"] == "Registry"
        assert log_entry["component"] == "valobj"
