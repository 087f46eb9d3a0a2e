"""
Unit tests for the shared configuration, error, logging and metrics helpers.
"""

import logging

import pytest
import structlog
from prometheus_client import REGISTRY

from shared.config import BaseConfig, get_config
from shared.errors import ConfigurationError, ErrorResponse, SessionPropertiesException, ValidationError
from shared.logging import add_service_context, configure_logging, get_logger
from shared.metrics import record_match_evaluation


class TestConfig:
    """Test cases for settings."""

    def test_defaults(self, monkeypatch):
        """Test default settings."""
        for name in ("ENV", "LOG_LEVEL", "RULES_FILE", "COORDINATOR_VERSION"):
            monkeypatch.delenv(f"SESSION_PROPERTIES_{name}", raising=False)

        config = BaseConfig(_env_file=None)

        assert config.env == "local"
        assert config.log_level == "info"
        assert config.rules_file is None
        assert config.coordinator_version == "0.0"

    def test_environment_overrides(self, monkeypatch):
        """Test that prefixed environment variables are read."""
        monkeypatch.setenv("SESSION_PROPERTIES_RULES_FILE", "/etc/presto/session-property-config.json")
        monkeypatch.setenv("SESSION_PROPERTIES_COORDINATOR_VERSION", "0.210")

        config = BaseConfig(_env_file=None)

        assert config.rules_file == "/etc/presto/session-property-config.json"
        assert config.coordinator_version == "0.210"

    def test_get_config_keyword_overrides(self, monkeypatch):
        """Test that keyword overrides win over the environment."""
        monkeypatch.setenv("SESSION_PROPERTIES_LOG_LEVEL", "warning")

        config = get_config(log_level="debug")

        assert config.log_level == "debug"


class TestErrors:
    """Test cases for error types."""

    def test_validation_error_response(self):
        """Test converting a validation error to a response."""
        error = ValidationError("Invalid version", {"version": "latest"})

        response = error.to_response()

        assert isinstance(response, ErrorResponse)
        assert response.code == "VALIDATION_ERROR"
        assert response.message == "Invalid version"
        assert response.details == {"version": "latest"}

    def test_configuration_error_defaults(self):
        """Test default configuration error values."""
        error = ConfigurationError()

        assert isinstance(error, SessionPropertiesException)
        assert error.code == "CONFIGURATION_ERROR"
        assert error.details == {}
        assert str(error) == "Invalid rule configuration"


class TestLogging:
    """Test cases for logging helpers."""

    @pytest.fixture
    def reset_structlog(self):
        root = logging.getLogger()
        level, handlers = root.level, root.handlers[:]
        yield
        structlog.reset_defaults()
        root.setLevel(level)
        root.handlers[:] = handlers

    def test_configure_logging(self, reset_structlog):
        """Test that structlog is configured for JSON output."""
        configure_logging("session_properties", "debug")

        config = structlog.get_config()
        assert structlog.is_configured()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert add_service_context in config["processors"]

    def test_add_service_context(self):
        """Test deriving the service from the logger name."""
        event = add_service_context(None, "info", {"logger": "session_properties.matcher"})

        assert event["service"] == "session_properties"

    def test_add_service_context_without_component(self):
        """Test that plain logger names add no service."""
        event = add_service_context(None, "info", {"logger": "root"})

        assert "service" not in event

    def test_get_logger(self):
        """Test that a structured logger is returned."""
        logger = get_logger("session_properties.test")

        assert hasattr(logger, "info")

    def test_get_logger_debug_filtered_by_default(self, capsys, monkeypatch):
        """Test that debug events are dropped while logging is unconfigured."""
        structlog.reset_defaults()
        root = logging.getLogger()
        monkeypatch.setattr(root, "level", root.level)
        root.setLevel(logging.WARNING)

        get_logger("session_properties.test").debug("Hidden event", user="bob")

        assert capsys.readouterr().out == ""


class TestMetrics:
    """Test cases for evaluation metrics."""

    def test_record_match_evaluation(self):
        """Test counting evaluations by result."""
        labels = {"result": "rejected"}
        before = REGISTRY.get_sample_value("session_match_evaluations_total", labels) or 0.0

        record_match_evaluation(False)
        record_match_evaluation(False)

        assert REGISTRY.get_sample_value("session_match_evaluations_total", labels) == before + 2
