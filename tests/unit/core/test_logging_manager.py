"""
Tests for logging_manager module.

Tests PeopleLogger file output, the safe_logger function and NullLogger
class that provide null-safe logging throughout the codebase, and CLI
error handling.
"""
import pytest
import click
from unittest.mock import MagicMock

from people.core.exceptions import ConfigError
from people.core.logging_manager import (
    NullLogger,
    PeopleLogger,
    handle_cli_error,
    safe_logger,
)


class TestPeopleLogger:
    """Tests for PeopleLogger file handlers."""

    def test_creates_log_directory(self, tmp_path):
        log_dir = tmp_path / "logs" / "nested"
        PeopleLogger(log_dir, "test_component")
        assert log_dir.is_dir()

    def test_operation_written_to_component_log(self, tmp_path):
        logger = PeopleLogger(tmp_path, "test_ops")
        logger.log_operation("read_logs", {"files": 2})
        for handler in logger.main_logger.handlers:
            handler.flush()

        content = (tmp_path / "test_ops.log").read_text(encoding="utf-8")
        assert "OPERATION - read_logs" in content
        assert '"files": 2' in content

    def test_errors_written_to_error_log(self, tmp_path):
        logger = PeopleLogger(tmp_path, "test_errors")
        logger.log_error(ConfigError("people_dir missing"), {"path": "config.yaml"})
        for handler in logger.error_logger.handlers:
            handler.flush()

        content = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "ConfigError: people_dir missing" in content
        assert "path=config.yaml" in content

    def test_error_traceback_recorded(self, tmp_path):
        logger = PeopleLogger(tmp_path, "test_trace")
        try:
            raise ConfigError("unreadable")
        except ConfigError as e:
            logger.log_error(e, {"operation": "load_config"})
        for handler in logger.error_logger.handlers:
            handler.flush()

        content = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert "operation=load_config" in content
        assert "Traceback" in content
        assert "raise ConfigError" in content

    def test_log_cli_error_message(self, tmp_path):
        logger = PeopleLogger(tmp_path, "test_cli")
        message = logger.log_cli_error(ConfigError("bad config"))
        assert message == "ERROR ConfigError: bad config"

    def test_reinitializing_does_not_duplicate_handlers(self, tmp_path):
        PeopleLogger(tmp_path, "test_reinit")
        logger = PeopleLogger(tmp_path, "test_reinit")
        assert len(logger.main_logger.handlers) == 1
        assert len(logger.error_logger.handlers) == 1


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_no_op(self):
        """NullLogger methods should do nothing."""
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_info("info message")

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert "ValueError" in result
        assert "test error" in result


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=PeopleLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_safe_logger_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)

    def test_forwards_calls_to_real_logger(self):
        mock_logger = MagicMock(spec=PeopleLogger)
        details = {"file": "2024-people.md"}

        safe_logger(mock_logger).log_operation("parse", details)
        mock_logger.log_operation.assert_called_once_with("parse", details)


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_code(self):
        ctx = click.Context(click.Command("test"), obj={"logger": None, "verbose": False})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ConfigError("missing"), "test_op", exit_code=2)
        assert exc_info.value.code == 2

    def test_logs_with_operation_context(self):
        mock_logger = MagicMock(spec=PeopleLogger)
        mock_logger.log_cli_error.return_value = "ERROR ConfigError: missing"
        ctx = click.Context(click.Command("test"), obj={"logger": mock_logger})

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ConfigError("missing"), "summary", {"today": "2000-01-01"})

        _, context = mock_logger.log_cli_error.call_args[0][:2]
        assert context == {"operation": "summary", "today": "2000-01-01"}
