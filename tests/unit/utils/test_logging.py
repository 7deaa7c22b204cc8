"""Tests for logging utility."""

import logging
from io import StringIO


class TestLoggerConfiguration:
    """Test that the job_match logger configures correctly."""

    def test_configure_logging_creates_logger(self):
        """configure_logging should return the namespace logger."""
        from src.utils.logging import configure_logging

        logger = configure_logging()

        assert isinstance(logger, logging.Logger)
        assert logger.name == "job_match"

    def test_configure_logging_respects_level(self):
        """Logger should respect the configured log level."""
        from src.utils.logging import configure_logging

        assert configure_logging(level="DEBUG").level == logging.DEBUG
        assert configure_logging(level="warning").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        """Unknown levels fall back to INFO."""
        from src.utils.logging import configure_logging

        assert configure_logging(level="CHATTY").level == logging.INFO

    def test_repeated_configuration_does_not_stack_handlers(self):
        """Only one handler is ever installed."""
        from src.utils.logging import configure_logging

        configure_logging()
        logger = configure_logging(level="DEBUG")

        assert len(logger.handlers) == 1

    def test_reset_logging_removes_handlers(self):
        """reset_logging restores a bare logger."""
        from src.utils.logging import configure_logging, reset_logging

        logger = configure_logging()
        reset_logging()

        assert logger.handlers == []
        assert logger.propagate is True


class TestLogOutput:
    """Test that log output format is correct."""

    def test_log_message_includes_level_name_and_timestamp(self):
        """Records carry level, logger name and a timestamp."""
        from src.utils.logging import configure_logging, get_logger

        buffer = StringIO()
        configure_logging(level="INFO", stream=buffer)

        get_logger("recommend.service").info("Test message")

        output = buffer.getvalue()
        assert "INFO" in output
        assert "job_match.recommend.service" in output
        assert "Test message" in output
        assert ":" in output

    def test_records_below_level_are_dropped(self):
        """DEBUG records are suppressed at INFO."""
        from src.utils.logging import configure_logging, get_logger

        buffer = StringIO()
        configure_logging(level="INFO", stream=buffer)

        get_logger("matching").debug("hidden")

        assert buffer.getvalue() == ""


class TestGetLogger:
    """Test the get_logger convenience function."""

    def test_get_logger_returns_child_logger(self):
        """get_logger should return a child of the main logger."""
        from src.utils.logging import get_logger

        assert get_logger("matching").name == "job_match.matching"

    def test_get_logger_strips_package_prefix(self):
        """Module paths under src map into the namespace."""
        from src.utils.logging import get_logger

        assert get_logger("src.matching.corpus").name == "job_match.matching.corpus"
