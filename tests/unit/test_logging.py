"""Unit tests for logging configuration."""

import json
import logging
import logging.handlers

from vibe_css.css_logging import (
    LOGGER_NAME,
    JSONFormatter,
    LogCategory,
    debug_context,
    get_category_logger,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level(self):
        """Test the console handler defaults to WARNING."""
        logger = setup_logging()

        assert logger.name == LOGGER_NAME
        assert logger.handlers[0].level == logging.WARNING

    def test_verbose(self):
        """Test verbose enables debug console output."""
        logger = setup_logging(verbose=True)
        assert logger.handlers[0].level == logging.DEBUG

    def test_quiet_overrides_verbose(self):
        """Test quiet wins over verbose."""
        logger = setup_logging(quiet=True, verbose=True)
        assert logger.handlers[0].level == logging.ERROR

    def test_file_handler(self, tmp_path):
        """Test a log file adds a rotating file handler."""
        log_file = tmp_path / "vibe.log"
        logger = setup_logging(log_file=log_file, log_format="json")

        file_handlers = [
            h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert isinstance(file_handlers[0].formatter, JSONFormatter)

        logger.info("written")
        file_handlers[0].flush()
        assert "written" in log_file.read_text()
        file_handlers[0].close()


class TestCategoryLoggers:
    """Tests for category loggers."""

    def test_category_logger_name(self):
        """Test category loggers are children of the package logger."""
        logger = get_category_logger(LogCategory.GENERATOR)
        assert logger.name == "vibe_css.generator"
        assert logger.parent is get_logger()

    def test_all_categories(self):
        """Test every category has a distinct logger."""
        names = {get_category_logger(category).name for category in LogCategory}
        assert len(names) == len(LogCategory)


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_with_extras(self):
        """Test extras are included in the JSON record."""
        record = logging.LogRecord(
            name="vibe_css.generator",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=10,
            msg="matched %s",
            args=("spacing",),
            exc_info=None,
        )
        record.class_name = "vibe-p-4"
        record.rule_count = 1

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "matched spacing"
        assert data["level"] == "DEBUG"
        assert data["class_name"] == "vibe-p-4"
        assert data["rule_count"] == 1
        assert "config_file" not in data


class TestDebugContext:
    """Tests for debug_context."""

    def test_restores_levels(self):
        """Test levels are restored after the context."""
        logger = setup_logging()
        handler = logger.handlers[0]

        with debug_context(logger) as target:
            assert target.level == logging.DEBUG
            assert handler.level == logging.DEBUG

        assert handler.level == logging.WARNING
