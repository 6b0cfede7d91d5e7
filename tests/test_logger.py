"""Tests for logger module."""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

from modcase.util import logger as logger_module
from modcase.util.logger import (
    DATE_FORMAT,
    LOG_FORMAT,
    ColorFormatter,
    PromptToolkitHandler,
    get_log_filepath,
    get_logger,
    should_use_color,
)


class TestShouldUseColor:
    @patch("sys.stderr.isatty")
    def test_should_use_color_tty(self, mock_isatty):
        mock_isatty.return_value = True
        assert should_use_color() is True

    @patch("sys.stderr.isatty")
    def test_should_use_color_exception(self, mock_isatty):
        """Test color returns False on exception."""
        mock_isatty.side_effect = Exception("Error")
        assert should_use_color() is False


def make_record(level):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=10,
        msg="Some message",
        args=(),
        exc_info=None,
        func="test_func",
    )


def test_color_formatter_wraps_known_levels():
    formatter = ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    formatted = formatter.format(make_record(logging.ERROR))

    assert formatted.startswith("\033[31m")
    assert formatted.endswith("\033[0m")
    assert "Some message" in formatted


def test_get_logger_configures_handlers_once():
    first = get_logger("test_logger_handlers")
    second = get_logger("test_logger_handlers")

    assert first is second
    assert len(first.handlers) == 2
    assert any(isinstance(handler, PromptToolkitHandler) for handler in first.handlers)
    rotating = [handler for handler in first.handlers if isinstance(handler, RotatingFileHandler)]
    assert rotating and rotating[0].maxBytes == logger_module.MAX_LOG_BYTES
    assert first.propagate is False


def test_log_filepath_is_shared():
    assert get_log_filepath() == get_log_filepath()
    assert get_log_filepath().parent == logger_module.LOGS_DIR


def test_noisy_loggers_are_silenced():
    assert logging.getLogger("discord").level == logging.ERROR
    assert logging.getLogger("aiosqlite").propagate is False
