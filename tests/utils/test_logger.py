"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

from chillflow.utils.logger import get_logger


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    with patch("chillflow.utils.logger.user_log_dir", return_value=str(tmp_path)):
        logger = get_logger()

    assert (tmp_path / "chillflow.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton(tmp_path):
    with patch("chillflow.utils.logger.user_log_dir", return_value=str(tmp_path)):
        assert get_logger() is get_logger()


def test_module_loggers_reach_the_log_file(tmp_path):
    """Records from package modules propagate to the application handler."""
    with patch("chillflow.utils.logger.user_log_dir", return_value=str(tmp_path)):
        logger = get_logger()
        logging.getLogger("chillflow.models.focus.cycling").debug("phase change")

    for handler in logger.handlers:
        handler.flush()

    assert "phase change" in (tmp_path / "chillflow.log").read_text()


def test_get_logger_creates_parent_dirs(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    with patch("chillflow.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()

    assert nested.is_dir()


def test_file_handler_added_alongside_foreign_handlers(tmp_path):
    """A handler attached by someone else does not suppress the log file."""
    foreign = logging.NullHandler()
    logging.getLogger("chillflow").addHandler(foreign)

    with patch("chillflow.utils.logger.user_log_dir", return_value=str(tmp_path)):
        logger = get_logger()
        logger.info("still written")

    file_handlers = [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
    assert foreign in logger.handlers
    file_handlers[0].flush()
    assert "still written" in (tmp_path / "chillflow.log").read_text()
