"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real user directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from chillflow.models.focus.storage import MemoryStore


class FailingStore(MemoryStore):
    """Store whose writes always fail; reads work normally."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        super().__init__(initial)
        self.save_attempts = 0

    def save(self, key: str, data: bytes) -> bool:
        self.save_attempts += 1
        return False


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log file to tmp_path and reset it afterwards."""
    import chillflow.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("chillflow").handlers.clear()
    with patch("chillflow.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    for handler in logging.getLogger("chillflow").handlers:
        handler.close()
    logging.getLogger("chillflow").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory."""
    from chillflow.services.config_service import get_config_service

    tmpdir = str(tmp_path / "config")
    get_config_service.cache_clear()
    with patch("chillflow.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("chillflow.services.config_service.user_data_dir", return_value=tmpdir):
            from chillflow.services.config_service import ConfigService

            svc = ConfigService()
            yield svc
    get_config_service.cache_clear()


@pytest.fixture()
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def failing_store() -> FailingStore:
    return FailingStore()
