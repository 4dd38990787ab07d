"""Wiring of the cycle engine to session statistics and persistence."""

from __future__ import annotations

import logging
from datetime import datetime

from chillflow.models.config_models import AppConfig
from chillflow.models.focus.analytics import RecordResult, StatsAggregator
from chillflow.models.focus.cycling import CycleEngine
from chillflow.models.focus.exceptions import StorageError
from chillflow.models.focus.storage import FileStore, KeyValueStore

logger = logging.getLogger(__name__)


class FocusService:
    """Owns one engine and the aggregator it reports completed sessions to.

    The aggregator is handed to the engine as an explicit sink; nothing reaches
    it through globals.
    """

    def __init__(self, config: AppConfig | None = None, store: KeyValueStore | None = None):
        self.config = config or AppConfig()
        self.stats = StatsAggregator(store if store is not None else FileStore())
        self.first_launch = self.stats.prepare_first_launch()
        self.engine = CycleEngine(
            self.config.cycle, on_focus_completed=self._on_focus_completed
        )
        self.last_record: RecordResult | None = None

    def _on_focus_completed(self, duration_seconds: int, completed_at: datetime) -> None:
        self.last_record = self.stats.record(duration_seconds, completed_at)
        if not self.last_record.persisted:
            logger.warning(
                "focus session %s kept in memory only", self.last_record.record.id
            )

    def clear_history(self) -> None:
        """Delete all recorded sessions.

        Raises:
            StorageError: If the emptied log could not be saved.
        """
        if not self.stats.clear():
            raise StorageError("Focus history was cleared in memory but not saved")


def get_focus_service() -> FocusService:
    """Create a FocusService from the user's configuration."""
    from chillflow.services.config_service import get_config_service

    return FocusService(get_config_service().config)
