"""Aggregation of completed focus sessions into weekly and per-slot totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from .history import FocusRecord, decode_records, encode_records, to_local
from .storage import KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)

RECORDS_KEY = "chillflow_focus_records"
LAUNCH_FLAG_KEY = "chillflow_has_launched"

DAYS_PER_WEEK = 7
SLOTS_PER_DAY = 3
HOURS_PER_SLOT = 8
DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def empty_heatmap() -> list[list[float]]:
    return [[0.0] * SLOTS_PER_DAY for _ in range(DAYS_PER_WEEK)]


def slot_for_hour(hour: int) -> int:
    """Map an hour of day to its 8-hour slot: 0-7, 8-15, 16-23."""
    return hour // HOURS_PER_SLOT


def slot_hours(slot: int) -> tuple[int, int]:
    """Inclusive first and last hour of a slot."""
    if not 0 <= slot < SLOTS_PER_DAY:
        raise ValueError(f"slot must be in 0..{SLOTS_PER_DAY - 1}, got {slot}")
    start = slot * HOURS_PER_SLOT
    return start, start + HOURS_PER_SLOT - 1


def week_start_for(day: date) -> date:
    """Monday of the week containing ``day``.

    Uses weekday arithmetic (Monday == 0) so the result does not depend on
    which weekday the locale treats as the first.
    """
    return day - timedelta(days=day.weekday())


def format_date_range(start: date, end: date) -> str:
    """Label such as ``"Oct 13 - Oct 19"``."""
    return f"{start:%b} {start.day} - {end:%b} {end.day}"


@dataclass
class WeeklyStats:
    """Focus totals for one Monday-aligned week."""

    date_range: str
    total_duration: float
    week_start: date
    week_end: date
    heatmap: list[list[float]] = field(default_factory=empty_heatmap)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date_range": self.date_range,
            "total_duration": self.total_duration,
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
            "heatmap": self.heatmap,
        }


@dataclass
class RecordResult:
    """Outcome of recording a session. ``persisted`` is False if saving failed."""

    record: FocusRecord
    persisted: bool


class StatsAggregator:
    """Append-only log of completed focus sessions.

    The in-memory log is authoritative; the store only mirrors it. Failing to
    save never drops a record from memory.
    """

    def __init__(self, store: KeyValueStore | None = None):
        """Initialize the aggregator and load any persisted records."""
        self.store: KeyValueStore = store if store is not None else MemoryStore()
        self._records: list[FocusRecord] = self._load()

    @property
    def records(self) -> list[FocusRecord]:
        """A copy of the log, oldest first."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _load(self) -> list[FocusRecord]:
        data = self.store.load(RECORDS_KEY)
        if data is None:
            return []
        try:
            return decode_records(data)
        except ValueError as e:
            logger.warning("discarding unreadable focus records: %s", e)
            return []

    def save(self) -> bool:
        """Write the log to the store. Returns False if the write failed."""
        ok = self.store.save(RECORDS_KEY, encode_records(self._records))
        if not ok:
            logger.warning("failed to persist %d focus records", len(self._records))
        return ok

    def prepare_first_launch(self) -> bool:
        """Wipe the log once, on the very first launch.

        Returns:
            True if this was the first launch and the log was cleared.
        """
        if self.store.load(LAUNCH_FLAG_KEY) is not None:
            return False
        logger.info("first launch: clearing focus history")
        self.clear()
        if not self.store.save(LAUNCH_FLAG_KEY, b"1"):
            logger.warning(
                "failed to persist first-launch flag; history will be cleared again"
            )
        return True

    def clear(self) -> bool:
        """Remove every record. Returns whether the empty log was persisted."""
        self._records = []
        return self.save()

    def record(self, duration_seconds: float, now: datetime | None = None) -> RecordResult:
        """Append a completed focus session."""
        record = FocusRecord.create(duration_seconds, now or datetime.now())
        self._records.append(record)
        logger.info(
            "recorded focus session %s (%ss at hour %d)",
            record.id,
            duration_seconds,
            record.hour_of_day,
        )
        return RecordResult(record=record, persisted=self.save())

    def weekly_stats(self, week_offset: int = 0, now: datetime | None = None) -> WeeklyStats:
        """
        Get totals for the week containing ``now`` shifted by ``week_offset`` weeks.

        Args:
            week_offset: 0 for the current week, -1 for last week, etc.
            now: Reference time (defaults to the current time)

        Returns:
            WeeklyStats with a 7x3 heatmap indexed ``[day][slot]``
        """
        reference = to_local(now or datetime.now()).date()
        week_start = week_start_for(reference) + timedelta(weeks=week_offset)
        week_end = week_start + timedelta(days=DAYS_PER_WEEK - 1)

        heatmap = empty_heatmap()
        total = 0.0
        for record in self._records:
            day = record.local_date
            if not week_start <= day <= week_end:
                continue
            total += record.duration_seconds
            heatmap[day.weekday()][slot_for_hour(record.hour_of_day)] += (
                record.duration_seconds
            )

        return WeeklyStats(
            date_range=format_date_range(week_start, week_end),
            total_duration=total,
            week_start=week_start,
            week_end=week_end,
            heatmap=heatmap,
        )

    def hourly_stats(self, day: date | datetime, slot: int) -> float:
        """
        Total focus seconds on a calendar day within one 8-hour slot.

        Args:
            day: The day to inspect (a datetime is reduced to its local date)
            slot: 0 for 00-07h, 1 for 08-15h, 2 for 16-23h

        Raises:
            ValueError: If slot is outside 0..2
        """
        first_hour, last_hour = slot_hours(slot)
        if isinstance(day, datetime):
            day = to_local(day).date()
        return sum(
            (
                r.duration_seconds
                for r in self._records
                if r.local_date == day and first_hour <= r.hour_of_day <= last_hour
            ),
            0.0,
        )
