"""Completed focus session records and their serialized form."""

import json
import uuid
from dataclasses import dataclass
from datetime import datetime


def to_local(moment: datetime) -> datetime:
    """Express a timestamp in local time. Naive values are taken as local."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone()


@dataclass(frozen=True)
class FocusRecord:
    """One completed focus session.

    ``hour_of_day`` is captured from the local clock when the record is
    created and is never recomputed.
    """

    id: str
    completed_at: datetime
    duration_seconds: float
    hour_of_day: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour_of_day <= 23:
            raise ValueError(f"hour_of_day must be in 0..23, got {self.hour_of_day}")
        if self.duration_seconds < 0:
            raise ValueError("duration_seconds cannot be negative")

    @classmethod
    def create(cls, duration_seconds: float, now: datetime) -> "FocusRecord":
        """Create a record completed at ``now``."""
        return cls(
            id=str(uuid.uuid4()),
            completed_at=now,
            duration_seconds=duration_seconds,
            hour_of_day=to_local(now).hour,
        )

    @property
    def local_date(self):
        """Calendar day the session completed on, in local time."""
        return to_local(self.completed_at).date()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "completed_at": self.completed_at.isoformat(),
            "duration_seconds": self.duration_seconds,
            "hour_of_day": self.hour_of_day,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FocusRecord":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            completed_at=datetime.fromisoformat(data["completed_at"]),
            duration_seconds=data["duration_seconds"],
            hour_of_day=data["hour_of_day"],
        )


def encode_records(records: list[FocusRecord]) -> bytes:
    """Serialize records as a UTF-8 JSON array."""
    return json.dumps([r.to_dict() for r in records]).encode("utf-8")


def decode_records(data: bytes) -> list[FocusRecord]:
    """Parse records written by :func:`encode_records`.

    Raises:
        ValueError: If the payload is not a valid record list.
    """
    try:
        items = json.loads(data.decode("utf-8"))
        if not isinstance(items, list):
            raise ValueError("expected a JSON array of records")
        return [FocusRecord.from_dict(item) for item in items]
    except (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError) as e:
        raise ValueError(f"Invalid focus record data: {e}") from e
