"""Tests for FocusRecord and its serialization."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from chillflow.models.focus.history import (
    FocusRecord,
    decode_records,
    encode_records,
    to_local,
)


def test_create_captures_local_hour() -> None:
    record = FocusRecord.create(1500, datetime(2024, 3, 5, 18, 45))

    assert record.hour_of_day == 18
    assert record.duration_seconds == 1500
    assert len(record.id) == 36


def test_create_converts_aware_time_to_local() -> None:
    moment = datetime(2024, 3, 5, 12, 0, tzinfo=timezone(timedelta(hours=5)))

    record = FocusRecord.create(1500, moment)

    assert record.hour_of_day == moment.astimezone().hour


def test_naive_time_is_treated_as_local() -> None:
    moment = datetime(2024, 3, 5, 12, 0)

    assert to_local(moment) is moment


@pytest.mark.parametrize("hour", [-1, 24])
def test_hour_out_of_range_rejected(hour: int) -> None:
    with pytest.raises(ValueError):
        FocusRecord(id="x", completed_at=datetime(2024, 1, 1), duration_seconds=1, hour_of_day=hour)


def test_negative_duration_rejected() -> None:
    with pytest.raises(ValueError):
        FocusRecord(id="x", completed_at=datetime(2024, 1, 1), duration_seconds=-1, hour_of_day=0)


def test_encoded_records_are_a_json_array() -> None:
    record = FocusRecord(
        id="abc", completed_at=datetime(2024, 1, 1, 6, 0), duration_seconds=1500, hour_of_day=6
    )

    payload = json.loads(encode_records([record]))

    assert payload == [
        {
            "id": "abc",
            "completed_at": "2024-01-01T06:00:00",
            "duration_seconds": 1500,
            "hour_of_day": 6,
        }
    ]
    assert decode_records(encode_records([record])) == [record]


@pytest.mark.parametrize(
    "data",
    [b"not json", b'{"id": "x"}', b'[{"id": "x"}]', b"\xff\xfe", b'[{"id": "x", "completed_at": "2024-01-01T00:00:00", "duration_seconds": 1, "hour_of_day": 99}]'],
)
def test_decode_rejects_bad_payloads(data: bytes) -> None:
    with pytest.raises(ValueError):
        decode_records(data)
