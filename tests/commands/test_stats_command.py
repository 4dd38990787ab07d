"""Tests for the stats commands."""

from __future__ import annotations

import json
from datetime import datetime
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from chillflow.commands.stats import app
from chillflow.models.focus.storage import MemoryStore
from chillflow.services.focus_service import FocusService
from chillflow.utils import exit_codes

runner = CliRunner()


@pytest.fixture()
def service():
    svc = FocusService(store=MemoryStore())
    with patch("chillflow.commands.stats.get_focus_service", return_value=svc):
        yield svc


class TestWeek:
    def test_week_json(self, service: FocusService) -> None:
        now = datetime.now()
        service.stats.record(1500, now)

        result = runner.invoke(app, ["week", "--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_duration"] == 1500
        assert data["heatmap"][now.weekday()][now.hour // 8] == 1500

    def test_week_pretty(self, service: FocusService) -> None:
        result = runner.invoke(app, ["week"])

        assert result.exit_code == 0
        assert "Total focus this week" in result.stdout
        assert "Mon" in result.stdout

    def test_previous_week_is_empty(self, service: FocusService) -> None:
        service.stats.record(1500, datetime.now())

        result = runner.invoke(app, ["week", "--offset", "-1", "-o", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["total_duration"] == 0


class TestSlot:
    def test_slot_total(self, service: FocusService) -> None:
        service.stats.record(1500, datetime(2024, 1, 2, 9, 0))
        service.stats.record(1500, datetime(2024, 1, 2, 10, 0))

        result = runner.invoke(app, ["slot", "--date", "2024-01-02", "--slot", "1"])

        assert result.exit_code == 0
        assert "08:00-16:00" in result.stdout
        assert "50m" in result.stdout

    def test_invalid_slot(self, service: FocusService) -> None:
        result = runner.invoke(app, ["slot", "--date", "2024-01-02", "--slot", "5"])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS

    def test_invalid_date(self, service: FocusService) -> None:
        result = runner.invoke(app, ["slot", "--date", "02/01/2024", "--slot", "0"])

        assert result.exit_code == exit_codes.ERROR_INVALID_ARGS


class TestClear:
    def test_clear_with_yes(self, service: FocusService) -> None:
        service.stats.record(1500, datetime.now())

        result = runner.invoke(app, ["clear", "--yes"])

        assert result.exit_code == 0
        assert "Focus history cleared" in result.stdout
        assert len(service.stats) == 0

    def test_clear_cancelled(self, service: FocusService) -> None:
        service.stats.record(1500, datetime.now())

        result = runner.invoke(app, ["clear"], input="n\n")

        assert result.exit_code == 0
        assert len(service.stats) == 1

    def test_clear_save_failure(self, failing_store) -> None:
        svc = FocusService(store=failing_store)
        with patch("chillflow.commands.stats.get_focus_service", return_value=svc):
            result = runner.invoke(app, ["clear", "--yes"])

        assert result.exit_code == exit_codes.ERROR_STORAGE
