"""Tests for KeyboardHandler outside a terminal."""

from __future__ import annotations

import io

from chillflow.utils.keyboard import KeyboardHandler


def test_non_terminal_stream_reports_no_keys() -> None:
    handler = KeyboardHandler(io.StringIO("p"))

    assert handler.interactive is False
    assert handler.get_key() is None


def test_context_manager_stops_cleanly() -> None:
    with KeyboardHandler(io.StringIO()) as handler:
        assert handler.get_key() is None

    assert handler.old_settings is None
