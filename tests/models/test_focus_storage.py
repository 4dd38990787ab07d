"""Tests for the key-value stores."""

from __future__ import annotations

import shutil
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from chillflow.models.focus.storage import FileStore, MemoryStore


class TestMemoryStore:
    def test_load_missing_returns_none(self) -> None:
        assert MemoryStore().load("missing") is None

    def test_save_and_load(self) -> None:
        store = MemoryStore()

        assert store.save("key", b"value") is True
        assert store.load("key") == b"value"
        assert "key" in store


class TestFileStore:
    @pytest.fixture()
    def store(self, tmp_path: Path) -> FileStore:
        return FileStore(tmp_path / "store")

    def test_creates_directory(self, tmp_path: Path) -> None:
        FileStore(tmp_path / "a" / "b")

        assert (tmp_path / "a" / "b").is_dir()

    def test_default_directory_uses_platformdirs(self, tmp_path: Path) -> None:
        with patch("platformdirs.user_data_dir", return_value=str(tmp_path)):
            store = FileStore()

        assert store.store_dir == tmp_path / "store"

    def test_load_missing_returns_none(self, store: FileStore) -> None:
        assert store.load("missing") is None

    def test_save_and_load(self, store: FileStore) -> None:
        assert store.save("chillflow_focus_records", b"[]") is True
        assert store.load("chillflow_focus_records") == b"[]"

    def test_overwrite(self, store: FileStore) -> None:
        store.save("key", b"one")
        store.save("key", b"two")

        assert store.load("key") == b"two"

    def test_files_are_private(self, store: FileStore) -> None:
        store.save("key", b"secret")

        mode = stat.S_IMODE((store.store_dir / "key.bin").stat().st_mode)
        assert mode == 0o600

    @pytest.mark.parametrize("key", ["../escape", "a/b", ""])
    def test_rejects_unsafe_keys(self, store: FileStore, key: str) -> None:
        with pytest.raises(ValueError):
            store.save(key, b"x")

    def test_write_failure_returns_false(self, store: FileStore) -> None:
        shutil.rmtree(store.store_dir)

        assert store.save("key", b"x") is False
