"""Key-value blob stores for persisted focus data."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    """Opaque get/set store keyed by string."""

    def load(self, key: str) -> bytes | None:
        """Return the stored bytes, or None when absent or unreadable."""
        ...

    def save(self, key: str, data: bytes) -> bool:
        """Store bytes under key. Returns False if the write failed."""
        ...


class MemoryStore:
    """In-process store used for ephemeral runs and tests."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> bytes | None:
        return self._data.get(key)

    def save(self, key: str, data: bytes) -> bool:
        self._data[key] = bytes(data)
        return True

    def __contains__(self, key: str) -> bool:
        return key in self._data


class FileStore:
    """Stores each key as a file inside a private directory."""

    def __init__(self, store_dir: Path | None = None):
        """Initialize the store, creating its directory if needed."""
        if store_dir is None:
            from platformdirs import user_data_dir

            store_dir = Path(user_data_dir("chillflow")) / "store"

        self.store_dir = store_dir
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.store_dir / f"{key}.bin"

    def load(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.warning("failed to read %s: %s", path, e)
            return None

    def save(self, key: str, data: bytes) -> bool:
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        try:
            tmp_path.write_bytes(data)
            tmp_path.chmod(0o600)
            tmp_path.replace(path)
        except OSError as e:
            logger.warning("failed to write %s: %s", path, e)
            return False
        return True
