"""Durable key/value storage backed by a single JSON file."""

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path

from station_finder.domain.ports.recents_storage import RecentsStorage, StorageListener

logger = logging.getLogger(__name__)


class _ListenerMixin:
    """Listener bookkeeping shared by the storage adapters."""

    def __init__(self) -> None:
        self._listeners: list[StorageListener] = []

    def subscribe(self, listener: StorageListener) -> Callable[[], None]:
        """Register a listener called with (key, value) after each write."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, key: str, value: str | None) -> None:
        for listener in list(self._listeners):
            listener(key, value)


class JsonFileStorage(_ListenerMixin, RecentsStorage):
    """Stores named string slots in one JSON object on disk.

    An unreadable or corrupt file reads as empty; the next write replaces it.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable storage file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self._path}: not a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        """Read the raw value stored under key."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a raw value under key, replacing the file atomically.

        Raises:
            OSError: If the file cannot be written.
        """
        data = self._read_all()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self._path)
        logger.debug(f"Wrote storage slot '{key}' to {self._path}")
        self._notify(key, value)


class InMemoryStorage(_ListenerMixin, RecentsStorage):
    """Non-durable storage, used when no storage file is configured and in tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__()
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._notify(key, value)
