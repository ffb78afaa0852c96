"""Small key-value stores for user preferences.

The aggregation pipeline never touches these; only the CLI persists the
saved watch filters through them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Protocol

from disaster_watch.models import CATEGORIES, SEVERITIES, WatchPreferences

logger = logging.getLogger(__name__)

_STORE_DIR = Path.home() / ".cache" / "disaster-watch"

PREFERENCES_KEY = "preferences"


class KeyValueStore(Protocol):
    """A namespace of JSON-serializable values."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def clear(self) -> None: ...


def get_store_dir(root: Path | None = None) -> Path:
    """Return the store directory, creating it if needed."""
    store_dir = root if root is not None else _STORE_DIR
    store_dir.mkdir(parents=True, exist_ok=True)
    return store_dir


class MemoryStore:
    """In-process store, for embedding and tests."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()


class FileStore:
    """Store backed by one JSON file per namespace."""

    def __init__(self, namespace: str, root: Path | None = None) -> None:
        self.namespace = namespace
        self.root = root

    @property
    def path(self) -> Path:
        return get_store_dir(self.root) / f"{self.namespace}.json"

    def _read(self) -> dict[str, Any]:
        path = self.path
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.debug("Ignoring corrupted store file %s", path)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Any | None:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug("Stored %s in %s", key, self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


def load_preferences(store: KeyValueStore) -> WatchPreferences:
    """Load saved preferences, dropping values that are no longer valid."""
    raw = store.get(PREFERENCES_KEY)
    if not isinstance(raw, dict):
        return WatchPreferences()

    categories = [c for c in raw.get("categories") or [] if c in CATEGORIES]
    min_severity = raw.get("min_severity")
    if min_severity not in SEVERITIES:
        min_severity = None
    locations = [str(loc) for loc in raw.get("locations") or []]
    return WatchPreferences(
        categories=categories, min_severity=min_severity, locations=locations
    )


def save_preferences(store: KeyValueStore, prefs: WatchPreferences) -> None:
    store.set(PREFERENCES_KEY, asdict(prefs))
