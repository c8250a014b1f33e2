from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Dict[str, str] | None = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileStore:
    """String key/value pairs kept in one JSON object on disk.

    Every ``set`` rewrites the file; there is a single writer.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logging.getLogger(__name__).warning(f"Ignoring unreadable state file {self.path}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)


def read_int(store: KeyValueStore, key: str) -> int:
    """Stored integer, or 0 when the key is missing or not a number."""
    raw = store.get(key)
    if raw is None:
        return 0
    try:
        return int(raw)
    except ValueError:
        return 0


def write_int(store: KeyValueStore, key: str, value: int) -> None:
    store.set(key, str(int(value)))
