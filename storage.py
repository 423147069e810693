# storage.py
from __future__ import annotations

import json
import logging
import os
from typing import Optional, Protocol

from models import Entry

logger = logging.getLogger(__name__)

# -------------------------------
# Public constants used by main.py
# -------------------------------

STORAGE_KEY = "gratitudes"
STORE_FILENAME = "Gratitude_Journal.json"
DATA_DIR_ENV = "GRATITUDE_DATA_DIR"
LOG_LEVEL_ENV = "GRATITUDE_LOG_LEVEL"


# -------------------------------
# Paths
# -------------------------------

def get_documents_path() -> str:
    home = os.environ.get("USERPROFILE") or os.path.expanduser("~")
    return os.path.join(home, "Documents")


def get_store_path() -> str:
    folder = os.environ.get(DATA_DIR_ENV) or get_documents_path()
    return os.path.join(folder, STORE_FILENAME)


def log_level_from_env() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


# -------------------------------
# Key-value stores
# -------------------------------

class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, text: str) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store. Counts writes so callers can check flush behaviour."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, text: str) -> None:
        self.data[key] = text
        self.writes += 1


class JsonFileKeyValueStore:
    """
    Local-storage shim: one JSON object on disk mapping keys to text values.
    A missing file reads as empty. A corrupted file raises on access.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> dict[str, str]:
        if not os.path.isfile(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"store file is not a JSON object: {self.path}")
        return data

    def get(self, key: str) -> Optional[str]:
        val = self._read_all().get(key)
        return None if val is None else str(val)

    def set(self, key: str, text: str) -> None:
        data = self._read_all()
        data[key] = text

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        payload = json.dumps(data, indent=2)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp, self.path)
        logger.debug("wrote key %r to %s", key, self.path)


# -------------------------------
# Entry collection
# -------------------------------

def serialize_entries(entries: list[Entry]) -> str:
    return json.dumps([e.to_dict() for e in entries])


def deserialize_entries(text: str) -> list[Entry]:
    raw = json.loads(text)
    return [Entry.from_dict(r) for r in raw]


class EntryStore:
    """Loads and saves the whole entry collection under one key."""

    def __init__(self, kv: KeyValueStore, key: str = STORAGE_KEY):
        self.kv = kv
        self.key = key

    def load(self) -> Optional[list[Entry]]:
        text = self.kv.get(self.key)
        if not text:
            logger.debug("no stored value under %r", self.key)
            return None
        entries = deserialize_entries(text)
        logger.debug("loaded %d entries from %r", len(entries), self.key)
        return entries

    def save(self, entries: list[Entry]) -> None:
        self.kv.set(self.key, serialize_entries(entries))
        logger.debug("saved %d entries under %r", len(entries), self.key)


def open_default_store() -> EntryStore:
    return EntryStore(JsonFileKeyValueStore(get_store_path()))
