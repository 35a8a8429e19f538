"""Key-value record persistence.

Two key families share one namespace: ``status:<id>`` and ``property:<id>``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from homeventure.errors import StorageUnavailableError
from homeventure.settings import Settings, get_settings

from .base import (
    PROPERTY_PREFIX,
    STATUS_PREFIX,
    RecordStore,
    get_json,
    property_key,
    put_json,
    status_key,
)
from .memory import MemoryRecordStore
from .sqlite import SQLiteRecordStore

logger = logging.getLogger("homeventure.store")

MEMORY_PATH = ":memory:"

_shared_memory_store = MemoryRecordStore()


def open_record_store(settings: Optional[Settings] = None) -> RecordStore:
    settings = settings or get_settings()
    path = settings.knock_data_path
    if not path:
        raise StorageUnavailableError("KNOCK_DATA_PATH is not configured")
    if path == MEMORY_PATH:
        return _shared_memory_store
    try:
        return SQLiteRecordStore(path)
    except (sqlite3.Error, OSError) as e:
        logger.warning("record store %s could not be opened: %s", path, e)
        raise StorageUnavailableError(f"record store could not be opened: {e}") from e


def shared_memory_store() -> MemoryRecordStore:
    return _shared_memory_store


__all__ = [
    "MEMORY_PATH",
    "PROPERTY_PREFIX",
    "STATUS_PREFIX",
    "MemoryRecordStore",
    "RecordStore",
    "SQLiteRecordStore",
    "get_json",
    "open_record_store",
    "property_key",
    "put_json",
    "shared_memory_store",
    "status_key",
]
