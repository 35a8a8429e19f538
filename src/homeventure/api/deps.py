from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from homeventure.settings import get_settings
from homeventure.store import RecordStore, open_record_store


@contextmanager
def record_store() -> Iterator[RecordStore]:
    """Open the configured store for one request and close it afterwards."""

    store = open_record_store(get_settings())
    try:
        yield store
    finally:
        store.close()
