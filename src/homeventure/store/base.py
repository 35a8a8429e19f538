from __future__ import annotations

import json
from typing import Any, List, Optional, Protocol

from homeventure.ids import PropertyId

STATUS_PREFIX = "status:"
PROPERTY_PREFIX = "property:"


def status_key(pid: PropertyId) -> str:
    return f"{STATUS_PREFIX}{pid}"


def property_key(pid: PropertyId) -> str:
    return f"{PROPERTY_PREFIX}{pid}"


class RecordStore(Protocol):
    """Namespaced string-to-JSON mapping.

    No transactions and no schema checks: callers own the JSON shape. Writes
    to the same key are last-writer-wins.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def put(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...

    def list(self, prefix: str) -> List[str]:
        ...

    def close(self) -> None:
        ...


def get_json(store: RecordStore, key: str) -> Any:
    """Return the decoded value at `key`, or None when absent.

    Raises `ValueError` (json.JSONDecodeError) for undecodable values.
    """

    raw = store.get(key)
    if raw is None:
        return None
    return json.loads(raw)


def put_json(store: RecordStore, key: str, value: Any) -> None:
    store.put(key, json.dumps(value, separators=(",", ":")))
