from __future__ import annotations

from typing import Dict, List, Optional


class MemoryRecordStore:
    """Process-local record store. Listing follows insertion order."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def list(self, prefix: str) -> List[str]:
        return [k for k in self._data if k.startswith(prefix)]

    def close(self) -> None:
        # Shared across requests; nothing to release.
        return None

    def clear(self) -> None:
        self._data.clear()
