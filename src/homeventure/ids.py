"""Property identifiers.

Catalog properties carry small integer ids; properties added at runtime carry
string ids with a ``u`` prefix. Both render to the suffix of the store keys
(``status:52``, ``property:u1718000000000-3f9c...``).
"""

from __future__ import annotations

import re
import time
import uuid
from dataclasses import dataclass
from typing import Union

from homeventure.errors import InvalidPropertyIdError

USER_ID_PREFIX = "u"

_CATALOG_RE = re.compile(r"^\d+$")


@dataclass(frozen=True)
class CatalogId:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId:
    value: str

    def __str__(self) -> str:
        return self.value


PropertyId = Union[CatalogId, UserId]


def parse_property_id(raw: object) -> PropertyId:
    if isinstance(raw, (CatalogId, UserId)):
        return raw
    if isinstance(raw, bool):
        raise InvalidPropertyIdError(f"invalid property id: {raw!r}")
    if isinstance(raw, int):
        if raw < 0:
            raise InvalidPropertyIdError(f"invalid property id: {raw!r}")
        return CatalogId(raw)
    if isinstance(raw, str):
        s = raw.strip()
        if _CATALOG_RE.match(s):
            return CatalogId(int(s))
        if s.startswith(USER_ID_PREFIX):
            return UserId(s)
    raise InvalidPropertyIdError(f"invalid property id: {raw!r}")


def new_user_id() -> UserId:
    # 64 random bits per id; the timestamp only keeps ids roughly sortable.
    millis = int(time.time() * 1000)
    return UserId(f"{USER_ID_PREFIX}{millis}-{uuid.uuid4().hex[:16]}")
