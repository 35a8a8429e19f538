from __future__ import annotations

from functools import lru_cache
from typing import Dict, Optional, Tuple

from homeventure.catalog_data import CATALOG_PROPERTIES
from homeventure.ids import CatalogId, PropertyId
from homeventure.models import Property


@lru_cache(maxsize=1)
def load_catalog() -> Tuple[Property, ...]:
    """Validate the embedded catalog once per process."""

    return tuple(Property.model_validate(entry) for entry in CATALOG_PROPERTIES)


@lru_cache(maxsize=1)
def _by_id() -> Dict[int, Property]:
    return {p.id: p for p in load_catalog()}


def get_catalog_property(pid: PropertyId) -> Optional[Property]:
    if not isinstance(pid, CatalogId):
        return None
    return _by_id().get(pid.value)


def catalog_ids() -> Tuple[CatalogId, ...]:
    return tuple(CatalogId(p.id) for p in load_catalog())
