"""Read-side merge of catalog properties, user properties and statuses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from homeventure.catalog import load_catalog
from homeventure.ids import CatalogId, UserId
from homeventure.models import DisplayProperty, KnockStatus, Property, PropertyStatus, UserProperty
from homeventure.services.properties import list_properties
from homeventure.services.status import get_all_statuses
from homeventure.store import RecordStore


def to_display(prop: Union[Property, UserProperty]) -> DisplayProperty:
    if isinstance(prop, Property):
        return DisplayProperty(
            id=prop.id,
            address=prop.address,
            notes=prop.notes,
            beds=prop.beds,
            baths=prop.baths,
            sq_ft=prop.sq_ft,
            year_built=prop.year_built,
            construction=prop.construction,
            has_pool=prop.has_pool,
            pool_type=prop.pool_type,
            price=prop.price,
            lat=prop.lat,
            lon=prop.lon,
            is_user_added=False,
        )
    if isinstance(prop, UserProperty):
        return DisplayProperty(
            id=prop.id,
            address=prop.address,
            notes=prop.notes,
            beds=prop.beds,
            baths=prop.baths,
            sq_ft=prop.sq_ft,
            year_built=prop.year_built,
            construction=prop.construction,
            has_pool=prop.has_pool,
            pool_type=prop.pool_type,
            price=prop.price,
            lat=prop.lat,
            lon=prop.lon,
            is_user_added=True,
        )
    raise TypeError(f"not a property: {type(prop).__name__}")


@dataclass(frozen=True)
class DisplayEntry:
    prop: DisplayProperty
    status: Optional[PropertyStatus]

    @property
    def is_hidden(self) -> bool:
        return self.status is not None and self.status.status == KnockStatus.HIDDEN


def list_display(store: RecordStore, *, include_hidden: bool = True) -> List[DisplayEntry]:
    """Catalog entries in catalog order, then user properties in store order.

    Statuses whose id matches no property are ignored.
    """

    statuses = get_all_statuses(store)
    entries: List[DisplayEntry] = []
    for prop in load_catalog():
        entries.append(DisplayEntry(to_display(prop), statuses.get(CatalogId(prop.id))))
    for uprop in list_properties(store):
        entries.append(DisplayEntry(to_display(uprop), statuses.get(UserId(uprop.id))))
    if not include_hidden:
        entries = [e for e in entries if not e.is_hidden]
    return entries


def display_payload(entries: List[DisplayEntry]) -> Dict[str, Any]:
    return {
        "properties": [e.prop.to_json_dict() for e in entries],
        "statuses": {
            str(e.prop.id): e.status.to_json_dict() for e in entries if e.status is not None
        },
    }
