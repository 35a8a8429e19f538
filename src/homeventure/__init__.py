"""HomeVenture: door-knocking lead tracker for a curated property list."""

from homeventure.ids import CatalogId, UserId, parse_property_id
from homeventure.models import KnockStatus, Property, PropertyStatus, UserProperty

__all__ = [
    "CatalogId",
    "KnockStatus",
    "Property",
    "PropertyStatus",
    "UserId",
    "UserProperty",
    "parse_property_id",
]
