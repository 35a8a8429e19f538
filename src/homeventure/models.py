from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""

    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire and in the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class KnockStatus(str, Enum):
    ACTIVE = "active"
    KNOCKED = "knocked"
    HIDDEN = "hidden"
    INTERESTED = "interested"
    NOT_INTERESTED = "not-interested"
    TOVIEW = "toview"


class Property(_CamelModel):
    """Pre-seeded catalog property. Never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int
    address: str
    notes: str = ""
    removed: str = ""
    beds: Number
    baths: Number
    sq_ft: int
    year_built: int
    construction: str = ""
    has_pool: bool = False
    pool_type: str = ""
    price: Optional[int] = None
    lat: float
    lon: float
    property_id: int


class UserPropertyInput(_CamelModel):
    """Payload for creating a user property."""

    address: str
    notes: str = ""
    beds: Optional[Number] = None
    baths: Optional[Number] = None
    sq_ft: Optional[int] = None
    year_built: Optional[int] = None
    construction: str = ""
    has_pool: bool = False
    pool_type: str = ""
    price: Optional[Number] = None
    lat: float
    lon: float
    source: Optional[str] = None
    initial_status: Optional[KnockStatus] = None

    @field_validator("address")
    @classmethod
    def _address_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("address is required")
        return v

    @field_validator("notes", "construction", "pool_type", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class UserProperty(_CamelModel):
    id: str
    address: str
    notes: str = ""
    beds: Optional[Number] = None
    baths: Optional[Number] = None
    sq_ft: Optional[int] = None
    year_built: Optional[int] = None
    construction: str = ""
    has_pool: bool = False
    pool_type: str = ""
    price: Optional[Number] = None
    lat: float
    lon: float
    created_at: str
    updated_at: str
    source: Optional[str] = None

    def to_json_dict(self) -> Dict[str, Any]:
        data = super().to_json_dict()
        if data.get("source") is None:
            data.pop("source", None)
        return data


class PropertyStatus(_CamelModel):
    status: KnockStatus = KnockStatus.ACTIVE
    notes: str = ""
    knocked_date: Optional[str] = None
    updated_at: str = Field(default_factory=now_iso)

    @field_validator("notes", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class DisplayProperty(_CamelModel):
    """Unified read-side view over catalog and user properties."""

    id: Union[int, str]
    address: str
    notes: str = ""
    beds: Optional[Number] = None
    baths: Optional[Number] = None
    sq_ft: Optional[int] = None
    year_built: Optional[int] = None
    construction: str = ""
    has_pool: bool = False
    pool_type: str = ""
    price: Optional[Number] = None
    lat: float
    lon: float
    is_user_added: bool = False


class SearchResult(BaseModel):
    title: str = ""
    link: str = ""
    snippet: str = ""


class EnrichedProperty(_CamelModel):
    beds: Optional[Number] = None
    baths: Optional[Number] = None
    sq_ft: Optional[int] = None
    year_built: Optional[int] = None
    price: Optional[Number] = None
    has_pool: Optional[bool] = None
    construction: Optional[str] = None
    source: Optional[str] = None
    source_url: Optional[str] = None

    def populated(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)

    def merged_over(self, fallback: "EnrichedProperty") -> "EnrichedProperty":
        """Fill this record's gaps from `fallback`; values set here win."""

        data = fallback.model_dump(exclude_none=True)
        data.update(self.model_dump(exclude_none=True))
        return EnrichedProperty(**data)


class AddressSuggestion(_CamelModel):
    address: str
    full_address: str
    lat: float
    lon: float
    source: Literal["nominatim", "serper"]
