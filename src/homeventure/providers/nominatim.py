from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests
from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as SchemaError

from homeventure.errors import ProviderError, ProviderErrorKind
from homeventure.providers.http import new_session, request_json

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"

# lon_min, lat_min, lon_max, lat_max
FLORIDA_VIEWBOX = "-87.6,24.5,-80.0,31.0"


class NominatimAddress(BaseModel):
    house_number: Optional[str] = None
    road: Optional[str] = None
    city: Optional[str] = None
    town: Optional[str] = None
    village: Optional[str] = None
    state: Optional[str] = None


class NominatimPlace(BaseModel):
    lat: float
    lon: float
    display_name: str = ""
    address: NominatimAddress = Field(default_factory=NominatimAddress)


_PLACES = TypeAdapter(List[NominatimPlace])


@dataclass
class NominatimClient:
    """OpenStreetMap geocoder. Keyless; one request per call."""

    user_agent: str = "HomeVenture/1.0"
    timeout_s: float = 15.0
    base_url: str = NOMINATIM_SEARCH_URL
    session: Optional[requests.Session] = field(default=None, repr=False)

    name = "nominatim"

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = new_session(self.user_agent)

    def _search(self, params: Dict[str, str]) -> List[NominatimPlace]:
        data = request_json(
            self.session,
            "GET",
            self.base_url,
            provider=self.name,
            timeout=self.timeout_s,
            params=params,
        )
        try:
            return _PLACES.validate_python(data)
        except SchemaError as e:
            raise ProviderError(self.name, ProviderErrorKind.SCHEMA_MISMATCH, str(e)) from e

    def search_florida(self, query: str, limit: int = 5) -> List[NominatimPlace]:
        return self._search(
            {
                "q": query,
                "format": "json",
                "addressdetails": "1",
                "limit": str(limit),
                "countrycodes": "us",
                "viewbox": FLORIDA_VIEWBOX,
                "bounded": "1",
            }
        )

    def geocode(self, address: str) -> Optional[NominatimPlace]:
        places = self._search(
            {
                "q": address,
                "format": "json",
                "limit": "1",
                "countrycodes": "us",
            }
        )
        return places[0] if places else None
