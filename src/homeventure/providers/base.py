from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .nominatim import NominatimPlace
from .serper import SerperResponse


class Geocoder(Protocol):
    def search_florida(self, query: str, limit: int = 5) -> List[NominatimPlace]:
        ...

    def geocode(self, address: str) -> Optional[NominatimPlace]:
        ...


class WebSearch(Protocol):
    def search(self, query: str, *, num: int = 5, gl: Optional[str] = None) -> SerperResponse:
        ...


class LanguageModel(Protocol):
    def generate_json_object(self, prompt: str) -> Any:
        ...

    def generate_json_array(self, prompt: str) -> Any:
        ...
