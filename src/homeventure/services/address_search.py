from __future__ import annotations

import logging
import re
from typing import Any, List, Optional

from homeventure.errors import ProviderError
from homeventure.models import AddressSuggestion
from homeventure.providers import build_gemini, build_nominatim, build_serper
from homeventure.providers.base import Geocoder, LanguageModel, WebSearch
from homeventure.providers.nominatim import NominatimPlace
from homeventure.providers.serper import SerperResponse
from homeventure.settings import Settings

logger = logging.getLogger("homeventure.address_search")

MIN_QUERY_LENGTH = 3
MAX_SUGGESTIONS = 6
MAX_EXTRACTED = 3
FALLBACK_THRESHOLD = 2

_FLORIDA_WORD_RE = re.compile(r"\b(?:fl|florida)\b", re.IGNORECASE)

EXTRACT_PROMPT = """The user searched for: "{query}"

Here are Google search results:
{knowledge_graph}

{results}

Extract up to 3 Florida property addresses that match the user's search.
Return ONLY a JSON array of full street addresses in Florida, like:
["123 Main St, Jupiter, FL 33458", "456 Oak Ave, Palm Beach Gardens, FL 33410"]

If no valid Florida addresses found, return an empty array: []

Focus on addresses in Jupiter, Palm Beach Gardens, or nearby Palm Beach County areas.
Only include real street addresses, not business names or URLs.

JSON array:"""


def florida_query(query: str) -> str:
    q = query.strip()
    if _FLORIDA_WORD_RE.search(q):
        return q
    return f"{q}, Florida"


def is_florida(place: NominatimPlace) -> bool:
    return place.address.state == "Florida" or "Florida" in place.display_name


def short_address(place: NominatimPlace) -> str:
    addr = place.address
    if addr.house_number and addr.road:
        street = f"{addr.house_number} {addr.road}"
    else:
        street = addr.road or ""
    if not street:
        return place.display_name.split(",")[0].strip()
    city = addr.city or addr.town or addr.village or ""
    return f"{street}, {city}" if city else street


def build_extract_prompt(query: str, response: SerperResponse) -> str:
    results = "\n\n".join(f"Title: {r.title}\nSnippet: {r.snippet}" for r in response.organic[:5])
    kg = response.knowledge_graph
    kg_text = f"Knowledge Graph: {kg.title or ''} - {kg.address or ''}" if kg else ""
    return EXTRACT_PROMPT.format(query=query, knowledge_graph=kg_text, results=results)


def parse_extracted_addresses(payload: Any) -> List[str]:
    if not isinstance(payload, list):
        return []
    out = [a.strip() for a in payload if isinstance(a, str) and len(a.strip()) > 5]
    return out[:MAX_EXTRACTED]


def already_suggested(candidate: str, suggestions: List[AddressSuggestion]) -> bool:
    lead = candidate.split(",")[0].strip().lower()
    if not lead:
        return False
    return any(lead in s.address.lower() for s in suggestions)


class AddressSearchService:
    """Florida-biased address autocomplete.

    Geocoder results come first; web search plus a language model fill in when
    the geocoder finds fewer than two matches. Provider failures only shrink
    the result list.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        search: Optional[WebSearch] = None,
        model: Optional[LanguageModel] = None,
    ) -> None:
        self.geocoder = geocoder
        self.search = search
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "AddressSearchService":
        return cls(
            geocoder=build_nominatim(settings),
            search=build_serper(settings),
            model=build_gemini(settings, settings.address_model),
        )

    def _from_geocoder(self, query: str) -> List[AddressSuggestion]:
        try:
            places = self.geocoder.search_florida(florida_query(query))
        except ProviderError as e:
            logger.warning("geocoder search failed: %s", e)
            return []
        return [
            AddressSuggestion(
                address=short_address(p),
                full_address=p.display_name,
                lat=p.lat,
                lon=p.lon,
                source="nominatim",
            )
            for p in places
            if is_florida(p)
        ]

    def _extract_candidates(self, query: str) -> List[str]:
        try:
            response = self.search.search(f"{query} Florida address property", num=10, gl="us")
        except ProviderError as e:
            logger.warning("web search failed for address lookup: %s", e)
            return []
        try:
            payload = self.model.generate_json_array(build_extract_prompt(query, response))
        except ProviderError as e:
            logger.warning("address extraction failed: %s", e)
            return []
        return parse_extracted_addresses(payload)

    def _geocode(self, address: str) -> Optional[NominatimPlace]:
        try:
            return self.geocoder.geocode(address)
        except ProviderError as e:
            logger.warning("geocode failed for %r: %s", address, e)
            return None

    def suggest(self, query: str) -> List[AddressSuggestion]:
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        suggestions = self._from_geocoder(query)

        if len(suggestions) < FALLBACK_THRESHOLD and self.search is not None and self.model is not None:
            for candidate in self._extract_candidates(query):
                if already_suggested(candidate, suggestions):
                    continue
                place = self._geocode(candidate)
                if place is None:
                    continue
                suggestions.append(
                    AddressSuggestion(
                        address=",".join(candidate.split(",")[:2]),
                        full_address=candidate,
                        lat=place.lat,
                        lon=place.lon,
                        source="serper",
                    )
                )

        return suggestions[:MAX_SUGGESTIONS]
