from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as SchemaError

from homeventure.errors import ConfigurationError, ProviderError, ProviderErrorKind
from homeventure.extract import extract_from_results
from homeventure.models import EnrichedProperty, SearchResult
from homeventure.providers import build_gemini, build_serper
from homeventure.providers.base import LanguageModel, WebSearch
from homeventure.settings import Settings

logger = logging.getLogger("homeventure.enrich")

SEARCH_HINTS = "zillow OR redfin beds baths sqft price"
SEARCH_RESULTS = 5
RETURNED_RESULTS = 3
MIN_MODEL_FIELDS = 2

ENRICH_PROMPT = """Extract property details from these real estate search results. Return ONLY valid JSON with these fields (use null for unknown values):
{{
  "beds": number or null,
  "baths": number or null,
  "sqFt": number or null,
  "yearBuilt": number or null,
  "price": number or null,
  "hasPool": boolean,
  "construction": string or null,
  "source": "zillow" or "redfin" or "realtor" or null
}}

Search results:
{results}

JSON response:"""


class ModelEnrichment(BaseModel):
    """Shape the model is instructed to return."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    beds: Optional[float] = None
    baths: Optional[float] = None
    sqFt: Optional[float] = None
    yearBuilt: Optional[int] = None
    price: Optional[float] = None
    hasPool: Optional[bool] = None
    construction: Optional[str] = None
    source: Optional[str] = None

    def to_enriched(self) -> EnrichedProperty:
        def num(v: Optional[float]) -> Any:
            if v is None:
                return None
            return int(v) if float(v).is_integer() else v

        return EnrichedProperty(
            beds=num(self.beds),
            baths=num(self.baths),
            sq_ft=int(self.sqFt) if self.sqFt is not None else None,
            year_built=self.yearBuilt,
            price=num(self.price),
            has_pool=True if self.hasPool else None,
            construction=(self.construction or "").strip() or None,
            source=(self.source or "").strip() or None,
        )


@dataclass
class EnrichmentResult:
    enriched: EnrichedProperty = field(default_factory=EnrichedProperty)
    results: List[SearchResult] = field(default_factory=list)
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "enriched": self.enriched.populated(),
            "results": [r.model_dump() for r in self.results],
        }
        if self.message:
            out["message"] = self.message
        return out


def build_search_query(address: str) -> str:
    return f"{address.strip()} {SEARCH_HINTS}"


def build_prompt(results: Sequence[SearchResult]) -> str:
    text = "\n\n".join(f"Title: {r.title}\nSnippet: {r.snippet}\nURL: {r.link}" for r in results)
    return ENRICH_PROMPT.format(results=text)


def parse_model_enrichment(payload: Any) -> EnrichedProperty:
    if not isinstance(payload, dict):
        raise ProviderError("gemini", ProviderErrorKind.SCHEMA_MISMATCH, "expected a JSON object")
    try:
        return ModelEnrichment.model_validate(payload).to_enriched()
    except SchemaError as e:
        raise ProviderError("gemini", ProviderErrorKind.SCHEMA_MISMATCH, str(e)) from e


class EnrichmentService:
    """Best-effort property details for a free-text address.

    Never raises for provider trouble: failures are logged and the result is
    empty or partial.
    """

    def __init__(self, search: WebSearch, model: Optional[LanguageModel] = None) -> None:
        self.search = search
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "EnrichmentService":
        search = build_serper(settings)
        if search is None:
            raise ConfigurationError("No Serper API key configured")
        return cls(search=search, model=build_gemini(settings, settings.enrich_model))

    def _ask_model(self, results: Sequence[SearchResult]) -> EnrichedProperty:
        if self.model is None or not results:
            return EnrichedProperty()
        try:
            return parse_model_enrichment(self.model.generate_json_object(build_prompt(results)))
        except ProviderError as e:
            logger.warning("model enrichment failed: %s", e)
            return EnrichedProperty()

    def enrich(self, address: str) -> EnrichmentResult:
        try:
            response = self.search.search(build_search_query(address), num=SEARCH_RESULTS)
        except ProviderError as e:
            logger.warning("search failed for enrichment: %s", e)
            return EnrichmentResult(message="Search provider error")

        results = list(response.organic)
        enriched = self._ask_model(results)
        if self.model is None or not results or len(enriched.populated()) < MIN_MODEL_FIELDS:
            enriched = enriched.merged_over(extract_from_results(results))

        logger.info("enriched %r with %d field(s)", address, len(enriched.populated()))
        return EnrichmentResult(enriched=enriched, results=results[:RETURNED_RESULTS])
