"""Deterministic property-detail extraction from search result text.

Used when no language model is configured, or when the model returns too
little. Each pattern takes the first match in the concatenated text.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional, Sequence, Tuple

from homeventure.models import EnrichedProperty, Number, SearchResult

_BEDS_RE = re.compile(r"(\d+)\s*(?:bedrooms?|beds?|bds?|br)\b")
_BATHS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:bathrooms?|baths?|ba)\b")
_SQFT_RE = re.compile(r"(\d{1,3}(?:,\d{3})+|\d+)\s*(?:sq\.?\s*ft|sqft|square\s*f(?:ee|oo)t)")
_YEAR_RE = re.compile(r"(?:year\s*built[:\s]*|built\s*(?:in\s*)?)((?:19|20)\d{2})\b")
_PRICE_RE = re.compile(r"\$\s*((?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?)\s*([kmb])?\b")

_PRICE_MULTIPLIERS = {"k": 1_000, "m": 1_000_000, "b": 1_000_000_000}

# First match wins.
SOURCE_PRIORITY: Tuple[Tuple[str, str], ...] = (
    ("zillow.com", "Zillow"),
    ("redfin.com", "Redfin"),
    ("realtor.com", "Realtor"),
)


def _whole(value: float) -> Optional[Number]:
    if not math.isfinite(value):
        return None
    return int(value) if float(value).is_integer() else value


def parse_price(amount: str, suffix: Optional[str]) -> Optional[Number]:
    value = float(amount.replace(",", ""))
    if suffix:
        value *= _PRICE_MULTIPLIERS[suffix.lower()]
    return _whole(value)


def result_text(results: Iterable[SearchResult]) -> str:
    return " ".join(f"{r.title} {r.snippet}" for r in results).lower()


def pick_source(results: Sequence[SearchResult]) -> Optional[Tuple[str, str]]:
    """(source name, url) for the highest-priority listing site present."""

    for domain, name in SOURCE_PRIORITY:
        for r in results:
            if domain in (r.link or "").lower():
                return name, r.link
    return None


def extract_details(text: str) -> EnrichedProperty:
    text = (text or "").lower()
    found = {}

    m = _BEDS_RE.search(text)
    if m:
        found["beds"] = int(m.group(1))

    m = _BATHS_RE.search(text)
    if m:
        found["baths"] = _whole(float(m.group(1)))

    m = _SQFT_RE.search(text)
    if m:
        found["sq_ft"] = int(m.group(1).replace(",", ""))

    m = _YEAR_RE.search(text)
    if m:
        found["year_built"] = int(m.group(1))

    m = _PRICE_RE.search(text)
    if m:
        found["price"] = parse_price(m.group(1), m.group(2))

    if "pool" in text:
        found["has_pool"] = True

    return EnrichedProperty(**found)


def extract_from_results(results: Sequence[SearchResult]) -> EnrichedProperty:
    enriched = extract_details(result_text(results))
    source = pick_source(results)
    if source:
        enriched = enriched.model_copy(update={"source": source[0], "source_url": source[1]})
    return enriched
