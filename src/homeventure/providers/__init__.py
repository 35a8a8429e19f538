"""External HTTP providers: geocoding, web search and language model.

Every provider call raises `homeventure.errors.ProviderError` on failure;
callers decide how to degrade.
"""

from __future__ import annotations

from typing import Optional

from homeventure.settings import Settings

from .gemini import GeminiClient
from .nominatim import NominatimClient
from .serper import SerperClient


def build_nominatim(settings: Settings) -> NominatimClient:
    return NominatimClient(user_agent=settings.user_agent, timeout_s=settings.http_timeout_s)


def build_serper(settings: Settings) -> Optional[SerperClient]:
    if not settings.serper_api_key:
        return None
    return SerperClient(
        api_key=settings.serper_api_key,
        user_agent=settings.user_agent,
        timeout_s=settings.http_timeout_s,
    )


def build_gemini(settings: Settings, model: str) -> Optional[GeminiClient]:
    if not settings.gemini_api_key:
        return None
    return GeminiClient(
        api_key=settings.gemini_api_key,
        model=model,
        user_agent=settings.user_agent,
        timeout_s=settings.http_timeout_s,
    )


__all__ = [
    "GeminiClient",
    "NominatimClient",
    "SerperClient",
    "build_gemini",
    "build_nominatim",
    "build_serper",
]
