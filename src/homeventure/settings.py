from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v or default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = float(raw)
    except ValueError:
        return default
    return v if v > 0 else default


@dataclass(frozen=True)
class Settings:
    """Process configuration read from the environment.

    Provider keys are optional; a missing key disables that provider rather
    than failing the process. A missing store path makes every store-backed
    operation fail with `StorageUnavailableError`.
    """

    knock_data_path: Optional[str]
    serper_api_key: Optional[str]
    gemini_api_key: Optional[str]
    user_agent: str
    http_timeout_s: float
    enrich_model: str
    address_model: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            knock_data_path=_env_str("KNOCK_DATA_PATH"),
            serper_api_key=_env_str("SERPER_API_KEY"),
            gemini_api_key=_env_str("GEMINI_API_KEY"),
            user_agent=_env_str("HOMEVENTURE_HTTP_USER_AGENT", "HomeVenture/1.0") or "HomeVenture/1.0",
            http_timeout_s=_env_float("HOMEVENTURE_HTTP_TIMEOUT", 15.0),
            enrich_model=_env_str("HOMEVENTURE_ENRICH_MODEL", "gemini-2.0-flash") or "gemini-2.0-flash",
            address_model=_env_str("HOMEVENTURE_ADDRESS_MODEL", "gemini-2.0-flash-lite")
            or "gemini-2.0-flash-lite",
            log_level=(_env_str("HOMEVENTURE_LOG_LEVEL", "INFO") or "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings_cache() -> None:
    """Test helper to force env re-read."""

    get_settings.cache_clear()
