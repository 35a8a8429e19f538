"""Exception hierarchy shared by stores, services and providers."""

from __future__ import annotations

from enum import Enum


class HomeVentureError(Exception):
    """Base exception for all homeventure errors."""


class ConfigurationError(HomeVentureError):
    """Required configuration (store binding, provider key) is missing."""


class StorageUnavailableError(ConfigurationError):
    """The record store is not configured or cannot be opened."""


class ValidationError(HomeVentureError, ValueError):
    """Caller supplied input that cannot be acted on."""


class InvalidPropertyIdError(ValidationError):
    """Raised when a property id is neither a catalog id nor a user id."""


class CatalogPropertyError(ValidationError):
    """Raised when a mutation is attempted on an immutable catalog property."""


class ProviderErrorKind(str, Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    INVALID_JSON = "invalid_json"
    SCHEMA_MISMATCH = "schema_mismatch"
    NO_PAYLOAD = "no_payload"


class ProviderError(HomeVentureError):
    """An external provider call failed or returned an unusable payload."""

    def __init__(self, provider: str, kind: ProviderErrorKind, message: str = "") -> None:
        self.provider = provider
        self.kind = kind
        self.message = message
        super().__init__(f"{provider}: {kind.value}" + (f" ({message})" if message else ""))
