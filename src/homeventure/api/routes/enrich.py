from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from homeventure.api.schemas import EnrichBody
from homeventure.errors import ValidationError
from homeventure.services.enrich import EnrichmentService
from homeventure.settings import Settings, get_settings

router = APIRouter(tags=["enrich"])


def build_enrichment_service(settings: Settings) -> EnrichmentService:
    return EnrichmentService.from_settings(settings)


@router.post("/enrich")
def enrich(body: EnrichBody) -> Dict[str, Any]:
    address = (body.address or "").strip()
    if not address:
        raise ValidationError("Address is required")
    service = build_enrichment_service(get_settings())
    return service.enrich(address).to_dict()
