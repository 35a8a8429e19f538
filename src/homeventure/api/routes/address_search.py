from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from homeventure.api.schemas import AddressSearchBody
from homeventure.services.address_search import AddressSearchService
from homeventure.settings import Settings, get_settings

router = APIRouter(tags=["address-search"])


def build_address_search_service(settings: Settings) -> AddressSearchService:
    return AddressSearchService.from_settings(settings)


@router.post("/address-search")
def address_search(body: AddressSearchBody) -> Dict[str, Any]:
    service = build_address_search_service(get_settings())
    suggestions = service.suggest(body.query or "")
    return {"suggestions": [s.to_json_dict() for s in suggestions]}
