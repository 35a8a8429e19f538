from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Query

from homeventure.api.deps import record_store
from homeventure.catalog import load_catalog
from homeventure.services.display import display_payload, list_display

router = APIRouter(tags=["display"])


@router.get("/catalog")
def get_catalog() -> Dict[str, Any]:
    return {"properties": [p.to_json_dict() for p in load_catalog()]}


@router.get("/display")
def get_display(include_hidden: bool = Query(default=True, alias="includeHidden")) -> Dict[str, Any]:
    with record_store() as store:
        return display_payload(list_display(store, include_hidden=include_hidden))
