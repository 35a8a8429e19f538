from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from homeventure.api.deps import record_store
from homeventure.api.schemas import DeletePropertyBody
from homeventure.models import UserPropertyInput
from homeventure.services.properties import create_property, delete_property, list_properties

router = APIRouter(tags=["properties"])


@router.get("/properties")
def get_properties() -> Dict[str, Any]:
    with record_store() as store:
        return {"properties": [p.to_json_dict() for p in list_properties(store)]}


@router.post("/properties")
def post_property(body: UserPropertyInput) -> Dict[str, Any]:
    with record_store() as store:
        prop = create_property(store, body)
    return {"success": True, "property": prop.to_json_dict()}


@router.delete("/properties")
def remove_property(body: DeletePropertyBody) -> Dict[str, Any]:
    with record_store() as store:
        delete_property(store, body.id)
    return {"success": True}
