from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query

from homeventure.api.deps import record_store
from homeventure.api.schemas import SetStatusBody
from homeventure.services.status import get_all_statuses, get_status, set_status

router = APIRouter(tags=["status"])


@router.get("/status")
def read_status(property_id: Optional[str] = Query(default=None, alias="propertyId")) -> Any:
    with record_store() as store:
        if property_id:
            status = get_status(store, property_id)
            return status.to_json_dict() if status else None
        return {str(pid): s.to_json_dict() for pid, s in get_all_statuses(store).items()}


@router.post("/status")
def write_status(body: SetStatusBody) -> Dict[str, Any]:
    with record_store() as store:
        set_status(store, body.property_id, body.status)
    return {"success": True}
