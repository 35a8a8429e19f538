from __future__ import annotations

import logging
from typing import Dict, Optional

from pydantic import ValidationError as SchemaError

from homeventure.errors import InvalidPropertyIdError
from homeventure.ids import PropertyId, parse_property_id
from homeventure.models import PropertyStatus
from homeventure.store import STATUS_PREFIX, RecordStore, get_json, put_json, status_key

logger = logging.getLogger("homeventure.status")


def get_status(store: RecordStore, pid: object) -> Optional[PropertyStatus]:
    """Stored status for `pid`, or None when nothing has been recorded."""

    key = status_key(parse_property_id(pid))
    try:
        raw = get_json(store, key)
        if raw is None:
            return None
        return PropertyStatus.model_validate(raw)
    except (SchemaError, ValueError) as e:
        logger.debug("ignoring malformed status record %s: %s", key, e)
        return None


def get_all_statuses(store: RecordStore) -> Dict[PropertyId, PropertyStatus]:
    out: Dict[PropertyId, PropertyStatus] = {}
    for key in store.list(STATUS_PREFIX):
        try:
            pid = parse_property_id(key[len(STATUS_PREFIX):])
            raw = get_json(store, key)
            if raw is None:
                continue
            out[pid] = PropertyStatus.model_validate(raw)
        except (InvalidPropertyIdError, SchemaError, ValueError) as e:
            logger.debug("skipping malformed status record %s: %s", key, e)
            continue
    return out


def set_status(store: RecordStore, pid: object, status: PropertyStatus) -> PropertyStatus:
    """Overwrite the whole status record for `pid`. Last writer wins."""

    put_json(store, status_key(parse_property_id(pid)), status.to_json_dict())
    return status
