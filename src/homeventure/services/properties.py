from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError as SchemaError

from homeventure.errors import CatalogPropertyError
from homeventure.ids import CatalogId, UserId, new_user_id, parse_property_id
from homeventure.models import (
    KnockStatus,
    PropertyStatus,
    UserProperty,
    UserPropertyInput,
    now_iso,
)
from homeventure.store import PROPERTY_PREFIX, RecordStore, get_json, property_key, put_json, status_key

logger = logging.getLogger("homeventure.properties")


def create_property(
    store: RecordStore,
    payload: UserPropertyInput,
    initial_status: Optional[KnockStatus] = None,
) -> UserProperty:
    """Persist a new user property and its paired status record.

    The two writes are not transactional; the property record is written first.
    """

    pid = new_user_id()
    now = now_iso()
    fields = payload.model_dump(exclude={"initial_status"})
    prop = UserProperty(id=str(pid), created_at=now, updated_at=now, **fields)
    put_json(store, property_key(pid), prop.to_json_dict())

    status = PropertyStatus(
        status=initial_status or payload.initial_status or KnockStatus.ACTIVE,
        notes=payload.notes,
        knocked_date=None,
        updated_at=now,
    )
    put_json(store, status_key(pid), status.to_json_dict())
    logger.info("created user property %s (%s)", pid, prop.address)
    return prop


def get_property(store: RecordStore, pid: object) -> Optional[UserProperty]:
    parsed = parse_property_id(pid)
    if not isinstance(parsed, UserId):
        return None
    key = property_key(parsed)
    try:
        raw = get_json(store, key)
        if raw is None:
            return None
        return UserProperty.model_validate(raw)
    except (SchemaError, ValueError) as e:
        logger.debug("ignoring malformed property record %s: %s", key, e)
        return None


def list_properties(store: RecordStore) -> List[UserProperty]:
    out: List[UserProperty] = []
    for key in store.list(PROPERTY_PREFIX):
        try:
            raw = get_json(store, key)
            if raw is None:
                continue
            out.append(UserProperty.model_validate(raw))
        except (SchemaError, ValueError) as e:
            logger.debug("skipping malformed property record %s: %s", key, e)
            continue
    return out


def delete_property(store: RecordStore, pid: object) -> None:
    """Delete a user property and its status. Missing ids are not an error."""

    parsed = parse_property_id(pid)
    if isinstance(parsed, CatalogId):
        raise CatalogPropertyError("Cannot delete catalog properties")
    store.delete(property_key(parsed))
    store.delete(status_key(parsed))
    logger.info("deleted user property %s", parsed)
