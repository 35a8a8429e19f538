import json

import pytest

from homeventure.errors import InvalidPropertyIdError
from homeventure.ids import CatalogId, UserId
from homeventure.models import KnockStatus, PropertyStatus
from homeventure.services.status import get_all_statuses, get_status, set_status


def test_get_status_absent_is_none(store):
    assert get_status(store, 52) is None
    assert get_status(store, "u1-abc") is None


def test_set_then_get_round_trip(store):
    status = PropertyStatus(
        status=KnockStatus.KNOCKED,
        notes="nobody home",
        knocked_date="2025-06-01",
        updated_at="2025-06-01T10:00:00.000Z",
    )
    set_status(store, 52, status)
    got = get_status(store, "52")
    assert got == status
    stored = json.loads(store.get("status:52"))
    assert stored == {
        "status": "knocked",
        "notes": "nobody home",
        "knockedDate": "2025-06-01",
        "updatedAt": "2025-06-01T10:00:00.000Z",
    }


def test_set_status_overwrites_whole_record(store):
    set_status(store, 52, PropertyStatus(status=KnockStatus.INTERESTED, notes="call back"))
    set_status(store, 52, PropertyStatus(status=KnockStatus.HIDDEN))
    got = get_status(store, 52)
    assert got.status == KnockStatus.HIDDEN
    assert got.notes == ""


def test_set_status_does_not_check_existence(store):
    set_status(store, 999999, PropertyStatus(status=KnockStatus.TOVIEW))
    assert get_status(store, 999999).status == KnockStatus.TOVIEW


def test_set_status_rejects_invalid_id(store):
    with pytest.raises(InvalidPropertyIdError):
        set_status(store, "not-an-id", PropertyStatus())
    assert store.list("status:") == []


def test_get_all_statuses_mixes_id_kinds(store):
    set_status(store, 52, PropertyStatus(status=KnockStatus.KNOCKED))
    set_status(store, "u1-abc", PropertyStatus(status=KnockStatus.NOT_INTERESTED))
    statuses = get_all_statuses(store)
    assert set(statuses) == {CatalogId(52), UserId("u1-abc")}
    assert statuses[UserId("u1-abc")].status == KnockStatus.NOT_INTERESTED


def test_get_all_statuses_skips_malformed_entries(store):
    set_status(store, 52, PropertyStatus(status=KnockStatus.KNOCKED))
    store.put("status:64", "{not json")
    store.put("status:61", json.dumps({"status": "bogus"}))
    store.put("status:bad key", json.dumps({"status": "active"}))
    set_status(store, 40, PropertyStatus(status=KnockStatus.INTERESTED))
    statuses = get_all_statuses(store)
    assert set(statuses) == {CatalogId(52), CatalogId(40)}


def test_get_status_malformed_is_none(store):
    store.put("status:64", "{not json")
    assert get_status(store, 64) is None


def test_status_defaults_updated_at():
    s = PropertyStatus.model_validate({"status": "active"})
    assert s.updated_at.endswith("Z")
    assert s.knocked_date is None
    assert s.notes == ""
