from dataclasses import replace

import pytest

from homeventure.errors import StorageUnavailableError
from homeventure.ids import CatalogId, UserId
from homeventure.settings import Settings, get_settings
from homeventure.store import (
    MemoryRecordStore,
    SQLiteRecordStore,
    get_json,
    open_record_store,
    property_key,
    put_json,
    shared_memory_store,
    status_key,
)


def test_key_builders():
    assert status_key(CatalogId(52)) == "status:52"
    assert status_key(UserId("u1-a")) == "status:u1-a"
    assert property_key(UserId("u1-a")) == "property:u1-a"


def test_get_missing_returns_none(store):
    assert store.get("status:1") is None
    assert get_json(store, "status:1") is None


def test_put_get_delete(store):
    store.put("status:1", '{"status":"knocked"}')
    assert store.get("status:1") == '{"status":"knocked"}'
    store.delete("status:1")
    assert store.get("status:1") is None
    # deleting again is fine
    store.delete("status:1")


def test_list_by_prefix_in_insertion_order(store):
    store.put("status:2", "{}")
    store.put("property:u1-a", "{}")
    store.put("status:1", "{}")
    store.put("status:2", '{"x":1}')
    assert store.list("status:") == ["status:2", "status:1"]
    assert store.list("property:") == ["property:u1-a"]
    assert store.list("nothing:") == []


def test_list_prefix_is_literal(store):
    store.put("status_1", "{}")
    store.put("status:1", "{}")
    assert store.list("status:") == ["status:1"]
    assert store.list("stat%") == []


def test_json_helpers(store):
    put_json(store, "status:9", {"status": "hidden", "notes": ""})
    assert get_json(store, "status:9") == {"status": "hidden", "notes": ""}


def test_sqlite_store_persists_across_connections(tmp_path):
    path = str(tmp_path / "sub" / "knock.sqlite")
    s1 = SQLiteRecordStore(path)
    try:
        s1.put("status:5", '{"status":"toview"}')
    finally:
        s1.close()
    s2 = SQLiteRecordStore(path)
    try:
        assert s2.get("status:5") == '{"status":"toview"}'
        assert s2.list("status:") == ["status:5"]
    finally:
        s2.close()


def test_open_record_store_requires_configuration():
    with pytest.raises(StorageUnavailableError):
        open_record_store(get_settings())


def test_open_record_store_sqlite(db_path):
    store = open_record_store()
    try:
        assert isinstance(store, SQLiteRecordStore)
    finally:
        store.close()


def test_open_record_store_memory_is_shared(set_env):
    set_env(KNOCK_DATA_PATH=":memory:")
    a = open_record_store()
    a.put("status:1", "{}")
    b = open_record_store()
    assert b is shared_memory_store()
    assert b.get("status:1") == "{}"


def test_open_record_store_unopenable_path(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    settings = replace(Settings.from_env(), knock_data_path=str(blocker / "knock.sqlite"))
    with pytest.raises(StorageUnavailableError):
        open_record_store(settings)


def test_memory_store_clear():
    s = MemoryRecordStore()
    s.put("a", "1")
    s.clear()
    assert s.list("") == []
