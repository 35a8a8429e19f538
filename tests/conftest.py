import os
import socket
import sys
import urllib.request
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC = REPO_ROOT / "src"

# Prefer repo sources over any installed package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


_CONFIG_ENV = (
    "KNOCK_DATA_PATH",
    "SERPER_API_KEY",
    "GEMINI_API_KEY",
    "HOMEVENTURE_HTTP_USER_AGENT",
    "HOMEVENTURE_HTTP_TIMEOUT",
    "HOMEVENTURE_ENRICH_MODEL",
    "HOMEVENTURE_ADDRESS_MODEL",
    "HOMEVENTURE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    if os.getenv("LIVE") == "1":
        return

    real_connect = socket.socket.connect

    def guarded_connect(sock, address):
        host = address[0]
        if host not in ("127.0.0.1", "localhost"):
            raise RuntimeError("Network access blocked in tests")
        return real_connect(sock, address)

    monkeypatch.setattr(socket.socket, "connect", guarded_connect)
    monkeypatch.setattr(
        urllib.request,
        "urlopen",
        lambda *args, **kwargs: (_ for _ in ()).throw(
            RuntimeError("Network access blocked in tests")
        ),
    )


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    from homeventure.settings import reset_settings_cache
    from homeventure.store import shared_memory_store

    for name in _CONFIG_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    shared_memory_store().clear()
    yield
    reset_settings_cache()
    shared_memory_store().clear()


@pytest.fixture()
def set_env(monkeypatch):
    """Set env vars and force settings to be re-read."""

    from homeventure.settings import reset_settings_cache

    def _set(**env):
        for k, v in env.items():
            if v is None:
                monkeypatch.delenv(k, raising=False)
            else:
                monkeypatch.setenv(k, str(v))
        reset_settings_cache()

    return _set


@pytest.fixture()
def memory_store():
    from homeventure.store import MemoryRecordStore

    return MemoryRecordStore()


@pytest.fixture()
def sqlite_store(tmp_path):
    from homeventure.store import SQLiteRecordStore

    store = SQLiteRecordStore(str(tmp_path / "knock.sqlite"))
    try:
        yield store
    finally:
        store.close()


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    from homeventure.store import MemoryRecordStore, SQLiteRecordStore

    if request.param == "memory":
        yield MemoryRecordStore()
        return
    s = SQLiteRecordStore(str(tmp_path / "knock.sqlite"))
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def db_path(tmp_path, set_env):
    path = tmp_path / "knock.sqlite"
    set_env(KNOCK_DATA_PATH=str(path))
    return str(path)


@pytest.fixture()
def client(db_path):
    from fastapi.testclient import TestClient

    from homeventure.api.app import app

    return TestClient(app)
