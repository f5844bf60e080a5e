from __future__ import annotations

import pytest

from onboarding_system.main import create_app
from onboarding_system.storage.json_store import JsonRecordStore

ADMIN_PASSWORD = "admin-test"


@pytest.fixture
def fixed_now() -> int:
    return 1_700_000_000


@pytest.fixture
def employee_file(tmp_path):
    path = tmp_path / "employees.json"
    path.touch()
    return path


@pytest.fixture
def employee_store(employee_file) -> JsonRecordStore:
    return JsonRecordStore(employee_file)


@pytest.fixture
def settings(tmp_path) -> dict:
    return {
        "DATA_DIR": str(tmp_path / "data"),
        "ADMIN_ID": "admin",
        "ADMIN_PASSWORD": ADMIN_PASSWORD,
        "LOG_LEVEL": "WARNING",
    }


@pytest.fixture
def app(monkeypatch, settings):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/login", data={"username": "admin", "password": ADMIN_PASSWORD})
    assert resp.status_code == 302
    return client
