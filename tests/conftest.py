from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Make the users_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_store import UserStore


ALICE = {"username": "Alice", "age": 30, "hobbies": ["chess"]}


@pytest.fixture()
def settings() -> Settings:
    return Settings()


@pytest.fixture()
def store() -> UserStore:
    return UserStore()


@pytest.fixture()
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def alice(client) -> dict:
    """A user created through the API."""
    response = client.post("/api/users", json=ALICE)
    assert response.status_code == 201
    return response.json()
