"""
Tests for unmatched routes and unexpected failures.
"""
from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from users_api.app.main import create_app
from users_api.app.services.user_store import UserStore


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/"),
        ("GET", "/api"),
        ("GET", "/api/user"),
        ("GET", "/api/users-list"),
        ("PATCH", "/api/users"),
        ("DELETE", "/api/users"),
        ("PUT", "/api/users"),
        ("POST", "/api/users/0b7e7dee-87b7-4a0a-9b4a-e5a6c1f1ad4b"),
        ("GET", "/docs"),
        ("GET", "/openapi.json"),
    ],
)
def test_unmatched_route_is_not_found(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
    assert response.headers["content-type"].startswith("application/json")


class BrokenStore(UserStore):
    def list_all(self):
        raise RuntimeError("storage exploded")


def test_unexpected_failure_is_internal_server_error(settings, caplog):
    app = create_app(settings=settings, store=BrokenStore())
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="users_api.app.core.errors"):
        response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert "Server Error" in caplog.text


def test_failure_in_one_request_does_not_affect_others(settings):
    app = create_app(settings=settings, store=BrokenStore())
    client = TestClient(app, raise_server_exceptions=False)

    assert client.get("/api/users").status_code == 500
    assert client.post(
        "/api/users", json={"username": "Alice", "age": 30, "hobbies": []}
    ).status_code == 201
