from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def test_auth_placeholder_returns_empty_object(client: TestClient) -> None:
    response = client.get("/api/auth")

    assert response.status_code == 200
    assert response.json() == {}


def test_auth_has_no_login_route(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"email": "john@example.com"})

    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}
