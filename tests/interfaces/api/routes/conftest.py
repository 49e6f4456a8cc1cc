"""Application fixtures for the HTTP API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app
from nutritrack.infrastructure.nutrition_client import NutritionService


@pytest.fixture
def api_settings(settings):
    return settings.model_copy(
        update={"expose_reset_token": True, "frontend_url": "http://localhost:3000"}
    )


@pytest.fixture
def client(api_settings, clock):
    app = create_app(api_settings, clock=clock, nutrition_service=NutritionService())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    def _register(email: str = "jane@example.com", password: str = "StrongPass123"):
        response = client.post(
            "/auth/register", json={"email": email, "password": password, "name": "Jane"}
        )
        assert response.status_code == 201, response.text
        login = client.post("/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['token']}"}

    return _register


@pytest.fixture
def auth_headers(register):
    return register()
