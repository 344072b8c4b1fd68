"""Fixtures for API endpoint tests.

Each test gets its own application on a fresh in-memory SQLite database.
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from tasker.presentation.api.app import create_app
from tasker_config.settings import Settings
from tests.shared.fixtures.api import API_PREFIX, DEFAULT_PASSWORD, build_test_settings


@pytest.fixture
def api_settings() -> Settings:
    return build_test_settings()


@pytest.fixture
def client(api_settings):
    """TestClient with lifespan (schema creation) enabled."""
    with TestClient(create_app(settings=api_settings)) as test_client:
        yield test_client


@pytest.fixture
def register_user(client) -> Callable[..., dict]:
    """Register an account and return the response body."""

    def _register(
        username: str = "alice_01",
        email: str = "alice@example.com",
        password: str = DEFAULT_PASSWORD,
    ) -> dict:
        response = client.post(
            f"{API_PREFIX}/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def login(client) -> Callable[..., dict[str, str]]:
    """Log in and return bearer headers.

    The auth cookie set by login is cleared so each request authenticates
    only through the headers it is given.
    """

    def _login(email: str = "alice@example.com", password: str = DEFAULT_PASSWORD):
        response = client.post(
            f"{API_PREFIX}/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
