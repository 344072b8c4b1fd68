"""Fixtures for multi-user isolation tests.

Seeds two accounts, Alice and Bob, on a fresh application.
"""

import pytest
from fastapi.testclient import TestClient

from tasker.presentation.api.app import create_app
from tests.shared.fixtures.api import API_PREFIX, DEFAULT_PASSWORD, build_test_settings

USERS = {
    "alice": ("alice_01", "alice@example.com"),
    "bob": ("bob_0001", "bob@example.com"),
}


def _make_client(**settings_overrides):
    return TestClient(create_app(settings=build_test_settings(**settings_overrides)))


def _seed(client: TestClient) -> dict[str, dict[str, str]]:
    headers = {}
    for name, (username, email) in USERS.items():
        response = client.post(
            f"{API_PREFIX}/auth/register",
            json={"username": username, "email": email, "password": DEFAULT_PASSWORD},
        )
        assert response.status_code == 201, response.text

        response = client.post(
            f"{API_PREFIX}/auth/login",
            json={"email": email, "password": DEFAULT_PASSWORD},
        )
        assert response.status_code == 200, response.text
        headers[name] = {"Authorization": f"Bearer {response.json()['access_token']}"}

    client.cookies.clear()
    return headers


@pytest.fixture
def client():
    with _make_client() as test_client:
        yield test_client


@pytest.fixture
def concealing_client():
    """Application configured to answer foreign writes with 404."""
    with _make_client(task_conceal_foreign_writes=True) as test_client:
        yield test_client


@pytest.fixture
def users(client) -> dict[str, dict[str, str]]:
    """Bearer headers for Alice and Bob."""
    return _seed(client)


@pytest.fixture
def concealing_users(concealing_client) -> dict[str, dict[str, str]]:
    return _seed(concealing_client)
