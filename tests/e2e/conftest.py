"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from tests.di import build_test_container

PASSWORD = "correct-horse"


@pytest.fixture
def app():
    """Application wired to a fresh in-memory container."""
    return create_app(container=build_test_container())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def register(app):
    """Register a user through the API and return a client logged in as them.

    Each returned client holds its own session cookie.
    """

    def _register(username: str, is_moderator: bool = False, **extra) -> TestClient:
        user_client = TestClient(app)
        response = user_client.post(
            "/users",
            json={
                "user_id": f"uid-{username}",
                "name": username.title(),
                "username": username,
                "email": f"{username}@example.com",
                "password": PASSWORD,
                "is_moderator": is_moderator,
                **extra,
            },
        )
        assert response.status_code == 201, response.text

        response = user_client.post(
            "/auth/login", json={"username": username, "password": PASSWORD}
        )
        assert response.status_code == 200, response.text
        return user_client

    return _register
