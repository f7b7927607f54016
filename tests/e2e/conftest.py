"""Fixtures shared by the end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from holding.config import Settings
from holding.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    settings = Settings(environment="test")
    app = create_app(
        settings=settings, container=build_test_container(settings=settings)
    )
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user and return Bearer headers for them.

    The cookie set by registration is cleared so each request authenticates
    only as the user whose headers it carries.
    """

    def _register(handle: str) -> dict[str, str]:
        response = client.post(
            "/auth/register",
            json={
                "handle": handle,
                "email": f"{handle}@example.com",
                "password": "correct-horse-battery",
            },
        )
        assert response.status_code == 201, response.text
        client.cookies.clear()
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register
