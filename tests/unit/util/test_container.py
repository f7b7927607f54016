"""Tests for container construction."""

import pytest
from fastapi.testclient import TestClient

from holding.config import InvitationSettings, Settings
from holding.interface.api.app import create_app
from holding.util.di.container import create_container


class TestCreateContainer:
    """The container injects the Settings it was built with."""

    @pytest.mark.asyncio
    async def test_injects_given_settings(self):
        # Arrange
        settings = Settings(
            environment="test",
            invitations=InvitationSettings(default_ttl_hours=12),
        )
        container = create_container(settings)

        # Act
        injected = await container.get(Settings)
        invitation_settings = await container.get(InvitationSettings)

        # Assert
        assert injected is settings
        assert invitation_settings.default_ttl_hours == 12
        await container.close()


def test_app_routes_see_app_settings():
    app = create_app(settings=Settings(environment="test"))

    response = TestClient(app).get("/api/healthcheck")

    assert response.status_code == 200
    assert response.json()["environment"] == "test"
