"""Tests for login use case."""

import pytest

from holding.application.usecase.auth import LoginRequest, LoginUseCase
from holding.domain.error import AuthenticationError
from holding.domain.service import JWTService, UserService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("login", ["frodo", "FRODO", "frodo@shire.org"])
    async def test_login_success(self, unit_env, login):
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        use_case = LoginUseCase(user_service, jwt_service)
        user = await user_service.register("frodo", "frodo@shire.org", "mithril-vest")

        # Act
        response = await use_case.execute(
            LoginRequest(login=login, password="mithril-vest")
        )

        # Assert
        assert response.user_id == str(user.id)
        assert response.handle == "frodo"
        assert jwt_service.verify_token(response.token).user_id == str(user.id)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = LoginUseCase(user_service, await unit_env.get(JWTService))
        await user_service.register("frodo", "frodo@shire.org", "mithril-vest")

        with pytest.raises(AuthenticationError):
            await use_case.execute(LoginRequest(login="frodo", password="nope-nope"))
