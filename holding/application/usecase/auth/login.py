"""Login use case."""

import logfire
from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request.

    ``login`` is either the user's handle or their email address.
    """

    login: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    handle: str


class LoginUseCase(BaseUseCase[LoginRequest, LoginResponse]):
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token.

        Raises:
            AuthenticationError: If the login or password is wrong
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(request.login, request.password)
            token = self.jwt_service.create_token(user)
            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(
                token=token, user_id=str(user.id), handle=user.handle.root
            )
