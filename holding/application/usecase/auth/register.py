"""Register use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    handle: str
    email: str
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    token: str
    user_id: str
    handle: str
    email: str
    created_at: datetime


class RegisterUseCase(BaseUseCase[RegisterRequest, RegisterResponse]):
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Register a new user.

        Raises:
            ValidationError: If handle, email or password are malformed
            ConflictError: If the handle or email is taken
        """
        with logfire.span("register.execute", handle=request.handle):
            user = await self.user_service.register(
                handle=request.handle, email=request.email, password=request.password
            )
            token = self.jwt_service.create_token(user)

            return RegisterResponse(
                token=token,
                user_id=str(user.id),
                handle=user.handle.root,
                email=user.email.root,
                created_at=user.created_at,
            )
