"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.service import AccessService, JWTService, UserService
from holding.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    handle: str
    email: str
    created_at: datetime
    bag_count: int


class GetCurrentUserUseCase(
    BaseUseCase[GetCurrentUserRequest, GetCurrentUserResponse]
):
    """Use case for getting the current authenticated user."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        access_service: AccessService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            access_service: Access control service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.access_service = access_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        bag_ids = await self.access_service.list_bag_ids(user.id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            handle=user.handle.root,
            email=user.email.root,
            created_at=user.created_at,
            bag_count=len(bag_ids),
        )
