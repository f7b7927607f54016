"""Remove bag member use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.service import BagService
from holding.domain.value import BagId, UserId


class RemoveMemberRequest(BaseModel):
    """Remove member request."""

    bag_id: str
    user_id: str  # From auth
    member_id: str


class RemoveMemberUseCase(BaseUseCase[RemoveMemberRequest, None]):
    """Use case for an owner revoking a member's access."""

    def __init__(self, bag_service: BagService) -> None:
        self.bag_service = bag_service

    async def execute(self, request: RemoveMemberRequest) -> None:
        await self.bag_service.remove_member(
            bag_id=BagId(UUID(request.bag_id)),
            requester_id=UserId(UUID(request.user_id)),
            member_id=UserId(UUID(request.member_id)),
        )
