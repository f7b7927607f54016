"""List bag members use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.error import NotFoundError
from holding.domain.service import BagService, UserService
from holding.domain.value import BagId, Role, UserId


class ListMembersRequest(BaseModel):
    """List members request."""

    bag_id: str
    user_id: str  # From auth


class MemberItem(BaseModel):
    """One member of a bag."""

    user_id: str
    handle: str | None
    role: Role
    granted_at: datetime


class ListMembersResponse(BaseModel):
    """List members response."""

    members: list[MemberItem]


class ListMembersUseCase(BaseUseCase[ListMembersRequest, ListMembersResponse]):
    """Use case for listing who has access to a bag."""

    def __init__(self, bag_service: BagService, user_service: UserService) -> None:
        self.bag_service = bag_service
        self.user_service = user_service

    async def execute(self, request: ListMembersRequest) -> ListMembersResponse:
        """List the bag's members with their handles.

        Raises:
            ForbiddenError: If the requester has no access
        """
        grants = await self.bag_service.list_members(
            BagId(UUID(request.bag_id)), UserId(UUID(request.user_id))
        )

        members = []
        for grant in grants:
            try:
                user = await self.user_service.get_by_id(grant.user_id)
                handle = user.handle.root
            except NotFoundError:
                handle = None
            members.append(
                MemberItem(
                    user_id=str(grant.user_id),
                    handle=handle,
                    role=grant.role,
                    granted_at=grant.granted_at,
                )
            )
        return ListMembersResponse(members=members)
