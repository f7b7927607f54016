"""List invitations use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.application.usecase.invitation.common import (
    InvitationItem,
    to_invitation_item,
)
from holding.config import Settings
from holding.domain.service import InvitationService
from holding.domain.value import BagId, UserId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    bag_id: str
    user_id: str  # From auth


class ListInvitationsResponse(BaseModel):
    """List invitations response."""

    invitations: list[InvitationItem]
    total: int


class ListInvitationsUseCase(
    BaseUseCase[ListInvitationsRequest, ListInvitationsResponse]
):
    """Use case for an owner reviewing a bag's invitations."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        invitations = await self.invitation_service.list_invitations(
            BagId(UUID(request.bag_id)), UserId(UUID(request.user_id))
        )
        base_url = self.settings.invitations.link_base_url
        return ListInvitationsResponse(
            invitations=[to_invitation_item(inv, base_url) for inv in invitations],
            total=len(invitations),
        )
