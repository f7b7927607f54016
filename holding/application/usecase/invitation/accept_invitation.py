"""Accept invitation use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.application.usecase.invitation.common import parse_token
from holding.domain.service import AccessService, InvitationService
from holding.domain.value import Role, UserId


class AcceptInvitationRequest(BaseModel):
    """Accept invitation request."""

    token: str
    user_id: str  # From auth


class AcceptInvitationResponse(BaseModel):
    """Accept invitation response."""

    invitation_id: str
    bag_id: str
    role: Role
    accepted_at: datetime | None


class AcceptInvitationUseCase(
    BaseUseCase[AcceptInvitationRequest, AcceptInvitationResponse]
):
    """Use case for joining a bag through an invitation link."""

    def __init__(
        self, invitation_service: InvitationService, access_service: AccessService
    ) -> None:
        self.invitation_service = invitation_service
        self.access_service = access_service

    async def execute(self, request: AcceptInvitationRequest) -> AcceptInvitationResponse:
        """Accept the invitation for the authenticated user.

        Raises:
            NotFoundError: If the token is unknown
            AlreadyAcceptedError: If the token was already used
            ExpiredError: If the invitation has expired
        """
        user_id = UserId(UUID(request.user_id))
        invitation = await self.invitation_service.accept_invitation(
            parse_token(request.token), user_id
        )
        role = await self.access_service.get_role(invitation.bag_id, user_id)

        return AcceptInvitationResponse(
            invitation_id=str(invitation.id),
            bag_id=str(invitation.bag_id),
            role=role or Role.MEMBER,
            accepted_at=invitation.accepted_at,
        )
