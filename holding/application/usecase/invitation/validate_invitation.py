"""Validate invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.application.usecase.invitation.common import parse_token
from holding.domain.error import NotFoundError
from holding.domain.service import InvitationService, UserService
from holding.domain.value import InvitationStatus


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    token: str


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    status: InvitationStatus
    bag_id: str
    bag_name: str
    inviter_handle: str | None = None
    email: str | None = None
    expires_at: datetime


class ValidateInvitationUseCase(
    BaseUseCase[ValidateInvitationRequest, ValidateInvitationResponse]
):
    """Use case for previewing an invitation link.

    Lets the frontend show what the link is for before the visitor signs in.
    Validation does not consume the token.
    """

    def __init__(
        self, invitation_service: InvitationService, user_service: UserService
    ) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
            user_service: User domain service
        """
        self.invitation_service = invitation_service
        self.user_service = user_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate an invitation token.

        Raises:
            NotFoundError: If the token is unknown
            AlreadyAcceptedError: If the token was already used
            ExpiredError: If the invitation has expired
        """
        token = parse_token(request.token)
        preview = await self.invitation_service.validate_invitation(token)

        try:
            inviter = await self.user_service.get_by_id(preview.inviter_id)
            inviter_handle = inviter.handle.root
        except NotFoundError:
            # Inviter was deleted
            inviter_handle = None
            logfire.warn(
                "Inviter not found", invitation_id=str(preview.invitation_id)
            )

        return ValidateInvitationResponse(
            valid=True,
            status=preview.status,
            bag_id=str(preview.bag_id),
            bag_name=preview.bag_name,
            inviter_handle=inviter_handle,
            email=preview.email.root if preview.email else None,
            expires_at=preview.expires_at,
        )
