"""Create invitation use case."""

from datetime import timedelta
from uuid import UUID

import logfire
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from holding.application.usecase.base import BaseUseCase
from holding.application.usecase.invitation.common import (
    InvitationItem,
    to_invitation_item,
)
from holding.config import Settings
from holding.domain.error import ValidationError
from holding.domain.service import InvitationService
from holding.domain.value import BagId, Email, UserId

# One year
MAX_TTL_HOURS = 24 * 365


class CreateInvitationRequest(BaseModel):
    """Request to create an invitation."""

    bag_id: str
    user_id: str  # From auth
    email: str | None = None
    ttl_hours: int | None = Field(default=None, ge=1, le=MAX_TTL_HOURS)


class CreateInvitationUseCase(BaseUseCase[CreateInvitationRequest, InvitationItem]):
    """Use case for a bag owner inviting someone by link."""

    def __init__(
        self, invitation_service: InvitationService, settings: Settings
    ) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings, for building links
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: CreateInvitationRequest) -> InvitationItem:
        """Create an invitation and return its shareable link.

        Raises:
            ForbiddenError: If the requester is not the bag's Owner
            ValidationError: If the email is malformed
        """
        with logfire.span("create_invitation.execute", bag_id=request.bag_id):
            email = None
            if request.email:
                try:
                    email = Email(request.email)
                except PydanticValidationError as e:
                    raise ValidationError("Invalid email address") from e

            ttl = (
                timedelta(hours=request.ttl_hours)
                if request.ttl_hours is not None
                else None
            )

            invitation = await self.invitation_service.create_invitation(
                bag_id=BagId(UUID(request.bag_id)),
                requester_id=UserId(UUID(request.user_id)),
                email=email,
                ttl=ttl,
            )
            return to_invitation_item(
                invitation, self.settings.invitations.link_base_url
            )
