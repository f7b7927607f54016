"""Shared invitation response models and parsing."""

from datetime import datetime

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from holding.domain.error import NotFoundError
from holding.domain.model import Invitation
from holding.domain.value import InvitationStatus, InvitationToken


class InvitationItem(BaseModel):
    """Invitation as shown to the bag owner."""

    invitation_id: str
    bag_id: str
    invitation_url: str
    token: str
    email: str | None
    status: InvitationStatus
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None = None
    accepted_by_user_id: str | None = None


def invitation_url(link_base_url: str, token: InvitationToken) -> str:
    return f"{link_base_url.rstrip('/')}/{token.root}"


def to_invitation_item(invitation: Invitation, link_base_url: str) -> InvitationItem:
    return InvitationItem(
        invitation_id=str(invitation.id),
        bag_id=str(invitation.bag_id),
        invitation_url=invitation_url(link_base_url, invitation.token),
        token=invitation.token.root,
        email=invitation.email.root if invitation.email else None,
        status=invitation.status,
        created_at=invitation.created_at,
        expires_at=invitation.expires_at,
        accepted_at=invitation.accepted_at,
        accepted_by_user_id=str(invitation.accepted_by_user_id)
        if invitation.accepted_by_user_id
        else None,
    )


def parse_token(raw: str) -> InvitationToken:
    """Parse a token from a URL; malformed tokens are simply unknown."""
    try:
        return InvitationToken(root=raw)
    except PydanticValidationError as e:
        raise NotFoundError("Invitation", raw[:8] + "...") from e
