"""Invitation entity.

Invitations let a bag owner share a link that adds the holder of the token
to the bag as a member.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from holding.domain.model.common import DomainModel, utcnow
from holding.domain.value import (
    BagId,
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - The token is globally unique and never reused
    - Status moves Pending -> Accepted or Pending -> Expired, nothing else
    - Expiry is inclusive: at ``expires_at`` the invitation is already expired
    - Records are never deleted so owners keep an audit trail
    """

    id: InvitationId
    bag_id: BagId
    inviter_id: UserId
    token: InvitationToken
    email: Optional[Email] = None  # Informational hint, not enforced on accept
    status: InvitationStatus = InvitationStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by_user_id: Optional[UserId] = None

    def is_expired_at(self, now: datetime) -> bool:
        """Whether the invitation has reached its expiry at ``now``."""
        return now >= self.expires_at
