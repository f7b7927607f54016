"""Domain value objects for Bag of Holding."""

from holding.domain.value.identifiers import (
    BagId,
    BagItemId,
    InvitationId,
    UserId,
)
from holding.domain.value.types import (
    BagEventType,
    Email,
    Handle,
    InvitationStatus,
    InvitationToken,
    Role,
)

__all__ = [
    # Identifiers
    "UserId",
    "BagId",
    "BagItemId",
    "InvitationId",
    # Types
    "Role",
    "InvitationStatus",
    "InvitationToken",
    "BagEventType",
    "Handle",
    "Email",
]
