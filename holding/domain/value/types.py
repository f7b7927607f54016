"""Domain value objects for Bag of Holding.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the small amount of behaviour that
belongs to a value (role ranking, invitation status transitions).
"""

import re
from enum import Enum

from pydantic import field_validator

from holding.domain.value.common import RootValueObject


class Role(str, Enum):
    """Role a user holds on a bag.

    Roles form a total order by rank (``Role.MEMBER < Role.OWNER``). The
    comparison operators use the rank, never the string value.
    """

    MEMBER = "member"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        return _ROLE_RANKS[self]

    def satisfies(self, required: "Role") -> bool:
        """Whether this role is at least as strong as ``required``."""
        return self >= required

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.rank >= other.rank


_ROLE_RANKS = {Role.MEMBER: 1, Role.OWNER: 2}


class InvitationStatus(str, Enum):
    """Lifecycle status of an invitation.

    ``PENDING`` may move to ``ACCEPTED`` or ``EXPIRED``; both are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"

    def can_transition_to(self, new_status: "InvitationStatus") -> bool:
        return new_status in _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS = {
    InvitationStatus.PENDING: {InvitationStatus.ACCEPTED, InvitationStatus.EXPIRED},
    InvitationStatus.ACCEPTED: set(),
    InvitationStatus.EXPIRED: set(),
}


class BagEventType(str, Enum):
    """Kinds of events broadcast on a bag's real-time channel."""

    MEMBER_JOINED = "member_joined"
    MEMBER_REMOVED = "member_removed"
    ITEM_ADDED = "item_added"
    ITEM_UPDATED = "item_updated"
    ITEM_REMOVED = "item_removed"


class InvitationToken(RootValueObject[str]):
    """Opaque URL-safe invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is non-empty and URL-safe."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        if not re.match(r"^[A-Za-z0-9_-]+$", v):
            raise ValueError("Token must be URL-safe")
        return v

    @property
    def redacted(self) -> str:
        """Short prefix that is safe to log."""
        return self.root[:8] + "..."


class Handle(RootValueObject[str]):
    """Username chosen at registration.

    Lowercase letters, digits, ``_``, ``-`` and ``.``; 3-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Normalize to lowercase and validate."""
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Handle must be 3-50 characters of letters, digits, '_', '-' or '.'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, stored lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Very small sanity check; delivery is not attempted."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v
