"""User entity."""

from datetime import datetime

from pydantic import Field

from holding.domain.model.common import DomainModel, utcnow
from holding.domain.value import Email, Handle, UserId


class User(DomainModel):
    """A registered principal.

    The password hash is produced by the user service and never leaves the
    domain layer.
    """

    id: UserId
    handle: Handle
    email: Email
    password_hash: str
    created_at: datetime = Field(default_factory=utcnow)
