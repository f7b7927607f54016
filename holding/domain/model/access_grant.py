"""Access grant entity."""

from datetime import datetime

from pydantic import Field

from holding.domain.model.common import DomainModel, utcnow
from holding.domain.value import BagId, Role, UserId


class AccessGrant(DomainModel):
    """Binding of a user to a bag with a role.

    Unique per (bag, user). Grants are never updated in place; a role change
    is a revoke followed by a new grant.
    """

    bag_id: BagId
    user_id: UserId
    role: Role
    granted_at: datetime = Field(default_factory=utcnow)
