"""In-memory access grant repository for testing."""

from typing import Optional

from holding.domain.error import ConflictError
from holding.domain.model.access_grant import AccessGrant
from holding.domain.repository.access_grant import AccessGrantRepository
from holding.domain.value import BagId, UserId


class InMemoryAccessGrantRepository(AccessGrantRepository):
    """In-memory implementation of AccessGrantRepository for testing."""

    def __init__(self) -> None:
        self._grants: dict[tuple[BagId, UserId], AccessGrant] = {}

    async def find(self, bag_id: BagId, user_id: UserId) -> Optional[AccessGrant]:
        """Find the grant for (bag, user)."""
        return self._grants.get((bag_id, user_id))

    async def insert(self, grant: AccessGrant) -> AccessGrant:
        """Insert a grant, failing if (bag, user) is taken."""
        key = (grant.bag_id, grant.user_id)
        if key in self._grants:
            raise ConflictError(
                f"Grant already exists for bag {grant.bag_id} and user {grant.user_id}"
            )
        self._grants[key] = grant
        return grant

    async def delete(self, bag_id: BagId, user_id: UserId) -> bool:
        """Delete the grant for (bag, user)."""
        return self._grants.pop((bag_id, user_id), None) is not None

    async def list_by_bag(self, bag_id: BagId) -> list[AccessGrant]:
        """List grants on a bag, oldest first."""
        grants = [g for g in self._grants.values() if g.bag_id == bag_id]
        grants.sort(key=lambda g: g.granted_at)
        return grants

    async def list_by_user(self, user_id: UserId) -> list[AccessGrant]:
        """List grants held by a user, oldest first."""
        grants = [g for g in self._grants.values() if g.user_id == user_id]
        grants.sort(key=lambda g: g.granted_at)
        return grants
