"""Access grant repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from holding.domain.model.access_grant import AccessGrant
from holding.domain.value import BagId, UserId


class AccessGrantRepository(ABC):
    """Repository for AccessGrant entity, keyed by (bag, user)."""

    @abstractmethod
    async def find(self, bag_id: BagId, user_id: UserId) -> Optional[AccessGrant]:
        """Find the grant binding a user to a bag.

        Args:
            bag_id: The bag's ID
            user_id: The user's ID

        Returns:
            The grant if present, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, grant: AccessGrant) -> AccessGrant:
        """Insert a grant.

        Raises:
            ConflictError: If a grant already exists for (bag, user)
        """
        pass

    @abstractmethod
    async def delete(self, bag_id: BagId, user_id: UserId) -> bool:
        """Delete the grant for (bag, user).

        Returns:
            True if a grant was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def list_by_bag(self, bag_id: BagId) -> list[AccessGrant]:
        """List grants on a bag, oldest first."""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UserId) -> list[AccessGrant]:
        """List grants held by a user, oldest first."""
        pass
