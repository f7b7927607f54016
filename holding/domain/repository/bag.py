"""Bag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from holding.domain.model.bag import Bag
from holding.domain.value import BagId


class BagRepository(ABC):
    """Repository for Bag entity."""

    @abstractmethod
    async def find_by_id(self, bag_id: BagId) -> Optional[Bag]:
        """Find a bag by ID.

        Args:
            bag_id: The bag's unique identifier

        Returns:
            The bag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, bag_ids: list[BagId]) -> list[Bag]:
        """Find several bags, newest first. Unknown ids are skipped."""
        pass

    @abstractmethod
    async def save(self, bag: Bag) -> Bag:
        """Save a bag (create or update)."""
        pass
