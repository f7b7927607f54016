"""Bag item repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from holding.domain.model.bag_item import BagItem
from holding.domain.value import BagId, BagItemId


class BagItemRepository(ABC):
    """Repository for BagItem entity."""

    @abstractmethod
    async def find_by_id(self, item_id: BagItemId) -> Optional[BagItem]:
        """Find an item by ID."""
        pass

    @abstractmethod
    async def save(self, item: BagItem) -> BagItem:
        """Save an item (create or update)."""
        pass

    @abstractmethod
    async def delete(self, item_id: BagItemId) -> bool:
        """Delete an item.

        Returns:
            True if the item existed
        """
        pass

    @abstractmethod
    async def list_by_bag(self, bag_id: BagId) -> list[BagItem]:
        """List items in a bag ordered by name."""
        pass
