"""In-memory bag item repository for testing."""

from typing import Optional

from holding.domain.model.bag_item import BagItem
from holding.domain.repository.bag_item import BagItemRepository
from holding.domain.value import BagId, BagItemId


class InMemoryBagItemRepository(BagItemRepository):
    """In-memory implementation of BagItemRepository for testing."""

    def __init__(self) -> None:
        self._items: dict[BagItemId, BagItem] = {}

    async def find_by_id(self, item_id: BagItemId) -> Optional[BagItem]:
        """Find an item by ID."""
        return self._items.get(item_id)

    async def save(self, item: BagItem) -> BagItem:
        """Save or update an item."""
        self._items[item.id] = item
        return item

    async def delete(self, item_id: BagItemId) -> bool:
        """Delete an item."""
        return self._items.pop(item_id, None) is not None

    async def list_by_bag(self, bag_id: BagId) -> list[BagItem]:
        """List items in a bag ordered by name."""
        items = [item for item in self._items.values() if item.bag_id == bag_id]
        items.sort(key=lambda item: item.name)
        return items
