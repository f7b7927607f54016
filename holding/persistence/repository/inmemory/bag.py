"""In-memory bag repository for testing."""

from typing import Optional

from holding.domain.model.bag import Bag
from holding.domain.repository.bag import BagRepository
from holding.domain.value import BagId


class InMemoryBagRepository(BagRepository):
    """In-memory implementation of BagRepository for testing."""

    def __init__(self) -> None:
        self._bags: dict[BagId, Bag] = {}

    async def find_by_id(self, bag_id: BagId) -> Optional[Bag]:
        """Find a bag by ID."""
        return self._bags.get(bag_id)

    async def find_by_ids(self, bag_ids: list[BagId]) -> list[Bag]:
        """Find several bags, newest first."""
        bags = [self._bags[bag_id] for bag_id in bag_ids if bag_id in self._bags]
        bags.sort(key=lambda b: b.created_at, reverse=True)
        return bags

    async def save(self, bag: Bag) -> Bag:
        """Save or update a bag."""
        self._bags[bag.id] = bag
        return bag
