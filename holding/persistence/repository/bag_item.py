"""PostgreSQL implementation of BagItem repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from holding.domain.model import BagItem
from holding.domain.repository import BagItemRepository
from holding.domain.value import BagId, BagItemId
from holding.persistence.mappers import bag_item_to_dict, row_to_bag_item
from holding.persistence.tables import bag_items_table


class PostgresBagItemRepository(BagItemRepository):
    """PostgreSQL implementation of BagItemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, item_id: BagItemId) -> Optional[BagItem]:
        """Find an item by ID."""
        stmt = select(bag_items_table).where(bag_items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_bag_item(dict(row)) if row else None

    async def save(self, item: BagItem) -> BagItem:
        """Upsert an item."""
        stmt = insert(bag_items_table).values(**bag_item_to_dict(item))
        stmt = stmt.on_conflict_do_update(
            index_elements=[bag_items_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "quantity": stmt.excluded.quantity,
                "notes": stmt.excluded.notes,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return item

    async def delete(self, item_id: BagItemId) -> bool:
        """Delete an item."""
        stmt = delete(bag_items_table).where(bag_items_table.c.id == item_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def list_by_bag(self, bag_id: BagId) -> list[BagItem]:
        """List items in a bag ordered by name."""
        stmt = (
            select(bag_items_table)
            .where(bag_items_table.c.bag_id == bag_id)
            .order_by(bag_items_table.c.name.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_bag_item(dict(row)) for row in result.mappings().all()]
