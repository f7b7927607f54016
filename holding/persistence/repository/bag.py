"""PostgreSQL implementation of Bag repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from holding.domain.model import Bag
from holding.domain.repository import BagRepository
from holding.domain.value import BagId
from holding.persistence.mappers import bag_to_dict, row_to_bag
from holding.persistence.tables import bags_table


class PostgresBagRepository(BagRepository):
    """PostgreSQL implementation of BagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, bag_id: BagId) -> Optional[Bag]:
        """Find a bag by ID."""
        stmt = select(bags_table).where(bags_table.c.id == bag_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_bag(dict(row)) if row else None

    async def find_by_ids(self, bag_ids: list[BagId]) -> list[Bag]:
        """Find several bags, newest first."""
        stmt = (
            select(bags_table)
            .where(bags_table.c.id.in_(bag_ids))
            .order_by(bags_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_bag(dict(row)) for row in result.mappings().all()]

    async def save(self, bag: Bag) -> Bag:
        """Upsert a bag."""
        bag_dict = bag_to_dict(bag)
        stmt = insert(bags_table).values(**bag_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[bags_table.c.id],
            set_={"name": stmt.excluded.name, "description": stmt.excluded.description},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return bag
