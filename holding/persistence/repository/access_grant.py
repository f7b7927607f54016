"""PostgreSQL implementation of AccessGrant repository."""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from holding.domain.error import ConflictError
from holding.domain.model import AccessGrant
from holding.domain.repository import AccessGrantRepository
from holding.domain.value import BagId, UserId
from holding.persistence.mappers import access_grant_to_dict, row_to_access_grant
from holding.persistence.tables import bag_access_table


class PostgresAccessGrantRepository(AccessGrantRepository):
    """PostgreSQL implementation of AccessGrantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, bag_id: BagId, user_id: UserId) -> Optional[AccessGrant]:
        """Find the grant for (bag, user)."""
        stmt = select(bag_access_table).where(
            bag_access_table.c.bag_id == bag_id,
            bag_access_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_access_grant(dict(row)) if row else None

    async def insert(self, grant: AccessGrant) -> AccessGrant:
        """Insert a grant, failing on the (bag, user) primary key."""
        stmt = insert(bag_access_table).values(**access_grant_to_dict(grant))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                f"Grant already exists for bag {grant.bag_id} and user {grant.user_id}"
            ) from e
        return grant

    async def delete(self, bag_id: BagId, user_id: UserId) -> bool:
        """Delete the grant for (bag, user)."""
        stmt = delete(bag_access_table).where(
            bag_access_table.c.bag_id == bag_id,
            bag_access_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def list_by_bag(self, bag_id: BagId) -> list[AccessGrant]:
        """List grants on a bag, oldest first."""
        stmt = (
            select(bag_access_table)
            .where(bag_access_table.c.bag_id == bag_id)
            .order_by(bag_access_table.c.granted_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_access_grant(dict(row)) for row in result.mappings().all()]

    async def list_by_user(self, user_id: UserId) -> list[AccessGrant]:
        """List grants held by a user, oldest first."""
        stmt = (
            select(bag_access_table)
            .where(bag_access_table.c.user_id == user_id)
            .order_by(bag_access_table.c.granted_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_access_grant(dict(row)) for row in result.mappings().all()]
