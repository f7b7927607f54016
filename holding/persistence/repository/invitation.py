"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from holding.domain.error import ConflictError, InvalidTransitionError, NotFoundError
from holding.domain.model import Invitation
from holding.domain.model.common import utcnow
from holding.domain.repository import InvitationRepository
from holding.domain.value import (
    BagId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from holding.persistence.mappers import invitation_to_dict, row_to_invitation
from holding.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, invitation: Invitation) -> InvitationId:
        """Insert a new invitation.

        The insert runs in a savepoint so a duplicate token leaves the
        request's transaction usable.

        Raises:
            ConflictError: If the token or id already exists
        """
        stmt = insert(invitations_table).values(**invitation_to_dict(invitation))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(f"Invitation {invitation.id} already exists") from e
        return invitation.id

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def update_status(
        self,
        invitation_id: InvitationId,
        new_status: InvitationStatus,
        accepted_by: Optional[UserId] = None,
    ) -> Invitation:
        """Compare-and-set the invitation status.

        The UPDATE only matches rows whose stored status may move to
        ``new_status``. A concurrent writer that got there first makes this
        statement match nothing once its transaction commits.

        Raises:
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the stored status cannot move to new_status
        """
        allowed_from = [
            status.value
            for status in InvitationStatus
            if status.can_transition_to(new_status)
        ]
        values: dict = {"status": new_status.value}
        if new_status == InvitationStatus.ACCEPTED:
            values["accepted_at"] = utcnow()
            values["accepted_by_user_id"] = accepted_by

        stmt = (
            update(invitations_table)
            .where(
                invitations_table.c.id == invitation_id,
                invitations_table.c.status.in_(allowed_from),
            )
            .values(**values)
            .returning(*invitations_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row:
            await self.session.flush()
            return row_to_invitation(dict(row))

        current = await self.find_by_id(invitation_id)
        if current is None:
            raise NotFoundError("Invitation", str(invitation_id))
        raise InvalidTransitionError(
            str(invitation_id), current.status.value, new_status.value
        )

    async def list_by_bag(self, bag_id: BagId) -> list[Invitation]:
        """List invitations for a bag, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.bag_id == bag_id)
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]
