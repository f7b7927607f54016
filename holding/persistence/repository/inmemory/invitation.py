"""In-memory invitation repository for testing."""

from typing import Optional

from holding.domain.error import ConflictError, InvalidTransitionError, NotFoundError
from holding.domain.model.common import utcnow
from holding.domain.model.invitation import Invitation
from holding.domain.repository.invitation import InvitationRepository
from holding.domain.value import (
    BagId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing.

    ``update_status`` reads and writes without awaiting in between, so on a
    single event loop the status check and the write are atomic.
    """

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, Invitation] = {}

    async def create(self, invitation: Invitation) -> InvitationId:
        """Insert a new invitation."""
        if invitation.id in self._invitations:
            raise ConflictError(f"Invitation {invitation.id} already exists")
        for existing in self._invitations.values():
            if existing.token == invitation.token:
                raise ConflictError("Invitation token already exists")
        self._invitations[invitation.id] = invitation
        return invitation.id

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def update_status(
        self,
        invitation_id: InvitationId,
        new_status: InvitationStatus,
        accepted_by: Optional[UserId] = None,
    ) -> Invitation:
        """Compare-and-set the invitation status."""
        current = self._invitations.get(invitation_id)
        if current is None:
            raise NotFoundError("Invitation", str(invitation_id))
        if not current.status.can_transition_to(new_status):
            raise InvalidTransitionError(
                str(invitation_id), current.status.value, new_status.value
            )

        update: dict = {"status": new_status}
        if new_status == InvitationStatus.ACCEPTED:
            update["accepted_at"] = utcnow()
            update["accepted_by_user_id"] = accepted_by

        updated = current.model_copy(update=update)
        self._invitations[invitation_id] = updated
        return updated

    async def list_by_bag(self, bag_id: BagId) -> list[Invitation]:
        """List invitations for a bag, newest first."""
        matches = [inv for inv in self._invitations.values() if inv.bag_id == bag_id]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches
