"""Invitation repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from holding.domain.model.invitation import Invitation
from holding.domain.value import (
    BagId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Implementations must enforce the invitation state machine themselves:
    ``update_status`` is a compare-and-set against the stored status, so two
    concurrent callers can never both move the same Pending invitation.
    """

    @abstractmethod
    async def create(self, invitation: Invitation) -> InvitationId:
        """Insert a new invitation.

        Args:
            invitation: The invitation to insert

        Returns:
            The id of the stored invitation

        Raises:
            ConflictError: If the token or id already exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by token.

        Used when someone opens an invitation link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        invitation_id: InvitationId,
        new_status: InvitationStatus,
        accepted_by: Optional[UserId] = None,
    ) -> Invitation:
        """Move an invitation to a new status.

        The change is applied only if the status stored at write time allows
        it. Accepting also records ``accepted_at`` and ``accepted_by``.

        Args:
            invitation_id: The invitation to update
            new_status: Target status
            accepted_by: User accepting the invitation (ACCEPTED only)

        Returns:
            The updated invitation

        Raises:
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the stored status cannot move to new_status
        """
        pass

    @abstractmethod
    async def list_by_bag(self, bag_id: BagId) -> list[Invitation]:
        """List every invitation for a bag, newest first.

        Args:
            bag_id: The bag's ID

        Returns:
            Invitations of any status ordered by creation time descending
        """
        pass
