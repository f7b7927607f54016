"""Tests for the in-memory invitation store's compare-and-set."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from holding.domain.error import ConflictError, InvalidTransitionError, NotFoundError
from holding.domain.model import Invitation
from holding.domain.value import (
    BagId,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from holding.persistence.repository.inmemory import InMemoryInvitationRepository

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_invitation(token: str = "token-abc", bag_id: BagId | None = None, **kwargs):
    return Invitation(
        id=InvitationId(uuid4()),
        bag_id=bag_id or BagId(uuid4()),
        inviter_id=UserId(uuid4()),
        token=InvitationToken(root=token),
        created_at=kwargs.pop("created_at", NOW),
        expires_at=NOW + timedelta(days=7),
        **kwargs,
    )


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_token_must_be_unique(self):
        repo = InMemoryInvitationRepository()
        await repo.create(make_invitation("same-token"))

        with pytest.raises(ConflictError):
            await repo.create(make_invitation("same-token"))

    @pytest.mark.asyncio
    async def test_lookup_by_token(self):
        repo = InMemoryInvitationRepository()
        invitation = make_invitation()
        await repo.create(invitation)

        assert await repo.find_by_token(invitation.token) == invitation
        assert await repo.find_by_token(InvitationToken(root="other")) is None


class TestUpdateStatus:
    """Tests for update_status method."""

    @pytest.mark.asyncio
    async def test_accept_records_acceptor(self):
        # Arrange
        repo = InMemoryInvitationRepository()
        invitation = make_invitation()
        await repo.create(invitation)
        user_id = UserId(uuid4())

        # Act
        updated = await repo.update_status(
            invitation.id, InvitationStatus.ACCEPTED, accepted_by=user_id
        )

        # Assert
        assert updated.status == InvitationStatus.ACCEPTED
        assert updated.accepted_by_user_id == user_id
        assert updated.accepted_at is not None
        assert await repo.find_by_id(invitation.id) == updated

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "first,second",
        [
            (InvitationStatus.ACCEPTED, InvitationStatus.ACCEPTED),
            (InvitationStatus.ACCEPTED, InvitationStatus.EXPIRED),
            (InvitationStatus.EXPIRED, InvitationStatus.ACCEPTED),
            (InvitationStatus.EXPIRED, InvitationStatus.EXPIRED),
        ],
    )
    async def test_terminal_states_are_final(self, first, second):
        """Once resolved, an invitation never changes status again."""
        # Arrange
        repo = InMemoryInvitationRepository()
        invitation = make_invitation()
        await repo.create(invitation)
        await repo.update_status(invitation.id, first, accepted_by=UserId(uuid4()))

        # Act & Assert
        with pytest.raises(InvalidTransitionError) as exc_info:
            await repo.update_status(invitation.id, second, accepted_by=UserId(uuid4()))

        assert exc_info.value.current == first.value
        assert (await repo.find_by_id(invitation.id)).status == first

    @pytest.mark.asyncio
    async def test_pending_to_pending_rejected(self):
        repo = InMemoryInvitationRepository()
        invitation = make_invitation()
        await repo.create(invitation)

        with pytest.raises(InvalidTransitionError):
            await repo.update_status(invitation.id, InvitationStatus.PENDING)

    @pytest.mark.asyncio
    async def test_unknown_invitation(self):
        repo = InMemoryInvitationRepository()

        with pytest.raises(NotFoundError):
            await repo.update_status(
                InvitationId(uuid4()), InvitationStatus.EXPIRED
            )


class TestListByBag:
    """Tests for list_by_bag method."""

    @pytest.mark.asyncio
    async def test_newest_first_and_scoped_to_bag(self):
        # Arrange
        repo = InMemoryInvitationRepository()
        bag_id = BagId(uuid4())
        older = make_invitation("older", bag_id=bag_id, created_at=NOW)
        newer = make_invitation(
            "newer", bag_id=bag_id, created_at=NOW + timedelta(hours=1)
        )
        for invitation in (older, newer, make_invitation("elsewhere")):
            await repo.create(invitation)

        # Act
        invitations = await repo.list_by_bag(bag_id)

        # Assert
        assert [i.token.root for i in invitations] == ["newer", "older"]
