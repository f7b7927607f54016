"""Integration tests for PostgresInvitationRepository.

Run against a migrated database by exporting ``DATABASE__URL``; the tests
are skipped otherwise.
"""

import os
from datetime import timedelta
from uuid import uuid4

import pytest

from holding.domain.error import ConflictError, InvalidTransitionError
from holding.domain.model import Bag, Invitation, User
from holding.domain.model.common import utcnow
from holding.domain.repository import (
    BagRepository,
    InvitationRepository,
    UserRepository,
)
from holding.domain.value import (
    BagId,
    Email,
    Handle,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def _seed(integration_env) -> tuple[BagId, UserId]:
    user_repo = await integration_env.get(UserRepository)
    bag_repo = await integration_env.get(BagRepository)

    suffix = uuid4().hex[:12]
    user = await user_repo.save(
        User(
            id=UserId(uuid4()),
            handle=Handle(f"user-{suffix}"),
            email=Email(f"{suffix}@example.com"),
            password_hash="not-a-real-hash",
        )
    )
    bag = await bag_repo.save(
        Bag(id=BagId(uuid4()), name="Integration bag", owner_id=user.id)
    )
    return bag.id, user.id


def _invitation(bag_id: BagId, inviter_id: UserId) -> Invitation:
    now = utcnow()
    return Invitation(
        id=InvitationId(uuid4()),
        bag_id=bag_id,
        inviter_id=inviter_id,
        token=InvitationToken(root=f"it-{uuid4().hex}"),
        created_at=now,
        expires_at=now + timedelta(hours=1),
    )


class TestInvitationRepositoryIntegration:
    """Round trips and compare-and-set against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_find_by_token(self, integration_env):
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        bag_id, user_id = await _seed(integration_env)
        invitation = _invitation(bag_id, user_id)
        await repo.create(invitation)

        # Act
        found = await repo.find_by_token(invitation.token)

        # Assert
        assert found is not None
        assert found.id == invitation.id
        assert found.token == invitation.token
        assert found.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_duplicate_token_conflicts(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        bag_id, user_id = await _seed(integration_env)
        invitation = _invitation(bag_id, user_id)
        await repo.create(invitation)

        with pytest.raises(ConflictError):
            await repo.create(
                invitation.model_copy(update={"id": InvitationId(uuid4())})
            )

    @pytest.mark.asyncio
    async def test_accept_only_once(self, integration_env):
        """The conditional update refuses to resolve an invitation twice."""
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        bag_id, user_id = await _seed(integration_env)
        invitation = _invitation(bag_id, user_id)
        await repo.create(invitation)

        # Act
        accepted = await repo.update_status(
            invitation.id, InvitationStatus.ACCEPTED, accepted_by=user_id
        )

        # Assert
        assert accepted.status == InvitationStatus.ACCEPTED
        assert accepted.accepted_by_user_id == user_id
        with pytest.raises(InvalidTransitionError) as exc_info:
            await repo.update_status(invitation.id, InvitationStatus.EXPIRED)
        assert exc_info.value.current == InvitationStatus.ACCEPTED.value
