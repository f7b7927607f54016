"""Tests for accept invitation use case."""

from uuid import uuid4

import pytest

from holding.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationUseCase,
)
from holding.domain.error import AlreadyAcceptedError
from holding.domain.service import AccessService, BagService, InvitationService
from holding.domain.value import Role, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAcceptInvitationUseCase:
    """Tests for AcceptInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_accept_joins_bag_as_member(self, unit_env):
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        access_service = await unit_env.get(AccessService)
        bag_service = await unit_env.get(BagService)
        use_case = AcceptInvitationUseCase(invitation_service, access_service)

        owner_id, guest_id = UserId(uuid4()), UserId(uuid4())
        bag = await bag_service.create_bag(owner_id, "Camping gear")
        invitation = await invitation_service.create_invitation(bag.id, owner_id)

        # Act
        response = await use_case.execute(
            AcceptInvitationRequest(token=invitation.token.root, user_id=str(guest_id))
        )

        # Assert
        assert response.invitation_id == str(invitation.id)
        assert response.bag_id == str(bag.id)
        assert response.role == Role.MEMBER
        assert response.accepted_at is not None
        assert await access_service.get_role(bag.id, guest_id) == Role.MEMBER

    @pytest.mark.asyncio
    async def test_owner_accepting_reports_owner_role(self, unit_env):
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        access_service = await unit_env.get(AccessService)
        bag_service = await unit_env.get(BagService)
        use_case = AcceptInvitationUseCase(invitation_service, access_service)

        owner_id = UserId(uuid4())
        bag = await bag_service.create_bag(owner_id, "Camping gear")
        invitation = await invitation_service.create_invitation(bag.id, owner_id)

        # Act
        response = await use_case.execute(
            AcceptInvitationRequest(token=invitation.token.root, user_id=str(owner_id))
        )

        # Assert
        assert response.role == Role.OWNER

    @pytest.mark.asyncio
    async def test_token_is_single_use(self, unit_env):
        # Arrange
        invitation_service = await unit_env.get(InvitationService)
        access_service = await unit_env.get(AccessService)
        bag_service = await unit_env.get(BagService)
        use_case = AcceptInvitationUseCase(invitation_service, access_service)

        owner_id = UserId(uuid4())
        bag = await bag_service.create_bag(owner_id, "Camping gear")
        invitation = await invitation_service.create_invitation(bag.id, owner_id)
        await use_case.execute(
            AcceptInvitationRequest(token=invitation.token.root, user_id=str(uuid4()))
        )

        # Act & Assert
        with pytest.raises(AlreadyAcceptedError):
            await use_case.execute(
                AcceptInvitationRequest(
                    token=invitation.token.root, user_id=str(uuid4())
                )
            )
