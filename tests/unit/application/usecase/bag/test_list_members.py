"""Tests for list members use case."""

import pytest

from holding.application.usecase.bag import ListMembersRequest, ListMembersUseCase
from holding.domain.error import ForbiddenError
from holding.domain.service import AccessService, BagService, UserService
from holding.domain.value import Role
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListMembersUseCase:
    """Tests for ListMembersUseCase."""

    @pytest.mark.asyncio
    async def test_members_listed_with_handles(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        bag_service = await unit_env.get(BagService)
        access_service = await unit_env.get(AccessService)
        use_case = ListMembersUseCase(bag_service, user_service)

        owner = await user_service.register("bilbo", "bilbo@shire.org", "there-and-back")
        member = await user_service.register("frodo", "frodo@shire.org", "mithril-vest")
        bag = await bag_service.create_bag(owner.id, "Camping gear")
        await access_service.grant(bag.id, member.id, Role.MEMBER)

        # Act
        response = await use_case.execute(
            ListMembersRequest(bag_id=str(bag.id), user_id=str(member.id))
        )

        # Assert
        roles = {m.handle: m.role for m in response.members}
        assert roles == {"bilbo": Role.OWNER, "frodo": Role.MEMBER}

    @pytest.mark.asyncio
    async def test_outsider_forbidden(self, unit_env):
        user_service = await unit_env.get(UserService)
        bag_service = await unit_env.get(BagService)
        use_case = ListMembersUseCase(bag_service, user_service)
        owner = await user_service.register("bilbo", "bilbo@shire.org", "there-and-back")
        outsider = await user_service.register("gollum", "gollum@misty.org", "my-precious")
        bag = await bag_service.create_bag(owner.id, "Camping gear")

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                ListMembersRequest(bag_id=str(bag.id), user_id=str(outsider.id))
            )
