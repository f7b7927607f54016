"""Unit tests for BagItemService."""

from uuid import uuid4

import pytest

from holding.adapter.realtime import RecordingNotificationSink
from holding.domain.error import ForbiddenError, NotFoundError, ValidationError
from holding.domain.service import AccessService, BagItemService, BagService
from holding.domain.value import BagEventType, BagItemId, Role, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _bag_with_member(unit_env):
    bag_service = await unit_env.get(BagService)
    access_service = await unit_env.get(AccessService)
    owner_id, member_id = UserId(uuid4()), UserId(uuid4())
    bag = await bag_service.create_bag(owner_id, "Camping gear")
    await access_service.grant(bag.id, member_id, Role.MEMBER)
    return bag, owner_id, member_id


class TestAddItem:
    """Tests for add_item method."""

    @pytest.mark.asyncio
    async def test_member_adds_item(self, unit_env):
        """Members may add items and every addition is broadcast once."""
        # Arrange
        item_service = await unit_env.get(BagItemService)
        sink = await unit_env.get(RecordingNotificationSink)
        bag, _, member_id = await _bag_with_member(unit_env)

        # Act
        item = await item_service.add_item(bag.id, member_id, "Tent", quantity=2)

        # Assert
        assert item.bag_id == bag.id
        assert item.created_by == member_id
        assert await item_service.list_items(bag.id, member_id) == [item]
        events = [e for e in sink.events if e.type == BagEventType.ITEM_ADDED]
        assert len(events) == 1
        assert events[0].payload["item_id"] == str(item.id)
        assert events[0].actor_id == member_id

    @pytest.mark.asyncio
    async def test_negative_quantity_rejected(self, unit_env):
        item_service = await unit_env.get(BagItemService)
        bag, owner_id, _ = await _bag_with_member(unit_env)

        with pytest.raises(ValidationError):
            await item_service.add_item(bag.id, owner_id, "Tent", quantity=-1)

    @pytest.mark.asyncio
    async def test_empty_name_rejected(self, unit_env):
        item_service = await unit_env.get(BagItemService)
        bag, owner_id, _ = await _bag_with_member(unit_env)

        with pytest.raises(ValidationError):
            await item_service.add_item(bag.id, owner_id, "")

    @pytest.mark.asyncio
    async def test_outsider_cannot_add(self, unit_env):
        item_service = await unit_env.get(BagItemService)
        sink = await unit_env.get(RecordingNotificationSink)
        bag, _, _ = await _bag_with_member(unit_env)

        with pytest.raises(ForbiddenError):
            await item_service.add_item(bag.id, UserId(uuid4()), "Tent")

        assert [e for e in sink.events if e.type == BagEventType.ITEM_ADDED] == []


class TestUpdateItem:
    """Tests for update_item method."""

    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        # Arrange
        item_service = await unit_env.get(BagItemService)
        sink = await unit_env.get(RecordingNotificationSink)
        bag, owner_id, member_id = await _bag_with_member(unit_env)
        item = await item_service.add_item(bag.id, owner_id, "Tent", notes="Blue")

        # Act
        updated = await item_service.update_item(
            bag.id, item.id, member_id, quantity=0
        )

        # Assert
        assert updated.quantity == 0
        assert updated.name == "Tent"
        assert updated.notes == "Blue"
        assert len([e for e in sink.events if e.type == BagEventType.ITEM_UPDATED]) == 1

    @pytest.mark.asyncio
    async def test_negative_quantity_leaves_item_unchanged(self, unit_env):
        item_service = await unit_env.get(BagItemService)
        bag, owner_id, _ = await _bag_with_member(unit_env)
        item = await item_service.add_item(bag.id, owner_id, "Tent", quantity=3)

        with pytest.raises(ValidationError):
            await item_service.update_item(bag.id, item.id, owner_id, quantity=-5)

        assert (await item_service.list_items(bag.id, owner_id))[0].quantity == 3

    @pytest.mark.asyncio
    async def test_item_from_other_bag_not_found(self, unit_env):
        """An item id is only reachable through the bag that holds it."""
        # Arrange
        item_service = await unit_env.get(BagItemService)
        bag_service = await unit_env.get(BagService)
        bag, owner_id, _ = await _bag_with_member(unit_env)
        other_bag = await bag_service.create_bag(owner_id, "Kitchen")
        item = await item_service.add_item(other_bag.id, owner_id, "Pan")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await item_service.update_item(bag.id, item.id, owner_id, name="Pot")

    @pytest.mark.asyncio
    async def test_unknown_item(self, unit_env):
        item_service = await unit_env.get(BagItemService)
        bag, owner_id, _ = await _bag_with_member(unit_env)

        with pytest.raises(NotFoundError):
            await item_service.update_item(
                bag.id, BagItemId(uuid4()), owner_id, name="Pot"
            )


class TestRemoveItem:
    """Tests for remove_item method."""

    @pytest.mark.asyncio
    async def test_remove_item(self, unit_env):
        # Arrange
        item_service = await unit_env.get(BagItemService)
        sink = await unit_env.get(RecordingNotificationSink)
        bag, owner_id, member_id = await _bag_with_member(unit_env)
        item = await item_service.add_item(bag.id, owner_id, "Tent")

        # Act
        await item_service.remove_item(bag.id, item.id, member_id)

        # Assert
        assert await item_service.list_items(bag.id, owner_id) == []
        events = [e for e in sink.events if e.type == BagEventType.ITEM_REMOVED]
        assert len(events) == 1
        assert events[0].payload["name"] == "Tent"

    @pytest.mark.asyncio
    async def test_removed_member_loses_item_access(self, unit_env):
        # Arrange
        item_service = await unit_env.get(BagItemService)
        bag_service = await unit_env.get(BagService)
        bag, owner_id, member_id = await _bag_with_member(unit_env)
        item = await item_service.add_item(bag.id, owner_id, "Tent")
        await bag_service.remove_member(bag.id, owner_id, member_id)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await item_service.remove_item(bag.id, item.id, member_id)
