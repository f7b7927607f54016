"""Bag item domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from holding.domain.error import NotFoundError, ValidationError
from holding.domain.model.bag_item import BagItem
from holding.domain.model.common import utcnow
from holding.domain.repository import BagItemRepository
from holding.domain.value import BagEventType, BagId, BagItemId, Role, UserId

from .access_service import AccessService
from .base import Service
from .notification import BagEvent, NotificationSink, publish


class BagItemService(Service):
    """Domain service for the items inside a bag.

    Any member may change items. Every change is broadcast to the bag once
    it has been persisted.
    """

    def __init__(
        self,
        bag_item_repository: BagItemRepository,
        access_service: AccessService,
        notification_sink: NotificationSink,
    ) -> None:
        self.bag_item_repository = bag_item_repository
        self.access_service = access_service
        self.notification_sink = notification_sink

    async def add_item(
        self,
        bag_id: BagId,
        user_id: UserId,
        name: str,
        quantity: int = 1,
        notes: Optional[str] = None,
    ) -> BagItem:
        """Put an item into a bag.

        Raises:
            ForbiddenError: If the user has no access to the bag
            ValidationError: If quantity is negative
        """
        with logfire.span(
            "bag_item_service.add_item", bag_id=str(bag_id), user_id=str(user_id)
        ):
            await self.access_service.require_role(bag_id, user_id, Role.MEMBER)
            _check_quantity(quantity)

            try:
                item = BagItem(
                    id=BagItemId(uuid4()),
                    bag_id=bag_id,
                    name=name,
                    quantity=quantity,
                    notes=notes,
                    created_by=user_id,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e
            saved = await self.bag_item_repository.save(item)
            await self._announce(BagEventType.ITEM_ADDED, saved, user_id)
            return saved

    async def update_item(
        self,
        bag_id: BagId,
        item_id: BagItemId,
        user_id: UserId,
        name: Optional[str] = None,
        quantity: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> BagItem:
        """Change an item's name, quantity or notes.

        Raises:
            ForbiddenError: If the user has no access to the bag
            NotFoundError: If the item is not in this bag
            ValidationError: If quantity is negative
        """
        with logfire.span(
            "bag_item_service.update_item",
            bag_id=str(bag_id),
            item_id=str(item_id),
            user_id=str(user_id),
        ):
            await self.access_service.require_role(bag_id, user_id, Role.MEMBER)
            item = await self._get_item(bag_id, item_id)

            update: dict = {"updated_at": utcnow()}
            if name is not None:
                update["name"] = name
            if quantity is not None:
                _check_quantity(quantity)
                update["quantity"] = quantity
            if notes is not None:
                update["notes"] = notes

            # Re-validate: model_copy skips field constraints
            try:
                updated = BagItem.model_validate({**item.model_dump(), **update})
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e
            saved = await self.bag_item_repository.save(updated)
            await self._announce(BagEventType.ITEM_UPDATED, saved, user_id)
            return saved

    async def remove_item(
        self, bag_id: BagId, item_id: BagItemId, user_id: UserId
    ) -> None:
        """Take an item out of a bag.

        Raises:
            ForbiddenError: If the user has no access to the bag
            NotFoundError: If the item is not in this bag
        """
        with logfire.span(
            "bag_item_service.remove_item",
            bag_id=str(bag_id),
            item_id=str(item_id),
            user_id=str(user_id),
        ):
            await self.access_service.require_role(bag_id, user_id, Role.MEMBER)
            item = await self._get_item(bag_id, item_id)
            await self.bag_item_repository.delete(item.id)
            await self._announce(BagEventType.ITEM_REMOVED, item, user_id)

    async def list_items(self, bag_id: BagId, user_id: UserId) -> list[BagItem]:
        """List the items in a bag.

        Raises:
            ForbiddenError: If the user has no access to the bag
        """
        await self.access_service.require_role(bag_id, user_id, Role.MEMBER)
        return await self.bag_item_repository.list_by_bag(bag_id)

    async def _get_item(self, bag_id: BagId, item_id: BagItemId) -> BagItem:
        item = await self.bag_item_repository.find_by_id(item_id)
        if item is None or item.bag_id != bag_id:
            raise NotFoundError("BagItem", str(item_id))
        return item

    async def _announce(
        self, event_type: BagEventType, item: BagItem, actor_id: UserId
    ) -> None:
        logfire.info(
            "Bag item changed",
            event_type=event_type.value,
            bag_id=str(item.bag_id),
            item_id=str(item.id),
        )
        await publish(
            self.notification_sink,
            BagEvent(
                type=event_type,
                bag_id=item.bag_id,
                actor_id=actor_id,
                payload={
                    "item_id": str(item.id),
                    "name": item.name,
                    "quantity": item.quantity,
                },
            ),
        )


def _check_quantity(quantity: int) -> None:
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
