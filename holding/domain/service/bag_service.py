"""Bag domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from holding.domain.error import ConflictError, NotFoundError, ValidationError
from holding.domain.model.access_grant import AccessGrant
from holding.domain.model.bag import Bag
from holding.domain.repository import BagRepository
from holding.domain.value import BagEventType, BagId, Role, UserId

from .access_service import AccessService
from .base import Service
from .notification import BagEvent, NotificationSink, publish


class BagService(Service):
    """Domain service for bag lifecycle and membership."""

    def __init__(
        self,
        bag_repository: BagRepository,
        access_service: AccessService,
        notification_sink: NotificationSink,
    ) -> None:
        """Initialize bag service.

        Args:
            bag_repository: Bag repository
            access_service: Access control service
            notification_sink: Bag broadcast target
        """
        self.bag_repository = bag_repository
        self.access_service = access_service
        self.notification_sink = notification_sink

    async def create_bag(
        self, owner_id: UserId, name: str, description: Optional[str] = None
    ) -> Bag:
        """Create a bag and make its creator the sole Owner.

        Args:
            owner_id: User creating the bag
            name: Bag name
            description: Optional description

        Returns:
            Created bag
        """
        with logfire.span("bag_service.create_bag", owner_id=str(owner_id)):
            try:
                bag = Bag(
                    id=BagId(uuid4()),
                    name=name,
                    description=description,
                    owner_id=owner_id,
                )
            except PydanticValidationError as e:
                raise ValidationError(str(e)) from e
            saved = await self.bag_repository.save(bag)
            await self.access_service.grant(saved.id, owner_id, Role.OWNER)
            logfire.info("Bag created", bag_id=str(saved.id), owner_id=str(owner_id))
            return saved

    async def get_bag(self, bag_id: BagId, user_id: UserId) -> Bag:
        """Get a bag the user has access to.

        Raises:
            ForbiddenError: If the user has no access to the bag
            NotFoundError: If the bag does not exist
        """
        await self.access_service.require_role(bag_id, user_id, Role.MEMBER)
        bag = await self.bag_repository.find_by_id(bag_id)
        if bag is None:
            raise NotFoundError("Bag", str(bag_id))
        return bag

    async def list_bags(self, user_id: UserId) -> list[Bag]:
        """List every bag the user owns or belongs to, newest first."""
        bag_ids = await self.access_service.list_bag_ids(user_id)
        if not bag_ids:
            return []
        return await self.bag_repository.find_by_ids(bag_ids)

    async def list_members(self, bag_id: BagId, user_id: UserId) -> list[AccessGrant]:
        """List a bag's grants for one of its members.

        Raises:
            ForbiddenError: If the user has no access to the bag
        """
        await self.access_service.require_role(bag_id, user_id, Role.MEMBER)
        return await self.access_service.list_members(bag_id)

    async def remove_member(
        self, bag_id: BagId, requester_id: UserId, member_id: UserId
    ) -> None:
        """Revoke a member's access.

        Raises:
            ForbiddenError: If the requester is not the Owner
            ConflictError: If the Owner tries to remove themselves
            NotFoundError: If the user is not a member
        """
        with logfire.span(
            "bag_service.remove_member",
            bag_id=str(bag_id),
            requester_id=str(requester_id),
            member_id=str(member_id),
        ):
            await self.access_service.require_role(bag_id, requester_id, Role.OWNER)
            role = await self.access_service.get_role(bag_id, member_id)
            if role is None:
                raise NotFoundError("Member", str(member_id))
            if role == Role.OWNER:
                raise ConflictError("The owner of a bag cannot be removed")

            await self.access_service.revoke(bag_id, member_id)
            await publish(
                self.notification_sink,
                BagEvent(
                    type=BagEventType.MEMBER_REMOVED,
                    bag_id=bag_id,
                    actor_id=requester_id,
                    payload={"user_id": str(member_id)},
                ),
            )
