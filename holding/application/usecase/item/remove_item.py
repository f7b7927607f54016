"""Remove item use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.service import BagItemService
from holding.domain.value import BagId, BagItemId, UserId


class RemoveItemRequest(BaseModel):
    """Remove item request."""

    bag_id: str
    item_id: str
    user_id: str  # From auth


class RemoveItemUseCase(BaseUseCase[RemoveItemRequest, None]):
    """Use case for taking an item out of a bag."""

    def __init__(self, bag_item_service: BagItemService) -> None:
        self.bag_item_service = bag_item_service

    async def execute(self, request: RemoveItemRequest) -> None:
        await self.bag_item_service.remove_item(
            bag_id=BagId(UUID(request.bag_id)),
            item_id=BagItemId(UUID(request.item_id)),
            user_id=UserId(UUID(request.user_id)),
        )
