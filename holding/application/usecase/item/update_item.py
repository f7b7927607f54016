"""Update item use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.application.usecase.item.add_item import ItemResponse
from holding.domain.service import BagItemService
from holding.domain.value import BagId, BagItemId, UserId


class UpdateItemRequest(BaseModel):
    """Update item request. Omitted fields are left unchanged."""

    bag_id: str
    item_id: str
    user_id: str  # From auth
    name: str | None = None
    quantity: int | None = None
    notes: str | None = None


class UpdateItemUseCase(BaseUseCase[UpdateItemRequest, ItemResponse]):
    """Use case for changing an item."""

    def __init__(self, bag_item_service: BagItemService) -> None:
        self.bag_item_service = bag_item_service

    async def execute(self, request: UpdateItemRequest) -> ItemResponse:
        item = await self.bag_item_service.update_item(
            bag_id=BagId(UUID(request.bag_id)),
            item_id=BagItemId(UUID(request.item_id)),
            user_id=UserId(UUID(request.user_id)),
            name=request.name,
            quantity=request.quantity,
            notes=request.notes,
        )
        return ItemResponse.from_item(item)
