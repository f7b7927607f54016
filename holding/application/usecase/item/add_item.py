"""Add item use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.model import BagItem
from holding.domain.service import BagItemService
from holding.domain.value import BagId, UserId


class AddItemRequest(BaseModel):
    """Add item request."""

    bag_id: str
    user_id: str  # From auth
    name: str
    quantity: int = 1
    notes: str | None = None


class ItemResponse(BaseModel):
    """An item in a bag."""

    item_id: str
    bag_id: str
    name: str
    quantity: int
    notes: str | None
    created_by: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_item(cls, item: BagItem) -> "ItemResponse":
        return cls(
            item_id=str(item.id),
            bag_id=str(item.bag_id),
            name=item.name,
            quantity=item.quantity,
            notes=item.notes,
            created_by=str(item.created_by),
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class AddItemUseCase(BaseUseCase[AddItemRequest, ItemResponse]):
    """Use case for putting an item into a bag."""

    def __init__(self, bag_item_service: BagItemService) -> None:
        self.bag_item_service = bag_item_service

    async def execute(self, request: AddItemRequest) -> ItemResponse:
        item = await self.bag_item_service.add_item(
            bag_id=BagId(UUID(request.bag_id)),
            user_id=UserId(UUID(request.user_id)),
            name=request.name,
            quantity=request.quantity,
            notes=request.notes,
        )
        return ItemResponse.from_item(item)
