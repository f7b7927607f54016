"""List items use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.application.usecase.item.add_item import ItemResponse
from holding.domain.service import BagItemService
from holding.domain.value import BagId, UserId


class ListItemsRequest(BaseModel):
    """List items request."""

    bag_id: str
    user_id: str  # From auth


class ListItemsResponse(BaseModel):
    """List items response."""

    items: list[ItemResponse]


class ListItemsUseCase(BaseUseCase[ListItemsRequest, ListItemsResponse]):
    """Use case for listing a bag's contents."""

    def __init__(self, bag_item_service: BagItemService) -> None:
        self.bag_item_service = bag_item_service

    async def execute(self, request: ListItemsRequest) -> ListItemsResponse:
        items = await self.bag_item_service.list_items(
            BagId(UUID(request.bag_id)), UserId(UUID(request.user_id))
        )
        return ListItemsResponse(items=[ItemResponse.from_item(i) for i in items])
