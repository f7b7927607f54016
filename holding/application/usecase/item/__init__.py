"""Bag item use cases."""

from holding.application.usecase.item.add_item import (
    AddItemRequest,
    AddItemUseCase,
    ItemResponse,
)
from holding.application.usecase.item.list_items import (
    ListItemsRequest,
    ListItemsResponse,
    ListItemsUseCase,
)
from holding.application.usecase.item.remove_item import (
    RemoveItemRequest,
    RemoveItemUseCase,
)
from holding.application.usecase.item.update_item import (
    UpdateItemRequest,
    UpdateItemUseCase,
)

__all__ = [
    "AddItemRequest",
    "AddItemUseCase",
    "ItemResponse",
    "ListItemsRequest",
    "ListItemsResponse",
    "ListItemsUseCase",
    "RemoveItemRequest",
    "RemoveItemUseCase",
    "UpdateItemRequest",
    "UpdateItemUseCase",
]
