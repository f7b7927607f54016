"""Bag item routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from holding.application.usecase.item import (
    AddItemRequest,
    AddItemUseCase,
    ItemResponse,
    ListItemsRequest,
    ListItemsResponse,
    ListItemsUseCase,
    RemoveItemRequest,
    RemoveItemUseCase,
    UpdateItemRequest,
    UpdateItemUseCase,
)
from holding.domain.service import JWTService
from holding.interface.api.auth import authenticate

router = APIRouter(prefix="/bags/{bag_id}/items", tags=["items"], route_class=DishkaRoute)


class AddItemAPIRequest(BaseModel):
    """API request for adding an item."""

    name: str
    quantity: int = 1
    notes: str | None = None


class UpdateItemAPIRequest(BaseModel):
    """API request for updating an item. Omitted fields stay as they are."""

    name: str | None = None
    quantity: int | None = None
    notes: str | None = None


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    bag_id: UUID,
    request: AddItemAPIRequest,
    add_item_use_case: FromDishka[AddItemUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ItemResponse:
    """Put an item into a bag."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await add_item_use_case.execute(
        AddItemRequest(
            bag_id=str(bag_id),
            user_id=payload.user_id,
            name=request.name,
            quantity=request.quantity,
            notes=request.notes,
        )
    )


@router.get("", response_model=ListItemsResponse)
async def list_items(
    bag_id: UUID,
    list_items_use_case: FromDishka[ListItemsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListItemsResponse:
    """List a bag's items."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await list_items_use_case.execute(
        ListItemsRequest(bag_id=str(bag_id), user_id=payload.user_id)
    )


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(
    bag_id: UUID,
    item_id: UUID,
    request: UpdateItemAPIRequest,
    update_item_use_case: FromDishka[UpdateItemUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ItemResponse:
    """Change an item."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await update_item_use_case.execute(
        UpdateItemRequest(
            bag_id=str(bag_id),
            item_id=str(item_id),
            user_id=payload.user_id,
            name=request.name,
            quantity=request.quantity,
            notes=request.notes,
        )
    )


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(
    bag_id: UUID,
    item_id: UUID,
    remove_item_use_case: FromDishka[RemoveItemUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Take an item out of a bag."""
    payload = authenticate(jwt_service, authorization, auth_token)
    await remove_item_use_case.execute(
        RemoveItemRequest(
            bag_id=str(bag_id), item_id=str(item_id), user_id=payload.user_id
        )
    )
