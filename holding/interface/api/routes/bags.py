"""Bag routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from holding.application.usecase.bag import (
    BagResponse,
    CreateBagRequest,
    CreateBagUseCase,
    GetBagRequest,
    GetBagUseCase,
    ListBagsRequest,
    ListBagsResponse,
    ListBagsUseCase,
    ListMembersRequest,
    ListMembersResponse,
    ListMembersUseCase,
    RemoveMemberRequest,
    RemoveMemberUseCase,
)
from holding.domain.service import JWTService
from holding.interface.api.auth import authenticate

router = APIRouter(prefix="/bags", tags=["bags"], route_class=DishkaRoute)


class CreateBagAPIRequest(BaseModel):
    """API request for creating a bag."""

    name: str
    description: str | None = None


@router.post("", response_model=BagResponse, status_code=status.HTTP_201_CREATED)
async def create_bag(
    request: CreateBagAPIRequest,
    create_bag_use_case: FromDishka[CreateBagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> BagResponse:
    """Create a bag owned by the caller."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await create_bag_use_case.execute(
        CreateBagRequest(
            user_id=payload.user_id,
            name=request.name,
            description=request.description,
        )
    )


@router.get("", response_model=ListBagsResponse)
async def list_bags(
    list_bags_use_case: FromDishka[ListBagsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListBagsResponse:
    """List the bags the caller owns or belongs to."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await list_bags_use_case.execute(ListBagsRequest(user_id=payload.user_id))


@router.get("/{bag_id}", response_model=BagResponse)
async def get_bag(
    bag_id: UUID,
    get_bag_use_case: FromDishka[GetBagUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> BagResponse:
    """Get one bag."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await get_bag_use_case.execute(
        GetBagRequest(bag_id=str(bag_id), user_id=payload.user_id)
    )


@router.get("/{bag_id}/members", response_model=ListMembersResponse)
async def list_members(
    bag_id: UUID,
    list_members_use_case: FromDishka[ListMembersUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ListMembersResponse:
    """List who has access to a bag."""
    payload = authenticate(jwt_service, authorization, auth_token)
    return await list_members_use_case.execute(
        ListMembersRequest(bag_id=str(bag_id), user_id=payload.user_id)
    )


@router.delete("/{bag_id}/members/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_member(
    bag_id: UUID,
    member_id: UUID,
    remove_member_use_case: FromDishka[RemoveMemberUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Revoke a member's access. Owner only."""
    payload = authenticate(jwt_service, authorization, auth_token)
    await remove_member_use_case.execute(
        RemoveMemberRequest(
            bag_id=str(bag_id), user_id=payload.user_id, member_id=str(member_id)
        )
    )
