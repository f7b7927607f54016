"""List bags use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.bag.create_bag import BagResponse
from holding.application.usecase.base import BaseUseCase
from holding.domain.service import AccessService, BagService
from holding.domain.value import Role, UserId


class ListBagsRequest(BaseModel):
    """List bags request."""

    user_id: str  # From auth


class ListBagsResponse(BaseModel):
    """List bags response."""

    bags: list[BagResponse]


class ListBagsUseCase(BaseUseCase[ListBagsRequest, ListBagsResponse]):
    """Use case for listing the bags a user can open."""

    def __init__(self, bag_service: BagService, access_service: AccessService) -> None:
        self.bag_service = bag_service
        self.access_service = access_service

    async def execute(self, request: ListBagsRequest) -> ListBagsResponse:
        user_id = UserId(UUID(request.user_id))
        bags = await self.bag_service.list_bags(user_id)

        items = []
        for bag in bags:
            role = await self.access_service.get_role(bag.id, user_id)
            items.append(
                BagResponse(
                    bag_id=str(bag.id),
                    name=bag.name,
                    description=bag.description,
                    owner_id=str(bag.owner_id),
                    role=role or Role.MEMBER,
                    created_at=bag.created_at,
                )
            )
        return ListBagsResponse(bags=items)
