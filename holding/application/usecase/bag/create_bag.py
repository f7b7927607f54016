"""Create bag use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.base import BaseUseCase
from holding.domain.service import BagService
from holding.domain.value import Role, UserId


class CreateBagRequest(BaseModel):
    """Create bag request."""

    user_id: str  # From auth
    name: str
    description: str | None = None


class BagResponse(BaseModel):
    """A bag as seen by one of its members."""

    bag_id: str
    name: str
    description: str | None
    owner_id: str
    role: Role
    created_at: datetime


class CreateBagUseCase(BaseUseCase[CreateBagRequest, BagResponse]):
    """Use case for creating a bag."""

    def __init__(self, bag_service: BagService) -> None:
        self.bag_service = bag_service

    async def execute(self, request: CreateBagRequest) -> BagResponse:
        """Create a bag owned by the requester.

        Raises:
            ValidationError: If the name is empty or too long
        """
        bag = await self.bag_service.create_bag(
            owner_id=UserId(UUID(request.user_id)),
            name=request.name,
            description=request.description,
        )
        return BagResponse(
            bag_id=str(bag.id),
            name=bag.name,
            description=bag.description,
            owner_id=str(bag.owner_id),
            role=Role.OWNER,
            created_at=bag.created_at,
        )
