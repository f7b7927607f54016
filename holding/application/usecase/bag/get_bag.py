"""Get bag use case."""

from uuid import UUID

from pydantic import BaseModel

from holding.application.usecase.bag.create_bag import BagResponse
from holding.application.usecase.base import BaseUseCase
from holding.domain.service import AccessService, BagService
from holding.domain.value import BagId, Role, UserId


class GetBagRequest(BaseModel):
    """Get bag request."""

    bag_id: str
    user_id: str  # From auth


class GetBagUseCase(BaseUseCase[GetBagRequest, BagResponse]):
    """Use case for reading one bag."""

    def __init__(self, bag_service: BagService, access_service: AccessService) -> None:
        self.bag_service = bag_service
        self.access_service = access_service

    async def execute(self, request: GetBagRequest) -> BagResponse:
        """Get a bag with the requester's role on it.

        Raises:
            ForbiddenError: If the requester has no access
            NotFoundError: If the bag does not exist
        """
        bag_id = BagId(UUID(request.bag_id))
        user_id = UserId(UUID(request.user_id))

        bag = await self.bag_service.get_bag(bag_id, user_id)
        role = await self.access_service.get_role(bag_id, user_id)

        return BagResponse(
            bag_id=str(bag.id),
            name=bag.name,
            description=bag.description,
            owner_id=str(bag.owner_id),
            role=role or Role.MEMBER,
            created_at=bag.created_at,
        )
