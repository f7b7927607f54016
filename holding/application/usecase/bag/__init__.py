"""Bag use cases."""

from holding.application.usecase.bag.create_bag import (
    BagResponse,
    CreateBagRequest,
    CreateBagUseCase,
)
from holding.application.usecase.bag.get_bag import GetBagRequest, GetBagUseCase
from holding.application.usecase.bag.list_bags import (
    ListBagsRequest,
    ListBagsResponse,
    ListBagsUseCase,
)
from holding.application.usecase.bag.list_members import (
    ListMembersRequest,
    ListMembersResponse,
    ListMembersUseCase,
    MemberItem,
)
from holding.application.usecase.bag.remove_member import (
    RemoveMemberRequest,
    RemoveMemberUseCase,
)

__all__ = [
    "BagResponse",
    "CreateBagRequest",
    "CreateBagUseCase",
    "GetBagRequest",
    "GetBagUseCase",
    "ListBagsRequest",
    "ListBagsResponse",
    "ListBagsUseCase",
    "ListMembersRequest",
    "ListMembersResponse",
    "ListMembersUseCase",
    "MemberItem",
    "RemoveMemberRequest",
    "RemoveMemberUseCase",
]
