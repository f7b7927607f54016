"""Repository interfaces for Bag of Holding domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from holding.domain.repository.access_grant import AccessGrantRepository
from holding.domain.repository.bag import BagRepository
from holding.domain.repository.bag_item import BagItemRepository
from holding.domain.repository.invitation import InvitationRepository
from holding.domain.repository.user import UserRepository

__all__ = [
    "AccessGrantRepository",
    "BagRepository",
    "BagItemRepository",
    "InvitationRepository",
    "UserRepository",
]
