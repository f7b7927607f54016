"""Domain model entities for Bag of Holding."""

from holding.domain.model.access_grant import AccessGrant
from holding.domain.model.bag import Bag
from holding.domain.model.bag_item import BagItem
from holding.domain.model.invitation import Invitation
from holding.domain.model.user import User

__all__ = [
    "User",
    "Bag",
    "BagItem",
    "AccessGrant",
    "Invitation",
]
