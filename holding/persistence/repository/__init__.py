"""PostgreSQL repository implementations."""

from holding.persistence.repository.access_grant import PostgresAccessGrantRepository
from holding.persistence.repository.bag import PostgresBagRepository
from holding.persistence.repository.bag_item import PostgresBagItemRepository
from holding.persistence.repository.invitation import PostgresInvitationRepository
from holding.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAccessGrantRepository",
    "PostgresBagRepository",
    "PostgresBagItemRepository",
    "PostgresInvitationRepository",
    "PostgresUserRepository",
]
