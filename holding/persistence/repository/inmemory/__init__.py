"""In-memory repository implementations for testing."""

from .access_grant import InMemoryAccessGrantRepository
from .bag import InMemoryBagRepository
from .bag_item import InMemoryBagItemRepository
from .invitation import InMemoryInvitationRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAccessGrantRepository",
    "InMemoryBagRepository",
    "InMemoryBagItemRepository",
    "InMemoryInvitationRepository",
    "InMemoryUserRepository",
]
