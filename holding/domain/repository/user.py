"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from holding.domain.model.user import User
from holding.domain.value import Email, Handle, UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by handle."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            ConflictError: If the handle or email belongs to another user
        """
        pass
