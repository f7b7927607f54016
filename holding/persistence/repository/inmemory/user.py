"""In-memory user repository for testing."""

from typing import Optional

from holding.domain.error import ConflictError
from holding.domain.model.user import User
from holding.domain.repository.user import UserRepository
from holding.domain.value import Email, Handle, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            ConflictError: If the handle or email belongs to another user
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.handle == user.handle or other.email == user.email
            ):
                raise ConflictError("Handle or email is already registered")
        self._users[user.id] = user
        return user
