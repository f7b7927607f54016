"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from holding.domain.repository import (
    AccessGrantRepository,
    BagItemRepository,
    BagRepository,
    InvitationRepository,
    UserRepository,
)
from holding.persistence.database import AfterCommit
from holding.persistence.repository.inmemory import (
    InMemoryAccessGrantRepository,
    InMemoryBagItemRepository,
    InMemoryBagRepository,
    InMemoryInvitationRepository,
    InMemoryUserRepository,
)
from holding.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so every request against one container sees
    the same data. Each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide(scope=Scope.REQUEST)
    async def get_after_commit(self) -> AsyncIterator[AfterCommit]:
        """In-memory writes are visible at once; callbacks run as the request ends."""
        after_commit = AfterCommit()
        exc = yield after_commit
        if exc is None:
            await after_commit.run()

    @provide
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide
    def get_bag_repository(self) -> BagRepository:
        """Provide in-memory bag repository."""
        return InMemoryBagRepository()

    @provide
    def get_access_grant_repository(self) -> AccessGrantRepository:
        """Provide in-memory access grant repository."""
        return InMemoryAccessGrantRepository()

    @provide
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository()

    @provide
    def get_bag_item_repository(self) -> BagItemRepository:
        """Provide in-memory bag item repository."""
        return InMemoryBagItemRepository()
