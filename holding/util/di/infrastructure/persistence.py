"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from holding.config import Settings
from holding.domain.repository import (
    AccessGrantRepository,
    BagItemRepository,
    BagRepository,
    InvitationRepository,
    UserRepository,
)
from holding.persistence.database import (
    AfterCommit,
    create_engine,
    create_session_factory,
)
from holding.persistence.repository import (
    PostgresAccessGrantRepository,
    PostgresBagItemRepository,
    PostgresBagRepository,
    PostgresInvitationRepository,
    PostgresUserRepository,
)
from holding.util.di.base import ProviderBase
from holding.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_after_commit(self) -> AsyncIterator[AfterCommit]:
        """Provide the post-commit callbacks for the request.

        Requests that never open a session still run their callbacks when
        they finish cleanly.
        """
        after_commit = AfterCommit()
        exc = yield after_commit
        if exc is None:
            await after_commit.run()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Every repository in a request shares this session, so an invitation
        status change and the grant it produces commit or roll back together.
        The container sends the request's exception, if any, back into this
        generator; post-commit callbacks run only after a successful commit.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is not None:
                logfire.warn(
                    "Session rollback",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                await session.rollback()
                after_commit.discard()
                return

            await session.commit()
            await after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_bag_repository(self, session: AsyncSession) -> BagRepository:
        """Provide Bag repository."""
        return PostgresBagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_grant_repository(
        self, session: AsyncSession
    ) -> AccessGrantRepository:
        """Provide AccessGrant repository."""
        return PostgresAccessGrantRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_bag_item_repository(self, session: AsyncSession) -> BagItemRepository:
        """Provide BagItem repository."""
        return PostgresBagItemRepository(session)
