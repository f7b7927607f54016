"""Tests for the request-scoped database session."""

from uuid import uuid4

import pytest
from dishka import Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from holding.config import Settings
from holding.domain.error import ExpiredError
from holding.persistence.database import AfterCommit
from holding.util.di import ProdConfigProvider
from holding.util.di.infrastructure.persistence import ProdPersistenceProvider


class FakeSession:
    """Stands in for AsyncSession and records how the request ended."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.calls.append("close")

    async def commit(self) -> None:
        self.calls.append("commit")

    async def rollback(self) -> None:
        self.calls.append("rollback")


class FakeSessionPersistenceProvider(ProdPersistenceProvider):
    """Production persistence wiring with the database swapped out."""

    def __init__(self, session: FakeSession) -> None:
        super().__init__()
        self.fake_session = session

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: self.fake_session


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def container(session):
    return make_async_container(
        ProdConfigProvider(),
        FakeSessionPersistenceProvider(session),
        context={Settings: Settings()},
    )


class TestRequestSession:
    """The session commits clean requests and rolls back failed ones."""

    @pytest.mark.asyncio
    async def test_clean_request_commits(self, container, session):
        # Act
        async with container() as request_container:
            await request_container.get(AsyncSession)

        # Assert
        assert session.calls == ["commit", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_failed_request_rolls_back(self, container, session):
        # Act
        with pytest.raises(ExpiredError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise ExpiredError(str(uuid4()))

        # Assert
        assert session.calls == ["rollback", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_callbacks_run_after_commit(self, container, session):
        # Arrange
        async def record():
            session.calls.append("callback")

        # Act
        async with container() as request_container:
            await request_container.get(AsyncSession)
            after_commit = await request_container.get(AfterCommit)
            after_commit.register(record)

        # Assert
        assert session.calls == ["commit", "callback", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_callbacks_dropped_on_rollback(self, container, session):
        # Arrange
        async def record():
            session.calls.append("callback")

        # Act
        with pytest.raises(ExpiredError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                after_commit = await request_container.get(AfterCommit)
                after_commit.register(record)
                raise ExpiredError(str(uuid4()))

        # Assert
        assert session.calls == ["rollback", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_callbacks_run_without_a_session(self, container, session):
        # Arrange
        async def record():
            session.calls.append("callback")

        # Act
        async with container() as request_container:
            after_commit = await request_container.get(AfterCommit)
            after_commit.register(record)

        # Assert
        assert session.calls == ["callback"]
        await container.close()
