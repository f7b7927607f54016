"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is reachable with the settings loaded
from environment variables (configure via .env or export).
"""

import pytest_asyncio

from holding.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the requested
    components unmocked and yields a request-scoped container for service
    access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_bag(unit_env):
            bag_service = await unit_env.get(BagService)
            bag = await bag_service.create_bag(owner_id, "Camping gear")
            assert bag.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
