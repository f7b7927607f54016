"""Mock providers for testing."""

from .container import build_test_container
from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider

__all__ = [
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "build_test_container",
]
