"""Dependency injection module."""

from typing import Type

from holding.util.di.application import ProdApplicationProvider
from holding.util.di.base import Component, ProviderBase
from holding.util.di.core import ProdConfigProvider
from holding.util.di.domain import ProdDomainProvider
from holding.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
    RealtimeProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    RealtimeProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for ``base``.

    Bases without subclasses are concrete and used directly. Bases with
    subclasses are swappable components; the subclass is picked by its
    ``__is_mock__`` flag.

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "RealtimeProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
]
