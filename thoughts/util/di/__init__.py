"""Dependency injection module."""

from typing import Type

from thoughts.util.di.application import ProdApplicationProvider
from thoughts.util.di.base import Component, ProviderBase
from thoughts.util.di.core import ProdConfigProvider
from thoughts.util.di.domain import ProdDomainProvider
from thoughts.util.di.infrastructure import (
    InMemoryPersistenceProvider,
    PersistenceProvider,
    SqlPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (single implementation)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (swappable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], in_memory: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is swappable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Swappable component, select by __in_memory__ flag

    Args:
        base: Provider base class
        in_memory: Whether to use the in-memory implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__in_memory__", False) == in_memory),
        None,
    )

    if not impl:
        kind = "in-memory" if in_memory else "external"
        component_name = getattr(base, "__component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "PersistenceProvider",
    # Infrastructure implementations
    "InMemoryPersistenceProvider",
    "SqlPersistenceProvider",
]
