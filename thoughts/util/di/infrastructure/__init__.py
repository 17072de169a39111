"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .persistence import InMemoryPersistenceProvider  # noqa: F401
from .persistence import SqlPersistenceProvider  # noqa: F401

__all__ = [
    "InMemoryPersistenceProvider",
    "PersistenceProvider",
    "SqlPersistenceProvider",
]
