"""In-memory repository implementations."""

from .thought import InMemoryThoughtRepository

__all__ = [
    "InMemoryThoughtRepository",
]
