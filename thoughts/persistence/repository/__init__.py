"""SQL repository implementations."""

from thoughts.persistence.repository.thought import SqlThoughtRepository

__all__ = [
    "SqlThoughtRepository",
]
