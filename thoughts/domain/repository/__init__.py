"""Repository interfaces for the thought board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from thoughts.domain.repository.thought import ThoughtRepository

__all__ = [
    "ThoughtRepository",
]
