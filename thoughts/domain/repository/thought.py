"""Thought repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from thoughts.domain.model.thought import Thought
from thoughts.domain.value import ThoughtId


class ThoughtRepository(ABC):
    """Repository for the Thought aggregate.

    Stores each thought as one record holding its nested replies; replies
    are not separately addressable. Implementations live in the
    persistence layer and are interchangeable.
    """

    @abstractmethod
    async def find_by_id(self, thought_id: ThoughtId) -> Optional[Thought]:
        """Find a thought by ID.

        Args:
            thought_id: The thought's unique identifier

        Returns:
            The thought if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Thought]:
        """Find all live thoughts.

        Returns:
            All thoughts in storage order (insertion order). Ranking is
            applied by the domain service, not here.
        """
        pass

    @abstractmethod
    async def save(self, thought: Thought) -> Thought:
        """Save a thought (create or replace).

        Args:
            thought: The thought to save, including its replies

        Returns:
            The saved thought
        """
        pass

    @abstractmethod
    async def delete(self, thought_id: ThoughtId) -> None:
        """Delete a thought and its replies (hard delete).

        Deleting an unknown ID is a no-op.

        Args:
            thought_id: The thought ID to delete
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Delete every thought."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make every change saved so far visible to other readers.

        ThoughtService calls this before releasing its write lock, so the
        next read-modify-write step sees the previous one.
        """
        pass
