"""In-memory thought repository."""

from typing import Optional

from thoughts.domain.model import Thought
from thoughts.domain.repository.thought import ThoughtRepository
from thoughts.domain.value import ThoughtId


class InMemoryThoughtRepository(ThoughtRepository):
    """In-memory implementation of ThoughtRepository.

    Used by tests and by single-process deployments that don't need
    durability. Dict order gives insertion order; replacing an existing
    key keeps its position.
    """

    def __init__(self) -> None:
        self._thoughts: dict[ThoughtId, Thought] = {}

    async def find_by_id(self, thought_id: ThoughtId) -> Optional[Thought]:
        """Find a thought by ID."""
        return self._thoughts.get(thought_id)

    async def find_all(self) -> list[Thought]:
        """Find all thoughts in insertion order."""
        return list(self._thoughts.values())

    async def save(self, thought: Thought) -> Thought:
        """Save or update a thought."""
        self._thoughts[thought.id] = thought
        return thought

    async def delete(self, thought_id: ThoughtId) -> None:
        """Delete a thought."""
        self._thoughts.pop(thought_id, None)

    async def delete_all(self) -> None:
        """Delete every thought."""
        self._thoughts.clear()

    async def commit(self) -> None:
        """Saves are visible immediately; nothing to do."""
