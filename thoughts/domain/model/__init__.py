"""Domain model entities for the thought board."""

from thoughts.domain.model.reply import Reply
from thoughts.domain.model.thought import Thought

__all__ = [
    "Thought",
    "Reply",
]
