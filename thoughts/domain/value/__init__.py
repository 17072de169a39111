"""Domain value objects for the thought board."""

from thoughts.domain.value.identifiers import ReplyId, ThoughtId
from thoughts.domain.value.types import VoteType

__all__ = [
    # Identifiers
    "ThoughtId",
    "ReplyId",
    # Types
    "VoteType",
]
