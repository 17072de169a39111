"""Canonical display order for thoughts and replies.

Both are ranked the same way: net votes descending, then newest first.
Entries equal on both keys keep their storage order, so repeated reads
without intervening writes always return the same sequence.
"""

from datetime import datetime
from typing import Iterable, TypeVar

from thoughts.domain.model import Reply, Thought

T = TypeVar("T", Thought, Reply)


def rank_key(item: Thought | Reply) -> tuple[int, datetime]:
    """Sort key for descending rank order."""
    return (item.net_votes, item.created_at)


def rank(items: Iterable[T]) -> list[T]:
    """Return items in display order.

    sorted() is stable under reverse=True, which is what keeps ties in
    storage order.
    """
    return sorted(items, key=rank_key, reverse=True)


def with_ranked_replies(thought: Thought) -> Thought:
    """Return a copy of the thought with its replies in display order."""
    return thought.model_copy(update={"replies": rank(thought.replies)})


def rank_thoughts(thoughts: Iterable[Thought]) -> list[Thought]:
    """Rank thoughts and the replies inside each of them."""
    return rank(with_ranked_replies(t) for t in thoughts)
