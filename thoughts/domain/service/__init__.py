"""Domain services."""

from .base import Service
from .ranking import rank, rank_thoughts, with_ranked_replies
from .thought_service import (
    DELETION_THRESHOLD_DOWNVOTES,
    MAX_TEXT_LENGTH,
    ReplyVoteResult,
    ThoughtService,
    ThoughtVoteResult,
)

__all__ = [
    "DELETION_THRESHOLD_DOWNVOTES",
    "MAX_TEXT_LENGTH",
    "ReplyVoteResult",
    "Service",
    "ThoughtService",
    "ThoughtVoteResult",
    "rank",
    "rank_thoughts",
    "with_ranked_replies",
]
