"""Thought aggregate root.

A thought is a short anonymous post. It owns its replies: they are read,
written and deleted together with the thought.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from thoughts.domain.model.common import DomainModel
from thoughts.domain.model.reply import Reply
from thoughts.domain.value import ReplyId, ThoughtId, VoteType


class Thought(DomainModel):
    """Thought aggregate root.

    Business rules:
    - Text is non-empty and stored trimmed; ThoughtService enforces the
      length limit (300 by default)
    - Vote counters only ever grow; the service deletes the thought once
      downvotes reach the deletion threshold
    - Replies keep insertion order here; display order is applied on read
    """

    id: ThoughtId
    # Upper bound is the configurable ThoughtService.max_text_length
    text: str = Field(min_length=1)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    replies: list[Reply] = Field(default_factory=list)

    @property
    def net_votes(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvotes - self.downvotes

    def with_vote(self, vote_type: VoteType) -> "Thought":
        """Return a copy with one more vote of the given type."""
        if vote_type == VoteType.UP:
            return self.model_copy(update={"upvotes": self.upvotes + 1})
        return self.model_copy(update={"downvotes": self.downvotes + 1})

    def find_reply(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find one of this thought's replies by ID."""
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        return None

    def with_reply(self, reply: Reply) -> "Thought":
        """Return a copy with the reply appended."""
        return self.model_copy(update={"replies": [*self.replies, reply]})

    def with_replaced_reply(self, reply: Reply) -> "Thought":
        """Return a copy with the reply of the same ID swapped in place."""
        replies = [reply if r.id == reply.id else r for r in self.replies]
        return self.model_copy(update={"replies": replies})

    def without_reply(self, reply_id: ReplyId) -> "Thought":
        """Return a copy with the reply removed."""
        replies = [r for r in self.replies if r.id != reply_id]
        return self.model_copy(update={"replies": replies})
