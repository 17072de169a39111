"""Shared response views and ID parsing for thought use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from thoughts.domain.error import NotFoundError
from thoughts.domain.model import Reply, Thought
from thoughts.domain.value import ReplyId, ThoughtId


class CamelModel(BaseModel):
    """Response model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReplyView(CamelModel):
    """Reply as returned to clients."""

    id: str
    text: str
    upvotes: int
    downvotes: int
    created_at: datetime

    @classmethod
    def from_reply(cls, reply: Reply) -> "ReplyView":
        return cls(
            id=str(reply.id),
            text=reply.text,
            upvotes=reply.upvotes,
            downvotes=reply.downvotes,
            created_at=reply.created_at,
        )


class ThoughtView(CamelModel):
    """Thought as returned to clients, replies in display order."""

    id: str
    text: str
    upvotes: int
    downvotes: int
    created_at: datetime
    replies: list[ReplyView]

    @classmethod
    def from_thought(cls, thought: Thought) -> "ThoughtView":
        return cls(
            id=str(thought.id),
            text=thought.text,
            upvotes=thought.upvotes,
            downvotes=thought.downvotes,
            created_at=thought.created_at,
            replies=[ReplyView.from_reply(r) for r in thought.replies],
        )


def parse_thought_id(value: str) -> ThoughtId:
    """Parse a client-supplied thought ID.

    Malformed IDs can't name a stored thought, so they are reported as
    not found rather than as bad input.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return ThoughtId(UUID(value))
    except ValueError:
        raise NotFoundError("Thought", value)


def parse_reply_id(value: str) -> ReplyId:
    """Parse a client-supplied reply ID.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return ReplyId(UUID(value))
    except ValueError:
        raise NotFoundError("Reply", value)
