"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from thoughts.domain.model import Reply, Thought
from thoughts.domain.value import ReplyId, ThoughtId

# Configure Logfire before any app module is imported: console off, nothing sent
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_thought(
    text: str = "A passing thought",
    upvotes: int = 0,
    downvotes: int = 0,
    minutes: int = 0,
    replies: list[Reply] | None = None,
) -> Thought:
    """Helper function to build thoughts with controlled votes and timestamps.

    Args:
        text: Thought text
        upvotes: Initial upvotes
        downvotes: Initial downvotes
        minutes: Offset from BASE_TIME, so callers can order creation times
        replies: Replies to attach

    Returns:
        Thought domain model
    """
    return Thought(
        id=ThoughtId(uuid4()),
        text=text,
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        replies=replies or [],
    )


def make_reply(
    text: str = "A reply",
    upvotes: int = 0,
    downvotes: int = 0,
    minutes: int = 0,
) -> Reply:
    """Helper function to build replies with controlled votes and timestamps."""
    return Reply(
        id=ReplyId(uuid4()),
        text=text,
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
