"""Thought domain service.

Owns every thought and reply operation: creation, retrieval in rank
order, voting, and removal of content that reaches the downvote threshold.
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire

from thoughts.domain.error import NotFoundError, ValidationError
from thoughts.domain.model import Reply, Thought
from thoughts.domain.model.common import DomainModel
from thoughts.domain.repository import ThoughtRepository
from thoughts.domain.value import ReplyId, ThoughtId, VoteType

from .base import Service
from .ranking import rank_thoughts, with_ranked_replies

MAX_TEXT_LENGTH = 300
DELETION_THRESHOLD_DOWNVOTES = 10


class ThoughtVoteResult(DomainModel):
    """Outcome of a vote on a thought.

    Exactly one of these holds:
    - deleted is False and thought is the updated thought
    - deleted is True and thought is None (threshold reached)
    """

    thought: Optional[Thought] = None
    deleted: bool = False


class ReplyVoteResult(DomainModel):
    """Outcome of a vote on a reply."""

    thought_id: ThoughtId
    reply: Optional[Reply] = None
    deleted: bool = False


class ThoughtService(Service):
    """Domain service for thoughts and their replies."""

    def __init__(
        self,
        thought_repository: ThoughtRepository,
        write_lock: asyncio.Lock | None = None,
        max_text_length: int = MAX_TEXT_LENGTH,
        deletion_threshold: int = DELETION_THRESHOLD_DOWNVOTES,
    ) -> None:
        """Initialize thought service.

        Args:
            thought_repository: Thought repository
            write_lock: Lock shared by all services in the process; it
                serializes read-modify-write operations, each committed
                before the lock is released
            max_text_length: Longest accepted raw text
            deletion_threshold: Downvote count at which content is removed
        """
        self.thought_repository = thought_repository
        self.write_lock = write_lock or asyncio.Lock()
        self.max_text_length = max_text_length
        self.deletion_threshold = deletion_threshold

    def _clean_text(self, text: str | None, kind: str) -> str:
        """Validate raw text and return it trimmed.

        The length limit applies to the raw input, before trimming.

        Raises:
            ValidationError: If text is blank or too long
        """
        if not text or not text.strip():
            raise ValidationError(f"{kind} text cannot be empty.")
        if len(text) > self.max_text_length:
            raise ValidationError(
                f"{kind} text cannot exceed {self.max_text_length} characters."
            )
        return text.strip()

    async def _require_thought(self, thought_id: ThoughtId) -> Thought:
        thought = await self.thought_repository.find_by_id(thought_id)
        if thought is None:
            logfire.warn("Thought not found", thought_id=str(thought_id))
            raise NotFoundError("Thought", str(thought_id))
        return thought

    async def list_thoughts(self) -> list[Thought]:
        """Get all live thoughts in display order.

        Returns:
            Thoughts ranked by net votes then recency, each with its
            replies ranked the same way
        """
        with logfire.span("thought_service.list_thoughts"):
            thoughts = await self.thought_repository.find_all()
            logfire.info("Thoughts retrieved", count=len(thoughts))
            return rank_thoughts(thoughts)

    async def create_thought(self, text: str) -> Thought:
        """Create a thought.

        Args:
            text: Raw thought text

        Returns:
            Created thought with zero votes and no replies

        Raises:
            ValidationError: If text is blank or too long
        """
        with logfire.span("thought_service.create_thought", text_length=len(text or "")):
            thought = Thought(
                id=ThoughtId(uuid4()),
                text=self._clean_text(text, "Thought"),
                upvotes=0,
                downvotes=0,
                created_at=datetime.now(timezone.utc),
                replies=[],
            )

            async with self.write_lock:
                saved = await self.thought_repository.save(thought)
                await self.thought_repository.commit()

            logfire.info("Thought created", thought_id=str(saved.id))
            return saved

    async def get_thought(self, thought_id: ThoughtId) -> Thought:
        """Get a thought by ID with its replies in display order.

        Raises:
            NotFoundError: If the thought does not exist
        """
        with logfire.span("thought_service.get_thought", thought_id=str(thought_id)):
            thought = await self._require_thought(thought_id)
            return with_ranked_replies(thought)

    async def add_reply(self, thought_id: ThoughtId, text: str) -> Reply:
        """Append a reply to a thought.

        Args:
            thought_id: Parent thought ID
            text: Raw reply text

        Returns:
            Created reply

        Raises:
            ValidationError: If text is blank or too long
            NotFoundError: If the parent thought does not exist
        """
        with logfire.span("thought_service.add_reply", thought_id=str(thought_id)):
            cleaned = self._clean_text(text, "Reply")

            async with self.write_lock:
                thought = await self._require_thought(thought_id)
                reply = Reply(
                    id=ReplyId(uuid4()),
                    text=cleaned,
                    upvotes=0,
                    downvotes=0,
                    created_at=datetime.now(timezone.utc),
                )
                updated = await self.thought_repository.save(thought.with_reply(reply))
                await self.thought_repository.commit()

            logfire.info(
                "Reply added",
                thought_id=str(thought_id),
                reply_id=str(reply.id),
                reply_count=len(updated.replies),
            )
            return reply

    async def vote_on_thought(
        self, thought_id: ThoughtId, vote_type: VoteType
    ) -> ThoughtVoteResult:
        """Record one vote on a thought.

        A thought whose downvotes reach the deletion threshold is deleted
        together with its replies.

        Raises:
            NotFoundError: If the thought does not exist
        """
        with logfire.span(
            "thought_service.vote_on_thought",
            thought_id=str(thought_id),
            vote_type=vote_type.value,
        ):
            async with self.write_lock:
                thought = await self._require_thought(thought_id)
                voted = thought.with_vote(vote_type)

                if voted.downvotes >= self.deletion_threshold:
                    await self.thought_repository.delete(thought_id)
                    await self.thought_repository.commit()
                    logfire.info(
                        "Thought deleted by downvotes",
                        thought_id=str(thought_id),
                        downvotes=voted.downvotes,
                    )
                    return ThoughtVoteResult(thought=None, deleted=True)

                saved = await self.thought_repository.save(voted)
                await self.thought_repository.commit()

            logfire.info(
                "Thought vote recorded",
                thought_id=str(thought_id),
                upvotes=saved.upvotes,
                downvotes=saved.downvotes,
            )
            return ThoughtVoteResult(thought=with_ranked_replies(saved), deleted=False)

    async def vote_on_reply(
        self, thought_id: ThoughtId, reply_id: ReplyId, vote_type: VoteType
    ) -> ReplyVoteResult:
        """Record one vote on a reply.

        A reply whose downvotes reach the deletion threshold is removed from
        its thought; the thought itself is kept.

        Raises:
            NotFoundError: If the thought or the reply does not exist
        """
        with logfire.span(
            "thought_service.vote_on_reply",
            thought_id=str(thought_id),
            reply_id=str(reply_id),
            vote_type=vote_type.value,
        ):
            async with self.write_lock:
                thought = await self._require_thought(thought_id)
                reply = thought.find_reply(reply_id)
                if reply is None:
                    logfire.warn(
                        "Reply not found",
                        thought_id=str(thought_id),
                        reply_id=str(reply_id),
                    )
                    raise NotFoundError("Reply", str(reply_id))

                voted = reply.with_vote(vote_type)

                if voted.downvotes >= self.deletion_threshold:
                    await self.thought_repository.save(thought.without_reply(reply_id))
                    await self.thought_repository.commit()
                    logfire.info(
                        "Reply deleted by downvotes",
                        thought_id=str(thought_id),
                        reply_id=str(reply_id),
                        downvotes=voted.downvotes,
                    )
                    return ReplyVoteResult(thought_id=thought_id, reply=None, deleted=True)

                await self.thought_repository.save(thought.with_replaced_reply(voted))
                await self.thought_repository.commit()

            logfire.info(
                "Reply vote recorded",
                thought_id=str(thought_id),
                reply_id=str(reply_id),
                upvotes=voted.upvotes,
                downvotes=voted.downvotes,
            )
            return ReplyVoteResult(thought_id=thought_id, reply=voted, deleted=False)

    async def clear_all(self) -> None:
        """Delete every thought and reply.

        Administrative and test use only.
        """
        with logfire.span("thought_service.clear_all"):
            async with self.write_lock:
                await self.thought_repository.delete_all()
                await self.thought_repository.commit()
            logfire.info("All thoughts cleared")
