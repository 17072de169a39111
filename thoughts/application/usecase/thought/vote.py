"""Vote use cases for thoughts and replies.

A vote that pushes its target over the deletion threshold succeeds with a
null payload; an unknown target is an error. Both use cases follow the
same convention.
"""

from pydantic import BaseModel

from thoughts.application.usecase.thought.common import (
    CamelModel,
    ReplyView,
    ThoughtView,
    parse_reply_id,
    parse_thought_id,
)
from thoughts.domain.service import ThoughtService
from thoughts.domain.value import VoteType


class VoteOnThoughtRequest(BaseModel):
    """Vote on thought request."""

    thought_id: str  # UUID string
    vote_type: VoteType


class VoteOnThoughtResponse(CamelModel):
    """Vote on thought response.

    thought is None when the vote deleted the thought.
    """

    thought: ThoughtView | None


class VoteOnReplyRequest(BaseModel):
    """Vote on reply request."""

    thought_id: str  # UUID string
    reply_id: str  # UUID string
    vote_type: VoteType


class VoteOnReplyResponse(CamelModel):
    """Vote on reply response.

    reply is None when the vote deleted the reply.
    """

    reply: ReplyView | None


class VoteOnThoughtUseCase:
    """Use case for voting on a thought."""

    def __init__(self, thought_service: ThoughtService) -> None:
        """Initialize vote on thought use case.

        Args:
            thought_service: Thought domain service
        """
        self.thought_service = thought_service

    async def execute(self, request: VoteOnThoughtRequest) -> VoteOnThoughtResponse:
        """Execute vote on thought flow.

        Raises:
            NotFoundError: If the thought does not exist
        """
        thought_id = parse_thought_id(request.thought_id)
        result = await self.thought_service.vote_on_thought(
            thought_id, request.vote_type
        )
        if result.deleted or result.thought is None:
            return VoteOnThoughtResponse(thought=None)
        return VoteOnThoughtResponse(thought=ThoughtView.from_thought(result.thought))


class VoteOnReplyUseCase:
    """Use case for voting on a reply."""

    def __init__(self, thought_service: ThoughtService) -> None:
        """Initialize vote on reply use case.

        Args:
            thought_service: Thought domain service
        """
        self.thought_service = thought_service

    async def execute(self, request: VoteOnReplyRequest) -> VoteOnReplyResponse:
        """Execute vote on reply flow.

        Raises:
            NotFoundError: If the thought or reply does not exist
        """
        thought_id = parse_thought_id(request.thought_id)
        reply_id = parse_reply_id(request.reply_id)
        result = await self.thought_service.vote_on_reply(
            thought_id, reply_id, request.vote_type
        )
        if result.deleted or result.reply is None:
            return VoteOnReplyResponse(reply=None)
        return VoteOnReplyResponse(reply=ReplyView.from_reply(result.reply))
