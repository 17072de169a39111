"""Add reply use case."""

from pydantic import BaseModel

from thoughts.application.usecase.thought.common import (
    CamelModel,
    ReplyView,
    parse_thought_id,
)
from thoughts.domain.service import ThoughtService


class AddReplyRequest(BaseModel):
    """Add reply request."""

    thought_id: str  # UUID string
    text: str


class AddReplyResponse(CamelModel):
    """Add reply response."""

    reply: ReplyView


class AddReplyUseCase:
    """Use case for replying to a thought."""

    def __init__(self, thought_service: ThoughtService) -> None:
        """Initialize add reply use case.

        Args:
            thought_service: Thought domain service
        """
        self.thought_service = thought_service

    async def execute(self, request: AddReplyRequest) -> AddReplyResponse:
        """Execute add reply flow.

        Raises:
            ValidationError: If text is blank or too long
            NotFoundError: If the parent thought does not exist
        """
        thought_id = parse_thought_id(request.thought_id)
        reply = await self.thought_service.add_reply(thought_id, request.text)
        return AddReplyResponse(reply=ReplyView.from_reply(reply))
