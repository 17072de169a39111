"""Get thought use case."""

from pydantic import BaseModel

from thoughts.application.usecase.thought.common import (
    CamelModel,
    ThoughtView,
    parse_thought_id,
)
from thoughts.domain.service import ThoughtService


class GetThoughtRequest(BaseModel):
    """Get thought request."""

    thought_id: str  # UUID string


class GetThoughtResponse(CamelModel):
    """Get thought response."""

    thought: ThoughtView


class GetThoughtUseCase:
    """Use case for retrieving a single thought with its replies."""

    def __init__(self, thought_service: ThoughtService) -> None:
        """Initialize get thought use case.

        Args:
            thought_service: Thought domain service
        """
        self.thought_service = thought_service

    async def execute(self, request: GetThoughtRequest) -> GetThoughtResponse:
        """Execute get thought flow.

        Raises:
            NotFoundError: If the thought does not exist
        """
        thought_id = parse_thought_id(request.thought_id)
        thought = await self.thought_service.get_thought(thought_id)
        return GetThoughtResponse(thought=ThoughtView.from_thought(thought))
