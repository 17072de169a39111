"""Create thought use case."""

from pydantic import BaseModel

from thoughts.application.usecase.thought.common import CamelModel, ThoughtView
from thoughts.domain.service import ThoughtService


class CreateThoughtRequest(BaseModel):
    """Create thought request.

    Text is validated by the domain service (blank and length rules),
    so it is accepted here as-is.
    """

    text: str


class CreateThoughtResponse(CamelModel):
    """Create thought response."""

    thought: ThoughtView


class CreateThoughtUseCase:
    """Use case for posting a new thought."""

    def __init__(self, thought_service: ThoughtService) -> None:
        """Initialize create thought use case.

        Args:
            thought_service: Thought domain service
        """
        self.thought_service = thought_service

    async def execute(self, request: CreateThoughtRequest) -> CreateThoughtResponse:
        """Execute create thought flow.

        Raises:
            ValidationError: If text is blank or too long
        """
        thought = await self.thought_service.create_thought(request.text)
        return CreateThoughtResponse(thought=ThoughtView.from_thought(thought))
