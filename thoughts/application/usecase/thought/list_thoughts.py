"""List thoughts use case."""

from thoughts.application.usecase.thought.common import CamelModel, ThoughtView
from thoughts.domain.service import ThoughtService


class ListThoughtsResponse(CamelModel):
    """List thoughts response."""

    thoughts: list[ThoughtView]


class ListThoughtsUseCase:
    """Use case for listing every live thought in display order."""

    def __init__(self, thought_service: ThoughtService) -> None:
        """Initialize list thoughts use case.

        Args:
            thought_service: Thought domain service
        """
        self.thought_service = thought_service

    async def execute(self) -> ListThoughtsResponse:
        """Execute list thoughts flow.

        Returns:
            All thoughts ranked by net votes then recency
        """
        thoughts = await self.thought_service.list_thoughts()
        return ListThoughtsResponse(
            thoughts=[ThoughtView.from_thought(t) for t in thoughts]
        )
