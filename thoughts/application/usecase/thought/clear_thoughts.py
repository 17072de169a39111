"""Clear thoughts use case (administrative)."""

from thoughts.domain.service import ThoughtService


class ClearThoughtsUseCase:
    """Use case for deleting every thought and reply."""

    def __init__(self, thought_service: ThoughtService) -> None:
        self.thought_service = thought_service

    async def execute(self) -> None:
        await self.thought_service.clear_all()
