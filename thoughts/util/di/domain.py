"""Domain layer DI providers."""

import asyncio

from dishka import Scope, provide

from thoughts.config import ModerationSettings
from thoughts.domain.repository import ThoughtRepository
from thoughts.domain.service import ThoughtService
from thoughts.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, single implementation.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The write lock is APP-scoped so every request's service shares it.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_write_lock(self) -> asyncio.Lock:
        """Provide the process-wide lock for read-modify-write operations."""
        return asyncio.Lock()

    @provide
    def get_thought_service(
        self,
        thought_repository: ThoughtRepository,
        write_lock: asyncio.Lock,
        moderation: ModerationSettings,
    ) -> ThoughtService:
        """Provide thought domain service."""
        return ThoughtService(
            thought_repository=thought_repository,
            write_lock=write_lock,
            max_text_length=moderation.max_text_length,
            deletion_threshold=moderation.deletion_threshold,
        )
