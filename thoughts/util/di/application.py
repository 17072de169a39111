"""Application layer DI providers."""

from dishka import Scope, provide

from thoughts.application.usecase.thought import (
    AddReplyUseCase,
    ClearThoughtsUseCase,
    CreateThoughtUseCase,
    GetThoughtUseCase,
    ListThoughtsUseCase,
    VoteOnReplyUseCase,
    VoteOnThoughtUseCase,
)
from thoughts.domain.service import ThoughtService
from thoughts.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, single implementation."""

    @provide(scope=Scope.REQUEST)
    def get_list_thoughts_use_case(
        self, thought_service: ThoughtService
    ) -> ListThoughtsUseCase:
        """Provide list thoughts use case."""
        return ListThoughtsUseCase(thought_service=thought_service)

    @provide(scope=Scope.REQUEST)
    def get_create_thought_use_case(
        self, thought_service: ThoughtService
    ) -> CreateThoughtUseCase:
        """Provide create thought use case."""
        return CreateThoughtUseCase(thought_service=thought_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thought_use_case(
        self, thought_service: ThoughtService
    ) -> GetThoughtUseCase:
        """Provide get thought use case."""
        return GetThoughtUseCase(thought_service=thought_service)

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(self, thought_service: ThoughtService) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(thought_service=thought_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_on_thought_use_case(
        self, thought_service: ThoughtService
    ) -> VoteOnThoughtUseCase:
        """Provide vote on thought use case."""
        return VoteOnThoughtUseCase(thought_service=thought_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_on_reply_use_case(
        self, thought_service: ThoughtService
    ) -> VoteOnReplyUseCase:
        """Provide vote on reply use case."""
        return VoteOnReplyUseCase(thought_service=thought_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_thoughts_use_case(
        self, thought_service: ThoughtService
    ) -> ClearThoughtsUseCase:
        """Provide clear thoughts use case."""
        return ClearThoughtsUseCase(thought_service=thought_service)
