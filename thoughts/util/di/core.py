"""Core DI providers (non-swappable)."""

from dishka import Scope, provide

from thoughts.config import ModerationSettings, Settings
from thoughts.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, single implementation.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation settings."""
        return settings.moderation
