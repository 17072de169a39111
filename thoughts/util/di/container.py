"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from thoughts.config import Settings
from thoughts.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the application container.

    The persistence implementation follows settings.storage.backend; every
    other provider has a single implementation.

    Args:
        settings: Settings used to pick implementations (loaded from the
            environment when omitted)

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    in_memory = settings.storage.backend == "memory"

    provider_instances = [
        get_provider(base, in_memory=in_memory)() for base in PROVIDERS
    ]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
