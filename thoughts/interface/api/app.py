"""FastAPI application factory and the module-level app uvicorn serves."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thoughts.config import Settings
from thoughts.interface.api.errors import register_error_handlers
from thoughts.interface.api.routes import admin, health, thoughts
from thoughts.util.di.container import create_container, setup_di
from thoughts.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Build the thoughts API.

    Logfire must already be configured: scripts/start_app.py does it for
    the server and tests/conftest.py for the test suite.

    Args:
        settings: Application settings (loaded from environment when omitted)
        container: DI container (built from settings when omitted)
    """
    settings = settings or Settings()

    api = FastAPI(
        title="Thoughts API",
        description="Anonymous thoughts board with vote-driven ranking",
        version="0.1.0",
    )
    instrument_fastapi(api)

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(api, container or create_container(settings))
    register_error_handlers(api, settings.api.prefix)

    routers = [health.router, thoughts.router]
    if settings.admin_endpoints:
        routers.append(admin.router)
    for router in routers:
        api.include_router(router, prefix=settings.api.prefix)

    return api


# Imported by uvicorn after start_app.py has configured Logfire
app = create_app()
