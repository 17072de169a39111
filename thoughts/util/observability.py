"""Logfire setup and instrumentation.

Service code opens spans and emits events directly:

    with logfire.span("thought_service.vote_on_thought", thought_id=str(thought_id)):
        logfire.info("Thought vote recorded", upvotes=saved.upvotes)

This module only decides where that output goes and hooks Logfire into
FastAPI and SQLAlchemy.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from thoughts.config import Settings

SERVICE_NAME = "thoughts-backend"


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def logfire_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for logfire.configure()."""
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": should_send_to_logfire(settings),
        "console": logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token
    return options


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    options = logfire_options(settings)
    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=options["send_to_logfire"],
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health probes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, excluded_urls="/health$")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
