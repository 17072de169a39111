"""Stdlib logging for third-party loggers.

Our own code logs through Logfire. Libraries (uvicorn, alembic, SQLAlchemy)
use plain `logging`; their records are forwarded to Logfire so both end up
in the same console and trace view.
"""

import logging

import logfire

from thoughts.config import Settings

# Chatty below WARNING even in development
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")


def log_level(settings: Settings) -> int:
    """Root log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into Logfire.

    Call after configure_logfire().

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.info(
        "Stdlib logging forwarded to Logfire",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
