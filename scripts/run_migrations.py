#!/usr/bin/env python3
"""Apply Alembic migrations for the SQL thought store."""

import sys
import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from thoughts.config import Settings
from thoughts.util.observability import configure_logfire


def main() -> int:
    """Upgrade the thoughts schema to head.

    Does nothing when the in-memory storage backend is configured.
    """
    settings = Settings()
    configure_logfire(settings)

    if settings.storage.backend != "sql":
        logfire.info(
            "Skipping migrations for non-SQL storage",
            storage_backend=settings.storage.backend,
        )
        return 0

    database = make_url(settings.database.url)

    try:
        with logfire.span(
            "run_migrations", database_host=database.host, database_name=database.database
        ):
            command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Thoughts schema is at head")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deploy doesn't start against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
