#!/usr/bin/env python3
"""Serve the thoughts API with uvicorn.

Logfire is configured before the app module is imported, so import-time
failures (bad settings, unreachable providers) are reported too.
"""

import sys
import logfire
import uvicorn

from thoughts.config import Settings
from thoughts.util.logging import setup_logging
from thoughts.util.observability import configure_logfire

APP_PATH = "thoughts.interface.api.app:app"


def main() -> int:
    """Run the server until it is stopped."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        with logfire.span(
            "start_app",
            environment=settings.environment,
            storage_backend=settings.storage.backend,
            port=settings.port,
        ):
            uvicorn.run(APP_PATH, host=settings.host, port=settings.port, log_level="info")
        return 0

    except Exception as e:
        logfire.error(
            "Thoughts API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
