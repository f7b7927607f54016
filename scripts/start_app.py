#!/usr/bin/env python3
"""Start the API with Logfire configured before anything else runs."""

import sys

import logfire
import uvicorn

from holding.config import Settings
from holding.interface.api.app import create_app
from holding.util.logging import setup_logging
from holding.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Bag of Holding API",
            environment=settings.environment,
            port=settings.port,
        )

        uvicorn.run(
            create_app(settings),
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
