#!/usr/bin/env python3
"""Start the BirdDex API with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from birddex.config import Settings
from birddex.util.logging import setup_logging
from birddex.util.observability import configure_logfire


def main() -> int:
    """Start the API and log any startup errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    # Configure Logfire before the app module is imported
    configure_logfire(settings)

    try:
        logfire.info("Starting BirdDex API", host=settings.host, port=settings.port)
        uvicorn.run(
            "birddex.interface.api.app:app",
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
