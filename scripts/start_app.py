#!/usr/bin/env python3
"""Serve the HTTP API and the realtime gateway with uvicorn."""

import sys

import logfire
import uvicorn

from oxytalk.config import Settings
from oxytalk.util.logging import setup_logging
from oxytalk.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting OxyTalk core",
        port=settings.port,
        environment=settings.environment,
    )
    try:
        # uvicorn imports the app module after logfire is configured
        uvicorn.run(
            "oxytalk.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            ws_ping_interval=20.0,
        )
    except Exception as e:
        logfire.error(
            "OxyTalk core failed to start",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
