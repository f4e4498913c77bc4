"""Stdlib logging bridge.

uvicorn, SQLAlchemy and asyncpg log through ``logging``; their records are
printed and also forwarded to logfire so they sit next to our spans.
"""

import logging
import sys

import logfire

from graphreview.config import Settings

# Chatty below WARNING; logfire already traces their requests
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg")


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
