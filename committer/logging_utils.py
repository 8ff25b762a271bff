"""Logging setup for committer.

Diagnostic output (prompts, token usage, loop transitions) goes through the
standard logging module to stderr. User-facing output uses typer.echo.
"""

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "COMMITTER_LOG_LEVEL"

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def is_debug_mode() -> bool:
    """Check if debug logging was requested through the environment."""
    return os.getenv(LOG_LEVEL_ENV_VAR, "").lower() == "debug"


def configure_logging(debug: bool = False) -> None:
    """Configure the committer logger.

    Args:
        debug: Force DEBUG level (the --debug flag). Otherwise the level comes
            from COMMITTER_LOG_LEVEL, defaulting to WARNING.
    """
    if debug or is_debug_mode():
        level = logging.DEBUG
    else:
        env_level = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = getattr(logging, env_level, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))

    logger = logging.getLogger("committer")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    # Reduce noise from SDK internals
    for name in ("httpx", "httpcore", "openai", "anthropic", "google_genai"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
