"""Stdlib logging setup.

Domain code reports through logfire; this only configures the plain loggers
used by scripts and third-party libraries.
"""

import logging
import sys

from doccomments.config import Settings

_NOISY_LOGGERS = ("sqlalchemy.engine", "asyncio", "alembic.runtime.migration")


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Library chatter only shows up in debug mode
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)

    logging.getLogger("doccomments").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the doccomments hierarchy for a module outside the package."""
    if name == "__main__" or not name.startswith("doccomments"):
        name = f"doccomments.{name.rsplit('.', 1)[-1]}"
    return logging.getLogger(name)
