#!/usr/bin/env python3
"""Upgrade (or downgrade) the comment schema.

    python scripts/run_migrations.py            # to head
    python scripts/run_migrations.py -1         # one step back
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from doccomments.config import Settings
from doccomments.util.logging import get_logger, setup_logging
from doccomments.util.observability import configure_logfire

logger = get_logger(__name__)


def alembic_config(settings: Settings) -> Config:
    """alembic.ini pointed at the configured database."""
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database.url)
    return config


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    config = alembic_config(settings)

    with logfire.span("migrations", revision=revision, environment=settings.environment):
        try:
            if revision.startswith("-"):
                logger.info("Downgrading schema by %s", revision.lstrip("-"))
                command.downgrade(config, revision)
            else:
                logger.info("Upgrading schema to %s", revision)
                command.upgrade(config, revision)
        except Exception:
            logfire.exception("Migration failed", revision=revision)
            raise

    logger.info("Schema is at %s", revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
