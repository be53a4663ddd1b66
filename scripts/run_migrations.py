#!/usr/bin/env python3
"""Bring the database schema to a revision (``head`` by default).

Usage: run_migrations.py [REVISION]
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from oxytalk.config import Settings
from oxytalk.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def alembic_config(settings: Settings) -> Config:
    """Alembic config pointed at the database from Settings."""
    config = Config(str(ALEMBIC_INI))
    config.set_main_option(
        "script_location", str(ALEMBIC_INI.parent / "migrations")
    )
    # ConfigParser interpolation treats % specially
    config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))
    return config


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)
    revision = argv[0] if argv else "head"

    with logfire.span("database migration to {revision}", revision=revision):
        try:
            command.upgrade(alembic_config(settings), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve on a broken schema
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
