#!/usr/bin/env python3
"""Apply the board schema migrations (posts, comment threads, edit history,
reports, moderation log) with Logfire error tracking.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from board.config import Settings
from board.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the board database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    # Password stays out of the logs
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    try:
        logfire.info(
            "Starting board migrations", revision=revision, database=database
        )

        command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Board migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Board migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
