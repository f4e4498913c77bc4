#!/usr/bin/env python3
"""Apply Graph Review database migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py -1         # step back one revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from graphreview.config import Settings
from graphreview.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade (or, with a negative step, downgrade) the schema."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    database = make_url(settings.database_url)

    try:
        with logfire.span(
            "run_migrations",
            target=target,
            database_host=database.host,
            database_name=database.database,
        ):
            alembic_cfg = Config("alembic.ini")
            if target.startswith("-"):
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)

        logfire.info("Database migrations completed", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
