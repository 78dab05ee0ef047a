"""Idempotent schema evolution for the trips table — runs on every start."""

import logging

from sqlalchemy import Engine, text
from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)

# Optional columns added to trips after the first release, in order.
ADDED_TRIP_COLUMNS: tuple[tuple[str, str], ...] = (
    ("startTravelTime", "TEXT"),
    ("endTravelTime", "TEXT"),
)


def _is_duplicate_column(error: OperationalError) -> bool:
    return "duplicate column" in str(error.orig).lower()


def run_migrations(engine: Engine) -> dict[str, object]:
    """Try to add every later column; existing columns are left alone."""
    added: list[str] = []
    for name, column_type in ADDED_TRIP_COLUMNS:
        try:
            with engine.begin() as conn:
                conn.execute(text(f"ALTER TABLE trips ADD COLUMN {name} {column_type}"))
        except OperationalError as e:
            if not _is_duplicate_column(e):
                logger.error("Migration failed adding %s: %s", name, e)
                raise
            logger.debug("Column %s already exists", name)
            continue
        added.append(name)
        logger.info("Added column: %s", name)

    return {"status": "success", "added": added}
