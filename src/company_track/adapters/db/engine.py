"""Engine factory for the company database.

Every Engine in the application comes from `make_engine`, so all
connections are configured the same way. SQLite connections run
`SQLITE_PRAGMAS` as soon as they are opened; other backends are left alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_PRAGMAS = (
    "foreign_keys=ON",  # employees.department_id must reference a stored department
    "journal_mode=WAL",
    "synchronous=NORMAL",
    "temp_store=MEMORY",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if `url` (a string or :class:`URL`) points at SQLite."""
    return make_url(str(url)).get_backend_name() == "sqlite"


def _apply_sqlite_pragmas(dbapi_conn: SQLiteConnection, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {pragma};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for `url`.

    Args:
        url: Database URL.
        echo: Log every SQL statement (through the ``sqlalchemy.engine`` logger).

    Returns:
        Engine: The configured engine. Nothing is connected yet.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
        logger.debug("SQLite PRAGMAs enabled: %s", ", ".join(SQLITE_PRAGMAS))
    return engine
