"""Configuration utilities for company-track.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

from sqlalchemy.engine import URL

PRODUCTION_ENV_VAR = "PRODUCTION"  # pragma: no mutate
DB_URL_ENV_VAR = "COMPANY_TRACK_DB_URL"  # pragma: no mutate

PRODUCTION_DB_PATH = Path("db") / "company.prod.db"
DEVELOPMENT_DB_PATH = Path("db") / "company.dev.db"

REPORT_FILENAME = "report.json"  # pragma: no mutate


def is_production() -> bool:
    """Return True when the `PRODUCTION` environment variable is set (to any value)."""
    return PRODUCTION_ENV_VAR in os.environ


def get_db_path() -> Path:
    """Get the default database file for the current environment.

    Returns:
        `db/company.prod.db` if `PRODUCTION` is set, else `db/company.dev.db`,
        both relative to the working directory.
    """
    return PRODUCTION_DB_PATH if is_production() else DEVELOPMENT_DB_PATH


def get_db_url() -> str:
    """Get the database URL.

    `COMPANY_TRACK_DB_URL` takes precedence when set. Otherwise a SQLite URL
    is built for the environment's default database file and its parent
    directory is created if missing.

    Returns:
        A SQLAlchemy database URL string.
    """
    if url := os.environ.get(DB_URL_ENV_VAR):
        return url
    path = get_db_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    return URL.create("sqlite+pysqlite", database=str(path)).render_as_string()
