"""Database factory functions."""

import os
from pathlib import Path
from typing import Optional

from ledgerlens.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "LEDGERLENS_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".ledgerlens"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Pick the SQLite file: explicit path, then $LEDGERLENS_DB_PATH, then ~/.ledgerlens."""
    database_path = database_path or os.environ.get(DB_PATH_ENV)
    if database_path:
        return database_path

    DEFAULT_DB_DIR.mkdir(exist_ok=True)
    return str(DEFAULT_DB_DIR / "ledgerlens.db")


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLAlchemyDatabase backed by a SQLite file.

    Args:
        database_path: Path to the database file; see resolve_database_path
            for the fallbacks when omitted
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
