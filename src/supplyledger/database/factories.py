"""Database factory functions for creating database instances."""

import os
from typing import Optional

from supplyledger.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_DATABASE_PATH = "prod.db"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SUPPLYLEDGER_DB_PATH
            environment variable, then defaults to prod.db in the working directory

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("SUPPLYLEDGER_DB_PATH")

    if database_path is None:
        database_path = DEFAULT_DATABASE_PATH

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
