"""Database layer for supplyledger application."""

from supplyledger.database.base import Database
from supplyledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
