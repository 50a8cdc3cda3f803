"""Database layer for equiledger application."""

from equiledger.database.base import Database
from equiledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
