"""SQLite engine, schema and connection handle via SQLAlchemy Core."""

from coursectl.infrastructure.database.connection import Database
from coursectl.infrastructure.database.engine import (
    DEFAULT_DATABASE_URL,
    create_db_engine,
    init_schema,
)
from coursectl.infrastructure.database.errors import StorageConnectionError, StorageError
from coursectl.infrastructure.database.schema import category, course, metadata

__all__ = [
    "DEFAULT_DATABASE_URL",
    "Database",
    "StorageConnectionError",
    "StorageError",
    "category",
    "course",
    "create_db_engine",
    "init_schema",
    "metadata",
]
