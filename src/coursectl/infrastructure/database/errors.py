"""Storage exceptions raised by the database layer and repositories."""

from __future__ import annotations


class StorageError(Exception):
    """A storage operation failed.

    Wraps the underlying SQLAlchemy error, which stays reachable through
    ``__cause__``.
    """


class StorageConnectionError(StorageError):
    """No usable database connection is available."""
