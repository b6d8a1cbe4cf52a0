"""Database engine setup for SQLite.

SQLAlchemy Core (not ORM) is used: the repository writes its own
statements and maps rows by hand, so there is nothing for a session or
identity map to do.

The default URL is ``sqlite://``, an in-memory database that lives as
long as the process. In-memory engines use :class:`StaticPool` so every
checkout returns the same DBAPI connection; otherwise each connection
would see its own empty database.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from coursectl.infrastructure.database.schema import metadata

DEFAULT_DATABASE_URL = "sqlite://"


def is_memory_url(url: str) -> bool:
    """Return True when *url* points at an in-memory SQLite database."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def create_db_engine(url: str = DEFAULT_DATABASE_URL, *, echo: bool = False) -> Engine:
    """Create a SQLite engine with foreign keys enabled."""
    kwargs: dict[str, Any] = {"echo": echo}
    if is_memory_url(url):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    engine = create_engine(url, **kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_schema(engine: Engine) -> None:
    """Create the ``category`` and ``course`` tables if they are absent.

    Idempotent — safe to call on an existing database.
    """
    metadata.create_all(engine)
