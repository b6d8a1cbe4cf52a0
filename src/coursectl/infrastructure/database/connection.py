"""Database — the single connection handle shared by repositories.

A :class:`Database` is constructed once per run and injected into every
repository. Construction opens the engine, ensures the schema exists
and checks out one connection. :meth:`Database.close` releases it.

A failure while opening is logged and swallowed here: the handle stays
usable as an object, but :attr:`Database.connection` raises
:class:`StorageConnectionError` until a working handle is built.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from coursectl.infrastructure.database.engine import (
    DEFAULT_DATABASE_URL,
    create_db_engine,
    init_schema,
)
from coursectl.infrastructure.database.errors import StorageConnectionError

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class Database:
    """One engine, one open connection, one schema.

    Usage::

        with Database("sqlite://") as db:
            repo = CourseRepository(db)
            repo.save(course)
    """

    def __init__(self, url: str = DEFAULT_DATABASE_URL, *, echo: bool = False) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._conn: Connection | None = None
        self._open(echo=echo)

    def _open(self, *, echo: bool) -> None:
        engine: Engine | None = None
        try:
            engine = create_db_engine(self.url, echo=echo)
            init_schema(engine)
            self._conn = engine.connect()
        except (SQLAlchemyError, ImportError) as exc:
            # ImportError: the URL names a dialect whose DBAPI driver is not installed
            if engine is not None:
                engine.dispose()
            logger.error("Error connecting to database %s: %s", self._safe_url(), exc)
            return
        self._engine = engine
        logger.debug("Database opened: %s", self._safe_url())

    def _safe_url(self) -> str:
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except SQLAlchemyError:
            return "<invalid url>"

    @property
    def is_connected(self) -> bool:
        return self._conn is not None and not self._conn.closed

    @property
    def connection(self) -> Connection:
        """The open connection. Raises if opening failed or the handle is closed."""
        if self._conn is None or self._conn.closed:
            raise StorageConnectionError(f"No open database connection for {self._safe_url()}")
        return self._conn

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StorageConnectionError(f"No database engine for {self._safe_url()}")
        return self._engine

    def close(self) -> None:
        """Close the connection and dispose of the engine. Safe to call twice."""
        if self._conn is not None and not self._conn.closed:
            self._conn.close()
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.debug("Database closed: %s", self._safe_url())

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
