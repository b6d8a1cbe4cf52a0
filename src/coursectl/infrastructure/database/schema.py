"""SQLAlchemy Core table definitions for the course database.

Two tables: ``category`` and ``course``. ``course.category_id`` is a
foreign key into ``category``; enforcement depends on
``PRAGMA foreign_keys=ON``, which :func:`create_db_engine` sets on
every connection.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, MetaData, Table, Text

metadata = MetaData()

category = Table(
    "category",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    sqlite_autoincrement=True,
)

course = Table(
    "course",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("category_id", Integer, ForeignKey("category.id")),
    Column("description", Text),
    sqlite_autoincrement=True,
)
