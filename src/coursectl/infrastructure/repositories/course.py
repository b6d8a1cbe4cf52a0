"""CourseRepository — persistence for :class:`Course` and its :class:`Category`.

Every statement runs on the connection owned by the injected
:class:`Database` and is committed on its own. ``save`` therefore writes
a new category and the course in two separate commits: if the course
insert fails, the category row stays behind.

SQLAlchemy errors, and the ``OverflowError`` pysqlite raises for ids
beyond 64-bit INTEGER, are logged and re-raised as :class:`StorageError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from coursectl.domain.entities import Category, Course
from coursectl.infrastructure.database.errors import StorageError
from coursectl.infrastructure.database.schema import category, course

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Executable, Select
    from sqlalchemy.engine import CursorResult, RowMapping

    from coursectl.infrastructure.database.connection import Database

logger = logging.getLogger(__name__)


class CourseRepository:
    """Encapsulates SQL for course and category rows."""

    def __init__(self, database: Database) -> None:
        self._db = database

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, item: Course) -> None:
        """Insert *item*, saving its category first when it has no id yet.

        Assigns the generated ids onto ``item.category`` and ``item``.
        """
        if not item.category.is_persisted:
            self.save_category(item.category)

        stmt = insert(course).values(
            name=item.name,
            category_id=item.category.id,
            description=item.description,
        )
        result = self._write(stmt, action=f"save course {item.name!r}")
        item.id = int(result.inserted_primary_key[0])
        logger.debug("Saved course #%d (category #%d)", item.id, item.category.id)

    def save_category(self, item: Category) -> None:
        """Insert *item* and assign the generated id onto it."""
        stmt = insert(category).values(name=item.name)
        result = self._write(stmt, action=f"save category {item.name!r}")
        item.id = int(result.inserted_primary_key[0])
        logger.debug("Saved category #%d", item.id)

    def update(self, item: Course) -> None:
        """Overwrite name, category and description of the row with ``item.id``.

        The category must already be persisted; nothing is cascaded.
        """
        stmt = (
            update(course)
            .where(course.c.id == item.id)
            .values(
                name=item.name,
                category_id=item.category.id,
                description=item.description,
            )
        )
        result = self._write(stmt, action=f"update course #{item.id}")
        if result.rowcount == 0:
            logger.debug("Update matched no course with id %d", item.id)

    def delete(self, course_id: int) -> None:
        """Delete the course row with *course_id*. Missing ids are a no-op."""
        stmt = delete(course).where(course.c.id == course_id)
        self._write(stmt, action=f"delete course #{course_id}")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_by_id(self, course_id: int) -> Course | None:
        """Fetch one course joined with its category, or None."""
        stmt = self._course_select().where(course.c.id == course_id)
        rows = self._read(stmt, action=f"find course #{course_id}")
        return self._row_to_course(rows[0]) if rows else None

    def find_category(self, category_id: int) -> Category | None:
        """Fetch one category by id, or None."""
        stmt = select(category.c.id, category.c.name).where(category.c.id == category_id)
        rows = self._read(stmt, action=f"find category #{category_id}")
        if not rows:
            return None
        return Category(id=int(rows[0]["id"]), name=rows[0]["name"])

    def list_courses(self) -> list[Course]:
        """Fetch every course that has a category, ordered by id."""
        stmt = self._course_select().order_by(course.c.id)
        return [self._row_to_course(row) for row in self._read(stmt, action="list courses")]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _course_select() -> Select[Any]:
        return select(
            course.c.id,
            course.c.name,
            course.c.description,
            category.c.id.label("cat_id"),
            category.c.name.label("cat_name"),
        ).select_from(course.join(category, course.c.category_id == category.c.id))

    def _write(self, stmt: Executable, *, action: str) -> CursorResult[Any]:
        conn = self._db.connection
        try:
            result = conn.execute(stmt)
            conn.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("Failed to %s: %s", action, exc)
            conn.rollback()
            raise StorageError(f"Failed to {action}: {exc}") from exc
        return result

    def _read(self, stmt: Executable, *, action: str) -> Sequence[RowMapping]:
        conn = self._db.connection
        try:
            return conn.execute(stmt).mappings().all()
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("Failed to %s: %s", action, exc)
            conn.rollback()
            raise StorageError(f"Failed to {action}: {exc}") from exc

    @staticmethod
    def _row_to_course(row: Any) -> Course:
        """Convert a joined result row to a Course with its Category."""
        return Course(
            id=int(row["id"]),
            name=row["name"],
            category=Category(id=int(row["cat_id"]), name=row["cat_name"]),
            description=row["description"] or "",
        )
