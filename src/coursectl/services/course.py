"""CourseService — course lifecycle operations returning ServiceResult.

Thin layer over :class:`CourseRepository`: validates input, calls the
repository, and converts both outcomes and storage exceptions into
:class:`ServiceResult` values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from coursectl.domain.entities import Category, Course
from coursectl.infrastructure.database.errors import StorageError
from coursectl.infrastructure.repositories import CourseRepository
from coursectl.services.base import BaseService
from coursectl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from coursectl.infrastructure.database.connection import Database

logger = logging.getLogger(__name__)

# Walkthrough fixtures
WALKTHROUGH_CATEGORY = "Web Development"
WALKTHROUGH_COURSE = "Spring Boot Masterclass"
WALKTHROUGH_DESCRIPTION = "Master Spring Boot framework for enterprise applications"
WALKTHROUGH_UPDATED_DESCRIPTION = "Master Spring Boot framework with advanced patterns"


def _not_found(op: str, course_id: int) -> ServiceResult:
    return ServiceResult.failure(
        op,
        ErrorCode.NOT_FOUND,
        f"No course found with ID: {course_id}",
        id=course_id,
    )


class CourseService(BaseService):
    """Create, read, update, delete and list courses."""

    def __init__(self, database: Database, repository: CourseRepository | None = None) -> None:
        super().__init__(database)
        self._repo = repository or CourseRepository(database)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_course(
        self,
        name: str,
        category_name: str,
        description: str = "",
    ) -> ServiceResult:
        """Create a course together with a new category."""
        op = "create_course"
        if not name.strip():
            return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, "Course name is required")
        if not category_name.strip():
            return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, "Category name is required")

        item = Course(name=name, category=Category(name=category_name), description=description)
        try:
            self._repo.save(item)
        except StorageError as exc:
            return self._storage_failure(op, exc)

        logger.info("Created course #%d %r", item.id, item.name)
        return ServiceResult(ok=True, op=op, data=item.to_dict())

    def get_course(self, course_id: int) -> ServiceResult:
        """Fetch a course with its category."""
        op = "get_course"
        try:
            item = self._repo.find_by_id(course_id)
        except StorageError as exc:
            return self._storage_failure(op, exc)
        if item is None:
            return _not_found(op, course_id)
        return ServiceResult(ok=True, op=op, data=item.to_dict())

    def update_course(
        self,
        course_id: int,
        *,
        name: str | None = None,
        description: str | None = None,
        category_id: int | None = None,
    ) -> ServiceResult:
        """Apply the supplied fields to an existing course.

        Fields left as None are untouched. ``category_id`` must name an
        existing category; categories are never created on update.
        """
        op = "update_course"
        if name is not None and not name.strip():
            return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, "Course name cannot be blank")

        try:
            item = self._repo.find_by_id(course_id)
            if item is None:
                return _not_found(op, course_id)

            changed: list[str] = []
            if name is not None and name != item.name:
                item.name = name
                changed.append("name")
            if description is not None and description != item.description:
                item.description = description
                changed.append("description")
            if category_id is not None and category_id != item.category.id:
                target = self._repo.find_category(category_id)
                if target is None:
                    return ServiceResult.failure(
                        op,
                        ErrorCode.NOT_FOUND,
                        f"No category found with ID: {category_id}",
                        category_id=category_id,
                    )
                item.category = target
                changed.append("category")

            warnings: list[str] = []
            if changed:
                self._repo.update(item)
            else:
                warnings.append("No changes to apply")
        except StorageError as exc:
            return self._storage_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={**item.to_dict(), "changed": changed},
            warnings=warnings,
        )

    def delete_course(self, course_id: int) -> ServiceResult:
        """Delete a course. Deleting a missing id succeeds without effect."""
        op = "delete_course"
        try:
            self._repo.delete(course_id)
        except StorageError as exc:
            return self._storage_failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"id": course_id})

    def list_courses(self) -> ServiceResult:
        """List every course with its category."""
        op = "list_courses"
        try:
            items = self._repo.list_courses()
        except StorageError as exc:
            return self._storage_failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": [item.to_dict() for item in items], "count": len(items)},
        )

    def walkthrough(self) -> ServiceResult:
        """Run the create → find → update → find → delete scenario.

        Stops at the first failing step and reports the steps that ran.
        """
        op = "walkthrough"
        steps: list[dict[str, Any]] = []

        def record(step: str, result: ServiceResult) -> bool:
            steps.append({"step": step, "ok": result.ok, **result.data})
            return result.ok

        created = self.create_course(
            WALKTHROUGH_COURSE, WALKTHROUGH_CATEGORY, WALKTHROUGH_DESCRIPTION
        )
        if not record("create", created):
            return self._walkthrough_failure(op, created, steps)
        course_id = int(created.data["id"])

        for step, run in (
            ("find", lambda: self.get_course(course_id)),
            (
                "update",
                lambda: self.update_course(course_id, description=WALKTHROUGH_UPDATED_DESCRIPTION),
            ),
            ("find_updated", lambda: self.get_course(course_id)),
            ("delete", lambda: self.delete_course(course_id)),
        ):
            outcome = run()
            if not record(step, outcome):
                return self._walkthrough_failure(op, outcome, steps)

        gone = self.get_course(course_id)
        steps.append({"step": "find_deleted", "ok": True, "found": gone.ok})
        return ServiceResult(ok=True, op=op, data={"id": course_id, "steps": steps})

    @staticmethod
    def _walkthrough_failure(
        op: str, failed: ServiceResult, steps: list[dict[str, Any]]
    ) -> ServiceResult:
        return ServiceResult(ok=False, op=op, data={"steps": steps}, error=failed.error)
