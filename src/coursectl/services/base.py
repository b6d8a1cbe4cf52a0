"""BaseService — shared foundation for coursectl services.

Every service receives a :class:`Database` at construction time and
builds its repositories from it. No service reaches for a global
connection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from coursectl.infrastructure.database.errors import StorageConnectionError, StorageError
from coursectl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from coursectl.infrastructure.database.connection import Database

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CourseService(BaseService):
            def get_course(self, course_id: int) -> ServiceResult:
                try:
                    ...
                except StorageError as exc:
                    return self._storage_failure("get_course", exc)
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    @staticmethod
    def _storage_failure(op: str, exc: StorageError) -> ServiceResult:
        """Translate a storage exception into a failed ServiceResult."""
        if isinstance(exc, StorageConnectionError):
            code = ErrorCode.NO_CONNECTION
        else:
            code = ErrorCode.STORAGE_ERROR
        logger.debug("%s failed with %s", op, code, exc_info=exc)
        return ServiceResult.failure(op, code, str(exc))
