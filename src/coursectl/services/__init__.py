"""Service layer: repository calls wrapped in ServiceResult contracts."""

from coursectl.services.course import CourseService
from coursectl.services.result import ServiceError, ServiceResult

__all__ = ["CourseService", "ServiceError", "ServiceResult"]
