"""Repository classes that isolate SQL from the domain entities."""

from coursectl.infrastructure.repositories.course import CourseRepository

__all__ = ["CourseRepository"]
