"""Domain entities: plain records with no knowledge of persistence."""

from coursectl.domain.entities import UNPERSISTED_ID, Category, Course

__all__ = ["UNPERSISTED_ID", "Category", "Course"]
