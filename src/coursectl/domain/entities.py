"""Course and Category entities.

Both are plain dataclasses. They carry data only: persistence lives in
:mod:`coursectl.infrastructure.repositories`. An ``id`` of
:data:`UNPERSISTED_ID` means the record has not been written yet; the
repository assigns the generated id after insert.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNPERSISTED_ID = 0


@dataclass
class Category:
    """A course category."""

    name: str
    id: int = UNPERSISTED_ID

    @property
    def is_persisted(self) -> bool:
        return self.id != UNPERSISTED_ID

    def __str__(self) -> str:
        return f"Category(id={self.id}, name={self.name!r})"


@dataclass
class Course:
    """A course referencing exactly one :class:`Category`.

    The category is held by reference, so assigning an id to it during
    ``CourseRepository.save`` is visible to whoever created it.
    """

    name: str
    category: Category
    description: str = ""
    id: int = UNPERSISTED_ID

    @property
    def is_persisted(self) -> bool:
        return self.id != UNPERSISTED_ID

    def to_dict(self) -> dict[str, Any]:
        """Flatten into the payload shape used by service results."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": {"id": self.category.id, "name": self.category.name},
        }
