"""Entity: Genre."""

from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity


class Genre(Entity):
    """Genre a book is filed under."""

    name: str = Field(min_length=1, description="Genre name")

    def __eq__(self, other: Any) -> bool:
        """Compare genres by business attributes, ignoring timestamps."""
        if not isinstance(other, Genre):
            return False

        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name))
