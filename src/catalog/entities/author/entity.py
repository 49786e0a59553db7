"""Entity: Author."""

from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity


class Author(Entity):
    """Author of one or more books.

    Authors are referenced by books, never owned by them.
    """

    full_name: str = Field(min_length=1, description="Author's full name")

    def __eq__(self, other: Any) -> bool:
        """Compare authors by business attributes, ignoring timestamps."""
        if not isinstance(other, Author):
            return False

        return self.id == other.id and self.full_name == other.full_name

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.full_name))
