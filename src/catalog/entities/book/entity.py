"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.catalog.entities._base import Entity
from src.catalog.entities.author.entity import Author
from src.catalog.entities.genre.entity import Genre


class Book(Entity):
    """Book entity: a title plus one author and one genre reference.

    The title rules (non-blank, at least three characters) are enforced by
    the book service before a Book is built, so the entity itself only
    carries the data.
    """

    title: str = Field(description="Book title")
    author: Author = Field(description="Author of the book")
    genre: Genre = Field(description="Genre of the book")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.genre == other.genre
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.author,
            self.genre,
        ))
