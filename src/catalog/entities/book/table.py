"""Book database table model."""

from typing import Optional

from sqlmodel import Field, Relationship

from src.catalog.entities._base import EntityTable
from src.catalog.entities.author.table import AuthorTable
from src.catalog.entities.genre.table import GenreTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    Author and genre are loaded with the book in a single joined query.
    """

    __tablename__ = "books"

    title: str
    author_id: int = Field(foreign_key="authors.id", index=True)
    genre_id: int = Field(foreign_key="genres.id", index=True)

    author: Optional[AuthorTable] = Relationship(
        sa_relationship_kwargs={"lazy": "joined"}
    )
    genre: Optional[GenreTable] = Relationship(
        sa_relationship_kwargs={"lazy": "joined"}
    )
