"""Data transfer objects for the HTML and JSON surfaces.

JSON uses camelCase names (`fullName`, `authorDto`, `authorId`); Python code
uses the snake_case attributes. Both spellings are accepted on input.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from src.catalog.core.validation import title_violations

# Largest id the database integer column can hold
MAX_ENTITY_ID = 2**63 - 1

EntityId = Annotated[int, Field(gt=0, le=MAX_ENTITY_ID)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorDto(CamelModel):
    id: int
    full_name: str


class GenreDto(CamelModel):
    id: int
    name: str


class BookDto(CamelModel):
    """Read shape of a book with its author and genre embedded."""

    id: int
    title: str
    author_dto: AuthorDto
    genre_dto: GenreDto


class _BookWriteDto(CamelModel):
    title: str = Field(description="Non-blank, at least three characters")
    author_id: EntityId
    genre_id: EntityId

    @field_validator("title")
    @classmethod
    def check_title(cls, title: str) -> str:
        violations = title_violations(title)
        if violations:
            raise PydanticCustomError("book_title", violations[0])
        return title


class BookCreateDto(_BookWriteDto):
    """Write shape for creating a book; the id is assigned on save."""


class BookUpdateDto(_BookWriteDto):
    """Write shape for replacing the title, author and genre of a book."""

    id: EntityId
