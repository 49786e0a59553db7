"""Transport models exchanged at the HTTP boundary."""

from .dto import (
    MAX_ENTITY_ID,
    AuthorDto,
    BookCreateDto,
    BookDto,
    BookUpdateDto,
    EntityId,
    GenreDto,
)

__all__ = [
    "MAX_ENTITY_ID",
    "AuthorDto",
    "BookCreateDto",
    "BookDto",
    "BookUpdateDto",
    "EntityId",
    "GenreDto",
]
