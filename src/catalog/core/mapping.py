"""Conversions between domain entities and transport DTOs.

All functions are pure and copy every field; nothing is defaulted.
"""

from src.catalog.core.models.dto import (
    AuthorDto,
    BookCreateDto,
    BookDto,
    BookUpdateDto,
    GenreDto,
)
from src.catalog.entities.author.entity import Author
from src.catalog.entities.book.entity import Book
from src.catalog.entities.genre.entity import Genre


def _require_id(entity: Author | Genre | Book) -> int:
    if entity.id is None:
        raise ValueError(f"{type(entity).__name__} has not been saved and has no id")
    return entity.id


def to_author_dto(author: Author) -> AuthorDto:
    return AuthorDto(id=_require_id(author), full_name=author.full_name)


def to_genre_dto(genre: Genre) -> GenreDto:
    return GenreDto(id=_require_id(genre), name=genre.name)


def to_book_dto(book: Book) -> BookDto:
    return BookDto(
        id=_require_id(book),
        title=book.title,
        author_dto=to_author_dto(book.author),
        genre_dto=to_genre_dto(book.genre),
    )


def from_create_dto(dto: BookCreateDto) -> tuple[str, int, int]:
    """Extract `(title, author_id, genre_id)` for `BookService.create`."""
    return dto.title, dto.author_id, dto.genre_id


def from_update_dto(dto: BookUpdateDto) -> tuple[int, str, int, int]:
    """Extract `(id, title, author_id, genre_id)` for `BookService.update`."""
    return dto.id, dto.title, dto.author_id, dto.genre_id
