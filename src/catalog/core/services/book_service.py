"""Book lifecycle: validation and orchestration of the repositories."""

from loguru import logger

from src.catalog.core.exceptions import NotFoundError, ValidationFailedError
from src.catalog.core.validation import validate_title
from src.catalog.entities.author import Author, AuthorRepository
from src.catalog.entities.book import Book, BookRepository
from src.catalog.entities.genre import Genre, GenreRepository


class BookService:
    """Creates, updates and deletes books.

    Every write validates the title first and then resolves the referenced
    author and genre, so a rejected call never reaches `BookRepository.save`.
    """

    def __init__(
        self,
        book_repository: BookRepository,
        author_repository: AuthorRepository,
        genre_repository: GenreRepository,
    ):
        self._books = book_repository
        self._authors = author_repository
        self._genres = genre_repository

    def find_all(self) -> list[Book]:
        return self._books.find_all()

    def find_by_id(self, book_id: int) -> Book | None:
        return self._books.find_by_id(book_id)

    def create(self, title: str, author_id: int, genre_id: int) -> Book:
        """Create and persist a new book.

        Raises:
            ValidationFailedError: If the title is blank or too short
            NotFoundError: If the author or genre does not exist
        """
        self._check_title(title)
        author = self._resolve_author(author_id)
        genre = self._resolve_genre(genre_id)

        book = self._books.save(Book(title=title, author=author, genre=genre))
        logger.info("Book created", book_id=book.id, author_id=author_id, genre_id=genre_id)
        return book

    def update(self, book_id: int, title: str, author_id: int, genre_id: int) -> Book:
        """Replace the title, author and genre of an existing book.

        Raises:
            ValidationFailedError: If the title is blank or too short
            NotFoundError: If the book, author or genre does not exist
        """
        self._check_title(title)
        existing = self._books.find_by_id(book_id)
        if existing is None:
            raise NotFoundError("Book", book_id)
        author = self._resolve_author(author_id)
        genre = self._resolve_genre(genre_id)

        book = self._books.save(
            existing.model_copy(update={"title": title, "author": author, "genre": genre})
        )
        logger.info("Book updated", book_id=book.id, author_id=author_id, genre_id=genre_id)
        return book

    def delete_by_id(self, book_id: int) -> None:
        self._books.delete_by_id(book_id)
        logger.info("Book deleted", book_id=book_id)

    def _check_title(self, title: str) -> None:
        errors = validate_title(title)
        if errors:
            logger.warning("Book title rejected", title=title, errors=[e.message for e in errors])
            raise ValidationFailedError(errors)

    def _resolve_author(self, author_id: int) -> Author:
        author = self._authors.find_by_id(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return author

    def _resolve_genre(self, genre_id: int) -> Genre:
        genre = self._genres.find_by_id(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return genre
