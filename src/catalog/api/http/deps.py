"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Path, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.models import MAX_ENTITY_ID
from src.catalog.core.services import AuthorService, BookService, GenreService
from src.catalog.entities import (
    AuthorRepository,
    BookRepository,
    GenreRepository,
    SqlAuthorRepository,
    SqlBookRepository,
    SqlGenreRepository,
)

# Path ids outside the storable range are rejected before any lookup
EntityIdPath = Annotated[int, Path(gt=0, le=MAX_ENTITY_ID)]


def get_db_session(request: Request) -> Iterator[Session]:
    """One session per request, committed when the request succeeds."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.session_scope() as session:
        yield session


def get_author_repository(db: Session = Depends(get_db_session)) -> AuthorRepository:
    return SqlAuthorRepository(db)


def get_genre_repository(db: Session = Depends(get_db_session)) -> GenreRepository:
    return SqlGenreRepository(db)


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return SqlBookRepository(db)


def get_author_service(
    authors: AuthorRepository = Depends(get_author_repository),
) -> AuthorService:
    return AuthorService(authors)


def get_genre_service(
    genres: GenreRepository = Depends(get_genre_repository),
) -> GenreService:
    return GenreService(genres)


def get_book_service(
    books: BookRepository = Depends(get_book_repository),
    authors: AuthorRepository = Depends(get_author_repository),
    genres: GenreRepository = Depends(get_genre_repository),
) -> BookService:
    return BookService(books, authors, genres)
