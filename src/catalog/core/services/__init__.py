"""Core services exports."""

from .author_service import AuthorService
from .book_service import BookService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .genre_service import GenreService

__all__ = [
    # Catalog services
    "AuthorService",
    "BookService",
    "GenreService",
    # Database services
    "DbManageService",
    "DbSessionService",
]
