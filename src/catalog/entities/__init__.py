"""Catalog entities organized by business concept.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Repository interface and its SQLModel implementation
"""

from .author import Author, AuthorRepository, AuthorTable, SqlAuthorRepository
from .book import Book, BookRepository, BookTable, SqlBookRepository
from .genre import Genre, GenreRepository, GenreTable, SqlGenreRepository

__all__ = [
    "Author",
    "AuthorRepository",
    "AuthorTable",
    "SqlAuthorRepository",
    "Book",
    "BookRepository",
    "BookTable",
    "SqlBookRepository",
    "Genre",
    "GenreRepository",
    "GenreTable",
    "SqlGenreRepository",
]
