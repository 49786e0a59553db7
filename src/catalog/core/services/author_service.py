"""Read access to authors."""

from src.catalog.core.exceptions import NotFoundError
from src.catalog.entities.author import Author, AuthorRepository


class AuthorService:
    def __init__(self, author_repository: AuthorRepository):
        self._authors = author_repository

    def find_all(self) -> list[Author]:
        return self._authors.find_all()

    def find_by_id(self, author_id: int) -> Author:
        """Return the author with `author_id`.

        Raises:
            NotFoundError: If no such author exists
        """
        author = self._authors.find_by_id(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return author
