"""Read access to genres."""

from src.catalog.core.exceptions import NotFoundError
from src.catalog.entities.genre import Genre, GenreRepository


class GenreService:
    def __init__(self, genre_repository: GenreRepository):
        self._genres = genre_repository

    def find_all(self) -> list[Genre]:
        return self._genres.find_all()

    def find_by_id(self, genre_id: int) -> Genre:
        """Return the genre with `genre_id`.

        Raises:
            NotFoundError: If no such genre exists
        """
        genre = self._genres.find_by_id(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return genre
