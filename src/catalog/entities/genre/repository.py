"""Genre data access."""

from src.catalog.entities._repository import Repository, SqlRepository
from src.catalog.entities.genre.entity import Genre
from src.catalog.entities.genre.table import GenreTable


class GenreRepository(Repository[Genre]):
    """Storage primitives for genres."""


class SqlGenreRepository(SqlRepository[Genre, GenreTable], GenreRepository):
    entity_type = Genre
    table_type = GenreTable

    def _apply(self, entity: Genre, row: GenreTable) -> None:
        row.name = entity.name
