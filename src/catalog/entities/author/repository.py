"""Author data access."""

from src.catalog.entities._repository import Repository, SqlRepository
from src.catalog.entities.author.entity import Author
from src.catalog.entities.author.table import AuthorTable


class AuthorRepository(Repository[Author]):
    """Storage primitives for authors."""


class SqlAuthorRepository(SqlRepository[Author, AuthorTable], AuthorRepository):
    entity_type = Author
    table_type = AuthorTable

    def _apply(self, entity: Author, row: AuthorTable) -> None:
        row.full_name = entity.full_name
