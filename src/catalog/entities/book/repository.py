"""Book data access."""

from src.catalog.entities._repository import Repository, SqlRepository
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.table import BookTable


class BookRepository(Repository[Book]):
    """Storage primitives for books."""


class SqlBookRepository(SqlRepository[Book, BookTable], BookRepository):
    entity_type = Book
    table_type = BookTable

    def _apply(self, entity: Book, row: BookTable) -> None:
        row.title = entity.title
        row.author_id = entity.author.id
        row.genre_id = entity.genre.id
