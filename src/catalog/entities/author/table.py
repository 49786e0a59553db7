"""Author database table model."""

from src.catalog.entities._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "authors"

    full_name: str
