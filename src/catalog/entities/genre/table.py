"""Genre database table model."""

from src.catalog.entities._base import EntityTable


class GenreTable(EntityTable, table=True):
    """Database persistence model for genres."""

    __tablename__ = "genres"

    name: str
