"""Schema creation and demo data for the catalog database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

from src.catalog.entities.author import Author, AuthorTable, SqlAuthorRepository
from src.catalog.entities.book import Book, BookTable, SqlBookRepository
from src.catalog.entities.genre import Genre, GenreTable, SqlGenreRepository

SEED_GENRES = ["Genre1", "Genre2"]
SEED_AUTHORS = ["Author1", "Author2"]
# title -> (author index, genre index) into the lists above
SEED_BOOKS = [("Book1", 0, 0), ("Book2", 1, 1), ("Book3", 1, 1)]


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all catalog tables that do not exist yet."""
        tables = [AuthorTable.__table__, GenreTable.__table__, BookTable.__table__]
        SQLModel.metadata.create_all(self._engine, tables=tables)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        tables = [BookTable.__table__, AuthorTable.__table__, GenreTable.__table__]
        SQLModel.metadata.drop_all(self._engine, tables=tables)
        logger.info("Database tables dropped.")

    def seed(self) -> int:
        """Load the demo catalog into an empty database.

        Returns:
            Number of books inserted; 0 when the catalog already has books
        """
        with Session(self._engine) as session:
            return seed_catalog(session)


def seed_catalog(session: Session) -> int:
    """Insert the demo genres, authors and books through the repositories."""
    if session.exec(select(BookTable)).first() is not None:
        logger.info("Catalog already contains books; skipping seed")
        return 0

    genre_repo = SqlGenreRepository(session)
    author_repo = SqlAuthorRepository(session)
    book_repo = SqlBookRepository(session)

    genres = [genre_repo.save(Genre(name=name)) for name in SEED_GENRES]
    authors = [author_repo.save(Author(full_name=name)) for name in SEED_AUTHORS]
    for title, author_index, genre_index in SEED_BOOKS:
        book_repo.save(Book(title=title, author=authors[author_index], genre=genres[genre_index]))

    session.commit()
    logger.info("Seeded catalog", books=len(SEED_BOOKS))
    return len(SEED_BOOKS)
