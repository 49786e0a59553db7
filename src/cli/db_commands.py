"""Catalog database commands."""

import typer
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from src.catalog.core.mapping import to_book_dto
from src.catalog.core.services import DbManageService, DbSessionService
from src.catalog.entities import SqlBookRepository
from src.catalog.runtime.context import get_config

console = Console()


def get_db_service() -> DbSessionService:
    """Build the database service from the active configuration."""
    try:
        return DbSessionService()
    except Exception as e:
        console.print(f"[red]❌ Failed to configure the database: {e}[/red]")
        raise typer.Exit(code=1) from e


def init_db(
    drop: bool = typer.Option(False, "--drop", help="Drop the catalog tables first"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Create the catalog tables."""
    manager = DbManageService(get_db_service().engine)

    if drop:
        if not force and not Confirm.ask(
            "Drop all catalog tables? Every book, author and genre will be lost"
        ):
            console.print("[yellow]Cancelled[/yellow]")
            return
        manager.drop_all()
        console.print("[yellow]Dropped catalog tables[/yellow]")

    manager.create_all()
    console.print(f"[green]✅ Catalog tables ready at {get_config().database.url}[/green]")


def seed() -> None:
    """Load the demo genres, authors and books into an empty catalog."""
    db = get_db_service()
    manager = DbManageService(db.engine)
    manager.create_all()

    inserted = manager.seed()
    if inserted:
        console.print(f"[green]✅ Inserted {inserted} books[/green]")
    else:
        console.print("[yellow]Catalog already has books; nothing inserted[/yellow]")


def list_books() -> None:
    """Print every book in the catalog."""
    db = get_db_service()

    with db.session_scope() as session:
        books = [to_book_dto(book) for book in SqlBookRepository(session).find_all()]

    if not books:
        console.print("[yellow]The catalog is empty[/yellow]")
        return

    table = Table(title="Books")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Author", style="blue")
    table.add_column("Genre", style="magenta")

    for book in books:
        table.add_row(
            str(book.id), book.title, book.author_dto.full_name, book.genre_dto.name
        )

    console.print(table)
    console.print(f"\n[green]Found {len(books)} books[/green]")
