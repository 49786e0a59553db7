"""Server-rendered catalog pages.

Each route picks a view name and fills a model bag; the view `name` is
rendered from the Jinja2 template `name.html`. The edit, create and delete
forms submit through the JSON API and then return to `/list`.
"""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.catalog.api.http.deps import (
    EntityIdPath,
    get_author_service,
    get_book_service,
    get_genre_service,
)
from src.catalog.core.mapping import to_author_dto, to_book_dto, to_genre_dto
from src.catalog.core.services import AuthorService, BookService, GenreService

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def render(
    request: Request,
    view: str,
    model: dict[str, Any],
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    """Render view `view` with the model bag `model`."""
    return templates.TemplateResponse(
        request, f"{view}.html", model, status_code=status_code
    )


def render_not_found(request: Request, entity: str, entity_id: int) -> HTMLResponse:
    return render(
        request,
        "not_found",
        {"entity": entity, "entity_id": entity_id},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _choices(author_service: AuthorService, genre_service: GenreService) -> dict[str, Any]:
    return {
        "authors": [to_author_dto(a) for a in author_service.find_all()],
        "genres": [to_genre_dto(g) for g in genre_service.find_all()],
    }


@router.get("/")
def index() -> RedirectResponse:
    return RedirectResponse("/list", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/list")
def list_books_page(
    request: Request,
    book_service: BookService = Depends(get_book_service),
) -> HTMLResponse:
    books = [to_book_dto(book) for book in book_service.find_all()]
    return render(request, "list", {"books": books})


@router.get("/create/book")
def create_book_page(
    request: Request,
    author_service: AuthorService = Depends(get_author_service),
    genre_service: GenreService = Depends(get_genre_service),
) -> HTMLResponse:
    return render(request, "create", _choices(author_service, genre_service))


@router.get("/edit/book/{book_id}")
def edit_book_page(
    request: Request,
    book_id: EntityIdPath,
    book_service: BookService = Depends(get_book_service),
    author_service: AuthorService = Depends(get_author_service),
    genre_service: GenreService = Depends(get_genre_service),
) -> HTMLResponse:
    book = book_service.find_by_id(book_id)
    if book is None:
        return render_not_found(request, "Book", book_id)

    model = {"book": to_book_dto(book), **_choices(author_service, genre_service)}
    return render(request, "edit", model)


@router.get("/delete/book/{book_id}")
def delete_book_page(
    request: Request,
    book_id: EntityIdPath,
    book_service: BookService = Depends(get_book_service),
) -> HTMLResponse:
    book = book_service.find_by_id(book_id)
    if book is None:
        return render_not_found(request, "Book", book_id)

    return render(request, "delete", {"book": to_book_dto(book)})
