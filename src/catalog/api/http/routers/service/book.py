"""Book JSON API."""

from fastapi import APIRouter, Depends, status

from src.catalog.api.http.deps import EntityIdPath, get_book_service
from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.mapping import from_create_dto, from_update_dto, to_book_dto
from src.catalog.core.models import BookCreateDto, BookDto, BookUpdateDto
from src.catalog.core.services import BookService

router = APIRouter(tags=["books"])


@router.get("/list/api/v1", response_model=list[BookDto])
def list_books(book_service: BookService = Depends(get_book_service)) -> list[BookDto]:
    """List all books in id order."""
    return [to_book_dto(book) for book in book_service.find_all()]


@router.get("/book/api/v1/{book_id}", response_model=BookDto)
def get_book(
    book_id: EntityIdPath,
    book_service: BookService = Depends(get_book_service),
) -> BookDto:
    """Get a book by ID."""
    book = book_service.find_by_id(book_id)
    if book is None:
        raise NotFoundError("Book", book_id)
    return to_book_dto(book)


@router.post("/create/api/v1", response_model=BookDto, status_code=status.HTTP_201_CREATED)
def create_book(
    book: BookCreateDto,
    book_service: BookService = Depends(get_book_service),
) -> BookDto:
    """Create a new book."""
    title, author_id, genre_id = from_create_dto(book)
    return to_book_dto(book_service.create(title, author_id, genre_id))


@router.put("/edit/book/api/v1", response_model=BookDto)
def update_book(
    book: BookUpdateDto,
    book_service: BookService = Depends(get_book_service),
) -> BookDto:
    """Replace the title, author and genre of a book."""
    book_id, title, author_id, genre_id = from_update_dto(book)
    return to_book_dto(book_service.update(book_id, title, author_id, genre_id))


@router.delete("/delete/book/api/v1/{book_id}")
def delete_book(
    book_id: EntityIdPath,
    book_service: BookService = Depends(get_book_service),
) -> dict[str, str]:
    """Delete a book. Deleting a missing book also succeeds."""
    book_service.delete_by_id(book_id)
    return {"message": "Book deleted successfully"}
