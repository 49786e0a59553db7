"""Author JSON API (read only)."""

from fastapi import APIRouter, Depends

from src.catalog.api.http.deps import EntityIdPath, get_author_service
from src.catalog.core.mapping import to_author_dto
from src.catalog.core.models import AuthorDto
from src.catalog.core.services import AuthorService

router = APIRouter(prefix="/authors/api/v1", tags=["authors"])


@router.get("", response_model=list[AuthorDto])
def list_authors(
    author_service: AuthorService = Depends(get_author_service),
) -> list[AuthorDto]:
    return [to_author_dto(author) for author in author_service.find_all()]


@router.get("/{author_id}", response_model=AuthorDto)
def get_author(
    author_id: EntityIdPath,
    author_service: AuthorService = Depends(get_author_service),
) -> AuthorDto:
    return to_author_dto(author_service.find_by_id(author_id))
