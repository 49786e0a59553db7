"""Genre JSON API (read only)."""

from fastapi import APIRouter, Depends

from src.catalog.api.http.deps import EntityIdPath, get_genre_service
from src.catalog.core.mapping import to_genre_dto
from src.catalog.core.models import GenreDto
from src.catalog.core.services import GenreService

router = APIRouter(prefix="/genres/api/v1", tags=["genres"])


@router.get("", response_model=list[GenreDto])
def list_genres(
    genre_service: GenreService = Depends(get_genre_service),
) -> list[GenreDto]:
    return [to_genre_dto(genre) for genre in genre_service.find_all()]


@router.get("/{genre_id}", response_model=GenreDto)
def get_genre(
    genre_id: EntityIdPath,
    genre_service: GenreService = Depends(get_genre_service),
) -> GenreDto:
    return to_genre_dto(genre_service.find_by_id(genre_id))
