"""Music genre endpoints. Reads are public, writes need the Admin role."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import (
    MusicGenreInsert,
    MusicGenreResponse,
    MusicGenreTotalGroupsResponse,
    MusicGenreUpdate,
)
from app.application.services import MusicGenreService
from app.application.validators import (
    validate_music_genre_insert,
    validate_music_genre_update,
)
from app.infrastructure.dependencies import get_music_genre_service
from app.presentation.api.auth import require_admin

from .common import bad_request, check_positive_id, not_found, raise_if_invalid

router = APIRouter(prefix="/music-genres", tags=["Music Genres"])


@router.get("", response_model=list[MusicGenreTotalGroupsResponse])
async def list_genres(
    service: MusicGenreService = Depends(get_music_genre_service),
) -> list[MusicGenreTotalGroupsResponse]:
    """All genres with the number of groups filed under each."""
    return await service.list_genres()


@router.get("/search/{text}", response_model=list[MusicGenreResponse])
async def search_genres(
    text: str,
    service: MusicGenreService = Depends(get_music_genre_service),
) -> list[MusicGenreResponse]:
    if not text.strip():
        raise bad_request("The search text cannot be empty")
    genres = await service.search_by_name(text)
    if not genres:
        raise not_found(f"No music genres found with the name '{text}'")
    return genres


@router.get("/sorted/{ascending}", response_model=list[MusicGenreResponse])
async def sorted_genres(
    ascending: bool,
    service: MusicGenreService = Depends(get_music_genre_service),
) -> list[MusicGenreResponse]:
    return await service.get_sorted_by_name(ascending)


@router.get("/{genre_id}", response_model=MusicGenreTotalGroupsResponse)
async def get_genre(
    genre_id: int,
    service: MusicGenreService = Depends(get_music_genre_service),
) -> MusicGenreTotalGroupsResponse:
    check_positive_id(genre_id, "music genre")
    genre = await service.get_genre(genre_id)
    if genre is None:
        raise not_found(f"The music genre with ID {genre_id} was not found")
    return genre


@router.post(
    "",
    response_model=MusicGenreResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin())],
)
async def create_genre(
    data: MusicGenreInsert,
    service: MusicGenreService = Depends(get_music_genre_service),
) -> MusicGenreResponse:
    raise_if_invalid(validate_music_genre_insert(data))
    return await service.create_genre(data)


@router.put(
    "/{genre_id}",
    response_model=MusicGenreResponse,
    dependencies=[Depends(require_admin())],
)
async def update_genre(
    genre_id: int,
    data: MusicGenreUpdate,
    service: MusicGenreService = Depends(get_music_genre_service),
) -> MusicGenreResponse:
    raise_if_invalid(validate_music_genre_update(data))
    if genre_id != data.id:
        raise bad_request("The ID in the route does not match the ID in the body")
    genre = await service.update_genre(genre_id, data)
    if genre is None:
        raise not_found(f"The music genre with ID {genre_id} was not found")
    return genre


@router.delete(
    "/{genre_id}",
    response_model=MusicGenreResponse,
    dependencies=[Depends(require_admin())],
)
async def delete_genre(
    genre_id: int,
    service: MusicGenreService = Depends(get_music_genre_service),
) -> MusicGenreResponse:
    """Delete a genre; 409 while groups are still filed under it."""
    check_positive_id(genre_id, "music genre")
    genre = await service.delete_genre(genre_id)
    if genre is None:
        raise not_found(f"The music genre with ID {genre_id} was not found")
    return genre
