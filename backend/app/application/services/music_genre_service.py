"""Application service (use case) for MusicGenre operations."""

import logging

from app.application.interfaces import MusicGenreRepository
from app.application.mappers import music_genre_to_response, music_genre_to_total_groups
from app.application.schemas import (
    MusicGenreInsert,
    MusicGenreResponse,
    MusicGenreTotalGroupsResponse,
    MusicGenreUpdate,
)
from app.domain.entities import MusicGenre
from app.domain.exceptions import DependentEntitiesError

logger = logging.getLogger(__name__)


class MusicGenreService:
    def __init__(self, repository: MusicGenreRepository):
        self._repository = repository

    async def list_genres(self) -> list[MusicGenreTotalGroupsResponse]:
        genres = await self._repository.get_all()
        return [music_genre_to_total_groups(g) for g in genres]

    async def get_genre(self, genre_id: int) -> MusicGenreTotalGroupsResponse | None:
        genre = await self._repository.get_by_id(genre_id)
        return music_genre_to_total_groups(genre) if genre else None

    async def search_by_name(self, text: str) -> list[MusicGenreResponse]:
        genres = await self._repository.search_by_name(text)
        return [music_genre_to_response(g) for g in genres]

    async def get_sorted_by_name(self, ascending: bool) -> list[MusicGenreResponse]:
        genres = await self._repository.get_sorted_by_name(ascending)
        return [music_genre_to_response(g) for g in genres]

    async def create_genre(self, data: MusicGenreInsert) -> MusicGenreResponse:
        created = await self._repository.create(MusicGenre(name=data.name))
        logger.info("Music genre %s created", created.id)
        return music_genre_to_response(created)

    async def update_genre(
        self, genre_id: int, data: MusicGenreUpdate
    ) -> MusicGenreResponse | None:
        genre = await self._repository.get_by_id(genre_id)
        if genre is None:
            return None
        genre.update(name=data.name)
        updated = await self._repository.update(genre)
        return music_genre_to_response(updated)

    async def delete_genre(self, genre_id: int) -> MusicGenreResponse | None:
        """Delete a genre no group is filed under; None when it does not exist."""
        genre = await self._repository.get_by_id(genre_id)
        if genre is None:
            return None
        if await self._repository.has_groups(genre_id):
            raise DependentEntitiesError("music genre", genre_id, "groups")
        if not await self._repository.delete_if_unreferenced(genre_id):
            if not await self._repository.exists(genre_id):
                return None
            raise DependentEntitiesError("music genre", genre_id, "groups")
        logger.info("Music genre %s deleted", genre_id)
        return music_genre_to_response(genre)
