"""Application service (use case) for Group operations."""

import logging

from app.application.interfaces import GroupRepository, MusicGenreRepository
from app.application.mappers import group_to_records, group_to_response
from app.application.schemas import (
    GroupInsert,
    GroupRecordsResponse,
    GroupResponse,
    GroupUpdate,
)
from app.domain.entities import Group
from app.domain.exceptions import DependentEntitiesError, MissingReferenceError

logger = logging.getLogger(__name__)


def _optional_image(url: str | None) -> str | None:
    if url is None or not url.strip():
        return None
    return url.strip()


class GroupService:
    """Orchestrates group CRUD and the records-before-delete guard."""

    def __init__(self, repository: GroupRepository, genre_repository: MusicGenreRepository):
        self._repository = repository
        self._genre_repository = genre_repository

    async def list_groups(self) -> list[GroupResponse]:
        groups = await self._repository.get_all()
        return [group_to_response(g) for g in groups]

    async def get_group(self, group_id: int) -> GroupResponse | None:
        group = await self._repository.get_by_id(group_id)
        return group_to_response(group) if group else None

    async def list_groups_with_records(self) -> list[GroupRecordsResponse]:
        groups = await self._repository.get_all_with_records()
        return [group_to_records(g) for g in groups]

    async def get_records_by_group(self, group_id: int) -> GroupRecordsResponse | None:
        group = await self._repository.get_with_records(group_id)
        return group_to_records(group) if group else None

    async def search_by_name(self, text: str) -> list[GroupResponse]:
        groups = await self._repository.search_by_name(text)
        return [group_to_response(g) for g in groups]

    async def get_sorted_by_name(self, ascending: bool) -> list[GroupResponse]:
        groups = await self._repository.get_sorted_by_name(ascending)
        return [group_to_response(g) for g in groups]

    async def has_records(self, group_id: int) -> bool:
        return await self._repository.has_records(group_id)

    async def create_group(self, data: GroupInsert) -> GroupResponse:
        if not await self._genre_repository.exists(data.music_genre_id):
            raise MissingReferenceError("music genre", data.music_genre_id)

        group = Group(
            name=data.name,
            music_genre_id=data.music_genre_id,
            image_group=_optional_image(data.image_url),
        )
        created = await self._repository.create(group)
        logger.info("Group %s created", created.id)
        return group_to_response(created)

    async def update_group(self, group_id: int, data: GroupUpdate) -> GroupResponse | None:
        group = await self._repository.get_by_id(group_id)
        if group is None:
            return None
        if not await self._genre_repository.exists(data.music_genre_id):
            raise MissingReferenceError("music genre", data.music_genre_id)

        group.update(
            name=data.name,
            music_genre_id=data.music_genre_id,
            image_group=_optional_image(data.image_url),
        )
        updated = await self._repository.update(group)
        logger.info("Group %s updated", group_id)
        return group_to_response(updated)

    async def delete_group(self, group_id: int) -> GroupResponse | None:
        """Delete a group that owns no records.

        Returns None when the group does not exist.

        Raises:
            DependentEntitiesError: at least one record references the group.
        """
        group = await self._repository.get_by_id(group_id)
        if group is None:
            return None
        if await self._repository.has_records(group_id):
            raise DependentEntitiesError("group", group_id, "records")

        # The store re-checks for records in the delete statement itself.
        if not await self._repository.delete_if_unreferenced(group_id):
            if not await self._repository.exists(group_id):
                return None
            raise DependentEntitiesError("group", group_id, "records")

        logger.info("Group %s deleted", group_id)
        return group_to_response(group)
