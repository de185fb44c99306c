"""Concrete repository implementation for Group backed by SQLAlchemy."""

from sqlalchemy import Select, delete, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import GroupRepository
from app.domain.entities import Group
from app.infrastructure.database.models import GroupModel, MusicGenreModel, RecordModel

from .record_repository import record_from_model


class SQLAlchemyGroupRepository(GroupRepository):
    """Implements the GroupRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(
        self,
        model: GroupModel,
        genre_name: str | None = None,
        total_records: int | None = None,
        with_records: bool = False,
    ) -> Group:
        """Map ORM model → domain entity."""
        group = Group(
            id=model.id,
            name=model.name,
            image_group=model.image_group,
            music_genre_id=model.music_genre_id,
            music_genre_name=genre_name,
            total_records=total_records,
        )
        if with_records:
            group.records = [record_from_model(r, model.name) for r in model.records]
            group.total_records = len(group.records)
        return group

    def _select(self) -> Select:
        total_records = (
            select(func.count(RecordModel.id))
            .where(RecordModel.group_id == GroupModel.id)
            .correlate(GroupModel)
            .scalar_subquery()
        )
        return select(GroupModel, MusicGenreModel.name, total_records).join(
            GroupModel.music_genre
        )

    async def _fetch(self, stmt: Select) -> list[Group]:
        result = await self._session.execute(stmt)
        return [self._to_entity(m, name, total) for m, name, total in result.all()]

    async def get_by_id(self, group_id: int) -> Group | None:
        groups = await self._fetch(self._select().where(GroupModel.id == group_id))
        return groups[0] if groups else None

    async def get_all(self) -> list[Group]:
        return await self._fetch(self._select().order_by(GroupModel.id))

    def _select_with_records(self) -> Select:
        return (
            select(GroupModel)
            .options(selectinload(GroupModel.records))
            .execution_options(populate_existing=True)
        )

    async def get_with_records(self, group_id: int) -> Group | None:
        stmt = self._select_with_records().where(GroupModel.id == group_id)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model, with_records=True) if model else None

    async def get_all_with_records(self) -> list[Group]:
        stmt = self._select_with_records().order_by(GroupModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(m, with_records=True) for m in result.scalars().all()]

    async def search_by_name(self, text: str) -> list[Group]:
        stmt = self._select().where(GroupModel.name.icontains(text, autoescape=True))
        return await self._fetch(stmt.order_by(GroupModel.id))

    async def get_sorted_by_name(self, ascending: bool) -> list[Group]:
        order = GroupModel.name.asc() if ascending else GroupModel.name.desc()
        return await self._fetch(self._select().order_by(order, GroupModel.id))

    async def exists(self, group_id: int) -> bool:
        stmt = select(exists().where(GroupModel.id == group_id))
        return bool(await self._session.scalar(stmt))

    async def has_records(self, group_id: int) -> bool:
        stmt = select(exists().where(RecordModel.group_id == group_id))
        return bool(await self._session.scalar(stmt))

    async def create(self, group: Group) -> Group:
        model = GroupModel(
            name=group.name,
            image_group=group.image_group,
            music_genre_id=group.music_genre_id,
        )
        self._session.add(model)
        await self._session.flush()
        return await self.get_by_id(model.id)

    async def update(self, group: Group) -> Group:
        model = await self._session.get(GroupModel, group.id)
        if model is None:
            raise ValueError(f"Group {group.id} not found in database")
        model.name = group.name
        model.image_group = group.image_group
        model.music_genre_id = group.music_genre_id
        await self._session.flush()
        return await self.get_by_id(group.id)

    async def delete_if_unreferenced(self, group_id: int) -> bool:
        stmt = (
            delete(GroupModel)
            .where(
                GroupModel.id == group_id,
                ~exists().where(RecordModel.group_id == group_id),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
