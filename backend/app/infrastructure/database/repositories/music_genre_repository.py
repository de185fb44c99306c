"""Concrete repository implementation for MusicGenre backed by SQLAlchemy."""

from sqlalchemy import Select, delete, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import MusicGenreRepository
from app.domain.entities import MusicGenre
from app.infrastructure.database.models import GroupModel, MusicGenreModel


class SQLAlchemyMusicGenreRepository(MusicGenreRepository):
    """Implements the MusicGenreRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _select(self) -> Select:
        total_groups = (
            select(func.count(GroupModel.id))
            .where(GroupModel.music_genre_id == MusicGenreModel.id)
            .correlate(MusicGenreModel)
            .scalar_subquery()
        )
        return select(MusicGenreModel, total_groups)

    async def _fetch(self, stmt: Select) -> list[MusicGenre]:
        result = await self._session.execute(stmt)
        return [
            MusicGenre(id=m.id, name=m.name, total_groups=total)
            for m, total in result.all()
        ]

    async def get_by_id(self, genre_id: int) -> MusicGenre | None:
        genres = await self._fetch(self._select().where(MusicGenreModel.id == genre_id))
        return genres[0] if genres else None

    async def get_all(self) -> list[MusicGenre]:
        return await self._fetch(self._select().order_by(MusicGenreModel.id))

    async def search_by_name(self, text: str) -> list[MusicGenre]:
        stmt = self._select().where(MusicGenreModel.name.icontains(text, autoescape=True))
        return await self._fetch(stmt.order_by(MusicGenreModel.id))

    async def get_sorted_by_name(self, ascending: bool) -> list[MusicGenre]:
        order = MusicGenreModel.name.asc() if ascending else MusicGenreModel.name.desc()
        return await self._fetch(self._select().order_by(order, MusicGenreModel.id))

    async def exists(self, genre_id: int) -> bool:
        stmt = select(exists().where(MusicGenreModel.id == genre_id))
        return bool(await self._session.scalar(stmt))

    async def has_groups(self, genre_id: int) -> bool:
        stmt = select(exists().where(GroupModel.music_genre_id == genre_id))
        return bool(await self._session.scalar(stmt))

    async def create(self, genre: MusicGenre) -> MusicGenre:
        model = MusicGenreModel(name=genre.name)
        self._session.add(model)
        await self._session.flush()
        return MusicGenre(id=model.id, name=model.name, total_groups=0)

    async def update(self, genre: MusicGenre) -> MusicGenre:
        model = await self._session.get(MusicGenreModel, genre.id)
        if model is None:
            raise ValueError(f"MusicGenre {genre.id} not found in database")
        model.name = genre.name
        await self._session.flush()
        return await self.get_by_id(genre.id)

    async def delete_if_unreferenced(self, genre_id: int) -> bool:
        stmt = (
            delete(MusicGenreModel)
            .where(
                MusicGenreModel.id == genre_id,
                ~exists().where(GroupModel.music_genre_id == genre_id),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
