"""Tests for the SQL-level guards of the record and group repositories."""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from app.infrastructure.database import (
    GroupModel,
    MusicGenreModel,
    RecordModel,
    async_session_factory,
)
from app.infrastructure.database.repositories import (
    SQLAlchemyGroupRepository,
    SQLAlchemyRecordRepository,
)


async def _seed(session, stock: int = 5) -> tuple[int, int]:
    genre = MusicGenreModel(name="Blues")
    session.add(genre)
    await session.flush()
    group = GroupModel(name="Cream", music_genre_id=genre.id)
    session.add(group)
    await session.flush()
    record = RecordModel(
        title="Disraeli Gears",
        year_of_publication=1967,
        price=Decimal("11.00"),
        stock=stock,
        group_id=group.id,
    )
    session.add(record)
    await session.flush()
    return group.id, record.id


@pytest.mark.asyncio
async def test_conditional_stock_update(schema):
    async with async_session_factory() as session:
        _, record_id = await _seed(session, stock=5)
        repository = SQLAlchemyRecordRepository(session)

        assert await repository.adjust_stock(record_id, -6) is None
        assert (await repository.get_by_id(record_id)).stock == 5

        drained = await repository.adjust_stock(record_id, -5)
        assert drained.stock == 0
        assert await repository.adjust_stock(record_id, -1) is None
        assert await repository.adjust_stock(999, 1) is None


@pytest.mark.asyncio
async def test_database_rejects_negative_stock(schema):
    async with async_session_factory() as session:
        _, record_id = await _seed(session, stock=1)
        record = await session.get(RecordModel, record_id)
        record.stock = -1
        with pytest.raises(IntegrityError):
            await session.flush()
        await session.rollback()


@pytest.mark.asyncio
async def test_group_delete_is_refused_inside_the_statement(schema):
    async with async_session_factory() as session:
        group_id, record_id = await _seed(session)
        groups = SQLAlchemyGroupRepository(session)

        assert await groups.delete_if_unreferenced(group_id) is False
        assert await groups.exists(group_id)

        await SQLAlchemyRecordRepository(session).delete(record_id)
        assert await groups.delete_if_unreferenced(group_id) is True
        assert not await groups.exists(group_id)
