"""Concrete repository implementation for Record backed by SQLAlchemy."""

from decimal import Decimal

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import RecordRepository
from app.domain.entities import Record
from app.infrastructure.database.models import GroupModel, RecordModel


def record_from_model(model: RecordModel, group_name: str | None = None) -> Record:
    """Map ORM model → domain entity."""
    return Record(
        id=model.id,
        title=model.title,
        year_of_publication=model.year_of_publication,
        image_record=model.image_record,
        price=model.price,
        stock=model.stock,
        discontinued=model.discontinued,
        group_id=model.group_id,
        group_name=group_name,
    )


class SQLAlchemyRecordRepository(RecordRepository):
    """Implements the RecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _select(self) -> Select:
        # Stock may have been changed by a bulk UPDATE; always refresh loaded rows.
        return (
            select(RecordModel, GroupModel.name)
            .join(RecordModel.group)
            .execution_options(populate_existing=True)
        )

    async def _fetch(self, stmt: Select) -> list[Record]:
        result = await self._session.execute(stmt)
        return [record_from_model(model, name) for model, name in result.all()]

    async def get_by_id(self, record_id: int) -> Record | None:
        records = await self._fetch(self._select().where(RecordModel.id == record_id))
        return records[0] if records else None

    async def get_all(self) -> list[Record]:
        return await self._fetch(self._select().order_by(RecordModel.id))

    async def get_sorted_by_title(self, ascending: bool) -> list[Record]:
        order = RecordModel.title.asc() if ascending else RecordModel.title.desc()
        return await self._fetch(self._select().order_by(order, RecordModel.id))

    async def search_by_title(self, text: str) -> list[Record]:
        stmt = self._select().where(RecordModel.title.icontains(text, autoescape=True))
        return await self._fetch(stmt.order_by(RecordModel.id))

    async def get_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Record]:
        stmt = self._select().where(RecordModel.price.between(min_price, max_price))
        return await self._fetch(stmt.order_by(RecordModel.price, RecordModel.id))

    async def create(self, record: Record) -> Record:
        model = RecordModel(
            title=record.title,
            year_of_publication=record.year_of_publication,
            image_record=record.image_record,
            price=record.price,
            stock=record.stock,
            discontinued=record.discontinued,
            group_id=record.group_id,
        )
        self._session.add(model)
        await self._session.flush()
        return await self.get_by_id(model.id)

    async def update(self, record: Record) -> Record:
        model = await self._session.get(RecordModel, record.id)
        if model is None:
            raise ValueError(f"Record {record.id} not found in database")
        model.title = record.title
        model.year_of_publication = record.year_of_publication
        model.image_record = record.image_record
        model.price = record.price
        model.stock = record.stock
        model.discontinued = record.discontinued
        model.group_id = record.group_id
        await self._session.flush()
        return await self.get_by_id(record.id)

    async def delete(self, record_id: int) -> bool:
        model = await self._session.get(RecordModel, record_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def adjust_stock(self, record_id: int, amount: int) -> Record | None:
        stmt = (
            update(RecordModel)
            .where(RecordModel.id == record_id, RecordModel.stock + amount >= 0)
            .values(stock=RecordModel.stock + amount)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_id(record_id)
