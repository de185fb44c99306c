"""Concrete repository implementation for Order backed by SQLAlchemy."""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import OrderRepository
from app.domain.entities import Order, OrderDetail
from app.infrastructure.database.models import OrderDetailModel, OrderModel


class SQLAlchemyOrderRepository(OrderRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            order_date=model.order_date,
            payment_method=model.payment_method,
            total=model.total,
            details=[
                OrderDetail(
                    id=d.id,
                    order_id=d.order_id,
                    record_id=d.record_id,
                    record_title=d.record_title,
                    amount=d.amount,
                    price=d.price,
                    total=d.total,
                )
                for d in model.details
            ],
        )

    def _select(self) -> Select:
        return (
            select(OrderModel)
            .options(selectinload(OrderModel.details))
            .execution_options(populate_existing=True)
        )

    async def get_by_id(self, order_id: int) -> Order | None:
        stmt = self._select().where(OrderModel.id == order_id)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_user(self, user_id: int) -> list[Order]:
        stmt = self._select().where(OrderModel.user_id == user_id).order_by(OrderModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_all(self) -> list[Order]:
        result = await self._session.execute(self._select().order_by(OrderModel.id))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def create(self, order: Order) -> Order:
        model = OrderModel(
            user_id=order.user_id,
            order_date=order.order_date,
            payment_method=order.payment_method,
            total=order.total,
            details=[
                OrderDetailModel(
                    record_id=d.record_id,
                    record_title=d.record_title,
                    amount=d.amount,
                    price=d.price,
                    total=d.total,
                )
                for d in order.details
            ],
        )
        self._session.add(model)
        await self._session.flush()
        return await self.get_by_id(model.id)
