"""Concrete repository implementation for Cart backed by SQLAlchemy."""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import CartRepository
from app.domain.entities import Cart, CartDetail
from app.infrastructure.database.models import CartDetailModel, CartModel


class SQLAlchemyCartRepository(CartRepository):
    """Implements the CartRepository port; lines are owned by the cart (delete-orphan)."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CartModel) -> Cart:
        cart = Cart(
            id=model.id,
            user_id=model.user_id,
            total_price=model.total_price,
            enabled=model.enabled,
            details=[
                CartDetail(
                    id=d.id,
                    cart_id=d.cart_id,
                    record_id=d.record_id,
                    amount=d.amount,
                    price=d.price,
                    record_title=d.record.title if d.record else None,
                )
                for d in model.details
            ],
        )
        # Lines of deleted records cascade away in the database; the stored total does not.
        cart.recalculate_total()
        return cart

    def _select(self, user_id: int) -> Select:
        return (
            select(CartModel)
            .where(CartModel.user_id == user_id)
            .options(selectinload(CartModel.details).selectinload(CartDetailModel.record))
            .execution_options(populate_existing=True)
        )

    async def _get_model(self, user_id: int) -> CartModel | None:
        result = await self._session.execute(self._select(user_id))
        return result.scalar_one_or_none()

    async def get_by_user(self, user_id: int) -> Cart | None:
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def create(self, cart: Cart) -> Cart:
        model = CartModel(user_id=cart.user_id, total_price=cart.total_price, enabled=cart.enabled)
        self._session.add(model)
        await self._session.flush()
        return await self.get_by_user(cart.user_id)

    async def save(self, cart: Cart) -> Cart:
        model = await self._get_model(cart.user_id)
        if model is None:
            raise ValueError(f"Cart for user {cart.user_id} not found in database")

        wanted = {d.record_id: d for d in cart.details}
        for line in list(model.details):
            detail = wanted.pop(line.record_id, None)
            if detail is None:
                model.details.remove(line)
            else:
                line.amount = detail.amount
                line.price = detail.price
        for detail in wanted.values():
            model.details.append(
                CartDetailModel(record_id=detail.record_id, amount=detail.amount, price=detail.price)
            )

        model.total_price = cart.total_price
        model.enabled = cart.enabled
        await self._session.flush()
        return await self.get_by_user(cart.user_id)

    async def delete_by_user(self, user_id: int) -> bool:
        model = await self._get_model(user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
