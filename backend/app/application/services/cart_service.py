"""Application service (use case) for carts.

Adding a line reserves stock straight away and removing it gives the stock
back, both through ``RecordService.adjust_stock``.
"""

import logging

from app.application.interfaces import CartRepository
from app.application.mappers import cart_to_response
from app.application.schemas import CartItemRequest, CartResponse
from app.domain.entities import CartDetail
from app.domain.exceptions import InvalidOperationError, MissingReferenceError

from .record_service import RecordService

logger = logging.getLogger(__name__)


class CartService:
    def __init__(self, repository: CartRepository, record_service: RecordService):
        self._repository = repository
        self._record_service = record_service

    async def get_cart(self, user_id: int) -> CartResponse | None:
        cart = await self._repository.get_by_user(user_id)
        return cart_to_response(cart) if cart else None

    async def add_record(self, user_id: int, data: CartItemRequest) -> CartResponse | None:
        """Reserve ``data.amount`` units and put them in the user's cart.

        Returns None when the user has no cart.

        Raises:
            MissingReferenceError: the record does not exist.
            InvalidOperationError: the cart is disabled or the record discontinued.
            InsufficientStockError: not enough stock to reserve.
        """
        cart = await self._repository.get_by_user(user_id)
        if cart is None:
            return None
        if not cart.enabled:
            raise InvalidOperationError(f"The cart of user {user_id} is disabled")

        record = await self._record_service.get_record(data.record_id)
        if record is None:
            raise MissingReferenceError("record", data.record_id)
        if record.discontinued:
            raise InvalidOperationError(f"The record with ID {record.id} is discontinued")

        if await self._record_service.adjust_stock(record.id, -data.amount) is None:
            raise MissingReferenceError("record", data.record_id)

        detail = cart.find_detail(record.id)
        if detail is None:
            cart.details.append(
                CartDetail(
                    record_id=record.id,
                    amount=data.amount,
                    price=record.price,
                    cart_id=cart.id,
                    record_title=record.title,
                )
            )
        else:
            detail.amount += data.amount
        cart.recalculate_total()

        saved = await self._repository.save(cart)
        logger.info("Cart %s: +%d of record %s", cart.id, data.amount, record.id)
        return cart_to_response(saved)

    async def remove_record(self, user_id: int, data: CartItemRequest) -> CartResponse | None:
        """Take units out of the cart and release them back to stock."""
        cart = await self._repository.get_by_user(user_id)
        if cart is None:
            return None

        detail = cart.find_detail(data.record_id)
        if detail is None:
            raise InvalidOperationError(
                f"The record with ID {data.record_id} is not in the cart"
            )
        if data.amount > detail.amount:
            raise InvalidOperationError(
                f"Cannot remove {data.amount} units, the cart holds {detail.amount}"
            )

        await self._record_service.adjust_stock(data.record_id, data.amount)
        detail.amount -= data.amount
        if detail.amount == 0:
            cart.details.remove(detail)
        cart.recalculate_total()

        saved = await self._repository.save(cart)
        logger.info("Cart %s: -%d of record %s", cart.id, data.amount, data.record_id)
        return cart_to_response(saved)

    async def set_enabled(self, user_id: int, enabled: bool) -> CartResponse | None:
        cart = await self._repository.get_by_user(user_id)
        if cart is None:
            return None
        cart.enabled = enabled
        return cart_to_response(await self._repository.save(cart))
