"""Application service (use case) for orders."""

import logging

from app.application.interfaces import CartRepository, OrderRepository
from app.application.mappers import order_to_response
from app.application.schemas import CheckoutRequest, OrderResponse
from app.domain.entities import Order, OrderDetail
from app.domain.exceptions import InvalidOperationError

logger = logging.getLogger(__name__)


class OrderService:
    """Turns carts into orders. Stock was already reserved when lines were added."""

    def __init__(self, repository: OrderRepository, cart_repository: CartRepository):
        self._repository = repository
        self._cart_repository = cart_repository

    async def get_order(self, order_id: int) -> OrderResponse | None:
        order = await self._repository.get_by_id(order_id)
        return order_to_response(order) if order else None

    async def list_orders(self) -> list[OrderResponse]:
        return [order_to_response(o) for o in await self._repository.get_all()]

    async def list_user_orders(self, user_id: int) -> list[OrderResponse]:
        return [order_to_response(o) for o in await self._repository.get_by_user(user_id)]

    async def checkout(self, user_id: int, data: CheckoutRequest) -> OrderResponse | None:
        """Create an order from the user's cart and empty the cart.

        Returns None when the user has no cart.
        """
        cart = await self._cart_repository.get_by_user(user_id)
        if cart is None:
            return None
        if not cart.details:
            raise InvalidOperationError("The cart is empty")
        if not cart.enabled:
            raise InvalidOperationError(f"The cart of user {user_id} is disabled")

        # Lines of deleted records are gone; the stored total may still count them.
        cart.recalculate_total()
        order = Order(
            user_id=user_id,
            payment_method=data.payment_method.strip(),
            total=cart.total_price,
            details=[
                OrderDetail(
                    record_id=d.record_id,
                    amount=d.amount,
                    price=d.price,
                    total=d.total,
                    record_title=d.record_title,
                )
                for d in cart.details
            ],
        )
        created = await self._repository.create(order)

        cart.details.clear()
        cart.recalculate_total()
        await self._cart_repository.save(cart)

        logger.info("Order %s placed by user %s (total=%s)", created.id, user_id, created.total)
        return order_to_response(created)
