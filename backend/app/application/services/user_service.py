"""Application service (use case) for User operations."""

import logging

from app.application.interfaces import CartRepository, UserRepository
from app.application.mappers import user_to_response
from app.application.schemas import UserCreate, UserResponse
from app.domain.entities import Cart, User
from app.domain.exceptions import DependentEntitiesError, DuplicateEntityError

from .record_service import RecordService

logger = logging.getLogger(__name__)


class UserService:
    """Creates users with their cart and removes them when they have no orders."""

    def __init__(
        self,
        repository: UserRepository,
        cart_repository: CartRepository,
        record_service: RecordService,
    ):
        self._repository = repository
        self._cart_repository = cart_repository
        self._record_service = record_service

    async def list_users(self) -> list[UserResponse]:
        return [user_to_response(u) for u in await self._repository.get_all()]

    async def get_user(self, user_id: int) -> UserResponse | None:
        user = await self._repository.get_by_id(user_id)
        return user_to_response(user) if user else None

    async def get_user_by_email(self, email: str) -> UserResponse | None:
        user = await self._repository.get_by_email(email)
        return user_to_response(user) if user else None

    async def create_user(self, data: UserCreate) -> UserResponse:
        if await self._repository.get_by_email(data.email) is not None:
            raise DuplicateEntityError("User", "email", data.email)

        user = await self._repository.create(User(email=data.email, role=data.role))
        await self._cart_repository.create(Cart(user_id=user.id))
        logger.info("User %s created with an empty cart", user.id)
        return user_to_response(user)

    async def delete_user(self, user_id: int) -> UserResponse | None:
        """Delete a user without orders, returning reserved cart stock first."""
        user = await self._repository.get_by_id(user_id)
        if user is None:
            return None
        if await self._repository.has_orders(user_id):
            raise DependentEntitiesError("user", user_id, "orders")

        cart = await self._cart_repository.get_by_user(user_id)
        if cart is not None:
            for detail in cart.details:
                await self._record_service.adjust_stock(detail.record_id, detail.amount)
            await self._cart_repository.delete_by_user(user_id)

        await self._repository.delete(user_id)
        logger.info("User %s deleted", user_id)
        return user_to_response(user)
