"""Abstract repository interface (port) for Order persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Order


class OrderRepository(ABC):
    @abstractmethod
    async def get_by_id(self, order_id: int) -> Order | None:
        ...

    @abstractmethod
    async def get_by_user(self, user_id: int) -> list[Order]:
        ...

    @abstractmethod
    async def get_all(self) -> list[Order]:
        ...

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Persist an order together with its details."""
        ...
