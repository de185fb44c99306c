"""Abstract repository interface (port) for Cart persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Cart


class CartRepository(ABC):
    """Port for carts and their lines."""

    @abstractmethod
    async def get_by_user(self, user_id: int) -> Cart | None:
        """Retrieve the user's cart with its lines."""
        ...

    @abstractmethod
    async def create(self, cart: Cart) -> Cart:
        ...

    @abstractmethod
    async def save(self, cart: Cart) -> Cart:
        """Persist the cart header and make the stored lines match ``cart.details``."""
        ...

    @abstractmethod
    async def delete_by_user(self, user_id: int) -> bool:
        ...
