"""Abstract repository interface (port) for Record persistence."""

from abc import ABC, abstractmethod
from decimal import Decimal

from app.domain.entities import Record


class RecordRepository(ABC):
    """Port for record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, record_id: int) -> Record | None:
        """Retrieve a record with the name of its group."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Record]:
        ...

    @abstractmethod
    async def get_sorted_by_title(self, ascending: bool) -> list[Record]:
        ...

    @abstractmethod
    async def search_by_title(self, text: str) -> list[Record]:
        """Case-insensitive substring match on the title."""
        ...

    @abstractmethod
    async def get_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Record]:
        """Records priced within ``[min_price, max_price]``."""
        ...

    @abstractmethod
    async def create(self, record: Record) -> Record:
        ...

    @abstractmethod
    async def update(self, record: Record) -> Record:
        ...

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def adjust_stock(self, record_id: int, amount: int) -> Record | None:
        """Apply ``stock += amount`` only if the result stays non-negative.

        Implementations must make the check and the write a single atomic
        step. Returns the updated record, or None when no row matched
        (missing record or not enough stock).
        """
        ...
