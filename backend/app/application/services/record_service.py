"""Application service (use case) for Record operations.

Stock can only move through ``adjust_stock``; the repository applies the
change as one conditional update so concurrent adjustments can never drive
it below zero.
"""

import logging
from decimal import Decimal

from app.application.interfaces import GroupRepository, RecordRepository
from app.application.mappers import record_to_response
from app.application.schemas import (
    RecordInsert,
    RecordResponse,
    RecordUpdate,
    StockAdjustmentResponse,
)
from app.domain.entities import Record
from app.domain.exceptions import InsufficientStockError, MissingReferenceError

logger = logging.getLogger(__name__)


class RecordService:
    """Orchestrates record CRUD and stock logic. Depends on repository ports (DI)."""

    def __init__(self, repository: RecordRepository, group_repository: GroupRepository):
        self._repository = repository
        self._group_repository = group_repository

    async def list_records(self) -> list[RecordResponse]:
        records = await self._repository.get_all()
        return [record_to_response(r) for r in records]

    async def get_record(self, record_id: int) -> RecordResponse | None:
        record = await self._repository.get_by_id(record_id)
        return record_to_response(record) if record else None

    async def get_sorted_by_title(self, ascending: bool) -> list[RecordResponse]:
        records = await self._repository.get_sorted_by_title(ascending)
        return [record_to_response(r) for r in records]

    async def search_by_title(self, text: str) -> list[RecordResponse]:
        records = await self._repository.search_by_title(text)
        return [record_to_response(r) for r in records]

    async def get_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[RecordResponse]:
        records = await self._repository.get_by_price_range(min_price, max_price)
        return [record_to_response(r) for r in records]

    async def create_record(self, data: RecordInsert) -> RecordResponse:
        """Create a record for an existing group.

        Raises:
            MissingReferenceError: the group does not exist.
        """
        if not await self._group_repository.exists(data.group_id):
            raise MissingReferenceError("group", data.group_id)

        record = Record(
            title=data.title,
            year_of_publication=data.year_of_publication,
            price=data.price,
            stock=data.stock,
            discontinued=data.discontinued,
            group_id=data.group_id,
            image_record=data.image_url,
        )
        created = await self._repository.create(record)
        logger.info("Record %s created for group %s", created.id, created.group_id)
        return record_to_response(created)

    async def update_record(
        self, record_id: int, data: RecordUpdate
    ) -> RecordResponse | None:
        """Overwrite a record. Returns None when it does not exist."""
        record = await self._repository.get_by_id(record_id)
        if record is None:
            return None
        if data.group_id != record.group_id and not await self._group_repository.exists(
            data.group_id
        ):
            raise MissingReferenceError("group", data.group_id)

        image = data.image_url.strip() if data.image_url else None
        record.update(
            title=data.title,
            year_of_publication=data.year_of_publication,
            price=data.price,
            stock=data.stock,
            discontinued=data.discontinued,
            group_id=data.group_id,
            image_record=image,
        )
        updated = await self._repository.update(record)
        logger.info("Record %s updated", record_id)
        return record_to_response(updated)

    async def adjust_stock(
        self, record_id: int, amount: int
    ) -> StockAdjustmentResponse | None:
        """Add ``amount`` (which may be negative) to the record's stock.

        Returns None when the record does not exist.

        Raises:
            InsufficientStockError: the decrease is larger than the stock.
        """
        record = await self._repository.get_by_id(record_id)
        if record is None:
            return None
        if amount < 0 and not record.can_release(-amount):
            logger.warning(
                "Rejected stock change %d on record %s (stock=%d)",
                amount, record_id, record.stock,
            )
            raise InsufficientStockError(record_id, amount, record.stock)

        updated = await self._repository.adjust_stock(record_id, amount)
        if updated is None:
            # Another request changed the stock between the read and the write.
            current = await self._repository.get_by_id(record_id)
            if current is None:
                return None
            logger.warning(
                "Concurrent stock change on record %s; %d no longer fits (stock=%d)",
                record_id, amount, current.stock,
            )
            raise InsufficientStockError(record_id, amount, current.stock)

        logger.info("Record %s stock %+d -> %d", record_id, amount, updated.stock)
        return StockAdjustmentResponse(
            message=f"The stock of the record with ID {record_id} has been updated in {amount} units",
            record_id=record_id,
            title=updated.title,
            previous_stock=updated.stock - amount,
            new_stock=updated.stock,
        )

    async def delete_record(self, record_id: int) -> RecordResponse | None:
        """Delete a record and return what was deleted, or None when missing."""
        record = await self._repository.get_by_id(record_id)
        if record is None:
            return None
        await self._repository.delete(record_id)
        logger.info("Record %s deleted", record_id)
        return record_to_response(record)
