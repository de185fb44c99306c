"""Record endpoints. Reads are public; writes and stock changes need the Admin role."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    RecordInsert,
    RecordResponse,
    RecordUpdate,
    StockAdjustmentResponse,
)
from app.application.services import RecordService
from app.application.validators import validate_record_insert, validate_record_update
from app.domain.exceptions import InsufficientStockError
from app.infrastructure.dependencies import get_record_service
from app.presentation.api.auth import require_admin

from .common import bad_request, check_positive_id, not_found, raise_if_invalid

router = APIRouter(prefix="/records", tags=["Records"])


@router.get("", response_model=list[RecordResponse])
async def list_records(
    service: RecordService = Depends(get_record_service),
) -> list[RecordResponse]:
    return await service.list_records()


@router.get("/sorted/{ascending}", response_model=list[RecordResponse])
async def sorted_records(
    ascending: bool,
    service: RecordService = Depends(get_record_service),
) -> list[RecordResponse]:
    return await service.get_sorted_by_title(ascending)


@router.get("/search/{text}", response_model=list[RecordResponse])
async def search_records(
    text: str,
    service: RecordService = Depends(get_record_service),
) -> list[RecordResponse]:
    if not text.strip():
        raise bad_request("The search text cannot be empty")
    records = await service.search_by_title(text)
    if not records:
        raise not_found(f"No records were found that match the text '{text}'")
    return records


@router.get("/price-range", response_model=list[RecordResponse])
async def records_by_price_range(
    min_price: Decimal = Query(..., alias="min"),
    max_price: Decimal = Query(..., alias="max"),
    service: RecordService = Depends(get_record_service),
) -> list[RecordResponse]:
    if min_price < 0 or max_price < 0:
        raise bad_request("The prices cannot be negative")
    if min_price > max_price:
        raise bad_request("The minimum price cannot be greater than the maximum price")
    return await service.get_by_price_range(min_price, max_price)


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(
    record_id: int,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    record = await service.get_record(record_id)
    if record is None:
        raise not_found(f"The record with ID {record_id} was not found")
    return record


@router.post(
    "",
    response_model=RecordResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin())],
)
async def create_record(
    data: RecordInsert,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    raise_if_invalid(validate_record_insert(data))
    return await service.create_record(data)


@router.put(
    "/{record_id}",
    response_model=RecordResponse,
    dependencies=[Depends(require_admin())],
)
async def update_record(
    record_id: int,
    data: RecordUpdate,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    if record_id != data.id:
        raise bad_request("The ID of the route does not match the ID of the record")
    raise_if_invalid(validate_record_update(data))
    record = await service.update_record(record_id, data)
    if record is None:
        raise not_found(f"The record with ID {record_id} was not found")
    return record


@router.put(
    "/{record_id}/stock/{amount}",
    response_model=StockAdjustmentResponse,
    dependencies=[Depends(require_admin())],
)
async def adjust_stock(
    record_id: int,
    amount: int,
    service: RecordService = Depends(get_record_service),
) -> StockAdjustmentResponse:
    """Add ``amount`` units to the stock (negative to remove)."""
    check_positive_id(record_id, "record")
    try:
        result = await service.adjust_stock(record_id, amount)
    except InsufficientStockError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": str(e),
                "record_id": record_id,
                "requested_amount": amount,
                "current_stock": e.available,
            },
        )
    if result is None:
        raise not_found(f"The record with ID {record_id} was not found")
    return result


@router.delete(
    "/{record_id}",
    response_model=RecordResponse,
    dependencies=[Depends(require_admin())],
)
async def delete_record(
    record_id: int,
    service: RecordService = Depends(get_record_service),
) -> RecordResponse:
    record = await service.delete_record(record_id)
    if record is None:
        raise not_found(f"The record with ID {record_id} was not found")
    return record
