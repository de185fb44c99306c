"""Validation rules for record payloads.

Insert and update share every rule except the image: an insert must carry
an Imgur URL, an update may leave it empty to keep the current image.
"""

from decimal import Decimal

from app.application.schemas import RecordInsert, RecordUpdate

from .common import (
    check_optional_image,
    check_positive_id,
    check_required_image,
    check_text,
)

MIN_YEAR = 1900
MAX_YEAR = 2100
PRICE_STEP = Decimal("0.01")


def _check_year(year: int) -> list[str]:
    if not MIN_YEAR <= year <= MAX_YEAR:
        return [f"The publication year must be between {MIN_YEAR} and {MAX_YEAR}"]
    return []


def _check_price(price: Decimal) -> list[str]:
    if price <= 0:
        return ["The price must be greater than zero"]
    if price != price.quantize(PRICE_STEP):
        return ["The price cannot have more than 2 decimal places"]
    return []


def _check_stock(stock: int) -> list[str]:
    if stock < 0:
        return ["Stock cannot be negative"]
    return []


def validate_record_insert(data: RecordInsert) -> list[str]:
    return [
        *check_text(data.title, "title"),
        *_check_year(data.year_of_publication),
        *check_required_image(data.image_url),
        *_check_price(data.price),
        *_check_stock(data.stock),
        *check_positive_id(data.group_id, "group"),
    ]


def validate_record_update(data: RecordUpdate) -> list[str]:
    return [
        *check_positive_id(data.id, "record"),
        *check_text(data.title, "title"),
        *_check_year(data.year_of_publication),
        *check_optional_image(data.image_url),
        *_check_price(data.price),
        *_check_stock(data.stock),
        *check_positive_id(data.group_id, "group"),
    ]
