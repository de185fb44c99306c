"""Pydantic DTOs for carts and cart lines."""

from decimal import Decimal

from pydantic import BaseModel


class CartItemRequest(BaseModel):
    """Adds ``amount`` units of a record to, or removes them from, a cart."""

    record_id: int = 0
    amount: int = 0


class CartDetailResponse(BaseModel):
    id: int
    record_id: int
    record_title: str | None
    amount: int
    price: Decimal
    total: Decimal


class CartResponse(BaseModel):
    id: int
    user_id: int
    total_price: Decimal
    enabled: bool
    details: list[CartDetailResponse]
