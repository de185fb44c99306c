"""Pydantic DTOs for orders."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CheckoutRequest(BaseModel):
    payment_method: str = Field("", examples=["Credit card"])


class OrderDetailResponse(BaseModel):
    id: int
    record_id: int
    record_title: str | None
    amount: int
    price: Decimal
    total: Decimal


class OrderResponse(BaseModel):
    id: int
    user_id: int
    order_date: datetime
    payment_method: str
    total: Decimal
    details: list[OrderDetailResponse]
