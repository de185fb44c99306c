"""Domain entities for a placed order."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


@dataclass
class OrderDetail:
    """Snapshot of one cart line at checkout time."""

    record_id: int
    amount: int
    price: Decimal
    total: Decimal
    order_id: int | None = None
    id: int | None = None
    record_title: str | None = None


@dataclass
class Order:
    user_id: int
    payment_method: str
    total: Decimal = Decimal("0")
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: int | None = None
    details: list[OrderDetail] = field(default_factory=list)
