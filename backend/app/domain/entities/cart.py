"""Domain entities for a user's shopping cart."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class CartDetail:
    """One cart line: ``amount`` units of a record at a unit ``price`` snapshot."""

    record_id: int
    amount: int
    price: Decimal
    cart_id: int | None = None
    id: int | None = None
    record_title: str | None = None

    @property
    def total(self) -> Decimal:
        return self.price * self.amount


@dataclass
class Cart:
    """Shopping cart — exactly one per user."""

    user_id: int
    total_price: Decimal = Decimal("0")
    enabled: bool = True
    id: int | None = None
    details: list[CartDetail] = field(default_factory=list)

    def recalculate_total(self) -> None:
        self.total_price = sum((d.total for d in self.details), Decimal("0"))

    def find_detail(self, record_id: int) -> CartDetail | None:
        for detail in self.details:
            if detail.record_id == record_id:
                return detail
        return None
