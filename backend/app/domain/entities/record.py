"""Domain entity for a record (album)."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Record:
    """An album on sale, owned by exactly one group."""

    title: str
    year_of_publication: int
    price: Decimal
    stock: int
    group_id: int
    discontinued: bool = False
    image_record: str | None = None
    id: int | None = None
    group_name: str | None = None

    def update(
        self,
        *,
        title: str,
        year_of_publication: int,
        price: Decimal,
        stock: int,
        discontinued: bool,
        group_id: int,
        image_record: str | None = None,
    ) -> None:
        """Overwrite all fields; the image is only replaced when a new one is given."""
        self.title = title
        self.year_of_publication = year_of_publication
        self.price = price
        self.stock = stock
        self.discontinued = discontinued
        self.group_id = group_id
        if image_record:
            self.image_record = image_record

    def can_release(self, amount: int) -> bool:
        """True when ``amount`` units may be taken out of stock."""
        return amount <= self.stock
