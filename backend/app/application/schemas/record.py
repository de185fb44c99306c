"""Pydantic DTOs for the Record feature."""

from decimal import Decimal

from pydantic import BaseModel, Field


class RecordInsert(BaseModel):
    """Schema for creating a record. The image URL is mandatory here."""

    title: str = Field("", examples=["The Number of the Beast"])
    year_of_publication: int = Field(0, examples=[1982])
    image_url: str = Field("", examples=["https://i.imgur.com/example.jpg"])
    price: Decimal = Field(Decimal("0"), examples=["19.99"])
    stock: int = 0
    discontinued: bool = False
    group_id: int = 0


class RecordUpdate(BaseModel):
    """Full overwrite of a record. An empty ``image_url`` keeps the current image."""

    id: int = 0
    title: str = ""
    year_of_publication: int = 0
    image_url: str | None = None
    price: Decimal = Decimal("0")
    stock: int = 0
    discontinued: bool = False
    group_id: int = 0


class RecordItemResponse(BaseModel):
    id: int
    title: str
    year_of_publication: int
    image_url: str | None
    price: Decimal
    stock: int
    discontinued: bool
    group_id: int


class RecordResponse(RecordItemResponse):
    """Record with the name of its owning group."""

    group_name: str | None = None


class StockAdjustmentResponse(BaseModel):
    """Outcome of a stock adjustment."""

    message: str
    record_id: int
    title: str
    previous_stock: int
    new_stock: int
