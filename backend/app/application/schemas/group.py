"""Pydantic DTOs for the Group feature."""

from pydantic import BaseModel, Field

from .record import RecordItemResponse


class GroupInsert(BaseModel):
    """Schema for creating a new group."""

    name: str = Field("", examples=["Iron Maiden"])
    image_url: str | None = Field(None, examples=["https://i.imgur.com/example.jpg"])
    music_genre_id: int = 0


class GroupUpdate(BaseModel):
    """Schema for a full overwrite of an existing group."""

    id: int = 0
    name: str = ""
    image_url: str | None = None
    music_genre_id: int = 0


class GroupItemResponse(BaseModel):
    """Group as returned by list and basic operations."""

    id: int
    name: str
    image_url: str | None
    music_genre_id: int


class GroupResponse(GroupItemResponse):
    """Group with its genre name and number of records."""

    music_genre_name: str | None = None
    total_records: int | None = None


class GroupRecordsResponse(BaseModel):
    """Group together with its records."""

    id: int
    name: str
    image_url: str | None
    total_records: int
    records: list[RecordItemResponse] = Field(default_factory=list)
