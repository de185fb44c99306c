"""Pydantic DTOs for the MusicGenre feature.

Field rules (lengths, ranges) are enforced by ``app.application.validators``
so that all violations are reported together as plain messages.
"""

from pydantic import BaseModel, Field


class MusicGenreInsert(BaseModel):
    """Schema for creating a music genre."""

    name: str = Field("", examples=["Heavy Metal"])


class MusicGenreUpdate(BaseModel):
    """Schema for updating a music genre; ``id`` must match the route."""

    id: int = 0
    name: str = ""


class MusicGenreResponse(BaseModel):
    id: int
    name: str


class MusicGenreTotalGroupsResponse(BaseModel):
    """A genre together with how many groups are filed under it."""

    id: int
    name: str
    total_groups: int
