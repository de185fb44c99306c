"""Pydantic DTOs for the User feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    email: str = Field("", examples=["customer@example.com"])
    role: str = Field("User", examples=["User", "Admin"])


class UserResponse(BaseModel):
    id: int
    email: str
    role: str
    created_at: datetime
