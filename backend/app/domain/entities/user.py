"""Domain entity for a store user."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    email: str
    role: str = "User"
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
