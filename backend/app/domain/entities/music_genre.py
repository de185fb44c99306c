"""Domain entity for a music genre."""

from dataclasses import dataclass


@dataclass
class MusicGenre:
    """A genre that groups are filed under."""

    name: str
    id: int | None = None
    total_groups: int | None = None

    def update(self, name: str) -> None:
        self.name = name
