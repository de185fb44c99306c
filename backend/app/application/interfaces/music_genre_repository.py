"""Abstract repository interface (port) for MusicGenre persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import MusicGenre


class MusicGenreRepository(ABC):
    """Port for music genre persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, genre_id: int) -> MusicGenre | None:
        """Retrieve a genre, with ``total_groups`` filled in."""
        ...

    @abstractmethod
    async def get_all(self) -> list[MusicGenre]:
        ...

    @abstractmethod
    async def search_by_name(self, text: str) -> list[MusicGenre]:
        """Case-insensitive substring match on the name."""
        ...

    @abstractmethod
    async def get_sorted_by_name(self, ascending: bool) -> list[MusicGenre]:
        ...

    @abstractmethod
    async def exists(self, genre_id: int) -> bool:
        ...

    @abstractmethod
    async def has_groups(self, genre_id: int) -> bool:
        """True when at least one group is filed under the genre."""
        ...

    @abstractmethod
    async def create(self, genre: MusicGenre) -> MusicGenre:
        ...

    @abstractmethod
    async def update(self, genre: MusicGenre) -> MusicGenre:
        ...

    @abstractmethod
    async def delete_if_unreferenced(self, genre_id: int) -> bool:
        """Delete only when no group references the genre. Returns True if deleted."""
        ...
