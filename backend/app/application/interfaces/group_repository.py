"""Abstract repository interface (port) for Group persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Group


class GroupRepository(ABC):
    """Port for group persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, group_id: int) -> Group | None:
        """Retrieve a group with its genre name and record count."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Group]:
        ...

    @abstractmethod
    async def get_with_records(self, group_id: int) -> Group | None:
        """Retrieve a group with ``records`` populated."""
        ...

    @abstractmethod
    async def get_all_with_records(self) -> list[Group]:
        ...

    @abstractmethod
    async def search_by_name(self, text: str) -> list[Group]:
        """Case-insensitive substring match on the name."""
        ...

    @abstractmethod
    async def get_sorted_by_name(self, ascending: bool) -> list[Group]:
        """Groups ordered by name, ties broken by id."""
        ...

    @abstractmethod
    async def exists(self, group_id: int) -> bool:
        ...

    @abstractmethod
    async def has_records(self, group_id: int) -> bool:
        """True when at least one record references the group."""
        ...

    @abstractmethod
    async def create(self, group: Group) -> Group:
        ...

    @abstractmethod
    async def update(self, group: Group) -> Group:
        ...

    @abstractmethod
    async def delete_if_unreferenced(self, group_id: int) -> bool:
        """Delete only when no record references the group, as one statement.

        Returns True if a row was deleted.
        """
        ...
