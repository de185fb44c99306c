"""Domain entity for a group (band / artist)."""

from dataclasses import dataclass, field

from .record import Record


@dataclass
class Group:
    """A band or artist that owns zero or more records.

    ``image_group`` is the stored image location; transfer shapes call it
    ``image_url``. ``music_genre_name``, ``total_records`` and ``records`` are
    read-side projections filled in by the repository when requested.
    """

    name: str
    music_genre_id: int
    image_group: str | None = None
    id: int | None = None
    music_genre_name: str | None = None
    total_records: int | None = None
    records: list[Record] = field(default_factory=list)

    def update(self, name: str, music_genre_id: int, image_group: str | None) -> None:
        """Overwrite every mutable field."""
        self.name = name
        self.music_genre_id = music_genre_id
        self.image_group = image_group
