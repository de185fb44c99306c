"""Validation rules for group payloads."""

from app.application.schemas import GroupInsert, GroupUpdate

from .common import check_optional_image, check_positive_id, check_text


def validate_group_insert(data: GroupInsert) -> list[str]:
    """Return the ordered list of violations; empty means accepted."""
    return [
        *check_text(data.name, "group name"),
        *check_optional_image(data.image_url),
        *check_positive_id(data.music_genre_id, "music genre"),
    ]


def validate_group_update(data: GroupUpdate) -> list[str]:
    return [
        *check_positive_id(data.id, "group"),
        *check_text(data.name, "group name"),
        *check_optional_image(data.image_url),
        *check_positive_id(data.music_genre_id, "music genre"),
    ]
