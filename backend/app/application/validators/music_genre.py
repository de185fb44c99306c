"""Validation rules for music genre payloads."""

from app.application.schemas import MusicGenreInsert, MusicGenreUpdate

from .common import check_positive_id, check_text


def validate_music_genre_insert(data: MusicGenreInsert) -> list[str]:
    return check_text(data.name, "music genre name")


def validate_music_genre_update(data: MusicGenreUpdate) -> list[str]:
    return [
        *check_positive_id(data.id, "music genre"),
        *check_text(data.name, "music genre name"),
    ]
