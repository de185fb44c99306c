"""Field validators — pure functions returning ordered violation messages."""

from .common import IMGUR_URL_PATTERN, is_imgur_url
from .music_genre import validate_music_genre_insert, validate_music_genre_update
from .group import validate_group_insert, validate_group_update
from .record import validate_record_insert, validate_record_update
from .store import validate_cart_item, validate_checkout, validate_user_create

__all__ = [
    "IMGUR_URL_PATTERN",
    "is_imgur_url",
    "validate_music_genre_insert",
    "validate_music_genre_update",
    "validate_group_insert",
    "validate_group_update",
    "validate_record_insert",
    "validate_record_update",
    "validate_cart_item",
    "validate_checkout",
    "validate_user_create",
]
