from .music_genre_repository import MusicGenreRepository
from .group_repository import GroupRepository
from .record_repository import RecordRepository
from .user_repository import UserRepository
from .cart_repository import CartRepository
from .order_repository import OrderRepository

__all__ = [
    "MusicGenreRepository",
    "GroupRepository",
    "RecordRepository",
    "UserRepository",
    "CartRepository",
    "OrderRepository",
]
