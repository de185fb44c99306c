from .music_genre_service import MusicGenreService
from .group_service import GroupService
from .record_service import RecordService
from .user_service import UserService
from .cart_service import CartService
from .order_service import OrderService

__all__ = [
    "MusicGenreService",
    "GroupService",
    "RecordService",
    "UserService",
    "CartService",
    "OrderService",
]
