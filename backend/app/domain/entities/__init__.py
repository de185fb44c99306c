from .music_genre import MusicGenre
from .record import Record
from .group import Group
from .user import User
from .cart import Cart, CartDetail
from .order import Order, OrderDetail

__all__ = [
    "MusicGenre",
    "Record",
    "Group",
    "User",
    "Cart",
    "CartDetail",
    "Order",
    "OrderDetail",
]
