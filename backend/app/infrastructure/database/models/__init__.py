from .catalog import MusicGenreModel, GroupModel, RecordModel
from .store import (
    UserModel,
    CartModel,
    CartDetailModel,
    OrderModel,
    OrderDetailModel,
)

__all__ = [
    "MusicGenreModel",
    "GroupModel",
    "RecordModel",
    "UserModel",
    "CartModel",
    "CartDetailModel",
    "OrderModel",
    "OrderDetailModel",
]
