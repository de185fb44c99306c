from .music_genre import (
    MusicGenreInsert,
    MusicGenreUpdate,
    MusicGenreResponse,
    MusicGenreTotalGroupsResponse,
)
from .record import (
    RecordInsert,
    RecordUpdate,
    RecordItemResponse,
    RecordResponse,
    StockAdjustmentResponse,
)
from .group import (
    GroupInsert,
    GroupUpdate,
    GroupItemResponse,
    GroupResponse,
    GroupRecordsResponse,
)
from .user import UserCreate, UserResponse
from .cart import CartItemRequest, CartDetailResponse, CartResponse
from .order import CheckoutRequest, OrderDetailResponse, OrderResponse

__all__ = [
    "MusicGenreInsert",
    "MusicGenreUpdate",
    "MusicGenreResponse",
    "MusicGenreTotalGroupsResponse",
    "RecordInsert",
    "RecordUpdate",
    "RecordItemResponse",
    "RecordResponse",
    "StockAdjustmentResponse",
    "GroupInsert",
    "GroupUpdate",
    "GroupItemResponse",
    "GroupResponse",
    "GroupRecordsResponse",
    "UserCreate",
    "UserResponse",
    "CartItemRequest",
    "CartDetailResponse",
    "CartResponse",
    "CheckoutRequest",
    "OrderDetailResponse",
    "OrderResponse",
]
