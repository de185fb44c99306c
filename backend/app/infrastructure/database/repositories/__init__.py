from .music_genre_repository import SQLAlchemyMusicGenreRepository
from .group_repository import SQLAlchemyGroupRepository
from .record_repository import SQLAlchemyRecordRepository
from .user_repository import SQLAlchemyUserRepository
from .cart_repository import SQLAlchemyCartRepository
from .order_repository import SQLAlchemyOrderRepository

__all__ = [
    "SQLAlchemyMusicGenreRepository",
    "SQLAlchemyGroupRepository",
    "SQLAlchemyRecordRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyCartRepository",
    "SQLAlchemyOrderRepository",
]
