"""FastAPI dependency injection — wires infrastructure to application layer.

Every provider shares the request's single ``AsyncSession``, so all writes
made while handling one request commit or roll back together.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import (
    CartService,
    GroupService,
    MusicGenreService,
    OrderService,
    RecordService,
    UserService,
)
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyGroupRepository,
    SQLAlchemyMusicGenreRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyRecordRepository,
    SQLAlchemyUserRepository,
)


async def get_music_genre_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MusicGenreService, None]:
    """Provides a MusicGenreService instance with its repository wired up."""
    yield MusicGenreService(SQLAlchemyMusicGenreRepository(session))


async def get_group_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[GroupService, None]:
    """Provides a GroupService with group and genre repositories."""
    yield GroupService(
        SQLAlchemyGroupRepository(session),
        SQLAlchemyMusicGenreRepository(session),
    )


def _record_service(session: AsyncSession) -> RecordService:
    return RecordService(
        SQLAlchemyRecordRepository(session),
        SQLAlchemyGroupRepository(session),
    )


async def get_record_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RecordService, None]:
    """Provides a RecordService with record and group repositories."""
    yield _record_service(session)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    yield UserService(
        SQLAlchemyUserRepository(session),
        SQLAlchemyCartRepository(session),
        _record_service(session),
    )


async def get_cart_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CartService, None]:
    """Provides a CartService; stock moves go through the RecordService."""
    yield CartService(SQLAlchemyCartRepository(session), _record_service(session))


async def get_order_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[OrderService, None]:
    yield OrderService(SQLAlchemyOrderRepository(session), SQLAlchemyCartRepository(session))
