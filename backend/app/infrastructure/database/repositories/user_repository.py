"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import UserRepository
from app.domain.entities import User
from app.infrastructure.database.models import OrderModel, UserModel


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            role=model.role,
            created_at=model.created_at,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[User]:
        result = await self._session.execute(select(UserModel).order_by(UserModel.id))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def create(self, user: User) -> User:
        model = UserModel(email=user.email, role=user.role, created_at=user.created_at)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, user_id: int) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def has_orders(self, user_id: int) -> bool:
        stmt = select(exists().where(OrderModel.user_id == user_id))
        return bool(await self._session.scalar(stmt))
