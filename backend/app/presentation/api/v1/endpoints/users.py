"""User administration endpoints (Admin only)."""

from fastapi import APIRouter, Depends, status

from app.application.schemas import UserCreate, UserResponse
from app.application.services import UserService
from app.application.validators import validate_user_create
from app.infrastructure.dependencies import get_user_service
from app.presentation.api.auth import require_admin

from .common import not_found, raise_if_invalid

router = APIRouter(
    prefix="/users", tags=["Users"], dependencies=[Depends(require_admin())]
)


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    return await service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_user(user_id)
    if user is None:
        raise not_found(f"The user with ID {user_id} was not found")
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user together with an empty cart."""
    raise_if_invalid(validate_user_create(data))
    return await service.create_user(data)


@router.delete("/{user_id}", response_model=UserResponse)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.delete_user(user_id)
    if user is None:
        raise not_found(f"The user with ID {user_id} was not found")
    return user
