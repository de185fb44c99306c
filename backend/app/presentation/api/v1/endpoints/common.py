"""Helpers shared by the v1 endpoints."""

from fastapi import HTTPException, status

from app.application.schemas import UserResponse
from app.application.services import UserService
from app.presentation.api.auth import Principal


def raise_if_invalid(errors: list[str]) -> None:
    """Turn validator messages into a 400 response."""
    if errors:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Validation error", "errors": errors},
        )


def not_found(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def check_positive_id(value: int, entity: str) -> None:
    if value <= 0:
        raise bad_request(f"The {entity} ID must be greater than zero")


async def ensure_user_access(
    user_id: int, principal: Principal, users: UserService
) -> UserResponse:
    """The user behind ``user_id``, if the caller is that user or an admin."""
    user = await users.get_user(user_id)
    if user is None:
        raise not_found(f"The user with ID {user_id} was not found")
    if not principal.is_admin and user.email != principal.email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own cart and orders",
        )
    return user
