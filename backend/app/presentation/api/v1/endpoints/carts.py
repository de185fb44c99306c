"""Cart endpoints — the cart owner or an admin."""

from fastapi import APIRouter, Depends

from app.application.schemas import CartItemRequest, CartResponse
from app.application.services import CartService, UserService
from app.application.validators import validate_cart_item
from app.infrastructure.dependencies import get_cart_service, get_user_service
from app.presentation.api.auth import Principal, get_current_principal, require_admin

from .common import ensure_user_access, not_found, raise_if_invalid

router = APIRouter(prefix="/carts", tags=["Carts"])


def _cart_or_404(cart: CartResponse | None, user_id: int) -> CartResponse:
    if cart is None:
        raise not_found(f"The cart of user {user_id} was not found")
    return cart


@router.get("/{user_id}", response_model=CartResponse)
async def get_cart(
    user_id: int,
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    await ensure_user_access(user_id, principal, users)
    return _cart_or_404(await service.get_cart(user_id), user_id)


@router.post("/{user_id}/items", response_model=CartResponse)
async def add_to_cart(
    user_id: int,
    data: CartItemRequest,
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """Reserve stock and add it to the cart."""
    raise_if_invalid(validate_cart_item(data))
    await ensure_user_access(user_id, principal, users)
    return _cart_or_404(await service.add_record(user_id, data), user_id)


@router.post("/{user_id}/items/remove", response_model=CartResponse)
async def remove_from_cart(
    user_id: int,
    data: CartItemRequest,
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """Take units out of the cart and return them to stock."""
    raise_if_invalid(validate_cart_item(data))
    await ensure_user_access(user_id, principal, users)
    return _cart_or_404(await service.remove_record(user_id, data), user_id)


@router.put(
    "/{user_id}/enable",
    response_model=CartResponse,
    dependencies=[Depends(require_admin())],
)
async def enable_cart(
    user_id: int,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    return _cart_or_404(await service.set_enabled(user_id, True), user_id)


@router.put(
    "/{user_id}/disable",
    response_model=CartResponse,
    dependencies=[Depends(require_admin())],
)
async def disable_cart(
    user_id: int,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    return _cart_or_404(await service.set_enabled(user_id, False), user_id)
