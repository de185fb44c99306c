"""Order endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import CheckoutRequest, OrderResponse
from app.application.services import OrderService, UserService
from app.application.validators import validate_checkout
from app.infrastructure.dependencies import get_order_service, get_user_service
from app.presentation.api.auth import Principal, get_current_principal, require_admin

from .common import ensure_user_access, not_found, raise_if_invalid

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get(
    "",
    response_model=list[OrderResponse],
    dependencies=[Depends(require_admin())],
)
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    return await service.list_orders()


@router.get("/user/{user_id}", response_model=list[OrderResponse])
async def list_user_orders(
    user_id: int,
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
    service: OrderService = Depends(get_order_service),
) -> list[OrderResponse]:
    await ensure_user_access(user_id, principal, users)
    return await service.list_user_orders(user_id)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    order = await service.get_order(order_id)
    if order is None:
        raise not_found(f"The order with ID {order_id} was not found")
    if not principal.is_admin:
        owner = await users.get_user(order.user_id)
        if owner is None or owner.email != principal.email:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only access your own cart and orders",
            )
    return order


@router.post(
    "/checkout/{user_id}",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def checkout(
    user_id: int,
    data: CheckoutRequest,
    principal: Principal = Depends(get_current_principal),
    users: UserService = Depends(get_user_service),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Turn the user's cart into an order and empty the cart."""
    raise_if_invalid(validate_checkout(data))
    await ensure_user_access(user_id, principal, users)
    order = await service.checkout(user_id, data)
    if order is None:
        raise not_found(f"The cart of user {user_id} was not found")
    return order
