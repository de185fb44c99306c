"""Validation rules for users, carts and checkout."""

import re

from app.application.schemas import CartItemRequest, CheckoutRequest, UserCreate

from .common import check_positive_id, check_text

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
ROLES = ("Admin", "User")


def validate_user_create(data: UserCreate) -> list[str]:
    errors: list[str] = []
    if not _EMAIL_PATTERN.match(data.email or ""):
        errors.append("A valid email is required")
    if data.role not in ROLES:
        errors.append(f"The role must be one of: {', '.join(ROLES)}")
    return errors


def validate_cart_item(data: CartItemRequest) -> list[str]:
    errors = check_positive_id(data.record_id, "record")
    if data.amount <= 0:
        errors.append("The amount must be greater than zero")
    return errors


def validate_checkout(data: CheckoutRequest) -> list[str]:
    return check_text(data.payment_method, "payment method", max_length=50)
