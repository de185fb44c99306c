"""Reusable field rules. Each returns a message or ``None`` when the value passes."""

import re

IMGUR_URL_PATTERN = re.compile(
    r"^https?://(i\.)?imgur\.com/.*\.(jpg|jpeg|png|gif)$", re.IGNORECASE
)
IMGUR_URL_MESSAGE = "The URL must be from Imgur (e.g.: https://i.imgur.com/example.jpg)"

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_imgur_url(url: str | None) -> bool:
    if is_blank(url):
        return False
    return IMGUR_URL_PATTERN.fullmatch(url) is not None


def check_text(
    value: str | None,
    label: str,
    min_length: int = NAME_MIN_LENGTH,
    max_length: int = NAME_MAX_LENGTH,
) -> list[str]:
    """Required text bounded to ``[min_length, max_length]`` characters, inclusive."""
    if is_blank(value):
        return [f"The {label} is required"]
    if not min_length <= len(value) <= max_length:
        return [f"The {label} must be between {min_length} and {max_length} characters"]
    return []


def check_positive_id(value: int, label: str) -> list[str]:
    if value <= 0:
        return [f"The {label} ID is required"]
    return []


def check_required_image(url: str | None) -> list[str]:
    if is_blank(url):
        return ["The image URL is required"]
    if not is_imgur_url(url):
        return [IMGUR_URL_MESSAGE]
    return []


def check_optional_image(url: str | None) -> list[str]:
    # Empty or whitespace-only means "no image", never a pattern failure.
    if is_blank(url):
        return []
    if not is_imgur_url(url):
        return [IMGUR_URL_MESSAGE]
    return []
