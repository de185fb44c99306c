"""Unit tests for the field validators."""

from decimal import Decimal

import pytest

from app.application.schemas import (
    CartItemRequest,
    CheckoutRequest,
    GroupInsert,
    GroupUpdate,
    MusicGenreInsert,
    RecordInsert,
    RecordUpdate,
    UserCreate,
)
from app.application.validators import (
    is_imgur_url,
    validate_cart_item,
    validate_checkout,
    validate_group_insert,
    validate_group_update,
    validate_music_genre_insert,
    validate_record_insert,
    validate_record_update,
    validate_user_create,
)

IMGUR = "https://i.imgur.com/abc.jpg"


def _record_insert(**overrides) -> RecordInsert:
    data = dict(
        title="Powerslave",
        year_of_publication=1984,
        image_url=IMGUR,
        price=Decimal("19.99"),
        stock=5,
        group_id=1,
    )
    data.update(overrides)
    return RecordInsert(**data)


def _record_update(**overrides) -> RecordUpdate:
    data = dict(
        id=1,
        title="Powerslave",
        year_of_publication=1984,
        image_url="",
        price=Decimal("19.99"),
        stock=5,
        group_id=1,
    )
    data.update(overrides)
    return RecordUpdate(**data)


# ── Image URL ────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "url",
    [
        "https://i.imgur.com/abc.jpg",
        "http://imgur.com/gallery/abc.png",
        "HTTPS://I.IMGUR.COM/ABC.JPEG",
        "https://i.imgur.com/abc.gif",
    ],
)
def test_imgur_urls_are_accepted(url: str):
    assert is_imgur_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/abc.jpg",
        "https://i.imgur.com/abc.bmp",
        "https://i.imgur.com/abc.jpg\n",
        "ftp://i.imgur.com/abc.jpg",
        "",
        "   ",
        None,
    ],
)
def test_non_imgur_urls_are_rejected(url):
    assert not is_imgur_url(url)


def test_record_insert_requires_image_url():
    errors = validate_record_insert(_record_insert(image_url=""))
    assert errors == ["The image URL is required"]


def test_record_insert_rejects_foreign_image_host():
    errors = validate_record_insert(_record_insert(image_url="https://example.com/abc.jpg"))
    assert len(errors) == 1
    assert "Imgur" in errors[0]


@pytest.mark.parametrize("url", [None, "", "   "])
def test_optional_image_absent_is_accepted(url):
    assert validate_group_insert(GroupInsert(name="Queen", image_url=url, music_genre_id=1)) == []
    assert validate_record_update(_record_update(image_url=url)) == []


def test_optional_image_must_still_match_when_present():
    errors = validate_group_update(
        GroupUpdate(id=1, name="Queen", image_url="https://example.com/q.png", music_genre_id=1)
    )
    assert len(errors) == 1


def test_image_url_with_trailing_newline_is_rejected():
    errors = validate_record_insert(_record_insert(image_url=IMGUR + "\n"))
    assert len(errors) == 1
    assert "Imgur" in errors[0]


# ── Text lengths ─────────────────────────────────────────────────────


@pytest.mark.parametrize("length, accepted", [(1, False), (2, True), (100, True), (101, False)])
def test_name_length_boundaries_are_inclusive(length: int, accepted: bool):
    name = "x" * length
    checks = [
        validate_group_insert(GroupInsert(name=name, music_genre_id=1)),
        validate_group_update(GroupUpdate(id=1, name=name, music_genre_id=1)),
        validate_record_insert(_record_insert(title=name)),
        validate_record_update(_record_update(title=name)),
        validate_music_genre_insert(MusicGenreInsert(name=name)),
    ]
    for errors in checks:
        assert (errors == []) is accepted


def test_blank_name_is_reported_as_required():
    errors = validate_group_insert(GroupInsert(name="   ", music_genre_id=1))
    assert errors == ["The group name is required"]


# ── Numeric ranges ───────────────────────────────────────────────────


@pytest.mark.parametrize("year, accepted", [(1899, False), (1900, True), (2100, True), (2101, False)])
def test_year_boundaries(year: int, accepted: bool):
    assert (validate_record_insert(_record_insert(year_of_publication=year)) == []) is accepted
    assert (validate_record_update(_record_update(year_of_publication=year)) == []) is accepted


def test_price_must_be_positive():
    assert validate_record_insert(_record_insert(price=Decimal("0"))) == [
        "The price must be greater than zero"
    ]
    assert validate_record_insert(_record_insert(price=Decimal("0.01"))) == []


@pytest.mark.parametrize("price", ["0.001", "19.999", "5.005"])
def test_price_with_sub_cent_digits_is_rejected(price: str):
    expected = ["The price cannot have more than 2 decimal places"]
    assert validate_record_insert(_record_insert(price=Decimal(price))) == expected
    assert validate_record_update(_record_update(price=Decimal(price))) == expected


def test_price_with_trailing_zeros_is_accepted():
    assert validate_record_insert(_record_insert(price=Decimal("19.990"))) == []
    assert validate_record_insert(_record_insert(price=Decimal("20"))) == []


def test_stock_zero_is_allowed_but_negative_is_not():
    assert validate_record_insert(_record_insert(stock=0)) == []
    assert validate_record_insert(_record_insert(stock=-1)) == ["Stock cannot be negative"]


def test_foreign_ids_must_be_positive():
    assert validate_record_insert(_record_insert(group_id=0)) == ["The group ID is required"]
    assert validate_group_insert(GroupInsert(name="Queen", music_genre_id=0)) == [
        "The music genre ID is required"
    ]
    assert validate_record_update(_record_update(id=0)) == ["The record ID is required"]


def test_violations_are_reported_in_field_order():
    errors = validate_record_insert(
        RecordInsert(
            title="",
            year_of_publication=1800,
            image_url="",
            price=Decimal("-1"),
            stock=-3,
            group_id=0,
        )
    )
    assert errors == [
        "The title is required",
        "The publication year must be between 1900 and 2100",
        "The image URL is required",
        "The price must be greater than zero",
        "Stock cannot be negative",
        "The group ID is required",
    ]


# ── Store payloads ───────────────────────────────────────────────────


def test_user_create_rules():
    assert validate_user_create(UserCreate(email="a@b.com", role="User")) == []
    assert len(validate_user_create(UserCreate(email="nope", role="Root"))) == 2


def test_cart_item_and_checkout_rules():
    assert validate_cart_item(CartItemRequest(record_id=1, amount=1)) == []
    assert validate_cart_item(CartItemRequest(record_id=1, amount=0)) == [
        "The amount must be greater than zero"
    ]
    assert validate_checkout(CheckoutRequest(payment_method="Card")) == []
    assert validate_checkout(CheckoutRequest(payment_method="")) == [
        "The payment method is required"
    ]
