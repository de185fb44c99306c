"""Unit tests for the user, cart and order services."""

from decimal import Decimal

import pytest
import pytest_asyncio

from fakes import (
    FakeCartRepository,
    FakeGroupRepository,
    FakeOrderRepository,
    FakeRecordRepository,
    FakeStore,
    FakeUserRepository,
)
from app.application.schemas import CartItemRequest, CheckoutRequest, UserCreate
from app.application.services import CartService, OrderService, RecordService, UserService
from app.domain.entities import Group, MusicGenre, Record
from app.domain.exceptions import (
    DependentEntitiesError,
    DuplicateEntityError,
    InsufficientStockError,
    InvalidOperationError,
    MissingReferenceError,
)


@pytest.fixture
def store() -> FakeStore:
    store = FakeStore()
    store.genres[1] = MusicGenre(name="Rock", id=1)
    store.groups[1] = Group(name="Queen", music_genre_id=1, id=1)
    store.records[1] = Record(
        title="A Night at the Opera",
        year_of_publication=1975,
        price=Decimal("12.50"),
        stock=10,
        group_id=1,
        id=1,
    )
    store.records[2] = Record(
        title="Hot Space",
        year_of_publication=1982,
        price=Decimal("8.00"),
        stock=3,
        group_id=1,
        discontinued=True,
        id=2,
    )
    store._ids["record"] = 2
    return store


@pytest.fixture
def record_service(store: FakeStore) -> RecordService:
    return RecordService(FakeRecordRepository(store), FakeGroupRepository(store))


@pytest.fixture
def users(store: FakeStore, record_service: RecordService) -> UserService:
    return UserService(FakeUserRepository(store), FakeCartRepository(store), record_service)


@pytest.fixture
def carts(store: FakeStore, record_service: RecordService) -> CartService:
    return CartService(FakeCartRepository(store), record_service)


@pytest.fixture
def orders(store: FakeStore) -> OrderService:
    return OrderService(FakeOrderRepository(store), FakeCartRepository(store))


@pytest_asyncio.fixture
async def user_id(users: UserService) -> int:
    user = await users.create_user(UserCreate(email="freddie@example.com"))
    return user.id


# ── Users ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_user_opens_an_empty_cart(users: UserService, carts: CartService, user_id: int):
    cart = await carts.get_cart(user_id)

    assert cart.enabled is True
    assert cart.details == []
    assert cart.total_price == Decimal("0")
    assert (await users.get_user_by_email("freddie@example.com")).id == user_id


@pytest.mark.asyncio
async def test_duplicate_email_is_refused(users: UserService, user_id: int):
    with pytest.raises(DuplicateEntityError):
        await users.create_user(UserCreate(email="freddie@example.com", role="Admin"))


@pytest.mark.asyncio
async def test_delete_user_releases_reserved_stock(
    store: FakeStore, users: UserService, carts: CartService, user_id: int
):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=4))
    assert store.records[1].stock == 6

    deleted = await users.delete_user(user_id)

    assert deleted.id == user_id
    assert store.records[1].stock == 10
    assert user_id not in store.users
    assert user_id not in store.carts


@pytest.mark.asyncio
async def test_delete_user_with_orders_is_refused(
    users: UserService, carts: CartService, orders: OrderService, user_id: int
):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))
    await orders.checkout(user_id, CheckoutRequest(payment_method="Card"))

    with pytest.raises(DependentEntitiesError):
        await users.delete_user(user_id)


@pytest.mark.asyncio
async def test_delete_missing_user_returns_none(users: UserService):
    assert await users.delete_user(55) is None


# ── Carts ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_add_record_reserves_stock_and_totals(
    store: FakeStore, carts: CartService, user_id: int
):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=2))
    cart = await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))

    assert len(cart.details) == 1
    assert cart.details[0].amount == 3
    assert cart.details[0].record_title == "A Night at the Opera"
    assert cart.total_price == Decimal("37.50")
    assert store.records[1].stock == 7


@pytest.mark.asyncio
async def test_add_more_than_stock_leaves_cart_untouched(
    store: FakeStore, carts: CartService, user_id: int
):
    with pytest.raises(InsufficientStockError):
        await carts.add_record(user_id, CartItemRequest(record_id=1, amount=11))

    assert store.records[1].stock == 10
    assert (await carts.get_cart(user_id)).details == []


@pytest.mark.asyncio
async def test_add_discontinued_or_missing_record(carts: CartService, user_id: int):
    with pytest.raises(InvalidOperationError):
        await carts.add_record(user_id, CartItemRequest(record_id=2, amount=1))
    with pytest.raises(MissingReferenceError):
        await carts.add_record(user_id, CartItemRequest(record_id=99, amount=1))


@pytest.mark.asyncio
async def test_disabled_cart_refuses_new_lines(carts: CartService, user_id: int):
    disabled = await carts.set_enabled(user_id, False)
    assert disabled.enabled is False

    with pytest.raises(InvalidOperationError):
        await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))

    assert (await carts.set_enabled(user_id, True)).enabled is True


@pytest.mark.asyncio
async def test_remove_record_releases_stock(store: FakeStore, carts: CartService, user_id: int):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=3))

    partial = await carts.remove_record(user_id, CartItemRequest(record_id=1, amount=1))
    assert partial.details[0].amount == 2
    assert store.records[1].stock == 8

    emptied = await carts.remove_record(user_id, CartItemRequest(record_id=1, amount=2))
    assert emptied.details == []
    assert emptied.total_price == Decimal("0")
    assert store.records[1].stock == 10


@pytest.mark.asyncio
async def test_remove_more_than_in_cart(carts: CartService, user_id: int):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))

    with pytest.raises(InvalidOperationError):
        await carts.remove_record(user_id, CartItemRequest(record_id=1, amount=2))
    with pytest.raises(InvalidOperationError):
        await carts.remove_record(user_id, CartItemRequest(record_id=2, amount=1))


@pytest.mark.asyncio
async def test_cart_of_unknown_user(carts: CartService):
    assert await carts.get_cart(8) is None
    assert await carts.add_record(8, CartItemRequest(record_id=1, amount=1)) is None


# ── Orders ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_checkout_copies_lines_and_empties_cart(
    store: FakeStore, carts: CartService, orders: OrderService, user_id: int
):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=2))

    order = await orders.checkout(user_id, CheckoutRequest(payment_method="  PayPal "))

    assert order.payment_method == "PayPal"
    assert order.total == Decimal("25.00")
    assert [(d.record_id, d.amount, d.total) for d in order.details] == [(1, 2, Decimal("25.00"))]
    assert store.records[1].stock == 8
    assert (await carts.get_cart(user_id)).details == []
    assert [o.id for o in await orders.list_user_orders(user_id)] == [order.id]
    assert (await orders.get_order(order.id)).user_id == user_id


@pytest.mark.asyncio
async def test_checkout_empty_cart(orders: OrderService, user_id: int):
    with pytest.raises(InvalidOperationError):
        await orders.checkout(user_id, CheckoutRequest(payment_method="Card"))
    assert await orders.list_orders() == []


@pytest.mark.asyncio
async def test_checkout_without_cart(orders: OrderService):
    assert await orders.checkout(31, CheckoutRequest(payment_method="Card")) is None


@pytest.mark.asyncio
async def test_checkout_after_record_deleted_charges_remaining_lines_only(
    store: FakeStore,
    carts: CartService,
    orders: OrderService,
    record_service: RecordService,
    user_id: int,
):
    store.records[3] = Record(
        title="Jazz",
        year_of_publication=1978,
        price=Decimal("10.00"),
        stock=4,
        group_id=1,
        id=3,
    )
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))
    await carts.add_record(user_id, CartItemRequest(record_id=3, amount=1))

    await record_service.delete_record(3)
    order = await orders.checkout(user_id, CheckoutRequest(payment_method="Card"))

    assert [d.record_id for d in order.details] == [1]
    assert order.total == Decimal("12.50")
    assert order.total == sum(d.total for d in order.details)


@pytest.mark.asyncio
async def test_adding_more_units_keeps_the_first_price(
    store: FakeStore, carts: CartService, user_id: int
):
    await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))
    store.records[1].price = Decimal("20.00")

    cart = await carts.add_record(user_id, CartItemRequest(record_id=1, amount=1))

    assert cart.details[0].price == Decimal("12.50")
    assert cart.details[0].amount == 2
    assert cart.total_price == Decimal("25.00")
