"""Unit tests for the RecordService."""

from decimal import Decimal

import pytest

from fakes import FakeGroupRepository, FakeRecordRepository, FakeStore
from app.application.schemas import RecordInsert, RecordUpdate
from app.application.services import RecordService
from app.domain.entities import Group, MusicGenre
from app.domain.exceptions import InsufficientStockError, MissingReferenceError

IMGUR = "https://i.imgur.com/abc.jpg"


@pytest.fixture
def store() -> FakeStore:
    store = FakeStore()
    store.genres[1] = MusicGenre(name="Heavy Metal", id=1)
    store.groups[1] = Group(name="Iron Maiden", music_genre_id=1, id=1)
    return store


@pytest.fixture
def records(store: FakeStore) -> FakeRecordRepository:
    return FakeRecordRepository(store)


@pytest.fixture
def service(store: FakeStore, records: FakeRecordRepository) -> RecordService:
    return RecordService(records, FakeGroupRepository(store))


def _insert(title: str = "Powerslave", stock: int = 5, price: str = "19.99", group_id: int = 1):
    return RecordInsert(
        title=title,
        year_of_publication=1984,
        image_url=IMGUR,
        price=Decimal(price),
        stock=stock,
        group_id=group_id,
    )


@pytest.mark.asyncio
async def test_create_and_get_record(service: RecordService):
    created = await service.create_record(_insert())
    fetched = await service.get_record(created.id)

    assert fetched is not None
    assert fetched.title == "Powerslave"
    assert fetched.image_url == IMGUR
    assert fetched.price == Decimal("19.99")
    assert fetched.group_name == "Iron Maiden"


@pytest.mark.asyncio
async def test_create_record_for_missing_group(service: RecordService):
    with pytest.raises(MissingReferenceError) as exc_info:
        await service.create_record(_insert(group_id=42))
    assert str(exc_info.value) == "The group with ID 42 does not exist"


@pytest.mark.asyncio
async def test_get_record_not_found(service: RecordService):
    assert await service.get_record(999) is None


@pytest.mark.asyncio
async def test_update_with_empty_image_keeps_current(service: RecordService):
    created = await service.create_record(_insert())
    updated = await service.update_record(
        created.id,
        RecordUpdate(
            id=created.id,
            title="Piece of Mind",
            year_of_publication=1983,
            image_url="  ",
            price=Decimal("15.00"),
            stock=2,
            group_id=1,
        ),
    )

    assert updated.title == "Piece of Mind"
    assert updated.image_url == IMGUR
    assert updated.stock == 2


@pytest.mark.asyncio
async def test_update_missing_record_returns_none(service: RecordService):
    result = await service.update_record(5, RecordUpdate(id=5, title="Ghost", group_id=1))
    assert result is None


@pytest.mark.asyncio
async def test_update_to_missing_group(service: RecordService):
    created = await service.create_record(_insert())
    with pytest.raises(MissingReferenceError):
        await service.update_record(
            created.id,
            RecordUpdate(
                id=created.id,
                title="Powerslave",
                year_of_publication=1984,
                price=Decimal("19.99"),
                group_id=7,
            ),
        )


@pytest.mark.asyncio
async def test_delete_record(service: RecordService):
    created = await service.create_record(_insert())

    deleted = await service.delete_record(created.id)

    assert deleted.id == created.id
    assert await service.get_record(created.id) is None
    assert await service.delete_record(created.id) is None


# ── Stock ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_decrease_to_exactly_zero(service: RecordService):
    created = await service.create_record(_insert(stock=5))

    result = await service.adjust_stock(created.id, -5)

    assert result.previous_stock == 5
    assert result.new_stock == 0
    assert (await service.get_record(created.id)).stock == 0


@pytest.mark.asyncio
async def test_decrease_beyond_stock_is_rejected_and_nothing_changes(
    service: RecordService, records: FakeRecordRepository
):
    created = await service.create_record(_insert(stock=5))

    with pytest.raises(InsufficientStockError) as exc_info:
        await service.adjust_stock(created.id, -6)

    assert exc_info.value.available == 5
    assert exc_info.value.requested == -6
    assert (await service.get_record(created.id)).stock == 5
    assert records.stock_writes == 0


@pytest.mark.asyncio
async def test_increase_from_zero(service: RecordService):
    created = await service.create_record(_insert(stock=0))

    result = await service.adjust_stock(created.id, 3)

    assert result.new_stock == 3
    assert result.title == "Powerslave"
    assert "3 units" in result.message


@pytest.mark.asyncio
async def test_adjust_stock_of_missing_record(service: RecordService):
    assert await service.adjust_stock(123, 1) is None


class _RacingRecordRepository(FakeRecordRepository):
    """Another writer takes ``stolen`` units between the read and the write."""

    def __init__(self, store: FakeStore, stolen: int):
        super().__init__(store)
        self._stolen = stolen

    async def adjust_stock(self, record_id: int, amount: int):
        self._store.records[record_id].stock -= self._stolen
        return await super().adjust_stock(record_id, amount)


@pytest.mark.asyncio
async def test_concurrent_decrease_cannot_drive_stock_negative(store: FakeStore):
    service = RecordService(_RacingRecordRepository(store, stolen=4), FakeGroupRepository(store))
    created = await service.create_record(_insert(stock=5))

    with pytest.raises(InsufficientStockError) as exc_info:
        await service.adjust_stock(created.id, -3)

    assert exc_info.value.available == 1
    assert store.records[created.id].stock == 1


# ── Queries ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_sorted_by_title_breaks_ties_by_id(service: RecordService):
    first = await service.create_record(_insert(title="Killers"))
    await service.create_record(_insert(title="Aces High"))
    second = await service.create_record(_insert(title="Killers"))

    ascending = await service.get_sorted_by_title(True)
    descending = await service.get_sorted_by_title(False)

    assert [r.title for r in ascending] == ["Aces High", "Killers", "Killers"]
    assert [r.id for r in ascending[1:]] == [first.id, second.id]
    assert [r.id for r in descending[:2]] == [first.id, second.id]


@pytest.mark.asyncio
async def test_search_and_price_range(service: RecordService):
    await service.create_record(_insert(title="Powerslave", price="10.00"))
    await service.create_record(_insert(title="Somewhere in Time", price="20.00"))

    assert [r.title for r in await service.search_by_title("SLAVE")] == ["Powerslave"]
    in_range = await service.get_by_price_range(Decimal("10.00"), Decimal("15.00"))
    assert [r.title for r in in_range] == ["Powerslave"]
    assert await service.search_by_title("zzz") == []
