"""Unit tests for feed_type_service and feeding_service."""

from datetime import datetime, timedelta, timezone

import pytest

from app.models.feed_type import FeedTypeCreate
from app.models.feeding import FeedingRecordCreate, FeedingRecordUpdate
from app.services.feed_type_service import create_feed_type, get_all_feed_types, get_feed_type
from app.services.feeding_service import (
    add_feeding_record,
    delete_feeding_record,
    get_all_feeding_records,
    get_feeding_record,
    get_feeding_records_by_range,
    get_latest_unconsumed_feeding_record,
    update_consumption,
    update_feeding_record,
)

pytestmark = pytest.mark.asyncio

JST = timezone(timedelta(hours=9))


async def _make_feed_type(db, manufacturer="Acme", product="Chicken Pate"):
    return await create_feed_type(db, FeedTypeCreate(manufacturer=manufacturer, product_name=product))


def _feeding(feed_type_id: int, when: datetime) -> FeedingRecordCreate:
    return FeedingRecordCreate(feed_type_id=feed_type_id, feeding_time=when)


async def test_feed_types_are_listed_by_manufacturer(db):
    await _make_feed_type(db, "Zoo", "Tuna")
    await _make_feed_type(db, "Acme", "Salmon")
    assert [f.manufacturer for f in await get_all_feed_types(db)] == ["Acme", "Zoo"]


async def test_get_feed_type_not_found(db):
    assert await get_feed_type(db, 9999) is None


async def test_add_feeding_record(db):
    ft = await _make_feed_type(db)
    record = await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 8, 0, tzinfo=JST)))
    assert record.id is not None
    assert record.consumed is None
    assert record.feeding_time == datetime(2026, 10, 18, 23, 0, tzinfo=timezone.utc)
    assert record.feed_type.label == "Acme - Chicken Pate"


async def test_get_feeding_record_not_found(db):
    assert await get_feeding_record(db, 9999) is None


async def test_all_records_newest_first(db):
    ft = await _make_feed_type(db)
    await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 1, 8, 0, tzinfo=JST)))
    await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 8, 0, tzinfo=JST)))
    records = await get_all_feeding_records(db)
    assert [r.feeding_time.day for r in records] == [18, 30]


async def test_range_is_inclusive_at_both_ends(db):
    ft = await _make_feed_type(db)
    start = datetime(2026, 9, 29, 15, 0, tzinfo=timezone.utc)
    end = datetime(2026, 11, 1, 14, 59, 59, 999999, tzinfo=timezone.utc)
    inside = [start, end, datetime(2026, 10, 19, 0, 0, tzinfo=timezone.utc)]
    outside = [start - timedelta(microseconds=1), end + timedelta(microseconds=1)]
    for when in inside + outside:
        await add_feeding_record(db, _feeding(ft.id, when))

    records = await get_feeding_records_by_range(db, start, end)

    assert [r.feeding_time for r in records] == sorted(inside)


async def test_range_accepts_local_bounds(db):
    ft = await _make_feed_type(db)
    await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 0, 30, tzinfo=JST)))
    records = await get_feeding_records_by_range(
        db, datetime(2026, 10, 19, 0, 0, tzinfo=JST), datetime(2026, 10, 19, 23, 59, tzinfo=JST)
    )
    assert len(records) == 1


async def test_consumption_is_tri_state(db):
    ft = await _make_feed_type(db)
    record = await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 8, 0, tzinfo=JST)))

    assert (await update_consumption(db, record.id, True)).consumed is True
    assert (await update_consumption(db, record.id, False)).consumed is False
    assert (await update_consumption(db, record.id, None)).consumed is None


async def test_update_consumption_not_found(db):
    assert await update_consumption(db, 9999, True) is None


async def test_latest_unconsumed(db):
    ft = await _make_feed_type(db)
    older = await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 8, 0, tzinfo=JST)))
    newer = await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 18, 0, tzinfo=JST)))

    assert (await get_latest_unconsumed_feeding_record(db)).id == newer.id
    await update_consumption(db, newer.id, True)
    assert (await get_latest_unconsumed_feeding_record(db)).id == older.id
    await update_consumption(db, older.id, False)
    assert await get_latest_unconsumed_feeding_record(db) is None


async def test_update_keeps_consumption(db):
    ft = await _make_feed_type(db)
    other = await _make_feed_type(db, "Zoo", "Tuna")
    record = await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 8, 0, tzinfo=JST)))
    await update_consumption(db, record.id, True)

    updated = await update_feeding_record(
        db, record.id, FeedingRecordUpdate(feed_type_id=other.id, feeding_time=datetime(2026, 10, 19, 9, 0, tzinfo=JST))
    )

    assert updated.feed_type_id == other.id
    assert updated.feed_type.product_name == "Tuna"
    assert updated.consumed is True


async def test_update_not_found(db):
    ft = await _make_feed_type(db)
    update = FeedingRecordUpdate(feed_type_id=ft.id, feeding_time=datetime(2026, 10, 19, tzinfo=JST))
    assert await update_feeding_record(db, 9999, update) is None


async def test_delete_feeding_record(db):
    ft = await _make_feed_type(db)
    record = await add_feeding_record(db, _feeding(ft.id, datetime(2026, 10, 19, 8, 0, tzinfo=JST)))
    assert await delete_feeding_record(db, record.id) is True
    assert await get_feeding_record(db, record.id) is None
    assert await delete_feeding_record(db, record.id) is False
