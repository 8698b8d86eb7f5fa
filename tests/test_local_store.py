"""LocalRecordStore against a real in-memory database, driven by the controller."""

from datetime import date, datetime

import pytest

from app.core.navigation import CalendarController
from app.core.store import RemoteFailure
from app.services.store import LocalRecordStore
from factories import NOW, TOKYO

pytestmark = pytest.mark.asyncio


@pytest.fixture
def local(db) -> LocalRecordStore:
    return LocalRecordStore(db)


@pytest.fixture
def calendar(local) -> CalendarController:
    return CalendarController(local, TOKYO, clock=lambda: NOW)


async def test_missing_ids_raise_remote_failure(local):
    with pytest.raises(RemoteFailure):
        await local.update_feeding_consumption(9999, True)
    with pytest.raises(RemoteFailure):
        await local.delete_pet(9999)
    with pytest.raises(RemoteFailure):
        await local.toggle_schedule(9999)


async def test_unknown_feed_type_is_a_remote_failure(local):
    with pytest.raises(RemoteFailure):
        await local.create_feeding_record(9999, NOW)


async def test_feeding_round_trip_through_the_calendar(calendar, local):
    food = await local.create_feed_type("Acme", "Chicken Pate")
    await calendar.start()

    await calendar.orchestrator.create_feeding_record(food.id, datetime(2026, 10, 19, 7, 30))
    # a record late on the last evening of the month lands on Oct 31, not Nov 1
    await calendar.orchestrator.create_feeding_record(food.id, datetime(2026, 10, 31, 23, 30))

    assert await calendar.load()
    assert len(calendar.day_data(date(2026, 10, 19)).feeding) == 1
    assert len(calendar.day_data(date(2026, 10, 31)).feeding) == 1
    assert calendar.day_data(date(2026, 11, 1)).is_empty
    assert calendar.state.prompt.record.feeding_time.day == 31


async def test_pet_deletion_cascades(calendar, local):
    orch = calendar.orchestrator
    await orch.create_pet("Mochi")
    await orch.create_pet("Kinako")
    await orch.load_pets()
    mochi, kinako = calendar.state.pets
    await orch.create_weight_record(mochi.id, 4.2, date(2026, 10, 1))
    await orch.create_weight_record(kinako.id, 3.1, date(2026, 10, 1))

    await orch.delete_pet(mochi.id)
    await calendar.load()

    assert [w.pet_id for w in calendar.state.weight_records] == [kinako.id]
    assert calendar.state.selected_pet_id == kinako.id
    assert await local.fetch_weight_records_for_pet(mochi.id) == []


async def test_maintenance_outside_the_window_is_not_shown(calendar, local):
    await local.create_maintenance_record("litter_box", datetime(2026, 8, 1, tzinfo=TOKYO))
    await local.create_maintenance_record("water_filter", datetime(2026, 10, 5, 9, 0, tzinfo=TOKYO))

    await calendar.load()

    assert [r.type for r in calendar.state.maintenance_records] == ["water_filter"]
