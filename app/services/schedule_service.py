"""Async CRUD operations for daily feeding slots."""

import aiosqlite

from app.core.timeutils import parse_instant
from app.models.schedule import FeedingSchedule, ScheduleCreate, ScheduleUpdate


def _row_to_schedule(row: aiosqlite.Row) -> FeedingSchedule:
    return FeedingSchedule(
        id=row["id"],
        time=row["time"],
        is_active=bool(row["is_active"]),
        created_at=parse_instant(row["created_at"]),
    )


async def create_schedule(db: aiosqlite.Connection, schedule: ScheduleCreate) -> FeedingSchedule:
    """Add an active feeding slot."""
    cursor = await db.execute(
        "INSERT INTO feeding_schedules (time, is_active) VALUES (?, 1)", (schedule.time,)
    )
    await db.commit()
    rows = await db.execute_fetchall(
        "SELECT * FROM feeding_schedules WHERE id = ?", (cursor.lastrowid,)
    )
    return _row_to_schedule(rows[0])


async def get_schedule(db: aiosqlite.Connection, schedule_id: int) -> FeedingSchedule | None:
    async with db.execute("SELECT * FROM feeding_schedules WHERE id = ?", (schedule_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_schedule(row) if row else None


async def get_all_schedules(db: aiosqlite.Connection) -> list[FeedingSchedule]:
    """Return every slot, earliest time of day first."""
    rows = await db.execute_fetchall("SELECT * FROM feeding_schedules ORDER BY time, id")
    return [_row_to_schedule(r) for r in rows]


async def update_schedule(
    db: aiosqlite.Connection, schedule_id: int, data: ScheduleUpdate
) -> FeedingSchedule | None:
    cursor = await db.execute(
        "UPDATE feeding_schedules SET time = ? WHERE id = ?", (data.time, schedule_id)
    )
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_schedule(db, schedule_id)


async def toggle_schedule(db: aiosqlite.Connection, schedule_id: int) -> FeedingSchedule | None:
    """Flip a slot between active and paused."""
    cursor = await db.execute(
        "UPDATE feeding_schedules SET is_active = 1 - is_active WHERE id = ?", (schedule_id,)
    )
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_schedule(db, schedule_id)


async def delete_schedule(db: aiosqlite.Connection, schedule_id: int) -> bool:
    cursor = await db.execute("DELETE FROM feeding_schedules WHERE id = ?", (schedule_id,))
    await db.commit()
    return cursor.rowcount > 0
