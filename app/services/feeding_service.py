"""Async CRUD operations for feeding records."""

from datetime import datetime
from typing import Optional

import aiosqlite

from app.core.timeutils import parse_instant, to_iso_utc
from app.models.feed_type import FeedType
from app.models.feeding import FeedingRecord, FeedingRecordCreate, FeedingRecordUpdate

_SELECT = """
SELECT fr.*,
       ft.manufacturer AS ft_manufacturer,
       ft.product_name AS ft_product_name,
       ft.created_at   AS ft_created_at
  FROM feeding_records fr
  LEFT JOIN feed_types ft ON ft.id = fr.feed_type_id
"""


def _row_to_feeding_record(row: aiosqlite.Row) -> FeedingRecord:
    feed_type = None
    if row["ft_manufacturer"] is not None:
        feed_type = FeedType(
            id=row["feed_type_id"],
            manufacturer=row["ft_manufacturer"],
            product_name=row["ft_product_name"],
            created_at=parse_instant(row["ft_created_at"]),
        )
    consumed = row["consumed"]
    return FeedingRecord(
        id=row["id"],
        feed_type_id=row["feed_type_id"],
        feeding_time=parse_instant(row["feeding_time"]),
        consumed=None if consumed is None else bool(consumed),
        created_at=parse_instant(row["created_at"]),
        feed_type=feed_type,
    )


async def add_feeding_record(db: aiosqlite.Connection, record: FeedingRecordCreate) -> FeedingRecord:
    """Record a feeding. Consumption starts unrecorded."""
    cursor = await db.execute(
        "INSERT INTO feeding_records (feed_type_id, feeding_time) VALUES (?, ?)",
        (record.feed_type_id, to_iso_utc(record.feeding_time)),
    )
    await db.commit()
    return await get_feeding_record(db, cursor.lastrowid)


async def get_feeding_record(db: aiosqlite.Connection, record_id: int) -> FeedingRecord | None:
    """Return a feeding record by id, or None."""
    async with db.execute(_SELECT + " WHERE fr.id = ?", (record_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_feeding_record(row) if row else None


async def get_all_feeding_records(db: aiosqlite.Connection) -> list[FeedingRecord]:
    """Return every feeding record, most recent first."""
    rows = await db.execute_fetchall(_SELECT + " ORDER BY fr.feeding_time DESC, fr.id DESC")
    return [_row_to_feeding_record(r) for r in rows]


async def get_feeding_records_by_range(
    db: aiosqlite.Connection, start: datetime, end: datetime
) -> list[FeedingRecord]:
    """Return feeding records between two instants (both inclusive), chronologically."""
    rows = await db.execute_fetchall(
        _SELECT + """
         WHERE fr.feeding_time >= ?
           AND fr.feeding_time <= ?
         ORDER BY fr.feeding_time, fr.id""",
        (to_iso_utc(start), to_iso_utc(end)),
    )
    return [_row_to_feeding_record(r) for r in rows]


async def get_latest_unconsumed_feeding_record(db: aiosqlite.Connection) -> FeedingRecord | None:
    """The unrecorded feeding with the latest feeding time, or None."""
    async with db.execute(
        _SELECT + """
         WHERE fr.consumed IS NULL
         ORDER BY fr.feeding_time DESC, fr.id DESC
         LIMIT 1""",
    ) as cur:
        row = await cur.fetchone()
    return _row_to_feeding_record(row) if row else None


async def update_feeding_record(
    db: aiosqlite.Connection, record_id: int, update: FeedingRecordUpdate
) -> FeedingRecord | None:
    """Replace feed type and time. Consumption is left as it was."""
    cursor = await db.execute(
        "UPDATE feeding_records SET feed_type_id = ?, feeding_time = ? WHERE id = ?",
        (update.feed_type_id, to_iso_utc(update.feeding_time), record_id),
    )
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_feeding_record(db, record_id)


async def update_consumption(
    db: aiosqlite.Connection, record_id: int, consumed: Optional[bool]
) -> FeedingRecord | None:
    """Set whether the food was eaten; None resets it to unrecorded."""
    value = None if consumed is None else int(consumed)
    cursor = await db.execute(
        "UPDATE feeding_records SET consumed = ? WHERE id = ?", (value, record_id)
    )
    await db.commit()
    if cursor.rowcount == 0:
        return None
    return await get_feeding_record(db, record_id)


async def delete_feeding_record(db: aiosqlite.Connection, record_id: int) -> bool:
    """Delete a feeding record. Returns True if deleted."""
    cursor = await db.execute("DELETE FROM feeding_records WHERE id = ?", (record_id,))
    await db.commit()
    return cursor.rowcount > 0
