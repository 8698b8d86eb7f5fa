"""Async CRUD operations for food products."""

import aiosqlite

from app.core.timeutils import parse_instant
from app.models.feed_type import FeedType, FeedTypeCreate


def _row_to_feed_type(row: aiosqlite.Row) -> FeedType:
    return FeedType(
        id=row["id"],
        manufacturer=row["manufacturer"],
        product_name=row["product_name"],
        created_at=parse_instant(row["created_at"]),
    )


async def create_feed_type(db: aiosqlite.Connection, feed_type: FeedTypeCreate) -> FeedType:
    """Insert a food product and return the full record."""
    cursor = await db.execute(
        "INSERT INTO feed_types (manufacturer, product_name) VALUES (?, ?)",
        (feed_type.manufacturer, feed_type.product_name),
    )
    await db.commit()
    rows = await db.execute_fetchall(
        "SELECT * FROM feed_types WHERE id = ?", (cursor.lastrowid,)
    )
    return _row_to_feed_type(rows[0])


async def get_feed_type(db: aiosqlite.Connection, feed_type_id: int) -> FeedType | None:
    async with db.execute("SELECT * FROM feed_types WHERE id = ?", (feed_type_id,)) as cur:
        row = await cur.fetchone()
    return _row_to_feed_type(row) if row else None


async def get_all_feed_types(db: aiosqlite.Connection) -> list[FeedType]:
    """Return every food product, grouped by manufacturer."""
    rows = await db.execute_fetchall(
        "SELECT * FROM feed_types ORDER BY manufacturer, product_name, id"
    )
    return [_row_to_feed_type(r) for r in rows]
