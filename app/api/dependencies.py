"""Reusable FastAPI dependencies (DB connection, user timezone)."""

from collections.abc import AsyncGenerator
from datetime import tzinfo
from typing import Annotated

import aiosqlite
from fastapi import Depends

from app.config import get_timezone
from app.services.database import get_db as _get_db


async def db_dependency() -> AsyncGenerator[aiosqlite.Connection, None]:
    """Provide a SQLite connection for the duration of the request."""
    async with _get_db() as conn:
        yield conn


def timezone_dependency() -> tzinfo:
    """The timezone used for "not in the future" checks on local dates."""
    return get_timezone()


DbDep = Annotated[aiosqlite.Connection, Depends(db_dependency)]
TimezoneDep = Annotated[tzinfo, Depends(timezone_dependency)]
