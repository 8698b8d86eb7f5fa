"""Shared fixtures across tests: in-memory SQLite via aiosqlite, fake record store."""

import aiosqlite
import pytest
import pytest_asyncio

from app.core.navigation import CalendarController
from app.services.database import init_schema
from factories import NOW, TOKYO, FakeRecordStore


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database with every table, discarded after each test."""
    async with aiosqlite.connect(":memory:") as conn:
        conn.row_factory = aiosqlite.Row
        await init_schema(conn)
        yield conn


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def confirmations() -> list[str]:
    """Prompts seen by the confirm capability of the ``controller`` fixture."""
    return []


@pytest.fixture
def answer() -> dict:
    """Set ``answer["value"] = False`` to decline confirmations."""
    return {"value": True}


@pytest.fixture
def controller(store, confirmations, answer) -> CalendarController:
    """Controller on October 2026, Tokyo time, with a recording confirm capability."""

    def confirm(prompt: str) -> bool:
        confirmations.append(prompt)
        return answer["value"]

    return CalendarController(store, TOKYO, confirm=confirm, clock=lambda: NOW)
