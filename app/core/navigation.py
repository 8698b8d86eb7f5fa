"""The displayed month and the data loaded for it."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import date, datetime, tzinfo
from typing import Optional

from app.core.bucketing import CalendarCell, CalendarIndex, DayData, build_month_view
from app.core.notifications import failure
from app.core.orchestrator import ConfirmIntent, RecordOrchestrator
from app.core.schedule import default_feeding_time, next_scheduled_time
from app.core.state import SessionState
from app.core.store import RecordStore, RemoteFailure
from app.core.timeutils import (
    SUNDAY, Month, as_utc, compute_fetch_window, now_utc, to_local_datetime, today_local,
)

logger = logging.getLogger(__name__)


class CalendarController:
    """
    Owns one session's ``SessionState`` and keeps it in step with the
    displayed month.

    Every month load is tagged with a sequence number. When the user
    navigates again before a load resolves, the older response is dropped,
    so the collections always belong to the most recently requested month.
    """

    def __init__(
        self,
        store: RecordStore,
        tz: tzinfo,
        *,
        today: Optional[date] = None,
        confirm: Optional[ConfirmIntent] = None,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self.store = store
        self.tz = tz
        self.clock = clock
        start = today or today_local(tz, clock())
        self.state = SessionState(current_month=Month.of(start))
        self.orchestrator = RecordOrchestrator(store, self.state, tz, confirm, clock)
        self._sequence = 0

    @property
    def current_month(self) -> Month:
        return self.state.current_month

    def now_local(self) -> datetime:
        return to_local_datetime(self.clock(), self.tz)

    def today(self) -> date:
        return today_local(self.tz, self.clock())

    # ── Loading ──────────────────────────────────────────────────────────────

    async def start(self) -> bool:
        """First load of a session: the current month plus the reconciliation prompt."""
        loaded = await self.load()
        await self.orchestrator.load_reconciliation()
        return loaded

    async def load(self) -> bool:
        """
        Fetch everything the current month page shows and replace the
        calendar collections wholesale. Returns False when the load failed
        or was superseded by a later one.
        """
        self._sequence += 1
        sequence = self._sequence
        month = self.state.current_month
        start, end = compute_fetch_window(month, self.tz)
        want_feed_types = not self.state.feed_types

        fetches = [
            self.store.fetch_feeding_records_in_range(start, end),
            self.store.fetch_weight_records_in_range(start, end),
            self.store.fetch_all_maintenance_records(),
        ]
        if want_feed_types:
            fetches.append(self.store.fetch_all_feed_types())

        self.state.loading = True
        try:
            results = await asyncio.gather(*fetches)
        except RemoteFailure as exc:
            if sequence != self._sequence:
                logger.info("Ignoring failed load of %s; a newer load is pending", month.label)
                return False
            self.state.loading = False
            logger.warning("Loading %s failed: %s", month.label, exc)
            self.state.notify(failure("load_calendar"))
            return False

        if sequence != self._sequence:
            logger.info("Discarding stale data for %s", month.label)
            return False

        feeding, weight, maintenance = results[:3]
        self.state.feeding_records = list(feeding)
        self.state.weight_records = list(weight)
        self.state.maintenance_records = [
            r for r in maintenance if start <= as_utc(r.performed_at) <= end
        ]
        if want_feed_types:
            self.state.feed_types = list(results[3])
        self.state.prompt.refresh(self.state.feeding_records)
        self.state.loading = False

        logger.info(
            "Loaded %s: %d feedings, %d weights, %d maintenance",
            month.label, len(feeding), len(weight), len(self.state.maintenance_records),
        )
        return True

    # ── Navigation ───────────────────────────────────────────────────────────

    async def go_to(self, month: Month) -> bool:
        self.state.current_month = month
        self.state.selected_day = None
        return await self.load()

    async def previous_month(self) -> bool:
        return await self.go_to(self.state.current_month.previous())

    async def next_month(self) -> bool:
        return await self.go_to(self.state.current_month.next())

    async def this_month(self) -> bool:
        return await self.go_to(Month.of(self.today()))

    def open_day(self, day: date) -> DayData:
        self.state.selected_day = day
        self.state.clear_message()
        return self.day_data(day)

    def close_day(self) -> None:
        self.state.selected_day = None

    # ── Derived views ────────────────────────────────────────────────────────

    def index(self) -> CalendarIndex:
        return CalendarIndex(
            self.state.feeding_records,
            self.state.weight_records,
            self.state.maintenance_records,
            self.tz,
        )

    def day_data(self, day: date) -> DayData:
        return self.index().get_day_data(day)

    def month_view(self, first_weekday: int = SUNDAY) -> list[CalendarCell]:
        return build_month_view(self.state.current_month, self.index(), first_weekday)

    def next_scheduled_time(self) -> Optional[str]:
        return next_scheduled_time(self.state.schedules, self.now_local())

    def default_feeding_time(self) -> datetime:
        return default_feeding_time(
            self.state.schedules, self.state.feeding_records, self.now_local(), self.tz
        )
