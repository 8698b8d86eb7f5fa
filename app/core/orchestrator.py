"""User actions on records: remote call first, then the matching in-memory update.

Every mutating action follows the same sequence:

1. clear the message banner (destructive actions do this only once the
   user has confirmed),
2. validate input; rejected input never reaches the record store,
3. await the record store,
4. on success apply the list transformation and post a success message;
   on ``RemoteFailure`` leave every collection untouched and post a
   failure message. Nothing is retried.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from contextlib import contextmanager
from datetime import date, datetime, tzinfo
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from app.core.consumption import next_consumption
from app.core.notifications import Notification, failure, invalid, success
from app.core.records import apply_delete, apply_insert, apply_update, find_by_id, remove_where
from app.core.state import SessionState
from app.core.store import RecordStore, RemoteFailure
from app.core.timeutils import now_utc, to_local_datetime, to_utc
from app.core.validation import (
    InputError, describe_validation_error, ensure_not_future_date, ensure_not_future_instant,
)
from app.models import (
    MAINTENANCE_LABELS, FeedingRecord, FeedingRecordCreate, FeedingRecordUpdate, FeedTypeCreate,
    MaintenanceRecord, MaintenanceRecordCreate, MaintenanceRecordUpdate, PetCreate, PetUpdate,
    ScheduleCreate, ScheduleUpdate, WeightRecord, WeightRecordCreate,
)

logger = logging.getLogger(__name__)

ConfirmIntent = Callable[[str], Union[bool, Awaitable[bool]]]

_TIME_FORMAT_MESSAGE = "Invalid time format. Use HH:mm format"


def _always_confirm(prompt: str) -> bool:
    return True


def _by_time(schedules):
    return sorted(schedules, key=lambda s: (s.time, s.id))


def _by_measured_date(records: list[WeightRecord]) -> list[WeightRecord]:
    return sorted(records, key=lambda r: (r.measured_date, r.id))


class RecordOrchestrator:
    """
    Applies confirmed remote mutations to a ``SessionState``.

    ``confirm`` receives the question shown before a destructive action and
    returns (or resolves to) True to go ahead. ``clock`` returns the current
    UTC instant and is used by the "not in the future" checks.
    """

    def __init__(
        self,
        store: RecordStore,
        state: SessionState,
        tz: tzinfo,
        confirm: Optional[ConfirmIntent] = None,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self.store = store
        self.state = state
        self.tz = tz
        self.confirm = confirm or _always_confirm
        self.clock = clock

    # ── Helpers ──────────────────────────────────────────────────────────────

    @contextmanager
    def _busy(self):
        self.state.loading = True
        try:
            yield
        finally:
            self.state.loading = False

    def _succeeded(self, action: str) -> Notification:
        return self.state.notify(success(action))

    def _failed(self, action: str, exc: Exception) -> Notification:
        logger.warning("%s failed: %s", action, exc)
        return self.state.notify(failure(action))

    def _rejected(self, exc: InputError) -> Notification:
        return self.state.notify(invalid(str(exc)))

    async def _confirmed(self, prompt: str) -> bool:
        answer = self.confirm(prompt)
        if inspect.isawaitable(answer):
            answer = await answer
        return bool(answer)

    @staticmethod
    def _payload(model: type[BaseModel], message: Optional[str] = None, **fields):
        try:
            return model(**fields)
        except ValidationError as exc:
            raise InputError(message or describe_validation_error(exc)) from exc

    def _format_local(self, instant: datetime) -> str:
        return to_local_datetime(instant, self.tz).strftime("%Y/%m/%d %H:%M")

    def _find_feeding(self, record_id: int) -> Optional[FeedingRecord]:
        return (
            find_by_id(self.state.feeding_records, record_id)
            or find_by_id(self.state.feeding_history, record_id)
        )

    def _all_feeding(self) -> list[FeedingRecord]:
        return [*self.state.feeding_records, *self.state.feeding_history]

    def _store_feeding(self, record: FeedingRecord) -> None:
        self.state.feeding_records = apply_insert(self.state.feeding_records, record)
        if self.state.feeding_history_loaded:
            self.state.feeding_history = apply_insert(self.state.feeding_history, record)
        self.state.prompt.refresh(self._all_feeding())

    def _replace_feeding(self, record: FeedingRecord) -> None:
        self.state.feeding_records = apply_update(self.state.feeding_records, record.id, record)
        self.state.feeding_history = apply_update(self.state.feeding_history, record.id, record)
        self.state.prompt.refresh(self._all_feeding())

    # ── Feeding records ──────────────────────────────────────────────────────

    async def create_feeding_record(
        self, feed_type_id: Optional[int], feeding_time: Optional[datetime]
    ) -> Notification:
        self.state.clear_message()
        try:
            if feed_type_id is None or feeding_time is None:
                raise InputError("Choose a food and a feeding time")
            payload = self._payload(
                FeedingRecordCreate, feed_type_id=feed_type_id, feeding_time=to_utc(feeding_time, self.tz)
            )
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                created = await self.store.create_feeding_record(payload.feed_type_id, payload.feeding_time)
            except RemoteFailure as exc:
                return self._failed("create_feeding", exc)

        self._store_feeding(created)
        return self._succeeded("create_feeding")

    async def update_feeding_record(
        self, record_id: int, feed_type_id: Optional[int], feeding_time: Optional[datetime]
    ) -> Notification:
        """Replace feed type and time of a feeding."""
        self.state.clear_message()
        try:
            if feed_type_id is None or feeding_time is None:
                raise InputError("Choose a food and a feeding time")
            payload = self._payload(
                FeedingRecordUpdate, feed_type_id=feed_type_id, feeding_time=to_utc(feeding_time, self.tz)
            )
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                updated = await self.store.update_feeding_record(
                    record_id, payload.feed_type_id, payload.feeding_time
                )
            except RemoteFailure as exc:
                return self._failed("update_feeding", exc)

        self._replace_feeding(updated)
        return self._succeeded("update_feeding")

    async def toggle_consumption(self, record_id: int) -> Optional[Notification]:
        """Advance a feeding through not recorded → finished → leftovers → not recorded."""
        self.state.clear_message()
        record = self._find_feeding(record_id)
        if record is None:
            return None

        with self._busy():
            try:
                updated = await self.store.update_feeding_consumption(
                    record_id, next_consumption(record.consumed)
                )
            except RemoteFailure as exc:
                return self._failed("toggle_consumption", exc)

        self._replace_feeding(updated)
        return self._succeeded("toggle_consumption")

    async def delete_feeding_record(self, record_id: int) -> Optional[Notification]:
        record = self._find_feeding(record_id)
        if record is None:
            return None
        if not await self._confirmed(f"Delete the feeding record of {self._format_local(record.feeding_time)}?"):
            return None
        self.state.clear_message()

        with self._busy():
            try:
                await self.store.delete_feeding_record(record_id)
            except RemoteFailure as exc:
                return self._failed("delete_feeding", exc)

        self.state.feeding_records = apply_delete(self.state.feeding_records, record_id)
        self.state.feeding_history = apply_delete(self.state.feeding_history, record_id)
        self.state.prompt.discard(record_id)
        self.state.prompt.refresh(self._all_feeding())
        return self._succeeded("delete_feeding")

    async def load_feeding_history(self) -> bool:
        try:
            records = await self.store.fetch_all_feeding_records()
        except RemoteFailure as exc:
            self._failed("load_history", exc)
            return False
        self.state.feeding_history = list(records)
        self.state.feeding_history_loaded = True
        self.state.prompt.refresh(self._all_feeding())
        return True

    # ── Reconciliation prompt ────────────────────────────────────────────────

    async def load_reconciliation(self) -> Optional[FeedingRecord]:
        """Seed the "did the pet eat?" prompt from the record store."""
        try:
            return await self.state.prompt.load(self.store)
        except RemoteFailure as exc:
            self._failed("load_data", exc)
            return None

    async def resolve_reconciliation(self, consumed: bool) -> Optional[Notification]:
        self.state.clear_message()
        if not self.state.prompt.is_pending:
            return None

        with self._busy():
            try:
                updated = await self.state.prompt.resolve(self.store, consumed)
            except RemoteFailure as exc:
                return self._failed("reconcile", exc)

        self._replace_feeding(updated)
        return self._succeeded("reconcile")

    # ── Feed types ───────────────────────────────────────────────────────────

    async def load_feed_types(self, force: bool = False) -> bool:
        if self.state.feed_types and not force:
            return True
        try:
            self.state.feed_types = list(await self.store.fetch_all_feed_types())
        except RemoteFailure as exc:
            self._failed("load_data", exc)
            return False
        return True

    async def create_feed_type(self, manufacturer: str, product_name: str) -> Notification:
        self.state.clear_message()
        try:
            payload = self._payload(FeedTypeCreate, manufacturer=manufacturer, product_name=product_name)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                created = await self.store.create_feed_type(payload.manufacturer, payload.product_name)
            except RemoteFailure as exc:
                return self._failed("create_feed_type", exc)

        self.state.feed_types = apply_insert(self.state.feed_types, created)
        return self._succeeded("create_feed_type")

    # ── Maintenance ──────────────────────────────────────────────────────────

    def _maintenance_payload(self, model, type, performed_at, notes):
        if performed_at is None:
            raise InputError("Enter when the task was performed")
        payload = self._payload(model, type=type, performed_at=to_utc(performed_at, self.tz), notes=notes)
        ensure_not_future_instant(payload.performed_at, self.clock())
        return payload

    async def load_maintenance_history(self, type: Optional[str] = None) -> bool:
        try:
            records = await self.store.fetch_all_maintenance_records()
        except RemoteFailure as exc:
            self._failed("load_maintenance", exc)
            return False
        self.state.maintenance_history = [r for r in records if type is None or r.type == type]
        self.state.maintenance_history_loaded = True
        self.state.maintenance_history_type = type
        return True

    async def create_maintenance_record(
        self, type: str, performed_at: Optional[datetime], notes: Optional[str] = None
    ) -> Notification:
        self.state.clear_message()
        try:
            payload = self._maintenance_payload(MaintenanceRecordCreate, type, performed_at, notes)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                created = await self.store.create_maintenance_record(
                    payload.type, payload.performed_at, payload.notes
                )
            except RemoteFailure as exc:
                return self._failed("create_maintenance", exc)

        self.state.maintenance_records = apply_insert(self.state.maintenance_records, created)
        if self.state.maintenance_history_loaded:
            self.state.maintenance_history = apply_insert(self.state.maintenance_history, created)
        return self._succeeded("create_maintenance")

    async def update_maintenance_record(
        self, record_id: int, type: str, performed_at: Optional[datetime], notes: Optional[str] = None
    ) -> Notification:
        self.state.clear_message()
        try:
            payload = self._maintenance_payload(MaintenanceRecordUpdate, type, performed_at, notes)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                updated = await self.store.update_maintenance_record(
                    record_id, payload.type, payload.performed_at, payload.notes
                )
            except RemoteFailure as exc:
                return self._failed("update_maintenance", exc)

        self.state.maintenance_records = apply_update(self.state.maintenance_records, record_id, updated)
        self.state.maintenance_history = apply_update(self.state.maintenance_history, record_id, updated)
        return self._succeeded("update_maintenance")

    async def delete_maintenance_record(self, record_id: int) -> Optional[Notification]:
        record: Optional[MaintenanceRecord] = (
            find_by_id(self.state.maintenance_records, record_id)
            or find_by_id(self.state.maintenance_history, record_id)
        )
        if record is None:
            return None
        label = MAINTENANCE_LABELS[record.type].lower()
        if not await self._confirmed(f"Delete the {label} record of {self._format_local(record.performed_at)}?"):
            return None
        self.state.clear_message()

        with self._busy():
            try:
                await self.store.delete_maintenance_record(record_id)
            except RemoteFailure as exc:
                return self._failed("delete_maintenance", exc)

        self.state.maintenance_records = apply_delete(self.state.maintenance_records, record_id)
        self.state.maintenance_history = apply_delete(self.state.maintenance_history, record_id)
        return self._succeeded("delete_maintenance")

    # ── Pets and weights ─────────────────────────────────────────────────────

    async def _load_pet_weights(self, pet_id: int) -> bool:
        try:
            records = await self.store.fetch_weight_records_for_pet(pet_id)
        except RemoteFailure as exc:
            logger.warning("Loading weights of pet %s failed: %s", pet_id, exc)
            return False
        if self.state.selected_pet_id == pet_id:
            self.state.pet_weight_records = _by_measured_date(list(records))
        return True

    async def load_pets(self) -> bool:
        """Load every pet; select the first one when nothing valid is selected."""
        try:
            self.state.pets = list(await self.store.fetch_all_pets())
        except RemoteFailure as exc:
            self._failed("load_pets", exc)
            return False
        if self.state.selected_pet is None:
            self.state.selected_pet_id = self.state.pets[0].id if self.state.pets else None
            self.state.pet_weight_records = []
        if self.state.selected_pet_id is not None:
            if not await self._load_pet_weights(self.state.selected_pet_id):
                self.state.notify(failure("load_weights"))
        return True

    async def select_pet(self, pet_id: Optional[int]) -> bool:
        self.state.selected_pet_id = pet_id
        self.state.pet_weight_records = []
        if pet_id is None:
            return True
        if not await self._load_pet_weights(pet_id):
            self.state.notify(failure("load_weights"))
            return False
        return True

    async def create_pet(self, name: str) -> Notification:
        self.state.clear_message()
        try:
            payload = self._payload(PetCreate, name=name)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                created = await self.store.create_pet(payload.name)
            except RemoteFailure as exc:
                return self._failed("create_pet", exc)

        self.state.pets = apply_insert(self.state.pets, created)
        return self._succeeded("create_pet")

    async def update_pet(self, pet_id: int, name: str) -> Notification:
        self.state.clear_message()
        try:
            payload = self._payload(PetUpdate, name=name)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                updated = await self.store.update_pet(pet_id, payload.name)
            except RemoteFailure as exc:
                return self._failed("update_pet", exc)

        self.state.pets = apply_update(self.state.pets, pet_id, updated)
        return self._succeeded("update_pet")

    async def delete_pet(self, pet_id: int) -> Optional[Notification]:
        """Delete a pet and its weights; selection falls back to another pet or none."""
        pet = find_by_id(self.state.pets, pet_id)
        if pet is None:
            return None
        if not await self._confirmed(f"Delete “{pet.name}”? All of its weight records will be deleted too."):
            return None
        self.state.clear_message()

        with self._busy():
            try:
                await self.store.delete_pet(pet_id)
            except RemoteFailure as exc:
                return self._failed("delete_pet", exc)

        def owned(record: WeightRecord) -> bool:
            return record.pet_id == pet_id

        self.state.pets = apply_delete(self.state.pets, pet_id)
        self.state.weight_records = remove_where(self.state.weight_records, owned)
        self.state.pet_weight_records = remove_where(self.state.pet_weight_records, owned)

        if self.state.selected_pet_id == pet_id:
            fallback = self.state.pets[0] if self.state.pets else None
            self.state.selected_pet_id = fallback.id if fallback else None
            self.state.pet_weight_records = []
            if fallback is not None and not await self._load_pet_weights(fallback.id):
                return self.state.notify(failure("load_weights"))

        return self._succeeded("delete_pet")

    async def create_weight_record(
        self, pet_id: Optional[int], weight: Optional[float], measured_date: Optional[date]
    ) -> Notification:
        self.state.clear_message()
        try:
            if pet_id is None:
                raise InputError("Select a pet first")
            if weight is None or measured_date is None:
                raise InputError("Enter a weight and a measurement date")
            payload = self._payload(WeightRecordCreate, weight=weight, measured_date=measured_date)
            ensure_not_future_date(payload.measured_date, self.tz, self.clock())
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                created = await self.store.create_weight_record(pet_id, payload.weight, payload.measured_date)
            except RemoteFailure as exc:
                return self._failed("create_weight", exc)

        self.state.weight_records = apply_insert(self.state.weight_records, created)
        if self.state.selected_pet_id == pet_id:
            self.state.pet_weight_records = _by_measured_date(
                apply_insert(self.state.pet_weight_records, created)
            )
        return self._succeeded("create_weight")

    # ── Schedules ────────────────────────────────────────────────────────────

    async def load_schedules(self) -> bool:
        try:
            self.state.schedules = _by_time(await self.store.fetch_all_schedules())
        except RemoteFailure as exc:
            self._failed("load_schedules", exc)
            return False
        return True

    async def create_schedule(self, time: str) -> Notification:
        self.state.clear_message()
        try:
            payload = self._payload(ScheduleCreate, _TIME_FORMAT_MESSAGE, time=time)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                created = await self.store.create_schedule(payload.time)
            except RemoteFailure as exc:
                return self._failed("create_schedule", exc)

        self.state.schedules = _by_time(apply_insert(self.state.schedules, created))
        return self._succeeded("create_schedule")

    async def update_schedule(self, schedule_id: int, time: str) -> Notification:
        self.state.clear_message()
        try:
            payload = self._payload(ScheduleUpdate, _TIME_FORMAT_MESSAGE, time=time)
        except InputError as exc:
            return self._rejected(exc)

        with self._busy():
            try:
                updated = await self.store.update_schedule(schedule_id, payload.time)
            except RemoteFailure as exc:
                return self._failed("update_schedule", exc)

        self.state.schedules = _by_time(apply_update(self.state.schedules, schedule_id, updated))
        return self._succeeded("update_schedule")

    async def toggle_schedule(self, schedule_id: int) -> Notification:
        self.state.clear_message()
        with self._busy():
            try:
                updated = await self.store.toggle_schedule(schedule_id)
            except RemoteFailure as exc:
                return self._failed("toggle_schedule", exc)

        self.state.schedules = apply_update(self.state.schedules, schedule_id, updated)
        return self._succeeded("toggle_schedule")

    async def delete_schedule(self, schedule_id: int) -> Optional[Notification]:
        if not await self._confirmed("Delete this schedule?"):
            return None
        self.state.clear_message()

        with self._busy():
            try:
                await self.store.delete_schedule(schedule_id)
            except RemoteFailure as exc:
                return self._failed("delete_schedule", exc)

        self.state.schedules = apply_delete(self.state.schedules, schedule_id)
        return self._succeeded("delete_schedule")
