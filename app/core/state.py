"""Mutable state of one UI session, owned by its controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from app.core.consumption import ReconciliationPrompt
from app.core.notifications import Notification
from app.core.records import find_by_id
from app.core.timeutils import Month
from app.models import (
    FeedingRecord, FeedingSchedule, FeedType, MaintenanceRecord, Pet, WeightRecord,
)


@dataclass
class SessionState:
    current_month: Month

    # Calendar window, replaced wholesale on every month load
    feeding_records: list[FeedingRecord] = field(default_factory=list)
    weight_records: list[WeightRecord] = field(default_factory=list)
    maintenance_records: list[MaintenanceRecord] = field(default_factory=list)

    # Full lists behind the history / management pages
    feeding_history: list[FeedingRecord] = field(default_factory=list)
    maintenance_history: list[MaintenanceRecord] = field(default_factory=list)
    feeding_history_loaded: bool = False
    maintenance_history_loaded: bool = False
    maintenance_history_type: Optional[str] = None
    pet_weight_records: list[WeightRecord] = field(default_factory=list)

    feed_types: list[FeedType] = field(default_factory=list)
    pets: list[Pet] = field(default_factory=list)
    schedules: list[FeedingSchedule] = field(default_factory=list)

    selected_pet_id: Optional[int] = None
    selected_day: Optional[date] = None
    loading: bool = False
    message: Optional[Notification] = None
    prompt: ReconciliationPrompt = field(default_factory=ReconciliationPrompt)

    @property
    def selected_pet(self) -> Optional[Pet]:
        if self.selected_pet_id is None:
            return None
        return find_by_id(self.pets, self.selected_pet_id)

    def maintenance_history_stale(self, type: Optional[str]) -> bool:
        """True until the maintenance history was loaded for this task filter."""
        return not self.maintenance_history_loaded or self.maintenance_history_type != type

    def notify(self, notification: Notification) -> Notification:
        self.message = notification
        return notification

    def clear_message(self) -> None:
        self.message = None
