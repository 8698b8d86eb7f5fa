"""Transient success / failure messages shown after each user action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NotificationKind = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


SUCCESS_MESSAGES: dict[str, str] = {
    "create_feeding": "Feeding recorded",
    "update_feeding": "Feeding record updated",
    "delete_feeding": "Feeding record deleted",
    "toggle_consumption": "Consumption updated",
    "reconcile": "Previous meal recorded",
    "create_feed_type": "Food added",
    "create_maintenance": "Maintenance recorded",
    "update_maintenance": "Maintenance record updated",
    "delete_maintenance": "Maintenance record deleted",
    "create_pet": "Pet added",
    "update_pet": "Pet updated",
    "delete_pet": "Pet deleted",
    "create_weight": "Weight recorded",
    "create_schedule": "Feeding schedule added",
    "update_schedule": "Schedule updated",
    "delete_schedule": "Schedule deleted",
    "toggle_schedule": "Schedule status changed",
}

FAILURE_MESSAGES: dict[str, str] = {
    "load_calendar": "Could not load the calendar",
    "load_data": "Could not load data",
    "load_history": "Could not load feeding history",
    "load_pets": "Could not load pets",
    "load_weights": "Could not load weight records",
    "load_maintenance": "Could not load maintenance records",
    "load_schedules": "Could not load schedules",
    "create_feeding": "Could not record the feeding",
    "update_feeding": "Could not update the feeding record",
    "delete_feeding": "Could not delete the feeding record",
    "toggle_consumption": "Could not update consumption",
    "reconcile": "Could not update consumption",
    "create_feed_type": "Could not add the food",
    "create_maintenance": "Could not record the maintenance",
    "update_maintenance": "Could not update the maintenance record",
    "delete_maintenance": "Could not delete the maintenance record",
    "create_pet": "Could not add the pet",
    "update_pet": "Could not update the pet",
    "delete_pet": "Could not delete the pet",
    "create_weight": "Could not record the weight",
    "create_schedule": "Could not add the schedule",
    "update_schedule": "Could not update the schedule",
    "delete_schedule": "Could not delete the schedule",
    "toggle_schedule": "Could not change the schedule status",
}


def success(action: str) -> Notification:
    return Notification("success", SUCCESS_MESSAGES[action])


def failure(action: str) -> Notification:
    return Notification("error", FAILURE_MESSAGES[action])


def invalid(reason: str) -> Notification:
    """Message for input rejected before any remote call."""
    return Notification("error", reason)
