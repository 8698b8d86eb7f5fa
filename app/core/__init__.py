"""Calendar aggregation and local-day reconciliation for the pet log."""

from .bucketing import CalendarCell, CalendarIndex, DayData, build_month_view, get_day_data
from .consumption import ReconciliationPrompt, find_latest_unconsumed, next_consumption
from .navigation import CalendarController
from .notifications import Notification
from .orchestrator import RecordOrchestrator
from .records import apply_delete, apply_insert, apply_update
from .state import SessionState
from .store import RecordStore, RemoteFailure
from .timeutils import Month, compute_fetch_window, to_local_calendar_day
from .validation import InputError

__all__ = [
    "CalendarCell", "CalendarIndex", "DayData", "build_month_view", "get_day_data",
    "ReconciliationPrompt", "find_latest_unconsumed", "next_consumption",
    "CalendarController", "Notification", "RecordOrchestrator",
    "apply_delete", "apply_insert", "apply_update",
    "SessionState", "RecordStore", "RemoteFailure",
    "Month", "compute_fetch_window", "to_local_calendar_day", "InputError",
]
