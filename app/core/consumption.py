"""Whether the pet ate a meal, and the one-shot prompt for the latest unrecorded meal."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from app.core.timeutils import as_utc
from app.models import FeedingRecord

if TYPE_CHECKING:
    from app.core.store import RecordStore

logger = logging.getLogger(__name__)

CONSUMPTION_LABELS: dict[Optional[bool], str] = {
    True: "Finished",
    False: "Leftovers",
    None: "Not recorded",
}


def next_consumption(current: Optional[bool]) -> Optional[bool]:
    """Manual toggle cycle: not recorded → finished → leftovers → not recorded."""
    if current is None:
        return True
    if current is True:
        return False
    return None


def _order_key(record: FeedingRecord):
    return as_utc(record.feeding_time), record.id


def find_latest_unconsumed(records: Iterable[FeedingRecord]) -> Optional[FeedingRecord]:
    """The unrecorded feeding with the latest ``feeding_time``, or None."""
    pending = [r for r in records if r.consumed is None]
    if not pending:
        return None
    return max(pending, key=_order_key)


class ReconciliationPrompt:
    """
    "Did the pet eat?" asked once for the latest unrecorded feeding.

    The prompt is seeded from the record store on first load, since the
    in-memory collection may not contain the record. Answering it (either
    way) clears it, and an answered feeding is never offered again in the
    same session.
    """

    def __init__(self) -> None:
        self.record: Optional[FeedingRecord] = None
        self._answered: set[int] = set()

    @property
    def is_pending(self) -> bool:
        return self.record is not None

    def _offer(self, candidate: Optional[FeedingRecord]) -> None:
        if candidate is None or candidate.consumed is not None:
            return
        if candidate.id in self._answered:
            return
        if self.record is None or _order_key(candidate) >= _order_key(self.record):
            self.record = candidate

    async def load(self, store: RecordStore) -> Optional[FeedingRecord]:
        """Ask the store for the latest unrecorded feeding. Raises ``RemoteFailure``."""
        self._offer(await store.fetch_latest_unconsumed_feeding_record())
        return self.record

    def refresh(self, records: Iterable[FeedingRecord]) -> Optional[FeedingRecord]:
        """Re-derive the prompt after the feeding collection changed."""
        records = list(records)
        if self.record is not None:
            current = next((r for r in records if r.id == self.record.id), None)
            if current is not None and current.consumed is not None:
                self.record = None
            elif current is not None:
                self.record = current
        self._offer(find_latest_unconsumed(records))
        return self.record

    def discard(self, record_id: int) -> None:
        """Drop the prompt if its feeding was deleted."""
        if self.record is not None and self.record.id == record_id:
            self.record = None

    async def resolve(self, store: RecordStore, consumed: bool) -> FeedingRecord:
        """
        Record the answer. Raises ``RemoteFailure`` and keeps the prompt
        unchanged when the store rejects the update.
        """
        if self.record is None:
            raise LookupError("No feeding is waiting for a consumption answer")
        updated = await store.update_feeding_consumption(self.record.id, consumed)
        self._answered.add(self.record.id)
        logger.info("Feeding %s reconciled (consumed=%s)", self.record.id, consumed)
        self.record = None
        return updated
