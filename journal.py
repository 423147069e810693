# journal.py
from __future__ import annotations

import datetime as _dt
import logging
import time
from typing import Callable, Optional

from models import ConfirmPending, DeleteState, Draft, Entry, Idle
from storage import EntryStore

logger = logging.getLogger(__name__)

SEED_ENTRIES = [
    ("I found a chestnut", _dt.date(2025, 10, 1)),
    ("I made a simple Angular app", _dt.date(2025, 10, 2)),
]


class ClockIds:
    """Millisecond clock ids, bumped when the clock has not moved on."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        value = max(int(self._clock() * 1000), self._last + 1)
        self._last = value
        return value


class GratitudeList:
    """
    Owns the journal entries, the draft form fields and the delete
    confirmation state. Every add and confirmed delete writes the whole
    collection to the store before returning.
    """

    def __init__(
        self,
        store: EntryStore,
        next_id: Optional[Callable[[], int]] = None,
        today: Callable[[], _dt.date] = _dt.date.today,
    ):
        self.store = store
        self.next_id = next_id or ClockIds()
        self.today = today

        self.entries: list[Entry] = []
        self.draft = Draft(title="", date=today())
        self.delete_state: DeleteState = Idle()

    # ---------------- Load ----------------

    def init(self) -> None:
        loaded = self.store.load()
        if loaded is None:
            self.entries = [Entry(id=self.next_id(), title=t, date=d) for t, d in SEED_ENTRIES]
            self.store.save(self.entries)
            logger.info("seeded journal with %d default entries", len(self.entries))
        else:
            self.entries = loaded
            logger.info("loaded %d entries", len(self.entries))

    # ---------------- Add ----------------

    def add_gratitude(self) -> Optional[Entry]:
        if not self.draft.title.strip() or self.draft.date is None:
            return None

        e = Entry(id=self.next_id(), title=self.draft.title, date=self.draft.date)
        # memory only changes once the store has taken the write
        self.store.save(self.entries + [e])
        self.entries.append(e)

        self.draft = Draft(title="", date=self.today())
        logger.info("added entry %d", e.id)
        return e

    # ---------------- Delete ----------------

    @property
    def pending_index(self) -> int:
        if isinstance(self.delete_state, ConfirmPending):
            return self.delete_state.index
        return -1

    @property
    def is_modal_open(self) -> bool:
        return isinstance(self.delete_state, ConfirmPending)

    def delete_gratitude(self, index: int) -> None:
        self.delete_state = ConfirmPending(index)

    def confirm_delete(self) -> Optional[Entry]:
        removed = None
        index = self.pending_index
        if index >= 0:
            remaining = list(self.entries)
            if index < len(remaining):
                removed = remaining.pop(index)
            self.store.save(remaining)
            self.entries = remaining
            if removed is not None:
                logger.info("deleted entry %d", removed.id)
        self.close_delete_modal()
        return removed

    def close_delete_modal(self) -> None:
        self.delete_state = Idle()
