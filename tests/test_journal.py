from __future__ import annotations

import json
import unittest
from datetime import date

from journal import ClockIds, GratitudeList
from models import ConfirmPending, Entry, Idle
from storage import EntryStore, MemoryKeyValueStore, serialize_entries

TODAY = date(2026, 1, 2)


def counter(start: int = 100):
    state = {"n": start}

    def next_id() -> int:
        state["n"] += 1
        return state["n"]

    return next_id


def make_journal(initial: dict[str, str] | None = None) -> tuple[GratitudeList, MemoryKeyValueStore]:
    kv = MemoryKeyValueStore(initial)
    journal = GratitudeList(EntryStore(kv), next_id=counter(), today=lambda: TODAY)
    return journal, kv


def stored(kv: MemoryKeyValueStore) -> list[dict]:
    return json.loads(kv.data["gratitudes"])


class InitTests(unittest.TestCase):
    def test_empty_store_seeds_two_entries_with_one_write(self) -> None:
        journal, kv = make_journal()
        journal.init()

        self.assertEqual(len(journal.entries), 2)
        self.assertEqual([e.id for e in journal.entries], [101, 102])
        self.assertEqual([e.date for e in journal.entries], [date(2025, 10, 1), date(2025, 10, 2)])
        self.assertEqual(kv.writes, 1)
        self.assertEqual(len(stored(kv)), 2)

    def test_existing_value_is_loaded_without_writing(self) -> None:
        entries = [Entry(i, f"thing {i}", date(2025, 5, i)) for i in range(1, 4)]
        journal, kv = make_journal({"gratitudes": serialize_entries(entries)})
        journal.init()

        self.assertEqual(journal.entries, entries)
        self.assertEqual(kv.writes, 0)

    def test_empty_array_is_kept_not_reseeded(self) -> None:
        journal, kv = make_journal({"gratitudes": "[]"})
        journal.init()

        self.assertEqual(journal.entries, [])
        self.assertEqual(kv.writes, 0)

    def test_corrupted_value_propagates(self) -> None:
        journal, kv = make_journal({"gratitudes": "{not json"})
        with self.assertRaises(ValueError):
            journal.init()
        self.assertEqual(kv.writes, 0)

    def test_malformed_record_propagates(self) -> None:
        journal, _ = make_journal({"gratitudes": '[{"id": 1}]'})
        with self.assertRaises(KeyError):
            journal.init()

    def test_null_title_propagates(self) -> None:
        journal, kv = make_journal({"gratitudes": '[{"id": 1, "title": null, "date": "2025-01-01"}]'})
        with self.assertRaises(TypeError):
            journal.init()
        self.assertEqual(journal.entries, [])
        self.assertEqual(kv.writes, 0)

    def test_seed_titles(self) -> None:
        journal, _ = make_journal()
        journal.init()
        self.assertEqual(
            [e.title for e in journal.entries],
            ["I found a chestnut", "I made a simple Angular app"],
        )


class FailingKeyValueStore(MemoryKeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        super().__init__(initial)
        self.fail = False

    def set(self, key: str, text: str) -> None:
        if self.fail:
            raise OSError("disk full")
        super().set(key, text)


class FailedWriteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.kv = FailingKeyValueStore()
        self.journal = GratitudeList(EntryStore(self.kv), next_id=counter(), today=lambda: TODAY)
        self.journal.init()
        self.before = list(self.journal.entries)
        self.kv.fail = True

    def test_failed_add_leaves_memory_matching_store(self) -> None:
        self.journal.draft.title = "tea"
        with self.assertRaises(OSError):
            self.journal.add_gratitude()

        self.assertEqual(self.journal.entries, self.before)
        self.assertEqual(self.journal.draft.title, "tea")
        self.assertEqual([r["id"] for r in stored(self.kv)], [e.id for e in self.before])

    def test_failed_delete_leaves_memory_matching_store(self) -> None:
        self.journal.delete_gratitude(0)
        with self.assertRaises(OSError):
            self.journal.confirm_delete()

        self.assertEqual(self.journal.entries, self.before)
        self.assertEqual([r["id"] for r in stored(self.kv)], [e.id for e in self.before])


class AddTests(unittest.TestCase):
    def setUp(self) -> None:
        self.journal, self.kv = make_journal()
        self.journal.init()
        self.writes_before = self.kv.writes

    def test_add_appends_untrimmed_title_and_persists(self) -> None:
        self.journal.draft.title = "  sunny walk  "
        self.journal.draft.date = date(2025, 12, 24)

        e = self.journal.add_gratitude()

        self.assertIsNotNone(e)
        self.assertEqual(len(self.journal.entries), 3)
        self.assertEqual(self.journal.entries[-1].title, "  sunny walk  ")
        self.assertEqual(self.journal.entries[-1].date, date(2025, 12, 24))
        self.assertEqual(self.kv.writes, self.writes_before + 1)
        self.assertEqual(stored(self.kv)[-1]["title"], "  sunny walk  ")

    def test_add_resets_draft(self) -> None:
        self.journal.draft.title = "tea"
        self.journal.draft.date = date(2025, 1, 1)
        self.journal.add_gratitude()

        self.assertEqual(self.journal.draft.title, "")
        self.assertEqual(self.journal.draft.date, TODAY)

    def test_add_uses_next_id(self) -> None:
        self.journal.draft.title = "tea"
        e = self.journal.add_gratitude()
        self.assertEqual(e.id, 103)

    def test_blank_title_is_ignored(self) -> None:
        for title in ("", "   ", "\t\n"):
            self.journal.draft.title = title
            self.assertIsNone(self.journal.add_gratitude())

        self.assertEqual(len(self.journal.entries), 2)
        self.assertEqual(self.kv.writes, self.writes_before)

    def test_missing_date_is_ignored(self) -> None:
        self.journal.draft.title = "tea"
        self.journal.draft.date = None

        self.assertIsNone(self.journal.add_gratitude())
        self.assertEqual(len(self.journal.entries), 2)
        self.assertEqual(self.journal.draft.title, "tea")
        self.assertEqual(self.kv.writes, self.writes_before)


class DeleteTests(unittest.TestCase):
    def setUp(self) -> None:
        entries = [Entry(i, f"thing {i}", date(2025, 5, i)) for i in range(1, 4)]
        self.entries = entries
        self.journal, self.kv = make_journal({"gratitudes": serialize_entries(entries)})
        self.journal.init()

    def assert_idle(self) -> None:
        self.assertEqual(self.journal.delete_state, Idle())
        self.assertFalse(self.journal.is_modal_open)
        self.assertEqual(self.journal.pending_index, -1)

    def test_starts_idle(self) -> None:
        self.assert_idle()

    def test_delete_opens_modal_without_removing(self) -> None:
        self.journal.delete_gratitude(1)

        self.assertEqual(self.journal.delete_state, ConfirmPending(1))
        self.assertTrue(self.journal.is_modal_open)
        self.assertEqual(self.journal.pending_index, 1)
        self.assertEqual(len(self.journal.entries), 3)
        self.assertEqual(self.kv.writes, 0)

    def test_confirm_removes_exactly_that_entry(self) -> None:
        for i in range(3):
            journal, kv = make_journal({"gratitudes": serialize_entries(self.entries)})
            journal.init()
            journal.delete_gratitude(i)
            removed = journal.confirm_delete()

            self.assertEqual(removed, self.entries[i])
            self.assertEqual(journal.entries, self.entries[:i] + self.entries[i + 1:])
            self.assertEqual(kv.writes, 1)
            self.assertFalse(journal.is_modal_open)

    def test_out_of_range_index_is_accepted_and_ignored(self) -> None:
        self.journal.delete_gratitude(7)
        self.assertEqual(self.journal.pending_index, 7)

        self.assertIsNone(self.journal.confirm_delete())
        self.assertEqual(self.journal.entries, self.entries)
        self.assert_idle()

    def test_negative_index_does_not_write(self) -> None:
        self.journal.delete_gratitude(-1)
        self.assertTrue(self.journal.is_modal_open)

        self.journal.confirm_delete()
        self.assertEqual(self.journal.entries, self.entries)
        self.assertEqual(self.kv.writes, 0)
        self.assert_idle()

    def test_cancel_keeps_collection(self) -> None:
        self.journal.delete_gratitude(0)
        self.journal.close_delete_modal()

        self.assertEqual(self.journal.entries, self.entries)
        self.assertEqual(self.kv.writes, 0)
        self.assert_idle()

    def test_confirm_without_pending_is_noop(self) -> None:
        self.assertIsNone(self.journal.confirm_delete())
        self.assertEqual(self.kv.writes, 0)
        self.assert_idle()


class ScenarioTests(unittest.TestCase):
    def test_seed_add_delete(self) -> None:
        journal, kv = make_journal()
        journal.init()
        self.assertEqual(len(journal.entries), 2)
        first = journal.entries[0]

        journal.draft.title = "New gratitude"
        journal.draft.date = date(2025, 10, 3)
        journal.add_gratitude()
        self.assertEqual(len(journal.entries), 3)
        self.assertEqual(journal.entries[-1].title, "New gratitude")

        journal.delete_gratitude(0)
        journal.confirm_delete()
        self.assertEqual(len(journal.entries), 2)
        self.assertNotIn(first, journal.entries)
        self.assertFalse(journal.is_modal_open)
        self.assertEqual([r["id"] for r in stored(kv)], [e.id for e in journal.entries])


class ClockIdsTests(unittest.TestCase):
    def test_ids_strictly_increase_on_a_stuck_clock(self) -> None:
        ids = ClockIds(clock=lambda: 1_700_000_000.0)
        values = [ids() for _ in range(3)]
        self.assertEqual(values, [1_700_000_000_000, 1_700_000_000_001, 1_700_000_000_002])

    def test_ids_follow_the_clock(self) -> None:
        ticks = iter([1.0, 5.0])
        ids = ClockIds(clock=lambda: next(ticks))
        self.assertEqual([ids(), ids()], [1000, 5000])


if __name__ == "__main__":
    unittest.main()
