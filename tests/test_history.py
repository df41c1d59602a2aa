"""Tests for the session history store."""

from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from passmeter.history import HISTORY_CAPACITY, HistoryStore, mask_password


def _ticking_clock():
    start = datetime(2024, 1, 1, 12, 0, 0)
    clock = Mock(side_effect=[start + timedelta(seconds=i) for i in range(100)])
    return clock


class TestHistoryStore:
    def test_starts_empty(self):
        assert HistoryStore().list() == []

    def test_most_recent_first(self):
        store = HistoryStore()
        store.record("first", "Weak", 2)
        store.record("second", "Fair", 3)
        assert [e.password for e in store.list()] == ["second", "first"]

    def test_entry_fields(self):
        clock = _ticking_clock()
        store = HistoryStore(clock=clock)
        entry = store.record("Abc12345", "Good", 4)
        assert entry.password == "Abc12345"
        assert entry.level == "Good"
        assert entry.score == 4
        assert entry.timestamp == datetime(2024, 1, 1, 12, 0, 0)
        assert store.list() == [entry]

    def test_rerecord_moves_to_front(self):
        store = HistoryStore(clock=_ticking_clock())
        store.record("a", "None", 0)
        store.record("b", "None", 0)
        store.record("c", "None", 0)
        store.record("a", "Weak", 2)
        entries = store.list()
        assert [e.password for e in entries] == ["a", "c", "b"]
        assert entries[0].level == "Weak"
        assert entries[0].timestamp > entries[1].timestamp

    def test_eleventh_evicts_oldest(self):
        store = HistoryStore()
        for i in range(HISTORY_CAPACITY + 1):
            store.record(f"pw{i}", "Weak", 2)
        passwords = [e.password for e in store.list()]
        assert len(passwords) == 10
        assert "pw0" not in passwords
        assert passwords[0] == "pw10"

    def test_custom_capacity(self):
        store = HistoryStore(capacity=3)
        for i in range(5):
            store.record(str(i), "None", 0)
        assert [e.password for e in store.list()] == ["4", "3", "2"]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            HistoryStore(capacity=0)

    def test_clear(self):
        store = HistoryStore()
        store.record("a", "None", 0)
        store.record("b", "None", 0)
        store.clear()
        assert store.list() == []
        assert len(store) == 0

    def test_list_is_a_snapshot(self):
        store = HistoryStore()
        store.record("a", "None", 0)
        snapshot = store.list()
        snapshot.clear()
        assert len(store.list()) == 1

    def test_len_and_iter(self):
        store = HistoryStore()
        store.record("a", "None", 0)
        store.record("b", "None", 0)
        assert len(store) == 2
        assert [e.password for e in store] == ["b", "a"]


class TestMaskPassword:
    @pytest.mark.parametrize("pwd, masked", [
        ("", ""),
        ("ab", "**"),
        ("abcd", "****"),
        ("abcde", "ab*de"),
        ("abcdef", "ab**ef"),
    ])
    def test_mask(self, pwd, masked):
        assert mask_password(pwd) == masked

    def test_length_preserved(self):
        assert len(mask_password("Tr0ub4dor&3!")) == 12
