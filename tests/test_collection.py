import threading

import pytest

from trashsim.collection import SyncedList


class RecordingLock:
    def __init__(self):
        self.events = []

    def acquire(self):
        self.events.append("acquire")
        return True

    def release(self):
        self.events.append("release")


class RecordingList(SyncedList):
    def __init__(self, lock=None):
        super().__init__(lock)
        self.discarded = []

    def _discard(self, item):
        self.discarded.append(item)


def test_add_and_index():
    items = SyncedList()
    for value in ("a", "b", "c"):
        items.add(value)
    assert len(items) == 3
    assert items[0] == "a"
    assert items[2] == "c"


def test_index_out_of_range_raises():
    items = SyncedList()
    items.add(1)
    with pytest.raises(IndexError):
        items[5]
    assert len(items) == 1
    assert items[0] == 1


def test_iteration_follows_insertion_order():
    items = SyncedList()
    values = [3, 1, 2]
    for value in values:
        items.add(value)
    assert list(items) == values


def test_empty_on_empty_list_discards_nothing():
    items = RecordingList()
    SyncedList.empty(items)
    assert items.discarded == []
    assert SyncedList.snapshot(items) == []


def test_snapshot_is_independent_copy():
    items = SyncedList()
    items.add("x")
    copy = items.snapshot()
    items.add("y")
    assert copy == ["x"]
    assert items.snapshot() == ["x", "y"]


def test_lock_is_acquired_and_released_in_pairs():
    lock = RecordingLock()
    items = SyncedList(lock)
    items.add(1)
    items.empty()
    items.snapshot()
    assert lock.events.count("acquire") == lock.events.count("release")
    assert lock.events[:2] == ["acquire", "release"]


def test_lock_released_when_block_raises():
    lock = RecordingLock()
    items = SyncedList(lock)
    with pytest.raises(RuntimeError):
        with items.locked():
            raise RuntimeError("boom")
    assert lock.events == ["acquire", "release"]


def test_concurrent_adds_are_all_kept():
    items = SyncedList(threading.RLock())

    def worker(base):
        for offset in range(200):
            items.add(base + offset)

    threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(items) == 800
    assert sorted(items) == sorted(n * 1000 + k for n in range(4) for k in range(200))


def test_reentrant_lock_allows_add_inside_locked_block():
    items = SyncedList(threading.RLock())
    with items.locked():
        items.add("inside")
    assert items.snapshot() == ["inside"]