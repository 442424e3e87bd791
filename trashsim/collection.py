"""A list whose changes can be guarded by an optional lock."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class _Synchronizer(Protocol):
    def acquire(self) -> object: ...

    def release(self) -> None: ...


class SyncedList(Generic[T]):
    """An append-only list that can be emptied, guarded by ``lock`` if given.

    Without a lock no synchronisation takes place. A reentrant lock is the
    safe choice when callers hold :meth:`locked` while adding or emptying.
    """

    def __init__(self, lock: Optional[_Synchronizer] = None) -> None:
        self._lock = lock
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    @contextmanager
    def locked(self) -> Iterator[SyncedList[T]]:
        """Hold the lock, if there is one, for the duration of the block."""
        if self._lock is None:
            yield self
            return
        self._lock.acquire()
        try:
            yield self
        finally:
            self._lock.release()

    def add(self, item: T) -> None:
        """Append ``item`` at the end."""
        with self.locked():
            self._items.append(item)

    def empty(self) -> list[T]:
        """Remove every item and return them in removal order, last first."""
        with self.locked():
            removed: list[T] = []
            while self._items:
                removed.append(self._items.pop())
            return removed

    def snapshot(self) -> list[T]:
        """Return a copy of the items taken under the lock."""
        with self.locked():
            return list(self._items)