"""Trash cans that hold garbage up to a nominal capacity."""

from __future__ import annotations

import itertools
import threading

from trashsim.collection import SyncedList
from trashsim.garbage import Garbage

_serial = itertools.count(1)
_serial_lock = threading.Lock()


def _next_identifier() -> str:
    with _serial_lock:
        number = next(_serial)
    return f"TrashCan({number:03d})"


class Trashcan(SyncedList[Garbage]):
    """A numbered can of garbage with a capacity in weight units."""

    def __init__(self, capacity: float, lock=None) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive: {capacity}")
        super().__init__(lock)
        self._capacity = capacity
        self._identifier = _next_identifier()

    @property
    def capacity(self) -> float:
        return self._capacity

    @property
    def identifier(self) -> str:
        return self._identifier

    def drop(self, garbage: Garbage) -> None:
        """Throw ``garbage`` into the can."""
        self.add(garbage)

    def total_weight(self) -> float:
        """Return the combined weight of everything in the can."""
        return sum((item.weight for item in self.snapshot()), 0.0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._identifier}, capacity={self._capacity})"