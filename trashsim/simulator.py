"""The smart trash can simulation: load sensing, alerts, loading and collection."""

from __future__ import annotations

import argparse
import random
import sys
import threading
from collections.abc import Callable
from enum import IntEnum
from typing import Optional, TextIO

from trashsim.alert import Alert, WarningAlert
from trashsim.collection import SyncedList
from trashsim.console import clear_screen, goto_xy
from trashsim.controller import PeriodicController
from trashsim.garbage import Garbage, generate_garbage
from trashsim.sensor import LoadClass, LoadSensor
from trashsim.trashcan import Trashcan

_LOAD_INTERVAL_MS = 5000
_REPORT_INTERVAL_MS = 10000
_LOADER_INTERVAL_MS = 1000
_COLLECTOR_INTERVAL_MS = 5000
_RULE = "-" * 53


class TrashcanLoadStatus(IntEnum):
    """The coarse state of a trash can."""

    EMPTY = 0
    NORMAL = 1
    FULL = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


_STATUS_FOR_LOAD = {
    LoadClass.UNKNOWN: TrashcanLoadStatus.EMPTY,
    LoadClass.EMPTY: TrashcanLoadStatus.EMPTY,
    LoadClass.BELOW_NORMAL: TrashcanLoadStatus.NORMAL,
    LoadClass.NORMAL: TrashcanLoadStatus.NORMAL,
    LoadClass.ABOVE_NORMAL: TrashcanLoadStatus.NORMAL,
    LoadClass.FULL: TrashcanLoadStatus.FULL,
    LoadClass.OVERLOAD: TrashcanLoadStatus.FULL,
}


def status_for_load(load_class: LoadClass) -> TrashcanLoadStatus:
    """Map a load class to a trash can status."""
    return _STATUS_FOR_LOAD[LoadClass(load_class)]


class TrashcanLoadSensor(LoadSensor):
    """Reads a trash can's weight as a fraction of its capacity."""

    def __init__(self, trashcan: Trashcan) -> None:
        self._trashcan = trashcan

    def measure(self) -> float:
        return self._trashcan.total_weight() / self.maximum_load()

    def maximum_load(self) -> float:
        return self._trashcan.capacity


class TrashcanLoadController(PeriodicController):
    """Periodically measures a trash can and tracks its status."""

    def __init__(self, subject: Trashcan, interval_ms: int = _LOAD_INTERVAL_MS) -> None:
        self._subject = subject
        self._sensor = TrashcanLoadSensor(subject)
        self._status = TrashcanLoadStatus.EMPTY
        self._status_lock = threading.RLock()
        super().__init__(interval_ms)

    def run(self) -> None:
        with self._status_lock:
            status = status_for_load(self._sensor.load())
            if status != self._status:
                self._status = status
                self._status_changed(status)

    def _status_changed(self, status: TrashcanLoadStatus) -> None:
        """Hook called whenever the status changes."""

    @property
    def status(self) -> TrashcanLoadStatus:
        return self._status

    @property
    def subject(self) -> Trashcan:
        return self._subject


class AlertedTrashcanLoadController(TrashcanLoadController):
    """A load controller that sounds a warning while its can is full."""

    def __init__(
        self,
        subject: Trashcan,
        interval_ms: int = _LOAD_INTERVAL_MS,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._stream = stream
        self._alert: Optional[Alert] = None
        super().__init__(subject, interval_ms)

    @property
    def alert(self) -> Optional[Alert]:
        """The alert currently sounding, if any."""
        return self._alert

    def _destroy_alert(self) -> None:
        alert, self._alert = self._alert, None
        if alert is not None:
            alert.shutdown()

    def _status_changed(self, status: TrashcanLoadStatus) -> None:
        self._destroy_alert()
        super()._status_changed(status)
        if status is TrashcanLoadStatus.FULL:
            self._alert = WarningAlert(self._stream)

    def shutdown(self) -> None:
        super().shutdown()
        with self._status_lock:
            self._destroy_alert()


class SmartTrashcan(Trashcan):
    """A trash can with its own load controller and alert."""

    def __init__(
        self,
        capacity: float,
        interval_ms: int = _LOAD_INTERVAL_MS,
        stream: Optional[TextIO] = None,
    ) -> None:
        super().__init__(capacity, threading.RLock())
        self._controller = AlertedTrashcanLoadController(self, interval_ms, stream)

    @property
    def status(self) -> TrashcanLoadStatus:
        return self._controller.status

    @property
    def controller(self) -> AlertedTrashcanLoadController:
        return self._controller

    def check(self) -> TrashcanLoadStatus:
        """Measure the load now and return the resulting status."""
        self._controller.run()
        return self._controller.status

    def shutdown(self) -> None:
        """Stop the controller and any alert."""
        self._controller.shutdown()

    def __enter__(self) -> SmartTrashcan:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


class _Repeater(PeriodicController):
    def __init__(self, interval_ms: int, action: Callable[[], object]) -> None:
        self._action = action
        super().__init__(interval_ms)

    def run(self) -> None:
        self._action()


class Simulator:
    """A district of smart trash cans, a garbage loader and a collector."""

    def __init__(
        self,
        trashcan_count: int = 10,
        trashcan_capacity: float = 200.0,
        stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        start: bool = True,
    ) -> None:
        if trashcan_count < 1:
            raise ValueError(f"need at least one trash can: {trashcan_count}")
        self._stream = stream
        self._rng = rng if rng is not None else random.Random()
        self._district: SyncedList[SmartTrashcan] = SyncedList()
        for _ in range(trashcan_count):
            self._district.add(SmartTrashcan(trashcan_capacity, stream=stream))
        self._workers: list[PeriodicController] = []
        if start:
            self._workers = [
                _Repeater(_REPORT_INTERVAL_MS, self.run),
                _Repeater(_LOADER_INTERVAL_MS, self.load_garbage),
                _Repeater(_COLLECTOR_INTERVAL_MS, self.collect_garbage),
            ]

    @property
    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def trashcans(self) -> tuple[SmartTrashcan, ...]:
        return tuple(self._district)

    def load_garbage(self) -> tuple[Garbage, SmartTrashcan]:
        """Throw a random piece of garbage into a random trash can."""
        trashcan = self._district[self._rng.randrange(len(self._district))]
        garbage = generate_garbage(0.01, 10.0, self._rng)
        out = self._out
        out.write(
            f"{garbage.weight:.2f} weighted garbage '{garbage.identifier}' was "
            f"created and thrown into the target trash '{trashcan.identifier}'.\n\r"
        )
        out.flush()
        trashcan.drop(garbage)
        return garbage, trashcan

    def collect_garbage(self) -> list[str]:
        """Empty every full trash can; return the identifiers collected."""
        collected = []
        out = self._out
        for trashcan in self._district:
            if trashcan.status is TrashcanLoadStatus.FULL:
                trashcan.empty()
                out.write(f"\n\n\rTRASH CAN ({trashcan.identifier}) COLLECTED\n\n\r")
                out.flush()
                collected.append(trashcan.identifier)
        return collected

    def report(self) -> str:
        """Return a table of every trash can's count and status."""
        lines = [f"\n\n\r{_RULE}\n\n\r"]
        for trashcan in self._district:
            lines.append(
                f"\t{trashcan.identifier} ({len(trashcan)}) is {trashcan.status.label}\n\r"
            )
        lines.append(f"\n\r{_RULE}\n\r")
        return "".join(lines)

    def run(self) -> None:
        """Redraw the status table on a cleared screen."""
        out = self._out
        clear_screen(stream=out)
        goto_xy(0, 0, stream=out)
        out.write(self.report())
        out.flush()

    def shutdown(self) -> None:
        """Stop the workers and every trash can's controller."""
        workers, self._workers = self._workers, []
        for worker in workers:
            worker.shutdown()
        for trashcan in self._district:
            trashcan.shutdown()

    def __enter__(self) -> Simulator:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the simulation until a line is entered."""
    parser = argparse.ArgumentParser(
        prog="trashsim", description="Simulate smart trash cans and their collection."
    )
    parser.add_argument("--count", type=int, default=20, help="number of trash cans")
    parser.add_argument(
        "--capacity", type=float, default=200.0, help="capacity of each trash can"
    )
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")
    if args.capacity <= 0:
        parser.error("--capacity must be positive")
    with Simulator(args.count, args.capacity):
        try:
            input()
        except (EOFError, KeyboardInterrupt):
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())