"""Controllers, including one that runs itself periodically on a thread."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod


class Controller(ABC):
    """Something that can be run."""

    @abstractmethod
    def run(self) -> None:
        """Do one unit of work."""


class PeriodicController(Controller):
    """Calls :meth:`run` every ``interval_ms`` milliseconds until shut down.

    The worker thread starts as soon as the controller is built, and the first
    call to :meth:`run` comes one interval later. Subclasses should set up
    their own state before calling ``super().__init__``.
    """

    def __init__(self, interval_ms: int) -> None:
        if interval_ms < 0:
            raise ValueError(f"interval must not be negative: {interval_ms}")
        self._interval_ms = interval_ms
        self._stop = threading.Event()
        self._runner = threading.Thread(
            target=self._loop, name=type(self).__name__, daemon=True
        )
        self._runner.start()

    @property
    def interval_ms(self) -> int:
        """The period between runs, in milliseconds."""
        return self._interval_ms

    @abstractmethod
    def run(self) -> None:
        """Do one periodic unit of work."""

    def _loop(self) -> None:
        timeout = self._interval_ms / 1000.0
        while not self._stop.wait(timeout):
            self.run()

    def shutdown(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        self._stop.set()
        if self._runner is not threading.current_thread():
            self._runner.join()

    def __enter__(self) -> PeriodicController:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()