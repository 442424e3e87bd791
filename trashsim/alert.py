"""Audible alerts that repeat until shut down."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from trashsim.controller import PeriodicController

_ALERT_INTERVAL_MS = 500
_BELL = "\a"


class Alert(PeriodicController):
    """Rings the terminal bell every half second.

    ``frequency`` (Hz) and ``duration`` (ms) describe the tone; a terminal
    bell cannot vary them, so they are kept for reference.
    """

    def __init__(
        self, frequency: int, duration: int, stream: Optional[TextIO] = None
    ) -> None:
        self.frequency = frequency
        self.duration = duration
        self._stream = stream
        super().__init__(_ALERT_INTERVAL_MS)

    def run(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(_BELL)
        stream.flush()


class ExclamationAlert(Alert):
    """A lower-pitched alert."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(1500, 350, stream)


class WarningAlert(Alert):
    """A higher-pitched alert."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__(2500, 350, stream)