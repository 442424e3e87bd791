"""Sensors and the classification of a measured load."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import IntEnum


class LoadClass(IntEnum):
    """How full something is, by fraction of its maximum load."""

    UNKNOWN = -1
    EMPTY = 0  # 0.00 - 0.20
    BELOW_NORMAL = 1  # 0.20 - 0.40
    NORMAL = 2  # 0.40 - 0.60
    ABOVE_NORMAL = 3  # 0.60 - 0.80
    FULL = 4  # 0.80 - 1.00
    OVERLOAD = 5  # above 1.00


_LABELS = {
    LoadClass.EMPTY: "Empty",
    LoadClass.BELOW_NORMAL: "Below Normal",
    LoadClass.NORMAL: "Normal",
    LoadClass.ABOVE_NORMAL: "Above Normal",
    LoadClass.FULL: "Full",
    LoadClass.OVERLOAD: "Overload",
}

_UPPER_BOUNDS = (
    (0.20, LoadClass.EMPTY),
    (0.40, LoadClass.BELOW_NORMAL),
    (0.60, LoadClass.NORMAL),
    (0.80, LoadClass.ABOVE_NORMAL),
    (1.00, LoadClass.FULL),
)


def classify_load(measure: float) -> LoadClass:
    """Classify a load fraction; negative or NaN values are unknown."""
    if math.isnan(measure) or measure < 0.0:
        return LoadClass.UNKNOWN
    for upper, load_class in _UPPER_BOUNDS:
        if measure <= upper:
            return load_class
    return LoadClass.OVERLOAD


def load_class_to_string(load_class: int) -> str:
    """Return the display name of a load class, or "Unknown"."""
    try:
        return _LABELS.get(LoadClass(load_class), "Unknown")
    except ValueError:
        return "Unknown"


class Sensor(ABC):
    """Something that measures a value, nominally from 0.0 upwards."""

    @abstractmethod
    def measure(self) -> float:
        """Return the current reading."""


class LoadSensor(Sensor):
    """A sensor whose reading is a fraction of a maximum load."""

    @abstractmethod
    def maximum_load(self) -> float:
        """Return the load that counts as completely full."""

    def load(self) -> LoadClass:
        """Classify the current reading."""
        return classify_load(self.measure())