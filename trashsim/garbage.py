"""Kinds of garbage and a random garbage generator."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol


class _RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Garbage:
    """A piece of garbage of a given weight."""

    weight: float
    identifier: ClassVar[Optional[str]] = None


class DomesticWaste(Garbage):
    identifier = "Domestic Waste"


class MedicalWaste(Garbage):
    identifier = "Medical Waste"


class RottenFruit(Garbage):
    identifier = "Rotten Fruit"


class RottenVegetable(Garbage):
    identifier = "Rotten Vegetable"


class PlasticWaste(Garbage):
    identifier = "Plastic Waste"


class PaperWaste(Garbage):
    identifier = "Paper Waste"


class ChemicalWaste(Garbage):
    identifier = "Chemical Waste"


class OtherWaste(Garbage):
    identifier = "Other Waste"


_KINDS: tuple[type[Garbage], ...] = (
    DomesticWaste,
    MedicalWaste,
    RottenFruit,
    RottenVegetable,
    PlasticWaste,
    PaperWaste,
    ChemicalWaste,
    OtherWaste,
)


def generate_garbage(
    minimum_weight: float = 0.01,
    maximum_weight: float = 5.0,
    rng: Optional[_RandomSource] = None,
) -> Garbage:
    """Make garbage of a random kind weighing between the two bounds."""
    source = rng if rng is not None else random
    weight = source.uniform(minimum_weight, maximum_weight)
    kind = _KINDS[source.randrange(len(_KINDS))]
    return kind(weight)