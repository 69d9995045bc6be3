"""Repeated timing of the sorts and trimmed averaging of the results."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from sortbench.filling import Order, make_array3d, make_vector
from sortbench.sorting import (
    select1_array3d,
    select1_vector,
    select8_array3d,
    select8_vector,
    shell2_array3d,
    shell2_vector,
)

MEASUREMENTS_NUMBER = 28
REJECTED_NUMBER = 2
MIN_MAX_NUMBER = 3


class Structure(Enum):
    """Kind of data structure being sorted."""

    ARRAY3D = "array3d"
    VECTOR = "vector"

    def build(self, order: Order | str, rng: random.Random | None = None) -> Any:
        """Return fresh data of this structure with the given initial ordering."""
        if self is Structure.ARRAY3D:
            return make_array3d(order, rng=rng)
        return make_vector(order, rng=rng)


class Algorithm(Enum):
    """Sorting algorithm under measurement."""

    SELECT1 = "Select1"
    SELECT8 = "Select8"
    SHELL2 = "Shell_2"

    @property
    def label(self) -> str:
        """Name shown in result tables."""
        return self.value

    def sorter(self, structure: Structure) -> Callable[[Any], int]:
        """Return the sort function for ``structure``."""
        return _SORTERS[self, Structure(structure)]


_SORTERS: dict[tuple[Algorithm, Structure], Callable[[Any], int]] = {
    (Algorithm.SELECT1, Structure.VECTOR): select1_vector,
    (Algorithm.SELECT8, Structure.VECTOR): select8_vector,
    (Algorithm.SHELL2, Structure.VECTOR): shell2_vector,
    (Algorithm.SELECT1, Structure.ARRAY3D): select1_array3d,
    (Algorithm.SELECT8, Structure.ARRAY3D): select8_array3d,
    (Algorithm.SHELL2, Structure.ARRAY3D): shell2_array3d,
}


def process_measurements(
    results: Sequence[float],
    rejected: int = REJECTED_NUMBER,
    min_max: int = MIN_MAX_NUMBER,
) -> float:
    """Average the measurements after trimming.

    The first ``rejected`` measurements are discarded as warm-up, then the
    ``min_max`` smallest and ``min_max`` largest of the rest are dropped.
    """
    if rejected < 0 or min_max < 0:
        raise ValueError("rejected and min_max must not be negative")
    remaining = len(results) - rejected - 2 * min_max
    if remaining <= 0:
        raise ValueError(
            f"{len(results)} measurements are too few to reject {rejected} "
            f"and trim {min_max} from each end"
        )
    kept = sorted(results[rejected:])[min_max : len(results) - rejected - min_max]
    return sum(kept) / remaining


def measure(
    algorithm: Algorithm | str,
    structure: Structure | str,
    order: Order | str,
    count: int = MEASUREMENTS_NUMBER,
    rng: random.Random | None = None,
) -> list[int]:
    """Sort freshly built data ``count`` times and return each run's time."""
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    structure = Structure(structure)
    order = Order(order)
    sort = Algorithm(algorithm).sorter(structure)
    return [sort(structure.build(order, rng)) for _ in range(count)]


def average_time(
    algorithm: Algorithm | str,
    structure: Structure | str,
    order: Order | str,
    rng: random.Random | None = None,
) -> float:
    """Measure an algorithm on a structure and return the trimmed average time."""
    return process_measurements(measure(algorithm, structure, order, MEASUREMENTS_NUMBER, rng))