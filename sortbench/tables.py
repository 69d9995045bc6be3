"""Result tables for the sorting measurements."""

from __future__ import annotations

import random
from collections.abc import Sequence

from sortbench.filling import ARRAY_M, ARRAY_N, ARRAY_P, VECTOR_SIZE, Order
from sortbench.measurement import Algorithm, Structure, average_time

_COLUMNS = "Ordered\t\t\tRandom Ordered\t\tBack Ordered\n\n"
_WIDE_GAP = "\t\t\t"
_NARROW_GAP = "\t\t"


def _array_title() -> str:
    return (
        f"\t\t\tTable for the array: P = {ARRAY_P}, M = {ARRAY_M}, N = {ARRAY_N} "
        "|array traversal method #7|\n\n"
    )


def _vector_title() -> str:
    return f"\t\t\t\tTable for the vector: VECTOR = {VECTOR_SIZE}\n\n"


def table_header(structure: Structure | str) -> str:
    """Return the title and column headings of a table for ``structure``."""
    structure = Structure(structure)
    if structure is Structure.ARRAY3D:
        return _array_title() + _WIDE_GAP + _COLUMNS
    return _vector_title() + _NARROW_GAP + _COLUMNS


def _row(algorithm: Algorithm | str, values: Sequence[float], gap: str) -> str:
    algorithm = Algorithm(algorithm)
    if len(values) != len(Order):
        raise ValueError(f"expected {len(Order)} values, got {len(values)}")
    cells = "\t\t\t".join(f"{value:.2f}" for value in values)
    return f"{algorithm.label}{gap}{cells}\n\n"


def format_row(
    algorithm: Algorithm | str,
    structure: Structure | str,
    values: Sequence[float],
) -> str:
    """Format one table row: ordered, random and back-ordered averages."""
    structure = Structure(structure)
    gap = _WIDE_GAP if structure is Structure.ARRAY3D else _NARROW_GAP
    return _row(algorithm, values, gap)


def _averages(
    algorithm: Algorithm,
    structure: Structure,
    rng: random.Random | None,
) -> tuple[float, ...]:
    return tuple(average_time(algorithm, structure, order, rng) for order in Order)


def algorithm_table(
    algorithm: Algorithm | str,
    structure: Structure | str,
    rng: random.Random | None = None,
) -> str:
    """Measure one algorithm on one structure for every ordering and return the table."""
    algorithm = Algorithm(algorithm)
    structure = Structure(structure)
    values = _averages(algorithm, structure, rng)
    return table_header(structure) + format_row(algorithm, structure, values)


def batch_mode(rng: random.Random | None = None) -> str:
    """Measure every algorithm on every structure and return both tables."""
    parts = [_array_title(), _WIDE_GAP, _COLUMNS]
    for algorithm in Algorithm:
        values = _averages(algorithm, Structure.ARRAY3D, rng)
        parts.append(_row(algorithm, values, _WIDE_GAP))
    parts += [_vector_title(), _WIDE_GAP, _COLUMNS]
    for algorithm in Algorithm:
        values = _averages(algorithm, Structure.VECTOR, rng)
        parts.append(_row(algorithm, values, _WIDE_GAP))
    return "".join(parts)