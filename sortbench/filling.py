"""Builders for the vectors and three-dimensional arrays that get sorted."""

from __future__ import annotations

import random
from enum import Enum

VECTOR_SIZE = 32
ARRAY_P = 32
ARRAY_M = 16
ARRAY_N = 100

Array3D = list[list[list[int]]]


class Order(Enum):
    """Initial ordering of the data handed to a sorting algorithm."""

    ORDERED = "o"
    RANDOM = "r"
    BACK = "b"


def _check_sizes(*sizes: int) -> None:
    for size in sizes:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def fill_vector_ordered(size: int = VECTOR_SIZE) -> list[int]:
    """Return the values 1..size in strictly increasing order."""
    _check_sizes(size)
    return list(range(1, size + 1))


def fill_vector_random(size: int = VECTOR_SIZE, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random values taken from ``range(size)``."""
    _check_sizes(size)
    rng = _rng_or_default(rng)
    return [rng.randrange(size) for _ in range(size)]


def fill_vector_back(size: int = VECTOR_SIZE) -> list[int]:
    """Return the values size..1 in strictly decreasing order."""
    _check_sizes(size)
    return list(range(size, 0, -1))


def _empty_array(p: int, m: int, n: int) -> Array3D:
    return [[[0] * n for _ in range(m)] for _ in range(p)]


def _traversal(p: int, m: int, n: int):
    """Yield (k, i, j) indices section by section, column by column."""
    for k in range(p):
        for j in range(n):
            for i in range(m):
                yield k, i, j


def fill_array3d_ordered(p: int = ARRAY_P, m: int = ARRAY_M, n: int = ARRAY_N) -> Array3D:
    """Return a p x m x n array numbered from 0 upward along the traversal."""
    _check_sizes(p, m, n)
    array = _empty_array(p, m, n)
    for number, (k, i, j) in enumerate(_traversal(p, m, n)):
        array[k][i][j] = number
    return array


def fill_array3d_random(
    p: int = ARRAY_P,
    m: int = ARRAY_M,
    n: int = ARRAY_N,
    rng: random.Random | None = None,
) -> Array3D:
    """Return a p x m x n array of random values from ``range(p * m * n)``."""
    _check_sizes(p, m, n)
    rng = _rng_or_default(rng)
    total = p * m * n
    array = _empty_array(p, m, n)
    for k, i, j in _traversal(p, m, n):
        array[k][i][j] = rng.randrange(total)
    return array


def fill_array3d_back(p: int = ARRAY_P, m: int = ARRAY_M, n: int = ARRAY_N) -> Array3D:
    """Return a p x m x n array numbered from p*m*n downward along the traversal."""
    _check_sizes(p, m, n)
    total = p * m * n
    array = _empty_array(p, m, n)
    for offset, (k, i, j) in enumerate(_traversal(p, m, n)):
        array[k][i][j] = total - offset
    return array


def make_vector(
    order: Order | str,
    size: int = VECTOR_SIZE,
    rng: random.Random | None = None,
) -> list[int]:
    """Build a vector with the requested initial ordering."""
    order = Order(order)
    if order is Order.ORDERED:
        return fill_vector_ordered(size)
    if order is Order.RANDOM:
        return fill_vector_random(size, rng)
    return fill_vector_back(size)


def make_array3d(
    order: Order | str,
    p: int = ARRAY_P,
    m: int = ARRAY_M,
    n: int = ARRAY_N,
    rng: random.Random | None = None,
) -> Array3D:
    """Build a three-dimensional array with the requested initial ordering."""
    order = Order(order)
    if order is Order.ORDERED:
        return fill_array3d_ordered(p, m, n)
    if order is Order.RANDOM:
        return fill_array3d_random(p, m, n, rng)
    return fill_array3d_back(p, m, n)