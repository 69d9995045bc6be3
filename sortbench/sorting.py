"""Selection and Shell sorts for vectors and three-dimensional arrays.

Every sort works in place and returns the time it took in nanoseconds.
Arrays are reordered section by section, keyed on each section's first element.
"""

from __future__ import annotations

import time
from collections.abc import MutableSequence
from typing import Any


def shell_steps(count: int) -> list[int]:
    """Return the decreasing gap sequence (..., 15, 7, 3, 1) for ``count`` items."""
    if count < 4:
        t = 1
    else:
        t = (count.bit_length() - 1) - 1
    steps = [1]
    while len(steps) < t:
        steps.append(2 * steps[-1] + 1)
    return steps[::-1]


def select1_vector(vector: MutableSequence[Any]) -> int:
    """Straight selection: place the minimum of the rest at each position."""
    start = time.perf_counter_ns()
    size = len(vector)
    for s in range(size - 1):
        imin = min(range(s, size), key=vector.__getitem__)
        vector[s], vector[imin] = vector[imin], vector[s]
    return time.perf_counter_ns() - start


def select8_vector(vector: MutableSequence[Any]) -> int:
    """Two-ended selection: move both the minimum and the maximum each pass."""
    start = time.perf_counter_ns()
    left, right = 0, len(vector) - 1
    while left < right:
        imin = imax = left
        for i in range(left + 1, right + 1):
            if vector[i] < vector[imin]:
                imin = i
            elif vector[i] > vector[imax]:
                imax = i
        if imin != left:
            vector[imin], vector[left] = vector[left], vector[imin]
        if imax != right:
            if imax == left:
                imax = imin
            vector[imax], vector[right] = vector[right], vector[imax]
        left += 1
        right -= 1
    return time.perf_counter_ns() - start


def shell2_vector(vector: MutableSequence[Any]) -> int:
    """Shell sort with gaps 2**k - 1."""
    start = time.perf_counter_ns()
    size = len(vector)
    for gap in shell_steps(size):
        for i in range(gap, size):
            j = i
            while j >= gap and vector[j] < vector[j - gap]:
                vector[j], vector[j - gap] = vector[j - gap], vector[j]
                j -= gap
    return time.perf_counter_ns() - start


def _key(section: Any) -> Any:
    return section[0][0]


def select1_array3d(array: MutableSequence[Any]) -> int:
    """Straight selection of sections by their first element."""
    start = time.perf_counter_ns()
    size = len(array)
    for s in range(size - 1):
        imin = s
        smallest = _key(array[s])
        for i in range(s + 1, size):
            if _key(array[i]) < smallest:
                smallest = _key(array[i])
                imin = i
        array[s], array[imin] = array[imin], array[s]
    return time.perf_counter_ns() - start


def select8_array3d(array: MutableSequence[Any]) -> int:
    """Two-ended selection of sections by their first element."""
    start = time.perf_counter_ns()
    left, right = 0, len(array) - 1
    while left < right:
        imin = imax = left
        for i in range(left + 1, right + 1):
            if _key(array[i]) < _key(array[imin]):
                imin = i
            elif _key(array[i]) > _key(array[imax]):
                imax = i
        if imin != left:
            array[left], array[imin] = array[imin], array[left]
        if imax != right:
            if imax == left:
                imax = imin
            array[right], array[imax] = array[imax], array[right]
        left += 1
        right -= 1
    return time.perf_counter_ns() - start


def shell2_array3d(array: MutableSequence[Any]) -> int:
    """Shell sort of sections by their first element."""
    start = time.perf_counter_ns()
    size = len(array)
    for gap in shell_steps(size):
        for i in range(gap, size):
            r = i
            while r >= gap and _key(array[r]) < _key(array[r - gap]):
                array[r], array[r - gap] = array[r - gap], array[r]
                r -= gap
    return time.perf_counter_ns() - start