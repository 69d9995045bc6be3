import random

import pytest

from sortbench.filling import Order
from sortbench.measurement import (
    MEASUREMENTS_NUMBER,
    Algorithm,
    Structure,
    average_time,
    measure,
    process_measurements,
)
from sortbench.sorting import (
    select1_vector,
    select8_vector,
    shell2_array3d,
    shell2_vector,
)


def test_constant_measurements_average_to_the_constant():
    results = [1000, 1000] + [5] * 26
    assert process_measurements(results) == 5.0


def test_warm_up_and_extremes_are_discarded():
    results = [0, 0] + [1, 1, 1] + [7] * 20 + [99, 99, 99]
    assert len(results) == MEASUREMENTS_NUMBER
    assert process_measurements(results) == 7.0


def test_order_of_kept_measurements_does_not_matter():
    rng = random.Random(3)
    results = [rng.randrange(1000) for _ in range(MEASUREMENTS_NUMBER)]
    tail = results[2:]
    rng.shuffle(tail)
    assert process_measurements(results) == process_measurements(results[:2] + tail)


def test_average_lies_within_kept_range():
    rng = random.Random(11)
    results = [rng.randrange(500) for _ in range(MEASUREMENTS_NUMBER)]
    kept = sorted(results[2:])[3:-3]
    value = process_measurements(results)
    assert min(kept) <= value <= max(kept)


def test_input_is_not_modified():
    results = [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]
    copy = list(results)
    process_measurements(results, 1, 2)
    assert results == copy


def test_custom_trimming():
    assert process_measurements([50, 10, 20, 30], rejected=1, min_max=1) == 20.0


@pytest.mark.parametrize(
    "results, rejected, min_max",
    [([1, 2, 3], 1, 1), ([], 0, 0), ([1, 2], -1, 0), ([1, 2], 0, -1)],
)
def test_bad_trimming_raises(results, rejected, min_max):
    with pytest.raises(ValueError):
        process_measurements(results, rejected, min_max)


def test_measure_returns_requested_count():
    times = measure(Algorithm.SELECT8, Structure.VECTOR, Order.RANDOM, 5, random.Random(1))
    assert len(times) == 5
    assert all(isinstance(t, int) and t >= 0 for t in times)


def test_measure_accepts_plain_values():
    times = measure("Shell_2", "array3d", "b", 2, random.Random(2))
    assert len(times) == 2
    assert all(t >= 0 for t in times)


def test_measure_zero_count():
    assert measure(Algorithm.SELECT1, Structure.VECTOR, Order.ORDERED, 0) == []


def test_measure_negative_count_raises():
    with pytest.raises(ValueError):
        measure(Algorithm.SELECT1, Structure.VECTOR, Order.ORDERED, -1)


def test_measure_unknown_order_raises():
    with pytest.raises(ValueError):
        measure(Algorithm.SELECT1, Structure.VECTOR, "x", 1)


def test_sorter_lookup():
    assert Algorithm.SELECT1.sorter(Structure.VECTOR) is select1_vector
    assert Algorithm.SHELL2.sorter(Structure.ARRAY3D) is shell2_array3d


def test_structure_build_produces_data_that_sorts():
    data = Structure.VECTOR.build(Order.BACK)
    Algorithm.SELECT8.sorter(Structure.VECTOR)(data)
    assert data == sorted(data)


def test_algorithm_labels():
    assert [algorithm.label for algorithm in Algorithm] == ["Select1", "Select8", "Shell_2"]
    assert Algorithm.SELECT1.sorter(Structure.VECTOR) is select1_vector
    assert Algorithm.SELECT8.sorter(Structure.VECTOR) is select8_vector
    assert Algorithm.SHELL2.sorter(Structure.VECTOR) is shell2_vector


def test_average_time_is_non_negative():
    value = average_time(Algorithm.SELECT1, Structure.VECTOR, Order.RANDOM, random.Random(4))
    assert isinstance(value, float)
    assert value >= 0.0