# sortbench

sortbench measures how long three sorting algorithms take on two data
structures, for three kinds of starting order.

The algorithms (`sortbench.measurement.Algorithm`) are:

- `SELECT1` ("Select1"): straight selection sort
- `SELECT8` ("Select8"): selection sort that places both the minimum and the
  maximum on every pass
- `SHELL2` ("Shell_2"): Shell sort with gaps of the form 2**k - 1 (…, 15, 7, 3, 1)

The data structures (`sortbench.measurement.Structure`) are:

- `VECTOR`: a list of 32 integers
- `ARRAY3D`: a 32 × 16 × 100 nested list of integers. Its 32 sections are
  reordered by each section's first element, and a section always moves as
  a whole.

The starting orders (`sortbench.filling.Order`) are:

- `ORDERED` (`"o"`): strictly ascending
- `RANDOM` (`"r"`): random values
- `BACK` (`"b"`): strictly descending

Each sort works in place and returns its running time in nanoseconds. A
reported figure is the average of 28 runs on freshly built data: the first 2
runs are thrown away as warm-up, and the 3 smallest and 3 largest of the rest
are dropped before averaging.

## Installation

```
pip install .
```

## Interactive use

```
sortbench
```

The same menu starts with `python -m sortbench.menu`. In the main menu you
pick one algorithm and then a data structure, or batch mode, which measures
every algorithm on both structures and prints both tables. Enter the number
of an option; after a table is shown, press Enter to go back. Choosing `5`,
or reaching the end of input, exits.

## Use from Python

```python
import random

from sortbench.filling import Order, make_vector
from sortbench.sorting import shell2_vector
from sortbench.measurement import Algorithm, Structure, average_time, measure
from sortbench.tables import algorithm_table, batch_mode

rng = random.Random(1)

# Build a vector and sort it in place; the return value is the time in ns.
data = make_vector(Order.BACK, 32, rng)
elapsed = shell2_vector(data)

# Raw timings of 28 runs, and the trimmed average.
times = measure(Algorithm.SELECT8, Structure.VECTOR, Order.RANDOM, rng=rng)
print(average_time(Algorithm.SELECT8, Structure.VECTOR, Order.RANDOM, rng))

# A table for one algorithm on one structure, and all tables.
print(algorithm_table(Algorithm.SHELL2, Structure.ARRAY3D, rng))
print(batch_mode(rng))
```

Other pieces:

- `sortbench.filling`: `fill_vector_ordered`, `fill_vector_random`,
  `fill_vector_back`, `fill_array3d_ordered`, `fill_array3d_random`,
  `fill_array3d_back`, `make_vector`, `make_array3d`
- `sortbench.sorting`: `shell_steps`, and `select1_`, `select8_`, `shell2_`
  sorts for `_vector` and `_array3d`
- `sortbench.measurement.process_measurements(results, rejected, min_max)`:
  the trimmed average of your own list of timings; raises `ValueError` when
  too few measurements remain
- `sortbench.tables`: `table_header`, `format_row`, `algorithm_table`,
  `batch_mode`, each returning text

## Tests

```
pip install .[test]
pytest
```