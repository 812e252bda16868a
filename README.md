# algodrills

A collection of small algorithm and data-structure drills. Each module holds a
few focused functions, and most have a command-line runner that shows them at
work on fixed and random data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it covers |
| --- | --- |
| `algodrills.coords` | `Coord`, a frozen grid coordinate ordered by row and then column, sentinel values such as `NO_COORD`, and `random_in_range` for a closed integer range |
| `algodrills.rect` | `Rectangle` with `divide`, `get_coords` (border cells), `get_all_coords`, `shrunk`; plus `betweens`, `hilo_levels` for nested hill/valley levels and `get_rects` for spreading rectangles over an area |
| `algodrills.tasklist` | `TaskList`, a first-in first-out list of tasks |
| `algodrills.missing` | The smallest missing value of an ascending run, by a linear scan (`smallest_missing_iterative`) and by halving (`smallest_missing`); both return `None` when nothing is missing |
| `algodrills.iteration` | Walking a list: `all_items`, `every_second`, `first_half`, `reversed_items` |
| `algodrills.stl` | Sorting, searching and filtering: `sort_ascending`, `sort_descending`, `find_value`, `find_last_even`, `sort_mod3`, `find_at_least`, `median`, `remove_less_than` |
| `algodrills.invalidation` | `ascending_vector`, `erase_every_second`, `duplicate_even_remove_odd` |
| `algodrills.improving` | `ascending_vector`, `min_value`, `cumulative_sums` and `three_part_quicksort` |

The functions return new lists rather than changing their arguments. Searches
that can come up empty return `None` (`find_value` and `find_last_even` return
an index); `median` of an empty sequence raises `ValueError`, and
`TaskList.remove_front` on an empty list raises `IndexError`.

## Library use

```python
from algodrills.missing import smallest_missing
from algodrills.coords import Coord
from algodrills.rect import Rectangle
from algodrills.tasklist import TaskList

smallest_missing([3, 4, 6, 7])               # 5

print(Rectangle(Coord(1, 1), Coord(5, 3)))  # 1,1 (5,3)

tasks = TaskList()
tasks.insert_back("clean desktop")
tasks.insert_back("wash the laundry")
tasks.remove_front()                        # "clean desktop"
len(tasks)                                  # 1
```

Functions that use randomness take an optional `random.Random` instance, so
results can be repeated by seeding it.

## Command-line runners

Each runner prints the data it works on and the result of each drill. With no
arguments, a runner goes through its default set of cases.

```
algodrills-tasklist
algodrills-missing
algodrills-iteration
algodrills-stl
algodrills-invalidation
algodrills-improving
```

- `algodrills-tasklist` runs a fixed demonstration of `TaskList`.
- `algodrills-missing SIZE` searches one random run of that size with the
  linear scan; with a second argument it uses the halving search instead.
- `algodrills-iteration [TEST_FUNCTION] [NUM_OF_ITEMS] [--data N ...]`
- `algodrills-stl [TEST_FUNCTION] [NUM_OF_ITEMS] [SEARCH_VALUE]`
- `algodrills-invalidation [TEST_FUNCTION] [TEST_SUITE] [SIZE]`
- `algodrills-improving [TEST_FUNCTION] [TEST_SUITE] [SIZE ...]`

The last four accept `--help`, for example:

```
algodrills-stl --help
```

## What it does not do

`algodrills.coords` and `algodrills.rect` produce coordinates, rectangles and
height levels only. The package has no map or terrain data store built on
them, no command interpreter for such data, and nothing that draws it.