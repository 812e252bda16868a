"""Sorting, searching and filtering drills on lists and mappings of integers."""

from __future__ import annotations

import argparse
import random
from typing import Dict, List, Mapping, Optional, Sequence

NUMBER_OF_FUNCTIONS = 8
_SEPARATOR = "=" * 45


def sort_ascending(values: Sequence[int]) -> List[int]:
    """The values in ascending order."""
    return sorted(values)


def sort_descending(values: Sequence[int]) -> List[int]:
    """The values in descending order."""
    return sorted(values, reverse=True)


def find_value(values: Sequence[int], given: int) -> Optional[int]:
    """Index of the first occurrence of `given`, or None."""
    return next((i for i, v in enumerate(values) if v == given), None)


def find_last_even(values: Sequence[int]) -> Optional[int]:
    """Index of the last even value, or None if there is none."""
    return next(
        (i for i in range(len(values) - 1, -1, -1) if values[i] % 2 == 0), None
    )


def _mod3_group(value: int) -> int:
    # The remainder follows the sign of the dividend, so negative values
    # not divisible by three never land in the "remainder 1" group.
    if value % 3 == 0:
        return 0
    if value > 0 and value % 3 == 1:
        return 1
    return 2


def sort_mod3(values: Sequence[int]) -> List[int]:
    """Values divisible by three, then remainder one, then the rest; each ascending."""
    return sorted(values, key=lambda v: (_mod3_group(v), v))


def find_at_least(mapping: Mapping[str, int], given: int) -> Optional[int]:
    """The first value, in key order, that is at least `given`; None if none is."""
    return next((v for _, v in sorted(mapping.items()) if v >= given), None)


def median(values: Sequence[int]) -> int:
    """The median; for an even count, the mean of the middle two truncated toward zero."""
    if not values:
        raise ValueError("median of an empty sequence")
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[middle]
    total = ordered[middle - 1] + ordered[middle]
    half = abs(total) // 2
    return half if total >= 0 else -half


def remove_less_than(values: Sequence[int], limit: int) -> List[int]:
    """The values not less than `limit`, in their original order."""
    return [v for v in values if v >= limit]


def random_values(size: int, rng: random.Random | None = None) -> List[int]:
    """`size` random integers from [1, 4 * size]."""
    generator = rng if rng is not None else random.Random()
    return [generator.randint(1, size * 4) for _ in range(size)]


def values_map(values: Sequence[int]) -> Dict[str, int]:
    """Map "val<i>" to the i-th value."""
    return {f"val{i}": v for i, v in enumerate(values)}


def _format_values(values: Sequence[int]) -> str:
    return "".join(f"{v} " for v in values) + "\n\n"


def _format_map(mapping: Mapping[str, int]) -> str:
    return "".join(f"{{{k} : {v}}} " for k, v in sorted(mapping.items())) + "\n\n"


def _header(name: str) -> str:
    return f"Testing function {name}() with the following data:\n\n"


def run_case(
    func_id: int,
    size: int,
    search_value: int,
    values: Sequence[int] = (),
    rng: random.Random | None = None,
) -> str:
    """Run one drill and return its report; empty values are replaced by random ones."""
    data = list(values) if values else random_values(size, rng)
    out: List[str] = []

    if func_id in (1, 2, 5):
        name, function = {
            1: ("sort_ascending", sort_ascending),
            2: ("sort_descending", sort_descending),
            5: ("sort_mod3", sort_mod3),
        }[func_id]
        out += [_header(name), _format_values(data)]
        out += [f"The vector after {name}():\n\n", _format_values(function(data))]
    elif func_id == 3:
        out += [_header("find_value"), _format_values(data)]
        index = find_value(data, search_value)
        out.append(f"Searched for {search_value}")
        if index is None:
            out.append(" but couldn't find it.\n")
        else:
            out.append(f" and found it at index {index}.\n")
    elif func_id == 4:
        out += [_header("find_last_even"), _format_values(data)]
        index = find_last_even(data)
        out.append("Searched for last even value")
        if index is None:
            out.append(" but couldn't find any even values.\n")
        else:
            out.append(f" and found {data[index]} at index {index}.\n")
    elif func_id == 6:
        mapping = values_map(data)
        out += [_header("find_at_least"), _format_map(mapping)]
        found = find_at_least(mapping, search_value)
        out.append(f"Searched for value at least {search_value}")
        if found is None:
            out.append(" but couldn't find it.\n")
        else:
            out.append(f" and found {found}\n")
    elif func_id == 7:
        out += [_header("median"), _format_values(data)]
        out.append("Searched for median")
        try:
            out.append(f" and your function returned {median(data)}\n")
        except ValueError:
            out.append(" but the vector was empty, so there is no median.\n")
    elif func_id == 8:
        out += [_header("remove_less_than"), _format_values(data)]
        out.append(f"Tried to remove all elements less than {search_value}\n")
        out += [
            "The vector after remove_less_than():\n\n",
            _format_values(remove_less_than(data, search_value)),
        ]
    return "".join(out)


def _shuffled_with(values: List[int], extra: int, rng: random.Random) -> List[int]:
    values = values + [extra]
    rng.shuffle(values)
    return values


def _default_suite(rng: random.Random) -> None:
    def section(title: str) -> None:
        print(_SEPARATOR)
        print(f"Running tests for {title}()")

    def case(label: str, func_id: int, size: int, search: int, values=()) -> None:
        print(label)
        print(run_case(func_id, size, search, values, rng), end="")

    section("sort_ascending")
    case("empty vector", 1, 0, -1)
    case("random_vector", 1, 15, -1)
    case("reverse sorted vector", 1, 15, -1, sorted(random_values(15, rng), reverse=True))

    section("sort_descending")
    case("empty vector", 2, 0, -1)
    case("random_vector", 2, 15, -1)
    case("sorted vector", 2, 15, -1, sorted(random_values(15, rng)))

    section("find_value")
    case("empty vector", 3, 0, 42)
    case("value not in vector", 3, 15, 42, [v for v in random_values(20, rng) if v != 42])
    case("value in vector", 3, 15, 42, _shuffled_with(random_values(20, rng), 42, rng))

    section("find_last_even")
    case("empty vector", 4, 0, 42)
    case("only odd values in vector", 4, 15, 42, [v for v in random_values(40, rng) if v % 2])
    case(
        "at least one even value in vector",
        4, 15, 42, _shuffled_with(random_values(20, rng), 42, rng),
    )

    section("sort_mod3")
    case("empty vector", 5, 0, 42)
    case("values with remainder 1", 5, 15, 42, [v for v in random_values(60, rng) if v % 3 == 1])
    case("values with remainder 2", 5, 15, 42, [v for v in random_values(60, rng) if v % 3 == 2])
    case("values divisible by 3", 5, 15, 42, [v for v in random_values(60, rng) if v % 3 == 0])
    case("values with remainder 0 or 1", 5, 15, 42, [v for v in random_values(40, rng) if v % 3 != 2])
    case("values with remainder 0 or 2", 5, 15, 42, [v for v in random_values(40, rng) if v % 3 != 1])
    case("values with remainder 1 or 2", 5, 15, 42, [v for v in random_values(40, rng) if v % 3 != 0])
    case("(random vector)", 5, 15, 42, _shuffled_with(random_values(60, rng), 42, rng))

    section("find_at_least")
    case("empty map", 6, 0, 42)
    case("value not in map", 6, 15, 42, [v for v in random_values(20, rng) if v != 42])
    case("value in map", 6, 15, 42, random_values(20, rng) + [42])

    section("median")
    case("empty vector", 7, 0, 42)
    case("odd number of elements", 7, 15, 42)
    case("even number of elements", 7, 14, 42)

    section("remove_less_than")
    case("empty vector", 8, 0, 42)
    size = 15
    case(
        "low limit (no elements removed)",
        8, size, 42, [rng.randint(1, size * 4) + 42 for _ in range(size)],
    )
    case(
        "high limit (all elements removed)",
        8, size, 42, [rng.randint(1, size * 4) % 42 for _ in range(size)],
    )
    case("middle limit (some elements removed)", 8, 40, 42)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one drill, or the whole default suite when no drill is chosen."""
    parser = argparse.ArgumentParser(description="Sorting and searching drills")
    parser.add_argument(
        "test_function", nargs="?", type=int, default=0,
        help="1..8 (number of the drill to run)",
    )
    parser.add_argument(
        "num_of_items", nargs="?", type=int, default=10,
        help="number of items in the test vector (optional, default=10)",
    )
    parser.add_argument(
        "search_value", nargs="?", type=int, default=25,
        help="number to search or limit results (default=25)",
    )
    args = parser.parse_args(argv)
    rng = random.Random()

    if args.test_function == 0:
        _default_suite(rng)
        return 0
    if not 1 <= args.test_function <= NUMBER_OF_FUNCTIONS:
        print("No such test function")
        return 1
    if args.num_of_items < 1:
        print("num_of_items should be a positive integer larger than 0")
        return 1
    print(run_case(args.test_function, args.num_of_items, args.search_value, (), rng), end="")
    return 0