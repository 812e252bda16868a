"""Simple traversals of a list of integers."""

from __future__ import annotations

import argparse
import random
from typing import Callable, Iterable, List, NamedTuple, Optional, Sequence


def all_items(items: Iterable[int]) -> List[int]:
    """Every item, in order."""
    return list(items)


def every_second(items: Iterable[int]) -> List[int]:
    """Every second item, starting from the first."""
    return list(items)[::2]


def first_half(items: Iterable[int]) -> List[int]:
    """The first len // 2 items."""
    values = list(items)
    return values[: len(values) // 2]


def reversed_items(items: Iterable[int]) -> List[int]:
    """Every item, last first."""
    return list(reversed(list(items)))


def random_unique_list(size: int, rng: random.Random | None = None) -> List[int]:
    """`size` distinct integers from [1, 2 * size], in ascending order."""
    generator = rng if rng is not None else random.Random()
    chosen: set[int] = set()
    while len(chosen) < size:
        chosen.add(generator.randint(1, size * 2))
    return sorted(chosen)


class _Traversal(NamedTuple):
    function: Callable[[Iterable[int]], List[int]]
    name: str


TRAVERSALS = (
    _Traversal(all_items, "all_items"),
    _Traversal(every_second, "every_second"),
    _Traversal(first_half, "first_half"),
    _Traversal(reversed_items, "reversed_items"),
)

DEFAULT_SIZES = (10, 11, 101, 500)


def _spaced(values: Sequence[int]) -> str:
    return "".join(f"{v} " for v in values)


def _run(selected: int, size: int, data: Sequence[int], rng: random.Random) -> None:
    traversal = TRAVERSALS[selected - 1]
    print(f"Testing function {traversal.name}() with the following data:")
    print()
    values = list(data) if data else random_unique_list(size, rng)
    print(_spaced(values))
    print()
    print("Your function printed the following values:")
    print()
    print(_spaced(traversal.function(values)))


def main(argv: Optional[List[str]] = None) -> int:
    """Show what each traversal yields for generated or given data."""
    parser = argparse.ArgumentParser(description="List traversals")
    parser.add_argument(
        "test_function",
        nargs="?",
        type=int,
        default=None,
        help="1|2|3|4 (number of the traversal to run)",
    )
    parser.add_argument(
        "num_of_items",
        nargs="?",
        type=int,
        default=None,
        help="number of items in the test set (optional, default=10)",
    )
    parser.add_argument(
        "--data",
        nargs="+",
        type=int,
        action="extend",
        default=[],
        help="data to manually be used for testing",
    )
    args = parser.parse_args(argv)
    if args.num_of_items is not None and args.data:
        parser.error("num_of_items excludes --data")

    rng = random.Random()
    if args.test_function is None:
        for number, traversal in enumerate(TRAVERSALS, start=1):
            print("=" * 46)
            print(f"Testing function {traversal.name} with N values {{{_spaced(DEFAULT_SIZES)}}} ")
            print("=" * 46)
            print()
            for size in DEFAULT_SIZES:
                _run(number, size, [], rng)
        return 0

    if not 1 <= args.test_function <= len(TRAVERSALS):
        print("No such test function")
        return 1
    size = 10 if args.num_of_items is None else args.num_of_items
    _run(args.test_function, size, args.data, rng)
    return 0