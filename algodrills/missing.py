"""Finding the smallest missing value in an ascending run of consecutive integers."""

from __future__ import annotations

import random
import re
import sys
from typing import List, Optional, Sequence

PRINT_LIMIT = 50
MAX_RANDOM_START_VALUE = 200
DEFAULT_SIZES = (10, 100, 1000, 10000)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def smallest_missing_iterative(values: Sequence[int]) -> Optional[int]:
    """Scan from the front; return the first value absent from the run, or None."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    for expected, value in enumerate(values, start=values[0]):
        if value != expected:
            return expected
    return None


def smallest_missing(values: Sequence[int]) -> Optional[int]:
    """Binary search for the first value absent from the run, or None."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    base = values[0]
    left, right = 0, len(values) - 1
    while left != right:
        mid = (left + right) // 2
        if values[mid] != base + mid:
            right = mid
        else:
            left = mid + 1
    if values[left] == base + left:
        return None
    return base + left


def random_gapped_sequence(size: int, rng: random.Random | None = None) -> List[int]:
    """A run of size + 1 consecutive integers with one inner value taken out.

    Runs of four or fewer keep all size + 1 values.
    """
    generator = rng if rng is not None else random.Random()
    start = generator.randint(0, MAX_RANDOM_START_VALUE)
    values = list(range(start, start + size + 1))
    if size > 4:
        del values[generator.randint(1, size - 2)]
    return values


def consecutive_sequence(size: int, rng: random.Random | None = None) -> List[int]:
    """A run of `size` consecutive integers starting somewhere in [0, size]."""
    generator = rng if rng is not None else random.Random()
    start = generator.randint(0, size)
    return list(range(start, start + size))


def _format_values(values: Sequence[int]) -> str:
    shown = [str(v) for v in values[: PRINT_LIMIT + 1]]
    if len(values) > PRINT_LIMIT + 1:
        return ", ".join(shown) + ", ..."
    return ", ".join(shown)


def _run_test(size: int, iterative: bool, randomised: bool, rng: random.Random) -> None:
    values = random_gapped_sequence(size, rng) if randomised else consecutive_sequence(size, rng)
    print(_format_values(values))
    searched = values[:size]
    missing = smallest_missing_iterative(searched) if iterative else smallest_missing(searched)
    print(f"{'No value' if missing is None else missing} missing!")


def _parse_size(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the searches on generated runs.

    With a size argument, one random run is searched: iteratively, or by
    binary search when a second argument is present.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    rng = random.Random()
    try:
        if args:
            iterative = len(args) < 2
            _run_test(_parse_size(args[0]), iterative, True, rng)
            return 0

        print("testing iterative search")
        for size in DEFAULT_SIZES:
            _run_test(size, True, False, rng)
            _run_test(size, True, True, rng)
        print()
        print("testing binary search")
        for size in DEFAULT_SIZES:
            _run_test(size, False, False, rng)
            _run_test(size, False, True, rng)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0