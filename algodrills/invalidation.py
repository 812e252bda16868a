"""List drills that build, thin out and rewrite sequences of integers."""

from __future__ import annotations

import argparse
import random
from typing import Callable, Dict, List, Optional, Sequence

from algodrills.stl import random_values

NUMBER_OF_FUNCTIONS = 3
DEFAULT_SIZE = 10
DEFAULT_SUITE_SIZE = 9

_EQUAL = "The tested vector from your function is equal with the solution vector.\n"
_NOT_EQUAL = "The tested vector is not equal with the solution vector.\n"

_USAGE = (
    "Usage: invalidation <test_function> <test_num> [<num_of_items>]\n"
    "  test_function: 1|2|3 (number of the function to test)\n"
    "  test_num: number of the test performed on the function  (1-3)\n"
    "   num_of_items: number of items in the test vector (optional, default=10)\n"
    "Example:\n"
    "  invalidation 3 1    (test duplicate_even_remove_odd() with test 1, "
    "where v1 should equal with s1)\n"
)


def ascending_vector(n: int) -> List[int]:
    """The integers 0 .. n-1 in ascending order."""
    if n < 0:
        raise ValueError("size must be 0 or greater")
    return list(range(n))


def erase_every_second(values: Sequence[int]) -> List[int]:
    """Every second item removed, keeping the first: [1, 2, 3, 4] -> [1, 3]."""
    return list(values[::2])


def duplicate_even_remove_odd(values: Sequence[int]) -> List[int]:
    """Each even value twice, odd values dropped: [1, 2, 3, 4] -> [2, 2, 4, 4]."""
    return [v for v in values if v % 2 == 0 for _ in range(2)]


def _format_values(values: Sequence[int]) -> str:
    return "".join(f"{v} " for v in values) + "\n\n"


def _verdict(result: Sequence[int], expected: Sequence[int]) -> str:
    return _EQUAL if list(result) == list(expected) else _NOT_EQUAL


def _unknown_test(name: str, test_id: int) -> str:
    return (
        f"ERROR: Unknown test for {name}: {test_id}\n"
        "       Valid values are: 1, 2, 3.\n" + _USAGE
    )


def _ascending_case(test_id: int, size: int, rng: random.Random) -> str:
    name = "ascending_vector"
    out = [f"Case {test_id}: Testing function {name}() with the following data:\n\n"]
    if test_id in (1, 2):
        expected = list(range(4 if test_id == 1 else 8))
        out.append(f"Size: {len(expected)}\n")
        result = ascending_vector(len(expected))
        out.append(_verdict(result, expected))
        if test_id == 1:
            out.append(f"The vector created after {name}() was called in the case:\n")
        else:
            out.append(f"The vector after {name}():\n\n")
        out.append(_format_values(result))
    elif test_id == 3:
        out.append(f"Size: {size}\n")
        result = ascending_vector(size)
        out += [f"The vector after {name}():\n\n", _format_values(result)]
    else:
        out.append(_unknown_test(name, test_id))
    return "".join(out)


def _erase_case(test_id: int, size: int, rng: random.Random) -> str:
    name = "erase_every_second"
    out = [f"Case {test_id}: Testing function {name}() with the following data:\n\n"]
    if test_id in (1, 2):
        data, expected = ([0, 1], [0]) if test_id == 1 else ([0, 3, 1, 7], [0, 1])
        out.append(_format_values(data))
        result = erase_every_second(data)
        out.append(_verdict(result, expected))
        if test_id == 1:
            out.append(f"The vector created after {name}() was called in the case:\n")
        else:
            out.append(f"The vector after {name}():\n\n")
        out.append(_format_values(result))
    elif test_id == 3:
        data = random_values(size, rng)
        out += [f"Size: {size}\n", _format_values(data)]
        result = erase_every_second(data)
        out += [f"The vector after {name}():\n\n", _format_values(result)]
    else:
        out.append(_unknown_test(name, test_id))
    return "".join(out)


_DUPLICATE_CASES: Dict[int, tuple] = {
    1: ([1, 2, 3, 4], [2, 2, 4, 4]),
    2: ([1, 2, 2, 4, 4], [2, 2, 2, 2, 4, 4, 4, 4]),
    3: ([1, 2, 3], [2, 2]),
}


def _duplicate_case(test_id: int, size: int, rng: random.Random) -> str:
    name = "duplicate_even_remove_odd"
    out = [f"Case {test_id}: Testing function {name}() with the following data:\n\n"]
    if test_id not in _DUPLICATE_CASES:
        out.append(_unknown_test(name, test_id))
        return "".join(out)
    data, expected = _DUPLICATE_CASES[test_id]
    out.append(_format_values(data))
    result = duplicate_even_remove_odd(data)
    out.append(_verdict(result, expected))
    if test_id == 1:
        out.append(f"The vector after {name}() was called in the case:\n\n")
    else:
        out.append(f"The vector after {name}():\n\n")
    out.append(_format_values(result))
    return "".join(out)


_CASES: Dict[int, Callable[[int, int, random.Random], str]] = {
    1: _ascending_case,
    2: _erase_case,
    3: _duplicate_case,
}

FUNCTION_NAMES = ("ascending_vector", "erase_every_second", "duplicate_even_remove_odd")


def run_case(
    func_id: int, test_id: int, size: int = DEFAULT_SIZE, rng: random.Random | None = None
) -> str:
    """Run one numbered test of one drill and return its report.

    An unknown drill gives an empty report; an unknown test gives an error text.
    """
    case = _CASES.get(func_id)
    if case is None:
        return ""
    return case(test_id, size, rng if rng is not None else random.Random())


_INTRO = """Running the default tests, there should be 3 parts, one for each function
Within those parts, 3 tests should be run for each function respectively:

ascending_vector:
    test 1 creating a vector
    test 2 creating a (longer) vector
    test 3 vector with random length(constant in local tests)

erase_every_second:
    test 1 erasing from vector
    test 2 erasing from (longer) vector
    test 3 erasing from random lengthed vector (constant in local tests)

duplicate_even_remove_odd:
    test 1 vector size stays the same
    test 2 vector grows
    test 3 vector shrinks

If all of these tests are not printed out or if your code crashes, the tests will also fail."""


def main(argv: Optional[List[str]] = None) -> int:
    """Run one numbered test, or all of them when none is chosen."""
    parser = argparse.ArgumentParser(description="List rewriting drills")
    parser.add_argument(
        "test_function", nargs="?", type=int, default=-1,
        help="1|2|3 (number of the function to test)",
    )
    parser.add_argument(
        "test_suite", nargs="?", type=int, default=-1,
        help="test suite for the function",
    )
    parser.add_argument(
        "size", nargs="?", type=int, default=DEFAULT_SIZE,
        help="number of items to test with, default 10",
    )
    args = parser.parse_args(argv)
    rng = random.Random()

    if args.test_function != -1 or args.test_suite != -1:
        if not 1 <= args.test_function <= NUMBER_OF_FUNCTIONS:
            print(f"ERROR: Unknown function to test: {args.test_function}")
            print("       Valid values are:")
            for number, name in enumerate(FUNCTION_NAMES, start=1):
                print(f"       {number} (=testing {name} function)")
            return 1
        if args.test_suite < 1:
            print(
                "ERROR: command line variable test_suite should be a positive "
                "integer larger than 0"
            )
            return 1
        if args.size < 0:
            print("ERROR: the size should be 0 or greater")
            return 1
        print(run_case(args.test_function, args.test_suite, args.size, rng), end="")
        return 0

    print(_INTRO)
    for number, name in enumerate(FUNCTION_NAMES, start=1):
        print()
        print()
        print(f"========== testing function {name}=================")
        print()
        for suite in range(1, 4):
            print(run_case(number, suite, DEFAULT_SUITE_SIZE, rng), end="")
    return 0