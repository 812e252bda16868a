"""Small list functions written for speed, checked against slower references."""

from __future__ import annotations

import argparse
import random
from typing import Callable, Dict, List, Mapping, Optional, Sequence

DEFAULT_SIZE = 100
DEFAULT_SUITE_SIZES = (100, 101)
RANDOM_VALUE_MAX = 100

FUNCTION_NAMES = {
    1: "ascending_vector",
    2: "min_value",
    3: "cumulative_sums",
    4: "three_part_quicksort",
}
NUMBER_OF_TESTS = {1: 3, 2: 3, 3: 2, 4: 2}

_USAGE = (
    "Usage: improving <test_function> <test_num> [<num_of_items>]\n"
    "  test_function: 1|2|3|4 (number of the function to test)\n"
    "  test_num: number of the test performed on the function: 1|2|3. "
    "Not all have 3 tests \n"
    "   num_of_items: number of items in the test vector (optional, default=100)\n"
    "Examples:\n"
    "  improving 1 1    (test ascending_vector() with test case 1)\n"
    "  improving 2 2    (test min_value() with test case 2)\n"
    "  improving 3 1    (test cumulative_sums() with test case 1)\n"
    "  improving 4 1    (test three_part_quicksort() with test case 1)\n"
)


def ascending_vector(n: int) -> List[int]:
    """The integers 0 .. n-1 in ascending order."""
    if n < 0:
        raise ValueError("size must be 0 or greater")
    return list(range(n))


def min_value(values: Sequence[int]) -> int:
    """The smallest value, or 0 for an empty sequence."""
    return min(values, default=0)


def cumulative_sums(values: Sequence[int]) -> Dict[int, int]:
    """Map each distinct value to the running total at its last occurrence.

    Keys come in ascending order: [4, 5, 4, 6] -> {4: 13, 5: 9, 6: 19}.
    """
    sums: Dict[int, int] = {}
    total = 0
    for value in values:
        total += value
        sums[value] = total
    return dict(sorted(sums.items()))


def three_part_quicksort(
    values: Sequence[int], rng: random.Random | None = None
) -> List[int]:
    """Sort with a randomised quicksort that groups values equal to the pivot."""
    generator = rng if rng is not None else random.Random()

    def sort(part: List[int]) -> List[int]:
        if not part:
            return []
        generator.shuffle(part)
        pivot = part[len(part) // 2]
        less = [v for v in part if v < pivot]
        equal = [v for v in part if v == pivot]
        greater = [v for v in part if v > pivot]
        return sort(less) + equal + sort(greater)

    return sort(list(values))


def _random_vector(size: int, rng: random.Random) -> List[int]:
    return [rng.randint(1, RANDOM_VALUE_MAX) for _ in range(size)]


def _format_values(values: Sequence[int]) -> str:
    return "[ " + "".join(f"{v} " for v in values) + "]\n\n"


def _format_map(mapping: Mapping[int, int]) -> str:
    return "".join(f"{{{k} : {v}}} " for k, v in sorted(mapping.items())) + "\n\n"


def _header(test_id: int, name: str) -> str:
    return f"Case {test_id}: Testing function {name}() with the following data:\n\n"


def _unknown_test(name: str, test_id: int, valid: str) -> str:
    return (
        f"ERROR: Unknown test for {name}: {test_id}\n"
        f"       Valid values are: {valid}.\n" + _USAGE
    )


def _reference_min(values: Sequence[int]) -> int:
    return sorted(values)[0] if values else 0


def _reference_cumulative_sums(values: Sequence[int]) -> Dict[int, int]:
    sums: Dict[int, int] = {}
    previous: Optional[int] = None
    for value in values:
        sums[value] = value if previous is None else sums[previous] + value
        previous = value
    return sums


def _ascending_case(test_id: int, size: int, rng: random.Random) -> str:
    name = FUNCTION_NAMES[1]
    out = [_header(test_id, name)]
    if test_id in (1, 2):
        expected = list(range(4 if test_id == 1 else 8))
        out.append(f"Size: {len(expected)}\n")
        result = ascending_vector(len(expected))
        if result == expected:
            out.append(
                "The tested vector from your function is equal with the solution vector.\n"
            )
        else:
            out.append("FAILURE: The tested vector is not equal with the solution vector.\n")
            out.append(f"The vector returned by {name}():\n" + ("" if test_id == 1 else "\n"))
            out.append(_format_values(result))
    elif test_id == 3:
        out.append(f"Size: {size}\n")
        out += [f"The vector returned by {name}():\n\n", _format_values(ascending_vector(size))]
    else:
        out.append(_unknown_test(name, test_id, "1, 2, 3"))
    return "".join(out)


def _min_result(result: int, expected: int) -> str:
    if result == expected:
        return "The function found the smallest value.\n"
    return (
        "FAILURE: The function did not find the smallest value.\n"
        f"The returned min value:{result}\n"
    )


def _min_case(test_id: int, size: int, rng: random.Random) -> str:
    name = FUNCTION_NAMES[2]
    out = [_header(test_id, name)]
    if test_id == 1:
        data = [2, 1, 3, 4]
        out += [_format_values(data), _min_result(min_value(data), 1)]
    elif test_id == 2:
        data: List[int] = []
        out += [_format_values(data), _min_result(min_value(data), 0)]
    elif test_id == 3:
        data = _random_vector(size, rng)
        out += [_format_values(data), _min_result(min_value(data), _reference_min(data))]
    else:
        out.append(_unknown_test("min", test_id, "1, 2, 3"))
    return "".join(out)


def _cumulative_case(test_id: int, size: int, rng: random.Random) -> str:
    name = FUNCTION_NAMES[3]
    out = [_header(test_id, name)]
    if test_id not in (1, 2):
        out.append(_unknown_test(name, test_id, "1, 2"))
        return "".join(out)
    data = [1, 2, 3, 4] if test_id == 1 else _random_vector(size, rng)
    out.append(_format_values(data))
    expected = _reference_cumulative_sums(data)
    result = cumulative_sums(data)
    if result == expected:
        out.append("The map returned by the function is still correct.\n")
    else:
        out.append("FAILURE: The map returned by the function is no longer correct:\n")
        out += ["Correct map:\n", _format_map(expected)]
        out += [f"The map returned by {name}():\n", _format_map(result)]
    return "".join(out)


def _quicksort_case(test_id: int, size: int, rng: random.Random) -> str:
    name = FUNCTION_NAMES[4]
    out = [_header(test_id, name)]
    if test_id == 1:
        data, other = [3, 2, 4, 5], [2, 3, 5, 4]
    elif test_id == 2:
        data = _random_vector(size, rng)
        other = list(data)
    else:
        out.append(_unknown_test(name, test_id, "1, 2"))
        return "".join(out)
    out.append(_format_values(data))
    result = three_part_quicksort(data, rng)
    reference = sorted(other)
    if result == reference:
        out.append("The function is still working as expected.\n")
    else:
        out.append("FAILURE: The function is no longer working as expected.\n")
        out += [f"The vector after {name}():\n", _format_values(result)]
        out += ["The vector after the reference sort:\n", _format_values(reference)]
    return "".join(out)


_CASES: Dict[int, Callable[[int, int, random.Random], str]] = {
    1: _ascending_case,
    2: _min_case,
    3: _cumulative_case,
    4: _quicksort_case,
}


def run_case(
    func_id: int,
    test_id: int,
    size: int = DEFAULT_SIZE,
    rng: random.Random | None = None,
) -> str:
    """Run one numbered test of one function and return its report."""
    case = _CASES.get(func_id)
    if case is None:
        lines = [f"ERROR: Unknown function to test: {func_id}", "       Valid values are:"]
        lines += [
            f"       {number} (=testing {name} function)"
            for number, name in FUNCTION_NAMES.items()
        ]
        return "\n".join(lines) + "\n" + _USAGE
    return case(test_id, size, rng if rng is not None else random.Random())


def main(argv: Optional[List[str]] = None) -> int:
    """Run one numbered test, or every test when none is chosen."""
    parser = argparse.ArgumentParser(description="Improved list functions")
    parser.add_argument(
        "test_function", nargs="?", type=int, default=-1,
        help="1|2|3|4 (number of the function to test)",
    )
    parser.add_argument(
        "test_suite", nargs="?", type=int, default=-1,
        help="test suite for the function",
    )
    parser.add_argument(
        "size", nargs="*", type=int, default=[DEFAULT_SIZE],
        help="number(s) of items to test with, default 100; only affects the last tests",
    )
    args = parser.parse_args(argv)
    sizes = args.size if args.size else [DEFAULT_SIZE]
    rng = random.Random()

    if args.test_function == -1 and args.test_suite == -1:
        print("running default tests")
        for func_id, tests in NUMBER_OF_TESTS.items():
            print("=" * 84)
            print(f"Tests for function {FUNCTION_NAMES[func_id]}()")
            print()
            for test_id in range(1, tests + 1):
                run_sizes = DEFAULT_SUITE_SIZES if test_id == tests else (10,)
                for size in run_sizes:
                    print(run_case(func_id, test_id, size, rng), end="")
                    print()
        return 0

    if args.test_function not in FUNCTION_NAMES:
        print("ERROR: Invalid function id")
        print(_USAGE, end="")
        return 1
    if any(size < 0 for size in sizes):
        print("ERROR: the size should be 0 or greater")
        print(_USAGE, end="")
        return 1

    for size in sizes:
        print(run_case(args.test_function, args.test_suite, size, rng), end="")
    return 0