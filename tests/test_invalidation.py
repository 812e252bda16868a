import random

import pytest

from algodrills.invalidation import (
    ascending_vector,
    duplicate_even_remove_odd,
    erase_every_second,
    main,
    run_case,
)


def test_ascending_vector_cases_from_source():
    assert ascending_vector(4) == [0, 1, 2, 3]
    assert ascending_vector(8) == [0, 1, 2, 3, 4, 5, 6, 7]


def test_ascending_vector_empty_and_invariant():
    assert ascending_vector(0) == []
    values = ascending_vector(57)
    assert len(values) == 57
    assert all(b - a == 1 for a, b in zip(values, values[1:]))


def test_ascending_vector_negative_size():
    with pytest.raises(ValueError):
        ascending_vector(-1)


@pytest.mark.parametrize(
    "data, expected",
    [([0, 1], [0]), ([0, 3, 1, 7], [0, 1]), ([1, 2, 3, 4], [1, 3])],
)
def test_erase_every_second_cases(data, expected):
    assert erase_every_second(data) == expected


def test_erase_every_second_length_and_input_untouched():
    data = list(range(11))
    result = erase_every_second(data)
    assert len(result) == (len(data) + 1) // 2
    assert data == list(range(11))
    assert erase_every_second([]) == []


@pytest.mark.parametrize(
    "data, expected",
    [
        ([1, 2, 3, 4], [2, 2, 4, 4]),
        ([1, 2, 2, 4, 4], [2, 2, 2, 2, 4, 4, 4, 4]),
        ([1, 2, 3], [2, 2]),
    ],
)
def test_duplicate_even_remove_odd_cases(data, expected):
    assert duplicate_even_remove_odd(data) == expected


def test_duplicate_even_remove_odd_invariants():
    rng = random.Random(5)
    data = [rng.randint(1, 100) for _ in range(50)]
    result = duplicate_even_remove_odd(data)
    assert all(v % 2 == 0 for v in result)
    assert len(result) == 2 * sum(1 for v in data if v % 2 == 0)
    assert duplicate_even_remove_odd([1, 3, 5]) == []


@pytest.mark.parametrize("func_id", [1, 2, 3])
@pytest.mark.parametrize("test_id", [1, 2])
def test_run_case_fixed_cases_pass(func_id, test_id):
    report = run_case(func_id, test_id, 9, random.Random(1))
    assert "is equal with the solution vector." in report
    assert "not equal" not in report


def test_run_case_random_erase_reports_size():
    report = run_case(2, 3, 9, random.Random(2))
    assert report.startswith("Case 3: Testing function erase_every_second()")
    assert "Size: 9\n" in report


def test_run_case_unknown_test():
    report = run_case(1, 7, 9, random.Random(3))
    assert "ERROR: Unknown test for ascending_vector: 7" in report


def test_run_case_unknown_function_is_empty():
    assert run_case(9, 1, 9, random.Random(4)) == ""


def test_main_rejects_unknown_function(capsys):
    assert main(["5", "1"]) == 1
    assert "ERROR: Unknown function to test: 5" in capsys.readouterr().out


def test_main_rejects_bad_suite_and_size(capsys):
    assert main(["1", "0"]) == 1
    assert main(["1", "1", "-2"]) == 1
    out = capsys.readouterr().out
    assert "test_suite should be a positive" in out
    assert "the size should be 0 or greater" in out


def test_main_single_case(capsys):
    assert main(["3", "2"]) == 0
    out = capsys.readouterr().out
    assert "2 2 2 2 4 4 4 4 " in out