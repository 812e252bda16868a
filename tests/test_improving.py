import random

import pytest

from algodrills.improving import (
    ascending_vector,
    cumulative_sums,
    main,
    min_value,
    run_case,
    three_part_quicksort,
)


def test_ascending_vector_small():
    assert ascending_vector(4) == [0, 1, 2, 3]


def test_ascending_vector_longer():
    assert ascending_vector(8) == [0, 1, 2, 3, 4, 5, 6, 7]


def test_ascending_vector_empty():
    assert ascending_vector(0) == []


def test_ascending_vector_negative_raises():
    with pytest.raises(ValueError):
        ascending_vector(-1)


@pytest.mark.parametrize("n", [1, 9, 100, 101])
def test_ascending_vector_invariants(n):
    result = ascending_vector(n)
    assert len(result) == n
    assert result == sorted(result)
    assert result[0] == 0 and result[-1] == n - 1


def test_min_value_example():
    assert min_value([2, 1, 3, 4]) == 1


def test_min_value_empty_is_zero():
    assert min_value([]) == 0


def test_min_value_is_a_member_and_lower_bound():
    rng = random.Random(3)
    values = [rng.randint(1, 100) for _ in range(101)]
    result = min_value(values)
    assert result in values
    assert all(result <= v for v in values)


def test_cumulative_sums_documented_example():
    assert cumulative_sums([4, 5, 4, 6]) == {4: 13, 5: 9, 6: 19}


def test_cumulative_sums_keys_sorted_and_distinct():
    values = [7, 3, 7, 1, 3]
    result = cumulative_sums(values)
    assert list(result) == sorted(set(values))


def test_cumulative_sums_last_value_holds_total():
    rng = random.Random(11)
    values = [rng.randint(1, 100) for _ in range(50)]
    result = cumulative_sums(values)
    assert result[values[-1]] == sum(values)


def test_cumulative_sums_empty():
    assert cumulative_sums([]) == {}


def test_quicksort_sorts_example():
    assert three_part_quicksort([3, 2, 4, 5], random.Random(0)) == [2, 3, 4, 5]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_quicksort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(1, 100) for _ in range(200)]
    assert three_part_quicksort(values, rng) == sorted(values)


def test_quicksort_leaves_input_unchanged():
    values = [5, 1, 5, 2, 5]
    three_part_quicksort(values, random.Random(4))
    assert values == [5, 1, 5, 2, 5]


def test_quicksort_empty():
    assert three_part_quicksort([], random.Random(0)) == []


@pytest.mark.parametrize("test_id", [1, 2])
def test_run_case_ascending_passes(test_id):
    report = run_case(1, test_id, 10, random.Random(0))
    assert "is equal with the solution vector." in report
    assert "FAILURE" not in report


@pytest.mark.parametrize("test_id", [1, 2, 3])
def test_run_case_min_passes(test_id):
    report = run_case(2, test_id, 100, random.Random(5))
    assert "The function found the smallest value." in report


@pytest.mark.parametrize("test_id", [1, 2])
def test_run_case_cumulative_passes(test_id):
    report = run_case(3, test_id, 101, random.Random(6))
    assert "The map returned by the function is still correct." in report


@pytest.mark.parametrize("test_id", [1, 2])
def test_run_case_quicksort_passes(test_id):
    report = run_case(4, test_id, 100, random.Random(7))
    assert "The function is still working as expected." in report


def test_run_case_unknown_test():
    report = run_case(3, 9, 10, random.Random(0))
    assert "ERROR: Unknown test for cumulative_sums: 9" in report


def test_run_case_unknown_function():
    report = run_case(9, 1, 10, random.Random(0))
    assert report.startswith("ERROR: Unknown function to test: 9")


def test_main_single_case(capsys):
    assert main(["1", "3", "5"]) == 0
    assert "[ 0 1 2 3 4 ]" in capsys.readouterr().out


def test_main_invalid_function(capsys):
    assert main(["7", "1"]) == 1
    assert "ERROR: Invalid function id" in capsys.readouterr().out


def test_main_negative_size(capsys):
    assert main(["1", "3", "-2"]) == 1
    assert "ERROR: the size should be 0 or greater" in capsys.readouterr().out


def test_main_default_suite(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("running default tests")
    assert "FAILURE" not in out
    assert out.count("Tests for function") == 4