import random

import pytest

from algodrills.missing import (
    consecutive_sequence,
    main,
    random_gapped_sequence,
    smallest_missing,
    smallest_missing_iterative,
)


@pytest.mark.parametrize("start", [0, 7, 150])
def test_full_run_has_nothing_missing(start):
    values = list(range(start, start + 12))
    assert smallest_missing_iterative(values) is None
    assert smallest_missing(values) is None


@pytest.mark.parametrize("removed_index", range(1, 15))
def test_finds_removed_value(removed_index):
    values = list(range(40, 56))
    removed = values.pop(removed_index)
    assert smallest_missing_iterative(values) == removed
    assert smallest_missing(values) == removed


def test_single_element_has_nothing_missing():
    assert smallest_missing_iterative([42]) is None
    assert smallest_missing([42]) is None


def test_empty_raises_iterative():
    with pytest.raises(ValueError):
        smallest_missing_iterative([])


def test_empty_raises_binary():
    with pytest.raises(ValueError):
        smallest_missing([])


@pytest.mark.parametrize("seed", range(20))
def test_both_searches_agree_on_random_runs(seed):
    rng = random.Random(seed)
    values = random_gapped_sequence(rng.randint(5, 300), rng)
    assert smallest_missing(values) == smallest_missing_iterative(values)


@pytest.mark.parametrize("size", [5, 10, 100, 1000])
def test_random_gapped_sequence_shape(size):
    values = random_gapped_sequence(size, random.Random(size))
    assert len(values) == size
    gaps = [b - a for a, b in zip(values, values[1:])]
    assert sorted(gaps) == [1] * (size - 2) + [2]
    assert values[0] != values[-1] - (size - 1)


def test_random_gapped_sequence_gap_is_found():
    rng = random.Random(3)
    values = random_gapped_sequence(100, rng)
    gap_index = next(i for i, (a, b) in enumerate(zip(values, values[1:])) if b - a == 2)
    assert smallest_missing(values) == values[gap_index] + 1


def test_short_gapped_sequence_keeps_all_values():
    values = random_gapped_sequence(3, random.Random(1))
    assert values == list(range(values[0], values[0] + 4))


@pytest.mark.parametrize("size", [1, 10, 100])
def test_consecutive_sequence(size):
    values = consecutive_sequence(size, random.Random(size))
    assert len(values) == size
    assert 0 <= values[0] <= size
    assert values == list(range(values[0], values[0] + size))


def test_main_single_size_reports_missing(capsys):
    assert main(["10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[1].endswith(" missing!")
    shown = [int(v) for v in lines[0].split(", ")]
    assert lines[1] == f"{smallest_missing_iterative(shown)} missing!"


def test_main_binary_search_mode(capsys):
    assert main(["20", "rec"]) == 0
    lines = capsys.readouterr().out.splitlines()
    shown = [int(v) for v in lines[0].split(", ")]
    assert lines[1] == f"{smallest_missing(shown)} missing!"


def test_main_default_runs(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("No value missing!") >= 8
    assert "..." in out


def test_main_zero_size_fails():
    assert main(["0"]) == 1