import pytest

from ps_stats.tracking.heuristics import diff_count, overlap


def test_overlap_counts_common_pids():
    assert overlap([1, 2, 3], [3, 4, 1]) == 2


def test_overlap_consumes_each_match_once():
    assert overlap([5, 5, 5], [5, 6]) == 1
    assert overlap([5, 5], [5, 5, 7]) == 2


def test_overlap_with_empty_sides():
    assert overlap([], [1, 2]) == 0
    assert overlap([1, 2], []) == 0


@pytest.mark.parametrize("n", [1, 3, 8])
def test_diff_count_disjoint_equal_length_is_n(n):
    a = list(range(n))
    b = list(range(100, 100 + n))
    assert diff_count(a, b) == n
    assert diff_count(b, a) == n


def test_diff_count_uses_longer_side():
    assert diff_count([1, 2, 3], [1, 2]) == 1
    assert diff_count([1, 2], [1, 3, 4]) == 2
    assert diff_count([1, 2], [10, 20, 30, 40]) == 4


def test_diff_count_identical_is_zero():
    assert diff_count([7, 8, 9], [9, 8, 7]) == 0


def test_diff_count_string_tokens():
    assert diff_count(["10", "11"], ["11", "12"]) == 1
