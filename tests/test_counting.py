import pytest

from leetsolve.counting import (
    count_primes,
    is_prime,
    missing_number,
    num_identical_pairs,
    single_number,
    top_k_frequent,
)


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 2, 1], 1), ([4, 1, 2, 1, 2], 4), ([-1, -1, -2], -2)],
)
def test_single_number(nums, expected):
    assert single_number(nums) == expected


def test_single_number_none_single():
    assert single_number([3, 3]) == 0


@pytest.mark.parametrize("n, expected", [(10, 4), (0, 0), (1, 0), (2, 0)])
def test_count_primes(n, expected):
    assert count_primes(n) == expected


@pytest.mark.parametrize(
    "n, expected",
    [(-3, False), (0, False), (1, False), (2, True), (3, True), (4, False), (9, False), (97, True)],
)
def test_is_prime(n, expected):
    assert is_prime(n) is expected


def test_missing_number_source_case():
    assert missing_number([5, 3, 2, 1]) == 4


def test_missing_number_top_missing():
    assert missing_number([3, 0, 1]) == 2
    assert missing_number([0, 1]) == 2


def test_top_k_frequent_source_case():
    assert sorted(top_k_frequent([1, 1, 1, 2, 2, 3, 3, 3], 2)) == [1, 3]


def test_top_k_frequent_single():
    assert top_k_frequent([1], 1) == [1]


def test_top_k_frequent_ordered_by_count():
    assert top_k_frequent([5, 4, 4, 6, 6, 6], 3) == [6, 4, 5]


def test_top_k_frequent_pads_with_minus_one():
    assert top_k_frequent([1], 2) == [1, -1]


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 1, 1, 3], 4), ([1, 1, 1, 1], 6), ([1, 2, 3], 0)],
)
def test_num_identical_pairs(nums, expected):
    assert num_identical_pairs(nums) == expected