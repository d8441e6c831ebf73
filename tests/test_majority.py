import pytest

from dsakit.majority import (
    majority_element,
    majority_element_brute_force,
    majority_element_sorted,
    pair_sum,
    pair_sum_two_pointer,
)

WITH_MAJORITY = [
    [1, 1, 2, 2, 2, 1, 1],
    [2, 2, 2, 1, 1],
    [3, 2, 3],
    [7],
    [4, 5, 4, 6, 4, 4, 9],
]


def test_moore_worked_example():
    assert majority_element([1, 1, 2, 2, 2, 1, 1]) == 1


def test_brute_force_worked_example():
    assert majority_element_brute_force([2, 2, 2, 1, 1]) == 2


def test_sorted_worked_example():
    assert majority_element_sorted([2, 2, 2, 1, 1]) == 2


@pytest.mark.parametrize("nums", WITH_MAJORITY)
def test_all_methods_agree(nums):
    expected = majority_element_brute_force(nums)
    assert nums.count(expected) > len(nums) // 2
    assert majority_element(nums) == expected
    assert majority_element_sorted(nums) == expected


def test_brute_force_without_majority():
    assert majority_element_brute_force([1, 2, 3]) is None
    assert majority_element_brute_force([]) is None


def test_sorted_does_not_modify_input():
    nums = [2, 1, 2]
    majority_element_sorted(nums)
    assert nums == [2, 1, 2]


def test_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])
    with pytest.raises(ValueError):
        majority_element_sorted([])


def test_pair_sum_finds_pair():
    nums = [2, 7, 11, 15]
    i, j = pair_sum(nums, 13)
    assert i < j
    assert nums[i] + nums[j] == 13


def test_pair_sum_returns_first_pair():
    nums = [1, 4, 2, 3]
    assert pair_sum(nums, 5) == (0, 1)


def test_pair_sum_none():
    assert pair_sum([1, 2], 10) is None


@pytest.mark.parametrize("target", [9, 13, 18, 26])
def test_two_pointer_matches_brute_force_on_sorted(target):
    nums = [2, 7, 11, 15]
    i, j = pair_sum_two_pointer(nums, target)
    assert nums[i] + nums[j] == target
    assert (i, j) == pair_sum(nums, target)


def test_two_pointer_none():
    assert pair_sum_two_pointer([1, 2, 3], 100) is None
    assert pair_sum_two_pointer([], 0) is None