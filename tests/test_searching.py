import pytest

from drillbook.searching import (
    can_split,
    find_peak_element,
    guess_number,
    search_insert,
    search_matrix,
    search_range,
    split_array,
)

SORTED = [5, 7, 7, 8, 8, 10]


@pytest.mark.parametrize("target", [5, 7, 8, 10])
def test_search_range_bounds(target):
    first, last = search_range(SORTED, target)
    assert SORTED[first] == target
    assert SORTED[last] == target
    assert first == 0 or SORTED[first - 1] < target
    assert last == len(SORTED) - 1 or SORTED[last + 1] > target


@pytest.mark.parametrize("nums, target", [(SORTED, 6), (SORTED, 11), ([], 0), (SORTED, 1)])
def test_search_range_missing(nums, target):
    assert search_range(nums, target) == [-1, -1]


@pytest.mark.parametrize("target", [1, 3, 5, 6])
def test_search_insert_found(target):
    nums = [1, 3, 5, 6]
    assert nums[search_insert(nums, target)] == target


@pytest.mark.parametrize("target", [0, 2, 4, 7])
def test_search_insert_position_keeps_order(target):
    nums = [1, 3, 5, 6]
    index = search_insert(nums, target)
    assert all(value < target for value in nums[:index])
    assert all(value > target for value in nums[index:])


def test_search_insert_empty():
    assert search_insert([], 42) == 0


MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def test_search_matrix_finds_every_element():
    for row in MATRIX:
        for value in row:
            assert search_matrix(MATRIX, value)


@pytest.mark.parametrize("target", [0, 2, 13, 61, 25])
def test_search_matrix_missing(target):
    assert not search_matrix(MATRIX, target)


def test_search_matrix_empty():
    assert not search_matrix([], 1)
    assert not search_matrix([[]], 1)


def _is_peak(nums, index):
    left = index == 0 or nums[index - 1] <= nums[index]
    right = index == len(nums) - 1 or nums[index + 1] <= nums[index]
    return left and right


@pytest.mark.parametrize(
    "nums",
    [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [1], [3, 2, 1], [1, 2, 3], [2, 2, 2]],
)
def test_find_peak_element_returns_peak(nums):
    index = find_peak_element(nums)
    assert 0 <= index < len(nums)
    assert _is_peak(nums, index)


def test_find_peak_element_empty():
    assert find_peak_element([]) == -1


def _oracle(pick):
    def guess(num):
        if num > pick:
            return -1
        if num < pick:
            return 1
        return 0

    return guess


def test_guess_number_finds_every_pick():
    n = 50
    for pick in range(1, n + 1):
        assert guess_number(n, _oracle(pick)) == pick


def test_guess_number_never_hit():
    assert guess_number(10, lambda num: 1) == -1
    assert guess_number(10, lambda num: -1) == -1


def test_can_split_threshold():
    nums = [7, 2, 5, 10, 8]
    assert can_split(nums, 18, 2)
    assert not can_split(nums, 17, 2)
    assert not can_split(nums, sum(nums), 0)


def test_split_array_example():
    assert split_array([7, 2, 5, 10, 8], 2) == 18


@pytest.mark.parametrize(
    "nums, k", [([7, 2, 5, 10, 8], 2), ([1, 2, 3, 4, 5], 2), ([1, 4, 4], 3), ([2, 3, 1, 2, 4, 3], 3)]
)
def test_split_array_is_minimal(nums, k):
    result = split_array(nums, k)
    assert can_split(nums, result, k)
    assert result == max(nums) or not can_split(nums, result - 1, k)


def test_split_array_extremes():
    nums = [3, 1, 4, 1, 5, 9, 2, 6]
    assert split_array(nums, 1) == sum(nums)
    assert split_array(nums, len(nums)) == max(nums)
    assert split_array(nums, 0) == -1