import random

import pytest

from puzzlekit.heaps import (
    find_score,
    max_k_elements,
    min_groups,
    pick_gifts,
    smallest_range,
)


def test_smallest_range_worked_example():
    nums = [[4, 10, 15, 24, 26], [0, 9, 12, 20], [5, 18, 22, 30]]
    assert smallest_range(nums) == (20, 24)


@pytest.mark.parametrize(
    "nums",
    [
        [[1, 2, 3], [1, 2, 3], [1, 2, 3]],
        [[1, 5, 9], [4, 12], [7, 10, 16]],
        [[-5, 0, 3], [2, 8], [1, 1, 1]],
    ],
)
def test_smallest_range_covers_every_list(nums):
    lo, hi = smallest_range(nums)
    assert lo <= hi
    assert all(any(lo <= x <= hi for x in row) for row in nums)
    flat = {x for row in nums for x in row}
    assert lo in flat and hi in flat


def test_smallest_range_single_list_is_its_first_value():
    nums = [[1, 2, 3]]
    assert smallest_range(nums) == (nums[0][0], nums[0][0])


def test_smallest_range_rejects_empty_lists():
    with pytest.raises(ValueError):
        smallest_range([[1, 2], []])
    with pytest.raises(ValueError):
        smallest_range([])


def test_min_groups_worked_example():
    assert min_groups([[5, 10], [6, 8], [1, 5], [2, 3], [1, 10]]) == 3


def test_min_groups_identical_intervals_need_one_group_each():
    intervals = [[2, 4]] * 5
    assert min_groups(intervals) == len(intervals)


def test_min_groups_empty():
    assert min_groups([]) == 0


def test_min_groups_does_not_depend_on_order():
    intervals = [[1, 3], [2, 6], [5, 9], [8, 10], [4, 4], [7, 12]]
    shuffled = intervals[:]
    random.Random(7).shuffle(shuffled)
    assert min_groups(shuffled) == min_groups(intervals)


def test_max_k_elements_rounds_thirds_up():
    assert max_k_elements([1, 10, 3, 3, 3], 3) == 17


def test_max_k_elements_single_round_takes_maximum():
    nums = [4, 19, 7, 2]
    assert max_k_elements(nums, 1) == max(nums)


def test_max_k_elements_no_rounds_and_empty():
    assert max_k_elements([5, 6], 0) == 0
    with pytest.raises(ValueError):
        max_k_elements([], 2)


def test_pick_gifts_worked_example():
    assert pick_gifts([25, 64, 9, 4, 100], 4) == 29


def test_pick_gifts_without_rounds_keeps_everything():
    gifts = [25, 64, 9]
    assert pick_gifts(gifts, 0) == sum(gifts)


def test_pick_gifts_piles_of_one_stay():
    gifts = [1, 1, 1, 1]
    assert pick_gifts(gifts, 10) == len(gifts)


def test_pick_gifts_never_grows_with_more_rounds():
    gifts = [81, 7, 200, 3, 50]
    results = [pick_gifts(gifts, k) for k in range(8)]
    assert results == sorted(results, reverse=True)
    with pytest.raises(ValueError):
        pick_gifts([], 1)


def test_find_score_worked_example():
    assert find_score([2, 1, 3, 4, 5, 2]) == 7


def test_find_score_single_value():
    assert find_score([5]) == 5


def test_find_score_bounds():
    nums = [9, 3, 7, 1, 8, 2, 6]
    score = find_score(nums)
    assert min(nums) <= score <= sum(nums)