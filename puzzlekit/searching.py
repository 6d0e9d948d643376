"""Binary searches over sorted, rotated and mountain-shaped sequences."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from itertools import pairwise


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    left = bisect.bisect_left(nums, target)
    if left == len(nums) or nums[left] != target:
        return -1, -1
    return left, bisect.bisect_right(nums, target) - 1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if target == nums[mid]:
            return mid
        if target < nums[mid]:
            hi = mid - 1
        else:
            lo = mid + 1
    return lo


def my_sqrt(x: int) -> int:
    """Integer square root of a non-negative integer."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x < 2:
        return x
    lo, hi, answer = 0, x, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return answer


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[lo] == nums[mid] == nums[hi]:
            lo += 1
            hi -= 1
        elif nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("find_min() of an empty sequence")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] < nums[hi]:
            hi = mid
        else:
            lo = mid + 1
    return nums[lo]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if target == nums[mid]:
            return mid
        if target > nums[mid]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Smallest letter greater than ``target``, wrapping to the first letter."""
    if not letters:
        raise ValueError("next_greatest_letter() of an empty sequence")
    return letters[bisect.bisect_right(letters, target) % len(letters)]


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Index of the peak of a mountain-shaped sequence."""
    lo, hi = 0, len(arr) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if arr[mid] <= arr[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def arrange_coins(n: int) -> int:
    """Number of complete staircase rows that ``n`` coins can build."""
    lo, hi = 0, n
    while lo <= hi:
        mid = (lo + hi) // 2
        used = mid * (mid + 1) // 2
        if used == n:
            return mid
        if used < n:
            lo = mid + 1
        else:
            hi = mid - 1
    return hi


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Whether ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        return True
    drops = sum(a > b for a, b in pairwise([*nums, nums[0]]))
    return drops <= 1