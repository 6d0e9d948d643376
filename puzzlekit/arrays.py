"""Operations on plain integer and character lists."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import accumulate, combinations
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first pair of indices whose values add up to ``target``, or None."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so its first ``k`` items are unique; return ``k``."""
    k = 0
    for num in nums:
        if k < 1 or num > nums[k - 1]:
            nums[k] = num
            k += 1
    return k


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number ``digits`` plus one."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` in place."""
    nums.sort()


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge sorted ``nums2[:n]`` into sorted ``nums1[:m]``, filling ``nums1`` in place."""
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k:] + nums[: len(nums) - k]


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the other values."""
    nonzero = [num for num in nums if num != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each prefix, from longest to shortest, the value below 2**maximum_bit maximising its XOR."""
    mask = (1 << maximum_bit) - 1
    return [prefix ^ mask for prefix in accumulate(nums, xor)][::-1]


def rotate_the_box(box: Sequence[Sequence[str]]) -> list[list[str]]:
    """Rotate a box clockwise and let stones ('#') fall onto obstacles ('*') or the floor."""
    if not box:
        return []
    m, n = len(box), len(box[0])
    rotated = [["."] * m for _ in range(n)]
    for i, row in enumerate(box):
        landing = n - 1
        for j in reversed(range(n)):
            cell = row[j]
            if cell == ".":
                continue
            if cell == "*":
                landing = j
            rotated[landing][m - i - 1] = cell
            landing -= 1
    return rotated