"""Greedy algorithms driven by priority queues and ordered scans."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from math import isqrt


def smallest_range(nums: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Smallest range ``(lo, hi)`` holding at least one value from each sorted list."""
    if not nums or any(not row for row in nums):
        raise ValueError("smallest_range() needs at least one list and no empty lists")
    heap = [(row[0], i, 0) for i, row in enumerate(nums)]
    heapq.heapify(heap)
    lo = heap[0][0]
    hi = max(row[0] for row in nums)
    best = (lo, hi)
    while True:
        _, i, j = heapq.heappop(heap)
        if j + 1 == len(nums[i]):
            return best
        following = nums[i][j + 1]
        heapq.heappush(heap, (following, i, j + 1))
        hi = max(hi, following)
        lo = heap[0][0]
        if hi - lo < best[1] - best[0]:
            best = (lo, hi)


def min_groups(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest groups of pairwise disjoint inclusive intervals covering all ``intervals``."""
    ends: list[int] = []
    for left, right in sorted(intervals):
        if ends and left > ends[0]:
            heapq.heapreplace(ends, right)
        else:
            heapq.heappush(ends, right)
    return len(ends)


def max_k_elements(nums: Sequence[int], k: int) -> int:
    """Score from ``k`` rounds of taking the largest value and putting back its third, rounded up."""
    if k > 0 and not nums:
        raise ValueError("cannot take values from an empty sequence")
    heap = [-num for num in nums]
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        top = -heap[0]
        score += top
        heapq.heapreplace(heap, -((top + 2) // 3))
    return score


def pick_gifts(gifts: Sequence[int], k: int) -> int:
    """Gifts left after ``k`` rounds of shrinking the richest pile to its integer square root."""
    if k > 0 and not gifts:
        raise ValueError("cannot take gifts from no piles")
    heap = [-gift for gift in gifts]
    heapq.heapify(heap)
    for _ in range(k):
        heapq.heapreplace(heap, -isqrt(-heap[0]))
    return -sum(heap)


def find_score(nums: Sequence[int]) -> int:
    """Score from repeatedly taking the smallest unmarked value and marking it and its neighbours."""
    marked: set[int] = set()
    score = 0
    for num, i in sorted((num, i) for i, num in enumerate(nums)):
        if i in marked:
            continue
        marked.update((i - 1, i, i + 1))
        score += num
    return score