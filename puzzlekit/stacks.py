"""Monotonic-stack algorithms over heights and grids."""

from __future__ import annotations

from collections.abc import Sequence


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    best = 0
    stack: list[int] = []
    n = len(heights)
    for i in range(n + 1):
        while stack and (i == n or heights[stack[-1]] > heights[i]):
            height = heights[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, height * width)
        stack.append(i)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest rectangle of '1' cells in a grid of '0' and '1'."""
    if not matrix:
        return 0
    best = 0
    hist = [0] * len(matrix[0])
    for row in matrix:
        hist = [0 if cell == "0" else h + 1 for cell, h in zip(row, hist)]
        best = max(best, largest_rectangle_area(hist))
    return best


def max_width_ramp(nums: Sequence[int]) -> int:
    """Largest ``j - i`` with ``i < j`` and ``nums[i] <= nums[j]``."""
    stack: list[int] = []
    for i, num in enumerate(nums):
        if not stack or num < nums[stack[-1]]:
            stack.append(i)
    best = 0
    for j in range(len(nums) - 1, -1, -1):
        if j <= best:
            break
        while stack and nums[j] >= nums[stack[-1]]:
            best = max(best, j - stack.pop())
    return best