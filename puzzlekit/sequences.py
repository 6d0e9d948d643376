"""Dynamic programming, sliding windows and counting over integer sequences."""

from __future__ import annotations

import bisect
import math
from collections import Counter
from collections.abc import Sequence
from functools import lru_cache
from itertools import accumulate, pairwise


def minimum_total_distance(robot: Sequence[int], factory: Sequence[Sequence[int]]) -> int:
    """Least total distance for robots to reach factories given as ``(position, limit)``."""
    robots = sorted(robot)
    factories = sorted((position, limit) for position, limit in factory)

    @lru_cache(maxsize=None)
    def cost(i: int, j: int, used: int) -> float:
        if i == len(robots):
            return 0
        if j == len(factories):
            return math.inf
        best = cost(i, j + 1, 0)
        position, limit = factories[j]
        if limit > used:
            best = min(best, cost(i + 1, j, used + 1) + abs(robots[i] - position))
        return best

    result = cost(0, 0, 0)
    cost.cache_clear()
    if math.isinf(result):
        raise ValueError("the factories cannot repair every robot")
    return int(result)


def _lis_lengths(nums: Sequence[int]) -> list[int]:
    """Length of the longest strictly increasing subsequence ending at each position."""
    tails: list[int] = []
    lengths: list[int] = []
    for num in nums:
        i = bisect.bisect_left(tails, num)
        if i == len(tails):
            tails.append(num)
        else:
            tails[i] = num
        lengths.append(len(tails))
    return lengths


def minimum_mountain_removals(nums: Sequence[int]) -> int:
    """Fewest removals that leave a strictly rising then strictly falling sequence."""
    rising = _lis_lengths(nums)
    falling = _lis_lengths(nums[::-1])[::-1]
    longest = max(
        (up + down - 1 for up, down in zip(rising, falling) if up > 1 and down > 1),
        default=0,
    )
    return len(nums) - longest


def max_moves(grid: Sequence[Sequence[int]]) -> int:
    """Most rightward moves to strictly larger cells starting from the first column."""
    if not grid or not grid[0]:
        return 0
    m, n = len(grid), len(grid[0])
    moves = [0] * m
    for j in range(n - 2, -1, -1):
        moves = [
            max(
                (
                    1 + moves[r]
                    for r in (i - 1, i, i + 1)
                    if 0 <= r < m and grid[r][j + 1] > grid[i][j]
                ),
                default=0,
            )
            for i in range(m)
        ]
    return max(moves)


def longest_square_streak(nums: Sequence[int]) -> int:
    """Length of the longest chain where each value is the square of the previous, or -1."""
    if not nums:
        raise ValueError("longest_square_streak() of an empty sequence")
    streak: dict[int, int] = {}
    for num in sorted(set(nums), reverse=True):
        streak[num] = 1 + streak.get(num * num, 0)
    best = max(streak.values())
    return best if best >= 2 else -1


def maximum_beauty(nums: Sequence[int], k: int) -> int:
    """Most equal values reachable when each value may move by at most ``k``."""
    ordered = sorted(nums)
    best = 0
    left = 0
    for right, value in enumerate(ordered):
        while value - ordered[left] > 2 * k:
            left += 1
        best = max(best, right - left + 1)
    return best


def _bits(num: int) -> list[int]:
    return [bit for bit in range(num.bit_length()) if num >> bit & 1]


def minimum_subarray_length(nums: Sequence[int], k: int) -> int:
    """Length of the shortest subarray whose bitwise OR is at least ``k``, or -1."""
    bit_counts: Counter[int] = Counter()
    ors = 0
    best: int | None = None
    left = 0
    for right, num in enumerate(nums):
        for bit in _bits(num):
            bit_counts[bit] += 1
            if bit_counts[bit] == 1:
                ors |= 1 << bit
        while ors >= k and left <= right:
            length = right - left + 1
            best = length if best is None else min(best, length)
            for bit in _bits(nums[left]):
                bit_counts[bit] -= 1
                if bit_counts[bit] == 0:
                    ors &= ~(1 << bit)
            left += 1
    return -1 if best is None else best


def is_array_special(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> list[bool]:
    """For each ``(start, end)`` query, whether neighbours in that slice always differ in parity."""
    group = list(accumulate((a % 2 == b % 2 for a, b in pairwise(nums)), initial=0))
    return [group[start] == group[end] for start, end in queries]


def can_arrange(arr: Sequence[int], k: int) -> bool:
    """Whether ``arr`` splits into pairs whose sums are all divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    remainders = Counter(a % k for a in arr)
    if remainders[0] % 2:
        return False
    return all(remainders[r] == remainders[k - r] for r in range(1, k // 2 + 1))


def divide_players(skill: Sequence[int]) -> int:
    """Sum of team chemistry when players pair into teams of equal skill, or -1."""
    if len(skill) < 2:
        raise ValueError("at least two players are needed")
    team = sum(skill) // (len(skill) // 2)
    counts = Counter(skill)
    total = 0
    for s, freq in counts.items():
        needed = team - s
        if counts.get(needed) != freq:
            return -1
        total += s * needed * freq
    return total // 2


def remove_subfolders(folder: Sequence[str]) -> list[str]:
    """Sorted folders that do not lie inside another listed folder."""
    kept: list[str] = []
    prev = ""
    for path in sorted(folder):
        if prev and path.startswith(prev) and path[len(prev):len(prev) + 1] == "/":
            continue
        kept.append(path)
        prev = path
    return kept