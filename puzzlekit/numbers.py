"""Number puzzles: expression evaluation, lexical order, digits, bits and primes."""

from __future__ import annotations

import bisect
from collections import Counter
from collections.abc import Sequence
from functools import lru_cache, reduce
from math import isqrt
from operator import add, mul, or_, sub

_OPERATORS = {"+": add, "-": sub, "*": mul}


def diff_ways_to_compute(expression: str) -> list[int]:
    """Every value ``expression`` can take under some placement of parentheses."""

    @lru_cache(maxsize=None)
    def compute(expr: str) -> tuple[int, ...]:
        results: list[int] = []
        for i, ch in enumerate(expr):
            op = _OPERATORS.get(ch)
            if op is None:
                continue
            lefts = compute(expr[:i])
            rights = compute(expr[i + 1:])
            results.extend(op(left, right) for left in lefts for right in rights)
        if not results:
            results.append(int(expr))
        return tuple(results)

    return list(compute(expression))


def lexical_order(n: int) -> list[int]:
    """The numbers 1 to ``n`` in dictionary order."""
    result: list[int] = []
    current = 1
    while len(result) < n:
        result.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            while current % 10 == 9 or current == n:
                current //= 10
            current += 1
    return result


def _gap(a: int, b: int, n: int) -> int:
    """How many numbers up to ``n`` have a prefix in ``[a, b)``."""
    gap = 0
    while a <= n:
        gap += min(n + 1, b) - a
        a *= 10
        b *= 10
    return gap


def find_kth_number(n: int, k: int) -> int:
    """The ``k``-th (1-based) number among 1 to ``n`` in dictionary order."""
    if not 1 <= k <= n:
        raise ValueError("k must lie between 1 and n")
    answer = 1
    position = 1
    while position < k:
        gap = _gap(answer, answer + 1, n)
        if position + gap <= k:
            position += gap
            answer += 1
        else:
            position += 1
            answer *= 10
    return answer


def maximum_swap(num: int) -> int:
    """The largest number reachable by swapping at most two digits of ``num``."""
    if num < 0:
        raise ValueError("num must be non-negative")
    digits = list(str(num))
    last_index = {int(d): i for i, d in enumerate(digits)}
    for i, d in enumerate(digits):
        for bigger in range(9, int(d), -1):
            j = last_index.get(bigger, -1)
            if j > i:
                digits[i], digits[j] = digits[j], digits[i]
                return int("".join(digits))
    return num


def count_max_or_subsets(nums: Sequence[int]) -> int:
    """Number of subsets whose bitwise OR equals the OR of all of ``nums``."""
    target = reduce(or_, nums, 0)
    counts: Counter[int] = Counter({0: 1})
    for num in nums:
        extended = Counter(counts)
        for value, count in counts.items():
            extended[value | num] += count
        counts = extended
    return counts[target]


def sieve_of_eratosthenes(n: int) -> list[int]:
    """All primes below ``n``."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * n
    is_prime[0] = is_prime[1] = 0
    for i in range(2, isqrt(n - 1) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = bytes(len(range(i * i, n, i)))
    return [i for i, flag in enumerate(is_prime) if flag]


_PRIMES = sieve_of_eratosthenes(1000)


def prime_sub_operation(nums: Sequence[int]) -> bool:
    """Whether subtracting a smaller prime from some values can make ``nums`` strictly increasing."""
    previous = 0
    for num in nums:
        index = bisect.bisect_left(_PRIMES, num - previous)
        if index > 0:
            num -= _PRIMES[index - 1]
        if num <= previous:
            return False
        previous = num
    return True