"""Algorithms on strings: palindromes, windows, runs and rewrites."""

from __future__ import annotations

from collections import Counter, defaultdict
from functools import lru_cache
from itertools import groupby, pairwise

_CLOSERS = {"(": ")", "{": "}", "[": "]"}


def _expand(s: str, i: int, j: int) -> tuple[int, int]:
    """Bounds of the longest palindrome grown outwards from ``s[i..j]``."""
    while i >= 0 and j < len(s) and s[i] == s[j]:
        i -= 1
        j += 1
    return i + 1, j - 1


def longest_palindrome(s: str) -> str:
    """The first longest palindromic substring of ``s``."""
    if not s:
        return ""
    best = (0, 0)
    for i in range(len(s)):
        for left, right in (_expand(s, i, i), _expand(s, i, i + 1)):
            if right - left > best[1] - best[0]:
                best = (left, right)
    return s[best[0]:best[1] + 1]


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed in the right order."""
    expected: list[str] = []
    for ch in s:
        closer = _CLOSERS.get(ch)
        if closer is not None:
            expected.append(closer)
        elif not expected or expected.pop() != ch:
            return False
    return not expected


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def min_window(s: str, t: str) -> str:
    """The shortest substring of ``s`` that holds every character of ``t``, or ''."""
    if not t:
        return ""
    need = Counter(t)
    required = len(t)
    best_left = -1
    best_len = len(s) + 1
    left = 0
    for right, ch in enumerate(s):
        need[ch] -= 1
        if need[ch] >= 0:
            required -= 1
        while required == 0:
            if right - left + 1 < best_len:
                best_left = left
                best_len = right - left + 1
            need[s[left]] += 1
            if need[s[left]] > 0:
                required += 1
            left += 1
    return "" if best_left == -1 else s[best_left:best_left + best_len]


def is_scramble(s1: str, s2: str) -> bool:
    """Whether ``s2`` is a scrambled form of ``s1``."""
    if len(s1) != len(s2):
        return False

    @lru_cache(maxsize=None)
    def scramble(a: str, b: str) -> bool:
        if a == b:
            return True
        if Counter(a) != Counter(b):
            return False
        for i in range(1, len(a)):
            if scramble(a[:i], b[:i]) and scramble(a[i:], b[i:]):
                return True
            if scramble(a[:i], b[-i:]) and scramble(a[i:], b[:-i]):
                return True
        return False

    return scramble(s1, s2)


def is_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def shortest_palindrome(s: str) -> str:
    """The shortest palindrome made by adding characters in front of ``s``."""
    reversed_s = s[::-1]
    for i in range(len(s)):
        if s[:len(s) - i] == reversed_s[i:]:
            return reversed_s[:i] + s
    return reversed_s + s


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of ``s1`` is a substring of ``s2``."""
    need = Counter(s1)
    required = len(s1)
    left = 0
    for right, ch in enumerate(s2):
        need[ch] -= 1
        if need[ch] >= 0:
            required -= 1
        while required == 0:
            if right - left + 1 == len(s1):
                return True
            need[s2[left]] += 1
            if need[s2[left]] > 0:
                required += 1
            left += 1
    return False


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """A longest string of at most a 'a's, b 'b's and c 'c's with no letter three times in a row."""
    if min(a, b, c) < 0:
        raise ValueError("letter counts must be non-negative")
    piles = [(a, "a"), (b, "b"), (c, "c")]
    parts: list[str] = []
    while True:
        piles.sort(key=lambda pile: pile[0], reverse=True)
        (most, first), (middle, second), third = piles
        if middle == 0:
            parts.append(first * min(most, 2))
            return "".join(parts)
        use_first = min(most, 2)
        use_second = 1 if most - use_first >= middle else 0
        parts.append(first * use_first + second * use_second)
        piles = [(most - use_first, first), (middle - use_second, second), third]


def find_kth_bit(n: int, k: int) -> str:
    """The ``k``-th (1-based) bit of the ``n``-th string of the invert-and-reverse sequence."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k < (1 << n):
        raise ValueError("k is out of range")
    flipped = False
    while n > 1:
        middle = 1 << (n - 1)
        if k == middle:
            return "0" if flipped else "1"
        if k > middle:
            k = 2 * middle - k
            flipped = not flipped
        n -= 1
    return "1" if flipped else "0"


def max_unique_split(s: str) -> int:
    """Largest number of distinct substrings that ``s`` can be split into."""
    seen: set[str] = set()

    def search(start: int) -> int:
        if start == len(s):
            return len(seen)
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece in seen:
                continue
            seen.add(piece)
            best = max(best, search(end))
            seen.remove(piece)
        return best

    return search(0)


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost ``part`` from ``s`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def is_circular_sentence(sentence: str) -> bool:
    """Whether each word ends with the letter the next begins with, wrapping around."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    words = sentence.split(" ")
    if not all(words):
        return False
    if any(prev[-1] != nxt[0] for prev, nxt in pairwise(words)):
        return False
    return sentence[0] == sentence[-1]


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move every '1' to the right of every other character."""
    steps = 0
    ones = 0
    for ch in s:
        if ch == "1":
            ones += 1
        else:
            steps += ones
    return steps


def maximum_length(s: str) -> int:
    """Length of the longest single-letter substring occurring at least three times, or -1."""
    runs: defaultdict[str, Counter[int]] = defaultdict(Counter)
    for ch, group in groupby(s):
        run = sum(1 for _ in group)
        for length in range(1, run + 1):
            runs[ch][length] += 1

    best = -1
    for by_length in runs.values():
        occurrences = 0
        for length in sorted(by_length, reverse=True):
            occurrences += by_length[length]
            if occurrences >= 3:
                best = max(best, length)
                break
    return best


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` as count-letter pairs with counts of at most 9."""
    parts: list[str] = []
    for ch, group in groupby(word):
        full, rest = divmod(sum(1 for _ in group), 9)
        parts.append(f"9{ch}" * full)
        if rest:
            parts.append(f"{rest}{ch}")
    return "".join(parts)