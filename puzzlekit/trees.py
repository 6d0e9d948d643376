"""Binary trees built from level-order lists, and tree-shaped puzzles."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


class TreeNode:
    """A node of a binary tree."""

    __slots__ = ("val", "left", "right")

    def __init__(
        self,
        val: int = 0,
        left: TreeNode | None = None,
        right: TreeNode | None = None,
    ) -> None:
        self.val = val
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"TreeNode({tree_values(self)!r})"


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        right = next(items, None)
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_values(root: TreeNode | None) -> list[int | None]:
    """Level-order values of the tree with None for missing children, trailing Nones dropped."""
    values: list[int | None] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def kth_largest_level_sum(root: TreeNode | None, k: int) -> int:
    """The ``k``-th largest sum of a tree level, or -1 if the tree has fewer levels."""
    if k < 1:
        raise ValueError("k must be at least 1")
    sums = sorted((sum(node.val for node in level) for level in _levels(root)), reverse=True)
    return sums[k - 1] if k <= len(sums) else -1


def replace_value_in_tree(root: TreeNode | None) -> TreeNode | None:
    """Replace every value, in place, by the sum of its cousins' values."""
    if root is None:
        return None
    root.val = 0
    for level in _levels(root):
        total = sum(
            child.val
            for node in level
            for child in (node.left, node.right)
            if child is not None
        )
        for node in level:
            children = [child for child in (node.left, node.right) if child is not None]
            siblings = sum(child.val for child in children)
            for child in children:
                child.val = total - siblings
    return root


def _farthest(graph: list[list[int]], start: int) -> tuple[int, int]:
    distance = {start: 0}
    queue = deque([start])
    last = start
    while queue:
        last = queue.popleft()
        for neighbour in graph[last]:
            if neighbour not in distance:
                distance[neighbour] = distance[last] + 1
                queue.append(neighbour)
    return last, distance[last]


def _diameter(edges: Sequence[Sequence[int]]) -> int:
    graph: list[list[int]] = [[] for _ in range(len(edges) + 1)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    far, _ = _farthest(graph, 0)
    _, diameter = _farthest(graph, far)
    return diameter


def minimum_diameter_after_merge(
    edges1: Sequence[Sequence[int]], edges2: Sequence[Sequence[int]]
) -> int:
    """Smallest diameter reachable by joining two trees with a single edge."""
    d1 = _diameter(edges1)
    d2 = _diameter(edges2)
    return max(d1, d2, (d1 + 1) // 2 + (d2 + 1) // 2 + 1)