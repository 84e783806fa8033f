"""Binary-heap checks and conversions, plus order-statistic helpers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate, chain
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer key."""

    key: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree rooted at ``root``."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def is_complete(root: TreeNode | None, index: int = 0, count: int | None = None) -> bool:
    """Return whether the tree is complete.

    ``index`` is the array position of ``root`` and ``count`` the number of
    nodes in the whole tree; it is counted from ``root`` when not given.
    """
    if count is None:
        count = count_nodes(root)
    if root is None:
        return True
    if index >= count:
        return False
    return is_complete(root.left, 2 * index + 1, count) and is_complete(
        root.right, 2 * index + 2, count
    )


def has_heap_order(root: TreeNode | None) -> bool:
    """Return whether every parent's key is at least each child's key."""
    if root is None:
        return True
    left, right = root.left, root.right
    if left is None and right is None:
        return True
    if right is None:
        return root.key >= left.key
    if left is None:
        return root.key >= right.key and has_heap_order(right)
    if root.key >= left.key and root.key >= right.key:
        return has_heap_order(left) and has_heap_order(right)
    return False


def is_heap(root: TreeNode | None) -> bool:
    """Return whether the tree is a complete binary tree in max-heap order."""
    return is_complete(root, 0, count_nodes(root)) and has_heap_order(root)


def inorder_values(root: TreeNode | None) -> list[int]:
    """Return the keys in left-root-right order."""
    if root is None:
        return []
    return [*inorder_values(root.left), root.key, *inorder_values(root.right)]


def preorder_values(root: TreeNode | None) -> list[int]:
    """Return the keys in root-left-right order."""
    if root is None:
        return []
    return [root.key, *preorder_values(root.left), *preorder_values(root.right)]


def _preorder_nodes(root: TreeNode | None) -> Iterable[TreeNode]:
    if root is None:
        return
    yield root
    yield from _preorder_nodes(root.left)
    yield from _preorder_nodes(root.right)


def bst_to_min_heap(root: TreeNode | None) -> TreeNode | None:
    """Rewrite a binary search tree's keys in place so it becomes a min-heap.

    The sorted keys are assigned to the nodes in preorder, so every node's
    key is smaller than all keys in its subtrees. Returns ``root``.
    """
    ordered = inorder_values(root)
    for node, key in zip(list(_preorder_nodes(root)), ordered):
        node.key = key
    return root


def max_heapify(values: list[int], index: int, length: int) -> None:
    """Sift ``values[index]`` down within ``values[:length]`` to restore max-heap order."""
    while True:
        left = 2 * index + 1
        right = 2 * index + 2
        largest = index
        if left < length and values[left] > values[largest]:
            largest = left
        if right < length and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def convert_to_max_heap(values: list[int]) -> None:
    """Rearrange ``values`` in place into max-heap order."""
    length = len(values)
    for index in range(length // 2 - 1, -1, -1):
        max_heapify(values, index, length)


def _check_k(k: int, length: int, *, allow_zero: bool) -> None:
    low = 0 if allow_zero else 1
    if not low <= k <= length:
        raise ValueError(f"k must be between {low} and {length}, got {k}")


def k_largest(values: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` largest values, largest first."""
    _check_k(k, len(values), allow_zero=True)
    return heapq.nlargest(k, values)


def kth_largest_sum(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest of the sums of the suffixes ``values[i:]``."""
    _check_k(k, len(values), allow_zero=False)
    suffix_sums = accumulate(reversed(values))
    return heapq.nlargest(k, suffix_sums)[-1]


def kth_smallest(values: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest value, counting from 1."""
    _check_k(k, len(values), allow_zero=False)
    return heapq.nsmallest(k, values)[-1]


def window_maxima(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every run of ``k`` consecutive values, left to right."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    return [max(values[start : start + k]) for start in range(len(values) - k + 1)]


def merge_max_heaps(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two heaps' values and return them largest first."""
    heap = [-value for value in chain(first, second)]
    heapq.heapify(heap)
    return [-heapq.heappop(heap) for _ in range(len(heap))]


def merge_sorted_arrays(arrays: Iterable[Iterable[int]]) -> list[int]:
    """Return all values of ``arrays`` in one ascending list."""
    return sorted(chain.from_iterable(arrays))


def min_digit_sum(digits: Iterable[int]) -> int:
    """Return the smallest sum of two numbers formed from all the given digits.

    The sorted digits are dealt alternately to the two numbers.
    """
    first = second = 0
    for position, digit in enumerate(sorted(digits)):
        if position % 2 == 0:
            second = second * 10 + digit
        else:
            first = first * 10 + digit
    return first + second