"""Recursive algorithms: merge sort, maze solving and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Return a new list with ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path of open cells (``1``) from the top-left to the bottom-right.

    Moves go down a row first, then right along a column. Returns a grid of
    the same shape with ``1`` on the path, or ``None`` when there is no path.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must not be empty")
    cols = len(maze[0])
    solution = [[0] * cols for _ in range(rows)]

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < rows and 0 <= y < len(maze[x]) and maze[x][y] == 1

    def walk(x: int, y: int) -> bool:
        if x == rows - 1 and y == cols - 1 and is_open(x, y):
            solution[x][y] = 1
            return True
        if not is_open(x, y):
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """Return the moves ``(disk, from, to)`` that shift ``n`` disks to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    if n == 0:
        return []
    return [
        *tower_of_hanoi(n - 1, source, target, auxiliary),
        (n, source, target),
        *tower_of_hanoi(n - 1, auxiliary, source, target),
    ]