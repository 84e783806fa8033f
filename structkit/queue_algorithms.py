"""Searching and merge-sorting queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def queue_contains(queue: Iterable[T], key: T) -> bool:
    """Return whether ``key`` is in ``queue``; the queue is left unchanged."""
    return any(item == key for item in queue)


def merge_queues(left: deque[T], right: deque[T], out: deque[T]) -> None:
    """Drain two sorted queues onto the back of ``out`` in sorted order.

    On ties the item from ``left`` goes first.
    """
    while left and right:
        if left[0] <= right[0]:
            out.append(left.popleft())
        else:
            out.append(right.popleft())
    out.extend(left)
    left.clear()
    out.extend(right)
    right.clear()


def merge_sort_queue(queue: deque[T]) -> None:
    """Sort ``queue`` in place, front to back ascending."""
    if len(queue) <= 1:
        return
    half = len(queue) // 2
    left: deque[T] = deque(queue.popleft() for _ in range(half))
    right: deque[T] = deque(queue)
    queue.clear()
    merge_sort_queue(left)
    merge_sort_queue(right)
    merge_queues(left, right, queue)