"""Binary search tree of integers with traversals and order queries."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Optional


@dataclass(eq=False)
class Node:
    """A tree node; nodes compare and hash by identity."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Node | None, data: int) -> Node | None:
    if node is None:
        return None
    if data < node.data:
        node.left = _delete(node.left, data)
    elif data > node.data:
        node.right = _delete(node.right, data)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _leftmost(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


def _is_bst(node: Node | None) -> bool:
    if node is None:
        return True
    if node.left is not None and _rightmost(node.left).data >= node.data:
        return False
    if node.right is not None and _leftmost(node.right).data <= node.data:
        return False
    return _is_bst(node.left) and _is_bst(node.right)


def _count_in_range(node: Node | None, low: int, high: int) -> int:
    if node is None:
        return 0
    if node.data == high and node.data == low:
        return 1
    if low <= node.data <= high:
        return (
            1
            + _count_in_range(node.left, low, high)
            + _count_in_range(node.right, low, high)
        )
    if node.data < low:
        return _count_in_range(node.right, low, high)
    return _count_in_range(node.left, low, high)


def _inorder(node: Node | None, out: list[int]) -> None:
    if node is None:
        return
    _inorder(node.left, out)
    out.append(node.data)
    _inorder(node.right, out)


def _preorder(node: Node | None, out: list[int]) -> None:
    if node is None:
        return
    out.append(node.data)
    _preorder(node.left, out)
    _preorder(node.right, out)


def _postorder(node: Node | None, out: list[int]) -> None:
    if node is None:
        return
    _postorder(node.left, out)
    _postorder(node.right, out)
    out.append(node.data)


class BSTIterator:
    """In-order iterator over a tree that holds only one root-to-leaf path."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left(root)

    def _push_left(self, node: Node | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        """Return whether another value remains."""
        return bool(self._stack)

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.data


class BST:
    """Binary search tree; inserting a value already present does nothing."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, data: int) -> None:
        """Insert ``data`` unless it is already in the tree."""
        if self.root is None:
            self.root = Node(data)
            return
        node = self.root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = Node(data)
                    return
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = Node(data)
                    return
                node = node.right
            else:
                return

    def delete(self, data: int) -> None:
        """Remove ``data``; a value not in the tree is ignored."""
        self.root = _delete(self.root, data)

    def __contains__(self, data: object) -> bool:
        node = self.root
        while node is not None:
            if data == node.data:
                return True
            try:
                node = node.left if data < node.data else node.right  # type: ignore[operator]
            except TypeError:
                return False
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self._preorder_nodes())

    def __iter__(self) -> Iterator[int]:
        return BSTIterator(self.root)

    def _preorder_nodes(self) -> Iterator[Node]:
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _postorder_nodes(self) -> Iterator[Node]:
        if self.root is None:
            return
        pending = [self.root]
        visited: list[Node] = []
        while pending:
            node = pending.pop()
            visited.append(node)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(visited)

    def _levels(self) -> Iterator[list[Node]]:
        level = [self.root] if self.root is not None else []
        while level:
            yield level
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return sum(1 for _ in self._levels())

    def diameter(self) -> int:
        """Return the number of nodes on the longest path between two leaves."""
        heights: dict[Node, int] = {}
        diameters: dict[Node, int] = {}
        for node in self._postorder_nodes():
            left_height = heights.get(node.left, 0) if node.left else 0
            right_height = heights.get(node.right, 0) if node.right else 0
            left_diameter = diameters.get(node.left, 0) if node.left else 0
            right_diameter = diameters.get(node.right, 0) if node.right else 0
            heights[node] = max(left_height, right_height) + 1
            diameters[node] = max(
                left_height + right_height + 1, left_diameter, right_diameter
            )
        return diameters[self.root] if self.root is not None else 0

    def predecessor_successor(self, data: int) -> tuple[int | None, int | None]:
        """Return the values just below and just above ``data``, or None for each."""
        predecessor: int | None = None
        successor: int | None = None
        node = self.root
        while node is not None:
            if node.data == data:
                if node.left is not None:
                    predecessor = _rightmost(node.left).data
                if node.right is not None:
                    successor = _leftmost(node.right).data
                break
            if node.data > data:
                successor = node.data
                node = node.left
            else:
                predecessor = node.data
                node = node.right
        return predecessor, successor

    def is_bst(self) -> bool:
        """Return whether every node is above its left and below its right subtree."""
        return _is_bst(self.root)

    def lowest_common_ancestor(self, n1: int, n2: int) -> int:
        """Return the value of the lowest node lying between ``n1`` and ``n2``.

        Raises ValueError when the search falls off the tree.
        """
        node = self.root
        while node is not None:
            if node.data > n1 and node.data > n2:
                node = node.left
            elif node.data < n1 and node.data < n2:
                node = node.right
            else:
                return node.data
        raise ValueError(f"no common ancestor of {n1} and {n2}")

    def kth_smallest(self, k: int) -> int:
        """Return the ``k``-th smallest value, counting from 1."""
        size = len(self)
        if not 1 <= k <= size:
            raise ValueError(f"k must be between 1 and {size}, got {k}")
        return next(islice(iter(self), k - 1, None))

    def count_in_range(self, low: int, high: int) -> int:
        """Return how many values lie in ``[low, high]``."""
        return _count_in_range(self.root, low, high)

    def inorder(self) -> list[int]:
        """Return the values in left-root-right order."""
        values: list[int] = []
        _inorder(self.root, values)
        return values

    def preorder(self) -> list[int]:
        """Return the values in root-left-right order."""
        values: list[int] = []
        _preorder(self.root, values)
        return values

    def postorder(self) -> list[int]:
        """Return the values in left-right-root order."""
        values: list[int] = []
        _postorder(self.root, values)
        return values

    def iterative_preorder(self) -> list[int]:
        """Return the preorder values, computed with an explicit stack."""
        return [node.data for node in self._preorder_nodes()]

    def iterative_postorder(self) -> list[int]:
        """Return the postorder values, computed with two explicit stacks."""
        return [node.data for node in self._postorder_nodes()]

    def iterative_inorder(self) -> list[int]:
        """Return the inorder values, computed with an explicit stack."""
        values: list[int] = []
        stack: list[Node] = []
        current = self.root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            values.append(current.data)
            current = current.right
        return values

    def level_order(self) -> list[int]:
        """Return the values level by level from the root, left to right."""
        return [node.data for level in self._levels() for node in level]

    def reverse_level_order(self) -> list[int]:
        """Return the values level by level from the deepest, left to right."""
        levels = list(self._levels())
        return [node.data for level in reversed(levels) for node in level]


def _format(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree and print its reverse level order."""
    parser = argparse.ArgumentParser(
        prog="structkit-bst",
        description="Print the reverse level order of a sample search tree.",
    )
    parser.parse_args(argv)

    tree = BST()
    for value in (50, 30, 20, 40, 70, 60, 80):
        tree.insert(value)
    sys.stdout.write("Reverse Level order: \n")
    sys.stdout.write(_format(tree.reverse_level_order()) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())