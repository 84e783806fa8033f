"""Binary search tree that records each recursive call it makes."""

from __future__ import annotations

import argparse
import sys

from structkit.bst import Node


class TracingBST:
    """Search tree whose operations append their call trace to ``trace``.

    Each entry of ``trace`` is a piece of text exactly as it would be shown:
    call messages end in a newline, visited values are followed by a space.
    """

    def __init__(self) -> None:
        self.root: Node | None = None
        self.trace: list[str] = []

    def _emit(self, text: str) -> None:
        self.trace.append(text)

    def insert(self, data: int) -> None:
        """Insert ``data`` unless it is already present, tracing every call."""
        self.root = self._insert(self.root, data)

    def _insert(self, node: Node | None, data: int) -> Node:
        self._emit(f"Entering insert with data: {data}\n")
        if node is None:
            self._emit(f"Inserting {data} at a new node\n")
            return Node(data)
        if data < node.data:
            self._emit(f"Going left of {node.data}\n")
            node.left = self._insert(node.left, data)
        elif data > node.data:
            self._emit(f"Going right of {node.data}\n")
            node.right = self._insert(node.right, data)
        self._emit(f"Exiting insert with data: {data}\n")
        return node

    def inorder(self) -> list[int]:
        """Return the values in left-root-right order, tracing every call."""
        values: list[int] = []
        self._inorder(self.root, values)
        return values

    def _inorder(self, node: Node | None, values: list[int]) -> None:
        if node is None:
            return
        self._emit(f"Entering inorder with node data: {node.data}\n")
        self._inorder(node.left, values)
        self._visit(node, values)
        self._inorder(node.right, values)
        self._emit(f"Exiting inorder with node data: {node.data}\n")

    def preorder(self) -> list[int]:
        """Return the values in root-left-right order, tracing every call."""
        values: list[int] = []
        self._preorder(self.root, values)
        return values

    def _preorder(self, node: Node | None, values: list[int]) -> None:
        if node is None:
            return
        self._emit(f"Entering preorder with node data: {node.data}\n")
        self._visit(node, values)
        self._preorder(node.left, values)
        self._preorder(node.right, values)
        self._emit(f"Exiting preorder with node data: {node.data}\n")

    def postorder(self) -> list[int]:
        """Return the values in left-right-root order, tracing every call."""
        values: list[int] = []
        self._postorder(self.root, values)
        return values

    def _postorder(self, node: Node | None, values: list[int]) -> None:
        if node is None:
            return
        self._emit(f"Entering postorder with node data: {node.data}\n")
        self._postorder(node.left, values)
        self._postorder(node.right, values)
        self._visit(node, values)
        self._emit(f"Exiting postorder with node data: {node.data}\n")

    def _visit(self, node: Node, values: list[int]) -> None:
        values.append(node.data)
        self._emit(f"{node.data} ")


def _drain(tree: TracingBST) -> str:
    text = "".join(tree.trace)
    tree.trace.clear()
    return text


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree and print the traced insertions and traversals."""
    parser = argparse.ArgumentParser(
        prog="structkit-bst-trace",
        description="Show the call trace of search-tree operations.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tree = TracingBST()
    for value in (50, 30, 20, 40, 70, 60, 80):
        tree.insert(value)
    out.write(_drain(tree))
    for heading, traverse in (
        ("Inorder traversal: ", tree.inorder),
        ("Postorder traversal: ", tree.postorder),
        ("Preorder traversal: ", tree.preorder),
    ):
        traverse()
        out.write(heading + _drain(tree) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())