"""Interactive menu for building a graph and running traversals on it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from structkit.graph import Graph

_MENU = (
    "\n--- Graph Menu ---\n"
    "1. Add Edge\n"
    "2. Perform DFS\n"
    "3. Perform BFS\n"
    "4. Exit\n"
    "Please enter your choice: "
)
_TOO_LARGE = "Please enter value less then the number of vertix\n"
_NOT_A_NUMBER = "Please enter a whole number.\n"


class _EndOfInput(Exception):
    """Raised when the input runs out while a value is expected."""


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    """Return the next token as an int, or None when it is not one."""
    try:
        token = next(tokens)
    except StopIteration:
        raise _EndOfInput from None
    try:
        return int(token)
    except ValueError:
        return None


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _format_traversal(kind: str, start: object, order: Iterable[object]) -> str:
    visited = "".join(f"{vertex} " for vertex in order)
    return f"{kind} Traversal starting from vertex {start}: {visited}\n"


def _read_vertex(tokens: Iterator[str], out: TextIO, text: str, limit: int | None) -> int | None:
    _prompt(out, text)
    vertex = _next_int(tokens)
    if vertex is None:
        out.write(_NOT_A_NUMBER)
        return None
    if limit is not None and vertex > limit:
        out.write(_TOO_LARGE)
        return None
    return vertex


def _run_menu(graph: Graph, num_vertices: int, tokens: Iterator[str], out: TextIO) -> None:
    try:
        while True:
            _prompt(out, _MENU)
            choice = _next_int(tokens)
            if choice == 1:
                start = _read_vertex(
                    tokens, out, "Enter the starting vertex of the edge: ", num_vertices
                )
                if start is None:
                    continue
                end = _read_vertex(
                    tokens, out, "Enter the ending vertex of the edge: ", num_vertices
                )
                if end is None:
                    continue
                graph.add_edge(start, end)
                out.write(f"Edge added between {start} and {end}.\n")
            elif choice == 2:
                start = _read_vertex(tokens, out, "Enter the starting vertex for DFS: ", None)
                if start is None:
                    continue
                for order in graph.dfs_all(start):
                    out.write(_format_traversal("DFS", order[0], order))
            elif choice == 3:
                start = _read_vertex(tokens, out, "Enter the starting vertex for BFS: ", None)
                if start is None:
                    continue
                try:
                    order = graph.bfs(start)
                except KeyError:
                    out.write(f"Vertex {start} does not exist in the graph.\n")
                else:
                    out.write(_format_traversal("BFS", start, order))
            elif choice == 4:
                out.write("Exiting the program.\n")
                return
            else:
                out.write("Invalid choice! Please enter a valid option.\n")
    except _EndOfInput:
        return


def run_menu(graph: Graph, num_vertices: int, stdin: Iterable[str], stdout: TextIO) -> None:
    """Read menu choices from ``stdin`` until Exit or end of input."""
    _run_menu(graph, num_vertices, _tokens(stdin), stdout)


def main(argv: list[str] | None = None) -> int:
    """Ask for the graph's size and kind, then run the menu on standard streams."""
    parser = argparse.ArgumentParser(
        prog="structkit-graph",
        description="Build a graph interactively and traverse it.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        _prompt(out, "Enter the number of vertices in the graph: ")
        num_vertices = _next_int(tokens)
        while num_vertices is None:
            _prompt(out, "Please enter a whole number: ")
            num_vertices = _next_int(tokens)
        _prompt(
            out,
            "Do you want to build a directed graph(press 1) or Undirected graph(press 0): ",
        )
        answer = _next_int(tokens)
        while answer not in (0, 1):
            _prompt(out, "Please enter again: ")
            answer = _next_int(tokens)
    except _EndOfInput:
        sys.stderr.write("unexpected end of input\n")
        return 1

    graph: Graph[int] = Graph(num_vertices, answer == 1)
    _run_menu(graph, num_vertices, tokens, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())