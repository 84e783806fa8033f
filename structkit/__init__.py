"""Classic data structures and algorithms: graphs, hash tables, heaps, search trees, queues and recursion."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "bst_trace",
    "graph",
    "graph_cli",
    "hashing",
    "heaps",
    "queue_algorithms",
    "recursion",
    "students",
]