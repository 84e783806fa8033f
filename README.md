# structkit

Classic data structures and algorithms in plain Python. It has no
third-party dependencies.

## What is inside

- `structkit.graph`: `Graph`, a directed or undirected graph kept as an
  adjacency list. It has `add_edge`, `neighbours`, `bfs`, `dfs` and `dfs_all`.
  Neighbours keep the order in which their edges were added. `bfs` raises
  `KeyError` for a start vertex that has no edges. `dfs` takes an optional
  shared `visited` set. `dfs_all` returns one visiting order per search: the
  first starts at the given vertex, and each later one starts at a vertex that
  had not yet been visited.
- `structkit.graph_cli`: an interactive menu for adding edges and running
  DFS and BFS. It offers `run_menu(graph, num_vertices, stdin, stdout)` and
  `main()`.
- `structkit.hashing`: integer hash tables.
  - `ChainedHashTable` uses separate chaining. It keeps duplicates, and
    `remove` ignores keys that are absent.
  - `LinearProbingTable`, `QuadraticProbingTable` and `DoubleHashingTable`
    use open addressing. The double-hashing step is `7 - key % 7`.
  - The open-addressing tables raise `HashTableFullError` when no free slot
    is reachable. Their `remove` raises `KeyError` for a missing key.
  - Every table supports `insert`, `remove`, `in`, `len()` and `render()`.
    `buckets()` or `slots()` gives the raw layout.
- `structkit.students`: the `Student` record, `default_records()`,
  `lookup(records, student_id)` (raises `KeyError` if the ID is unknown) and
  `describe(student)`.
- `structkit.heaps`: binary-tree heap checks on `TreeNode`. These are
  `count_nodes`, `is_complete`, `has_heap_order`, `is_heap`,
  `inorder_values`, `preorder_values` and `bst_to_min_heap`. For lists there
  are `max_heapify` and `convert_to_max_heap`. The order-statistic helpers are
  `k_largest`, `kth_smallest`, `kth_largest_sum`, `window_maxima`,
  `merge_max_heaps`, `merge_sorted_arrays` and `min_digit_sum`.
  - `kth_largest_sum` ranks the sums of the suffixes `values[i:]`.
  - Out-of-range `k` raises `ValueError`.
- `structkit.recursion`:
  - `merge_sort(values)` returns a new sorted list.
  - `solve_maze(maze)` returns a 0/1 path grid, or `None` when there is no
    path. It moves down first, then right.
  - `tower_of_hanoi(n, source, auxiliary, target)` returns the list of
    `(disk, from, to)` moves.
- `structkit.queue_algorithms`: `queue_contains`, `merge_queues` and
  `merge_sort_queue`, which sorts a `collections.deque` in place.
- `structkit.bst`: `BST`, a binary search tree of integers.
  - Inserting a value that is already present does nothing. `delete` ignores
    absent values.
  - It supports `in`, `len()` and in-order iteration.
  - Queries: `height`, `diameter`, `predecessor_successor`, `is_bst`,
    `lowest_common_ancestor`, `kth_smallest` and `count_in_range`.
  - Traversals: recursive `inorder`, `preorder` and `postorder`; their
    iterative variants; `level_order` and `reverse_level_order`.
  - `BSTIterator` walks a tree of `Node`s in order. It supports `has_next()`
    and `next()`.
- `structkit.bst_trace`: `TracingBST`, a search tree that records every
  recursive call of `insert`, `inorder`, `preorder` and `postorder` in its
  `trace` list.

## Installation

```
pip install .
```

## Usage

```python
from structkit.graph import Graph
from structkit.hashing import ChainedHashTable
from structkit.bst import BST

graph = Graph(5, directed=False)
graph.add_edge(1, 2)
graph.add_edge(1, 3)
print(graph.bfs(1))          # [1, 2, 3]

table = ChainedHashTable(7)
for key in (15, 11, 27, 8, 12):
    table.insert(key)
print(12 in table)           # True
print(table.render())

tree = BST()
for value in (50, 30, 20, 40, 70, 60, 80):
    tree.insert(value)
print(list(tree))            # [20, 30, 40, 50, 60, 70, 80]
print(tree.height(), tree.kth_smallest(3))   # 3 40
```

## Commands

```
structkit-graph        # asks for the size and kind of graph, then a menu: add edges, DFS, BFS, exit
structkit-students     # look up a student by ID (given as an argument or asked for)
structkit-bst          # build a sample tree and print its reverse level order
structkit-bst-trace    # build a sample tree and print the trace of each step
```

## What it does not do

- Everything is kept in memory. Graphs, tables and trees are not saved
  anywhere.
- The student lookup knows only the three built-in records.
- The graph menu works with integer vertices only.

## Running the tests

```
pip install .[test]
pytest
```