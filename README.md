# dsakit

Plain Python implementations of classic data structures and graph algorithms.
The package has no runtime dependencies and is used as a library; it has no
command-line interface.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.adjacency` | `adjacency_list`, `weighted_adjacency_list`, `adjacency_matrix`, `weighted_adjacency_matrix` |
| `dsakit.traversal` | `bfs`, `dfs` |
| `dsakit.topological` | `topo_sort_bfs` (Kahn's algorithm), `topo_sort_dfs` (reverse depth-first postorder) |
| `dsakit.stacks` | `ArrayStack` (fixed capacity), `QueueStack` (kept in a single queue) |
| `dsakit.queues` | `ArrayQueue` (fixed capacity), `EagerStackQueue`, `AmortizedStackQueue` (both built on two stacks) |
| `dsakit.singly_linked` | `ListNode` and functions to insert, delete, build and walk singly linked lists |
| `dsakit.doubly_linked` | `DoublyNode` and the same operations for doubly linked lists, plus `insert_before` / `delete_before` |
| `dsakit.errors` | `CapacityError` (an `OverflowError`), `EmptyError` (an `IndexError`) |

## Graphs

An adjacency structure has one slot for each vertex number from `0` to
`vertex_count`, so graphs that number their vertices from 1 work as they are.
Edges are sequences `(u, v)` or, for the weighted variants, `(u, v, w)`. The
keyword-only `directed` flag chooses whether each edge is stored one way or
both ways. A negative vertex count or a vertex outside `0 .. vertex_count`
raises `ValueError`.

```python
from dsakit.adjacency import adjacency_list, weighted_adjacency_matrix

edges = [(1, 2), (1, 3), (2, 4)]
adj = adjacency_list(4, edges, directed=False)
# adj[1] == [2, 3]

matrix = weighted_adjacency_matrix(3, [(1, 2, 7)], directed=True)
# matrix[1][2] == 7, matrix[2][1] == 0
```

Traversals take an adjacency list over vertices `0 .. vertex_count - 1` and
start at vertex `0`; vertices not reachable from it are not visited.

```python
from dsakit.traversal import bfs, dfs

adjacency = [[1, 2], [0, 3], [0], [1]]
bfs(4, adjacency)  # [0, 1, 2, 3]
dfs(4, adjacency)  # [0, 1, 3, 2]
```

Topological sorting takes a directed edge list over vertices
`0 .. vertex_count - 1`:

```python
from dsakit.topological import topo_sort_bfs, topo_sort_dfs

edges = [(5, 0), (4, 0), (5, 2), (2, 3), (3, 1), (4, 1)]
topo_sort_bfs(6, edges)  # [4, 5, 0, 2, 3, 1]
topo_sort_dfs(6, edges)
```

On a graph with a cycle, `topo_sort_bfs` leaves out the vertices that never
reach in-degree zero, so its result is shorter than `vertex_count`;
`topo_sort_dfs` raises `ValueError`.

## Stacks and queues

All of them support `push`, `pop`, `len()` and `is_empty()`. Stacks expose
`top()` and queues expose `front()`. `ArrayStack` and `ArrayQueue` take a
capacity (100 by default) and raise `CapacityError` when pushed while full.
Popping or peeking an empty container raises `EmptyError`.

```python
from dsakit.stacks import ArrayStack
from dsakit.queues import ArrayQueue
from dsakit.errors import CapacityError, EmptyError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except CapacityError:
    ...

queue = ArrayQueue(10)
queue.push("a")
queue.pop()  # "a"
try:
    queue.pop()
except EmptyError:
    ...
```

`EagerStackQueue` reorders its two stacks on every push so that `pop` is
cheap; `AmortizedStackQueue` moves items to its output stack only when that
stack runs dry.

## Linked lists

Lists are chains of nodes, `None` is the empty list, and functions that may
change the first node return the (possibly new) head. Positions for
`insert_at` and `delete_at` start at 1; positions out of range raise
`IndexError`.

```python
from dsakit import singly_linked as sll

head = sll.from_iterable([1, 2, 3])
head = sll.insert_head(head, 0)
head = sll.delete_tail(head)
list(sll.iter_values(head))  # [0, 1, 2]
sll.length(head)             # 3
sll.format_list(head)        # "0\t1\t2\t"
```

`insert_after` returns the node it created; `delete_after` raises
`ValueError` when there is no following node. `dsakit.doubly_linked` works
the same way with `DoublyNode`, which also keeps a link to the previous node
and adds `insert_before` and `delete_before`.

## Running the tests

```
pip install -e ".[test]"
pytest
```