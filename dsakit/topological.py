"""Topological ordering of directed graphs with vertices 0..V-1."""

from collections import deque
from collections.abc import Iterable, Sequence


def _build(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    adj: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v, *_ = edge
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} outside 0..{vertex_count - 1}")
        adj[u].append(v)
    return adj


def topo_sort_bfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Kahn's algorithm.

    Vertices that lie on or behind a cycle never reach in-degree zero and are
    left out, so a result shorter than ``vertex_count`` signals a cycle.
    """
    adj = _build(vertex_count, edges)
    indegree = [0] * vertex_count
    for targets in adj:
        for target in targets:
            indegree[target] += 1

    ready = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while ready:
        node = ready.popleft()
        order.append(node)
        for target in adj[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                ready.append(target)
    return order


_UNSEEN, _ACTIVE, _DONE = range(3)


def topo_sort_dfs(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Reverse depth-first postorder; raises ValueError if there is a cycle."""
    adj = _build(vertex_count, edges)
    state = [_UNSEEN] * vertex_count
    finished: list[int] = []

    for start in range(vertex_count):
        if state[start] != _UNSEEN:
            continue
        state[start] = _ACTIVE
        stack = [(start, iter(adj[start]))]
        while stack:
            node, targets = stack[-1]
            for target in targets:
                if state[target] == _ACTIVE:
                    raise ValueError("graph has a cycle")
                if state[target] == _UNSEEN:
                    state[target] = _ACTIVE
                    stack.append((target, iter(adj[target])))
                    break
            else:
                stack.pop()
                state[node] = _DONE
                finished.append(node)

    finished.reverse()
    return finished