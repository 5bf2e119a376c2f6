"""Breadth-first and depth-first traversal starting from vertex 0."""

from collections import deque
from collections.abc import Sequence


def bfs(vertex_count: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return vertices in breadth-first order, starting at vertex 0."""
    if vertex_count == 0:
        return []
    visited = [False] * vertex_count
    visited[0] = True
    pending = deque([0])
    order: list[int] = []
    while pending:
        node = pending.popleft()
        order.append(node)
        for nbr in adjacency[node]:
            if not visited[nbr]:
                visited[nbr] = True
                pending.append(nbr)
    return order


def dfs(vertex_count: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return vertices in depth-first preorder, starting at vertex 0."""
    if vertex_count == 0:
        return []
    visited = [False] * vertex_count
    visited[0] = True
    order = [0]
    stack = [iter(adjacency[0])]
    while stack:
        for nbr in stack[-1]:
            if not visited[nbr]:
                visited[nbr] = True
                order.append(nbr)
                stack.append(iter(adjacency[nbr]))
                break
        else:
            stack.pop()
    return order