"""Adjacency lists and matrices built from edge lists.

Vertices are numbered from 1 to ``vertex_count``; index 0 is present but
normally left unused, so every structure has ``vertex_count + 1`` rows.
"""

from collections.abc import Iterable, Sequence


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} outside 0..{vertex_count}")


def _pairs(vertex_count: int, edges: Iterable[Sequence[int]]):
    _check_count(vertex_count)
    for edge in edges:
        u, v, *_ = edge
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        yield u, v


def _triples(vertex_count: int, edges: Iterable[Sequence[int]]):
    _check_count(vertex_count)
    for edge in edges:
        u, v, w, *_ = edge
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        yield u, v, w


def adjacency_list(
    vertex_count: int, edges: Iterable[Sequence[int]], *, directed: bool
) -> list[list[int]]:
    """Return neighbour lists for an unweighted graph."""
    adj: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for u, v in _pairs(vertex_count, edges):
        adj[u].append(v)
        if not directed:
            adj[v].append(u)
    return adj


def weighted_adjacency_list(
    vertex_count: int, edges: Iterable[Sequence[int]], *, directed: bool
) -> list[list[tuple[int, int]]]:
    """Return ``(neighbour, weight)`` lists for a weighted graph."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count + 1)]
    for u, v, w in _triples(vertex_count, edges):
        adj[u].append((v, w))
        if not directed:
            adj[v].append((u, w))
    return adj


def adjacency_matrix(
    vertex_count: int, edges: Iterable[Sequence[int]], *, directed: bool
) -> list[list[int]]:
    """Return a 0/1 matrix marking the edges of an unweighted graph."""
    size = vertex_count + 1
    matrix = [[0] * size for _ in range(size)]
    for u, v in _pairs(vertex_count, edges):
        matrix[u][v] = 1
        if not directed:
            matrix[v][u] = 1
    return matrix


def weighted_adjacency_matrix(
    vertex_count: int, edges: Iterable[Sequence[int]], *, directed: bool
) -> list[list[int]]:
    """Return a matrix holding edge weights, 0 where there is no edge."""
    size = vertex_count + 1
    matrix = [[0] * size for _ in range(size)]
    for u, v, w in _triples(vertex_count, edges):
        matrix[u][v] = w
        if not directed:
            matrix[v][u] = w
    return matrix