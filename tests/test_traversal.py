import pytest

from dsakit.traversal import bfs, dfs

DIAMOND = [[1, 2], [3], [3], []]


def test_bfs_pinned():
    assert bfs(4, DIAMOND) == [0, 1, 2, 3]


def test_dfs_pinned():
    assert dfs(4, DIAMOND) == [0, 1, 3, 2]


@pytest.mark.parametrize("walk", [bfs, dfs])
def test_visits_each_reachable_vertex_once(walk):
    adjacency = [[1, 2], [0, 3, 4], [0, 4], [1], [1, 2]]
    order = walk(len(adjacency), adjacency)
    assert order[0] == 0
    assert sorted(order) == list(range(len(adjacency)))


@pytest.mark.parametrize("walk", [bfs, dfs])
def test_unreachable_vertex_left_out(walk):
    adjacency = [[1], [0], [3], [2]]
    order = walk(len(adjacency), adjacency)
    assert set(order) == {0, 1}


@pytest.mark.parametrize("walk", [bfs, dfs])
def test_single_vertex(walk):
    assert walk(1, [[]]) == [0]


@pytest.mark.parametrize("walk", [bfs, dfs])
def test_no_vertices(walk):
    assert walk(0, []) == []


def test_bfs_levels_are_non_decreasing():
    adjacency = [[1, 2], [3], [4], [5], [5], []]
    order = bfs(len(adjacency), adjacency)
    depth = {0: 0}
    for node in order:
        for nbr in adjacency[node]:
            depth.setdefault(nbr, depth[node] + 1)
    depths = [depth[node] for node in order]
    assert depths == sorted(depths)


def test_dfs_follows_path_to_the_end():
    adjacency = [[1], [2], [3], [4], []]
    assert dfs(len(adjacency), adjacency) == list(range(len(adjacency)))