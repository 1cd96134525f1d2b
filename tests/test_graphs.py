import random

import pytest

from algokit.graphs import (
    escape_monsters,
    find_cycle,
    is_bipartite,
    longest_route,
    shortest_distances,
    topological_order,
)


def _undirected(n, pairs):
    adjacency = [[] for _ in range(n)]
    for u, v in pairs:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def test_even_cycle_is_bipartite():
    assert is_bipartite(_undirected(4, [(0, 1), (1, 2), (2, 3), (3, 0)]))


def test_odd_cycle_is_not_bipartite():
    assert not is_bipartite(_undirected(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]))


def test_random_trees_are_bipartite():
    rng = random.Random(7)
    for size in range(1, 30):
        pairs = [(v, rng.randrange(v)) for v in range(1, size)]
        assert is_bipartite(_undirected(size, pairs))


def test_self_loop_breaks_bipartiteness():
    assert is_bipartite([[], [], []])
    assert not is_bipartite([[0]])


def _walk(grid, path):
    r, c = next((i, row.index("A")) for i, row in enumerate(grid) if "A" in row)
    delta = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
    cells = []
    for step in path:
        dr, dc = delta[step]
        r, c = r + dr, c + dc
        cells.append(grid[r][c])
    return r, c, cells


def test_escape_path_is_valid_and_reaches_border():
    grid = [
        "########",
        "#M..A..#",
        "#.#.M#.#",
        "#M#..#..",
        "#.######",
    ]
    path = escape_monsters(grid)
    assert path
    r, c, cells = _walk(grid, path)
    assert all(cell == "." for cell in cells)
    assert r in (0, len(grid) - 1) or c in (0, len(grid[0]) - 1)


def test_escape_from_border_needs_no_moves():
    assert escape_monsters(["A.", ".."]) == ""


def test_escape_blocked_by_faster_monster():
    grid = [
        "#.###",
        "#...#",
        "#M#A#",
        "#####",
    ]
    assert escape_monsters(grid) is None


def test_escape_enclosed_by_walls():
    assert escape_monsters(["#####", "#.A.#", "#####"]) is None


def test_escape_requires_start():
    with pytest.raises(ValueError):
        escape_monsters(["...", ".M.", "..."])


def test_escape_rejects_ragged_grid():
    with pytest.raises(ValueError):
        escape_monsters(["A..", ".."])


def test_shortest_distances_small_graph():
    assert shortest_distances(3, [(1, 2, 3), (2, 3, 4), (1, 3, 10)]) == [0, 3, 7]


def test_shortest_distances_unreachable_nodes():
    assert shortest_distances(3, [(2, 3, 1)]) == [0, None, None]


def test_shortest_distances_are_tight():
    rng = random.Random(3)
    n = 25
    edges = [(rng.randint(1, n), rng.randint(1, n), rng.randint(0, 20)) for _ in range(80)]
    dist = shortest_distances(n, edges)
    assert dist[0] == 0
    for x, y, w in edges:
        if dist[x - 1] is not None:
            assert dist[y - 1] is not None
            assert dist[y - 1] <= dist[x - 1] + w
    for node in range(2, n + 1):
        if dist[node - 1] is not None:
            assert any(
                y == node and dist[x - 1] is not None and dist[x - 1] + w == dist[node - 1]
                for x, y, w in edges
            )


def test_shortest_distances_rejects_bad_node():
    with pytest.raises(ValueError):
        shortest_distances(2, [(1, 3, 1)])


def test_find_cycle_simple_triangle():
    assert find_cycle(3, [(1, 2), (2, 3), (3, 1)]) == [1, 2, 3, 1]


def test_find_cycle_returns_closed_walk():
    rng = random.Random(11)
    for _ in range(20):
        n = 10
        edges = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(15)]
        edges.append((3, 1))
        edges.append((1, 3))
        edge_set = set(edges)
        cycle = find_cycle(n, edges)
        assert isinstance(cycle, list)
        assert len(cycle) >= 2
        assert cycle[0] == cycle[-1]
        for pair in zip(cycle, cycle[1:]):
            assert pair in edge_set


def test_find_cycle_on_dag_is_none():
    rng = random.Random(5)
    n = 12
    edges = []
    for _ in range(30):
        u, v = sorted(rng.sample(range(1, n + 1), 2))
        edges.append((u, v))
    assert find_cycle(n, edges) is None


def test_find_cycle_self_loop():
    assert find_cycle(2, [(1, 2), (2, 2)]) == [2, 2]


def test_topological_order_respects_edges():
    rng = random.Random(9)
    n = 15
    labels = list(range(n))
    rng.shuffle(labels)
    edges = []
    for _ in range(40):
        u, v = sorted(rng.sample(range(n), 2))
        edges.append((labels[u], labels[v]))
    order = topological_order(n, edges)
    assert sorted(order) == list(range(n))
    position = {node: i for i, node in enumerate(order)}
    assert all(position[u] < position[v] for u, v in edges)


def test_topological_order_with_cycle_is_none():
    assert topological_order(3, [(0, 1), (1, 2), (2, 0)]) is None


def test_longest_route_prefers_more_nodes():
    assert longest_route(3, [(1, 3), (1, 2), (2, 3)]) == [1, 2, 3]


def test_longest_route_uses_full_chain():
    rng = random.Random(2)
    n = 10
    edges = [(i, i + 1) for i in range(1, n)]
    for _ in range(20):
        u, v = sorted(rng.sample(range(1, n + 1), 2))
        edges.append((u, v))
    rng.shuffle(edges)
    route = longest_route(n, edges)
    assert route == list(range(1, n + 1))


def test_longest_route_is_a_real_path():
    rng = random.Random(4)
    n = 12
    edges = []
    for _ in range(25):
        u, v = sorted(rng.sample(range(1, n + 1), 2))
        edges.append((u, v))
    edges.append((1, n))
    route = longest_route(n, edges)
    assert route[0] == 1 and route[-1] == n
    edge_set = set(edges)
    assert all(pair in edge_set for pair in zip(route, route[1:]))


def test_longest_route_unreachable():
    assert longest_route(3, [(1, 2)]) is None


def test_longest_route_single_node():
    assert longest_route(1, []) == [1]


def test_longest_route_rejects_cycle():
    with pytest.raises(ValueError):
        longest_route(3, [(1, 2), (2, 1), (2, 3)])