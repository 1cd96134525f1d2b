"""Tree measurements and a disjoint-set union structure."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def subordinate_counts(parents: Sequence[int]) -> list[int]:
    """Number of subordinates of each employee 1..n.

    ``parents[i]`` is the boss of employee ``i + 2``; employee 1 is the head.
    Employees not under the head count zero.
    """
    n = len(parents) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(parents, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} outside 1..{n}")
        children[boss].append(employee)

    order = [1]
    for node in order:
        order.extend(children[node])
    counts = [0] * (n + 1)
    for node in reversed(order):
        counts[node] = sum(1 + counts[child] for child in children[node])
    return counts[1:]


def _tree_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError(f"tree needs at least one node, got {n}")
    edge_list = list(edges)
    if len(edge_list) != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {len(edge_list)}")
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edge_list:
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} outside 1..{n}")
        graph[u].append(v)
        graph[v].append(u)
    return graph


def _bfs(graph: list[list[int]], source: int) -> tuple[list[int], int]:
    """Distances from ``source`` and the last node reached."""
    dist = [-1] * len(graph)
    dist[source] = 0
    queue = deque([source])
    last = source
    while queue:
        node = queue.popleft()
        last = node
        for child in graph[node]:
            if dist[child] < 0:
                dist[child] = dist[node] + 1
                queue.append(child)
    if any(d < 0 for d in dist[1:]):
        raise ValueError("edges do not form a connected tree")
    return dist, last


def _diameter_ends(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[int], list[int], int]:
    graph = _tree_adjacency(n, edges)
    _, first_end = _bfs(graph, 1)
    from_first, second_end = _bfs(graph, first_end)
    from_second, _ = _bfs(graph, second_end)
    return from_first, from_second, from_first[second_end]


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of edges on the longest path of the tree on nodes 1..n."""
    return _diameter_ends(n, edges)[2]


def farthest_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """For each node 1..n, the distance to the node farthest from it."""
    from_first, from_second, _ = _diameter_ends(n, edges)
    return [max(a, b) for a, b in zip(from_first[1:], from_second[1:])]


class DisjointSet:
    """Union-find over nodes 0..n with path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} outside 0..{len(self._parent) - 1}")

    def find(self, node: int) -> int:
        """Representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v`` by rank; False if already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v`` by size; False if already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            self._parent[root_u] = root_v
            self._size[root_v] += self._size[root_u]
        else:
            self._parent[root_v] = root_u
            self._size[root_u] += self._size[root_v]
        return True