"""Ancestor queries on rooted trees using binary lifting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from algokit.trees import _tree_adjacency


class TreeAncestor:
    """K-th ancestor queries over a forest given by parent links.

    ``parents[i]`` is the parent of node ``i + 1``; 0 marks a root.
    """

    def __init__(self, parents: Sequence[int]) -> None:
        n = len(parents)
        direct = [0, *parents]
        for node, parent in enumerate(direct[1:], start=1):
            if not 0 <= parent <= n:
                raise ValueError(f"parent {parent} of node {node} outside 0..{n}")
            if parent == node:
                raise ValueError(f"node {node} cannot be its own parent")
        self._check_acyclic(direct)
        self._n = n
        self._up: list[list[int]] = [direct]
        for _ in range(1, max(1, n.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[previous[v]] for v in range(n + 1)])

    @staticmethod
    def _check_acyclic(direct: list[int]) -> None:
        unseen, walking, settled = 0, 1, 2
        state = [unseen] * len(direct)
        for start in range(1, len(direct)):
            path = []
            node = start
            while node and state[node] == unseen:
                state[node] = walking
                path.append(node)
                node = direct[node]
            if node and state[node] == walking:
                raise ValueError("parent links contain a cycle")
            for visited in path:
                state[visited] = settled

    def _check_node(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise ValueError(f"node {node} outside 1..{self._n}")

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``node``, or ``None`` if there is none."""
        self._check_node(node)
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        if k.bit_length() > len(self._up):
            return None
        for level, row in enumerate(self._up):
            if (k >> level) & 1:
                node = row[node]
                if node == 0:
                    return None
        return node


class RootedTree:
    """A tree on nodes 1..n rooted at node 1, answering ancestor and path queries."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        graph = _tree_adjacency(n, edges)
        parents = [0] * (n + 1)
        depths = [-1] * (n + 1)
        depths[1] = 0
        queue = deque([1])
        while queue:
            node = queue.popleft()
            for child in graph[node]:
                if depths[child] < 0:
                    depths[child] = depths[node] + 1
                    parents[child] = node
                    queue.append(child)
        if any(d < 0 for d in depths[1:]):
            raise ValueError("edges do not form a connected tree")
        self._n = n
        self._parents = parents
        self._depths = depths
        self._ancestors = TreeAncestor(parents[1:])

    def _check_node(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise ValueError(f"node {node} outside 1..{self._n}")

    def depth(self, node: int) -> int:
        """Number of edges between ``node`` and the root."""
        self._check_node(node)
        return self._depths[node]

    def parent(self, node: int) -> int | None:
        """Parent of ``node``, or ``None`` for the root."""
        self._check_node(node)
        return self._parents[node] or None

    def naive_lca(self, u: int, v: int) -> int:
        """Lowest common ancestor found by walking parent links one step at a time."""
        self._check_node(u)
        self._check_node(v)
        if self._depths[u] < self._depths[v]:
            u, v = v, u
        while self._depths[u] != self._depths[v]:
            u = self._parents[u]
        while u != v:
            u = self._parents[u]
            v = self._parents[v]
        return u

    def jump(self, node: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``node``, or ``None`` if there is none."""
        return self._ancestors.kth_ancestor(node, k)

    def lowest_common_ancestor(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v`` using the lifting table."""
        self._check_node(u)
        self._check_node(v)
        if self._depths[u] < self._depths[v]:
            u, v = v, u
        lifted = self.jump(u, self._depths[u] - self._depths[v])
        assert lifted is not None
        u = lifted
        if u == v:
            return u
        for row in reversed(self._ancestors._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._parents[u]

    def node_on_path(self, u: int, v: int, steps: int) -> int:
        """The node ``steps`` edges from ``u`` along the path to ``v``; ``v`` if the path is shorter."""
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        common = self.lowest_common_ancestor(u, v)
        up_u = self._depths[u] - self._depths[common]
        up_v = self._depths[v] - self._depths[common]
        if steps <= up_u:
            found = self.jump(u, steps)
        elif steps - up_u <= up_v:
            found = self.jump(v, up_v - (steps - up_u))
        else:
            return v
        assert found is not None
        return found