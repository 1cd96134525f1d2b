"""Graph searches: colouring, escape routes, shortest and longest paths, cycles and ordering."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

WALL = "#"
FLOOR = "."
MONSTER = "M"
START = "A"

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


def _check_node(node: int, first: int, n: int) -> None:
    if not first <= node < first + n:
        raise ValueError(f"node {node} outside {first}..{first + n - 1}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]], first: int) -> list[list[int]]:
    if n < 1:
        raise ValueError(f"graph needs at least one node, got {n}")
    graph: list[list[int]] = [[] for _ in range(n + first)]
    for u, v in edges:
        _check_node(u, first, n)
        _check_node(v, first, n)
        graph[u].append(v)
    return graph


def is_bipartite(adjacency: Sequence[Iterable[int]]) -> bool:
    """Whether the graph, given as 0-based adjacency lists, can be two-coloured."""
    colour = [0] * len(adjacency)
    for root in range(len(adjacency)):
        if colour[root]:
            continue
        colour[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for child in adjacency[node]:
                if not colour[child]:
                    colour[child] = 3 - colour[node]
                    queue.append(child)
                elif colour[child] == colour[node]:
                    return False
    return True


def escape_monsters(grid: Sequence[str]) -> str | None:
    """Moves (``U``, ``D``, ``L``, ``R``) leading ``A`` to the border ahead of every monster.

    Returns the empty string when ``A`` already stands on the border and
    ``None`` when no safe escape exists.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all grid rows must have the same length")
    starts = [(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == START]
    if len(starts) != 1:
        raise ValueError(f"grid must contain exactly one {START!r}")
    start = starts[0]

    def on_border(r: int, c: int) -> bool:
        return r in (0, rows - 1) or c in (0, cols - 1)

    if on_border(*start):
        return ""

    taken = [list(row) for row in grid]
    # Monsters are queued first so that they win ties for a cell.
    queue: deque[tuple[int, int, bool]] = deque(
        (i, j, True) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == MONSTER
    )
    queue.append((start[0], start[1], False))
    came_from: dict[tuple[int, int], tuple[int, int, str]] = {}

    while queue:
        r, c, is_monster = queue.popleft()
        for step, dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols) or taken[nr][nc] != FLOOR:
                continue
            taken[nr][nc] = MONSTER if is_monster else step
            queue.append((nr, nc, is_monster))
            if is_monster:
                continue
            came_from[(nr, nc)] = (r, c, step)
            if on_border(nr, nc):
                moves: list[str] = []
                cell = (nr, nc)
                while cell != start:
                    pr, pc, move = came_from[cell]
                    moves.append(move)
                    cell = (pr, pc)
                return "".join(reversed(moves))
    return None


def shortest_distances(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Dijkstra distances from node 1 over directed weighted edges on nodes 1..n.

    Entry ``i`` holds the distance to node ``i + 1``, or ``None`` if it is unreachable.
    """
    if n < 1:
        raise ValueError(f"graph needs at least one node, got {n}")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for x, y, weight in edges:
        _check_node(x, 1, n)
        _check_node(y, 1, n)
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight}")
        graph[x].append((y, weight))

    dist: list[int | None] = [None] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost > dist[node]:  # type: ignore[operator]
            continue
        for adj, weight in graph[node]:
            candidate = cost + weight
            if dist[adj] is None or candidate < dist[adj]:  # type: ignore[operator]
                dist[adj] = candidate
                heapq.heappush(heap, (candidate, adj))
    return dist[1:]


def find_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """A directed cycle on nodes 1..n, first node repeated at the end, or ``None``."""
    graph = _adjacency(n, edges, 1)
    visited = [False] * (n + 1)
    on_stack = [False] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = on_stack[root] = True
        path = [root]
        pending = [iter(graph[root])]
        while pending:
            for child in pending[-1]:
                if on_stack[child]:
                    return path[path.index(child):] + [child]
                if not visited[child]:
                    visited[child] = on_stack[child] = True
                    path.append(child)
                    pending.append(iter(graph[child]))
                    break
            else:
                pending.pop()
                on_stack[path.pop()] = False
    return None


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Kahn ordering of nodes 0..n-1, or ``None`` when the graph has a cycle."""
    graph = _adjacency(n, edges, 0)
    indegree = [0] * n
    for targets in graph:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        for child in graph[node]:
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)
        order.append(node)
    return order if len(order) == n else None


def longest_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Route from node 1 to node n through the most nodes of a directed acyclic graph.

    Returns ``None`` when node n cannot be reached; raises ``ValueError`` when a
    cycle is met on the way.
    """
    graph = _adjacency(n, edges, 1)
    unseen, active, done = 0, 1, 2
    length: list[int | None] = [None] * (n + 1)
    successor = [0] * (n + 1)
    status = [unseen] * (n + 1)
    length[n] = 1
    status[n] = done

    def relax(node: int, child: int) -> None:
        child_length = length[child]
        if child_length is None:
            return
        current = length[node]
        if current is None or child_length + 1 > current:
            length[node] = child_length + 1
            successor[node] = child

    if status[1] != done:
        status[1] = active
        stack = [(1, iter(graph[1]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if status[child] == active:
                    raise ValueError("graph contains a cycle")
                if status[child] == unseen:
                    status[child] = active
                    stack.append((child, iter(graph[child])))
                    break
                relax(node, child)
            else:
                stack.pop()
                status[node] = done
                if stack:
                    relax(stack[-1][0], node)

    if length[1] is None:
        return None
    route = [1]
    while route[-1] != n:
        route.append(successor[route[-1]])
    return route