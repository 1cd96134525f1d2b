"""Queries over every fixed-size window of a sequence."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterator, Sequence


def _check_window(length: int, k: int) -> None:
    if not 1 <= k <= length:
        raise ValueError(f"window size {k} must lie in 1..{length}")


def _generated(n: int, x: int, a: int, b: int, c: int) -> Iterator[int]:
    value = x
    for _ in range(n):
        yield value
        value = (a * value + b) % c


def sliding_window_sum_xor(n: int, k: int, x: int, a: int, b: int, c: int) -> int:
    """XOR of the sums of all windows of size ``k``.

    The sequence has ``n`` values: ``x`` first, then each next one is
    ``(a * previous + b) % c``.
    """
    if c <= 0:
        raise ValueError("c must be positive")
    _check_window(n, k)
    window: deque[int] = deque()
    total = 0
    result = 0
    for value in _generated(n, x, a, b, c):
        window.append(value)
        total += value
        if len(window) > k:
            total -= window.popleft()
        if len(window) == k:
            result ^= total
    return result


def sliding_window_mode(values: Sequence[int], k: int) -> list[int]:
    """Most frequent value of each window, the smallest one on ties."""
    _check_window(len(values), k)
    freq: Counter[int] = Counter()
    heap: list[tuple[int, int]] = []
    modes: list[int] = []

    def bump(value: int, delta: int) -> None:
        freq[value] += delta
        heapq.heappush(heap, (-freq[value], value))

    for i, value in enumerate(values):
        bump(value, 1)
        if i >= k:
            bump(values[i - k], -1)
        if i >= k - 1:
            # Entries whose count no longer matches are stale.
            while -heap[0][0] != freq[heap[0][1]]:
                heapq.heappop(heap)
            modes.append(heap[0][1])
    return modes


def sliding_window_mex(values: Sequence[int], k: int) -> list[int]:
    """Smallest non-negative integer absent from each window."""
    _check_window(len(values), k)
    freq = Counter(values[:k])
    missing = {m for m in range(k + 1) if m not in freq}
    heap = sorted(missing)

    def current() -> int:
        while heap[0] not in missing:
            heapq.heappop(heap)
        return heap[0]

    result = [current()]
    for incoming, outgoing in zip(values[k:], values):
        freq[outgoing] -= 1
        if freq[outgoing] == 0 and 0 <= outgoing <= k:
            missing.add(outgoing)
            heapq.heappush(heap, outgoing)
        freq[incoming] += 1
        missing.discard(incoming)
        result.append(current())
    return result