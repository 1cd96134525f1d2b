"""Classic dynamic-programming counting and optimisation problems."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

MOD = 1_000_000_007
TRAP = "*"

T = TypeVar("T")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def count_dice_sequences(n: int) -> int:
    """Number of ways to reach sum ``n`` by throwing a die one or more times, modulo 1e9+7."""
    _require_non_negative("n", n)
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in range(1, 7) if face <= total) % MOD
    return ways[n]


def min_coins(coins: Sequence[int], target: int) -> int:
    """Fewest coins summing to ``target``, or -1 when it cannot be formed."""
    _require_non_negative("target", target)
    unreachable = target + 1
    best = [0] + [unreachable] * target
    for amount in range(1, target + 1):
        candidates = [best[amount - coin] for coin in coins if 0 < coin <= amount]
        if candidates:
            best[amount] = min(unreachable, min(candidates) + 1)
    return -1 if best[target] >= unreachable else best[target]


def count_ordered_coin_ways(coins: Sequence[int], target: int) -> int:
    """Ordered ways to form ``target`` from the coins, modulo 1e9+7."""
    _require_non_negative("target", target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in coins if 0 < coin <= amount) % MOD
    return ways[target]


def count_coin_combinations(coins: Sequence[int], target: int) -> int:
    """Distinct multisets of coins summing to ``target``, modulo 1e9+7."""
    _require_non_negative("target", target)
    ways = [1] + [0] * target
    for coin in coins:
        if coin <= 0:
            continue
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def min_digit_removals(n: int) -> int:
    """Fewest steps to reach zero when each step subtracts one of the number's digits."""
    _require_non_negative("n", n)
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(steps[value - int(d)] for d in str(value) if d != "0")
    return steps[n]


def count_grid_paths(grid: Sequence[str]) -> int:
    """Right/down paths from the top-left to the bottom-right cell avoiding traps, modulo 1e9+7."""
    if not grid or not grid[0]:
        return 0
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all grid rows must have the same length")
    ways = [0] * width
    ways[0] = 1
    for row in grid:
        left = 0
        for j, cell in enumerate(row):
            if cell == TRAP:
                ways[j] = 0
            else:
                ways[j] = (ways[j] + left) % MOD
            left = ways[j]
    return ways[-1] % MOD


def max_pages(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Maximum total pages of books bought, each at most once, within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _require_non_negative("budget", budget)
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + value)
    return best[budget]


def count_array_descriptions(values: Sequence[int], upper: int) -> int:
    """Ways to fill zeros so neighbours differ by at most one and all lie in 1..upper."""
    if not values:
        raise ValueError("values must not be empty")
    for value in values:
        if not 0 <= value <= upper:
            raise ValueError(f"value {value} outside 0..{upper}")

    def allowed(value: int) -> range:
        return range(1, upper + 1) if value == 0 else range(value, value + 1)

    # Padding at 0 and upper + 1 keeps neighbour lookups in range.
    ways = [0] * (upper + 2)
    for x in allowed(values[0]):
        ways[x] = 1
    for value in values[1:]:
        current = [0] * (upper + 2)
        for x in allowed(value):
            current[x] = (ways[x - 1] + ways[x] + ways[x + 1]) % MOD
        ways = current
    return sum(ways[1 : upper + 1]) % MOD


def longest_common_subsequence(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """One longest common subsequence of ``a`` and ``b``."""
    n, m = len(a), len(b)
    # table[i][j] is the LCS length of a[i:] and b[j:].
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                table[i][j] = 1 + table[i + 1][j + 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])

    result: list[T] = []
    i = j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            result.append(a[i])
            i += 1
            j += 1
        elif i + 1 < n and table[i + 1][j] >= table[i][j + 1]:
            i += 1
        else:
            j += 1
    return result


def min_rectangle_cuts(width: int, height: int) -> int:
    """Fewest straight cuts splitting a width x height rectangle into squares."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for w in range(1, width + 1):
        for h in range(1, height + 1):
            if w == h:
                continue
            options = [1 + cuts[k][h] + cuts[w - k][h] for k in range(1, w // 2 + 1)]
            options += [1 + cuts[w][k] + cuts[w][h - k] for k in range(1, h // 2 + 1)]
            cuts[w][h] = min(options)
    return cuts[width][height]


def count_two_sets(n: int) -> int:
    """Ways to split 1..n into two sets of equal sum, modulo 1e9+7."""
    _require_non_negative("n", n)
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for item in range(1, n + 1):
        for s in range(half, item - 1, -1):
            ways[s] = (ways[s] + ways[s - item]) % MOD
    inverse_two = (MOD + 1) // 2
    return ways[half] * inverse_two % MOD


def max_alternating_sum(a: Sequence[int], b: Sequence[int]) -> int:
    """Best total picking items left to right where picks alternate between ``a`` and ``b``.

    The first pick may come from either sequence; positions may be skipped.
    """
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    may_take_a = may_take_b = 0
    for x, y in zip(reversed(a), reversed(b)):
        may_take_a, may_take_b = (
            max(x + may_take_b, may_take_a),
            max(y + may_take_a, may_take_b),
        )
    return max(may_take_a, may_take_b)


def edit_distance(s: str, t: str) -> int:
    """Minimum insertions, deletions and substitutions turning ``s`` into ``t``."""
    previous = list(range(len(t) + 1))
    for i, sc in enumerate(s, start=1):
        current = [i] + [0] * len(t)
        for j, tc in enumerate(t, start=1):
            if sc == tc:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
        previous = current
    return previous[-1]