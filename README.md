# algokit

Solutions to classic algorithm problems as plain Python functions and
classes: dynamic programming, number theory and combinatorics, sliding
windows, graphs and trees. Everything takes Python values and returns Python
values; invalid arguments raise `ValueError` (or `IndexError` for an unknown
node in `DisjointSet`). The package has no dependencies outside the standard
library.

Counting results are taken modulo 1 000 000 007 where the docstring says so.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `algokit.dp` — dynamic programming

| Function | Returns |
| --- | --- |
| `count_dice_sequences(n)` | ways to reach sum `n` with throws of a six-sided die (mod) |
| `min_coins(coins, target)` | fewest coins summing to `target`, or `-1` if impossible |
| `count_ordered_coin_ways(coins, target)` | ordered ways to make `target` (mod) |
| `count_coin_combinations(coins, target)` | unordered ways to make `target` (mod) |
| `min_digit_removals(n)` | fewest steps to reach 0, each step subtracting one of the number's digits |
| `count_grid_paths(grid)` | right/down paths from top-left to bottom-right, `*` cells are traps (mod) |
| `max_pages(prices, pages, budget)` | best 0/1 knapsack value within `budget` |
| `count_array_descriptions(values, upper)` | ways to replace zeros so neighbours differ by at most 1, values in `1..upper` (mod) |
| `longest_common_subsequence(a, b)` | one longest common subsequence, as a list |
| `min_rectangle_cuts(width, height)` | fewest straight cuts turning a rectangle into squares |
| `count_two_sets(n)` | ways to split `1..n` into two sets of equal sum (mod) |
| `max_alternating_sum(a, b)` | best total when picks, left to right, alternate between `a` and `b` |
| `edit_distance(s, t)` | Levenshtein distance |

```python
from algokit.dp import min_coins, edit_distance

min_coins([1, 5, 7], 11)          # 3
edit_distance("LOVE", "MOVIE")    # 2
```

## `algokit.numbers` — number theory and combinatorics

- `exponentiation(base, exponent)` and `exponentiation_tower(base, middle, top)`
  (`base ** (middle ** top)`), both mod 1e9+7.
- `count_divisors(n)`, `sum_divisors(n)`, `max_common_divisor(values)` (the
  largest number dividing at least two of the values).
- `divisor_analysis(factors)` takes `(prime, exponent)` pairs and returns a
  `DivisorSummary` named tuple with `count`, `total` and `product` of the
  divisors, each mod 1e9+7.
- `count_prime_multiples(n, primes)`: how many of `1..n` are divisible by at
  least one of the primes.
- `is_prime(n)`, `next_prime(n)` (smallest prime strictly greater than `n`).
- `binomial(n, k)`, `count_string_arrangements(text)`,
  `distributing_apples(children, apples)`, `derangements(n)`,
  `count_bracket_sequences(n)`, `count_bracket_completions(n, prefix)`.

```python
from algokit.numbers import binomial, next_prime, divisor_analysis

binomial(5, 3)                         # 10
next_prime(7)                          # 11
divisor_analysis([(2, 2), (3, 1)]).count   # 6
```

## `algokit.windows` — sliding windows

- `sliding_window_sum_xor(n, k, x, a, b, c)`: XOR of all window sums over the
  sequence `x, (a*x+b) % c, ...` of length `n`.
- `sliding_window_mode(values, k)`: most frequent value of each window,
  smallest on ties.
- `sliding_window_mex(values, k)`: smallest non-negative integer missing from
  each window.

## `algokit.graphs` — graphs

- `is_bipartite(adjacency)`: 0-based adjacency lists.
- `escape_monsters(grid)`: moves (`U`, `D`, `L`, `R`) taking `A` to the border
  before any `M` can get there; `""` if `A` is already on the border, `None` if
  there is no escape. `#` is a wall, `.` is floor.
- `shortest_distances(n, edges)`: Dijkstra from node 1 over `(from, to, weight)`
  edges on nodes `1..n`; unreachable nodes give `None`.
- `find_cycle(n, edges)`: a directed cycle with its first node repeated at the
  end, or `None`.
- `topological_order(n, edges)`: order of nodes `0..n-1`, or `None` if there is
  a cycle.
- `longest_route(n, edges)`: route from 1 to `n` through the most nodes of a DAG,
  or `None` if `n` is unreachable.

## `algokit.trees` — trees

- `subordinate_counts(parents)`: `parents[i]` is the boss of employee `i + 2`.
- `tree_diameter(n, edges)` and `farthest_distances(n, edges)` on nodes `1..n`.
- `DisjointSet(n)` over nodes `0..n` with `find`, `union_by_rank` and
  `union_by_size`; the unions return `False` when both nodes were already in the
  same set.

## `algokit.lifting` — ancestor queries

- `TreeAncestor(parents)`: `parents[i]` is the parent of node `i + 1`, `0` marks
  a root. `kth_ancestor(node, k)` returns the ancestor or `None`.
- `RootedTree(n, edges)`: a tree rooted at node 1 with `depth`, `parent`,
  `jump`, `naive_lca`, `lowest_common_ancestor` and `node_on_path(u, v, steps)`
  (the node `steps` edges from `u` towards `v`, or `v` if the path is shorter).

```python
from algokit.lifting import RootedTree

tree = RootedTree(5, [(1, 2), (1, 3), (3, 4), (3, 5)])
tree.lowest_common_ancestor(4, 5)   # 3
tree.node_on_path(2, 4, 2)          # 3
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
problem input from files or standard input or format answers for output;
parse your input into lists, strings and tuples and call the functions
directly.