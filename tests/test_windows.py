from collections import Counter
from functools import reduce
from operator import xor

import pytest

from algokit.windows import sliding_window_mex, sliding_window_mode, sliding_window_sum_xor


def _windows(values, k):
    return [values[i : i + k] for i in range(len(values) - k + 1)]


@pytest.mark.parametrize("n,k", [(5, 2), (5, 3), (8, 1), (6, 6), (9, 4)])
def test_sum_xor_constant_sequence(n, k):
    x = 7
    windows = n - k + 1
    expected = k * x if windows % 2 else 0
    assert sliding_window_sum_xor(n, k, x, 1, 0, 100) == expected


def test_sum_xor_single_window():
    assert sliding_window_sum_xor(10, 10, 0, 1, 1, 1000) == sum(range(10))


def test_sum_xor_unit_window_is_xor_of_values():
    n = 20
    assert sliding_window_sum_xor(n, 1, 0, 1, 1, 1000) == reduce(xor, range(n))


def test_sum_xor_wraps_modulo_c():
    assert sliding_window_sum_xor(6, 6, 0, 1, 1, 3) == 2 * sum(range(3))


def test_sum_xor_errors():
    with pytest.raises(ValueError):
        sliding_window_sum_xor(5, 0, 1, 1, 1, 10)
    with pytest.raises(ValueError):
        sliding_window_sum_xor(5, 6, 1, 1, 1, 10)
    with pytest.raises(ValueError):
        sliding_window_sum_xor(5, 2, 1, 1, 1, 0)


@pytest.mark.parametrize(
    "values,k",
    [
        ([1, 2, 3, 4, 5], 3),
        ([3, 1, 3, 1, 2, 2, 2], 2),
        ([5, 5, 4, 4, 4, 5, 1], 4),
        ([9, 8, 7, 9, 8, 7, 9], 3),
        ([2, 2, 2, 2], 4),
    ],
)
def test_sliding_window_mode_invariants(values, k):
    modes = sliding_window_mode(values, k)
    windows = _windows(values, k)
    assert len(modes) == len(windows)
    for mode, window in zip(modes, windows):
        counts = Counter(window)
        best = max(counts.values())
        assert counts[mode] == best
        assert mode == min(v for v, c in counts.items() if c == best)


def test_sliding_window_mode_unit_window():
    values = [4, 1, 7, 1]
    assert sliding_window_mode(values, 1) == values


def test_sliding_window_mode_distinct_values_gives_minimum():
    values = [8, 3, 6, 1, 9, 2]
    assert sliding_window_mode(values, 3) == [min(w) for w in _windows(values, 3)]


def test_sliding_window_mode_errors():
    with pytest.raises(ValueError):
        sliding_window_mode([1, 2], 3)
    with pytest.raises(ValueError):
        sliding_window_mode([1, 2], 0)


@pytest.mark.parametrize(
    "values,k",
    [
        ([0, 1, 2, 3, 0, 1], 3),
        ([1, 2, 0, 5, 0, 2, 1], 4),
        ([-1, 0, 1], 3),
        ([3, 3, 3, 0, 1], 2),
        ([0, 2, 1, 0, 2, 1, 3], 5),
    ],
)
def test_sliding_window_mex_invariants(values, k):
    result = sliding_window_mex(values, k)
    windows = _windows(values, k)
    assert len(result) == len(windows)
    for mex, window in zip(result, windows):
        assert mex not in window
        assert all(m in window for m in range(mex))


def test_sliding_window_mex_all_zeros():
    assert sliding_window_mex([0] * 5, 2) == [1] * 4


def test_sliding_window_mex_without_zero():
    values = [4, 5, 6, 7]
    assert sliding_window_mex(values, 2) == [0] * len(_windows(values, 2))


def test_sliding_window_mex_errors():
    with pytest.raises(ValueError):
        sliding_window_mex([], 1)
    with pytest.raises(ValueError):
        sliding_window_mex([0, 1], 3)