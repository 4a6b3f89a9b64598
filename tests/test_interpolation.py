import random

import pytest

from algokit.interpolation import interpolate, interpolate_mod


def _poly(coeffs, x):
    return sum(c * x**i for i, c in enumerate(coeffs))


def test_recovers_quadratic():
    coeffs = [1, 2, 3]
    xs = [0, 1, 2]
    ys = [_poly(coeffs, x) for x in xs]
    result = interpolate(xs, ys)
    assert all(abs(r - c) < 1e-9 for r, c in zip(result, coeffs))
    assert len(result) == 3


def test_passes_through_points():
    rng = random.Random(9)
    xs = [-2.5, -1.0, 0.5, 1.5, 3.0]
    ys = [rng.uniform(-5, 5) for _ in xs]
    result = interpolate(xs, ys)
    for x, y in zip(xs, ys):
        assert abs(_poly(result, x) - y) < 1e-8


def test_single_point_is_constant():
    assert interpolate([4.0], [7.0]) == [7.0]


def test_empty():
    assert interpolate([], []) == []
    assert interpolate_mod([], [], 13) == []


def test_duplicate_x_rejected():
    with pytest.raises(ZeroDivisionError):
        interpolate([1, 1], [2, 3])


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        interpolate([1, 2], [3])
    with pytest.raises(ValueError):
        interpolate_mod([1, 2], [3], 7)


def test_mod_recovers_coefficients():
    mod = 998244353
    coeffs = [5, 0, 7, 11]
    xs = [1, 2, 3, 10]
    ys = [_poly(coeffs, x) % mod for x in xs]
    assert interpolate_mod(xs, ys, mod) == coeffs


def test_mod_passes_through_points():
    mod = 1000003
    rng = random.Random(10)
    xs = rng.sample(range(mod), 8)
    ys = [rng.randrange(mod) for _ in xs]
    result = interpolate_mod(xs, ys, mod)
    for x, y in zip(xs, ys):
        assert _poly(result, x) % mod == y


def test_mod_duplicate_x_rejected():
    with pytest.raises(ValueError):
        interpolate_mod([3, 10], [1, 2], 7)