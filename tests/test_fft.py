import random

import pytest

from algokit.fft import MAGIC, fft, multiply, multiply_mod, multiply_slow


def test_fft_of_delta_is_flat():
    spectrum = fft([1, 0, 0, 0, 0, 0, 0, 0])
    assert all(abs(x - 1) < 1e-12 for x in spectrum)


@pytest.mark.parametrize("n", [1, 2, 8, 64])
def test_fft_round_trip(n):
    rng = random.Random(n)
    values = [rng.uniform(-10, 10) for _ in range(n)]
    back = fft(fft(values), invert=True)
    assert all(abs(x - v) < 1e-9 for x, v in zip(back, values))
    assert len(back) == n


def test_fft_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        fft([1, 2, 3])


def test_multiply_slow_small():
    assert multiply_slow([1, 1], [1, 1]) == [1, 2, 1]


def test_multiply_slow_sum_invariant():
    a = [3, -1, 4, 1, 5]
    b = [9, 2, -6]
    assert sum(multiply_slow(a, b)) == sum(a) * sum(b)
    assert len(multiply_slow(a, b)) == len(a) + len(b) - 1


def test_empty_inputs():
    assert multiply_slow([], [1, 2]) == []
    assert multiply([1], []) == []
    assert multiply_mod([], [], 7) == []


def test_multiply_small_matches_slow():
    a = [5, 0, 3, 2]
    b = [1, 7]
    assert multiply(a, b) == multiply_slow(a, b)


def test_multiply_large_matches_slow():
    rng = random.Random(1)
    a = [rng.randrange(1 << 20) for _ in range(MAGIC + 100)]
    b = [rng.randrange(1 << 20) for _ in range(MAGIC + 20)]
    assert multiply(a, b) == multiply_slow(a, b)


def test_multiply_large_with_negatives():
    rng = random.Random(2)
    a = [rng.randrange(-1000, 1000) for _ in range(MAGIC)]
    b = [rng.randrange(-1000, 1000) for _ in range(MAGIC + 3)]
    assert multiply(a, b) == multiply_slow(a, b)


@pytest.mark.parametrize("mod", [998244353, 1000000007, 101])
def test_multiply_mod_matches_reduced_product(mod):
    rng = random.Random(mod)
    a = [rng.randrange(mod) for _ in range(50)]
    b = [rng.randrange(mod) for _ in range(33)]
    expected = [v % mod for v in multiply_slow(a, b)]
    assert multiply_mod(a, b, mod) == expected


def test_multiply_mod_rejects_bad_modulus():
    with pytest.raises(ValueError):
        multiply_mod([1], [1], 0)