"""Floating-point FFT and exact integer polynomial multiplication built on it."""

import cmath
import math

MAGIC = 500
_SHIFT = 15
_MASK = (1 << _SHIFT) - 1


def fft(values, invert=False):
    """Return the discrete Fourier transform of ``values`` as complex numbers.

    The length must be a power of two. With ``invert`` the inverse transform
    (including division by the length) is computed.
    """
    a = [complex(v) for v in values]
    n = len(a)
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]

    sign = -1.0 if invert else 1.0
    length = 2
    while length <= n:
        half = length // 2
        twiddles = [cmath.rect(1.0, sign * 2.0 * math.pi * k / length) for k in range(half)]
        for start in range(0, n, length):
            for k, w in enumerate(twiddles):
                u = a[start + k]
                v = a[start + k + half] * w
                a[start + k] = u + v
                a[start + k + half] = u - v
        length <<= 1

    if invert:
        a = [x / n for x in a]
    return a


def multiply_slow(a, b):
    """Return the product of two coefficient lists by direct convolution."""
    if not a or not b:
        return []
    result = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] += x * y
    return result


def _padded_size(need):
    return 1 << (need - 1).bit_length()


def _split_spectra(spectrum, i, n):
    x = spectrum[i]
    y = spectrum[-i % n].conjugate()
    return (x + y) / 2, (x - y) / 2j


def multiply(a, b):
    """Return the exact product of two integer coefficient lists.

    Short inputs are multiplied directly; longer ones through an FFT that
    splits each coefficient into 15-bit halves.
    """
    if not a or not b:
        return []
    if min(len(a), len(b)) < MAGIC:
        return multiply_slow(a, b)

    need = len(a) + len(b) - 1
    n = _padded_size(need)
    fa = fft([complex(v & _MASK, v >> _SHIFT) for v in a] + [0j] * (n - len(a)))
    fb = fft([complex(v & _MASK, v >> _SHIFT) for v in b] + [0j] * (n - len(b)))

    outer = []
    cross = []
    for i in range(n):
        lo_a, hi_a = _split_spectra(fa, i, n)
        lo_b, hi_b = _split_spectra(fb, i, n)
        outer.append(lo_a * lo_b + 1j * hi_a * hi_b)
        cross.append(lo_a * hi_b + hi_a * lo_b)

    outer = fft(outer, invert=True)
    cross = fft(cross, invert=True)
    return [
        round(o.real) + (round(c.real) << _SHIFT) + (round(o.imag) << (2 * _SHIFT))
        for o, c in zip(outer[:need], cross[:need])
    ]


def multiply_mod(a, b, mod):
    """Return the product of two coefficient lists modulo ``mod``.

    Coefficients are expected in ``[0, mod)``.
    """
    if mod < 1:
        raise ValueError("modulus must be positive")
    if not a or not b:
        return []

    need = len(a) + len(b) - 1
    n = _padded_size(need)
    root = math.isqrt(mod) + 10
    fp = fft([complex(v % root, v // root) for v in a] + [0j] * (n - len(a)))
    fq = fft([complex(v % root, v // root) for v in b] + [0j] * (n - len(b)))

    outer = []
    cross = []
    for i in range(n):
        x, y = fp[i], fp[-i % n].conjugate()
        a1, a2 = (x + y) * 0.5, (x - y) * complex(0, -0.5)
        x, y = fq[i], fq[-i % n].conjugate()
        b1, b2 = (x + y) * 0.5, (x - y) * complex(0, -0.5)
        outer.append(a1 * b1 + a2 * b2 * 1j)
        cross.append(a1 * b2 + a2 * b1)

    outer = fft(outer, invert=True)
    cross = fft(cross, invert=True)
    result = []
    for o, c in zip(outer[:need], cross[:need]):
        low = int(o.real + 0.5)
        high = int(o.imag + 0.5) % mod
        middle = int(c.real + 0.5)
        result.append((low + ((high * root + middle) % mod) * root) % mod)
    return result