"""Lagrange-style polynomial interpolation through Newton divided differences."""


def _shift_multiply(basis, x):
    """Multiply the polynomial ``basis`` by (X - x), keeping its length."""
    return [prev - cur * x for prev, cur in zip([0] + basis[:-1], basis)]


def interpolate(xs, ys):
    """Return coefficients a[0..n-1] of the polynomial through the points.

    Duplicate x values raise ZeroDivisionError.
    """
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    xs = [float(x) for x in xs]
    coeffs = [float(y) for y in ys]
    n = len(xs)
    for k in range(n):
        for i in range(k + 1, n):
            coeffs[i] = (coeffs[i] - coeffs[k]) / (xs[i] - xs[k])
    result = [0.0] * n
    basis = [1.0] + [0.0] * (n - 1) if n else []
    for xk, ck in zip(xs, coeffs):
        result = [r + ck * t for r, t in zip(result, basis)]
        basis = _shift_multiply(basis, xk)
    return result


def interpolate_mod(xs, ys, mod):
    """Return the interpolating polynomial's coefficients modulo a prime ``mod``.

    Points whose x values coincide modulo ``mod`` raise ValueError.
    """
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    xs = [x % mod for x in xs]
    coeffs = [y % mod for y in ys]
    n = len(xs)
    for k in range(n):
        for i in range(k + 1, n):
            inverse = pow((xs[i] - xs[k]) % mod, -1, mod)
            coeffs[i] = (coeffs[i] - coeffs[k]) * inverse % mod
    result = [0] * n
    basis = [1 % mod] + [0] * (n - 1) if n else []
    for xk, ck in zip(xs, coeffs):
        result = [(r + ck * t) % mod for r, t in zip(result, basis)]
        basis = [v % mod for v in _shift_multiply(basis, xk)]
    return result