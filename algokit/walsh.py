"""Fast Walsh-Hadamard transform and XOR convolution of integer sequences."""


def _require_power_of_two(n):
    if n < 1 or n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")


def fwht(values, inverse=False):
    """Return the Walsh-Hadamard transform of ``values``.

    With ``inverse`` set, the result is divided by the length; every entry
    must then be divisible by it.
    """
    data = list(values)
    n = len(data)
    _require_power_of_two(n)
    length = 1
    while 2 * length <= n:
        for start in range(0, n, 2 * length):
            for j in range(start, start + length):
                u, v = data[j], data[j + length]
                data[j], data[j + length] = u + v, u - v
        length <<= 1
    if inverse:
        if any(value % n for value in data):
            raise ValueError("inverse transform is not integral")
        data = [value // n for value in data]
    return data


def xor_multiply(p1, p2):
    """Return the XOR convolution of two sequences of equal power-of-two length."""
    if len(p1) != len(p2):
        raise ValueError("sequences must have the same length")
    f1 = fwht(p1)
    f2 = fwht(p2)
    return fwht([x * y for x, y in zip(f1, f2)], inverse=True)