"""Digit-wise base-3 addition and subtraction without carries."""


def _tritwise(a, b, combine, mod):
    if a < 0 or b < 0:
        raise ValueError("operands must be non-negative")
    result = 0
    place = 1
    while a or b:
        result += combine(a, b) % 3 * place
        place *= 3
        a //= 3
        b //= 3
    return result if mod is None else result % mod


def xor3(a, b, mod=None):
    """Add ``a`` and ``b`` digit by digit in base 3, dropping carries."""
    return _tritwise(a, b, lambda x, y: x + y, mod)


def dxor3(a, b, mod=None):
    """Subtract ``b`` from ``a`` digit by digit in base 3, dropping borrows."""
    return _tritwise(a, b, lambda x, y: x - y, mod)