"""Dense matrix helpers: arithmetic, Strassen multiplication and fast powers."""


def _shape(mat):
    if not mat or not mat[0]:
        raise ValueError("matrix must be non-empty")
    width = len(mat[0])
    if any(len(row) != width for row in mat):
        raise ValueError("matrix rows must all have the same length")
    return len(mat), width


def zero_matrix(n, m):
    """Return an ``n`` by ``m`` matrix of zeros."""
    return [[0] * m for _ in range(n)]


def submatrix(mat, i1, i2, j1, j2):
    """Return rows ``i1:i2`` and columns ``j1:j2`` of ``mat`` as a new matrix."""
    return [list(row[j1:j2]) for row in mat[i1:i2]]


def expand(mat):
    """Pad ``mat`` with zeros to a square whose side is a power of two."""
    n, m = _shape(mat)
    side = 1
    while side < max(n, m):
        side *= 2
    result = zero_matrix(side, side)
    for i, row in enumerate(mat):
        result[i][:m] = row
    return result


def _check_same_shape(a, b):
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")


def add(a, b):
    """Return the element-wise sum of two matrices of the same shape."""
    _check_same_shape(a, b)
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def subtract(a, b):
    """Return the element-wise difference of two matrices of the same shape."""
    _check_same_shape(a, b)
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def naive_multiply(a, b):
    """Return the product ``a @ b`` computed by the schoolbook method."""
    _, m1 = _shape(a)
    n2, _ = _shape(b)
    if m1 != n2:
        raise ValueError(f"cannot multiply: inner sizes {m1} and {n2} differ")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def _splittable(a, b):
    n = len(a)
    return (
        n > 2
        and n % 2 == 0
        and len(b) == n
        and all(len(row) == n for row in a)
        and all(len(row) == n for row in b)
    )


def strassen(a, b):
    """Return ``a @ b`` using Strassen's recursion on square matrices.

    Recursion applies to square matrices of even side above 2, so inputs
    are best padded with :func:`expand`; anything else is multiplied directly.
    """
    if not _splittable(a, b):
        return naive_multiply(a, b)
    n = len(a)
    h = n // 2
    a11, a12 = submatrix(a, 0, h, 0, h), submatrix(a, 0, h, h, n)
    a21, a22 = submatrix(a, h, n, 0, h), submatrix(a, h, n, h, n)
    b11, b12 = submatrix(b, 0, h, 0, h), submatrix(b, 0, h, h, n)
    b21, b22 = submatrix(b, h, n, 0, h), submatrix(b, h, n, h, n)

    p1 = strassen(a11, subtract(b12, b22))
    p2 = strassen(add(a11, a12), b22)
    p3 = strassen(add(a21, a22), b11)
    p4 = strassen(a22, subtract(b21, b11))
    p5 = strassen(add(a11, a22), add(b11, b22))
    p6 = strassen(subtract(a12, a22), add(b21, b22))
    p7 = strassen(subtract(a11, a21), add(b11, b12))

    c11 = subtract(add(add(p5, p4), p6), p2)
    c12 = add(p1, p2)
    c21 = add(p3, p4)
    c22 = subtract(subtract(add(p1, p5), p3), p7)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def matrix_power(mat, exponent):
    """Return ``mat`` raised to a positive integer power by repeated squaring."""
    n, m = _shape(mat)
    if n != m:
        raise ValueError("only square matrices can be raised to a power")
    if exponent < 1:
        raise ValueError("exponent must be at least 1")
    result = [list(row) for row in mat]
    base = [list(row) for row in mat]
    remaining = exponent - 1
    while remaining > 0:
        if remaining & 1:
            result = naive_multiply(result, base)
        base = naive_multiply(base, base)
        remaining >>= 1
    return result