"""Ternary search on unimodal functions and on sorted sequences."""

_ITERATIONS = 200


def ternary_max(func, start, end):
    """Return the maximum of a unimodal real function on ``[start, end]``."""
    lo, hi = start, end
    for _ in range(_ITERATIONS):
        m1 = (lo * 2 + hi) / 3
        m2 = (lo + 2 * hi) / 3
        if func(m1) > func(m2):
            hi = m2
        else:
            lo = m1
    return func(lo)


def integer_peak(cost, start, end):
    """Return the maximum of a unimodal integer function on ``[start, end]``.

    Binary search on the sign of ``cost(mid + 1) - cost(mid)``.
    """
    while start < end:
        mid = (start + end) // 2
        if cost(mid) > cost(mid + 1):
            end = mid
        else:
            start = mid + 1
    return cost(start)


def integer_ternary(cost, start, end):
    """Return the maximum of a unimodal integer function on ``[start, end]`` by thirds."""
    while start < end:
        third = (end - start) // 3
        mid1 = start + third
        mid2 = end - third
        if cost(mid1) > cost(mid2):
            end = mid2 - 1
        else:
            start = mid1 + 1
    return cost(start)


def ternary_search(values, x):
    """Return an index of ``x`` in the sorted sequence ``values``, or -1."""
    lo, hi = 0, len(values) - 1
    while hi >= lo:
        third = (hi - lo) // 3
        mid1 = lo + third
        mid2 = hi - third
        if values[mid1] == x:
            return mid1
        if values[mid2] == x:
            return mid2
        if x < values[mid1]:
            hi = mid1 - 1
        elif x > values[mid2]:
            lo = mid2 + 1
        else:
            lo, hi = mid1 + 1, mid2 - 1
    return -1