"""Closest pair of points in the plane by a sweep over x with a y-ordered window."""

import math
import sys

from sortedcontainers import SortedList


def closest_pair_distance(points):
    """Return the smallest distance between two of ``points`` (x, y pairs).

    Fewer than two points give infinity.
    """
    pts = sorted((float(x), float(y)) for x, y in points)
    best = math.inf
    window = SortedList()
    tail = 0
    for x, y in pts:
        while x - pts[tail][0] >= best:
            tx, ty = pts[tail]
            window.discard((ty, tx))
            tail += 1
        lo = window.bisect_left((y - best, -math.inf))
        hi = window.bisect_left((y + best, -math.inf))
        for oy, ox in window[lo:hi]:
            best = min(best, math.hypot(x - ox, y - oy))
        if best == 0:
            return 0.0
        window.add((y, x))
    return best


def _read_points(text):
    tokens = text.split()
    if not tokens:
        raise ValueError("missing point count")
    n = int(tokens[0])
    values = [float(t) for t in tokens[1 : 1 + 2 * n]]
    if len(values) != 2 * n:
        raise ValueError(f"expected {n} points")
    return list(zip(values[::2], values[1::2]))


def main(argv=None):
    """Read a count and that many points from a file or standard input; print the answer."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    print(f"{closest_pair_distance(_read_points(text)):g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())