"""Circles through up to three points and the minimum enclosing circle."""

import math
from dataclasses import dataclass

from algokit.geometry import Point, cross, dist2, dot

EPS = 1e-6


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and squared radius."""

    center: Point = Point()
    r2: float = 0.0

    @property
    def radius(self):
        return math.sqrt(self.r2)

    @classmethod
    def from_points(cls, *args):
        """The smallest circle with up to two points on it, or the circle through three."""
        if not args:
            return cls()
        if len(args) == 1:
            return cls(args[0], 0.0)
        if len(args) == 2:
            a, b = args
            center = (a + b) / 2
            return cls(center, dist2(center - a))
        if len(args) == 3:
            a, b, c = args
            area = 2 * cross(b - a, c - a) * cross(b - a, c - a)
            if area == 0:
                raise ValueError("three collinear points have no circumcircle")
            i = dist2(b - c) * dot(a - b, a - c)
            j = dist2(a - c) * dot(b - a, b - c)
            k = dist2(a - b) * dot(c - a, c - b)
            center = Point(
                (i * a.x + j * b.x + k * c.x) / area,
                (i * a.y + j * b.y + k * c.y) / area,
            )
            return cls(center, dist2(center - a))
        raise TypeError(f"a circle is defined by at most 3 points, got {len(args)}")

    def covers(self, p):
        """Whether ``p`` lies inside or on the circle, within a small tolerance."""
        return dist2(self.center - p) <= self.r2 + EPS


def min_covering_circle(points):
    """Return the smallest circle containing every point (Welzl's recursion)."""
    pts = list(points)

    def enclose(count, boundary):
        if len(boundary) == 3:
            return Circle.from_points(*boundary)
        circle = Circle.from_points(*boundary)
        for i, p in enumerate(pts[:count]):
            if not circle.covers(p):
                circle = enclose(i, boundary + [p])
        return circle

    return enclose(len(pts), [])