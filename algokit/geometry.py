"""Two-dimensional points and the usual vector, line and polygon predicates."""

import enum
import math
from dataclasses import dataclass

PI = 2.0 * math.acos(0.0)


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Point(-self.x, -self.y)


class Intersection(enum.IntEnum):
    """How two lines meet."""

    INFINITE = -1
    NONE = 0
    POINT = 1


def to_radian(degrees):
    return PI * degrees / 180


def to_degree(radians):
    return 180 * radians / PI


def dist2(p):
    """Squared length of ``p``."""
    return p.x * p.x + p.y * p.y


def dist(p):
    """Length of ``p``."""
    return math.sqrt(dist2(p))


def perp(p):
    """``p`` rotated 90 degrees counter-clockwise."""
    return Point(-p.y, p.x)


def cross(p1, p2):
    return p1.x * p2.y - p1.y * p2.x


def dot(p1, p2):
    return p1.x * p2.x + p1.y * p2.y


def rotl(p):
    return Point(-p.y, p.x)


def rotr(p):
    return Point(p.y, -p.x)


def rotate(p, angle):
    """Rotate ``p`` by ``angle`` radians counter-clockwise about the origin."""
    c, s = math.cos(angle), math.sin(angle)
    return Point(p.x * c - p.y * s, p.x * s + p.y * c)


def unit(p):
    return p / dist(p)


def normal(p):
    return unit(perp(p))


def is_parallel(a, b, c, d):
    """Whether line ``ab`` is parallel to line ``cd``."""
    return cross(b - a, d - c) == 0


def is_collinear(*args):
    """Whether three or four points lie on one line."""
    if len(args) == 3:
        a, b, c = args
        return cross(a - b, a - c) == 0
    if len(args) == 4:
        a, b, c, d = args
        return is_collinear(a, b, c) and is_collinear(b, c, d)
    raise TypeError(f"is_collinear takes 3 or 4 points, got {len(args)}")


def is_left(front, back, p):
    """Whether ``p`` lies strictly left of the directed line from ``back`` to ``front``."""
    return cross(front - back, p - back) > 0


def opposite_sides(a, b, c, d):
    """Whether ``c`` and ``d`` fall on different sides of line ``ab``."""
    return is_left(a, b, c) != is_left(a, b, d)


def is_between(a, b, c):
    """Whether ``c`` lies on the closed segment ``ab``."""
    if not is_collinear(a, b, c):
        return False
    return (
        min(a.x, b.x) <= c.x <= max(a.x, b.x)
        and min(a.y, b.y) <= c.y <= max(a.y, b.y)
    )


def line_intersection(a, b, c, d):
    """Intersect line ``ab`` with line ``cd``.

    Returns ``(kind, point)``; ``point`` is None unless ``kind`` is POINT.
    """
    denominator = cross(b - a, d - c)
    if denominator:
        return Intersection.POINT, c - (d - c) * cross(b - a, c - a) / denominator
    if is_collinear(a, b, c, d):
        return Intersection.INFINITE, None
    return Intersection.NONE, None


def line_dist(a, b, p):
    """Distance from ``p`` to the line through ``a`` and ``b``."""
    return abs(cross(b - a, p - a) / dist(b - a))


def segment_intersect(a, b, c, d):
    """Whether closed segments ``ab`` and ``cd`` share a point."""
    if is_between(a, b, c) or is_between(a, b, d) or is_between(c, d, a) or is_between(c, d, b):
        return True
    return opposite_sides(a, b, c, d) and opposite_sides(c, d, a, b)


def segment_distance(v, w, p):
    """Distance from ``p`` to the closed segment ``vw``."""
    length2 = dist2(v - w)
    if length2 == 0.0:
        return dist(p - v)
    t = max(0.0, min(1.0, dot(p - v, w - v) / length2))
    projection = v + t * (w - v)
    return dist(p - projection)


def in_triangle(a, b, c, d):
    """Whether ``d`` lies strictly inside triangle ``abc``."""
    if is_between(a, b, d) or is_between(a, c, d) or is_between(b, c, d):
        return False
    side = is_left(b, c, d)
    return is_left(a, b, d) == side and is_left(c, a, d) == side


def is_convex(vertices):
    """Whether the polygon with these vertices, in order, turns the same way throughout."""
    n = len(vertices)
    if n < 3:
        raise ValueError("a polygon needs at least three vertices")
    first = is_left(vertices[0], vertices[1], vertices[2])
    return all(
        is_left(vertices[i], vertices[(i + 1) % n], vertices[(i + 2) % n]) == first
        for i in range(1, n)
    )


def polygon_area(vertices):
    """Area of a simple polygon given its vertices in order."""
    if not vertices:
        return 0.0
    origin = vertices[0]
    total = sum(
        cross(p - origin, q - origin) for p, q in zip(vertices[1:], vertices[2:])
    )
    return abs(total / 2.0)