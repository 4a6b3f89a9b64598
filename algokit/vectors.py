"""Three-dimensional vectors, lines in coefficient form and planar predicates."""

import math
from dataclasses import dataclass, field

PI = 2.0 * math.acos(0.0)


@dataclass(frozen=True)
class Vector:
    """A vector in space; ``*`` with another vector is the cross product, ``|`` the dot product."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __or__(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector(
                self.y * other.z - self.z * other.y,
                self.z * other.x - self.x * other.z,
                self.x * other.y - self.y * other.x,
            )
        return Vector(other * self.x, other * self.y, other * self.z)

    def __rmul__(self, scalar):
        return Vector(scalar * self.x, scalar * self.y, scalar * self.z)

    def __str__(self):
        return f"{self.x:g}i + {self.y:g}j + {self.z:g}k"

    def norm(self):
        return math.sqrt(self.norm2())

    def norm2(self):
        return self.x * self.x + self.y * self.y + self.z * self.z


@dataclass(frozen=True)
class Line:
    """A planar line ``a*x + b*y = c`` together with two points on it."""

    p1: Vector = field(default_factory=Vector)
    p2: Vector = field(default_factory=Vector)
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0

    @classmethod
    def from_points(cls, p1, p2):
        a = p2.y - p1.y
        b = p1.x - p2.x
        return cls(p1, p2, a, b, a * p1.x + b * p1.y)

    @classmethod
    def from_coefficients(cls, a, b, c):
        if a == 0 and b == 0:
            raise ValueError("a and b cannot both be zero")
        if a == 0:
            p1, p2 = Vector(1, c / b), Vector(2, c / b)
        elif b == 0:
            p1, p2 = Vector(c / a, 1), Vector(c / a, 2)
        else:
            p1, p2 = Vector(1, (c - b) / a), Vector(2, (c - 2.0 * b) / a)
        return cls(p1, p2, a, b, c)


def radian(degrees):
    return PI * degrees / 180.0


def degree(radians):
    return 180 * radians / PI


def lies_collinear(p, q, r):
    """For ``r`` known to be on line ``pq``, whether it lies between ``p`` and ``q``."""
    if p.x == q.x:
        return min(p.y, q.y) <= r.y <= max(p.y, q.y)
    return min(p.x, q.x) <= r.x <= max(p.x, q.x)


def lines_parallel(l1, l2):
    return l1.a * l2.b - l2.a * l1.b == 0


def line_intersection(l1, l2):
    """Point where two non-parallel lines meet."""
    det = l1.a * l2.b - l2.a * l1.b
    if det == 0:
        raise ValueError("lines are parallel")
    return Vector((l2.b * l1.c - l1.b * l2.c) / det, (l1.a * l2.c - l2.a * l1.c) / det)


def lies_on_segment(p, q, r):
    """Whether ``r`` lies on the segment ``pq``."""
    if (q - p) * (r - p) != Vector():
        return False
    return lies_collinear(p, q, r)


def dist_point_line(line, p):
    direction = line.p2 - line.p1
    return (direction * (p - line.p1)).norm() / direction.norm()


def rotate_x(v, theta):
    """Rotate ``v`` about the x axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Vector(v.x, v.y * c - v.z * s, v.y * s + v.z * c)


def rotate_y(v, theta):
    """Rotate ``v`` about the y axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Vector(v.z * s + v.x * c, v.y, v.z * c - v.x * s)


def rotate_z(v, theta):
    """Rotate ``v`` about the z axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Vector(v.x * c - v.y * s, v.x * s + v.y * c, v.z)


def cross2d(v1, v2):
    """The z component of the cross product of two planar vectors."""
    return v1.x * v2.y - v1.y * v2.x


def is_cw(p1, p2, p3):
    return cross2d(p1 - p2, p3 - p2) > 0


def collinear(p1, p2, p3):
    return cross2d(p1 - p2, p3 - p2) == 0


def is_convex(vertices):
    """Whether every turn of the polygon goes the same way."""
    n = len(vertices)
    if n < 3:
        raise ValueError("a polygon needs at least three vertices")
    first = is_cw(vertices[0], vertices[1], vertices[2])
    return all(
        is_cw(vertices[i], vertices[(i + 1) % n], vertices[(i + 2) % n]) == first
        for i in range(1, n)
    )


def polygon_area(vertices):
    """Area of a simple planar polygon given its vertices in order."""
    if not vertices:
        return 0.0
    origin = vertices[0]
    total = sum(
        cross2d(p - origin, q - origin) for p, q in zip(vertices[1:], vertices[2:])
    )
    return abs(total / 2.0)