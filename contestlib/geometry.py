"""Basic planar geometry: points, lines, circles, rectangles and triangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

EPS = 1e-9


class Orientation(IntEnum):
    """Turn direction of an ordered triple of points."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


@dataclass(frozen=True, eq=False)
class Point:
    """A point or vector in the plane; equality is tolerant to EPS."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Point:
        return Point(self.x / factor, self.y / factor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPS and abs(self.y - other.y) < EPS

    def __lt__(self, other: Point) -> bool:
        return self.x < other.x or (abs(self.x - other.x) < EPS and self.y < other.y)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm2(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Point:
        """Unit vector in the same direction, or the zero vector."""
        n = self.norm()
        return Point(self.x / n, self.y / n) if n > EPS else Point(0.0, 0.0)

    def rotate(self, angle: float) -> Point:
        c, s = math.cos(angle), math.sin(angle)
        return Point(self.x * c - self.y * s, self.x * s + self.y * c)

    def perpendicular(self) -> Point:
        return Point(-self.y, self.x)

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    @classmethod
    def polar(cls, r: float, theta: float) -> Point:
        return cls(r * math.cos(theta), r * math.sin(theta))

    def distance_to(self, other: Point) -> float:
        return (self - other).norm()

    def distance_to_squared(self, other: Point) -> float:
        return (self - other).norm2()


@dataclass(frozen=True)
class Line:
    """A line (or segment) through points a and b."""

    a: Point = field(default_factory=Point)
    b: Point = field(default_factory=Point)

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> Line:
        return cls(Point(x1, y1), Point(x2, y2))

    def direction(self) -> Point:
        return self.b - self.a

    def normal(self) -> Point:
        d = self.direction()
        return Point(-d.y, d.x)

    def length(self) -> float:
        return self.direction().norm()

    def point_at(self, t: float) -> Point:
        """Point at parameter t; 0 <= t <= 1 stays on the segment."""
        return self.a + self.direction() * t

    def is_vertical(self) -> bool:
        return abs(self.b.x - self.a.x) < EPS

    def is_horizontal(self) -> bool:
        return abs(self.b.y - self.a.y) < EPS

    def slope(self) -> float:
        """Slope of the line; infinity for a vertical line."""
        if self.is_vertical():
            return math.inf
        return (self.b.y - self.a.y) / (self.b.x - self.a.x)

    def y_intercept(self) -> float:
        """Y value where the line crosses x = 0; infinity for a vertical line."""
        if self.is_vertical():
            return math.inf
        return self.a.y - self.slope() * self.a.x


@dataclass(frozen=True)
class Circle:
    center: Point = field(default_factory=Point)
    radius: float = 0.0

    def contains(self, point: Point) -> bool:
        return (point - self.center).norm() <= self.radius + EPS

    def strictly_contains(self, point: Point) -> bool:
        return (point - self.center).norm() < self.radius - EPS

    def on_boundary(self, point: Point) -> bool:
        return abs((point - self.center).norm() - self.radius) < EPS

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    def point_at(self, theta: float) -> Point:
        return self.center + Point.polar(self.radius, theta)

    def intersects(self, other: Circle) -> bool:
        d = self.center.distance_to(other.center)
        return (
            d <= self.radius + other.radius + EPS
            and d >= abs(self.radius - other.radius) - EPS
        )

    def is_inside(self, other: Circle) -> bool:
        d = self.center.distance_to(other.center)
        return d + self.radius <= other.radius + EPS


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its bottom-left and top-right corners."""

    bottom_left: Point = field(default_factory=Point)
    top_right: Point = field(default_factory=Point)

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> Rectangle:
        return cls(Point(min(x1, x2), min(y1, y2)), Point(max(x1, x2), max(y1, y2)))

    def width(self) -> float:
        return self.top_right.x - self.bottom_left.x

    def height(self) -> float:
        return self.top_right.y - self.bottom_left.y

    def area(self) -> float:
        return self.width() * self.height()

    def perimeter(self) -> float:
        return 2 * (self.width() + self.height())

    def center(self) -> Point:
        return Point(
            (self.bottom_left.x + self.top_right.x) / 2,
            (self.bottom_left.y + self.top_right.y) / 2,
        )

    def contains(self, point: Point) -> bool:
        return (
            self.bottom_left.x - EPS <= point.x <= self.top_right.x + EPS
            and self.bottom_left.y - EPS <= point.y <= self.top_right.y + EPS
        )

    def intersects(self, other: Rectangle) -> bool:
        return not (
            self.top_right.x < other.bottom_left.x - EPS
            or self.bottom_left.x > other.top_right.x + EPS
            or self.top_right.y < other.bottom_left.y - EPS
            or self.bottom_left.y > other.top_right.y + EPS
        )

    def intersection(self, other: Rectangle) -> Rectangle:
        """Overlap of two rectangles, or the empty rectangle at the origin."""
        if not self.intersects(other):
            return Rectangle()
        return Rectangle.from_coords(
            max(self.bottom_left.x, other.bottom_left.x),
            max(self.bottom_left.y, other.bottom_left.y),
            min(self.top_right.x, other.top_right.x),
            min(self.top_right.y, other.top_right.y),
        )

    def vertices(self) -> list[Point]:
        """Corners in counter-clockwise order from the bottom-left."""
        return [
            self.bottom_left,
            Point(self.top_right.x, self.bottom_left.y),
            self.top_right,
            Point(self.bottom_left.x, self.top_right.y),
        ]


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


@dataclass(frozen=True)
class Triangle:
    a: Point = field(default_factory=Point)
    b: Point = field(default_factory=Point)
    c: Point = field(default_factory=Point)

    def _sides(self) -> tuple[float, float, float]:
        return (
            self.b.distance_to(self.c),
            self.c.distance_to(self.a),
            self.a.distance_to(self.b),
        )

    def area(self) -> float:
        return abs((self.b - self.a).cross(self.c - self.a)) / 2.0

    def perimeter(self) -> float:
        return sum(self._sides())

    def centroid(self) -> Point:
        return (self.a + self.b + self.c) / 3.0

    def circumcenter(self) -> Point:
        """Circumcenter, or the origin when the points are collinear."""
        a, b, c = self.a, self.b, self.c
        d = 2 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
        if abs(d) < EPS:
            return Point()
        a2, b2, c2 = a.norm2(), b.norm2(), c.norm2()
        ux = (a2 * (b.y - c.y) + b2 * (c.y - a.y) + c2 * (a.y - b.y)) / d
        uy = (a2 * (c.x - b.x) + b2 * (a.x - c.x) + c2 * (b.x - a.x)) / d
        return Point(ux, uy)

    def circumcircle(self) -> Circle:
        center = self.circumcenter()
        return Circle(center, center.distance_to(self.a))

    def incenter(self) -> Point:
        side_a, side_b, side_c = self._sides()
        total = side_a + side_b + side_c
        return (self.a * side_a + self.b * side_b + self.c * side_c) / total

    def incircle(self) -> Circle:
        s = self.perimeter() / 2.0
        return Circle(self.incenter(), self.area() / s)

    def contains(self, point: Point) -> bool:
        """Barycentric containment test; degenerate triangles contain nothing."""
        a, b, c = self.a, self.b, self.c
        denom = (b.y - c.y) * (a.x - c.x) + (c.x - b.x) * (a.y - c.y)
        if abs(denom) < EPS:
            return False
        alpha = ((b.y - c.y) * (point.x - c.x) + (c.x - b.x) * (point.y - c.y)) / denom
        beta = ((c.y - a.y) * (point.x - c.x) + (a.x - c.x) * (point.y - c.y)) / denom
        gamma = 1 - alpha - beta
        return alpha >= -EPS and beta >= -EPS and gamma >= -EPS

    def is_degenerate(self) -> bool:
        return abs((self.b - self.a).cross(self.c - self.a)) < EPS

    def is_right_angled(self) -> bool:
        a2 = self.b.distance_to_squared(self.c)
        b2 = self.c.distance_to_squared(self.a)
        c2 = self.a.distance_to_squared(self.b)
        return (
            abs(a2 + b2 - c2) < EPS
            or abs(b2 + c2 - a2) < EPS
            or abs(c2 + a2 - b2) < EPS
        )

    def angles(self) -> tuple[float, float, float]:
        """Interior angles at a, b and c, in radians."""
        side_a, side_b, side_c = self._sides()
        angle_a = _clamped_acos(
            (side_b * side_b + side_c * side_c - side_a * side_a) / (2 * side_b * side_c)
        )
        angle_b = _clamped_acos(
            (side_a * side_a + side_c * side_c - side_b * side_b) / (2 * side_a * side_c)
        )
        return angle_a, angle_b, math.pi - angle_a - angle_b


def distance(a: Point, b: Point) -> float:
    return (a - b).norm()


def distance_squared(a: Point, b: Point) -> float:
    return (a - b).norm2()


def cross(o: Point, a: Point, b: Point) -> float:
    """Cross product of the vectors OA and OB."""
    return (a - o).cross(b - o)


def dot(o: Point, a: Point, b: Point) -> float:
    """Dot product of the vectors OA and OB."""
    return (a - o).dot(b - o)


def collinear(a: Point, b: Point, c: Point) -> bool:
    return abs(cross(a, b, c)) < EPS


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    value = cross(a, b, c)
    if abs(value) < EPS:
        return Orientation.COLLINEAR
    return Orientation.COUNTERCLOCKWISE if value > 0 else Orientation.CLOCKWISE


def on_segment(a: Point, b: Point, c: Point) -> bool:
    """True if c lies on the segment from a to b."""
    if not collinear(a, b, c):
        return False
    return (
        min(a.x, b.x) <= c.x + EPS
        and c.x <= max(a.x, b.x) + EPS
        and min(a.y, b.y) <= c.y + EPS
        and c.y <= max(a.y, b.y) + EPS
    )


def angle(a: Point, b: Point, c: Point) -> float:
    """Angle ABC in radians."""
    ba = a - b
    bc = c - b
    return _clamped_acos(ba.dot(bc) / (ba.norm() * bc.norm()))


def signed_angle(u: Point, v: Point) -> float:
    """Signed angle from vector u to vector v in radians."""
    return math.atan2(u.cross(v), u.dot(v))