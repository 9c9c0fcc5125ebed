"""Polygon measurements, predicates, convex hulls and transformations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key

from contestlib.geometry import Point

_EPS = 1e-9

Polygon = list[Point]


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a - o).cross(b - o)


def _edges(poly: Sequence[Point]) -> Iterable[tuple[Point, Point]]:
    return zip(poly, [*poly[1:], *poly[:1]])


def polygon_area(poly: Sequence[Point]) -> float:
    """Signed area: positive for counter-clockwise vertex order."""
    if len(poly) < 3:
        return 0.0
    return sum(p.cross(q) for p, q in _edges(poly)) / 2.0


def polygon_area_abs(poly: Sequence[Point]) -> float:
    return abs(polygon_area(poly))


def polygon_perimeter(poly: Sequence[Point]) -> float:
    if len(poly) < 2:
        return 0.0
    return sum(p.distance_to(q) for p, q in _edges(poly))


def is_convex(poly: Sequence[Point]) -> bool:
    """True if every turn along the boundary goes the same way."""
    n = len(poly)
    if n < 3:
        return False
    has_pos = has_neg = False
    for i in range(n):
        turn = _cross(poly[i], poly[(i + 1) % n], poly[(i + 2) % n])
        has_pos = has_pos or turn > _EPS
        has_neg = has_neg or turn < -_EPS
        if has_pos and has_neg:
            return False
    return True


def point_in_polygon(point: Point, poly: Sequence[Point]) -> bool:
    """Ray-casting test for any simple polygon."""
    if len(poly) < 3:
        return False
    inside = False
    for pi, pj in zip(poly, [poly[-1], *poly[:-1]]):
        if (pi.y > point.y) != (pj.y > point.y):
            x_cross = (pj.x - pi.x) * (point.y - pi.y) / (pj.y - pi.y) + pi.x
            if point.x < x_cross:
                inside = not inside
    return inside


def point_in_convex_polygon(point: Point, poly: Sequence[Point]) -> bool:
    """Inside-or-on-boundary test for a convex polygon."""
    if len(poly) < 3:
        return False
    positive = negative = False
    for p, q in _edges(poly):
        turn = _cross(p, q, point)
        positive = positive or turn > _EPS
        negative = negative or turn < -_EPS
        if positive and negative:
            return False
    return True


def point_on_polygon_boundary(point: Point, poly: Sequence[Point]) -> bool:
    for p, q in _edges(poly):
        if abs(_cross(p, q, point)) < _EPS and (
            min(p.x, q.x) - _EPS <= point.x <= max(p.x, q.x) + _EPS
            and min(p.y, q.y) - _EPS <= point.y <= max(p.y, q.y) + _EPS
        ):
            return True
    return False


def convex_hull(points: Iterable[Point]) -> Polygon:
    """Convex hull by Graham scan, counter-clockwise from the lowest point."""
    pts = list(points)
    if len(pts) <= 1:
        return pts
    pivot_idx = 0
    for i, p in enumerate(pts):
        best = pts[pivot_idx]
        if p.y < best.y or (abs(p.y - best.y) < _EPS and p.x < best.x):
            pivot_idx = i
    pts[0], pts[pivot_idx] = pts[pivot_idx], pts[0]
    pivot = pts[0]

    def compare(a: Point, b: Point) -> int:
        turn = _cross(pivot, a, b)
        if abs(turn) < _EPS:
            da, db = pivot.distance_to(a), pivot.distance_to(b)
            return -1 if da < db else (1 if db < da else 0)
        return -1 if turn > 0 else 1

    ordered = [pivot, *sorted(pts[1:], key=cmp_to_key(compare))]
    hull: Polygon = []
    for p in ordered:
        while len(hull) >= 2 and _cross(hull[-2], hull[-1], p) <= _EPS:
            hull.pop()
        hull.append(p)
    return hull


def convex_hull_andrew(points: Iterable[Point]) -> Polygon:
    """Convex hull by Andrew's monotone chain, counter-clockwise."""
    pts = sorted(points)
    if len(pts) <= 1:
        return pts

    def chain(seq: Iterable[Point]) -> Polygon:
        out: Polygon = []
        for p in seq:
            while len(out) >= 2 and _cross(out[-2], out[-1], p) <= _EPS:
                out.pop()
            out.append(p)
        return out

    lower = chain(pts)
    upper = chain(reversed(pts))
    return lower[:-1] + upper[:-1]


def polygon_centroid(poly: Sequence[Point]) -> Point:
    """Centre of mass of the polygon's area; vertex average if it has none."""
    n = len(poly)
    if n == 0:
        return Point(0.0, 0.0)
    if n == 1:
        return poly[0]
    if n == 2:
        return (poly[0] + poly[1]) / 2.0
    area = 0.0
    cx = cy = 0.0
    for p, q in _edges(poly):
        c = p.cross(q)
        area += c
        cx += (p.x + q.x) * c
        cy += (p.y + q.y) * c
    area /= 2.0
    if abs(area) < _EPS:
        return Point(sum(p.x for p in poly) / n, sum(p.y for p in poly) / n)
    return Point(cx / (6.0 * area), cy / (6.0 * area))


def polygons_intersect(poly1: Sequence[Point], poly2: Sequence[Point]) -> bool:
    """True if the polygons overlap, touch along edges or one contains the other."""
    if any(point_in_polygon(p, poly2) for p in poly1):
        return True
    if any(point_in_polygon(p, poly1) for p in poly2):
        return True
    for a1, b1 in _edges(poly1):
        for a2, b2 in _edges(poly2):
            d1 = _cross(a2, b2, a1)
            d2 = _cross(a2, b2, b1)
            d3 = _cross(a1, b1, a2)
            d4 = _cross(a1, b1, b2)
            if ((d1 > _EPS) != (d2 > _EPS)) and ((d3 > _EPS) != (d4 > _EPS)):
                return True
            if all(abs(d) < _EPS for d in (d1, d2, d3, d4)):
                if max(min(a1.x, b1.x), min(a2.x, b2.x)) <= min(
                    max(a1.x, b1.x), max(a2.x, b2.x)
                ) + _EPS and max(min(a1.y, b1.y), min(a2.y, b2.y)) <= min(
                    max(a1.y, b1.y), max(a2.y, b2.y)
                ) + _EPS:
                    return True
    return False


def minkowski_sum(poly1: Sequence[Point], poly2: Sequence[Point]) -> Polygon:
    """Minkowski sum of two convex polygons, as a convex hull."""
    return convex_hull(p + q for p in poly1 for q in poly2)


def rotate_polygon(poly: Sequence[Point], angle: float) -> Polygon:
    """Rotate every vertex about the origin by angle radians."""
    c, s = math.cos(angle), math.sin(angle)
    return [Point(p.x * c - p.y * s, p.x * s + p.y * c) for p in poly]


def translate_polygon(poly: Sequence[Point], translation: Point) -> Polygon:
    return [p + translation for p in poly]


def scale_polygon(poly: Sequence[Point], factor: float) -> Polygon:
    """Scale every vertex about the origin."""
    return [p * factor for p in poly]


@dataclass
class BoundingBox:
    """Axis-aligned box; empty until a point is added."""

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    def add_point(self, point: Point) -> None:
        self.min_x = min(self.min_x, point.x)
        self.min_y = min(self.min_y, point.y)
        self.max_x = max(self.max_x, point.x)
        self.max_y = max(self.max_y, point.y)

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y

    def area(self) -> float:
        return self.width() * self.height()

    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains(self, point: Point) -> bool:
        return (
            self.min_x - _EPS <= point.x <= self.max_x + _EPS
            and self.min_y - _EPS <= point.y <= self.max_y + _EPS
        )

    def intersects(self, other: BoundingBox) -> bool:
        return not (
            self.max_x < other.min_x - _EPS
            or self.min_x > other.max_x + _EPS
            or self.max_y < other.min_y - _EPS
            or self.min_y > other.max_y + _EPS
        )


def bounding_box(poly: Iterable[Point]) -> BoundingBox:
    box = BoundingBox()
    for p in poly:
        box.add_point(p)
    return box


def is_simple_polygon(poly: Sequence[Point]) -> bool:
    """True if no two non-adjacent edges cross properly."""
    n = len(poly)
    if n < 3:
        return True
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            a1, b1 = poly[i], poly[(i + 1) % n]
            a2, b2 = poly[j], poly[(j + 1) % n]
            d1 = _cross(a2, b2, a1)
            d2 = _cross(a2, b2, b1)
            d3 = _cross(a1, b1, a2)
            d4 = _cross(a1, b1, b2)
            if ((d1 > _EPS) != (d2 > _EPS)) and ((d3 > _EPS) != (d4 > _EPS)):
                return False
    return True


def polygon_orientation(poly: Sequence[Point]) -> int:
    """1 for counter-clockwise, -1 for clockwise, 0 for degenerate."""
    area = polygon_area(poly)
    if abs(area) < _EPS:
        return 0
    return 1 if area > 0 else -1


def reverse_polygon(poly: Sequence[Point]) -> Polygon:
    return list(reversed(poly))


def ensure_counter_clockwise(poly: Sequence[Point]) -> Polygon:
    return reverse_polygon(poly) if polygon_orientation(poly) < 0 else list(poly)


def ensure_clockwise(poly: Sequence[Point]) -> Polygon:
    return reverse_polygon(poly) if polygon_orientation(poly) > 0 else list(poly)


def convex_polygon_diameter(poly: Sequence[Point]) -> tuple[Point, Point]:
    """Farthest pair of vertices of a convex polygon (rotating calipers)."""
    n = len(poly)
    if n < 2:
        raise ValueError("diameter needs at least two vertices")
    if n == 2:
        return poly[0], poly[1]
    best = -1.0
    result = (poly[0], poly[1])
    j = 1
    for i in range(n):
        edge = poly[(i + 1) % n] - poly[i]
        while True:
            nxt = (j + 1) % n
            if abs(edge.cross(poly[nxt] - poly[i])) <= abs(edge.cross(poly[j] - poly[i])):
                break
            j = nxt
        dist = poly[i].distance_to(poly[j])
        if dist > best:
            best = dist
            result = (poly[i], poly[j])
    return result