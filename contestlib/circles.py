"""Circle constructions: intersections, tangents, enclosing circles and inversions."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from typing import Optional

from contestlib.geometry import Circle, Line, Point

_EPS = 1e-9


def tangent_points(circle: Circle, point: Point) -> list[Point]:
    """Points where tangents from point touch circle; empty if point is inside."""
    d = circle.center.distance_to(point)
    if d < circle.radius - _EPS:
        return []
    if abs(d - circle.radius) < _EPS:
        return [point]
    offset = math.acos(circle.radius / d)
    base = (point - circle.center).angle()
    return [
        circle.center + Point.polar(circle.radius, base + offset),
        circle.center + Point.polar(circle.radius, base - offset),
    ]


def tangent_lines(circle: Circle, point: Point) -> list[Line]:
    """Tangent lines from point, each running from point to its touching point."""
    return [Line(point, touch) for touch in tangent_points(circle, point)]


def circumcircle(a: Point, b: Point, c: Point) -> Circle:
    """Circle through three points; raises ValueError if they are collinear."""
    d = 2 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y))
    if abs(d) < _EPS:
        raise ValueError("points are collinear")
    sa = a.x * a.x + a.y * a.y
    sb = b.x * b.x + b.y * b.y
    sc = c.x * c.x + c.y * c.y
    ux = (sa * (b.y - c.y) + sb * (c.y - a.y) + sc * (a.y - b.y)) / d
    uy = (sa * (c.x - b.x) + sb * (a.x - c.x) + sc * (b.x - a.x)) / d
    center = Point(ux, uy)
    return Circle(center, center.distance_to(a))


def circle_circle_intersection(c1: Circle, c2: Circle) -> list[Point]:
    """Common points of two circles; empty for disjoint or identical circles."""
    d = c1.center.distance_to(c2.center)
    r1, r2 = c1.radius, c2.radius
    if d > r1 + r2 + _EPS:
        return []
    if d < abs(r1 - r2) - _EPS:
        return []
    if abs(d) < _EPS and abs(r1 - r2) < _EPS:
        return []
    delta = c2.center - c1.center
    if abs(d - r1 - r2) < _EPS or abs(d - abs(r1 - r2)) < _EPS:
        return [c1.center + delta.normalize() * r1]
    a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    h = math.sqrt(max(0.0, r1 * r1 - a * a))
    base = c1.center + delta * (a / d)
    offset = (delta.normalize() * h).perpendicular()
    return [base + offset, base - offset]


def line_circle_intersection(line: Line, circle: Circle) -> list[Point]:
    """Points where the infinite line through line.a and line.b meets circle."""
    d = line.direction()
    f = line.a - circle.center
    a = d.dot(d)
    if a == 0:
        raise ValueError("line endpoints coincide")
    b = 2 * f.dot(d)
    c = f.dot(f) - circle.radius * circle.radius
    discriminant = b * b - 4 * a * c
    if discriminant < -_EPS:
        return []
    if abs(discriminant) < _EPS:
        return [line.a + d * (-b / (2 * a))]
    root = math.sqrt(discriminant)
    return [line.a + d * ((-b - root) / (2 * a)), line.a + d * ((-b + root) / (2 * a))]


def circles_intersect(c1: Circle, c2: Circle) -> bool:
    """True if the boundaries of the two circles meet."""
    d = c1.center.distance_to(c2.center)
    return abs(c1.radius - c2.radius) - _EPS <= d <= c1.radius + c2.radius + _EPS


def circle_line_intersect(circle: Circle, line: Line) -> bool:
    """True if the infinite line comes within the circle's radius of its center."""
    d = line.direction()
    length2 = d.dot(d)
    if length2 == 0:
        raise ValueError("line endpoints coincide")
    t = (circle.center - line.a).dot(d) / length2
    closest = line.a + d * t
    return circle.center.distance_to(closest) <= circle.radius + _EPS


def circle_distance(c1: Circle, c2: Circle) -> float:
    """Distance between the two centers."""
    return c1.center.distance_to(c2.center)


def circle_inside_circle(inner: Circle, outer: Circle) -> bool:
    d = inner.center.distance_to(outer.center)
    return d + inner.radius <= outer.radius + _EPS


def circle_intersection_area(c1: Circle, c2: Circle) -> float:
    """Area common to both discs."""
    d = c1.center.distance_to(c2.center)
    r1, r2 = c1.radius, c2.radius
    if d >= r1 + r2 - _EPS:
        return 0.0
    if d <= abs(r1 - r2) + _EPS:
        smaller = min(r1, r2)
        return math.pi * smaller * smaller
    alpha = 2 * math.acos((d * d + r1 * r1 - r2 * r2) / (2 * d * r1))
    beta = 2 * math.acos((d * d + r2 * r2 - r1 * r1) / (2 * d * r2))
    return 0.5 * r1 * r1 * (alpha - math.sin(alpha)) + 0.5 * r2 * r2 * (
        beta - math.sin(beta)
    )


def common_tangents(c1: Circle, c2: Circle) -> list[Line]:
    """Common tangents, each from its touching point on c1 to the one on c2."""
    d = c1.center.distance_to(c2.center)
    if abs(d) < _EPS:
        return []
    r1, r2 = c1.radius, c2.radius
    if d < abs(r1 - r2) - _EPS:
        return []
    direction = (c2.center - c1.center).normalize()
    result: list[Line] = []

    if abs(r1 - r2) < _EPS:
        offset = direction.perpendicular() * r1
        result.append(Line(c1.center + offset, c2.center + offset))
        result.append(Line(c1.center - offset, c2.center - offset))
    else:
        turn = math.asin(min(1.0, abs(r1 - r2) / d))
        if r1 > r2:
            turn = -turn
        n1 = direction.rotate(turn).perpendicular()
        n2 = direction.rotate(-turn).perpendicular() * -1
        result.append(Line(c1.center + n1 * r1, c2.center + n1 * r2))
        result.append(Line(c1.center + n2 * r1, c2.center + n2 * r2))

    if d > r1 + r2 + _EPS:
        turn = math.asin((r1 + r2) / d)
        n1 = direction.rotate(turn).perpendicular()
        n2 = direction.rotate(-turn).perpendicular() * -1
        result.append(Line(c1.center - n1 * r1, c2.center + n1 * r2))
        result.append(Line(c1.center - n2 * r1, c2.center + n2 * r2))

    return result


def _circle_on_two(p: Point, q: Point) -> Circle:
    center = (p + q) * 0.5
    return Circle(center, center.distance_to(p))


def _circle_on_three(p: Point, q: Point, r: Point) -> Circle:
    try:
        return circumcircle(p, q, r)
    except ValueError:
        pairs = [(p, q), (q, r), (p, r)]
        far = max(pairs, key=lambda pair: pair[0].distance_to(pair[1]))
        return _circle_on_two(*far)


def smallest_enclosing_circle(
    points: Iterable[Point], rng: Optional[random.Random] = None
) -> Circle:
    """Smallest circle containing every point (Welzl's randomized method)."""
    pts = list(points)
    if not pts:
        raise ValueError("need at least one point")
    (rng or random.Random()).shuffle(pts)
    circle = Circle(pts[0], 0.0)
    for i, p in enumerate(pts):
        if circle.contains(p):
            continue
        circle = Circle(p, 0.0)
        for j, q in enumerate(pts[:i]):
            if circle.contains(q):
                continue
            circle = _circle_on_two(p, q)
            for r in pts[:j]:
                if not circle.contains(r):
                    circle = _circle_on_three(p, q, r)
    return circle


def circles_through_two_points(p1: Point, p2: Point, radius: float) -> list[Circle]:
    """Circles of the given radius passing through both points."""
    d = p1.distance_to(p2)
    if d > 2 * radius + _EPS or abs(d) < _EPS:
        return []
    mid = (p1 + p2) * 0.5
    if abs(d - 2 * radius) < _EPS:
        return [Circle(mid, radius)]
    h = math.sqrt(radius * radius - (d / 2) * (d / 2))
    perp = (p2 - p1).normalize().perpendicular()
    return [Circle(mid + perp * h, radius), Circle(mid - perp * h, radius)]


def invert_point(point: Point, circle: Circle) -> Point:
    """Image of point under inversion in circle; the center has no image."""
    offset = point - circle.center
    dist = offset.norm()
    if abs(dist) < _EPS:
        raise ValueError("the center of inversion has no image")
    return circle.center + offset.normalize() * (circle.radius * circle.radius / dist)


def power_of_point(point: Point, circle: Circle) -> float:
    d = circle.center.distance_to(point)
    return d * d - circle.radius * circle.radius


def radical_axis(c1: Circle, c2: Circle) -> Line:
    """Line of points with equal power to both circles."""
    diff = c2.center - c1.center
    d2 = diff.norm2()
    if abs(d2) < _EPS:
        raise ValueError("concentric circles have no radical axis")
    k = (c1.radius * c1.radius - c2.radius * c2.radius) / d2
    mid = (c1.center + c2.center) * 0.5 + diff * (k * 0.5)
    return Line(mid, mid + diff.perpendicular())


def are_concyclic(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if d lies on the circle through a, b and c."""
    try:
        circle = circumcircle(a, b, c)
    except ValueError:
        return False
    return circle.on_boundary(d)


def apollonius_circle(a: Point, b: Point, ratio: float) -> Circle:
    """Locus of points P with |PA| = ratio * |PB|."""
    if abs(ratio - 1.0) < _EPS:
        raise ValueError("ratio 1 gives a line, not a circle")
    k = ratio * ratio
    center = (a - b * k) / (1 - k)
    radius = abs(ratio) * a.distance_to(b) / abs(1 - k)
    return Circle(center, radius)