import math

import pytest

from contestlib.geometry import Point
from contestlib.polygons import (
    BoundingBox,
    bounding_box,
    convex_hull,
    convex_hull_andrew,
    convex_polygon_diameter,
    ensure_clockwise,
    ensure_counter_clockwise,
    is_convex,
    is_simple_polygon,
    minkowski_sum,
    point_in_convex_polygon,
    point_in_polygon,
    point_on_polygon_boundary,
    polygon_area,
    polygon_area_abs,
    polygon_centroid,
    polygon_orientation,
    polygon_perimeter,
    polygons_intersect,
    reverse_polygon,
    rotate_polygon,
    scale_polygon,
    translate_polygon,
)

SIDE = 4.0


def square(side=SIDE, x=0.0, y=0.0):
    return [Point(x, y), Point(x + side, y), Point(x + side, y + side), Point(x, y + side)]


def test_area_of_square_matches_side_squared():
    assert polygon_area(square()) == pytest.approx(SIDE * SIDE)


def test_reversed_polygon_negates_area():
    sq = square()
    assert polygon_area(reverse_polygon(sq)) == pytest.approx(-polygon_area(sq))
    assert polygon_area_abs(reverse_polygon(sq)) == pytest.approx(polygon_area(sq))


def test_degenerate_area_is_zero():
    assert polygon_area([Point(0, 0), Point(1, 1)]) == 0.0


def test_perimeter_of_square():
    assert polygon_perimeter(square()) == pytest.approx(4 * SIDE)


def test_convexity():
    assert is_convex(square())
    dart = [Point(0, 0), Point(4, 0), Point(1, 1), Point(0, 4)]
    assert not is_convex(dart)
    assert not is_convex([Point(0, 0), Point(1, 0)])


def test_point_in_polygon():
    sq = square()
    assert point_in_polygon(Point(1, 1), sq)
    assert not point_in_polygon(Point(5, 1), sq)
    assert point_in_convex_polygon(Point(2, 2), sq)
    assert not point_in_convex_polygon(Point(-1, 2), sq)


def test_point_on_boundary():
    sq = square()
    assert point_on_polygon_boundary(Point(SIDE / 2, 0), sq)
    assert not point_on_polygon_boundary(Point(SIDE / 2, SIDE / 2), sq)


def test_source_example_hull_has_four_vertices():
    pts = [Point(0, 0), Point(1, 1), Point(2, 0), Point(1, 2), Point(0, 2)]
    hull = convex_hull(pts)
    assert len(hull) == 4
    assert Point(1, 1) not in hull


def test_hull_algorithms_agree():
    pts = square() + [Point(1, 2), Point(2, 1), Point(3, 3)]
    graham = convex_hull(pts)
    andrew = convex_hull_andrew(pts)
    assert len(graham) == len(andrew) == 4
    assert all(p in andrew for p in graham)
    assert polygon_orientation(graham) == 1
    assert polygon_area(graham) == pytest.approx(polygon_area(square()))


def test_hull_of_single_point():
    assert convex_hull([Point(1, 2)]) == [Point(1, 2)]
    assert convex_hull_andrew([]) == []


def test_centroid_of_square_is_its_center():
    c = polygon_centroid(square())
    assert c == Point(SIDE / 2, SIDE / 2)


def test_centroid_small_inputs():
    assert polygon_centroid([Point(3, 5)]) == Point(3, 5)
    assert polygon_centroid([Point(0, 0), Point(2, 4)]) == Point(1, 2)


def test_polygons_intersect():
    a = square()
    assert polygons_intersect(a, square(x=2, y=2))
    assert not polygons_intersect(a, square(x=10, y=10))
    assert polygons_intersect(a, square(side=1, x=1, y=1))


def test_minkowski_sum_area():
    a = square(side=1.0)
    b = square(side=2.0)
    result = minkowski_sum(a, b)
    assert polygon_area(result) == pytest.approx(polygon_area(square(side=3.0)))


def test_transformations_preserve_or_scale_area():
    sq = square()
    base = polygon_area(sq)
    assert polygon_area(translate_polygon(sq, Point(7, -3))) == pytest.approx(base)
    assert polygon_area(rotate_polygon(sq, 0.7)) == pytest.approx(base)
    assert polygon_area(scale_polygon(sq, 3.0)) == pytest.approx(base * 3.0**2)


def test_rotate_quarter_turn():
    rotated = rotate_polygon([Point(1, 0)], math.pi / 2)
    assert rotated == [Point(0, 1)]


def test_bounding_box():
    pts = [Point(1, 2), Point(-3, 5), Point(4, -1)]
    box = bounding_box(pts)
    assert (box.min_x, box.min_y, box.max_x, box.max_y) == (-3, -1, 4, 5)
    assert box.area() == pytest.approx(box.width() * box.height())
    assert all(box.contains(p) for p in pts)
    assert not box.contains(Point(10, 10))
    assert box.center() == Point(0.5, 2)


def test_bounding_box_intersects():
    a = bounding_box(square())
    b = bounding_box(square(x=3, y=3))
    c = bounding_box(square(x=20, y=20))
    assert a.intersects(b)
    assert not a.intersects(c)
    empty = BoundingBox()
    empty.add_point(Point(1, 1))
    assert empty.width() == 0


def test_simple_polygon():
    assert is_simple_polygon(square())
    bowtie = [Point(0, 0), Point(2, 2), Point(2, 0), Point(0, 2)]
    assert not is_simple_polygon(bowtie)


def test_orientation_helpers():
    sq = square()
    cw = reverse_polygon(sq)
    assert polygon_orientation(cw) == -1
    assert polygon_orientation(ensure_counter_clockwise(cw)) == 1
    assert polygon_orientation(ensure_clockwise(sq)) == -1
    assert polygon_orientation([Point(0, 0), Point(1, 1), Point(2, 2)]) == 0


def test_diameter_of_square_is_diagonal():
    p, q = convex_polygon_diameter(square())
    assert p.distance_to(q) == pytest.approx(SIDE * math.sqrt(2))


def test_diameter_needs_two_points():
    with pytest.raises(ValueError):
        convex_polygon_diameter([Point(0, 0)])
    assert convex_polygon_diameter([Point(0, 0), Point(1, 0)]) == (Point(0, 0), Point(1, 0))