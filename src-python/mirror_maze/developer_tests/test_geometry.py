"""
===============================================================================
Geometry Primitives - Feature Verification
===============================================================================

Tests normalize, ray/segment intersection (numpy solve), closest
intersection with tie and min_t handling, point-on-segment, and the Shapely
backed point-to-segment distance.

USAGE
-----
    python -m mirror_maze.developer_tests.test_geometry
===============================================================================
"""

import sys
import os
import math

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mirror_maze.core.geometry import geometry, Point, Line


def seg(x1, y1, x2, y2):
    return Line(Point(x1, y1), Point(x2, y2))


def test_normalize():
    """Test 1: Unit vectors and the zero vector."""
    print("\nTest 1: normalize")
    n = geometry.normalize(Point(3, 4))
    assert abs(n.x - 0.6) < 1e-12 and abs(n.y - 0.8) < 1e-12
    z = geometry.normalize(Point(0, 0))
    assert z.x == 0 and z.y == 0, "zero input must give the zero vector"
    tiny = geometry.normalize(Point(1e-12, 0))
    assert tiny.x == 0 and tiny.y == 0
    print("  PASS: (3,4) -> (0.6,0.8), zero length -> (0,0)")
    return True


def test_intersect_hit():
    """Test 2: Forward hit reports point and distance."""
    print("\nTest 2: intersect forward hit")
    ray = geometry.ray(Point(0, 0), Point(1, 0))
    result = geometry.intersect(ray, seg(5, -1, 5, 1))
    assert result.hit
    assert abs(result.t - 5) < 1e-12
    assert abs(result.point.x - 5) < 1e-12 and abs(result.point.y) < 1e-12
    print(f"  PASS: hit at {result.point}, t={result.t}")
    return True


def test_intersect_misses():
    """Test 3: Parallel, behind and beyond-the-end cases."""
    print("\nTest 3: intersect misses")
    ray = geometry.ray(Point(0, 0), Point(1, 0))
    assert not geometry.intersect(ray, seg(0, 1, 5, 1)).hit, "parallel"
    assert not geometry.intersect(ray, seg(-5, -1, -5, 1)).hit, "behind"
    assert not geometry.intersect(ray, seg(5, 1, 5, 3)).hit, "past segment end"
    print("  PASS: parallel, behind and off-segment report no hit")
    return True


def test_intersect_touching():
    """Test 4: Endpoints and a ray starting on the segment count as hits."""
    print("\nTest 4: intersect touching cases")
    ray = geometry.ray(Point(0, 0), Point(1, 0))
    assert geometry.intersect(ray, seg(5, 0, 5, 2)).hit, "segment endpoint"
    start_on = geometry.intersect(ray, seg(0, -1, 0, 1))
    assert start_on.hit and abs(start_on.t) < 1e-12, "ray origin on segment"
    print("  PASS: s=0 and t=0 are accepted")
    return True


def test_closest_intersection():
    """Test 5: Smallest t wins; min_t skips the segment the ray starts on."""
    print("\nTest 5: closest_intersection")
    ray = geometry.ray(Point(0, 0), Point(1, 0))
    segments = [seg(5, -1, 5, 1), seg(3, -1, 3, 1), seg(8, -1, 8, 1)]
    result = geometry.closest_intersection(ray, segments)
    assert result.hit and abs(result.t - 3) < 1e-12

    ray2 = geometry.ray(Point(3, 0), Point(1, 0))
    skipped = geometry.closest_intersection(ray2, segments, min_t=1e-6)
    assert skipped.hit and abs(skipped.t - 2) < 1e-12, f"got t={skipped.t}"

    none = geometry.closest_intersection(geometry.ray(Point(0, 0), Point(-1, 0)), segments)
    assert not none.hit
    assert not geometry.closest_intersection(ray, []).hit
    print("  PASS: nearest hit found, min_t respected, empty set gives no hit")
    return True


def test_lines_intersection():
    """Test 6: Infinite line intersection."""
    print("\nTest 6: lines_intersection")
    p = geometry.lines_intersection(seg(0, 0, 1, 1), seg(0, 2, 2, 0))
    assert abs(p.x - 1) < 1e-12 and abs(p.y - 1) < 1e-12
    parallel = geometry.lines_intersection(seg(0, 0, 1, 0), seg(0, 1, 1, 1))
    assert math.isinf(parallel.x) and math.isinf(parallel.y)
    print("  PASS: crossing lines meet at (1,1), parallel lines at infinity")
    return True


def test_point_on_segment():
    """Test 7: Point-on-segment with tolerance."""
    print("\nTest 7: is_point_on_segment")
    s = seg(0, 0, 5, 0)
    assert geometry.is_point_on_segment(Point(2.5, 0), s)
    assert geometry.is_point_on_segment(Point(5 + 1e-8, 0), s), "inside tolerance"
    assert not geometry.is_point_on_segment(Point(6, 0), s)
    assert not geometry.is_point_on_segment(Point(2.5, 1e-3), s)

    assert geometry.cross(Point(1, 0), Point(0, 1)) == 1
    assert geometry.cross(Point(0, 1), Point(1, 0)) == -1
    diagonal = seg(0, 0, 4, 4)
    assert geometry.is_point_on_segment(Point(1, 1), diagonal)
    assert not geometry.is_point_on_segment(Point(1, 1.5), diagonal), "inside the box, off the line"
    print("  PASS: collinear and bounding box checks with tolerance")
    return True


def test_distance_to_segment():
    """Test 8: Shapely point-to-segment distance, clamped to the ends."""
    print("\nTest 8: distance_to_segment")
    s = seg(-1, 0, 1, 0)
    assert abs(geometry.distance_to_segment(Point(0, 5), s) - 5) < 1e-12
    assert abs(geometry.distance_to_segment(Point(3, 0), s) - 2) < 1e-12
    assert abs(geometry.distance(Point(0, 0), Point(3, 4)) - 5) < 1e-12
    print("  PASS: perpendicular and endpoint distances")
    return True


def test_point_conversions():
    """Test 9: Point equality and Shapely round trip."""
    print("\nTest 9: Point helpers")
    p = Point(1.5, -2.0)
    assert p == Point(1.5, -2.0)
    assert p != Point(1.5, 2.0)
    assert Point.from_shapely(p.to_shapely()) == p
    line = seg(0, 0, 3, 4)
    back = Line.from_shapely(line.to_shapely())
    assert back.p1 == line.p1 and back.p2 == line.p2
    assert p.to_dict() == {'x': 1.5, 'y': -2.0}
    print("  PASS: value equality and Shapely conversions")
    return True


def main():
    print("=" * 70)
    print("Geometry Primitives - Feature Verification")
    print("=" * 70)

    results = []
    results.append(("normalize",              test_normalize()))
    results.append(("intersect hit",          test_intersect_hit()))
    results.append(("intersect misses",       test_intersect_misses()))
    results.append(("intersect touching",     test_intersect_touching()))
    results.append(("closest intersection",   test_closest_intersection()))
    results.append(("lines intersection",     test_lines_intersection()))
    results.append(("point on segment",       test_point_on_segment()))
    results.append(("distance to segment",    test_distance_to_segment()))
    results.append(("point helpers",          test_point_conversions()))

    print("\n" + "=" * 70)
    passed = sum(1 for _, ok in results if ok)
    total = len(results)
    print(f"Results: {passed}/{total} tests passed")
    for name, ok in results:
        status = "PASS" if ok else "FAIL"
        print(f"  [{status}] {name}")
    print("=" * 70)

    if passed != total:
        sys.exit(1)


if __name__ == '__main__':
    main()
