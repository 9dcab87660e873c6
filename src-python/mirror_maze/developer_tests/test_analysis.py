"""
===============================================================================
Path Analysis and Export - Feature Verification
===============================================================================

Tests bounce checks, Shapely path length, text/XML descriptions and the
CSV/JSON exporters.

USAGE
-----
    python -m mirror_maze.developer_tests.test_analysis
===============================================================================
"""

import sys
import os
import csv
import json
import tempfile

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mirror_maze.core.coordinates import wall_segment
from mirror_maze.core.geometry import Point
from mirror_maze.core.grid import EAST, SOUTH
from mirror_maze.core.raytrace import compute_reflection_path
from mirror_maze.analysis import (
    check_bounces,
    path_length,
    describe_ray_path,
    save_path_csv,
    ray_path_to_dict,
    save_path_json,
)


def single_bounce_path():
    return compute_reflection_path(Point(60, 120), Point(180, 120), [EAST], obstacles=[wall_segment(EAST)])


def double_bounce_path():
    return compute_reflection_path(Point(100, 40), Point(200, 200), [EAST, SOUTH])


def test_bounce_checks():
    """Test 1: Every bounce of solved paths passes the angle check."""
    print("\nTest 1: Bounce checks")
    checks = check_bounces(double_bounce_path())
    assert [c.wall for c in checks] == [EAST, SOUTH]
    assert all(c.ok for c in checks)
    assert check_bounces(compute_reflection_path(Point(1, 1), Point(2, 2), [])) == []
    print(f"  PASS: {len(checks)} bounces obey the law of reflection")
    return True


def test_path_length():
    """Test 2: Folded length equals the straight distance to the virtual target."""
    print("\nTest 2: Path length")
    assert abs(path_length(single_bounce_path()) - 240) < 1e-9
    assert abs(path_length(double_bounce_path()) - 300) < 1e-9
    invalid = compute_reflection_path(Point(60, 120), Point(180, 120), [EAST, SOUTH])
    assert path_length(invalid) == 0.0
    print("  PASS: 240 and 300, empty path has length 0")
    return True


def test_descriptions():
    """Test 3: Text and XML descriptions."""
    print("\nTest 3: Descriptions")
    text = describe_ray_path(single_bounce_path())
    assert "RayPath (valid)" in text
    assert "bounce E at (240.000, 120.000)" in text

    xml = describe_ray_path(double_bounce_path(), format='xml')
    assert xml.startswith('<?xml')
    assert '<valid>true</valid>' in xml
    assert '<bounce wall="E"' in xml and '<bounce wall="S"' in xml

    invalid = compute_reflection_path(Point(60, 120), Point(180, 120), [EAST, SOUTH])
    assert "failure: off_segment at wall E" in describe_ray_path(invalid)
    assert '<failure>off_segment</failure>' in describe_ray_path(invalid, format='xml')
    print("  PASS: status, bounces and failures described")
    return True


def test_save_csv():
    """Test 4: One CSV row per segment."""
    print("\nTest 4: CSV export")
    with tempfile.TemporaryDirectory() as tmp:
        out = save_path_csv(single_bounce_path(), os.path.join(tmp, 'nested'))
        assert out.exists() and out.name == 'path.csv'
        with open(out, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
    assert rows[0][0] == 'segment_index'
    assert len(rows) == 3
    assert rows[1][6] == 'E' and rows[2][6] == ''
    assert rows[1][3] == '240.0000'
    assert rows[1][7] == 'True'
    print("  PASS: header plus two segment rows")
    return True


def test_save_json():
    """Test 5: JSON export carries segments and diagnostics."""
    print("\nTest 5: JSON export")
    path = double_bounce_path()
    data = ray_path_to_dict(path)
    assert data['valid'] is True
    assert len(data['segments']) == 3
    assert [b['wall'] for b in data['diagnostics']['bounces']] == [EAST, SOUTH]

    with tempfile.TemporaryDirectory() as tmp:
        out = save_path_json(path, tmp, filename='double.json')
        with open(out, encoding='utf-8') as f:
            loaded = json.load(f)
    assert loaded == data
    print("  PASS: dict and file contents match")
    return True


def main():
    print("=" * 70)
    print("Path Analysis and Export - Feature Verification")
    print("=" * 70)

    results = []
    results.append(("bounce checks",   test_bounce_checks()))
    results.append(("path length",     test_path_length()))
    results.append(("descriptions",    test_descriptions()))
    results.append(("CSV export",      test_save_csv()))
    results.append(("JSON export",     test_save_json()))

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
