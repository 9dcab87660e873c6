"""
===============================================================================
Line-of-Sight Walker - Feature Verification
===============================================================================

Tests the room-by-room sight line walk and the folding of its crossings
into drawable canvas segments.

USAGE
-----
    python -m mirror_maze.developer_tests.test_line_of_sight
===============================================================================
"""

import sys
import os

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mirror_maze.core.coordinates import room_to_canvas
from mirror_maze.core.geometry import Point
from mirror_maze.core.grid import RoomCoord, NORTH, SOUTH, EAST, WEST
from mirror_maze.core.line_of_sight import (
    find_room_exit,
    get_entry_point,
    trace_line_of_sight,
    fold_line_of_sight,
)


TOL = 1e-9


def assert_point_close(p, x, y, label=""):
    assert abs(p.x - x) < TOL and abs(p.y - y) < TOL, f"{label}: got {p}, expected ({x}, {y})"


def test_same_room():
    """Test 1: No crossings inside one room."""
    print("\nTest 1: Same room")
    room = RoomCoord(0, 2)
    assert trace_line_of_sight(Point(30, 30), room, Point(200, 200), room) == []
    print("  PASS: empty crossing list")
    return True


def test_straight_east():
    """Test 2: Horizontal walk across two walls."""
    print("\nTest 2: Straight East walk")
    crossings = trace_line_of_sight(Point(120, 120), RoomCoord(0, 1), Point(120, 120), RoomCoord(0, 3))
    assert [c.wall for c in crossings] == [EAST, EAST]
    assert [c.room for c in crossings] == [RoomCoord(0, 1), RoomCoord(0, 2)]
    for c in crossings:
        assert_point_close(c.point, 240, 120, "exit point")
    assert_point_close(crossings[0].canvas_point, 520, 180, "canvas exit")
    print("  PASS: [E, E] through rooms (0,1), (0,2)")
    return True


def test_diagonal():
    """Test 3: The walk re-aims at the object after every crossing."""
    print("\nTest 3: Diagonal walk")
    crossings = trace_line_of_sight(Point(120, 120), RoomCoord(0, 0), Point(60, 120), RoomCoord(1, 1))
    assert [c.wall for c in crossings] == [SOUTH, EAST], [c.wall for c in crossings]
    assert crossings[0].room == RoomCoord(0, 0)
    assert crossings[1].room == RoomCoord(1, 0)
    assert_point_close(crossings[0].point, 210, 240, "south exit")
    assert_point_close(crossings[1].point, 240, 40, "east exit")
    print("  PASS: [S, E] with exits (210,240) and (240,40)")
    return True


def test_max_steps_and_edges():
    """Test 4: The walk stops at max_steps and for a zero direction."""
    print("\nTest 4: Stopping conditions")
    crossings = trace_line_of_sight(Point(120, 120), RoomCoord(0, 1), Point(120, 120), RoomCoord(0, 4),
                                    max_steps=1)
    assert len(crossings) == 1
    assert find_room_exit(Point(120, 120), Point(0, 0), RoomCoord(0, 0)) is None
    assert find_room_exit(Point(120, 120), Point(1e-4, 0), RoomCoord(0, 0)) is None
    exit_west = find_room_exit(Point(120, 120), Point(-5, 0), RoomCoord(0, 0))
    assert exit_west.wall == WEST
    assert_point_close(exit_west.point, 0, 120, "west exit")
    print("  PASS: max_steps respected, no exit without a direction")
    return True


def test_entry_points():
    """Test 5: Entry point lies on the opposite wall of the next room."""
    print("\nTest 5: Entry points")
    assert_point_close(get_entry_point(Point(50, 0), NORTH), 50, 240, "N")
    assert_point_close(get_entry_point(Point(50, 240), SOUTH), 50, 0, "S")
    assert_point_close(get_entry_point(Point(240, 70), EAST), 0, 70, "E")
    assert_point_close(get_entry_point(Point(0, 70), WEST), 240, 70, "W")
    print("  PASS: entry on the opposite wall, same running coordinate")
    return True


def test_fold():
    """Test 6: Folding crossings into canvas segments."""
    print("\nTest 6: Fold")
    obj = room_to_canvas(RoomCoord(0, 3), Point(120, 120))
    rec = room_to_canvas(RoomCoord(0, 1), Point(120, 120))

    direct = fold_line_of_sight(obj, rec, [])
    assert len(direct) == 1 and direct[0].start == obj and direct[0].end == rec

    crossings = trace_line_of_sight(Point(120, 120), RoomCoord(0, 1), Point(120, 120), RoomCoord(0, 3))
    segments = fold_line_of_sight(obj, rec, crossings)
    assert len(segments) == 3
    assert segments[0].start == obj and segments[-1].end == rec
    assert_point_close(segments[0].end, 760, 180, "first crossing")
    assert_point_close(segments[1].end, 520, 180, "second crossing")
    for prev, nxt in zip(segments, segments[1:]):
        assert prev.end == nxt.start
    print("  PASS: object -> crossings -> receptor, all connected")
    return True


def main():
    print("=" * 70)
    print("Line-of-Sight Walker - Feature Verification")
    print("=" * 70)

    results = []
    results.append(("same room",           test_same_room()))
    results.append(("straight East",       test_straight_east()))
    results.append(("diagonal",            test_diagonal()))
    results.append(("stopping conditions", test_max_steps_and_edges()))
    results.append(("entry points",        test_entry_points()))
    results.append(("fold",                test_fold()))

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
