"""
===============================================================================
Flip-Aware Single-Room Tracer - Feature Verification
===============================================================================

The single-room tracer works in raw room-local coordinates while walls are
toggled by the side they are drawn on. In flipped rooms East/West (and
North/South) swap. These tests pin down the remap in both directions and
check the tracer against the canvas-space solve.

USAGE
-----
    python -m mirror_maze.developer_tests.test_simple_ray_tracer
===============================================================================
"""

import sys
import os

# Ensure the package is importable when running directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from mirror_maze.core.geometry import Point
from mirror_maze.core.grid import RoomCoord, NORTH, SOUTH, EAST, WEST
from mirror_maze.core.mirrors import MirrorManager
from mirror_maze.core.raytrace import FAILURE_WRONG_DIRECTION
from mirror_maze.core.session import MirrorMaze
from mirror_maze.core.simple_ray_tracer import trace_ray_in_room, to_local_walls, is_heading_toward


TOL = 1e-9


def assert_point_close(p, x, y, label=""):
    assert abs(p.x - x) < TOL and abs(p.y - y) < TOL, f"{label}: got {p}, expected ({x}, {y})"


def test_local_wall_mapping():
    """Test 1: Drawn walls to raw local walls, order preserved."""
    print("\nTest 1: Wall remap")
    assert to_local_walls([EAST, NORTH], True, True) == [WEST, SOUTH]
    assert to_local_walls([EAST, NORTH], False, False) == [EAST, NORTH]
    assert to_local_walls([WEST, SOUTH], True, False) == [EAST, SOUTH]
    assert is_heading_toward(Point(1, 0), EAST) and not is_heading_toward(Point(1, 0), WEST)
    assert is_heading_toward(Point(0, -1), NORTH) and is_heading_toward(Point(0, 1), SOUTH)
    print("  PASS: flip x swaps E/W, flip y swaps N/S")
    return True


def test_no_active_wall():
    """Test 2: Without active walls the path is direct."""
    print("\nTest 2: No active wall")
    mm = MirrorManager()
    path = trace_ray_in_room(Point(60, 120), Point(180, 150), mm.get_room_mirrors(RoomCoord(0, 2)))
    assert path.valid and len(path.segments) == 1
    print("  PASS: direct segment")
    return True


def test_unflipped_east():
    """Test 3: East drawn in an unflipped room is East locally."""
    print("\nTest 3: Unflipped room, East")
    mm = MirrorManager()
    room = RoomCoord(0, 2)
    mm.toggle_wall(room, EAST)
    path = trace_ray_in_room(Point(60, 120), Point(180, 120), mm.get_room_mirrors(room))
    assert path.valid
    assert path.segments[0].end.x == 240
    assert path.diagnostics.bounces[0].wall == EAST
    print(f"  PASS: bounce at {path.segments[0].end}")
    return True


def test_flipped_x_east_is_local_west():
    """Test 4: East drawn in an odd column bounces off the local West side."""
    print("\nTest 4: Flipped column, drawn East")
    mm = MirrorManager()
    room = RoomCoord(0, 1)
    mm.toggle_wall(room, EAST)
    path = trace_ray_in_room(Point(60, 120), Point(180, 120), mm.get_room_mirrors(room),
                             flip_x=True, flip_y=False)
    assert path.valid
    assert path.diagnostics.bounces[0].wall == WEST, path.diagnostics.bounces[0].wall
    assert_point_close(path.segments[0].end, 0, 120, "local bounce")
    assert_point_close(path.virtual_target, -180, 120, "virtual target")
    print("  PASS: local bounce on x=0, drawn on the East side")
    return True


def test_flipped_y_north_is_local_south():
    """Test 5: North drawn in the flipped row bounces off the local South side."""
    print("\nTest 5: Flipped row, drawn North")
    mm = MirrorManager()
    room = RoomCoord(1, 0)
    mm.toggle_wall(room, NORTH)
    path = trace_ray_in_room(Point(120, 120), Point(180, 180), mm.get_room_mirrors(room),
                             flip_x=False, flip_y=True)
    assert path.valid
    assert path.diagnostics.bounces[0].wall == SOUTH
    assert_point_close(path.segments[0].end, 160, 240, "local bounce")
    print("  PASS: local bounce on y=240, drawn on the North side")
    return True


def test_wrong_direction():
    """Test 6: A cast that heads away from the single wall is rejected."""
    print("\nTest 6: Wrong direction")
    mm = MirrorManager()
    room = RoomCoord(0, 2)
    mm.toggle_wall(room, EAST)
    # Receptor beyond the wall: its image lands behind the object
    path = trace_ray_in_room(Point(200, 120), Point(300, 120), mm.get_room_mirrors(room))
    assert not path.valid
    assert path.diagnostics.failure == FAILURE_WRONG_DIRECTION
    assert len(path.segments) == 0
    print("  PASS: rejected with 'wrong_direction'")
    return True


def test_agrees_with_canvas_solve():
    """Test 7: Local tracer mapped to canvas equals the canvas-space solve."""
    print("\nTest 7: Agreement with canvas solve")
    for home in (RoomCoord(0, 1), RoomCoord(0, 2), RoomCoord(1, 1), RoomCoord(1, 2)):
        for wall in (EAST, WEST, NORTH, SOUTH):
            session = MirrorMaze(home_room=home, auto_select_walls=False)
            if not session.toggle_wall(home, wall):
                continue  # structural wall
            canvas = session.calculator.calculate_ray_path()
            local = session.calculator.calculate_local_ray_path()
            assert canvas.valid and local.valid, f"{home} {wall}"
            assert len(canvas.segments) == len(local.segments)
            for a, b in zip(canvas.segments, local.segments):
                assert_point_close(b.start, a.start.x, a.start.y, f"{home} {wall} start")
                assert_point_close(b.end, a.end.x, a.end.y, f"{home} {wall} end")
            assert_point_close(local.virtual_target, canvas.virtual_target.x,
                               canvas.virtual_target.y, f"{home} {wall} virtual")

    session = MirrorMaze(home_room=RoomCoord(0, 1), auto_select_walls=False)
    session.toggle_wall(RoomCoord(0, 1), EAST)
    bounce = session.calculator.calculate_ray_path().segments[0].end
    assert_point_close(bounce, 520, 204, "canvas bounce")
    print("  PASS: both solvers give the same canvas path in flipped and unflipped rooms")
    return True


def main():
    print("=" * 70)
    print("Flip-Aware Single-Room Tracer - Feature Verification")
    print("=" * 70)

    results = []
    results.append(("wall remap",              test_local_wall_mapping()))
    results.append(("no active wall",          test_no_active_wall()))
    results.append(("unflipped East",          test_unflipped_east()))
    results.append(("flipped x East",          test_flipped_x_east_is_local_west()))
    results.append(("flipped y North",         test_flipped_y_north_is_local_south()))
    results.append(("wrong direction",         test_wrong_direction()))
    results.append(("canvas agreement",        test_agrees_with_canvas_solve()))

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
