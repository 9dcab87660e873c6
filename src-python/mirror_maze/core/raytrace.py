"""
Copyright 2026 mirror-maze authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Method of Images path solver.

Instead of simulating bounces one by one, the receptor is reflected across
every wall of the intended bounce sequence (last bounce first) to get a
virtual target. A straight ray from the object to the virtual target, folded
back at each wall it crosses, is the real multi-bounce path.

All points handed to the solver must be in one frame. Walls are placed on the
room rectangle whose top-left corner is `origin`: (0, 0) for room-local
coordinates, the room's canvas corner for canvas coordinates.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .constants import (
    ANGLE_TOLERANCE,
    INTERSECTION_EPSILON,
    MIN_VECTOR_LENGTH,
    OBSTRUCTION_TOLERANCE,
    ROOM_HEIGHT,
    ROOM_WIDTH,
)
from .coordinates import wall_segment
from .geometry import geometry, Point, Line
from .grid import NORTH, SOUTH, EAST, HORIZONTAL_WALLS, validate_wall


# Reasons a path can be rejected
FAILURE_DEGENERATE = 'degenerate'
FAILURE_PARALLEL = 'parallel'
FAILURE_BEHIND = 'behind'
FAILURE_OFF_SEGMENT = 'off_segment'
FAILURE_WRONG_DIRECTION = 'wrong_direction'
FAILURE_OBSTRUCTED = 'obstructed'


@dataclass(frozen=True)
class PathSegment:
    """One leg of a light path."""
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return geometry.distance(self.start, self.end)


@dataclass
class BounceRecord:
    """
    A single reflection event.

    Attributes:
        wall: Wall reflected off
        point: Bounce point
        incident: Unit direction arriving at the wall
        reflected: Unit direction leaving the wall
    """
    wall: str
    point: Point
    incident: Point
    reflected: Point


@dataclass
class FoldingDiagnostics:
    """
    What the solver saw while folding one path.

    Attributes:
        line_of_sight_start: Start of the straight ray (the object)
        line_of_sight_end: End of the straight ray (the virtual target)
        bounces: Bounces computed before success or failure
        failure: Why the path was rejected, None for a valid path
        failed_wall: Wall being processed when the failure happened
        obstruction: Where the last leg was blocked, if it was
    """
    line_of_sight_start: Point
    line_of_sight_end: Point
    bounces: List[BounceRecord] = field(default_factory=list)
    failure: Optional[str] = None
    failed_wall: Optional[str] = None
    obstruction: Optional[Point] = None


@dataclass(frozen=True)
class RayPath:
    """
    Result of a path solve. Recomputed on every query.

    Attributes:
        segments: Folded legs from the object to the receptor (partial when invalid)
        virtual_target: The receptor reflected through every wall of the sequence
        valid: False when no physical path exists; callers should not draw it
        diagnostics: Optional record of the folding
    """
    segments: Tuple[PathSegment, ...]
    virtual_target: Point
    valid: bool
    diagnostics: Optional[FoldingDiagnostics] = None

    @property
    def bounce_points(self) -> List[Point]:
        return [seg.end for seg in self.segments[:-1]]


def reflect_point_across_wall(point: Point, wall: str, origin: Optional[Point] = None) -> Point:
    """
    Mirror a point across the line of a room wall.

    Reflecting twice across the same wall returns the original point.

    Args:
        point: The point to reflect
        wall: 'N', 'S', 'E' or 'W'
        origin: Top-left corner of the room, (0, 0) when omitted

    Returns:
        The reflected point
    """
    validate_wall(wall)
    ox = origin.x if origin is not None else 0.0
    oy = origin.y if origin is not None else 0.0

    if wall == NORTH:
        return Point(point.x, 2 * oy - point.y)
    if wall == SOUTH:
        return Point(point.x, 2 * (oy + ROOM_HEIGHT) - point.y)
    if wall == EAST:
        return Point(2 * (ox + ROOM_WIDTH) - point.x, point.y)
    return Point(2 * ox - point.x, point.y)


def compute_virtual_target(
    receptor_pos: Point,
    walls: Sequence[str],
    origin: Optional[Point] = None
) -> Point:
    """
    Reflect the receptor through a bounce sequence.

    Reflections are applied from the last bounce back to the first, each
    across the real wall position. This is exact for any sequence of walls of
    one axis-aligned room, including parallel pairs.

    Args:
        receptor_pos: True receptor position
        walls: Walls in bounce order
        origin: Top-left corner of the room

    Returns:
        The virtual target
    """
    virtual = receptor_pos.copy()
    for wall in reversed(walls):
        virtual = reflect_point_across_wall(virtual, wall, origin)
    return virtual


def reflect_direction(direction: Point, wall: str) -> Point:
    """Negate the velocity component perpendicular to the wall."""
    validate_wall(wall)
    if wall in HORIZONTAL_WALLS:
        return Point(direction.x, -direction.y)
    return Point(-direction.x, direction.y)


def check_angle_law(
    incident: Point,
    reflected: Point,
    wall: str,
    tolerance: float = ANGLE_TOLERANCE
) -> bool:
    """
    Check that the angle of incidence equals the angle of reflection.

    Both vectors are normalized; the component parallel to the wall must be
    unchanged and the perpendicular component negated. Vectors shorter than
    MIN_VECTOR_LENGTH carry no direction and pass.

    Args:
        incident: Vector arriving at the wall
        reflected: Vector leaving the wall
        wall: Wall the bounce happened on
        tolerance: Allowed component difference

    Returns:
        True if the bounce obeys the law of reflection
    """
    validate_wall(wall)
    if (math.hypot(incident.x, incident.y) <= MIN_VECTOR_LENGTH or
            math.hypot(reflected.x, reflected.y) <= MIN_VECTOR_LENGTH):
        return True

    i = geometry.normalize(incident)
    r = geometry.normalize(reflected)
    if wall in HORIZONTAL_WALLS:
        return abs(i.x - r.x) < tolerance and abs(i.y + r.y) < tolerance
    return abs(i.y - r.y) < tolerance and abs(i.x + r.x) < tolerance


def find_wall_hit(
    position: Point,
    direction: Point,
    wall: str,
    origin: Optional[Point] = None
) -> Tuple[Optional[Point], Optional[str]]:
    """
    Where a ray meets a wall of the room.

    The ray is intersected with the wall's infinite line, then the point is
    checked to be ahead of the ray and on the finite wall segment. A valid
    point is snapped exactly onto the wall line.

    Args:
        position: Ray origin
        direction: Ray direction (unit vector)
        wall: Wall to hit
        origin: Top-left corner of the room

    Returns:
        (point, None) on success, (None, failure reason) otherwise
    """
    segment = wall_segment(wall, origin)
    ray = geometry.ray(position, direction)

    point = geometry.lines_intersection(ray, segment)
    if math.isinf(point.x) or math.isinf(point.y):
        return None, FAILURE_PARALLEL

    t = geometry.dot(Point(point.x - position.x, point.y - position.y), direction)
    if t < -INTERSECTION_EPSILON:
        return None, FAILURE_BEHIND

    if not geometry.is_point_on_segment(point, segment):
        return None, FAILURE_OFF_SEGMENT

    if wall in HORIZONTAL_WALLS:
        point = Point(point.x, segment.p1.y)
    else:
        point = Point(segment.p1.x, point.y)
    return point, None


def compute_reflection_path(
    object_pos: Point,
    receptor_pos: Point,
    active_walls: Sequence[str],
    obstacles: Iterable[Line] = (),
    origin: Optional[Point] = None,
    verbose: int = 0
) -> RayPath:
    """
    Compute the folded light path from the object to the receptor.

    Args:
        object_pos: Light source position
        receptor_pos: Light sink position
        active_walls: Reflective walls of the room, in bounce order
        obstacles: Every reflective wall segment that can block the last leg
        origin: Top-left corner of the room in the frame of the points
        verbose: 0 silent, 1 summary, 2 per-bounce detail

    Returns:
        RayPath; `valid` is False when the path leaves a wall segment, points
        the wrong way, or is blocked before reaching the receptor
    """
    walls = [validate_wall(w) for w in active_walls]

    if not walls:
        diagnostics = FoldingDiagnostics(object_pos, receptor_pos)
        return RayPath((PathSegment(object_pos, receptor_pos),), receptor_pos.copy(), True, diagnostics)

    virtual_target = compute_virtual_target(receptor_pos, walls, origin)
    diagnostics = FoldingDiagnostics(object_pos, virtual_target)
    segments: List[PathSegment] = []

    def _result(valid: bool) -> RayPath:
        if verbose >= 1:
            status = 'valid' if valid else f'invalid ({diagnostics.failure})'
            print(f"[raytrace] walls={walls} virtual_target=({virtual_target.x:.3f}, "
                  f"{virtual_target.y:.3f}) segments={len(segments)} -> {status}")
        return RayPath(tuple(segments), virtual_target, valid, diagnostics)

    direction = geometry.normalize(Point(virtual_target.x - object_pos.x,
                                         virtual_target.y - object_pos.y))
    if direction.x == 0 and direction.y == 0:
        diagnostics.failure = FAILURE_DEGENERATE
        return _result(False)

    current = object_pos
    for wall in walls:
        point, failure = find_wall_hit(current, direction, wall, origin)
        if point is None:
            diagnostics.failure = failure
            diagnostics.failed_wall = wall
            return _result(False)

        segments.append(PathSegment(current, point))
        reflected = reflect_direction(direction, wall)
        diagnostics.bounces.append(BounceRecord(wall, point, direction, reflected))
        if verbose >= 2:
            print(f"  bounce {wall} at ({point.x:.3f}, {point.y:.3f}) "
                  f"dir ({direction.x:.4f}, {direction.y:.4f}) -> "
                  f"({reflected.x:.4f}, {reflected.y:.4f})")
        current = point
        direction = reflected

    segments.append(PathSegment(current, receptor_pos))

    distance_to_receptor = geometry.distance(current, receptor_pos)
    if distance_to_receptor > OBSTRUCTION_TOLERANCE:
        final_dir = geometry.normalize(Point(receptor_pos.x - current.x,
                                             receptor_pos.y - current.y))
        if geometry.dot(final_dir, direction) <= 0:
            diagnostics.failure = FAILURE_WRONG_DIRECTION
            return _result(False)

        blocking = geometry.closest_intersection(
            geometry.ray(current, final_dir), obstacles, min_t=OBSTRUCTION_TOLERANCE
        )
        if blocking.hit and blocking.t < distance_to_receptor - OBSTRUCTION_TOLERANCE:
            diagnostics.failure = FAILURE_OBSTRUCTED
            diagnostics.obstruction = blocking.point
            return _result(False)

    return _result(True)


# Name used by the session API
solve_path = compute_reflection_path
