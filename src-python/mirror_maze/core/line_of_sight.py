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
Cross-room line-of-sight walker.

Walks a straight sight line from the receptor toward the object through the
unmirrored tiling of the grid, recording every room boundary it crosses. The
crossings are for drawing only; whether a crossed wall is reflective plays no
part here.
"""

from dataclasses import dataclass
from typing import List, Optional

from .constants import GRID_COLS, GRID_ROWS, MIN_VECTOR_LENGTH, ROOM_HEIGHT, ROOM_WIDTH
from .coordinates import room_to_canvas, wall_segment
from .geometry import geometry, Point
from .grid import (
    RoomCoord,
    NORTH, SOUTH, EAST,
    VALID_WALLS,
    HORIZONTAL_WALLS,
    validate_room,
    get_next_room,
)
from .raytrace import PathSegment


@dataclass
class WallCrossing:
    """
    The sight line leaving a room.

    Attributes:
        point: Exit point, local to `room`
        wall: Wall the line exits through
        room: Room being left
    """
    point: Point
    wall: str
    room: RoomCoord

    @property
    def canvas_point(self) -> Point:
        return room_to_canvas(self.room, self.point)


def grid_position(room: RoomCoord, local_point: Point) -> Point:
    """Position in the unmirrored grid, relative to the grid's top-left corner."""
    return Point(room.col * ROOM_WIDTH + local_point.x, room.row * ROOM_HEIGHT + local_point.y)


def find_room_exit(origin: Point, direction: Point, room: RoomCoord) -> Optional[WallCrossing]:
    """
    Find the wall a ray leaves its room through.

    Args:
        origin: Room-local ray origin
        direction: Ray direction (any length)
        room: The room being walked

    Returns:
        The nearest crossing ahead of the origin, or None for a (near) zero
        direction or when no wall is ahead
    """
    if geometry.distance(Point(0.0, 0.0), direction) < MIN_VECTOR_LENGTH:
        return None

    ray = geometry.ray(origin, geometry.normalize(direction))
    best: Optional[WallCrossing] = None
    best_t = float('inf')

    for wall in VALID_WALLS:
        segment = wall_segment(wall)
        result = geometry.intersect(ray, segment)
        if not result.hit or result.t <= MIN_VECTOR_LENGTH:
            continue
        if result.t < best_t:
            if wall in HORIZONTAL_WALLS:
                point = Point(result.point.x, segment.p1.y)
            else:
                point = Point(segment.p1.x, result.point.y)
            best_t = result.t
            best = WallCrossing(point, wall, room)

    return best


def get_entry_point(exit_point: Point, wall: str) -> Point:
    """Local point in the next room where a line crossing `wall` at `exit_point` enters."""
    if wall == NORTH:
        return Point(exit_point.x, ROOM_HEIGHT)
    if wall == SOUTH:
        return Point(exit_point.x, 0.0)
    if wall == EAST:
        return Point(0.0, exit_point.y)
    return Point(ROOM_WIDTH, exit_point.y)


def trace_line_of_sight(
    receptor_pos: Point,
    receptor_room: RoomCoord,
    object_pos: Point,
    object_room: RoomCoord,
    max_steps: int = GRID_ROWS * GRID_COLS * 2
) -> List[WallCrossing]:
    """
    Walk the sight line from the receptor to the object room by room.

    At each step the direction is re-aimed at the object's grid position, the
    exit wall of the current room is found, and the walk continues from the
    matching entry point of the neighbouring room. The walk stops on reaching
    the object's room, when no exit is found, at the edge of the grid, or
    after `max_steps` crossings.

    Args:
        receptor_pos: Room-local receptor position
        receptor_room: Room the receptor is in
        object_pos: Room-local object position
        object_room: Room the object is in
        max_steps: Upper bound on the number of crossings

    Returns:
        Crossings in walk order (receptor side first); empty for one room
    """
    validate_room(receptor_room)
    validate_room(object_room)

    crossings: List[WallCrossing] = []
    target = grid_position(object_room, object_pos)
    current_room = receptor_room
    current_pos = receptor_pos

    while current_room != object_room and len(crossings) < max_steps:
        here = grid_position(current_room, current_pos)
        crossing = find_room_exit(current_pos, Point(target.x - here.x, target.y - here.y), current_room)
        if crossing is None:
            break
        crossings.append(crossing)

        next_room = get_next_room(current_room, crossing.wall)
        if next_room is None:
            break
        current_room = next_room
        current_pos = get_entry_point(crossing.point, crossing.wall)

    return crossings


def fold_line_of_sight(
    object_pos: Point,
    receptor_pos: Point,
    crossings: List[WallCrossing]
) -> List[PathSegment]:
    """
    Turn a list of crossings into drawable segments.

    Args:
        object_pos: Canvas position of the object
        receptor_pos: Canvas position of the receptor
        crossings: Output of trace_line_of_sight (receptor side first)

    Returns:
        Segments object -> crossings -> receptor in canvas space; a single
        direct segment when there are no crossings
    """
    points = [object_pos]
    points.extend(c.canvas_point for c in reversed(crossings))
    points.append(receptor_pos)
    return [PathSegment(start, end) for start, end in zip(points, points[1:])]
