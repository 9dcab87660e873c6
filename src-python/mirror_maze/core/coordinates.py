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
Coordinate system for the room grid.

Three kinds of points are in play:
- canvas points, in pixels on the whole drawing surface;
- raw room-local points, in [0, ROOM_WIDTH] x [0, ROOM_HEIGHT], where the
  markers are stored;
- mirrored room-local points, i.e. where a raw local point is actually
  rendered inside a given room once that room's flips are applied.

Odd columns are flipped horizontally and the row FLIPPED_ROW is flipped
vertically, so neighbouring rooms show mirror images of the same motif.
"""

import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
    FLIPPED_ROW,
    GRID_COLS,
    GRID_ROWS,
    ROOM_HEIGHT,
    ROOM_WIDTH,
)
from .geometry import Point, Line
from .grid import (
    RoomCoord,
    NORTH, SOUTH, EAST, WEST,
    validate_wall,
    get_grid_offset,
    room_origin,
)


@dataclass
class RoomLocation:
    """A canvas point resolved to the room containing it and its local position."""
    room: RoomCoord
    local_point: Point


def is_room_flipped_x(col: int) -> bool:
    """Odd columns are mirrored horizontally."""
    return col % 2 == 1


def is_room_flipped_y(row: int) -> bool:
    """Only FLIPPED_ROW is mirrored vertically."""
    return row == FLIPPED_ROW


def room_to_canvas(room: RoomCoord, local_point: Point) -> Point:
    """
    Convert a room-local point to canvas coordinates.

    Args:
        room: The room the point belongs to
        local_point: Point relative to the room's top-left corner

    Returns:
        Canvas point
    """
    origin = room_origin(room)
    return Point(origin.x + local_point.x, origin.y + local_point.y)


def canvas_to_room(canvas_point: Point) -> Optional[RoomLocation]:
    """
    Convert a canvas point to the room containing it and a local point.

    A shared edge belongs to the room east (or south) of it. Local points
    closer to the east or south wall than the float spacing at canvas scale
    (about 1e-13) land exactly on that edge in room_to_canvas, so they come
    back as local 0 of the next room rather than as the point passed in.

    Args:
        canvas_point: Point on the canvas

    Returns:
        RoomLocation, or None when the point lies outside the grid
    """
    offset = get_grid_offset()
    relative_x = canvas_point.x - offset.x
    relative_y = canvas_point.y - offset.y

    if (relative_x < 0 or relative_y < 0 or
            relative_x >= GRID_COLS * ROOM_WIDTH or
            relative_y >= GRID_ROWS * ROOM_HEIGHT):
        return None

    col = int(math.floor(relative_x / ROOM_WIDTH))
    row = int(math.floor(relative_y / ROOM_HEIGHT))

    return RoomLocation(
        room=RoomCoord(row, col),
        local_point=Point(relative_x - col * ROOM_WIDTH, relative_y - row * ROOM_HEIGHT),
    )


def mirror_point(point: Point, flip_x: bool, flip_y: bool) -> Point:
    """
    Reflect a local point about the room's own center axes.

    Applying it twice with the same flags returns the original point.
    """
    return Point(
        ROOM_WIDTH - point.x if flip_x else point.x,
        ROOM_HEIGHT - point.y if flip_y else point.y,
    )


def get_mirrored_room_point(room: RoomCoord, local_point: Point) -> Point:
    """Where a raw local point is rendered inside the given room."""
    return mirror_point(local_point, is_room_flipped_x(room.col), is_room_flipped_y(room.row))


def flip_wall(wall: str, flip_x: bool, flip_y: bool) -> str:
    """
    Map a wall between the canvas frame and a flipped local frame.

    A horizontal flip swaps East and West, a vertical flip swaps North and
    South. The mapping is its own inverse.
    """
    validate_wall(wall)
    if flip_x and wall in (EAST, WEST):
        return WEST if wall == EAST else EAST
    if flip_y and wall in (NORTH, SOUTH):
        return SOUTH if wall == NORTH else NORTH
    return wall


def get_local_wall(room: RoomCoord, wall: str) -> str:
    """The wall of the room's raw local frame that is drawn as `wall` on the canvas."""
    return flip_wall(wall, is_room_flipped_x(room.col), is_room_flipped_y(room.row))


def wall_segment(wall: str, origin: Optional[Point] = None) -> Line:
    """
    Segment of a wall of a room whose top-left corner is at `origin`.

    Args:
        wall: 'N', 'S', 'E' or 'W'
        origin: Top-left corner of the room; (0, 0) gives room-local coordinates

    Returns:
        The wall as a Line
    """
    validate_wall(wall)
    ox = origin.x if origin is not None else 0.0
    oy = origin.y if origin is not None else 0.0

    if wall == NORTH:
        return Line(Point(ox, oy), Point(ox + ROOM_WIDTH, oy))
    if wall == SOUTH:
        return Line(Point(ox, oy + ROOM_HEIGHT), Point(ox + ROOM_WIDTH, oy + ROOM_HEIGHT))
    if wall == EAST:
        return Line(Point(ox + ROOM_WIDTH, oy), Point(ox + ROOM_WIDTH, oy + ROOM_HEIGHT))
    return Line(Point(ox, oy), Point(ox, oy + ROOM_HEIGHT))


def canvas_wall_segment(room: RoomCoord, wall: str) -> Line:
    """Canvas-space segment of a room's wall."""
    return wall_segment(wall, room_origin(room))
