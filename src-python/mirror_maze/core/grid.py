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

from dataclasses import dataclass
from typing import Iterator, Optional

from .constants import (
    GRID_COLS,
    GRID_ROWS,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    ROOM_WIDTH,
    ROOM_HEIGHT,
)
from .geometry import Point


# Wall symbols, as seen on the canvas: North is the top edge of a room
NORTH = 'N'
SOUTH = 'S'
EAST = 'E'
WEST = 'W'

VALID_WALLS = (NORTH, SOUTH, EAST, WEST)

# Walls a horizontal (N/S) or vertical (E/W) segment belongs to
HORIZONTAL_WALLS = (NORTH, SOUTH)
VERTICAL_WALLS = (EAST, WEST)

OPPOSITE_WALL = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}


@dataclass(frozen=True)
class RoomCoord:
    """
    Address of a room in the grid. Compared and hashed by value.

    Attributes:
        row: 0-based row, 0 <= row < GRID_ROWS
        col: 0-based column, 0 <= col < GRID_COLS
    """
    row: int
    col: int

    def is_in_grid(self) -> bool:
        return 0 <= self.row < GRID_ROWS and 0 <= self.col < GRID_COLS

    def offset(self, d_row: int, d_col: int) -> 'RoomCoord':
        return RoomCoord(self.row + d_row, self.col + d_col)

    def __repr__(self) -> str:
        return f"RoomCoord(row={self.row}, col={self.col})"


def validate_wall(wall: str) -> str:
    """
    Check a wall symbol.

    Raises:
        ValueError: If the symbol is not one of N, S, E, W
    """
    if wall not in VALID_WALLS:
        raise ValueError(
            f"Invalid wall '{wall}'. "
            f"Valid options: {VALID_WALLS}"
        )
    return wall


def validate_room(room: RoomCoord) -> RoomCoord:
    """
    Check that a room address lies inside the grid.

    Raises:
        ValueError: If the room is outside the grid
    """
    if not room.is_in_grid():
        raise ValueError(
            f"Room {room} is outside the {GRID_ROWS}x{GRID_COLS} grid"
        )
    return room


def iter_rooms() -> Iterator[RoomCoord]:
    """Yield every room of the grid in row-major order."""
    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            yield RoomCoord(row, col)


def get_grid_offset() -> Point:
    """Canvas position of the grid's top-left corner (the grid is centered on the canvas)."""
    return Point(GRID_OFFSET_X, GRID_OFFSET_Y)


def room_origin(room: RoomCoord) -> Point:
    """Canvas position of a room's top-left corner."""
    validate_room(room)
    return Point(GRID_OFFSET_X + room.col * ROOM_WIDTH,
                 GRID_OFFSET_Y + room.row * ROOM_HEIGHT)


def get_next_room(room: RoomCoord, wall: str) -> Optional[RoomCoord]:
    """
    The room on the other side of a wall.

    Args:
        room: Current room
        wall: Wall being crossed

    Returns:
        The adjacent room, or None when the wall is on the edge of the grid
    """
    validate_wall(wall)
    if wall == NORTH:
        nxt = room.offset(-1, 0)
    elif wall == SOUTH:
        nxt = room.offset(1, 0)
    elif wall == EAST:
        nxt = room.offset(0, 1)
    else:
        nxt = room.offset(0, -1)
    return nxt if nxt.is_in_grid() else None
