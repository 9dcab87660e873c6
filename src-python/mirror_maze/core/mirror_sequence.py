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
from typing import List, Optional

from .grid import RoomCoord, NORTH, SOUTH, EAST, WEST, validate_room


@dataclass(frozen=True)
class MirrorStep:
    """One wall the light has to bounce off, in the room where the bounce happens."""
    wall: str
    room: RoomCoord


def calculate_mirror_sequence(home: RoomCoord, target: RoomCoord) -> List[MirrorStep]:
    """
    Decompose the Manhattan path from home to target into wall bounces.

    Horizontal steps come first (one East or West bounce per column), then
    vertical steps (one South or North bounce per row). Each step records the
    room it happens in; the running room advances after every step.

    Args:
        home: Starting room
        target: Room the light should reach

    Returns:
        Ordered steps; empty when home == target
    """
    validate_room(home)
    validate_room(target)

    sequence: List[MirrorStep] = []
    current = home

    col_diff = target.col - home.col
    wall = EAST if col_diff > 0 else WEST
    step = 1 if col_diff > 0 else -1
    for _ in range(abs(col_diff)):
        sequence.append(MirrorStep(wall, current))
        current = current.offset(0, step)

    row_diff = target.row - home.row
    wall = SOUTH if row_diff > 0 else NORTH
    step = 1 if row_diff > 0 else -1
    for _ in range(abs(row_diff)):
        sequence.append(MirrorStep(wall, current))
        current = current.offset(step, 0)

    return sequence


def calculate_minimum_bounces(home: RoomCoord, target: RoomCoord) -> int:
    """Manhattan distance between two rooms."""
    validate_room(home)
    validate_room(target)
    return abs(target.row - home.row) + abs(target.col - home.col)


minimum_bounces = calculate_minimum_bounces


def get_required_mirror(home: RoomCoord, target: RoomCoord) -> Optional[str]:
    """First wall of the bounce sequence, or None when no bounce is needed."""
    sequence = calculate_mirror_sequence(home, target)
    return sequence[0].wall if sequence else None
