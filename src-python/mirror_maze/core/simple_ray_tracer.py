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
Single-room tracer working in the raw room-local frame.

Markers are stored in raw local coordinates, but walls are toggled by the side
on which they are drawn. In a flipped room the two disagree: the wall drawn
as East is the raw frame's West side. Wall identity is remapped through the
room's flip flags before any tracing happens.
"""

from typing import Iterable, List

from .coordinates import flip_wall, wall_segment
from .geometry import geometry, Point
from .grid import NORTH, SOUTH, EAST, WEST
from .mirrors import MirrorWall, BOUNCE_ORDER
from .raytrace import (
    RayPath,
    FoldingDiagnostics,
    FAILURE_WRONG_DIRECTION,
    compute_reflection_path,
    reflect_point_across_wall,
)


def to_local_walls(drawn_walls: Iterable[str], flip_x: bool, flip_y: bool) -> List[str]:
    """
    Map walls named as drawn on the canvas to the raw local frame.

    The order of the input (the bounce order) is preserved.
    """
    return [flip_wall(wall, flip_x, flip_y) for wall in drawn_walls]


def is_heading_toward(direction: Point, wall: str) -> bool:
    """True if the direction has a component pointing at the given wall."""
    if wall == EAST:
        return direction.x > 0
    if wall == WEST:
        return direction.x < 0
    if wall == SOUTH:
        return direction.y > 0
    if wall == NORTH:
        return direction.y < 0
    return False


def trace_ray_in_room(
    object_pos: Point,
    receptor_pos: Point,
    room_mirrors: Iterable[MirrorWall],
    flip_x: bool = False,
    flip_y: bool = False,
    verbose: int = 0
) -> RayPath:
    """
    Trace the light path inside one room.

    With no active wall the path is direct. With exactly one active wall the
    receptor is reflected across it and the cast is only accepted when it
    heads toward that wall. Two or more active walls go through the general
    Method of Images solver.

    Args:
        object_pos: Raw local position of the object
        receptor_pos: Raw local position of the receptor
        room_mirrors: The room's wall slots (any state; only 'on' walls count)
        flip_x: Whether the room is mirrored horizontally
        flip_y: Whether the room is mirrored vertically
        verbose: 0 silent, 1 summary, 2 per-bounce detail

    Returns:
        RayPath in the raw local frame
    """
    active = sorted((m for m in room_mirrors if m.is_on),
                    key=lambda m: BOUNCE_ORDER.index(m.wall))
    local_walls = to_local_walls([m.wall for m in active], flip_x, flip_y)
    obstacles = [wall_segment(wall) for wall in local_walls]

    if verbose >= 1 and active:
        print(f"[simple_tracer] drawn walls {[m.wall for m in active]} -> local {local_walls} "
              f"(flip_x={flip_x}, flip_y={flip_y})")

    if len(local_walls) == 1:
        wall = local_walls[0]
        virtual_target = reflect_point_across_wall(receptor_pos, wall)
        direction = geometry.normalize(Point(virtual_target.x - object_pos.x,
                                             virtual_target.y - object_pos.y))
        if not is_heading_toward(direction, wall):
            diagnostics = FoldingDiagnostics(object_pos, virtual_target,
                                             failure=FAILURE_WRONG_DIRECTION,
                                             failed_wall=wall)
            if verbose >= 1:
                print(f"[simple_tracer] ray does not head toward {wall}, rejected")
            return RayPath((), virtual_target, False, diagnostics)

    return compute_reflection_path(object_pos, receptor_pos, local_walls,
                                   obstacles=obstacles, verbose=verbose)
