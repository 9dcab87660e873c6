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

from .geometry import geometry, Point, Line, Geometry, IntersectionResult
from . import constants
from .grid import RoomCoord, NORTH, SOUTH, EAST, WEST
from .coordinates import room_to_canvas, canvas_to_room, mirror_point, get_mirrored_room_point
from .mirrors import MirrorWall, MirrorManager, DISABLED, OFF, ON
from .entities import Marker, EntityManager, OBJECT, RECEPTOR
from .room_managers import HomeRoomManager, TargetRoomManager
from .raytrace import RayPath, PathSegment, FoldingDiagnostics, compute_reflection_path, solve_path
from .simple_ray_tracer import trace_ray_in_room
from .line_of_sight import WallCrossing, trace_line_of_sight, fold_line_of_sight
from .mirror_sequence import MirrorStep, calculate_mirror_sequence, calculate_minimum_bounces, minimum_bounces
from .ray_path_calculator import RayPathCalculator
from .session import MirrorMaze

__all__ = [
    'geometry', 'Point', 'Line', 'Geometry', 'IntersectionResult',
    'constants',
    'RoomCoord', 'NORTH', 'SOUTH', 'EAST', 'WEST',
    'room_to_canvas', 'canvas_to_room', 'mirror_point', 'get_mirrored_room_point',
    'MirrorWall', 'MirrorManager', 'DISABLED', 'OFF', 'ON',
    'Marker', 'EntityManager', 'OBJECT', 'RECEPTOR',
    'HomeRoomManager', 'TargetRoomManager',
    'RayPath', 'PathSegment', 'FoldingDiagnostics', 'compute_reflection_path', 'solve_path',
    'trace_ray_in_room',
    'WallCrossing', 'trace_line_of_sight', 'fold_line_of_sight',
    'MirrorStep', 'calculate_mirror_sequence', 'calculate_minimum_bounces', 'minimum_bounces',
    'RayPathCalculator',
    'MirrorMaze',
]
