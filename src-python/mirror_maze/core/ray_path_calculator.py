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

from typing import List, Optional, Tuple

from .coordinates import get_mirrored_room_point, is_room_flipped_x, is_room_flipped_y, room_to_canvas
from .entities import EntityManager, Marker, OBJECT, RECEPTOR
from .geometry import Point
from .grid import RoomCoord, room_origin
from .line_of_sight import WallCrossing, trace_line_of_sight, fold_line_of_sight
from .mirror_sequence import MirrorStep, calculate_mirror_sequence
from .mirrors import MirrorManager
from .raytrace import RayPath, PathSegment, compute_reflection_path
from .room_managers import HomeRoomManager, TargetRoomManager
from .simple_ray_tracer import trace_ray_in_room


class RayPathCalculator:
    """
    Reads the managers of a session and produces canvas-space light paths.

    Holds no state of its own besides references to the managers; every call
    recomputes from the current wall and marker state.

    Attributes:
        home_room_manager (HomeRoomManager): Current home room
        target_room_manager (TargetRoomManager): Current target room
        entity_manager (EntityManager): Object and receptor markers
        mirror_manager (MirrorManager): Wall states
        verbose (int): 0 silent, 1 summary, 2 per-bounce detail
    """

    def __init__(
        self,
        home_room_manager: HomeRoomManager,
        target_room_manager: TargetRoomManager,
        entity_manager: EntityManager,
        mirror_manager: MirrorManager,
        verbose: int = 0
    ) -> None:
        self.home_room_manager = home_room_manager
        self.target_room_manager = target_room_manager
        self.entity_manager = entity_manager
        self.mirror_manager = mirror_manager
        self.verbose = verbose

    def _get_markers(self) -> Optional[Tuple[Marker, Marker]]:
        obj = self.entity_manager.get_marker(OBJECT)
        receptor = self.entity_manager.get_marker(RECEPTOR)
        if obj is None or receptor is None:
            return None
        return obj, receptor

    def calculate_mirror_sequence(self) -> List[MirrorStep]:
        """Bounces logically required to reach the target room from the home room."""
        return calculate_mirror_sequence(
            self.home_room_manager.get_current_home_room(),
            self.target_room_manager.get_current_target_room(),
        )

    def calculate_ray_path(self) -> Optional[RayPath]:
        """
        Solve the light path of the home room in canvas space.

        Markers are placed where they are rendered (mirrored per room flips)
        and walls are the ones drawn on the canvas, so the result can be drawn
        as is. Every active wall in the grid counts as an obstacle.

        Returns:
            RayPath, or None when a marker is missing
        """
        markers = self._get_markers()
        if markers is None:
            return None
        obj, receptor = markers

        home = self.home_room_manager.get_current_home_room()
        object_pos = room_to_canvas(home, get_mirrored_room_point(home, obj.position))
        receptor_pos = room_to_canvas(home, get_mirrored_room_point(home, receptor.position))

        return compute_reflection_path(
            object_pos,
            receptor_pos,
            self.mirror_manager.get_active_walls(home),
            obstacles=self.mirror_manager.get_all_active_wall_segments(),
            origin=room_origin(home),
            verbose=self.verbose,
        )

    def calculate_local_ray_path(self) -> Optional[RayPath]:
        """
        Solve the home room with the flip-aware single-room tracer.

        The tracer runs in the raw local frame; segments and the virtual
        target are mapped to canvas space afterwards. Diagnostics stay in the
        raw local frame.

        Returns:
            RayPath in canvas space, or None when a marker is missing
        """
        markers = self._get_markers()
        if markers is None:
            return None
        obj, receptor = markers

        home = self.home_room_manager.get_current_home_room()
        local_path = trace_ray_in_room(
            obj.position,
            receptor.position,
            self.mirror_manager.get_room_mirrors(home),
            flip_x=is_room_flipped_x(home.col),
            flip_y=is_room_flipped_y(home.row),
            verbose=self.verbose,
        )

        def to_canvas(point: Point) -> Point:
            return room_to_canvas(home, get_mirrored_room_point(home, point))

        segments = tuple(PathSegment(to_canvas(s.start), to_canvas(s.end)) for s in local_path.segments)
        return RayPath(segments, to_canvas(local_path.virtual_target), local_path.valid, local_path.diagnostics)

    def get_virtual_object_position(self) -> Optional[Point]:
        """
        The object's local position shown in the target room.

        Returns:
            Canvas point, or None when there is no valid path
        """
        path = self.calculate_ray_path()
        if path is None or not path.valid:
            return None
        obj = self.entity_manager.get_marker(OBJECT)
        return room_to_canvas(self.target_room_manager.get_current_target_room(), obj.position)

    def calculate_line_of_sight(self) -> List[WallCrossing]:
        """Room boundaries crossed walking from the receptor to the object's image in the target room."""
        markers = self._get_markers()
        if markers is None:
            return []
        obj, receptor = markers
        return trace_line_of_sight(
            receptor.position,
            self.home_room_manager.get_current_home_room(),
            obj.position,
            self.target_room_manager.get_current_target_room(),
        )

    def calculate_sight_line(self) -> List[PathSegment]:
        """Canvas segments of the line of sight, object image first."""
        markers = self._get_markers()
        if markers is None:
            return []
        obj, receptor = markers
        home: RoomCoord = self.home_room_manager.get_current_home_room()
        target: RoomCoord = self.target_room_manager.get_current_target_room()
        return fold_line_of_sight(
            room_to_canvas(target, obj.position),
            room_to_canvas(home, receptor.position),
            self.calculate_line_of_sight(),
        )
