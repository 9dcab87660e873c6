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

import uuid as uuid_module
from typing import Callable, List, Optional

from .constants import (
    DEFAULT_HOME_ROOM,
    DEFAULT_TARGET_ROOM,
    DEFAULT_OBJECT_POSITION,
    DEFAULT_RECEPTOR_POSITION,
    WALL_HIT_THRESHOLD,
)
from .entities import EntityManager, Marker, OBJECT, RECEPTOR, clamp_to_room
from .geometry import Point
from .grid import RoomCoord
from .line_of_sight import WallCrossing
from .mirror_sequence import MirrorStep, calculate_minimum_bounces
from .mirrors import MirrorManager, MirrorWall
from .ray_path_calculator import RayPathCalculator
from .raytrace import RayPath
from .room_managers import HomeRoomManager, TargetRoomManager


# Session events passed to listeners
WALL_TOGGLED = 'wall_toggled'
HOME_ROOM_CHANGED = 'home_room_changed'
TARGET_ROOM_CHANGED = 'target_room_changed'
MARKER_MOVED = 'marker_moved'

SessionListener = Callable[[str], None]


class MirrorMaze:
    """
    Session controller: owns the wall model, the markers and the room
    selection, and answers path queries against them.

    Every mutation (toggle, home room change, target room change, marker
    move) is applied completely, including wall transfer and auto-selection,
    before any listener is called, so a path solved from a listener always
    sees a consistent wall state.

    Attributes:
        name (str or None): Optional name for the session
        entity_manager (EntityManager): The object and receptor markers
        mirror_manager (MirrorManager): Wall states
        home_room_manager (HomeRoomManager): Current home room
        target_room_manager (TargetRoomManager): Current target room
        calculator (RayPathCalculator): Path queries bound to the managers

    Properties:
        hit_threshold (float): Max click distance in pixels for hitting a wall
        auto_select_walls (bool): Whether room changes switch on the walls facing the target
        verbose (int): 0 silent, 1 summary, 2 per-bounce detail
    """

    VALID_VERBOSE_LEVELS = (0, 1, 2)

    def __init__(
        self,
        home_room: Optional[RoomCoord] = None,
        target_room: Optional[RoomCoord] = None,
        object_position: Optional[Point] = None,
        receptor_position: Optional[Point] = None,
        auto_select_walls: bool = True,
        verbose: int = 0,
        name: Optional[str] = None
    ):
        home = home_room if home_room is not None else RoomCoord(*DEFAULT_HOME_ROOM)
        target = target_room if target_room is not None else RoomCoord(*DEFAULT_TARGET_ROOM)
        if object_position is None:
            object_position = Point(*DEFAULT_OBJECT_POSITION)
        if receptor_position is None:
            receptor_position = Point(*DEFAULT_RECEPTOR_POSITION)

        self.name = name
        self._uuid: str = str(uuid_module.uuid4())
        self._hit_threshold: float = WALL_HIT_THRESHOLD
        self._auto_select_walls: bool = True
        self._verbose: int = 0
        self._listeners: List[SessionListener] = []

        self.entity_manager = EntityManager()
        self.entity_manager.add_marker(Marker(OBJECT, home, clamp_to_room(object_position)))
        self.entity_manager.add_marker(Marker(RECEPTOR, home, clamp_to_room(receptor_position)))

        self.mirror_manager = MirrorManager()
        self.home_room_manager = HomeRoomManager(self.entity_manager, home)
        self.target_room_manager = TargetRoomManager(target)
        self.calculator = RayPathCalculator(
            self.home_room_manager,
            self.target_room_manager,
            self.entity_manager,
            self.mirror_manager,
        )

        # Registered first so wall updates finish before any other room listener runs
        self.home_room_manager.add_listener(self._on_home_room_changed)
        self.target_room_manager.add_listener(self._on_target_room_changed)

        self.auto_select_walls = auto_select_walls
        self.verbose = verbose

        if self._auto_select_walls:
            self.mirror_manager.auto_select_walls(home, target)

    @property
    def uuid(self) -> str:
        """Unique identifier of the session."""
        return self._uuid

    @property
    def hit_threshold(self) -> float:
        return self._hit_threshold

    @hit_threshold.setter
    def hit_threshold(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"hit_threshold must be a positive number, got {value}")
        self._hit_threshold = value

    @property
    def auto_select_walls(self) -> bool:
        return self._auto_select_walls

    @auto_select_walls.setter
    def auto_select_walls(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ValueError(f"auto_select_walls must be a bool, got {value!r}")
        self._auto_select_walls = value

    @property
    def verbose(self) -> int:
        return self._verbose

    @verbose.setter
    def verbose(self, value: int) -> None:
        """Set the diagnostic level, passed on to the wall model and the calculator."""
        if value not in self.VALID_VERBOSE_LEVELS or isinstance(value, bool):
            raise ValueError(
                f"Invalid verbose level '{value}'. "
                f"Valid options: {self.VALID_VERBOSE_LEVELS}"
            )
        self._verbose = value
        self.mirror_manager.verbose = value
        self.calculator.verbose = value

    # ------------------------------------------------------------------
    # Room selection hooks
    # ------------------------------------------------------------------

    def _on_home_room_changed(self, new: RoomCoord, old: RoomCoord) -> None:
        target = self.target_room_manager.get_current_target_room() if self._auto_select_walls else None
        self.mirror_manager.change_home_room(old, new, target)

    def _on_target_room_changed(self, new: RoomCoord, old: RoomCoord) -> None:
        if self._auto_select_walls:
            self.mirror_manager.auto_select_walls(self.home_room_manager.get_current_home_room(), new)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def toggle_wall(self, room: RoomCoord, wall: str) -> bool:
        """
        Toggle one wall between 'off' and 'on'.

        Returns:
            True if the wall changed; disabled walls never do
        """
        changed = self.mirror_manager.toggle_wall(room, wall)
        if changed:
            self._notify(WALL_TOGGLED)
        return changed

    def handle_click(self, canvas_point: Point) -> Optional[MirrorWall]:
        """Toggle the home-room wall under a canvas point, if any."""
        mirror = self.mirror_manager.handle_click(
            canvas_point, self.home_room, self._hit_threshold
        )
        if mirror is not None:
            self._notify(WALL_TOGGLED)
        return mirror

    def set_home_room(self, room: RoomCoord) -> bool:
        """
        Move both markers and the wall configuration to another room.

        Returns:
            True if the home room changed
        """
        changed = self.home_room_manager.set_home_room(room)
        if changed:
            self._notify(HOME_ROOM_CHANGED)
        return changed

    def set_target_room(self, room: RoomCoord) -> bool:
        """
        Select the room the light should reach.

        Returns:
            True if the target room changed
        """
        changed = self.target_room_manager.set_target_room(room)
        if changed:
            self._notify(TARGET_ROOM_CHANGED)
        return changed

    def move_marker(self, kind: str, local_point: Point) -> Optional[Marker]:
        """Move a marker inside the home room (clamped away from the walls)."""
        marker = self.entity_manager.set_position(kind, local_point)
        if marker is not None:
            self._notify(MARKER_MOVED)
        return marker

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def home_room(self) -> RoomCoord:
        return self.home_room_manager.get_current_home_room()

    @property
    def target_room(self) -> RoomCoord:
        return self.target_room_manager.get_current_target_room()

    def solve_path(self) -> Optional[RayPath]:
        """Current light path in canvas space, or None if a marker is missing."""
        return self.calculator.calculate_ray_path()

    def minimum_bounces(self) -> int:
        return calculate_minimum_bounces(self.home_room, self.target_room)

    def mirror_sequence(self) -> List[MirrorStep]:
        return self.calculator.calculate_mirror_sequence()

    def virtual_object_position(self) -> Optional[Point]:
        return self.calculator.get_virtual_object_position()

    def line_of_sight(self) -> List[WallCrossing]:
        return self.calculator.calculate_line_of_sight()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: SessionListener) -> None:
        """Register a callback called as listener(event) after each mutation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str) -> None:
        if self._verbose >= 1:
            print(f"[session] {event}: home={self.home_room} target={self.target_room}")
        for listener in list(self._listeners):
            listener(event)

    def __repr__(self) -> str:
        return f"MirrorMaze(name={self.name!r}, home={self.home_room}, target={self.target_room})"
