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

from typing import Callable, Dict, List, Optional, Tuple

from .constants import GRID_ROWS, WALL_HIT_THRESHOLD
from .coordinates import canvas_wall_segment
from .geometry import geometry, Point, Line
from .grid import (
    RoomCoord,
    NORTH, SOUTH, EAST, WEST,
    VALID_WALLS,
    validate_wall,
    validate_room,
    iter_rooms,
)


# Mirror states
DISABLED = 'disabled'
OFF = 'off'
ON = 'on'

VALID_MIRROR_STATES = (DISABLED, OFF, ON)

# Order in which simultaneously active walls of one room are bounced off:
# horizontal travel (E/W) first, then vertical travel (S/N)
BOUNCE_ORDER = (EAST, WEST, SOUTH, NORTH)

MirrorListener = Callable[[List['MirrorWall']], None]


def validate_mirror_state(state: str) -> str:
    if state not in VALID_MIRROR_STATES:
        raise ValueError(
            f"Invalid mirror state '{state}'. "
            f"Valid options: {VALID_MIRROR_STATES}"
        )
    return state


class MirrorWall:
    """
    One wall slot of one room.

    Walls on the outer north edge of the top row and the outer south edge of
    the bottom row are structural: they start 'disabled' and never change.
    Every other wall is togglable between 'off' (light passes) and 'on'
    (light bounces).

    Attributes:
        room (RoomCoord): The room the wall belongs to
        wall (str): 'N', 'S', 'E' or 'W', as drawn on the canvas
        state (str): 'disabled', 'off' or 'on'
    """

    def __init__(self, room: RoomCoord, wall: str, state: str = OFF) -> None:
        self.room: RoomCoord = room
        self.wall: str = validate_wall(wall)
        self._state: str = validate_mirror_state(state)

    @property
    def state(self) -> str:
        return self._state

    @state.setter
    def state(self, value: str) -> None:
        validate_mirror_state(value)
        if value != self._state and DISABLED in (value, self._state):
            raise ValueError(
                f"Cannot change {self} to '{value}': "
                f"disabled walls are fixed when the grid is built"
            )
        self._state = value

    @property
    def is_togglable(self) -> bool:
        return self._state != DISABLED

    @property
    def is_on(self) -> bool:
        return self._state == ON

    def toggle(self) -> bool:
        """
        Flip between 'off' and 'on'.

        Returns:
            True if the state changed, False for a disabled wall
        """
        if self._state == DISABLED:
            return False
        self._state = OFF if self._state == ON else ON
        return True

    def get_canvas_segment(self) -> Line:
        """Wall endpoints in canvas coordinates."""
        return canvas_wall_segment(self.room, self.wall)

    def __repr__(self) -> str:
        return f"MirrorWall(room=({self.room.row}, {self.room.col}), wall={self.wall}, state={self._state})"


class MirrorManager:
    """
    Owns the reflective state of every wall in the grid.

    Besides plain toggling it implements the two automatic behaviours of the
    maze:

    - Home-room transfer: a per-direction memory (N/S/E/W -> last togglable
      state) lets the wall configuration follow the home room. Only the
      current home room ever has walls that are not 'off'.
    - Auto-selection: given a home and a target room, switch on the one
      horizontal and/or one vertical wall facing the target.

    Listeners are called after each mutation with the list of walls whose
    state changed (possibly empty).
    """

    def __init__(self, verbose: int = 0) -> None:
        self.verbose: int = verbose
        self._mirrors: Dict[Tuple[RoomCoord, str], MirrorWall] = {}
        self._wall_memory: Dict[str, str] = {}
        self._listeners: List[MirrorListener] = []
        self._initialize_mirrors()

    def _initialize_mirrors(self) -> None:
        for room in iter_rooms():
            for wall in VALID_WALLS:
                structural = ((wall == NORTH and room.row == 0) or
                              (wall == SOUTH and room.row == GRID_ROWS - 1))
                state = DISABLED if structural else OFF
                self._mirrors[(room, wall)] = MirrorWall(room, wall, state)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_mirrors(self) -> List[MirrorWall]:
        return list(self._mirrors.values())

    def get_mirror(self, room: RoomCoord, wall: str) -> MirrorWall:
        """
        Look up the wall slot of a room.

        Raises:
            ValueError: For an unknown wall symbol or a room outside the grid
        """
        validate_wall(wall)
        validate_room(room)
        return self._mirrors[(room, wall)]

    def get_room_mirrors(self, room: RoomCoord) -> List[MirrorWall]:
        validate_room(room)
        return [self._mirrors[(room, wall)] for wall in VALID_WALLS]

    def get_active_room_mirrors(self, room: RoomCoord) -> List[MirrorWall]:
        """Walls of a room that are 'on', in bounce order."""
        active = [m for m in self.get_room_mirrors(room) if m.is_on]
        return sorted(active, key=lambda m: BOUNCE_ORDER.index(m.wall))

    def get_active_walls(self, room: RoomCoord) -> List[str]:
        """Wall symbols of a room that are 'on', in bounce order."""
        return [m.wall for m in self.get_active_room_mirrors(room)]

    def get_room_wall_segments(self, room: RoomCoord) -> List[Line]:
        """Canvas segments of the walls of one room that are 'on'."""
        return [m.get_canvas_segment() for m in self.get_room_mirrors(room) if m.is_on]

    def get_all_active_wall_segments(self) -> List[Line]:
        """Canvas segments of every wall in the grid that is 'on'."""
        return [m.get_canvas_segment() for m in self._mirrors.values() if m.is_on]

    @property
    def wall_memory(self) -> Dict[str, str]:
        """Copy of the per-direction memory used by home-room transfer."""
        return dict(self._wall_memory)

    def find_mirror_at(
        self,
        canvas_point: Point,
        home_room: RoomCoord,
        threshold: float = WALL_HIT_THRESHOLD
    ) -> Optional[MirrorWall]:
        """
        Hit-test the togglable walls of the home room.

        Args:
            canvas_point: Point on the canvas (e.g. a click)
            home_room: Only this room's walls are eligible
            threshold: Max distance in pixels between the point and the wall

        Returns:
            The first wall within the threshold, or None
        """
        for mirror in self.get_room_mirrors(home_room):
            if not mirror.is_togglable:
                continue
            if geometry.distance_to_segment(canvas_point, mirror.get_canvas_segment()) < threshold:
                return mirror
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def toggle_wall(self, room: RoomCoord, wall: str) -> bool:
        """
        Toggle one wall between 'off' and 'on'.

        Returns:
            True if the state changed; toggling a disabled wall is a no-op
        """
        mirror = self.get_mirror(room, wall)
        changed = mirror.toggle()
        if self.verbose >= 1:
            print(f"[mirrors] toggle {mirror} changed={changed}")
        self._notify([mirror] if changed else [])
        return changed

    def handle_click(
        self,
        canvas_point: Point,
        home_room: RoomCoord,
        threshold: float = WALL_HIT_THRESHOLD
    ) -> Optional[MirrorWall]:
        """
        Toggle the home-room wall under a click.

        Returns:
            The toggled wall, or None if the click missed every eligible wall
        """
        mirror = self.find_mirror_at(canvas_point, home_room, threshold)
        if mirror is None:
            return None
        self.toggle_wall(mirror.room, mirror.wall)
        return mirror

    def reset_room(self, room: RoomCoord) -> None:
        """Switch every togglable wall of a room to 'off'."""
        for mirror in self.get_room_mirrors(room):
            if mirror.is_togglable:
                mirror.state = OFF

    def remember_walls(self, room: RoomCoord) -> None:
        """Snapshot a room's togglable wall states into the per-direction memory."""
        for mirror in self.get_room_mirrors(room):
            if mirror.is_togglable:
                self._wall_memory[mirror.wall] = mirror.state

    def change_home_room(
        self,
        old_home: RoomCoord,
        new_home: RoomCoord,
        target: Optional[RoomCoord] = None
    ) -> None:
        """
        Move the wall configuration from the old home room to the new one.

        1. Snapshot the old home's togglable walls into the memory.
        2. Reset every togglable wall outside the new home to 'off'.
        3. Restore the new home's togglable walls from the memory.

        When a target is given, auto-selection toward it runs afterwards.
        Listeners are notified once, after all steps.
        """
        validate_room(old_home)
        validate_room(new_home)
        before = self._snapshot()

        self.remember_walls(old_home)
        for mirror in self._mirrors.values():
            if mirror.room != new_home and mirror.is_togglable:
                mirror.state = OFF
        for mirror in self.get_room_mirrors(new_home):
            if mirror.is_togglable and mirror.wall in self._wall_memory:
                mirror.state = self._wall_memory[mirror.wall]

        if target is not None:
            self._auto_select(new_home, target)

        if self.verbose >= 1:
            print(f"[mirrors] home room {old_home} -> {new_home}, memory={self._wall_memory}")
        self._notify(self._changed_since(before))

    def auto_select_walls(self, home: RoomCoord, target: RoomCoord) -> List[str]:
        """
        Switch on the home-room walls facing the target room.

        All togglable walls of the home room are reset first; then East or
        West is switched on for a column difference and South or North for a
        row difference. The result is also written into the memory.

        Returns:
            The walls switched on
        """
        before = self._snapshot()
        selected = self._auto_select(home, target)
        if self.verbose >= 1:
            print(f"[mirrors] auto-select {home} -> {target}: {selected}")
        self._notify(self._changed_since(before))
        return selected

    def _auto_select(self, home: RoomCoord, target: RoomCoord) -> List[str]:
        validate_room(home)
        validate_room(target)
        col_diff = target.col - home.col
        row_diff = target.row - home.row

        self.reset_room(home)

        wanted = []
        if col_diff > 0:
            wanted.append(EAST)
        elif col_diff < 0:
            wanted.append(WEST)
        if row_diff > 0:
            wanted.append(SOUTH)
        elif row_diff < 0:
            wanted.append(NORTH)

        selected = []
        for wall in wanted:
            mirror = self._mirrors[(home, wall)]
            if mirror.is_togglable:
                mirror.state = ON
                selected.append(wall)

        self.remember_walls(home)
        return selected

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: MirrorListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: MirrorListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, changed: List[MirrorWall]) -> None:
        for listener in list(self._listeners):
            listener(changed)

    def _snapshot(self) -> Dict[Tuple[RoomCoord, str], str]:
        return {key: mirror.state for key, mirror in self._mirrors.items()}

    def _changed_since(self, before: Dict[Tuple[RoomCoord, str], str]) -> List[MirrorWall]:
        return [mirror for key, mirror in self._mirrors.items() if before[key] != mirror.state]
