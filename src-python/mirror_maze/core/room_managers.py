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

from typing import Callable, List, Optional

from .grid import RoomCoord, validate_room
from .entities import EntityManager


RoomListener = Callable[[RoomCoord, RoomCoord], None]


class _RoomSelection:
    """
    A selected room plus the listeners interested in it.

    Listeners are called as listener(new_room, old_room), in registration
    order, only when the selection actually changes.
    """

    def __init__(self, initial: RoomCoord) -> None:
        self._current: RoomCoord = validate_room(initial)
        self._listeners: List[RoomListener] = []

    def _select(self, room: RoomCoord) -> Optional[RoomCoord]:
        validate_room(room)
        if room == self._current:
            return None
        old = self._current
        self._current = room
        return old

    def _notify(self, new: RoomCoord, old: RoomCoord) -> None:
        for listener in list(self._listeners):
            listener(new, old)

    def add_listener(self, listener: RoomListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RoomListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


class HomeRoomManager(_RoomSelection):
    """The room whose markers are editable. Moving it relocates every marker."""

    def __init__(self, entity_manager: EntityManager, initial: RoomCoord) -> None:
        super().__init__(initial)
        self.entity_manager: EntityManager = entity_manager
        self.entity_manager.move_to_home_room(initial)

    def get_current_home_room(self) -> RoomCoord:
        return self._current

    def set_home_room(self, room: RoomCoord) -> bool:
        """
        Select a new home room.

        Returns:
            True if the home room changed (listeners were notified)
        """
        old = self._select(room)
        if old is None:
            return False
        self.entity_manager.move_to_home_room(room)
        self._notify(room, old)
        return True

    def is_home_room(self, room: RoomCoord) -> bool:
        return room == self._current


class TargetRoomManager(_RoomSelection):
    """The room the light is meant to reach."""

    def get_current_target_room(self) -> RoomCoord:
        return self._current

    def set_target_room(self, room: RoomCoord) -> bool:
        """
        Select a new target room.

        Returns:
            True if the target room changed (listeners were notified)
        """
        old = self._select(room)
        if old is None:
            return False
        self._notify(room, old)
        return True

    def is_target_room(self, room: RoomCoord) -> bool:
        return room == self._current
