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
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import MARKER_MARGIN, ROOM_HEIGHT, ROOM_WIDTH
from .coordinates import get_mirrored_room_point, room_to_canvas
from .geometry import Point
from .grid import RoomCoord, iter_rooms, validate_room


# Marker kinds
OBJECT = 'object'
RECEPTOR = 'receptor'

VALID_MARKER_KINDS = (OBJECT, RECEPTOR)


def validate_kind(kind: str) -> str:
    if kind not in VALID_MARKER_KINDS:
        raise ValueError(
            f"Invalid marker kind '{kind}'. "
            f"Valid options: {VALID_MARKER_KINDS}"
        )
    return kind


@dataclass
class Marker:
    """
    The light source ('object') or the light sink ('receptor').

    Attributes:
        kind: 'object' or 'receptor'
        home_room: Room the marker is edited in
        position: Raw room-local position
    """
    kind: str
    home_room: RoomCoord
    position: Point

    def __post_init__(self) -> None:
        validate_kind(self.kind)

    def positions_in_all_rooms(self) -> Iterator[Tuple[RoomCoord, Point]]:
        """Canvas position of the marker's mirrored copy in every room of the grid."""
        for room in iter_rooms():
            yield room, room_to_canvas(room, get_mirrored_room_point(room, self.position))


def clamp_to_room(point: Point, margin: float = MARKER_MARGIN) -> Point:
    """Keep a room-local point at least `margin` away from every wall."""
    return Point(
        max(margin, min(ROOM_WIDTH - margin, point.x)),
        max(margin, min(ROOM_HEIGHT - margin, point.y)),
    )


class EntityManager:
    """
    Tracks the markers of a session.

    At most one marker of each kind exists; all markers share one home room.
    """

    def __init__(self) -> None:
        self._markers: Dict[str, Marker] = {}

    def add_marker(self, marker: Marker) -> None:
        """
        Add (or replace) the marker of the given kind.

        The marker is moved into the home room the other markers already share.
        """
        if self._markers:
            marker.home_room = next(iter(self._markers.values())).home_room
        self._markers[marker.kind] = marker

    def get_marker(self, kind: str) -> Optional[Marker]:
        return self._markers.get(validate_kind(kind))

    def get_markers(self) -> List[Marker]:
        return list(self._markers.values())

    def move_to_home_room(self, room: RoomCoord) -> None:
        """Relocate every marker to a new home room, keeping local positions."""
        validate_room(room)
        for marker in self._markers.values():
            marker.home_room = room

    def set_position(self, kind: str, local_point: Point) -> Optional[Marker]:
        """
        Move a marker inside its home room.

        The position is clamped to stay MARKER_MARGIN away from the walls.

        Returns:
            The moved marker, or None if no marker of that kind exists
        """
        marker = self.get_marker(kind)
        if marker is None:
            return None
        marker.position = clamp_to_room(local_point)
        return marker
