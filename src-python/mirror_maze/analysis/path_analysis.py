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

===============================================================================
Path Analysis
===============================================================================
Inspection helpers for solved light paths:

- Law-of-reflection check at every bounce
- Total path length (through Shapely)
- Text or XML description of a RayPath
===============================================================================
"""

from dataclasses import dataclass
from typing import List

from shapely.geometry import LineString

from ..core.constants import ANGLE_TOLERANCE
from ..core.geometry import Point
from ..core.raytrace import RayPath, check_angle_law


@dataclass
class BounceCheck:
    """
    Law-of-reflection check at one bounce point.

    Attributes:
        index: Bounce number, starting at 0
        wall: Wall the bounce happened on
        point: Bounce point
        incident: Incoming leg as a vector
        reflected: Outgoing leg as a vector
        ok: True if the angle of incidence equals the angle of reflection
    """
    index: int
    wall: str
    point: Point
    incident: Point
    reflected: Point
    ok: bool


def check_bounces(path: RayPath, tolerance: float = ANGLE_TOLERANCE) -> List[BounceCheck]:
    """
    Check the law of reflection at every bounce of a path.

    The incident and reflected vectors are taken from the folded segments
    themselves, not from the solver's directions, so the check is independent
    of how the path was built. Wall identity comes from the diagnostics.

    Args:
        path: A solved path with diagnostics
        tolerance: Allowed component difference

    Returns:
        One BounceCheck per recorded bounce that has both legs
    """
    if path.diagnostics is None:
        return []

    checks = []
    for i, bounce in enumerate(path.diagnostics.bounces):
        if i + 1 >= len(path.segments):
            break
        incoming = path.segments[i]
        outgoing = path.segments[i + 1]
        incident = Point(incoming.end.x - incoming.start.x, incoming.end.y - incoming.start.y)
        reflected = Point(outgoing.end.x - outgoing.start.x, outgoing.end.y - outgoing.start.y)
        checks.append(BounceCheck(
            index=i,
            wall=bounce.wall,
            point=bounce.point,
            incident=incident,
            reflected=reflected,
            ok=check_angle_law(incident, reflected, bounce.wall, tolerance),
        ))
    return checks


def path_to_linestring(path: RayPath) -> LineString:
    """Join the segments of a path into one Shapely LineString."""
    coords = [(path.segments[0].start.x, path.segments[0].start.y)]
    coords.extend((seg.end.x, seg.end.y) for seg in path.segments)
    return LineString(coords)


def path_length(path: RayPath) -> float:
    """Total length of the folded path; 0.0 for a path without segments."""
    if not path.segments:
        return 0.0
    return path_to_linestring(path).length


def describe_ray_path(path: RayPath, format: str = 'text') -> str:
    """
    Generate a formatted description of a solved path.

    Args:
        path: The path to describe
        format: 'text' for human-readable, 'xml' for XML

    Returns:
        Formatted string
    """
    if format == 'xml':
        return _describe_path_xml(path)
    return _describe_path_text(path)


def _describe_path_text(path: RayPath) -> str:
    lines = []
    status = 'valid' if path.valid else 'invalid'
    lines.append(f"RayPath ({status}), {len(path.segments)} segment(s), length {path_length(path):.3f}")
    lines.append(f"  virtual target: ({path.virtual_target.x:.3f}, {path.virtual_target.y:.3f})")
    for i, seg in enumerate(path.segments):
        lines.append(f"  [{i}] ({seg.start.x:.3f}, {seg.start.y:.3f}) -> ({seg.end.x:.3f}, {seg.end.y:.3f})")
    diag = path.diagnostics
    if diag is not None:
        for bounce in diag.bounces:
            lines.append(f"  bounce {bounce.wall} at ({bounce.point.x:.3f}, {bounce.point.y:.3f})")
        if diag.failure:
            wall = f" at wall {diag.failed_wall}" if diag.failed_wall else ""
            lines.append(f"  failure: {diag.failure}{wall}")
    return "\n".join(lines)


def _describe_path_xml(path: RayPath) -> str:
    lines = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<ray_path>')
    lines.append(f'  <valid>{str(path.valid).lower()}</valid>')
    lines.append(f'  <length>{path_length(path):.6f}</length>')
    lines.append(f'  <virtual_target x="{path.virtual_target.x:.6f}" y="{path.virtual_target.y:.6f}"/>')

    lines.append('  <segments>')
    for i, seg in enumerate(path.segments):
        lines.append(
            f'    <segment index="{i}" x1="{seg.start.x:.6f}" y1="{seg.start.y:.6f}" '
            f'x2="{seg.end.x:.6f}" y2="{seg.end.y:.6f}"/>'
        )
    lines.append('  </segments>')

    diag = path.diagnostics
    if diag is not None:
        if diag.bounces:
            lines.append('  <bounces>')
            for bounce in diag.bounces:
                lines.append(
                    f'    <bounce wall="{bounce.wall}" x="{bounce.point.x:.6f}" y="{bounce.point.y:.6f}"/>'
                )
            lines.append('  </bounces>')
        else:
            lines.append('  <bounces/>')
        if diag.failure:
            lines.append(f'  <failure>{diag.failure}</failure>')

    lines.append('</ray_path>')
    return "\n".join(lines)
