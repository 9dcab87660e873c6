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
Path Export Utilities
===============================================================================
- CSV: one row per segment
- JSON: the whole RayPath, diagnostics included
===============================================================================
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, Union

from ..core.raytrace import RayPath


def save_path_csv(
    path: RayPath,
    output_path: Union[str, Path],
    filename: str = "path.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export the segments of a path to a CSV file.

    Args:
        path: The solved path
        output_path: Directory where the file is written (created if missing)
        filename: Name of the CSV file (default: "path.csv")
        precision_coords: Decimal places for coordinates (default: 4)

    Returns:
        Path: Full path to the created CSV file

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_file = output_dir / filename
    coord_fmt = f"{{:.{precision_coords}f}}"

    bounce_walls = []
    if path.diagnostics is not None:
        bounce_walls = [b.wall for b in path.diagnostics.bounces]

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow([
            'segment_index',
            'start_x',
            'start_y',
            'end_x',
            'end_y',
            'length',
            'end_wall',
            'path_valid',
        ])

        for i, seg in enumerate(path.segments):
            writer.writerow([
                i,
                coord_fmt.format(seg.start.x),
                coord_fmt.format(seg.start.y),
                coord_fmt.format(seg.end.x),
                coord_fmt.format(seg.end.y),
                coord_fmt.format(seg.length),
                # Every segment but the last ends on a wall
                bounce_walls[i] if i < len(bounce_walls) else '',
                path.valid,
            ])

    return csv_file


def ray_path_to_dict(path: RayPath) -> Dict[str, Any]:
    """Plain-dict form of a path, suitable for JSON."""
    data: Dict[str, Any] = {
        'valid': path.valid,
        'virtual_target': path.virtual_target.to_dict(),
        'segments': [
            {'start': seg.start.to_dict(), 'end': seg.end.to_dict()}
            for seg in path.segments
        ],
    }
    diag = path.diagnostics
    if diag is not None:
        data['diagnostics'] = {
            'line_of_sight_start': diag.line_of_sight_start.to_dict(),
            'line_of_sight_end': diag.line_of_sight_end.to_dict(),
            'bounces': [
                {
                    'wall': b.wall,
                    'point': b.point.to_dict(),
                    'incident': b.incident.to_dict(),
                    'reflected': b.reflected.to_dict(),
                }
                for b in diag.bounces
            ],
            'failure': diag.failure,
            'failed_wall': diag.failed_wall,
            'obstruction': diag.obstruction.to_dict() if diag.obstruction is not None else None,
        }
    return data


def save_path_json(
    path: RayPath,
    output_path: Union[str, Path],
    filename: str = "path.json",
) -> Path:
    """
    Export a path, diagnostics included, to a JSON file.

    Returns:
        Path: Full path to the created JSON file
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    json_file = output_dir / filename
    with open(json_file, 'w', encoding='utf-8') as f:
        json.dump(ray_path_to_dict(path), f, indent=2)
    return json_file
