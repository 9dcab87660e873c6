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

Mirror Maze
===========

Light paths through a grid of mirrored rooms, solved with the Method of Images.

Main modules:
- core: Grid and coordinates, wall model, path solvers, session controller
- analysis: Path checks, descriptions and export
- examples: Small runnable demonstrations

Quick start:
    from mirror_maze.core.session import MirrorMaze
    from mirror_maze.core.grid import RoomCoord, EAST
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.session import MirrorMaze
from .core.grid import RoomCoord
from .core.raytrace import RayPath, compute_reflection_path

__all__ = [
    'MirrorMaze',
    'RoomCoord',
    'RayPath',
    'compute_reflection_path',
    '__version__',
]
