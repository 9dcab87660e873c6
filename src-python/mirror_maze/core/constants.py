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
Constants used throughout the mirror maze engine.

Grid geometry, canvas size and numerical tolerances are kept here so that the
coordinate system, the mirror model and the solvers can share them without
circular imports. The numeric values of the grid and canvas must not change
if rendered output has to line up with existing drawings.
"""

# Room and grid geometry (pixels)
ROOM_WIDTH = 240
ROOM_HEIGHT = 240
GRID_COLS = 5
GRID_ROWS = 2

# Canvas the grid is centered in
CANVAS_WIDTH = 1280
CANVAS_HEIGHT = 600

GRID_TOTAL_WIDTH = GRID_COLS * ROOM_WIDTH
GRID_TOTAL_HEIGHT = GRID_ROWS * ROOM_HEIGHT
GRID_OFFSET_X = (CANVAS_WIDTH - GRID_TOTAL_WIDTH) / 2
GRID_OFFSET_Y = (CANVAS_HEIGHT - GRID_TOTAL_HEIGHT) / 2

# The only row whose rooms are flipped vertically
FLIPPED_ROW = 1

# Ray/segment intersection: determinant threshold and parameter slack
INTERSECTION_EPSILON = 1e-10

# Collinearity and bounding-box slack when checking a bounce point
POINT_ON_SEGMENT_TOLERANCE = 1e-6

# A wall hit closer than this to the receptor distance does not block it.
# Hits closer than this to the ray origin are the wall the leg starts on.
OBSTRUCTION_TOLERANCE = 1e-6

# Vectors shorter than this have no usable direction
MIN_VECTOR_LENGTH = 1e-3

# Component-wise tolerance for the angle of incidence / reflection check
ANGLE_TOLERANCE = 0.01

# Max distance (pixels) between a click and a wall for the click to hit it
WALL_HIT_THRESHOLD = 10

# Markers are kept at least this far from the room walls
MARKER_MARGIN = 10

# Session defaults
DEFAULT_HOME_ROOM = (0, 1)
DEFAULT_TARGET_ROOM = (0, 2)
DEFAULT_OBJECT_POSITION = (120, 120)
DEFAULT_RECEPTOR_POSITION = (180, 180)
