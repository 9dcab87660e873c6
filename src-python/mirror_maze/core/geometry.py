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

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import numpy as np
from shapely.geometry import Point as ShapelyPoint, LineString

from .constants import INTERSECTION_EPSILON, POINT_ON_SEGMENT_TOLERANCE


class Point:
    """
    A point (or vector) in 2D space.

    The frame a point lives in (canvas space or room-local space) is not
    recorded on the point itself; conversions go through the coordinates
    module. Can be converted to/from Shapely Point objects.
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Point':
        """Create Point from Shapely Point."""
        return cls(sp.x, sp.y)

    def copy(self) -> 'Point':
        return Point(self.x, self.y)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}


class Line:
    """
    A line in 2D space, defined by two points.
    Can represent a line, ray, or segment depending on context.
    - As a line: p1 and p2 are two distinct points on the line.
    - As a ray: p1 is the origin and p2 - p1 is the direction.
    - As a segment: p1 and p2 are the two endpoints.
    """
    def __init__(self, p1: Point, p2: Point):
        self.p1 = p1
        self.p2 = p2

    @property
    def direction(self) -> Point:
        """The vector p2 - p1."""
        return Point(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([(self.p1.x, self.p1.y), (self.p2.x, self.p2.y)])

    @classmethod
    def from_shapely(cls, sl: LineString) -> 'Line':
        """Create Line from Shapely LineString."""
        coords = list(sl.coords)
        return cls(Point(coords[0][0], coords[0][1]), Point(coords[1][0], coords[1][1]))

    def __repr__(self) -> str:
        return f"Line(p1={self.p1}, p2={self.p2})"


@dataclass
class IntersectionResult:
    """
    Result of a ray/segment intersection.

    Attributes:
        hit: True if the ray meets the segment
        point: The intersection point (None when there is no hit)
        t: Ray parameter at the hit; a distance when the ray direction is a unit vector
    """
    hit: bool
    point: Optional[Point] = None
    t: Optional[float] = None


class Geometry:
    """
    Basic geometric figures and operations used by the path solvers.

    Rays are Line objects whose p1 is the origin and whose p2 is origin + direction,
    so a ray built from a unit direction reports intersection parameters as distances.
    """

    @staticmethod
    def point(x: float, y: float) -> Point:
        return Point(x, y)

    @staticmethod
    def ray(origin: Point, direction: Point) -> Line:
        """
        Create a ray from an origin and a direction vector.

        Args:
            origin: Where the ray starts
            direction: Direction vector (normalize it to get t as a distance)

        Returns:
            Line with p1 = origin and p2 = origin + direction
        """
        return Line(origin, Point(origin.x + direction.x, origin.y + direction.y))

    @staticmethod
    def dot(p1: Point, p2: Point) -> float:
        """Dot product, where the two points are treated as vectors."""
        return p1.x * p2.x + p1.y * p2.y

    @staticmethod
    def cross(p1: Point, p2: Point) -> float:
        """Cross product (z-component in 2D), where the two points are treated as vectors."""
        return p1.x * p2.y - p1.y * p2.x

    @staticmethod
    def lines_intersection(l1: Line, l2: Line) -> Point:
        """
        Calculate the intersection of two infinite lines.

        Args:
            l1: First line
            l2: Second line

        Returns:
            Intersection point, or a point at infinity when the lines are parallel
        """
        A = l1.p2.x * l1.p1.y - l1.p1.x * l1.p2.y
        B = l2.p2.x * l2.p1.y - l2.p1.x * l2.p2.y
        xa = l1.p2.x - l1.p1.x
        xb = l2.p2.x - l2.p1.x
        ya = l1.p2.y - l1.p1.y
        yb = l2.p2.y - l2.p1.y

        denominator = xa * yb - xb * ya

        if abs(denominator) < INTERSECTION_EPSILON:
            return Geometry.point(float('inf'), float('inf'))

        x = (A * xb - B * xa) / denominator
        y = (A * yb - B * ya) / denominator

        return Geometry.point(x, y)

    @staticmethod
    def is_point_on_segment(
        p1: Point,
        s1: Line,
        tolerance: float = POINT_ON_SEGMENT_TOLERANCE
    ) -> bool:
        """
        Test if a point lies on a finite segment, with tolerance.

        The point must sit inside the segment's bounding box (grown by the
        tolerance) and be collinear with its endpoints.

        Args:
            p1: Point to test
            s1: Segment
            tolerance: Slack for both the bounding box and the cross product

        Returns:
            True if the point is on the segment
        """
        min_x = min(s1.p1.x, s1.p2.x)
        max_x = max(s1.p1.x, s1.p2.x)
        min_y = min(s1.p1.y, s1.p2.y)
        max_y = max(s1.p1.y, s1.p2.y)

        if (p1.x < min_x - tolerance or p1.x > max_x + tolerance or
                p1.y < min_y - tolerance or p1.y > max_y + tolerance):
            return False

        offset = Point(p1.x - s1.p1.x, p1.y - s1.p1.y)
        return abs(Geometry.cross(offset, s1.direction)) < tolerance

    @staticmethod
    def distance(p1: Point, p2: Point) -> float:
        return math.sqrt(Geometry.distance_squared(p1, p2))

    @staticmethod
    def distance_squared(p1: Point, p2: Point) -> float:
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def normalize(p1: Point) -> Point:
        """
        Normalize the given point as if it were a vector.

        Returns the zero vector when the input has (near) zero length; callers
        must treat a zero result as "no defined direction".

        Args:
            p1: Point (as vector)

        Returns:
            Unit vector, or Point(0, 0)
        """
        len_val = math.hypot(p1.x, p1.y)
        if len_val < INTERSECTION_EPSILON:
            return Geometry.point(0.0, 0.0)
        return Geometry.point(p1.x / len_val, p1.y / len_val)

    @staticmethod
    def intersect(ray: Line, segment: Line) -> IntersectionResult:
        """
        Intersect a ray with a finite segment.

        Solves origin + t * direction = s1.p1 + s * (s1.p2 - s1.p1) for (t, s).
        A hit requires t >= -eps (forward or touching) and s in [-eps, 1 + eps].

        Args:
            ray: Ray as a Line (p1 = origin, p2 = origin + direction)
            segment: Segment as a Line

        Returns:
            IntersectionResult; parallel lines report no hit
        """
        d = ray.direction
        e = segment.direction
        a = np.array([[d.x, -e.x], [d.y, -e.y]], dtype=float)

        det = d.y * e.x - d.x * e.y
        if abs(det) < INTERSECTION_EPSILON:
            return IntersectionResult(hit=False)

        b = np.array([segment.p1.x - ray.p1.x, segment.p1.y - ray.p1.y], dtype=float)
        t, s = (float(v) for v in np.linalg.solve(a, b))

        if t >= -INTERSECTION_EPSILON and -INTERSECTION_EPSILON <= s <= 1 + INTERSECTION_EPSILON:
            point = Geometry.point(ray.p1.x + t * d.x, ray.p1.y + t * d.y)
            return IntersectionResult(hit=True, point=point, t=t)

        return IntersectionResult(hit=False)

    @staticmethod
    def closest_intersection(
        ray: Line,
        segments: Iterable[Line],
        min_t: Optional[float] = None
    ) -> IntersectionResult:
        """
        Find the closest segment hit along a ray.

        Args:
            ray: The ray
            segments: Candidate segments
            min_t: If given, hits with t <= min_t are ignored

        Returns:
            The hit with the smallest t (first segment wins on exact ties),
            or a no-hit result
        """
        closest = IntersectionResult(hit=False)
        best_t = float('inf')

        for segment in segments:
            result = Geometry.intersect(ray, segment)
            if not result.hit:
                continue
            if min_t is not None and result.t <= min_t:
                continue
            if result.t < best_t:
                best_t = result.t
                closest = result

        return closest

    @staticmethod
    def distance_to_segment(p1: Point, s1: Line) -> float:
        """
        Distance from a point to a finite segment (clamped to its endpoints).

        Args:
            p1: The point
            s1: The segment

        Returns:
            Perpendicular distance, or distance to the nearest endpoint
        """
        return s1.to_shapely().distance(p1.to_shapely())


# Create a singleton instance for convenience
geometry = Geometry()
