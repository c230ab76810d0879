"""
    Oriented lines of the plane.

A line is described by its angle with the abscissa axis and its origin
offset. Points on its left side (looking along the line direction) have a
negative offset and belong to the minus side, which is the inside side for
region boundaries: counter-clockwise loops bound finite regions.
"""

import math

from bspgeom.bspgeom_errors import DegenerateGeometryError
from bspgeom.bspgeom_types import EUCLIDEAN_2D
from bspgeom.mathutils.bspgeom_math import normalize_angle
from bspgeom.mathutils.vec2 import Vec2
from bspgeom.partitioning.hyperplane import Embedding, Hyperplane


class Line(Hyperplane, Embedding):
    """
    Immutable oriented line.

    Use Line.from_points or Line.from_angle to build one.

    Args:
        angle: Angle of the line direction with the abscissa axis
        origin_offset: Offset of the origin point
        tolerance: Distance below which points are considered on the line
    """
    space = EUCLIDEAN_2D

    __slots__ = ('_angle', '_cos', '_sin', '_origin_offset', '_tolerance')

    def __init__(self, angle: float, origin_offset: float, tolerance: float):
        self._angle = normalize_angle(angle, math.pi)
        self._cos = math.cos(self._angle)
        self._sin = math.sin(self._angle)
        self._origin_offset = origin_offset
        self._tolerance = tolerance

    @classmethod
    def from_points(cls, p1, p2, tolerance: float) -> 'Line':
        """
        Line going from p1 to p2.

        Raises:
            DegenerateGeometryError: If the points coincide
        """
        p1 = Vec2(p1)
        p2 = Vec2(p2)
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        d = math.hypot(dx, dy)
        if d == 0.0:
            raise DegenerateGeometryError(f"cannot build a line through identical points {p1!r}")
        line = cls(math.pi + math.atan2(-dy, -dx), 0.0, tolerance)
        line._origin_offset = (p2.x * p1.y - p1.x * p2.y) / d
        return line

    @classmethod
    def from_angle(cls, p, angle: float, tolerance: float) -> 'Line':
        """Line going through p with the given direction angle."""
        p = Vec2(p)
        line = cls(angle, 0.0, tolerance)
        line._origin_offset = line._cos * p.y - line._sin * p.x
        return line

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def origin_offset(self) -> float:
        return self._origin_offset

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def __repr__(self):
        return f"Line(angle={self._angle!r}, origin_offset={self._origin_offset!r})"

    # ------------------------------------------------------------------
    # Hyperplane
    # ------------------------------------------------------------------

    def copy_self(self) -> 'Line':
        return self

    def get_reverse(self) -> 'Line':
        angle = self._angle + math.pi if self._angle < math.pi else self._angle - math.pi
        reverse = Line(angle, -self._origin_offset, self._tolerance)
        # keep exact opposite trigonometric values
        reverse._cos = -self._cos
        reverse._sin = -self._sin
        return reverse

    def get_offset(self, point) -> float:
        return self._sin * point[0] - self._cos * point[1] + self._origin_offset

    def get_line_offset(self, line: 'Line') -> float:
        """
        Offset of a parallel line.

        The result is meaningful only when the lines are parallel; it is
        positive when the other line is on the plus side of this one.
        """
        if self._cos * line._cos + self._sin * line._sin > 0:
            return self._origin_offset - line._origin_offset
        return self._origin_offset + line._origin_offset

    def project(self, point) -> Vec2:
        return self.to_space(self.to_sub_space(point))

    def same_orientation_as(self, other: 'Line') -> bool:
        return self._sin * other._sin + self._cos * other._cos >= 0.0

    def whole_hyperplane(self):
        from bspgeom.euclidean.oned.intervals_set import IntervalsSet
        from bspgeom.euclidean.twod.sub_line import SubLine
        return SubLine(self, IntervalsSet(tolerance=self._tolerance))

    def whole_space(self):
        from bspgeom.euclidean.twod.polygons_set import PolygonsSet
        return PolygonsSet(tolerance=self._tolerance)

    # ------------------------------------------------------------------
    # Embedding
    # ------------------------------------------------------------------

    def to_sub_space(self, point) -> float:
        """Abscissa of a point along the line."""
        return self._cos * point[0] + self._sin * point[1]

    def to_space(self, abscissa: float) -> Vec2:
        """Point of the line at the given abscissa."""
        return Vec2(abscissa * self._cos - self._origin_offset * self._sin,
                    abscissa * self._sin + self._origin_offset * self._cos)

    # ------------------------------------------------------------------
    # Planar geometry
    # ------------------------------------------------------------------

    def intersection(self, other: 'Line'):
        """
        Intersection point with another line.

        Returns:
            The crossing point, or None if the lines are parallel
        """
        d = self._sin * other._cos - other._sin * self._cos
        if abs(d) < self._tolerance:
            return None
        return Vec2((self._cos * other._origin_offset - other._cos * self._origin_offset) / d,
                    (self._sin * other._origin_offset - other._sin * self._origin_offset) / d)

    def get_point_at(self, abscissa: float, offset: float) -> Vec2:
        """Point at the given abscissa and offset from the line."""
        d_offset = offset - self._origin_offset
        return Vec2(abscissa * self._cos + d_offset * self._sin,
                    abscissa * self._sin - d_offset * self._cos)

    def contains(self, point) -> bool:
        return abs(self.get_offset(point)) < self._tolerance

    def distance(self, point) -> float:
        return abs(self.get_offset(point))

    def is_parallel_to(self, other: 'Line') -> bool:
        return abs(self._sin * other._cos - self._cos * other._sin) < self._tolerance

    def translated_to_point(self, point) -> 'Line':
        """Parallel line going through a point."""
        return Line.from_angle(point, self._angle, self._tolerance)
