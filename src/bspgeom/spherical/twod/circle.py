"""
    Great circles of the unit sphere.

A circle is defined by its pole. Points on the pole side of the circle
(closer than π/2 to the pole) have negative offsets and belong to the minus
side, which is the inside side for region boundaries.
"""

import math

from bspgeom.bspgeom_errors import DegenerateGeometryError
from bspgeom.bspgeom_types import SPHERE_2D
from bspgeom.mathutils.bspgeom_math import HALF_PI
from bspgeom.mathutils.vec3 import Vec3, vec3_angle, vec3_combine
from bspgeom.partitioning.hyperplane import Embedding, Hyperplane
from bspgeom.spherical.oned.arcs_set import Arc
from bspgeom.spherical.oned.s1_point import S1Point
from bspgeom.spherical.twod.s2_point import S2Point


class Circle(Hyperplane, Embedding):
    """
    Immutable oriented great circle.

    The circle carries an orthonormal frame (x, y) of its plane, used as
    the origin and direction of its phase angles.

    Args:
        pole: Circle pole, any non-zero vector
        tolerance: Angular tolerance below which points are considered on the circle
    """
    space = SPHERE_2D

    __slots__ = ('_pole', '_x', '_y', '_tolerance')

    def __init__(self, pole, tolerance: float):
        pole = Vec3(pole)
        self._pole = pole.normalized()
        self._x = pole.orthogonal()
        self._y = pole.cross(self._x).normalized()
        self._tolerance = tolerance

    @classmethod
    def through(cls, first: S2Point, second: S2Point, tolerance: float) -> 'Circle':
        """
        Circle going from first to second, the shorter way.

        Raises:
            DegenerateGeometryError: If the points are identical or antipodal
        """
        pole = first.vector.cross(second.vector)
        if pole.length_sq() == 0.0:
            raise DegenerateGeometryError(f"no unique circle through {first!r} and {second!r}")
        return cls(pole, tolerance)

    @classmethod
    def _from_frame(cls, pole, x, y, tolerance):
        circle = cls.__new__(cls)
        circle._pole = pole
        circle._x = x
        circle._y = y
        circle._tolerance = tolerance
        return circle

    @property
    def pole(self) -> Vec3:
        return self._pole

    @property
    def x_axis(self) -> Vec3:
        return self._x

    @property
    def y_axis(self) -> Vec3:
        return self._y

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def __repr__(self):
        return f"Circle(pole={self._pole!r})"

    # ------------------------------------------------------------------
    # Hyperplane
    # ------------------------------------------------------------------

    def copy_self(self) -> 'Circle':
        return self

    def get_reverse(self) -> 'Circle':
        return Circle._from_frame(-self._pole, self._x, -self._y, self._tolerance)

    def get_offset(self, point) -> float:
        """
        Signed angular offset of a point (S2Point or direction).

        Negative on the pole side, zero on the circle.
        """
        vector = point.vector if isinstance(point, S2Point) else point
        return vec3_angle(self._pole, vector) - HALF_PI

    def project(self, point: S2Point) -> S2Point:
        return self.to_space(self.to_sub_space(point))

    def same_orientation_as(self, other: 'Circle') -> bool:
        return self._pole.dot(other.pole) >= 0.0

    def whole_hyperplane(self):
        from bspgeom.spherical.oned.arcs_set import ArcsSet
        from bspgeom.spherical.twod.sub_circle import SubCircle
        return SubCircle(self, ArcsSet(tolerance=self._tolerance))

    def whole_space(self):
        from bspgeom.spherical.twod.spherical_polygons_set import SphericalPolygonsSet
        return SphericalPolygonsSet(tolerance=self._tolerance)

    # ------------------------------------------------------------------
    # Embedding
    # ------------------------------------------------------------------

    def to_sub_space(self, point: S2Point) -> S1Point:
        return S1Point(self.get_phase(point.vector))

    def to_space(self, point: S1Point) -> S2Point:
        return S2Point(self.get_point_at(point.alpha))

    def get_phase(self, direction) -> float:
        """
        Phase of a direction projected in the circle plane, in [0, 2π].

        The direction does not need to lie on the circle.
        """
        return math.pi + math.atan2(-direction.dot(self._y), -direction.dot(self._x))

    def get_point_at(self, alpha: float) -> Vec3:
        """Point of the circle at a phase angle."""
        return vec3_combine(math.cos(alpha), self._x, math.sin(alpha), self._y)

    def get_inside_arc(self, other: 'Circle') -> Arc:
        """Arc of this circle lying on the minus (pole) side of another circle."""
        alpha = self.get_phase(other.pole)
        return Arc(alpha - HALF_PI, alpha + HALF_PI, self._tolerance)
