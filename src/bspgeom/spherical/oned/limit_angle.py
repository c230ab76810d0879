"""
    Hyperplane of the one-dimensional sphere.
"""

from bspgeom.bspgeom_types import SPHERE_1D
from bspgeom.partitioning.hyperplane import Hyperplane, SubPointHyperplane
from bspgeom.spherical.oned.s1_point import S1Point


class LimitAngle(Hyperplane):
    """
    An oriented point on the unit circle.

    A direct limit has the larger angles on its plus side. Offsets are plain
    angle differences, so they are only meaningful within a cell that does
    not wrap around 0.
    """
    space = SPHERE_1D

    __slots__ = ('_location', '_direct', '_tolerance')

    def __init__(self, location: S1Point, direct: bool, tolerance: float):
        self._location = location
        self._direct = direct
        self._tolerance = tolerance

    @property
    def location(self) -> S1Point:
        return self._location

    @property
    def direct(self) -> bool:
        return self._direct

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def copy_self(self) -> 'LimitAngle':
        return self

    def get_offset(self, point: S1Point) -> float:
        delta = point.alpha - self._location.alpha
        return delta if self._direct else -delta

    def project(self, point: S1Point) -> S1Point:
        return self._location

    def same_orientation_as(self, other: 'LimitAngle') -> bool:
        return not (self._direct ^ other.direct)

    def get_reverse(self) -> 'LimitAngle':
        return LimitAngle(self._location, not self._direct, self._tolerance)

    def whole_hyperplane(self) -> 'SubLimitAngle':
        return SubLimitAngle(self)

    def whole_space(self):
        from bspgeom.spherical.oned.arcs_set import ArcsSet
        return ArcsSet(tolerance=self._tolerance)

    def __repr__(self):
        return f"LimitAngle({self._location.alpha!r}, direct={self._direct!r})"


class SubLimitAngle(SubPointHyperplane):
    """Sub-hyperplane of the unit circle: the limit angle itself."""

    def build_new(self, hyperplane, remaining_region=None) -> 'SubLimitAngle':
        return SubLimitAngle(hyperplane)
