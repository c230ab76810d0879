"""
    Hyperplane of the one-dimensional Euclidean space.
"""

from bspgeom.bspgeom_types import EUCLIDEAN_1D
from bspgeom.partitioning.hyperplane import Hyperplane, SubPointHyperplane


class OrientedPoint(Hyperplane):
    """
    A point on the real line, with an orientation.

    A direct point has the points above its location on its plus side; an
    indirect one has them on its minus side.
    """
    space = EUCLIDEAN_1D

    __slots__ = ('_location', '_direct', '_tolerance')

    def __init__(self, location: float, direct: bool, tolerance: float):
        self._location = float(location)
        self._direct = direct
        self._tolerance = tolerance

    @property
    def location(self) -> float:
        return self._location

    @property
    def direct(self) -> bool:
        return self._direct

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def copy_self(self) -> 'OrientedPoint':
        return self

    def get_offset(self, point: float) -> float:
        delta = float(point) - self._location
        return delta if self._direct else -delta

    def project(self, point: float) -> float:
        return self._location

    def same_orientation_as(self, other: 'OrientedPoint') -> bool:
        return not (self._direct ^ other.direct)

    def get_reverse(self) -> 'OrientedPoint':
        return OrientedPoint(self._location, not self._direct, self._tolerance)

    def whole_hyperplane(self) -> 'SubOrientedPoint':
        return SubOrientedPoint(self)

    def whole_space(self):
        from bspgeom.euclidean.oned.intervals_set import IntervalsSet
        return IntervalsSet(tolerance=self._tolerance)

    def __repr__(self):
        return f"OrientedPoint({self._location!r}, direct={self._direct!r})"


class SubOrientedPoint(SubPointHyperplane):
    """Sub-hyperplane of the real line: the oriented point itself."""

    def build_new(self, hyperplane, remaining_region=None) -> 'SubOrientedPoint':
        return SubOrientedPoint(hyperplane)
