"""
    Sets of intervals on the real line.
"""

import math
import sys

from bspgeom.bspgeom_errors import InvalidIntervalError
from bspgeom.bspgeom_types import EUCLIDEAN_1D, Location
from bspgeom.euclidean.oned.oriented_point import OrientedPoint
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.region import AbstractRegion

# Smallest size considered non-degenerate
_SAFE_MIN = sys.float_info.min


class Interval:
    """A closed interval [lower, upper] of the real line."""
    __slots__ = ('lower', 'upper')

    def __init__(self, lower: float, upper: float):
        if upper < lower:
            raise InvalidIntervalError(lower, upper)
        self.lower = lower
        self.upper = upper

    @property
    def inf(self) -> float:
        return self.lower

    @property
    def sup(self) -> float:
        return self.upper

    def get_size(self) -> float:
        return self.upper - self.lower

    def get_barycenter(self) -> float:
        return 0.5 * (self.lower + self.upper)

    def check_point(self, point: float, tolerance: float) -> Location:
        """Locate a point with respect to the interval, within tolerance."""
        if point < self.lower - tolerance or point > self.upper + tolerance:
            return Location.OUTSIDE
        if self.lower + tolerance < point < self.upper - tolerance:
            return Location.INSIDE
        return Location.BOUNDARY

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self.lower == other.lower and self.upper == other.upper

    def __repr__(self):
        return f"Interval({self.lower!r}, {self.upper!r})"


class IntervalsSet(AbstractRegion):
    """
    Region of the real line: a finite union of intervals, possibly unbounded.

    Iterating over the set yields [lower, upper] pairs in increasing order,
    adjacent inside cells being merged.
    """
    space = EUCLIDEAN_1D

    def __init__(self, tree=None, tolerance=1.0e-10):
        super().__init__(tree, tolerance)

    @classmethod
    def from_bounds(cls, lower: float, upper: float, tolerance=1.0e-10) -> 'IntervalsSet':
        """
        Build the single interval [lower, upper].

        Either bound may be infinite.

        Raises:
            InvalidIntervalError: If lower is above upper
        """
        if upper < lower:
            raise InvalidIntervalError(lower, upper)
        return cls(cls._build_tree(lower, upper, tolerance), tolerance)

    @staticmethod
    def _build_tree(lower, upper, tolerance):
        if math.isinf(lower) and lower < 0:
            if math.isinf(upper) and upper > 0:
                return BSPTree(True)
            upper_cut = OrientedPoint(upper, True, tolerance).whole_hyperplane()
            return BSPTree.from_cut(upper_cut, BSPTree(False), BSPTree(True), None)

        lower_cut = OrientedPoint(lower, False, tolerance).whole_hyperplane()
        if math.isinf(upper) and upper > 0:
            return BSPTree.from_cut(lower_cut, BSPTree(False), BSPTree(True), None)

        upper_cut = OrientedPoint(upper, True, tolerance).whole_hyperplane()
        return BSPTree.from_cut(lower_cut,
                                BSPTree(False),
                                BSPTree.from_cut(upper_cut, BSPTree(False), BSPTree(True), None),
                                None)

    def build_new(self, tree) -> 'IntervalsSet':
        return IntervalsSet(tree, self.tolerance)

    def compute_geometrical_properties(self) -> None:
        tree = self.get_tree(False)
        if tree.cut is None:
            self.set_barycenter(math.nan)
            self.set_size(math.inf if tree.attribute else 0.0)
            return

        size = 0.0
        total = 0.0
        for interval in self.as_list():
            size += interval.get_size()
            total += interval.get_size() * interval.get_barycenter()

        self.set_size(size)
        if math.isinf(size):
            self.set_barycenter(math.nan)
        elif size >= _SAFE_MIN:
            self.set_barycenter(total / size)
        else:
            self.set_barycenter(tree.cut.hyperplane.location)

    def get_inf(self) -> float:
        """Lowest value of the set, -inf if unbounded below."""
        node = self.get_tree(False)
        inf = math.inf
        while node.cut is not None:
            op = node.cut.hyperplane
            inf = op.location
            node = node.minus if op.direct else node.plus
        return -math.inf if node.attribute else inf

    def get_sup(self) -> float:
        """Highest value of the set, +inf if unbounded above."""
        node = self.get_tree(False)
        sup = -math.inf
        while node.cut is not None:
            op = node.cut.hyperplane
            sup = op.location
            node = node.plus if op.direct else node.minus
        return math.inf if node.attribute else sup

    def __iter__(self):
        return iter(self._intervals())

    def as_list(self):
        """The set as a list of Interval objects."""
        return [Interval(lower, upper) for lower, upper in self._intervals()]

    def _intervals(self):
        intervals = []
        self._collect(self.get_tree(False), -math.inf, math.inf, intervals)
        return intervals

    @staticmethod
    def _collect(node, lower, upper, intervals):
        # in-order walk from low to high values
        if node.cut is None:
            if node.attribute:
                if intervals and intervals[-1][1] == lower:
                    intervals[-1][1] = upper
                else:
                    intervals.append([lower, upper])
            return

        op = node.cut.hyperplane
        location = op.location
        low, high = (node.minus, node.plus) if op.direct else (node.plus, node.minus)
        IntervalsSet._collect(low, lower, location, intervals)
        IntervalsSet._collect(high, location, upper, intervals)
