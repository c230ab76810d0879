"""
    Sets of arcs on the unit circle.

The circle is handled as the [0, 2π) interval: tree cuts are limit angles
within that range, and an arc crossing the 0 angle is represented by two
cells, one at each end of the range. A valid tree must therefore have the
same inside/outside state at both ends.
"""

import math
import sys
from collections import namedtuple

from bspgeom.bspgeom_errors import (
    InconsistentStateAt2PiWrappingError,
    InconsistentTreeError,
    InvalidIntervalError,
)
from bspgeom.bspgeom_types import SPHERE_1D, Location, Side
from bspgeom.mathutils.bspgeom_math import TWO_PI, normalize_angle
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.region import AbstractRegion
from bspgeom.spherical.oned.limit_angle import LimitAngle
from bspgeom.spherical.oned.s1_point import S1Point

# Smallest size considered non-degenerate
_SAFE_MIN = sys.float_info.min


ArcsSetSplit = namedtuple('ArcsSetSplit', ['plus', 'minus'])
ArcsSetSplit.__doc__ = """Parts of an arcs set on each side of an arc (either may be None)."""


class Arc:
    """
    An arc of the unit circle, from lower to upper counter-clockwise.

    Equal bounds, or bounds 2π or more apart, give the full circle [0, 2π].

    Raises:
        InvalidIntervalError: If lower is above upper
    """
    __slots__ = ('_lower', '_upper', '_middle', '_tolerance')

    def __init__(self, lower: float, upper: float, tolerance: float):
        self._tolerance = tolerance
        if lower == upper or upper - lower >= TWO_PI:
            self._lower = 0.0
            self._upper = TWO_PI
            self._middle = math.pi
        elif lower <= upper:
            self._lower = normalize_angle(lower, math.pi)
            self._upper = self._lower + (upper - lower)
            self._middle = 0.5 * (self._lower + self._upper)
        else:
            raise InvalidIntervalError(lower, upper)

    @property
    def inf(self) -> float:
        return self._lower

    @property
    def sup(self) -> float:
        return self._upper

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def get_size(self) -> float:
        return self._upper - self._lower

    def get_barycenter(self) -> float:
        return self._middle

    def check_point(self, point: float) -> Location:
        """Locate an angle with respect to the arc."""
        normalized = normalize_angle(point, self._middle)
        if normalized < self._lower - self._tolerance or normalized > self._upper + self._tolerance:
            return Location.OUTSIDE
        if self._lower + self._tolerance < normalized < self._upper - self._tolerance:
            return Location.INSIDE
        # the full circle has no boundary
        return Location.INSIDE if self.get_size() >= TWO_PI - self._tolerance else Location.BOUNDARY

    def __repr__(self):
        return f"Arc({self._lower!r}, {self._upper!r})"


class ArcsSet(AbstractRegion):
    """
    Region of the unit circle: a finite union of arcs.

    Iterating over the set yields [lower, upper] pairs with lower in
    [0, 2π); the arc crossing the 0 angle, if any, comes last with an upper
    bound beyond 2π.

    Raises:
        InconsistentStateAt2PiWrappingError: If the tree states at 0 and 2π
            differ
    """
    space = SPHERE_1D

    def __init__(self, tree=None, tolerance=1.0e-10):
        super().__init__(tree, tolerance)
        self._check_2pi_consistency()

    @classmethod
    def from_bounds(cls, lower: float, upper: float, tolerance=1.0e-10) -> 'ArcsSet':
        """
        Build the arc going counter-clockwise from lower to upper.

        Raises:
            InvalidIntervalError: If lower is above upper
        """
        return cls(cls._build_tree(lower, upper, tolerance), tolerance)

    @staticmethod
    def _build_tree(lower, upper, tolerance):
        if lower == upper or upper - lower >= TWO_PI:
            return BSPTree(True)
        if lower > upper:
            raise InvalidIntervalError(lower, upper)

        normalized_lower = normalize_angle(lower, math.pi)
        normalized_upper = normalized_lower + (upper - lower)
        lower_cut = LimitAngle(S1Point(normalized_lower), False, tolerance).whole_hyperplane()

        if normalized_upper <= TWO_PI:
            # simple arc starting after 0 and ending before 2π
            upper_cut = LimitAngle(S1Point(normalized_upper), True, tolerance).whole_hyperplane()
            return BSPTree.from_cut(lower_cut,
                                    BSPTree(False),
                                    BSPTree.from_cut(upper_cut, BSPTree(False), BSPTree(True), None),
                                    None)

        # arc wrapping around 2π
        upper_cut = LimitAngle(S1Point(normalized_upper - TWO_PI), True, tolerance).whole_hyperplane()
        return BSPTree.from_cut(lower_cut,
                                BSPTree.from_cut(upper_cut, BSPTree(False), BSPTree(True), None),
                                BSPTree(True),
                                None)

    def build_new(self, tree) -> 'ArcsSet':
        return ArcsSet(tree, self.tolerance)

    # ------------------------------------------------------------------
    # Tree walking helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _child_before(node):
        return node.minus if node.cut.hyperplane.direct else node.plus

    @staticmethod
    def _child_after(node):
        return node.plus if node.cut.hyperplane.direct else node.minus

    def _first_leaf(self):
        node = self.get_tree(False)
        while node.cut is not None:
            node = self._child_before(node)
        return node

    def _last_leaf(self):
        node = self.get_tree(False)
        while node.cut is not None:
            node = self._child_after(node)
        return node

    def _check_2pi_consistency(self):
        if self.get_tree(False).cut is None:
            return
        if bool(self._first_leaf().attribute) != bool(self._last_leaf().attribute):
            raise InconsistentStateAt2PiWrappingError()

    # ------------------------------------------------------------------
    # Arcs
    # ------------------------------------------------------------------

    def __iter__(self):
        return iter(self._arcs())

    def as_list(self):
        """The set as a list of Arc objects."""
        return [Arc(lower, upper, self.tolerance) for lower, upper in self._arcs()]

    def _arcs(self):
        arcs = []
        self._collect(self.get_tree(False), 0.0, TWO_PI, arcs)
        if len(arcs) >= 2 and arcs[0][0] == 0.0 and arcs[-1][1] == TWO_PI:
            # the first and last arcs are the two halves of an arc crossing 0
            first = arcs.pop(0)
            last = arcs.pop()
            arcs.append([last[0], first[1] + TWO_PI])
        return arcs

    @classmethod
    def _collect(cls, node, lower, upper, arcs):
        if node.cut is None:
            if node.attribute:
                if arcs and arcs[-1][1] == lower:
                    arcs[-1][1] = upper
                else:
                    arcs.append([lower, upper])
            return

        location = node.cut.hyperplane.location.alpha
        cls._collect(cls._child_before(node), lower, location, arcs)
        cls._collect(cls._child_after(node), location, upper, arcs)

    # ------------------------------------------------------------------
    # Geometrical properties
    # ------------------------------------------------------------------

    def compute_geometrical_properties(self) -> None:
        tree = self.get_tree(False)
        if tree.cut is None:
            self.set_barycenter(S1Point.NAN)
            self.set_size(TWO_PI if tree.attribute else 0.0)
            return

        size = 0.0
        total = 0.0
        for lower, upper in self:
            length = upper - lower
            size += length
            total += length * (lower + upper)

        self.set_size(size)
        if size == TWO_PI:
            self.set_barycenter(S1Point.NAN)
        elif size >= _SAFE_MIN:
            self.set_barycenter(S1Point(total / (2 * size)))
        else:
            self.set_barycenter(tree.cut.hyperplane.location)

    # ------------------------------------------------------------------
    # Relation to an arc
    # ------------------------------------------------------------------

    def side(self, arc) -> Side:
        """
        Where the set lies with respect to an arc (or a limit angle).

        The arc is considered as the minus side: MINUS means the set is
        within the arc, PLUS entirely outside it and BOTH partly in it.
        """
        if not isinstance(arc, Arc):
            return super().side(arc)

        reference = math.pi + arc.inf
        arc_length = arc.sup - arc.inf
        in_minus = False
        in_plus = False
        for lower, upper in self:
            synced_start = normalize_angle(lower, reference) - arc.inf
            arc_offset = lower - synced_start
            synced_end = upper - arc_offset
            if synced_start <= arc_length - self.tolerance or synced_end >= TWO_PI + self.tolerance:
                in_minus = True
            if synced_end >= arc_length + self.tolerance:
                in_plus = True

        if in_minus:
            return Side.BOTH if in_plus else Side.MINUS
        return Side.PLUS if in_plus else Side.HYPER

    def split(self, arc: Arc) -> ArcsSetSplit:
        """
        Split the set in the parts outside (plus) and inside (minus) an arc.

        Returns:
            ArcsSetSplit(plus, minus), a missing part being None
        """
        minus = []
        plus = []
        reference = math.pi + arc.inf
        arc_length = arc.sup - arc.inf

        for lower, upper in self:
            synced_start = normalize_angle(lower, reference) - arc.inf
            arc_offset = lower - synced_start
            synced_end = upper - arc_offset
            if synced_start < arc_length:
                # the arc starts in the minus part
                minus.append(lower)
                if synced_end > arc_length:
                    minus_to_plus = arc_length + arc_offset
                    minus.append(minus_to_plus)
                    plus.append(minus_to_plus)
                    if synced_end > TWO_PI:
                        plus_to_minus = TWO_PI + arc_offset
                        plus.append(plus_to_minus)
                        minus.append(plus_to_minus)
                        minus.append(upper)
                    else:
                        plus.append(upper)
                else:
                    minus.append(upper)
            else:
                # the arc starts in the plus part
                plus.append(lower)
                if synced_end > TWO_PI:
                    plus_to_minus = TWO_PI + arc_offset
                    plus.append(plus_to_minus)
                    minus.append(plus_to_minus)
                    if synced_end > TWO_PI + arc_length:
                        minus_to_plus = TWO_PI + arc_length + arc_offset
                        minus.append(minus_to_plus)
                        plus.append(minus_to_plus)
                        plus.append(upper)
                    else:
                        minus.append(upper)
                else:
                    plus.append(upper)

        return ArcsSetSplit(self._create_split_part(plus), self._create_split_part(minus))

    def _add_arc_limit(self, tree, alpha, is_start):
        limit = LimitAngle(S1Point(alpha), not is_start, self.tolerance)
        node = tree.get_cell(limit.location, self.tolerance)
        if node.cut is not None:
            raise InconsistentTreeError(f"arc limit {alpha} falls on an existing limit")
        node.insert_cut(limit)
        node.attribute = None
        node.plus.attribute = False
        node.minus.attribute = True

    def _create_split_part(self, limits):
        if not limits:
            return None

        # drop limits pairs that are too close to each other
        i = 0
        while i < len(limits):
            j = (i + 1) % len(limits)
            l_a = limits[i]
            l_b = normalize_angle(limits[j], l_a)
            if abs(l_b - l_a) <= self.tolerance:
                if j > 0:
                    del limits[j]
                    del limits[i]
                    i -= 1
                else:
                    # the closing limit meets the opening one
                    l_end = limits.pop()
                    l_start = limits.pop(0)
                    if not limits:
                        if l_end - l_start > math.pi:
                            return ArcsSet(BSPTree(True), self.tolerance)
                        return None
                    limits.append(limits.pop(0) + TWO_PI)
            i += 1

        tree = BSPTree(False)
        for k in range(0, len(limits) - 1, 2):
            self._add_arc_limit(tree, limits[k], True)
            self._add_arc_limit(tree, limits[k + 1], False)

        if tree.cut is None:
            return None
        return ArcsSet(tree, self.tolerance)
