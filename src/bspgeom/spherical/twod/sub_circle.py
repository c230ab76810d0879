"""
    Parts of great circles.
"""

import math

from bspgeom.bspgeom_types import Side
from bspgeom.mathutils.vec3 import vec3_angle
from bspgeom.partitioning.hyperplane import SplitSubHyperplane, SubHyperplane


class SubCircle(SubHyperplane):
    """A great circle restricted to a set of arcs of its phase."""

    def build_new(self, hyperplane, remaining_region) -> 'SubCircle':
        return SubCircle(hyperplane, remaining_region)

    def side(self, hyperplane) -> Side:
        this_circle = self._hyperplane
        angle = vec3_angle(this_circle.pole, hyperplane.pole)
        if angle < this_circle.tolerance or angle > math.pi - this_circle.tolerance:
            return Side.HYPER
        return self._remaining_region.side(this_circle.get_inside_arc(hyperplane))

    def split(self, hyperplane) -> SplitSubHyperplane:
        this_circle = self._hyperplane
        angle = vec3_angle(this_circle.pole, hyperplane.pole)

        if angle < this_circle.tolerance:
            # same circle, same orientation
            return SplitSubHyperplane(None, self)
        if angle > math.pi - this_circle.tolerance:
            # same circle, opposite orientation
            return SplitSubHyperplane(self, None)

        split = self._remaining_region.split(this_circle.get_inside_arc(hyperplane))
        return SplitSubHyperplane(
            None if split.plus is None else SubCircle(this_circle, split.plus),
            None if split.minus is None else SubCircle(this_circle, split.minus))

    def __repr__(self):
        return f"SubCircle({self._hyperplane!r}, {list(self._remaining_region)!r})"
