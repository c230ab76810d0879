"""
    Parts of lines: sub-lines and segments.
"""

import math

from bspgeom.bspgeom_types import Location, Side
from bspgeom.euclidean.oned.intervals_set import IntervalsSet
from bspgeom.euclidean.oned.oriented_point import OrientedPoint
from bspgeom.euclidean.twod.line import Line
from bspgeom.mathutils.vec2 import Vec2
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.hyperplane import SplitSubHyperplane, SubHyperplane


class Segment:
    """A segment between two points of a line."""
    __slots__ = ('start', 'end', 'line')

    def __init__(self, start, end, line: Line):
        self.start = start
        self.end = end
        self.line = line

    def get_length(self) -> float:
        return self.start.distance(self.end)

    def distance(self, point) -> float:
        """Distance between a point and the segment."""
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        r = ((point[0] - self.start.x) * dx + (point[1] - self.start.y) * dy) / (dx * dx + dy * dy)
        if r < 0 or r > 1:
            return min(self.start.distance(point), self.end.distance(point))
        closest = Vec2(self.start.x + r * dx, self.start.y + r * dy)
        return closest.distance(point)

    def __repr__(self):
        return f"Segment({self.start!r}, {self.end!r})"


class SubLine(SubHyperplane):
    """A line restricted to a set of intervals of its abscissa."""

    @classmethod
    def from_endpoints(cls, start, end, tolerance: float) -> 'SubLine':
        """Sub-line covering the segment from start to end."""
        line = Line.from_points(start, end, tolerance)
        intervals = IntervalsSet.from_bounds(line.to_sub_space(start), line.to_sub_space(end), tolerance)
        return cls(line, intervals)

    @classmethod
    def from_segment(cls, segment: Segment) -> 'SubLine':
        line = segment.line
        intervals = IntervalsSet.from_bounds(line.to_sub_space(segment.start),
                                             line.to_sub_space(segment.end),
                                             line.tolerance)
        return cls(line, intervals)

    def build_new(self, hyperplane, remaining_region) -> 'SubLine':
        return SubLine(hyperplane, remaining_region)

    def get_segments(self):
        """
        The sub-line as a list of segments.

        Unbounded intervals give segments with infinite coordinates.
        """
        line = self._hyperplane
        return [Segment(line.to_space(interval.inf), line.to_space(interval.sup), line)
                for interval in self._remaining_region.as_list()]

    def intersection(self, sub_line: 'SubLine', include_end_points: bool):
        """
        Intersection point with another sub-line.

        Args:
            sub_line: Other sub-line
            include_end_points: Whether crossings at an end point count

        Returns:
            The intersection point, or None
        """
        line1 = self._hyperplane
        line2 = sub_line.hyperplane
        crossing = line1.intersection(line2)
        if crossing is None:
            return None

        location1 = self._remaining_region.check_point(line1.to_sub_space(crossing))
        location2 = sub_line.remaining_region.check_point(line2.to_sub_space(crossing))
        if include_end_points:
            if location1 is not Location.OUTSIDE and location2 is not Location.OUTSIDE:
                return crossing
            return None
        if location1 is Location.INSIDE and location2 is Location.INSIDE:
            return crossing
        return None

    def side(self, hyperplane) -> Side:
        this_line = self._hyperplane
        crossing = this_line.intersection(hyperplane)
        if crossing is None:
            # parallel lines
            offset = hyperplane.get_line_offset(this_line)
            if offset < -1.0e-10:
                return Side.MINUS
            if offset > 1.0e-10:
                return Side.PLUS
            return Side.HYPER

        direct = math.sin(this_line.angle - hyperplane.angle) < 0
        x = this_line.to_sub_space(crossing)
        return self._remaining_region.side(OrientedPoint(x, direct, this_line.tolerance))

    def split(self, hyperplane) -> SplitSubHyperplane:
        this_line = self._hyperplane
        crossing = this_line.intersection(hyperplane)
        tolerance = this_line.tolerance

        if crossing is None:
            offset = hyperplane.get_line_offset(this_line)
            if offset < -1.0e-10:
                return SplitSubHyperplane(None, self)
            return SplitSubHyperplane(self, None)

        direct = math.sin(this_line.angle - hyperplane.angle) < 0
        x = this_line.to_sub_space(crossing)
        sub_plus = OrientedPoint(x, not direct, tolerance).whole_hyperplane()
        sub_minus = OrientedPoint(x, direct, tolerance).whole_hyperplane()

        region = self._remaining_region
        split_tree = region.get_tree(False).split(sub_minus)
        if region.is_empty(split_tree.plus):
            plus_tree = BSPTree(False)
        else:
            plus_tree = BSPTree.from_cut(sub_plus, BSPTree(False), split_tree.plus, None)
        if region.is_empty(split_tree.minus):
            minus_tree = BSPTree(False)
        else:
            minus_tree = BSPTree.from_cut(sub_minus, BSPTree(False), split_tree.minus, None)

        return SplitSubHyperplane(SubLine(this_line, IntervalsSet(plus_tree, tolerance)),
                                  SubLine(this_line, IntervalsSet(minus_tree, tolerance)))

    def __repr__(self):
        return f"SubLine({self._hyperplane!r}, {list(self._remaining_region)!r})"
