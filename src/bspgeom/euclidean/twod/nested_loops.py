"""
    Orientation correction for nested boundary loops.

Boundary loops extracted from an outline come with arbitrary orientations.
This module nests them by containment and reorients them so that outer
loops are counter-clockwise, their holes clockwise, islands inside holes
counter-clockwise again, and so on.
"""

import logging
import math

from bspgeom.bspgeom_errors import CrossingBoundaryLoopsError, OpenBoundaryLoopError
from bspgeom.partitioning.region_factory import RegionFactory

logger = logging.getLogger(__name__)


class NestedLoops:
    """
    A node of the loops containment tree.

    The root node built with NestedLoops(tolerance) has no loop of its own;
    every added loop becomes a node below it.
    """

    def __init__(self, tolerance: float):
        self._tolerance = tolerance
        self._loop = None
        self._polygon = None
        self._surrounded = []
        self._original_is_ccw = True
        self.orientation_corrected = False

    @classmethod
    def _for_loop(cls, loop, tolerance):
        from bspgeom.euclidean.twod.polygons_set import PolygonsSet, loop_edges

        if len(loop) == 0 or loop[0] is None:
            raise OpenBoundaryLoopError()

        node = cls(tolerance)
        node._loop = tuple(loop)
        polygon = PolygonsSet.from_boundary(loop_edges(node._loop, tolerance), tolerance)

        # the region bounded by the loop may be its unbounded side
        if math.isinf(polygon.get_size()):
            polygon = RegionFactory().get_complement(polygon)
            node._original_is_ccw = False
        node._polygon = polygon
        return node

    @property
    def loop(self):
        """The (possibly corrected) loop of this node, None for the root."""
        return self._loop

    @property
    def polygon(self):
        """Finite region bounded by the loop."""
        return self._polygon

    @property
    def surrounded(self):
        return list(self._surrounded)

    def add(self, loop) -> None:
        """
        Add a loop to the containment tree.

        Raises:
            OpenBoundaryLoopError: If the loop is open
            CrossingBoundaryLoopsError: If the loop crosses an existing one
        """
        self._add_node(NestedLoops._for_loop(loop, self._tolerance))

    def _add_node(self, node):
        # inside an existing loop: go down
        for child in self._surrounded:
            if child._polygon.contains(node._polygon):
                child._add_node(node)
                return

        # around existing loops: adopt them
        remaining = []
        for child in self._surrounded:
            if node._polygon.contains(child._polygon):
                node._surrounded.append(child)
            else:
                remaining.append(child)
        self._surrounded = remaining

        # the remaining ones must be disjoint
        factory = RegionFactory()
        for child in self._surrounded:
            if not factory.intersection(node._polygon, child._polygon).is_empty():
                raise CrossingBoundaryLoopsError()

        self._surrounded.append(node)

    def correct_orientation(self) -> None:
        """Make top-level loops counter-clockwise, alternating at each nesting level."""
        for child in self._surrounded:
            child._set_ccw(True)

    def _set_ccw(self, ccw):
        if self._original_is_ccw != ccw:
            self._loop = tuple(reversed(self._loop))
            self._original_is_ccw = ccw
            self.orientation_corrected = True
            logger.debug("reversed loop of %d vertices", len(self._loop))
        for child in self._surrounded:
            child._set_ccw(not ccw)

    def get_loops(self):
        """All loops of the containment tree, depth first."""
        loops = []
        if self._loop is not None:
            loops.append(self._loop)
        for child in self._surrounded:
            loops.extend(child.get_loops())
        return loops
