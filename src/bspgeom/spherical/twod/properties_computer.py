"""
    Area and barycenter of spherical polygons.
"""

import math

from bspgeom.bspgeom_errors import InconsistentTreeError
from bspgeom.bspgeom_types import VisitOrder
from bspgeom.mathutils.bspgeom_math import TWO_PI
from bspgeom.mathutils.vec3 import ZERO
from bspgeom.partitioning.visitors import BSPTreeVisitor
from bspgeom.spherical.twod.s2_point import S2Point


class PropertiesComputer(BSPTreeVisitor):
    """
    Sums the area and weighted barycenter of the convex inside cells.

    Each inside leaf is turned into a single convex polygon whose area
    comes from the Girard formula (angle sum minus (n - 2)π).
    """

    def __init__(self, tolerance: float):
        self._tolerance = tolerance
        self._summed_area = 0.0
        self._summed_barycenter = ZERO

    def visit_order(self, node):
        return VisitOrder.MINUS_SUB_PLUS

    def visit_internal_node(self, node):
        pass

    def visit_leaf_node(self, node):
        if not node.attribute:
            return
        from bspgeom.spherical.twod.spherical_polygons_set import SphericalPolygonsSet

        convex = SphericalPolygonsSet(node.prune_around_convex_cell(True, False, None),
                                      self._tolerance)
        loops = convex.get_boundary_loops()
        if len(loops) != 1:
            raise InconsistentTreeError(f"convex cell has {len(loops)} boundary loops")

        area = self._convex_cell_area(loops[0])
        barycenter = self._convex_cell_barycenter(loops[0])
        self._summed_area += area
        self._summed_barycenter = self._summed_barycenter + barycenter * area

    @staticmethod
    def _convex_cell_area(start):
        n = 0
        total = 0.0
        edge = start.outgoing
        while n == 0 or edge.start is not start:
            previous_pole = edge.circle.pole
            next_pole = edge.end.outgoing.circle.pole
            point = edge.end.location.vector

            # turning angle at the vertex
            alpha = math.atan2(next_pole.dot(point.cross(previous_pole)),
                               -next_pole.dot(previous_pole))
            if alpha < 0:
                alpha += TWO_PI
            total += alpha
            n += 1
            edge = edge.end.outgoing

        return total - (n - 2) * math.pi

    @staticmethod
    def _convex_cell_barycenter(start):
        n = 0
        total = ZERO
        edge = start.outgoing
        while n == 0 or edge.start is not start:
            total = total + edge.circle.pole * edge.length
            n += 1
            edge = edge.end.outgoing
        return total.normalized()

    @property
    def area(self) -> float:
        return self._summed_area

    @property
    def barycenter(self) -> S2Point:
        if self._summed_barycenter.length_sq() == 0:
            return S2Point.NAN
        return S2Point(self._summed_barycenter)
