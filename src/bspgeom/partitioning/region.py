"""
    Abstract region backed by a BSP tree.

A region is the set of points lying in the inside cells of its tree. Leaves
carry a bool inside flag; internal nodes carry a BoundaryAttribute once the
boundary has been computed, None before.
"""

import logging
from abc import ABC, abstractmethod

from bspgeom.bspgeom_types import Location, Side, VisitOrder
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.region_factory import RegionFactory
from bspgeom.partitioning.visitors import BSPTreeVisitor, BoundaryBuilder, BoundarySizeVisitor
from bspgeom.profiling import profile

logger = logging.getLogger(__name__)


class _LeafTagger(BSPTreeVisitor):
    # root leaves and minus children are inside, plus children are outside
    def visit_order(self, node):
        return VisitOrder.PLUS_SUB_MINUS

    def visit_internal_node(self, node):
        pass

    def visit_leaf_node(self, node):
        node.attribute = node.parent is None or node is node.parent.minus


class _Sides:
    __slots__ = ('plus_found', 'minus_found')

    def __init__(self):
        self.plus_found = False
        self.minus_found = False

    def both_found(self):
        return self.plus_found and self.minus_found


class AbstractRegion(ABC):
    """
    Region of a space, described by a BSP tree.

    Subclasses set the class attribute `space` and implement build_new and
    compute_geometrical_properties.

    Args:
        tree: Tree describing the region, None for the whole space. The tree
            is used as is, not copied: it must not be shared with another
            region.
        tolerance: Tolerance below which points are considered identical
    """
    space = None

    def __init__(self, tree=None, tolerance=1.0e-10):
        self._tree = BSPTree(True) if tree is None else tree
        self._tolerance = tolerance
        self._size = None
        self._barycenter = None
        self._properties_computed = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    @profile
    def from_boundary(cls, boundary, tolerance=1.0e-10):
        """
        Build a region from its boundary.

        The boundary sub-hyperplanes must be oriented so the inside of the
        region is on their minus side. The boundary does not need to be
        connected, but it must define a closed region (or be empty, which
        gives the whole space).
        """
        boundary = list(boundary)
        if not boundary:
            return cls(BSPTree(True), tolerance)

        # larger pieces first, they tend to make more balanced trees
        ordered = sorted(boundary, key=lambda sub: -sub.get_size())
        tree = BSPTree()
        cls._insert_cuts(tree, ordered)
        tree.visit(_LeafTagger())
        logger.debug("built %s region from %d boundary pieces", cls.__name__, len(boundary))
        return cls(tree, tolerance)

    @staticmethod
    def _insert_cuts(node, boundary):
        index = 0
        inserted = None
        while inserted is None and index < len(boundary):
            inserted = boundary[index].hyperplane
            index += 1
            if not node.insert_cut(inserted.copy_self()):
                inserted = None

        if index >= len(boundary):
            return

        plus_list = []
        minus_list = []
        for other in boundary[index:]:
            side = other.side(inserted)
            if side is Side.PLUS:
                plus_list.append(other)
            elif side is Side.MINUS:
                minus_list.append(other)
            elif side is Side.BOTH:
                split = other.split(inserted)
                plus_list.append(split.plus)
                minus_list.append(split.minus)
            # HYPER pieces lie on the inserted cut and are dropped

        AbstractRegion._insert_cuts(node.plus, plus_list)
        AbstractRegion._insert_cuts(node.minus, minus_list)

    @classmethod
    def convex(cls, hyperplanes, tolerance=1.0e-10):
        """
        Build the convex region lying on the minus side of all hyperplanes.

        An empty list gives the empty region. Hyperplanes that do not cross
        the cell built so far are ignored.
        """
        hyperplanes = list(hyperplanes)
        if not hyperplanes:
            return cls(BSPTree(False), tolerance)

        tree = hyperplanes[0].whole_space().get_tree(False)
        node = tree
        node.attribute = True
        for hyperplane in hyperplanes:
            if node.insert_cut(hyperplane):
                node.attribute = None
                node.plus.attribute = False
                node = node.minus
                node.attribute = True
        return cls(tree, tolerance)

    @abstractmethod
    def build_new(self, tree) -> 'AbstractRegion':
        """Build a region of the same type and tolerance from a tree."""

    def copy_self(self) -> 'AbstractRegion':
        return self.build_new(self._tree.copy_self())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def is_empty(self, node=None) -> bool:
        """Whether the region (or the subtree rooted at node) has no inside cell."""
        node = self._tree if node is None else node
        if node.cut is None:
            return not node.attribute
        return self.is_empty(node.minus) and self.is_empty(node.plus)

    def is_full(self, node=None) -> bool:
        """Whether the region (or the subtree rooted at node) has only inside cells."""
        node = self._tree if node is None else node
        if node.cut is None:
            return bool(node.attribute)
        return self.is_full(node.minus) and self.is_full(node.plus)

    def contains(self, region) -> bool:
        """Whether this region contains another one."""
        return RegionFactory().difference(region, self).is_empty()

    def check_point(self, point, node=None) -> Location:
        """
        Check a point with respect to the region.

        Returns:
            INSIDE, OUTSIDE or BOUNDARY (within the region tolerance)
        """
        node = self._tree if node is None else node
        cell = node.get_cell(point, self._tolerance)
        if cell.cut is None:
            return Location.INSIDE if cell.attribute else Location.OUTSIDE

        # the point lies on the cut, both sides decide
        minus_location = self.check_point(point, cell.minus)
        plus_location = self.check_point(point, cell.plus)
        return minus_location if minus_location is plus_location else Location.BOUNDARY

    def get_tree(self, include_boundary_attributes: bool) -> BSPTree:
        """
        Get the underlying tree.

        Args:
            include_boundary_attributes: If True, internal nodes carry their
                BoundaryAttribute (computed on first request)
        """
        if include_boundary_attributes and self._tree.cut is not None and self._tree.attribute is None:
            self._tree.visit(BoundaryBuilder())
        return self._tree

    def get_boundary_size(self) -> float:
        visitor = BoundarySizeVisitor()
        self.get_tree(True).visit(visitor)
        return visitor.boundary_size

    def get_size(self) -> float:
        """Size of the region (length, area, solid angle...)."""
        if not self._properties_computed:
            self._compute_properties()
        return self._size

    def get_barycenter(self):
        if not self._properties_computed:
            self._compute_properties()
        return self._barycenter

    def _compute_properties(self):
        self.compute_geometrical_properties()
        self._properties_computed = True

    def set_size(self, size: float) -> None:
        self._size = size

    def set_barycenter(self, barycenter) -> None:
        self._barycenter = barycenter

    @abstractmethod
    def compute_geometrical_properties(self) -> None:
        """Compute size and barycenter, storing them with set_size and set_barycenter."""

    # ------------------------------------------------------------------
    # Relation to hyperplanes
    # ------------------------------------------------------------------

    def side(self, hyperplane) -> Side:
        """
        Where the region lies with respect to a hyperplane.

        Returns:
            PLUS or MINUS if the region is entirely on one side, BOTH if it
            crosses the hyperplane, HYPER if it has no inside part off it
        """
        sides = _Sides()
        self._recurse_sides(self._tree, hyperplane.whole_hyperplane(), sides)
        if sides.plus_found:
            return Side.BOTH if sides.minus_found else Side.PLUS
        return Side.MINUS if sides.minus_found else Side.HYPER

    def _recurse_sides(self, node, sub, sides):
        if node.cut is None:
            if node.attribute:
                # an inside cell covering the whole sub-hyperplane
                sides.plus_found = True
                sides.minus_found = True
            return

        hyperplane = node.cut.hyperplane
        side = sub.side(hyperplane)
        if side is Side.PLUS:
            # the sub-hyperplane is on the plus side of the cut, the minus
            # subtree is entirely on one side of the sub-hyperplane
            if node.cut.side(sub.hyperplane) is Side.PLUS:
                if not self.is_empty(node.minus):
                    sides.plus_found = True
            elif not self.is_empty(node.minus):
                sides.minus_found = True
            if not sides.both_found():
                self._recurse_sides(node.plus, sub, sides)
        elif side is Side.MINUS:
            if node.cut.side(sub.hyperplane) is Side.PLUS:
                if not self.is_empty(node.plus):
                    sides.plus_found = True
            elif not self.is_empty(node.plus):
                sides.minus_found = True
            if not sides.both_found():
                self._recurse_sides(node.minus, sub, sides)
        elif side is Side.BOTH:
            split = sub.split(hyperplane)
            self._recurse_sides(node.plus, split.plus, sides)
            if not sides.both_found():
                self._recurse_sides(node.minus, split.minus, sides)
        else:
            same = node.cut.hyperplane.same_orientation_as(sub.hyperplane)
            if node.plus.cut is not None or node.plus.attribute:
                if same:
                    sides.plus_found = True
                else:
                    sides.minus_found = True
            if node.minus.cut is not None or node.minus.attribute:
                if same:
                    sides.minus_found = True
                else:
                    sides.plus_found = True

    def intersection(self, sub):
        """
        Part of a sub-hyperplane lying inside the region.

        Returns:
            A new sub-hyperplane, or None if nothing of sub is inside
        """
        return self._recurse_intersection(self._tree, sub)

    def _recurse_intersection(self, node, sub):
        if sub is None:
            return None
        if node.cut is None:
            return sub.copy_self() if node.attribute else None

        hyperplane = node.cut.hyperplane
        side = sub.side(hyperplane)
        if side is Side.PLUS:
            return self._recurse_intersection(node.plus, sub)
        if side is Side.MINUS:
            return self._recurse_intersection(node.minus, sub)
        if side is Side.BOTH:
            split = sub.split(hyperplane)
            plus = self._recurse_intersection(node.plus, split.plus)
            minus = self._recurse_intersection(node.minus, split.minus)
            if plus is None:
                return minus
            if minus is None:
                return plus
            return plus.reunite(minus)
        return self._recurse_intersection(node.plus, self._recurse_intersection(node.minus, sub))

    def __repr__(self):
        if self.is_empty():
            return f"{type(self).__name__}(empty)"
        if self.is_full():
            return f"{type(self).__name__}(full)"
        return f"{type(self).__name__}(size={self.get_size()!r})"
