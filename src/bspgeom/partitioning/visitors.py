"""
    Tree visitors used by regions: boundary construction, boundary size
    and attribute cleaning.
"""

from abc import ABC, abstractmethod

from bspgeom.bspgeom_errors import InconsistentTreeError
from bspgeom.bspgeom_types import Side, VisitOrder
from bspgeom.partitioning.boundary_attribute import BoundaryAttribute
from bspgeom.profiling import profile


class BSPTreeVisitor(ABC):
    """Callbacks driven by BSPTree.visit."""

    @abstractmethod
    def visit_order(self, node) -> VisitOrder:
        """Order in which the internal node and its subtrees are visited."""

    @abstractmethod
    def visit_internal_node(self, node) -> None:
        """Visit an internal node (one with a cut)."""

    @abstractmethod
    def visit_leaf_node(self, node) -> None:
        """Visit a leaf node."""


# ==============================================================================
# BOUNDARY CONSTRUCTION
# ==============================================================================

class BoundaryBuilder(BSPTreeVisitor):
    """
    Computes the boundary attribute of every internal node of a region tree.

    Each cut is characterized twice, first against the plus subtree then
    against the minus subtree. Parts with the same inside/outside flag on
    both sides do not belong to the boundary, parts with different flags do.
    """

    def visit_order(self, node) -> VisitOrder:
        return VisitOrder.PLUS_MINUS_SUB

    @profile
    def visit_internal_node(self, node) -> None:
        plus_outside = None
        plus_inside = None

        plus_char = [None, None]
        self.characterize(node.plus, node.cut.copy_self(), plus_char)

        if plus_char[0] is not None and not plus_char[0].is_empty():
            # outside cells on the plus side, look for inside cells on the minus side
            minus_char = [None, None]
            self.characterize(node.minus, plus_char[0], minus_char)
            if minus_char[1] is not None and not minus_char[1].is_empty():
                plus_outside = minus_char[1]

        if plus_char[1] is not None and not plus_char[1].is_empty():
            # inside cells on the plus side, look for outside cells on the minus side
            minus_char = [None, None]
            self.characterize(node.minus, plus_char[1], minus_char)
            if minus_char[0] is not None and not minus_char[0].is_empty():
                plus_inside = minus_char[0]

        node.attribute = BoundaryAttribute(plus_outside, plus_inside)

    def visit_leaf_node(self, node) -> None:
        pass

    def characterize(self, node, sub, characterization):
        """
        Split a sub-hyperplane into the parts lying in outside cells
        (characterization[0]) and in inside cells (characterization[1]).
        """
        if node.cut is None:
            slot = 1 if node.attribute else 0
            if characterization[slot] is None:
                characterization[slot] = sub
            else:
                characterization[slot] = characterization[slot].reunite(sub)
            return

        hyperplane = node.cut.hyperplane
        side = sub.side(hyperplane)
        if side is Side.PLUS:
            self.characterize(node.plus, sub, characterization)
        elif side is Side.MINUS:
            self.characterize(node.minus, sub, characterization)
        elif side is Side.BOTH:
            split = sub.split(hyperplane)
            self.characterize(node.plus, split.plus, characterization)
            self.characterize(node.minus, split.minus, characterization)
        else:
            raise InconsistentTreeError("a cut lies on a hyperplane of its own subtree")


class BoundarySizeVisitor(BSPTreeVisitor):
    """Accumulates the size of the boundary parts stored in a region tree."""

    def __init__(self):
        self.boundary_size = 0.0

    def visit_order(self, node) -> VisitOrder:
        return VisitOrder.MINUS_SUB_PLUS

    def visit_internal_node(self, node) -> None:
        attribute = node.attribute
        if attribute.plus_outside is not None:
            self.boundary_size += attribute.plus_outside.get_size()
        if attribute.plus_inside is not None:
            self.boundary_size += attribute.plus_inside.get_size()

    def visit_leaf_node(self, node) -> None:
        pass


class NodesCleaner(BSPTreeVisitor):
    """Resets the attribute of every internal node."""

    def __init__(self, internal_attribute=None):
        self.internal_attribute = internal_attribute

    def visit_order(self, node) -> VisitOrder:
        return VisitOrder.PLUS_SUB_MINUS

    def visit_internal_node(self, node) -> None:
        node.attribute = self.internal_attribute

    def visit_leaf_node(self, node) -> None:
        pass
