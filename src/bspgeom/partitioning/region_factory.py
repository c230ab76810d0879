"""
    Boolean set algebra on regions.

Operands are never modified: their trees are copied before being merged,
and the merged tree gets its boundary attributes cleared so they are
recomputed on demand by the resulting region.
"""

import logging

from bspgeom.bspgeom_errors import IncompatibleRegionsError
from bspgeom.partitioning.boundary_attribute import BoundaryAttribute
from bspgeom.partitioning.bsp_tree import BSPTree, LeafMerger
from bspgeom.partitioning.visitors import NodesCleaner
from bspgeom.profiling import profile

logger = logging.getLogger(__name__)


class RegionFactory:
    """Builds regions from other regions (union, intersection, complement...)."""

    def __init__(self):
        self._nodes_cleaner = NodesCleaner(None)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build_convex(self, hyperplanes):
        """
        Build the convex region bounded by the minus sides of hyperplanes.

        Hyperplanes that do not cross the cell built so far are ignored.

        Returns:
            The convex region, or None if no hyperplane is given (the region
            class is taken from the first hyperplane)
        """
        hyperplanes = list(hyperplanes)
        if not hyperplanes:
            return None

        space = hyperplanes[0].whole_space()
        return type(space).convex(hyperplanes, space.tolerance)

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    @profile
    def union(self, region1, region2):
        """Region containing the points of either operand."""
        return self._combine("union", region1, region2, _UnionMerger())

    @profile
    def intersection(self, region1, region2):
        """Region containing the points common to both operands."""
        return self._combine("intersection", region1, region2, _IntersectionMerger())

    @profile
    def xor(self, region1, region2):
        """Region containing the points of exactly one operand."""
        return self._combine("xor", region1, region2, _XorMerger(self))

    @profile
    def difference(self, region1, region2):
        """Region containing the points of region1 that are not in region2."""
        return self._combine("difference", region1, region2, _DifferenceMerger(self))

    @profile
    def get_complement(self, region):
        """
        Region containing the points the operand does not contain.

        The boundary attributes already computed are kept, with their inside
        and outside parts swapped.
        """
        return region.build_new(self.recurse_complement(region.get_tree(False)))

    def recurse_complement(self, node) -> BSPTree:
        """Complemented copy of a tree."""
        if node.cut is None:
            return BSPTree(not node.attribute)

        attribute = node.attribute
        if attribute is not None:
            plus_outside = None if attribute.plus_inside is None else attribute.plus_inside.copy_self()
            plus_inside = None if attribute.plus_outside is None else attribute.plus_outside.copy_self()
            attribute = BoundaryAttribute(plus_outside, plus_inside)

        return BSPTree.from_cut(node.cut.copy_self(),
                                self.recurse_complement(node.plus),
                                self.recurse_complement(node.minus),
                                attribute)

    def _combine(self, operation, region1, region2, merger):
        self.check_compatible(region1, region2)
        tree1 = region1.get_tree(False).copy_self()
        tree2 = region2.get_tree(False).copy_self()
        logger.debug("%s of two %s regions", operation, region1.space.name)
        tree = tree1.merge(tree2, merger)
        tree.visit(self._nodes_cleaner)
        return region1.build_new(tree)

    @staticmethod
    def check_compatible(region1, region2):
        """
        Raises:
            IncompatibleRegionsError: If the regions do not belong to the
                same space or do not share the same tolerance
        """
        if region1.space is not region2.space:
            raise IncompatibleRegionsError(
                f"cannot combine regions of {region1.space.name} and {region2.space.name}")
        if region1.tolerance != region2.tolerance:
            raise IncompatibleRegionsError(
                f"cannot combine regions with tolerances {region1.tolerance} and {region2.tolerance}")


# ==============================================================================
# LEAF MERGERS
# ==============================================================================

class _UnionMerger(LeafMerger):
    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        if leaf.attribute:
            # an inside cell absorbs the other operand
            leaf.insert_in_tree(parent_tree, is_plus_child, True)
            return leaf
        tree.insert_in_tree(parent_tree, is_plus_child, False)
        return tree


class _IntersectionMerger(LeafMerger):
    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        if leaf.attribute:
            tree.insert_in_tree(parent_tree, is_plus_child, True)
            return tree
        # an outside cell absorbs the other operand
        leaf.insert_in_tree(parent_tree, is_plus_child, False)
        return leaf


class _XorMerger(LeafMerger):
    def __init__(self, factory):
        self._factory = factory

    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        result = tree
        if leaf.attribute:
            result = self._factory.recurse_complement(result)
        result.insert_in_tree(parent_tree, is_plus_child, True)
        return result


class _DifferenceMerger(LeafMerger):
    def __init__(self, factory):
        self._factory = factory

    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        if leaf.attribute:
            # inside cell: what remains is the complement of the subtracted operand
            result = self._factory.recurse_complement(tree if leaf_from_instance else leaf)
            result.insert_in_tree(parent_tree, is_plus_child, True)
            return result
        result = leaf if leaf_from_instance else tree
        result.insert_in_tree(parent_tree, is_plus_child, False)
        return result
