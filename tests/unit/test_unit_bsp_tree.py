"""
Unit tests for BSPTree.

Tests cover cut insertion, the visit orders, point classification (including
the minus side tie-break), copies, close cuts and convex cell pruning.
"""

import unittest

from bspgeom.bspgeom_types import VisitOrder
from bspgeom.euclidean.oned.intervals_set import IntervalsSet
from bspgeom.euclidean.oned.oriented_point import OrientedPoint
from bspgeom.euclidean.twod.line import Line
from bspgeom.euclidean.twod.polygons_set import PolygonsSet
from bspgeom.partitioning import BSPTree, BSPTreeVisitor

TOLERANCE = 1.0e-10


class _RecordingVisitor(BSPTreeVisitor):
    """Records 'plus', 'minus' and 'sub' events around a single cut tree."""

    def __init__(self, root, order):
        self.root = root
        self.order = order
        self.events = []

    def visit_order(self, node):
        return self.order

    def visit_internal_node(self, node):
        self.events.append('sub')

    def visit_leaf_node(self, node):
        self.events.append('plus' if node is self.root.plus else 'minus')


def _single_cut_tree():
    cut = OrientedPoint(0.0, True, TOLERANCE).whole_hyperplane()
    return BSPTree.from_cut(cut, BSPTree(False), BSPTree(True))


class BSPTreeConstructionTests(unittest.TestCase):
    """Tests for building trees"""

    def testLeaf(self):
        """Test a leaf has no cut and keeps its attribute"""
        leaf = BSPTree(True)
        self.assertTrue(leaf.is_leaf())
        self.assertIsNone(leaf.cut)
        self.assertIsNone(leaf.parent)
        self.assertTrue(leaf.attribute)

    def testFromCutLinksParents(self):
        """Test internal node construction links children to their parent"""
        tree = _single_cut_tree()
        self.assertFalse(tree.is_leaf())
        self.assertIs(tree.plus.parent, tree)
        self.assertIs(tree.minus.parent, tree)

    def testFromCutRequiresChildren(self):
        """Test an internal node needs a cut and two children"""
        cut = OrientedPoint(0.0, True, TOLERANCE).whole_hyperplane()
        with self.assertRaises(ValueError):
            BSPTree.from_cut(cut, BSPTree(False), None)
        with self.assertRaises(ValueError):
            BSPTree.from_cut(None, BSPTree(False), BSPTree(True))

    def testInsertCut(self):
        """Test inserting a cut in a leaf creates two leaves with its attribute"""
        tree = BSPTree(True)
        self.assertTrue(tree.insert_cut(OrientedPoint(1.0, True, TOLERANCE)))
        self.assertIsNone(tree.attribute)
        self.assertTrue(tree.plus.attribute)
        self.assertTrue(tree.minus.attribute)

    def testInsertCutOutsideCell(self):
        """Test a cut not crossing the node cell is rejected"""
        square = PolygonsSet.box(0, 1, 0, 1, TOLERANCE)
        tree = square.get_tree(False).copy_self()
        # descend to the inside cell and try a line far away from it
        inside = tree.classify((0.5, 0.5))
        self.assertTrue(inside.attribute)
        far_line = Line.from_points((10, 0), (10, 1), TOLERANCE)
        self.assertFalse(inside.insert_cut(far_line))
        self.assertTrue(inside.is_leaf())

    def testCopyIsDeep(self):
        """Test copies do not share nodes with the original"""
        tree = _single_cut_tree()
        copy = tree.copy_self()
        self.assertIsNot(copy, tree)
        self.assertIsNot(copy.plus, tree.plus)
        self.assertIs(copy.plus.parent, copy)
        copy.plus.attribute = True
        self.assertFalse(tree.plus.attribute)


class BSPTreeVisitTests(unittest.TestCase):
    """Tests for the visit orders"""

    def testVisitOrderMatchesName(self):
        """Test every visit order handles plus, minus and sub in the order of its name"""
        for order in VisitOrder:
            tree = _single_cut_tree()
            visitor = _RecordingVisitor(tree, order)
            tree.visit(visitor)
            expected = order.name.lower().split('_')
            self.assertEqual(visitor.events, expected, f"visit order {order.name}")

    def testVisitLeafOnly(self):
        """Test visiting a leaf calls visit_leaf_node once"""
        tree = BSPTree(False)
        visitor = _RecordingVisitor(tree, VisitOrder.PLUS_MINUS_SUB)
        tree.visit(visitor)
        self.assertEqual(visitor.events, ['minus'])

    def testVisitDeepTree(self):
        """Test visiting a deep tree does not hit the recursion limit"""
        tree = BSPTree(True)
        node = tree
        for i in range(1100):
            node.insert_cut(OrientedPoint(float(i), True, TOLERANCE))
            node = node.plus

        class Counter(BSPTreeVisitor):
            count = 0

            def visit_order(self, node):
                return VisitOrder.MINUS_SUB_PLUS

            def visit_internal_node(self, node):
                self.count += 1

            def visit_leaf_node(self, node):
                pass

        counter = Counter()
        tree.visit(counter)
        self.assertEqual(counter.count, 1100)


class BSPTreeQueryTests(unittest.TestCase):
    """Tests for point classification and cell queries"""

    def testClassify(self):
        """Test points go to the child on their side of the cut"""
        tree = _single_cut_tree()
        self.assertIs(tree.classify(1.0), tree.plus)
        self.assertIs(tree.classify(-1.0), tree.minus)

    def testClassifyTieBreaksToMinus(self):
        """Test points on the cut go to the minus child"""
        tree = _single_cut_tree()
        self.assertIs(tree.classify(0.0), tree.minus)
        self.assertIs(tree.classify(1.0e-12, TOLERANCE), tree.minus)

    def testGetCell(self):
        """Test get_cell returns the node whose cut holds the point"""
        tree = _single_cut_tree()
        self.assertIs(tree.get_cell(0.0, TOLERANCE), tree)
        self.assertIs(tree.get_cell(2.0, TOLERANCE), tree.plus)

    def testGetCloseCuts(self):
        """Test nodes whose cut passes near a point are all returned"""
        tree = IntervalsSet.from_bounds(0.0, 1.0, TOLERANCE).get_tree(False)
        self.assertEqual(tree.get_close_cuts(0.0, 0.1), [tree])
        self.assertEqual(len(tree.get_close_cuts(0.5, 0.6)), 2)
        self.assertEqual(tree.get_close_cuts(0.5, 0.1), [])

    def testPruneAroundConvexCell(self):
        """Test pruning keeps only the cuts bounding the cell"""
        square = PolygonsSet.box(0, 1, 0, 1, TOLERANCE)
        leaf = square.get_tree(False).classify((0.5, 0.5))
        pruned = PolygonsSet(leaf.prune_around_convex_cell(True, False, None), TOLERANCE)
        self.assertIsNone(pruned.get_tree(False).attribute)
        self.assertAlmostEqual(pruned.get_size(), 1.0)


if __name__ == '__main__':
    unittest.main()
