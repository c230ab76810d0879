"""
Unit tests for RegionFactory.

Tests cover the boolean operations on planar and linear regions, operand
preservation, compatibility checks, convex construction and complements.
"""

import unittest

from bspgeom.bspgeom_errors import IncompatibleRegionsError
from bspgeom.bspgeom_types import Location
from bspgeom.euclidean.oned.intervals_set import IntervalsSet
from bspgeom.euclidean.twod.line import Line
from bspgeom.euclidean.twod.polygons_set import PolygonsSet
from bspgeom.partitioning import RegionFactory

from test_fixtures import assert_locations

TOLERANCE = 1.0e-10


class BooleanOperationTests(unittest.TestCase):
    """Tests for union, intersection, difference and xor of two squares"""

    def setUp(self):
        self.factory = RegionFactory()
        self.a = PolygonsSet.box(0, 2, 0, 2, TOLERANCE)
        self.b = PolygonsSet.box(1, 3, 1, 3, TOLERANCE)

    def testUnion(self):
        """Test the union covers both squares"""
        union = self.factory.union(self.a, self.b)
        self.assertAlmostEqual(union.get_size(), 7.0)
        self.assertAlmostEqual(union.get_boundary_size(), 12.0)
        assert_locations(self, union, [
            ((0.5, 0.5), Location.INSIDE),
            ((2.5, 2.5), Location.INSIDE),
            ((2.5, 0.5), Location.OUTSIDE),
        ])

    def testIntersection(self):
        """Test the intersection is the overlapping unit square"""
        intersection = self.factory.intersection(self.a, self.b)
        self.assertAlmostEqual(intersection.get_size(), 1.0)
        self.assertAlmostEqual(intersection.get_boundary_size(), 4.0)
        self.assertIs(intersection.check_point((1.5, 1.5)), Location.INSIDE)
        self.assertIs(intersection.check_point((0.5, 0.5)), Location.OUTSIDE)

    def testDifference(self):
        """Test the difference removes the overlap from the first square"""
        difference = self.factory.difference(self.a, self.b)
        self.assertAlmostEqual(difference.get_size(), 3.0)
        assert_locations(self, difference, [
            ((0.5, 0.5), Location.INSIDE),
            ((1.5, 1.5), Location.OUTSIDE),
            ((2.5, 2.5), Location.OUTSIDE),
        ])

    def testXor(self):
        """Test the symmetric difference keeps both non overlapping parts"""
        xor = self.factory.xor(self.a, self.b)
        self.assertAlmostEqual(xor.get_size(), 6.0)
        assert_locations(self, xor, [
            ((0.5, 0.5), Location.INSIDE),
            ((2.5, 2.5), Location.INSIDE),
            ((1.5, 1.5), Location.OUTSIDE),
        ])

    def testOperandsUnchanged(self):
        """Test boolean operations do not modify their operands"""
        self.factory.union(self.a, self.b)
        self.factory.difference(self.a, self.b)
        rebuilt_a = PolygonsSet(self.a.get_tree(False).copy_self(), TOLERANCE)
        rebuilt_b = PolygonsSet(self.b.get_tree(False).copy_self(), TOLERANCE)
        self.assertAlmostEqual(rebuilt_a.get_size(), 4.0)
        self.assertAlmostEqual(rebuilt_b.get_size(), 4.0)

    def testDisjointUnion(self):
        """Test the union of disjoint squares adds their areas"""
        far = PolygonsSet.box(5, 6, 5, 6, TOLERANCE)
        union = self.factory.union(self.a, far)
        self.assertAlmostEqual(union.get_size(), 5.0)
        self.assertEqual(len(union.get_vertices()), 2)

    def testAdjacentUnion(self):
        """Test squares sharing an edge merge into a rectangle"""
        right = PolygonsSet.box(2, 4, 0, 2, TOLERANCE)
        union = self.factory.union(self.a, right)
        self.assertAlmostEqual(union.get_size(), 8.0)
        self.assertAlmostEqual(union.get_boundary_size(), 12.0)
        self.assertIs(union.check_point((2.0, 1.0)), Location.INSIDE)

    def testIntervals(self):
        """Test boolean operations on one-dimensional regions"""
        i1 = IntervalsSet.from_bounds(0.0, 2.0, TOLERANCE)
        i2 = IntervalsSet.from_bounds(1.0, 3.0, TOLERANCE)
        self.assertAlmostEqual(self.factory.union(i1, i2).get_size(), 3.0)
        self.assertAlmostEqual(self.factory.intersection(i1, i2).get_size(), 1.0)


class CompatibilityTests(unittest.TestCase):
    """Tests for operand compatibility checks"""

    def testToleranceMismatch(self):
        """Test regions with different tolerances cannot be combined"""
        a = PolygonsSet.box(0, 1, 0, 1, 1.0e-10)
        b = PolygonsSet.box(0, 1, 0, 1, 1.0e-8)
        with self.assertRaises(IncompatibleRegionsError):
            RegionFactory().union(a, b)

    def testSpaceMismatch(self):
        """Test regions of different spaces cannot be combined"""
        a = PolygonsSet.box(0, 1, 0, 1, TOLERANCE)
        b = IntervalsSet.from_bounds(0.0, 1.0, TOLERANCE)
        with self.assertRaises(IncompatibleRegionsError):
            RegionFactory().intersection(a, b)


class ConstructionTests(unittest.TestCase):
    """Tests for convex construction, complement and containment"""

    def testBuildConvex(self):
        """Test a triangle built from the minus sides of three lines"""
        lines = [
            Line.from_points((0, 0), (1, 0), TOLERANCE),
            Line.from_points((1, 0), (0, 1), TOLERANCE),
            Line.from_points((0, 1), (0, 0), TOLERANCE),
        ]
        triangle = RegionFactory().build_convex(lines)
        self.assertAlmostEqual(triangle.get_size(), 0.5)
        self.assertIs(triangle.check_point((0.2, 0.2)), Location.INSIDE)

    def testBuildConvexEmpty(self):
        """Test an empty list of hyperplanes gives no region"""
        self.assertIsNone(RegionFactory().build_convex([]))

    def testBuildConvexMatchesRegionConvex(self):
        """Test the factory builds the same region as the region class"""
        lines = [
            Line.from_points((0, 0), (2, 0), 1.0e-8),
            Line.from_points((2, 0), (2, 2), 1.0e-8),
            Line.from_points((2, 2), (0, 0), 1.0e-8),
        ]
        built = RegionFactory().build_convex(lines)
        expected = PolygonsSet.convex(lines, 1.0e-8)
        self.assertIsInstance(built, PolygonsSet)
        self.assertEqual(built.tolerance, 1.0e-8)
        self.assertAlmostEqual(built.get_size(), expected.get_size())
        self.assertAlmostEqual(built.get_size(), 2.0)

    def testRegionConvexEmpty(self):
        """Test the region class gives the empty region for no hyperplane"""
        self.assertTrue(PolygonsSet.convex([], TOLERANCE).is_empty())

    def testComplement(self):
        """Test the complement swaps inside and outside"""
        box = PolygonsSet.box(0, 1, 0, 1, TOLERANCE)
        box.get_boundary_size()
        complement = RegionFactory().get_complement(box)
        self.assertIs(complement.check_point((0.5, 0.5)), Location.OUTSIDE)
        self.assertIs(complement.check_point((5.0, 5.0)), Location.INSIDE)
        self.assertAlmostEqual(complement.get_boundary_size(), 4.0)
        self.assertEqual(complement.get_size(), float('inf'))

    def testDoubleComplement(self):
        """Test complementing twice gives back the same region"""
        factory = RegionFactory()
        box = PolygonsSet.box(0, 1, 0, 1, TOLERANCE)
        twice = factory.get_complement(factory.get_complement(box))
        self.assertAlmostEqual(twice.get_size(), 1.0)

    def testContains(self):
        """Test region containment"""
        big = PolygonsSet.box(0, 4, 0, 4, TOLERANCE)
        small = PolygonsSet.box(1, 2, 1, 2, TOLERANCE)
        crossing = PolygonsSet.box(3, 5, 3, 5, TOLERANCE)
        self.assertTrue(big.contains(small))
        self.assertFalse(small.contains(big))
        self.assertFalse(big.contains(crossing))

    def testEmptyAndFull(self):
        """Test intersecting with the empty region and uniting with the whole plane"""
        factory = RegionFactory()
        box = PolygonsSet.box(0, 1, 0, 1, TOLERANCE)
        empty = factory.get_complement(PolygonsSet(tolerance=TOLERANCE))
        self.assertTrue(factory.intersection(box, empty).is_empty())
        self.assertTrue(factory.union(box, PolygonsSet(tolerance=TOLERANCE)).is_full())


class ComplementTests(unittest.TestCase):
    """Tests for the algebra of a region with its complement"""

    def setUp(self):
        self.factory = RegionFactory()
        self.regions = {
            'square': PolygonsSet.box(0, 2, 0, 2, TOLERANCE),
            'holed': PolygonsSet.from_loops([[(0, 0), (4, 0), (4, 4), (0, 4)],
                                             [(1, 1), (3, 1), (3, 3), (1, 3)]], TOLERANCE),
        }

    def testUnionWithComplementIsFull(self):
        """Test a region united with its complement covers the plane"""
        for name, region in self.regions.items():
            complement = self.factory.get_complement(region)
            self.assertTrue(self.factory.union(region, complement).is_full(), name)

    def testIntersectionWithComplementIsEmpty(self):
        """Test a region and its complement do not overlap"""
        for name, region in self.regions.items():
            complement = self.factory.get_complement(region)
            self.assertTrue(self.factory.intersection(region, complement).is_empty(), name)

    def testDoubleComplementClassifiesAlike(self):
        """Test complementing twice gives back the same point locations"""
        samples = [(0.25 * i - 0.5, 0.25 * j - 0.5) for i in range(21) for j in range(21)]
        for name, region in self.regions.items():
            twice = self.factory.get_complement(self.factory.get_complement(region))
            for point in samples:
                self.assertIs(twice.check_point(point), region.check_point(point),
                              f"{name} at {point!r}")


if __name__ == '__main__':
    unittest.main()
