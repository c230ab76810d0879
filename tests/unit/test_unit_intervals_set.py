"""
Unit tests for the one-dimensional Euclidean space.

Tests cover OrientedPoint offsets, IntervalsSet construction, iteration,
geometrical properties and boolean operations.
"""

import math
import unittest

from bspgeom.bspgeom_errors import InvalidIntervalError
from bspgeom.bspgeom_types import Location, Side
from bspgeom.euclidean.oned import Interval, IntervalsSet, OrientedPoint
from bspgeom.partitioning import BSPTree, RegionFactory
from test_fixtures import assert_locations

TOLERANCE = 1.0e-10


class OrientedPointTests(unittest.TestCase):
    """Tests for the 1-D hyperplane"""

    def testOffsetSign(self):
        """Test direct points have larger values on their plus side"""
        direct = OrientedPoint(2.0, True, TOLERANCE)
        self.assertEqual(direct.get_offset(3.0), 1.0)
        self.assertEqual(direct.get_offset(1.0), -1.0)
        self.assertEqual(direct.get_reverse().get_offset(3.0), -1.0)

    def testSameOrientation(self):
        """Test orientation comparison and reversal"""
        a = OrientedPoint(0.0, True, TOLERANCE)
        self.assertTrue(a.same_orientation_as(OrientedPoint(5.0, True, TOLERANCE)))
        self.assertFalse(a.same_orientation_as(a.get_reverse()))
        self.assertEqual(a.project(12.0), 0.0)

    def testSubHyperplaneSide(self):
        """Test a point sub-hyperplane lies on one side of another point"""
        sub = OrientedPoint(1.0, True, TOLERANCE).whole_hyperplane()
        self.assertIs(sub.side(OrientedPoint(0.0, True, TOLERANCE)), Side.PLUS)
        self.assertIs(sub.side(OrientedPoint(2.0, True, TOLERANCE)), Side.MINUS)
        self.assertIs(sub.side(OrientedPoint(1.0, False, TOLERANCE)), Side.HYPER)
        self.assertEqual(sub.get_size(), 0.0)
        self.assertFalse(sub.is_empty())


class IntervalTests(unittest.TestCase):
    """Tests for the Interval value type"""

    def testProperties(self):
        """Test size, barycenter and point location"""
        interval = Interval(1.0, 3.0)
        self.assertEqual(interval.get_size(), 2.0)
        self.assertEqual(interval.get_barycenter(), 2.0)
        self.assertIs(interval.check_point(2.0, TOLERANCE), Location.INSIDE)
        self.assertIs(interval.check_point(3.0, TOLERANCE), Location.BOUNDARY)
        self.assertIs(interval.check_point(5.0, TOLERANCE), Location.OUTSIDE)

    def testInvalidBounds(self):
        """Test lower bound above upper bound is rejected"""
        with self.assertRaises(InvalidIntervalError):
            Interval(3.0, 1.0)


class IntervalsSetTests(unittest.TestCase):
    """Tests for IntervalsSet regions"""

    def testSingleInterval(self):
        """Test a bounded interval lists itself and has the expected properties"""
        region = IntervalsSet.from_bounds(1.0, 4.0, TOLERANCE)
        self.assertEqual(list(region), [[1.0, 4.0]])
        self.assertEqual(region.as_list(), [Interval(1.0, 4.0)])
        self.assertAlmostEqual(region.get_size(), 3.0)
        self.assertAlmostEqual(region.get_barycenter(), 2.5)
        self.assertEqual(region.get_inf(), 1.0)
        self.assertEqual(region.get_sup(), 4.0)
        assert_locations(self, region, [
            (2.0, Location.INSIDE),
            (1.0, Location.BOUNDARY),
            (4.0, Location.BOUNDARY),
            (0.0, Location.OUTSIDE),
            (5.0, Location.OUTSIDE),
        ])

    def testBoundaryTolerance(self):
        """Test points just beyond the tolerance are outside, closer ones on the boundary"""
        region = IntervalsSet.from_bounds(0.0, 10.0, TOLERANCE)
        assert_locations(self, region, [
            (10.0 + 0.5 * TOLERANCE, Location.BOUNDARY),
            (10.0 + 2 * TOLERANCE, Location.OUTSIDE),
            (-2 * TOLERANCE, Location.OUTSIDE),
            (10.0 - 2 * TOLERANCE, Location.INSIDE),
        ])

    def testUnboundedIntervals(self):
        """Test half lines and the whole line"""
        below = IntervalsSet.from_bounds(-math.inf, 2.0, TOLERANCE)
        self.assertEqual(list(below), [[-math.inf, 2.0]])
        self.assertTrue(math.isinf(below.get_size()))
        self.assertTrue(math.isnan(below.get_barycenter()))
        self.assertEqual(below.get_inf(), -math.inf)

        whole = IntervalsSet.from_bounds(-math.inf, math.inf, TOLERANCE)
        self.assertTrue(whole.is_full())
        self.assertEqual(list(whole), [[-math.inf, math.inf]])

    def testEmpty(self):
        """Test the empty set"""
        empty = IntervalsSet(BSPTree(False), TOLERANCE)
        self.assertTrue(empty.is_empty())
        self.assertEqual(list(empty), [])
        self.assertEqual(empty.get_size(), 0.0)

    def testUnionOfOverlappingIntervals(self):
        """Test the union of overlapping intervals is a single merged interval"""
        factory = RegionFactory()
        union = factory.union(IntervalsSet.from_bounds(0.0, 2.0, TOLERANCE),
                              IntervalsSet.from_bounds(1.0, 3.0, TOLERANCE))
        self.assertEqual(len(union.as_list()), 1)
        self.assertAlmostEqual(union.get_inf(), 0.0)
        self.assertAlmostEqual(union.get_sup(), 3.0)
        self.assertAlmostEqual(union.get_size(), 3.0)

    def testUnionOfDisjointIntervals(self):
        """Test disjoint intervals are listed in increasing order"""
        factory = RegionFactory()
        union = factory.union(IntervalsSet.from_bounds(5.0, 6.0, TOLERANCE),
                              IntervalsSet.from_bounds(1.0, 2.0, TOLERANCE))
        self.assertEqual(list(union), [[1.0, 2.0], [5.0, 6.0]])
        self.assertAlmostEqual(union.get_size(), 2.0)
        self.assertAlmostEqual(union.get_barycenter(), 3.5)
        self.assertIs(union.check_point(3.0), Location.OUTSIDE)

    def testIntersectionAndDifference(self):
        """Test intersection and difference of overlapping intervals"""
        factory = RegionFactory()
        a = IntervalsSet.from_bounds(0.0, 2.0, TOLERANCE)
        b = IntervalsSet.from_bounds(1.0, 3.0, TOLERANCE)
        self.assertEqual(list(factory.intersection(a, b)), [[1.0, 2.0]])
        self.assertEqual(list(factory.difference(a, b)), [[0.0, 1.0]])
        self.assertEqual(list(factory.xor(a, b)), [[0.0, 1.0], [2.0, 3.0]])

    def testComplement(self):
        """Test the complement of a bounded interval is made of two half lines"""
        complement = RegionFactory().get_complement(IntervalsSet.from_bounds(0.0, 1.0, TOLERANCE))
        self.assertEqual(list(complement), [[-math.inf, 0.0], [1.0, math.inf]])
        self.assertIs(complement.check_point(0.5), Location.OUTSIDE)
        self.assertIs(complement.check_point(-3.0), Location.INSIDE)

    def testContains(self):
        """Test region containment"""
        big = IntervalsSet.from_bounds(0.0, 10.0, TOLERANCE)
        small = IntervalsSet.from_bounds(2.0, 3.0, TOLERANCE)
        self.assertTrue(big.contains(small))
        self.assertFalse(small.contains(big))

    def testBoundarySize(self):
        """Test the boundary of a 1-D region has zero size"""
        region = IntervalsSet.from_bounds(0.0, 1.0, TOLERANCE)
        self.assertEqual(region.get_boundary_size(), 0.0)


if __name__ == '__main__':
    unittest.main()
