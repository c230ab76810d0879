"""
bspgeom Engine - High level entry points for building and combining regions.

This module wraps the region classes into a small pipeline-style API: build a
region from plain Python data, optionally combine it with another one, and get
back the region together with statistics and profiling timings.

Usage:
    from bspgeom.bspgeom_engine import build_polygon, combine, GeometryConfig

    # Simple usage with defaults
    square = build_polygon([[(0, 0), (2, 0), (2, 2), (0, 2)]])
    print(square.stats['size'])  # 4.0

    # With configuration
    config = GeometryConfig(tolerance=1e-8, profile=True)
    hole = build_polygon([[(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)]], config=config)

    # Boolean algebra
    result = combine('difference', square.region, hole.region, config=config)
    print(result.timings)
    # {'difference': {'count': 1, 'total_ms': 0.8, ...}, ...}
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Any, Dict, Literal

from bspgeom.bspgeom_types import VisitOrder
from bspgeom.euclidean.oned.intervals_set import IntervalsSet
from bspgeom.euclidean.twod.polygons_set import PolygonsSet
from bspgeom.mathutils.bspgeom_math import DEFAULT_TOLERANCE, as_points_3d
from bspgeom.partitioning.bsp_tree import BSPTree
from bspgeom.partitioning.region_factory import RegionFactory
from bspgeom.partitioning.visitors import BSPTreeVisitor
from bspgeom.profiling import (
    enable_profiling,
    reset_profile,
    get_profile_results,
    perf_marker,
)
from bspgeom.spherical.twod.s2_point import S2Point
from bspgeom.spherical.twod.spherical_polygons_set import SphericalPolygonsSet

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

Operation = Literal['union', 'intersection', 'difference', 'xor']


@dataclass
class GeometryConfig:
    """
    Configuration options for building and combining regions.

    Attributes:
        tolerance: Distance (or angle, for spherical regions) below which
            points are considered identical. Propagated unchanged to every
            region built from this configuration.

        profile: Enable timing profiling of the instrumented sections
            (tree building, boolean merges, boundary extraction).

        options: Free-form options for callers, not interpreted here.
    """
    tolerance: float = DEFAULT_TOLERANCE
    profile: bool = False

    # Additional options that can be expanded
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RegionResult:
    """
    Result of a build or combine call.

    Attributes:
        region: The resulting region.
        timings: Timing data from profiled code sections (if config.profile=True).
            Each key is a marker name, value contains count, total_ms, mean_ms and parents.
        stats: Statistics about the region: size, boundary_size, node_count, leaf_count.
    """
    region: Any
    timings: Optional[Dict[str, Any]] = None
    stats: Optional[Dict[str, float]] = None


# =============================================================================
# Internal Helpers
# =============================================================================

class _TreeCounter(BSPTreeVisitor):
    """Counts internal nodes and leaves."""

    def __init__(self):
        self.node_count = 0
        self.leaf_count = 0

    def visit_order(self, node):
        return VisitOrder.SUB_MINUS_PLUS

    def visit_internal_node(self, node):
        self.node_count += 1

    def visit_leaf_node(self, node):
        self.node_count += 1
        self.leaf_count += 1


def _effective_config(config: Optional[GeometryConfig], tolerance, profile) -> GeometryConfig:
    if config is None:
        config = GeometryConfig()
    if tolerance is not None:
        config.tolerance = tolerance
    if profile is not None:
        config.profile = profile
    return config


def _collect_stats(region) -> Dict[str, float]:
    """Collect statistics about a region."""
    counter = _TreeCounter()
    region.get_tree(False).visit(counter)
    return {
        'size': region.get_size(),
        'boundary_size': region.get_boundary_size(),
        'node_count': counter.node_count,
        'leaf_count': counter.leaf_count,
    }


def _run(config: GeometryConfig, name: str, build) -> RegionResult:
    # Setup profiling
    if config.profile:
        reset_profile()
        enable_profiling(True)

    try:
        with perf_marker(name):
            region = build()

        with perf_marker("stats"):
            stats = _collect_stats(region)

        timings = get_profile_results() if config.profile else None
        logger.debug("%s: %d nodes, size %r", name, stats['node_count'], stats['size'])

        return RegionResult(region=region, timings=timings, stats=stats)

    finally:
        # Always disable profiling when done
        if config.profile:
            enable_profiling(False)


# =============================================================================
# Main API
# =============================================================================

def build_interval_set(
    intervals,
    config: Optional[GeometryConfig] = None,
    *,
    tolerance: Optional[float] = None,
    profile: Optional[bool] = None,
) -> RegionResult:
    """
    Build a set of intervals of the real line.

    Args:
        intervals: Sequence of (lower, upper) pairs, which may overlap.
            Infinite bounds are allowed.
        config: Configuration options (GeometryConfig instance).
        tolerance: Override config.tolerance.
        profile: Override config.profile.

    Returns:
        RegionResult holding the union of the intervals (empty if there are none).

    Raises:
        InvalidIntervalError: If a pair has lower > upper
    """
    config = _effective_config(config, tolerance, profile)

    def build():
        factory = RegionFactory()
        region = IntervalsSet(BSPTree(False), config.tolerance)
        for lower, upper in intervals:
            region = factory.union(region, IntervalsSet.from_bounds(lower, upper, config.tolerance))
        return region

    return _run(config, "build_interval_set", build)


def build_polygon(
    loops,
    config: Optional[GeometryConfig] = None,
    *,
    tolerance: Optional[float] = None,
    profile: Optional[bool] = None,
) -> RegionResult:
    """
    Build a planar polygon from closed loops of vertices.

    Loops may be given in any orientation: they are nested by containment,
    outer loops bounding the polygon and inner loops bounding holes.

    Args:
        loops: Sequence of loops, each a sequence of (x, y) points or an
            (n, 2) numpy array.
        config: Configuration options (GeometryConfig instance).
        tolerance: Override config.tolerance.
        profile: Override config.profile.

    Raises:
        CrossingBoundaryLoopsError: If two loops overlap
    """
    config = _effective_config(config, tolerance, profile)
    return _run(config, "build_polygon",
                lambda: PolygonsSet.from_loops(loops, config.tolerance))


def build_spherical_polygon(
    vertices,
    config: Optional[GeometryConfig] = None,
    *,
    tolerance: Optional[float] = None,
    profile: Optional[bool] = None,
) -> RegionResult:
    """
    Build a polygon on the unit sphere from a single loop of vertices.

    Args:
        vertices: Sequence of S2Point or of (x, y, z) directions, or an (n, 3)
            numpy array. The polygon lies on the left of the boundary.
        config: Configuration options (GeometryConfig instance).
        tolerance: Override config.tolerance.
        profile: Override config.profile.

    Raises:
        DegenerateGeometryError: If two consecutive vertices are identical or antipodal
    """
    config = _effective_config(config, tolerance, profile)
    vertices = list(vertices)
    if vertices and not all(isinstance(v, S2Point) for v in vertices):
        vertices = [S2Point(v) for v in as_points_3d(vertices)]
    return _run(config, "build_spherical_polygon",
                lambda: SphericalPolygonsSet.from_vertices(config.tolerance, *vertices))


def combine(
    operation: Operation,
    region1,
    region2,
    config: Optional[GeometryConfig] = None,
    *,
    profile: Optional[bool] = None,
) -> RegionResult:
    """
    Combine two regions with a boolean operation.

    The operands are left unchanged. The tolerance of the result is the
    operands' one; config.tolerance is not used here.

    Args:
        operation: One of 'union', 'intersection', 'difference', 'xor'.
        region1: First operand.
        region2: Second operand.
        config: Configuration options (GeometryConfig instance).
        profile: Override config.profile.

    Raises:
        ValueError: If the operation is unknown
        IncompatibleRegionsError: If the regions have different spaces or tolerances
    """
    config = _effective_config(config, None, profile)
    factory = RegionFactory()
    operations = {
        'union': factory.union,
        'intersection': factory.intersection,
        'difference': factory.difference,
        'xor': factory.xor,
    }
    if operation not in operations:
        raise ValueError(f"Unknown operation: {operation}")

    return _run(config, "combine",
                lambda: operations[operation](region1, region2))
