"""bspgeom - Binary space partitioning regions with exact boolean algebra."""

__version__ = "0.1.0"

from bspgeom.bspgeom_engine import (
    GeometryConfig,
    RegionResult,
    build_interval_set,
    build_polygon,
    build_spherical_polygon,
    combine,
)
from bspgeom.bspgeom_errors import (
    GeometryError,
    OpenBoundaryLoopError,
    CrossingBoundaryLoopsError,
    DimensionMismatchError,
    InvalidIntervalError,
    DegenerateGeometryError,
    InconsistentStateAt2PiWrappingError,
    IncompatibleRegionsError,
    InconsistentTreeError,
)
from bspgeom.bspgeom_types import Location, Side, VisitOrder
from bspgeom.partitioning import BSPTree, RegionFactory
from bspgeom.euclidean.oned import IntervalsSet
from bspgeom.euclidean.twod import PolygonsSet
from bspgeom.spherical.oned import ArcsSet
from bspgeom.spherical.twod import S2Point, SphericalPolygonsSet


__all__ = [
    'GeometryConfig',
    'RegionResult',
    'build_interval_set',
    'build_polygon',
    'build_spherical_polygon',
    'combine',
    'GeometryError',
    'OpenBoundaryLoopError',
    'CrossingBoundaryLoopsError',
    'DimensionMismatchError',
    'InvalidIntervalError',
    'DegenerateGeometryError',
    'InconsistentStateAt2PiWrappingError',
    'IncompatibleRegionsError',
    'InconsistentTreeError',
    'Location',
    'Side',
    'VisitOrder',
    'BSPTree',
    'RegionFactory',
    'IntervalsSet',
    'PolygonsSet',
    'ArcsSet',
    'S2Point',
    'SphericalPolygonsSet',
]
