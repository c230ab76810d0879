"""
    Provides the small shared types of the partitioning engine: point
    locations, sides, tree visit orders and space descriptors.
"""

from enum import Enum, auto
from typing import Optional


class Location(Enum):
    """Where a point lies relative to a region."""
    INSIDE = auto()
    OUTSIDE = auto()
    BOUNDARY = auto()


class Side(Enum):
    """Where a sub-hyperplane (or region) lies relative to a hyperplane."""
    PLUS = auto()
    MINUS = auto()
    BOTH = auto()
    HYPER = auto()


class VisitOrder(Enum):
    """
    Order in which a BSP tree visitor handles an internal node.

    The name lists the plus subtree, minus subtree and the node's own cut
    (SUB) in the order they are visited.
    """
    PLUS_MINUS_SUB = auto()
    PLUS_SUB_MINUS = auto()
    MINUS_PLUS_SUB = auto()
    MINUS_SUB_PLUS = auto()
    SUB_PLUS_MINUS = auto()
    SUB_MINUS_PLUS = auto()


class Space:
    """
    Describes a space by its dimension and the space of its hyperplanes.

    Attributes:
        name: Human readable name ("euclidean-2d", "sphere-1d", ...)
        dimension: Number of coordinates of a point
        sub_space: Space of the hyperplanes embedded in this space, or None
            for one-dimensional spaces whose hyperplanes are single points
    """
    __slots__ = ('name', 'dimension', 'sub_space')

    def __init__(self, name: str, dimension: int, sub_space: Optional['Space'] = None):
        self.name = name
        self.dimension = dimension
        self.sub_space = sub_space

    def __repr__(self):
        return f"Space({self.name})"


EUCLIDEAN_1D = Space("euclidean-1d", 1)
EUCLIDEAN_2D = Space("euclidean-2d", 2, EUCLIDEAN_1D)
SPHERE_1D = Space("sphere-1d", 1)
SPHERE_2D = Space("sphere-2d", 2, SPHERE_1D)
