"""
    Contracts implemented by every space: hyperplanes, embeddings and
    sub-hyperplanes.

A hyperplane cuts its space into a plus side and a minus side. A
sub-hyperplane is a hyperplane restricted to a part of itself, described by a
region of the hyperplane's own sub-space (the "remaining region").
"""

from abc import ABC, abstractmethod
from collections import namedtuple

from bspgeom.bspgeom_types import Side
from bspgeom.partitioning.region_factory import RegionFactory


SplitSubHyperplane = namedtuple('SplitSubHyperplane', ['plus', 'minus'])
SplitSubHyperplane.__doc__ = """Parts of a sub-hyperplane on each side of a splitting hyperplane (either may be None)."""


class Hyperplane(ABC):
    """
    An (n-1)-dimensional cut of an n-dimensional space.

    Hyperplanes are immutable, so copy_self may return the instance itself.
    Subclasses set the class attribute `space`.
    """
    space = None

    @property
    @abstractmethod
    def tolerance(self) -> float:
        """Tolerance below which points are considered on the hyperplane."""

    @abstractmethod
    def copy_self(self):
        """Return an equivalent hyperplane."""

    @abstractmethod
    def get_offset(self, point) -> float:
        """Signed offset of a point: positive on the plus side, negative on the minus side."""

    @abstractmethod
    def project(self, point):
        """Project a point onto the hyperplane."""

    @abstractmethod
    def same_orientation_as(self, other) -> bool:
        """Whether the plus sides of two (parallel) hyperplanes face the same way."""

    @abstractmethod
    def get_reverse(self):
        """Return the same hyperplane with plus and minus sides swapped."""

    @abstractmethod
    def whole_hyperplane(self):
        """Sub-hyperplane covering the whole hyperplane."""

    @abstractmethod
    def whole_space(self):
        """Region covering the whole space."""


class Embedding(ABC):
    """Maps points between a space and the sub-space of one of its hyperplanes."""

    @abstractmethod
    def to_sub_space(self, point):
        """Transform a space point into a sub-space point."""

    @abstractmethod
    def to_space(self, point):
        """Transform a sub-space point into a space point."""


class SubHyperplane(ABC):
    """
    A hyperplane restricted to a region of its sub-space.

    The hyperplane may be shared between many sub-hyperplanes, the remaining
    region belongs to this sub-hyperplane alone.
    """

    def __init__(self, hyperplane, remaining_region):
        self._hyperplane = hyperplane
        self._remaining_region = remaining_region

    @property
    def hyperplane(self):
        return self._hyperplane

    @property
    def remaining_region(self):
        return self._remaining_region

    @abstractmethod
    def build_new(self, hyperplane, remaining_region) -> 'SubHyperplane':
        """Build a sub-hyperplane of the same kind."""

    def copy_self(self) -> 'SubHyperplane':
        return self.build_new(self._hyperplane.copy_self(), self._remaining_region)

    def get_size(self) -> float:
        """Measure of the remaining region (length, arc angle...)."""
        return self._remaining_region.get_size()

    def is_empty(self) -> bool:
        return self._remaining_region.is_empty()

    def reunite(self, other: 'SubHyperplane') -> 'SubHyperplane':
        """Union of two sub-hyperplanes lying on the same hyperplane."""
        return self.build_new(self._hyperplane,
                              RegionFactory().union(self._remaining_region, other.remaining_region))

    @abstractmethod
    def side(self, hyperplane) -> Side:
        """Where this sub-hyperplane lies relative to a hyperplane."""

    @abstractmethod
    def split(self, hyperplane) -> SplitSubHyperplane:
        """Split this sub-hyperplane in two parts by a hyperplane."""


class SubPointHyperplane(SubHyperplane):
    """
    Sub-hyperplane of a one-dimensional space.

    The hyperplane is a single point, so there is no remaining region: the
    size is always zero and the sub-hyperplane is never empty.
    """

    def __init__(self, hyperplane, remaining_region=None):
        super().__init__(hyperplane, None)

    def get_size(self) -> float:
        return 0.0

    def is_empty(self) -> bool:
        return False

    def reunite(self, other):
        return self

    def side(self, hyperplane) -> Side:
        offset = hyperplane.get_offset(self._hyperplane.location)
        if offset < -1.0e-10:
            return Side.MINUS
        if offset > 1.0e-10:
            return Side.PLUS
        return Side.HYPER

    def split(self, hyperplane) -> SplitSubHyperplane:
        offset = hyperplane.get_offset(self._hyperplane.location)
        if offset < -1.0e-10:
            return SplitSubHyperplane(None, self)
        return SplitSubHyperplane(self, None)
