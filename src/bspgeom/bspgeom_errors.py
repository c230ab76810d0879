"""
    Exceptions raised by the partitioning engine.

Caller-input problems derive from GeometryError (a ValueError), so they can be
caught either specifically or as plain invalid values. Internal
inconsistencies of a tree derive from RuntimeError.
"""


class GeometryError(ValueError):
    """Base class for invalid geometric input."""


class OpenBoundaryLoopError(GeometryError):
    """A boundary loop is open (its first point is missing)."""

    def __init__(self, message="boundary loop is open, only closed loops are supported"):
        super().__init__(message)


class CrossingBoundaryLoopsError(GeometryError):
    """Two boundary loops partially overlap instead of being nested or disjoint."""

    def __init__(self, message="some boundary loops cross each other"):
        super().__init__(message)


class DimensionMismatchError(GeometryError):
    """Paired inputs have incompatible lengths or dimensions."""

    def __init__(self, actual, expected):
        super().__init__(f"dimension mismatch: got {actual}, expected {expected}")
        self.actual = actual
        self.expected = expected


class InvalidIntervalError(GeometryError):
    """The endpoints do not define an interval (lower is above upper)."""

    def __init__(self, lower, upper):
        super().__init__(f"endpoints do not specify an interval: [{lower}, {upper}]")
        self.lower = lower
        self.upper = upper


class DegenerateGeometryError(GeometryError):
    """An element cannot be built because its defining points or vectors coincide."""


class InconsistentStateAt2PiWrappingError(GeometryError):
    """A 1-D spherical tree has different inside/outside states at 0 and 2π."""

    def __init__(self, message="inconsistent state at 2π wrapping"):
        super().__init__(message)


class IncompatibleRegionsError(GeometryError):
    """Regions combined by boolean algebra do not share space and tolerance."""


class InconsistentTreeError(RuntimeError):
    """A BSP tree reached a state the algorithms cannot handle."""
