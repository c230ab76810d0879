from .oriented_point import OrientedPoint, SubOrientedPoint
from .intervals_set import Interval, IntervalsSet

__all__ = [
    'OrientedPoint',
    'SubOrientedPoint',
    'Interval',
    'IntervalsSet',
]
