from .s1_point import S1Point
from .limit_angle import LimitAngle, SubLimitAngle
from .arcs_set import Arc, ArcsSet, ArcsSetSplit

__all__ = [
    'S1Point',
    'LimitAngle',
    'SubLimitAngle',
    'Arc',
    'ArcsSet',
    'ArcsSetSplit',
]
