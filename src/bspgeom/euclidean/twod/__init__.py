from .line import Line
from .sub_line import Segment, SubLine
from .polygons_set import PolygonsSet
from .nested_loops import NestedLoops

__all__ = [
    'Line',
    'Segment',
    'SubLine',
    'PolygonsSet',
    'NestedLoops',
]
