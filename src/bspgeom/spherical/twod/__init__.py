from .s2_point import S2Point
from .circle import Circle
from .sub_circle import SubCircle
from .edge import Edge, Vertex
from .edges_builder import EdgesBuilder
from .properties_computer import PropertiesComputer
from .spherical_polygons_set import SphericalPolygonsSet

__all__ = [
    'S2Point',
    'Circle',
    'SubCircle',
    'Edge',
    'Vertex',
    'EdgesBuilder',
    'PropertiesComputer',
    'SphericalPolygonsSet',
]
