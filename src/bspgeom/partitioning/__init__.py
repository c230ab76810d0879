from .hyperplane import Hyperplane, Embedding, SubHyperplane, SubPointHyperplane, SplitSubHyperplane
from .boundary_attribute import BoundaryAttribute
from .bsp_tree import BSPTree, LeafMerger
from .visitors import BSPTreeVisitor, BoundaryBuilder, BoundarySizeVisitor, NodesCleaner
from .region_factory import RegionFactory
from .region import AbstractRegion

__all__ = [
    'Hyperplane',
    'Embedding',
    'SubHyperplane',
    'SubPointHyperplane',
    'SplitSubHyperplane',
    'BoundaryAttribute',
    'BSPTree',
    'LeafMerger',
    'BSPTreeVisitor',
    'BoundaryBuilder',
    'BoundarySizeVisitor',
    'NodesCleaner',
    'RegionFactory',
    'AbstractRegion',
]
