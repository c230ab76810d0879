from .vec2 import Vec2
from .vec3 import Vec3, vec3_angle, vec3_combine, vec3_rotate
from .bspgeom_math import (
    TWO_PI,
    HALF_PI,
    DEFAULT_TOLERANCE,
    normalize_angle,
    as_points_2d,
    as_points_3d,
)

__all__ = [
    'Vec2',
    'Vec3',
    'vec3_angle',
    'vec3_combine',
    'vec3_rotate',
    'TWO_PI',
    'HALF_PI',
    'DEFAULT_TOLERANCE',
    'normalize_angle',
    'as_points_2d',
    'as_points_3d',
]
