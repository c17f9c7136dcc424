"""
Point and color types.

- ``Point2`` / ``Point3``: Cartesian points, no range enforced
- ``Hsl``: hue in degrees, saturation and lightness as unit floats
- ``ColorPoint``: a color kept in sync with its Cartesian position
- ``PartialPoint3``: point with optional coordinates for masked distances
"""

from .point import Point2, Point3, Hsl, hsl_to_point, point_to_hsl, wrap_hue
from .color_point import ColorPoint
from .distance import PartialPoint3, distance
from .random import HslPairInit, HslTripleInit, random_hsl_pair, random_hsl_triple

__all__ = [
    'Point2',
    'Point3',
    'Hsl',
    'hsl_to_point',
    'point_to_hsl',
    'wrap_hue',
    'ColorPoint',
    'PartialPoint3',
    'distance',
    'HslPairInit',
    'HslTripleInit',
    'random_hsl_pair',
    'random_hsl_triple',
]
