"""
Point and color value types, and the polar mapping between them.

An HSL color is placed on the unit square by treating hue as an angle around
the center ``(0.5, 0.5)`` and lightness as the distance from it. Saturation
passes through unchanged as the third coordinate::

    x = 0.5 + r * cos(h)
    y = 0.5 + r * sin(h)
    z = s

with ``r = l * 0.5`` (or ``(1 - l) * 0.5`` when inverted). The reverse
mapping recovers the angle with ``atan2`` and lightness from the radius, so
``point_to_hsl(hsl_to_point(c, inv), inv) == c`` for any inversion flag.
Values are never range checked.
"""
from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np
from boundednumbers.functions import cyclic_wrap_float

CENTER_X = 0.5
CENTER_Y = 0.5
# lightness 1.0 maps onto the edge of the unit square
RADIUS_SCALE = 0.5
HUE_360 = 360.0


class Point2(NamedTuple):
    x: float
    y: float


class Point3(NamedTuple):
    x: float
    y: float
    z: float

    def to_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)


class Hsl(NamedTuple):
    """HSL color: hue in degrees, saturation and lightness as unit floats."""
    h: float
    s: float
    l: float


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees onto ``[0, 360)``."""
    return float(cyclic_wrap_float(hue, 0.0, HUE_360))


def hsl_to_point(hsl: Hsl, inverted: bool = False) -> Point3:
    h, s, l = hsl
    radians = math.radians(h)
    dist = ((1.0 - l) if inverted else l) * RADIUS_SCALE
    x = CENTER_X + dist * math.cos(radians)
    y = CENTER_Y + dist * math.sin(radians)
    return Point3(x, y, s)


def point_to_hsl(point: Point3, inverted: bool = False) -> Hsl:
    x, y, z = point
    dx = x - CENTER_X
    dy = y - CENTER_Y
    hue = wrap_hue(math.degrees(math.atan2(dy, dx)))
    radius = math.hypot(dx, dy) / RADIUS_SCALE
    lightness = (1.0 - radius) if inverted else radius
    return Hsl(hue, z, lightness)


def points_to_hsl(points: np.ndarray, inverted: bool = False) -> list[Hsl]:
    """Convert an ``(N, 3)`` array of Cartesian points to HSL colors."""
    points = np.asarray(points, dtype=np.float64)
    return [point_to_hsl(Point3(*row), inverted) for row in points.tolist()]
