from __future__ import annotations

import math
from typing import NamedTuple, Optional

from .point import HUE_360, Hsl, Point3


class PartialPoint3(NamedTuple):
    """
    A 3-coordinate point whose coordinates may be missing.

    Missing coordinates are ignored when measuring distance, which allows
    comparing colors on a subset of their axes, e.g. ``(None, s, l)``.
    """
    a: Optional[float] = None
    b: Optional[float] = None
    c: Optional[float] = None

    @classmethod
    def from_hsl(cls, hsl: Hsl) -> PartialPoint3:
        return cls(hsl.h, hsl.s, hsl.l)

    @classmethod
    def from_point(cls, point: Point3) -> PartialPoint3:
        return cls(point.x, point.y, point.z)

    def distance(self, other: PartialPoint3, hue_mode: bool = False) -> float:
        """
        Euclidean distance over the coordinates present in both points.

        Args:
            other: Point to measure against.
            hue_mode: Treat the first coordinate as a hue in degrees and use
                the shorter way round the circle, normalised by 360.

        Returns:
            The distance; 0.0 when no axis is present on both sides.
        """
        a = _first_axis_term(self.a, other.a, hue_mode)
        b = _signed_term(self.b, other.b)
        c = _signed_term(self.c, other.c)
        return math.sqrt(a * a + b * b + c * c)


def _first_axis_term(a: Optional[float], b: Optional[float], hue_mode: bool) -> float:
    if a is None or b is None:
        return 0.0
    if hue_mode:
        diff = abs(a - b)
        return min(diff, HUE_360 - diff) / HUE_360
    return a - b


def _signed_term(a: Optional[float], b: Optional[float]) -> float:
    if a is None or b is None:
        return 0.0
    return b - a


def distance(a: PartialPoint3, b: PartialPoint3, hue_mode: bool = False) -> float:
    return PartialPoint3(*a).distance(PartialPoint3(*b), hue_mode)
