from __future__ import annotations

from typing import Union

import numpy as np

from .point import Hsl, Point3, hsl_to_point, point_to_hsl, wrap_hue


def _format_percentage(value: float) -> str:
    return np.format_float_positional(float(value) * 100, trim="-")


class ColorPoint:
    """
    A color held both as HSL and as a Cartesian point.

    The two representations always agree under the point's own ``inverted``
    flag: assigning either one re-derives the other, and changing the flag
    re-derives the position from the color.
    """

    __slots__ = ('_color', '_point', '_inverted')

    def __init__(self, color: Hsl, point: Point3, inverted: bool = False):
        self._color = Hsl(*color)
        self._point = Point3(*point)
        self._inverted = bool(inverted)

    @classmethod
    def from_hsl(cls, hsl: Union[Hsl, tuple], inverted: bool = False) -> ColorPoint:
        hsl = Hsl(*hsl)
        return cls(hsl, hsl_to_point(hsl, inverted), inverted)

    @classmethod
    def from_point(cls, point: Union[Point3, tuple], inverted: bool = False) -> ColorPoint:
        point = Point3(*point)
        return cls(point_to_hsl(point, inverted), point, inverted)

    # ------------------ REPRESENTATIONS ------------------
    @property
    def color(self) -> Hsl:
        return self._color

    @color.setter
    def color(self, hsl: Hsl) -> None:
        self._color = Hsl(*hsl)
        self._point = hsl_to_point(self._color, self._inverted)

    @property
    def position(self) -> Point3:
        return self._point

    @position.setter
    def position(self, point: Point3) -> None:
        self._point = Point3(*point)
        self._color = point_to_hsl(self._point, self._inverted)

    # alias matching the attribute name used throughout the engine
    point = position

    @property
    def inverted(self) -> bool:
        return self._inverted

    @inverted.setter
    def inverted(self, inverted: bool) -> None:
        self._inverted = bool(inverted)
        self._point = hsl_to_point(self._color, self._inverted)

    # ------------------ OPERATIONS ------------------
    def shift_hue(self, angle: float) -> None:
        """Rotate the hue by ``angle`` degrees, wrapping onto [0, 360)."""
        h, s, l = self._color
        self.color = Hsl(wrap_hue(h + angle), s, l)

    def css_string(self) -> str:
        """Format as ``hsl(HHH.HH, S%, L%)``; percentages are not rounded."""
        h, s, l = self._color
        return f"hsl({h:06.2f}, {_format_percentage(s)}%, {_format_percentage(l)}%)"

    def copy(self) -> ColorPoint:
        return ColorPoint(self._color, self._point, self._inverted)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorPoint):
            return NotImplemented
        return (
            self._color == other._color
            and self._point == other._point
            and self._inverted == other._inverted
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"ColorPoint(color={self._color!r}, point={self._point!r}, inverted={self._inverted})"
