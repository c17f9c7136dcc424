from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:
    from ..points.point import Hsl, Point3
    from ..points.color_point import ColorPoint

Coordinate = Optional[float]
PartialCoords = Tuple[Coordinate, Coordinate, Coordinate]
PointOrHsl = Union["Point3", "Hsl"]
AnchorInput = Union["Hsl", "Point3", "ColorPoint"]
