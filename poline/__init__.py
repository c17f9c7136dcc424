"""Poline: palettes interpolated between anchor colors along eased polar lines."""

from .poline import Poline
from .points import (
    Point2,
    Point3,
    Hsl,
    ColorPoint,
    PartialPoint3,
    HslPairInit,
    HslTripleInit,
    hsl_to_point,
    point_to_hsl,
    random_hsl_pair,
    random_hsl_triple,
)
from .transforms import PositionFunction, resolve_position_function
from .flatten import flatten_segments
from .settings import PolineSettings
from .errors import (
    PolineError,
    InsufficientAnchorsError,
    InvalidPointsPerSegmentError,
    AnchorIndexError,
)

__version__ = "1.0.0"

__all__ = [
    # engine
    "Poline",
    "PolineSettings",
    # points and colors
    "Point2",
    "Point3",
    "Hsl",
    "ColorPoint",
    "PartialPoint3",
    "hsl_to_point",
    "point_to_hsl",
    # random anchors
    "HslPairInit",
    "HslTripleInit",
    "random_hsl_pair",
    "random_hsl_triple",
    # easing
    "PositionFunction",
    "resolve_position_function",
    "flatten_segments",
    # errors
    "PolineError",
    "InsufficientAnchorsError",
    "InvalidPointsPerSegmentError",
    "AnchorIndexError",
    "__version__",
]
