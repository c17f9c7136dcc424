"""
Eased interpolation between two Cartesian points.
"""
from __future__ import annotations

from typing import List

import numpy as np

from .points.color_point import ColorPoint
from .points.point import Point3, points_to_hsl
from .transforms.position_functions import PositionFunction, position_functions
from .types.transform_types import AxisTransformers, Progress, Transformer


def segment_progress(num_points: int) -> np.ndarray:
    """Evenly spaced progress values ``k / (num_points - 1)`` including both ends."""
    return np.linspace(0.0, 1.0, num_points, dtype=np.float64)


def _is_builtin(fn: Transformer) -> bool:
    return isinstance(fn, PositionFunction) or any(fn is impl for impl in position_functions.values())


def ease(fn: Transformer, t: Progress, inverted: bool) -> np.ndarray:
    """
    Evaluate a transformer over ``t``.

    Built-in curves are numpy ufunc expressions and get the whole array at
    once. Custom callables are called once per progress value with a plain
    float, so scalar-only code (``math.sin``, ``if t < 0.5``) works.
    """
    if _is_builtin(fn):
        return np.broadcast_to(np.asarray(fn(t, inverted), dtype=np.float64), np.shape(t))
    flat = np.ravel(t)
    values = np.fromiter((fn(float(t_k), inverted) for t_k in flat), dtype=np.float64, count=flat.size)
    return values.reshape(np.shape(t))


def vectors_on_line(
    p1: Point3,
    p2: Point3,
    num_points: int,
    inverted: bool,
    transformers: AxisTransformers,
) -> np.ndarray:
    """
    Interpolate ``num_points`` positions from ``p1`` to ``p2``.

    Each axis is eased independently: ``(1 - f(t)) * p1 + f(t) * p2`` with
    ``f`` the transformer for that axis.

    Args:
        p1: Segment start.
        p2: Segment end.
        num_points: Number of positions, both endpoints included.
        inverted: Direction of the easing curves on this segment.
        transformers: One transformer per axis (x, y, z).

    Returns:
        Array of shape ``(num_points, 3)``.
    """
    t = segment_progress(num_points)
    start = Point3(*p1).to_array()
    end = Point3(*p2).to_array()

    # (3, N) eased progress, one row per axis
    factors = np.stack([ease(fn, t, inverted) for fn in transformers])
    return ((1.0 - factors) * start[:, None] + factors * end[:, None]).T


def segment_color_points(
    p1: Point3,
    p2: Point3,
    num_points: int,
    segment_inverted: bool,
    transformers: AxisTransformers,
    inverted: bool,
) -> List[ColorPoint]:
    """
    Interpolate a segment and wrap every position as a ColorPoint.

    ``segment_inverted`` only selects the easing direction; the points
    themselves are converted using the palette-wide ``inverted`` flag.
    """
    positions = vectors_on_line(p1, p2, num_points, segment_inverted, transformers)
    colors = points_to_hsl(positions, inverted)
    return [
        ColorPoint(color, Point3(*row), inverted)
        for color, row in zip(colors, positions.tolist())
    ]
