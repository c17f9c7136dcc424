"""
Random default anchors.

Randomness is always drawn from an explicit ``numpy.random.Generator`` so
callers (and tests) can make palettes reproducible by seeding it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .point import HUE_360, Hsl, Point2, Point3


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_point2(rng: Optional[np.random.Generator] = None) -> Point2:
    x, y = _rng(rng).random(2)
    return Point2(float(x), float(y))


def random_point3(rng: Optional[np.random.Generator] = None) -> Point3:
    x, y, z = _rng(rng).random(3)
    return Point3(float(x), float(y), float(z))


def _next_hue(start_hue: float, rng: np.random.Generator) -> float:
    # at least 60 degrees away from the start, at most 240
    return float((start_hue + 60.0 + rng.random() * 180.0) % HUE_360)


@dataclass(frozen=True)
class HslPairInit:
    start_hue: float
    saturation: Point2
    lightness: Point2

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> HslPairInit:
        rng = _rng(rng)
        return cls(
            start_hue=float(rng.random() * HUE_360),
            saturation=random_point2(rng),
            lightness=Point2(
                float(0.75 + rng.random() * 0.2),
                float(0.75 + rng.random() * 0.2),
            ),
        )


@dataclass(frozen=True)
class HslTripleInit:
    start_hue: float
    saturation: Point3
    lightness: Point3

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> HslTripleInit:
        rng = _rng(rng)
        return cls(
            start_hue=float(rng.random() * HUE_360),
            saturation=random_point3(rng),
            lightness=Point3(
                float(0.75 + rng.random() * 0.2),
                float(rng.random() * 0.2),
                float(0.75 + rng.random() * 0.2),
            ),
        )


def random_hsl_pair(
    init: Optional[HslPairInit] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Hsl]:
    """
    Build two anchor colors with well separated hues.

    Args:
        init: Starting hue, saturations and lightnesses. Drawn from ``rng``
            when omitted.
        rng: Source of randomness for the init and the second hue.

    Returns:
        ``[first, second]`` HSL anchors.
    """
    rng = _rng(rng)
    init = init if init is not None else HslPairInit.random(rng)
    h = init.start_hue
    return [
        Hsl(h, init.saturation.x, init.lightness.x),
        Hsl(_next_hue(h, rng), init.saturation.y, init.lightness.y),
    ]


def random_hsl_triple(
    init: Optional[HslTripleInit] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[Hsl]:
    """Build three anchor colors; the middle one is dark by default."""
    rng = _rng(rng)
    init = init if init is not None else HslTripleInit.random(rng)
    h = init.start_hue
    return [
        Hsl(h, init.saturation.x, init.lightness.x),
        Hsl(_next_hue(h, rng), init.saturation.y, init.lightness.y),
        Hsl(_next_hue(h, rng), init.saturation.z, init.lightness.z),
    ]
