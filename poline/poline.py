"""
Palette engine: anchors, segments and eased interpolation between them.

A ``Poline`` owns an ordered list of anchor colors. Consecutive anchors are
paired into segments (the last anchor pairs with the first when the palette
is a closed loop) and every segment is filled with ``num_points`` colors by
easing along the straight line between the anchors' Cartesian positions.

Every mutation rebuilds the pairs and segment points from scratch; queries
only read the cached result.

Examples
--------
>>> from poline import Poline, Hsl, PositionFunction
>>> palette = Poline(
...     anchor_colors=[Hsl(20, 0.9, 0.8), Hsl(200, 0.5, 0.3)],
...     num_points=6,
...     position_function=PositionFunction.ARC,
... )
>>> len(palette.colors)
6
>>> palette.closed_loop = True
>>> palette.shift_hue(45)
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import AnchorIndexError, InsufficientAnchorsError, InvalidPointsPerSegmentError
from .flatten import flatten_segments
from .interpolation import segment_color_points
from .points.color_point import ColorPoint
from .points.distance import PartialPoint3
from .points.point import Hsl, Point3
from .points.random import random_hsl_pair
from .settings import (
    DEFAULT_CLOSED_LOOP,
    DEFAULT_HUE_SHIFT,
    DEFAULT_INVERTED,
    DEFAULT_NUM_POINTS,
    DEFAULT_POSITION_FUNCTION,
    MIN_ANCHORS,
    MIN_POINTS_PER_SEGMENT,
    PolineSettings,
)
from .transforms.position_functions import PositionFunctionLike, resolve_position_function
from .types.point_types import AnchorInput, PointOrHsl
from .types.transform_types import AxisTransformers, Transformer
from .utils.default import value_or_default

logger = logging.getLogger(__name__)

AxisFunctionsLike = Union[PositionFunctionLike, Sequence[PositionFunctionLike]]


def _to_color_point(value: AnchorInput, inverted: bool) -> ColorPoint:
    """Build an anchor carrying the palette's inversion flag."""
    if isinstance(value, ColorPoint):
        anchor = value.copy()
        anchor.inverted = inverted
        return anchor
    if isinstance(value, Point3):
        return ColorPoint.from_point(value, inverted)
    if isinstance(value, (Hsl, tuple, list, np.ndarray)):
        if len(value) != 3:
            raise ValueError(f"Anchor colors need 3 components (h, s, l), got {len(value)}")
        return ColorPoint.from_hsl(Hsl(*(float(v) for v in value)), inverted)
    raise TypeError(f"Expected Hsl, Point3 or ColorPoint, got {type(value).__name__}")


def _validate_num_points(num_points: int) -> int:
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise InvalidPointsPerSegmentError(num_points, MIN_POINTS_PER_SEGMENT)
    if num_points < MIN_POINTS_PER_SEGMENT:
        raise InvalidPointsPerSegmentError(num_points, MIN_POINTS_PER_SEGMENT)
    return int(num_points)


def _validate_anchor_count(count: int) -> None:
    if count < MIN_ANCHORS:
        raise InsufficientAnchorsError(count, MIN_ANCHORS)


class Poline:
    """
    Multi-stop palette interpolated between anchor colors.

    Args:
        anchor_colors: At least two anchors (``Hsl``, ``Point3`` or
            ``ColorPoint``). When omitted a random pair is drawn from ``rng``.
        num_points: Colors per segment, both anchors included.
        position_function: Easing shared by all three axes.
        position_function_x: Override for the x axis (hue/lightness plane).
        position_function_y: Override for the y axis (hue/lightness plane).
        position_function_z: Override for the z axis (saturation).
        closed_loop: Connect the last anchor back to the first.
        inverted: Map lightness to ``1 - radius`` instead of ``radius``.
        rng: Randomness for default anchors.

    Raises:
        InsufficientAnchorsError: Fewer than two anchors.
        InvalidPointsPerSegmentError: ``num_points`` below two.
    """

    def __init__(
        self,
        anchor_colors: Optional[Sequence[AnchorInput]] = None,
        num_points: int = DEFAULT_NUM_POINTS,
        position_function: PositionFunctionLike = DEFAULT_POSITION_FUNCTION,
        position_function_x: Optional[PositionFunctionLike] = None,
        position_function_y: Optional[PositionFunctionLike] = None,
        position_function_z: Optional[PositionFunctionLike] = None,
        closed_loop: bool = DEFAULT_CLOSED_LOOP,
        inverted: bool = DEFAULT_INVERTED,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if anchor_colors is None:
            anchor_colors = random_hsl_pair(rng=rng)
        _validate_anchor_count(len(anchor_colors))

        self._num_points = _validate_num_points(num_points)
        self._inverted = bool(inverted)
        self._closed_loop = bool(closed_loop)

        shared = resolve_position_function(position_function)
        self._position_fn_x = resolve_position_function(value_or_default(position_function_x, shared))
        self._position_fn_y = resolve_position_function(value_or_default(position_function_y, shared))
        self._position_fn_z = resolve_position_function(value_or_default(position_function_z, shared))

        self._anchor_points: List[ColorPoint] = [
            _to_color_point(color, self._inverted) for color in anchor_colors
        ]
        self._anchor_pairs: List[Tuple[ColorPoint, ColorPoint]] = []
        self._points: List[List[ColorPoint]] = []

        logger.debug(
            "Created palette with %d anchors, %d points per segment, closed_loop=%s, inverted=%s",
            len(self._anchor_points), self._num_points, self._closed_loop, self._inverted,
        )
        self._update_anchor_pairs()

    # ------------------ DERIVED STATE ------------------
    def _update_anchor_pairs(self) -> None:
        """Rebuild anchor pairs and every segment's points from the anchors."""
        count = len(self._anchor_points)
        num_segments = count if self._closed_loop else count - 1

        anchor_pairs = [
            (self._anchor_points[i], self._anchor_points[(i + 1) % count])
            for i in range(num_segments)
        ]
        transformers = self.position_function
        points = [
            segment_color_points(
                start.position,
                end.position,
                self._num_points,
                i % 2 == 0,
                transformers,
                self._inverted,
            )
            for i, (start, end) in enumerate(anchor_pairs)
        ]

        self._anchor_pairs = anchor_pairs
        self._points = points
        logger.debug("Rebuilt %d segments of %d points", num_segments, self._num_points)

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        """
        Apply an edit, then rebuild the derived state.

        If the edit or the rebuild raises, settings, anchors and caches are
        restored to what they were before the edit and the error propagates.
        """
        # anchors are replaced, never edited in place, so a shallow copy is enough
        saved = (
            list(self._anchor_points),
            self._num_points,
            self.position_function,
            self._closed_loop,
            self._inverted,
            self._anchor_pairs,
            self._points,
        )
        try:
            yield
            self._update_anchor_pairs()
        except Exception:
            (
                self._anchor_points,
                self._num_points,
                (self._position_fn_x, self._position_fn_y, self._position_fn_z),
                self._closed_loop,
                self._inverted,
                self._anchor_pairs,
                self._points,
            ) = saved
            raise

    # ------------------ ANCHORS ------------------
    @property
    def anchor_points(self) -> List[ColorPoint]:
        """Copies of the anchors; edit them through the palette's methods."""
        return [anchor.copy() for anchor in self._anchor_points]

    @anchor_points.setter
    def anchor_points(self, anchors: Sequence[AnchorInput]) -> None:
        _validate_anchor_count(len(anchors))
        with self._mutation():
            self._anchor_points = [_to_color_point(anchor, self._inverted) for anchor in anchors]

    @property
    def anchor_pairs(self) -> List[Tuple[ColorPoint, ColorPoint]]:
        return [(start.copy(), end.copy()) for start, end in self._anchor_pairs]

    def _check_index(self, index: int) -> int:
        count = len(self._anchor_points)
        if not -count <= index < count:
            raise AnchorIndexError(index, count)
        return index % count

    def add_anchor_point(self, value: AnchorInput, at_index: Optional[int] = None) -> ColorPoint:
        """
        Insert a new anchor.

        Args:
            value: ``Hsl``, ``Point3`` or ``ColorPoint``; a ColorPoint is
                copied and re-flagged with the palette's inversion.
            at_index: Insertion index; appends when omitted. ``len(anchors)``
                is accepted and appends as well.

        Returns:
            A copy of the inserted anchor.
        """
        anchor = _to_color_point(value, self._inverted)
        count = len(self._anchor_points)
        if at_index is not None and not -count <= at_index <= count:
            raise AnchorIndexError(at_index, count)
        with self._mutation():
            if at_index is None:
                self._anchor_points.append(anchor)
            else:
                self._anchor_points.insert(at_index, anchor)
        logger.debug("Added anchor %r at index %s", anchor.color, at_index)
        return anchor.copy()

    def remove_anchor_point(self, index: int) -> ColorPoint:
        """Remove the anchor at ``index`` and return it; at least two must remain."""
        index = self._check_index(index)
        _validate_anchor_count(len(self._anchor_points) - 1)
        with self._mutation():
            removed = self._anchor_points.pop(index)
        logger.debug("Removed anchor %d", index)
        return removed

    def update_anchor_point(self, index: int, value: PointOrHsl) -> ColorPoint:
        """
        Move an anchor to a new color or position, keeping the other
        representation in sync.

        Args:
            index: Anchor index.
            value: ``Point3`` sets the position; ``Hsl`` (or a plain
                3-tuple) sets the color.

        Returns:
            A copy of the updated anchor.
        """
        index = self._check_index(index)
        if isinstance(value, ColorPoint):
            raise TypeError("Use replace_anchor_point to swap in a ColorPoint")
        # build first so a bad value leaves the anchor untouched
        updated = _to_color_point(value, self._inverted)
        anchor = self._anchor_points[index].copy()
        if isinstance(value, Point3):
            anchor.position = updated.position
        else:
            anchor.color = updated.color
        with self._mutation():
            self._anchor_points[index] = anchor
        return anchor.copy()

    def replace_anchor_point(self, index: int, value: AnchorInput) -> ColorPoint:
        """Swap the anchor at ``index`` for a new one and return the old anchor."""
        index = self._check_index(index)
        replacement = _to_color_point(value, self._inverted)
        previous = self._anchor_points[index]
        with self._mutation():
            self._anchor_points[index] = replacement
        return previous.copy()

    def get_closest_anchor_point(
        self,
        value: PointOrHsl,
        circular_hue: bool = False,
        max_distance: Optional[float] = None,
    ) -> Optional[Tuple[ColorPoint, float]]:
        """
        Find the anchor nearest to a position or a color.

        A ``Point3`` is compared against anchor positions, an ``Hsl`` against
        anchor colors. Hue differences are plain signed differences in
        degrees unless ``circular_hue`` is set, in which case they go the
        short way round and are normalised by 360.

        Args:
            value: Position or color to search from.
            circular_hue: Measure hue on the color wheel (``Hsl`` queries).
            max_distance: Ignore anchors further away than this.

        Returns:
            ``(anchor copy, distance)`` or None when nothing qualifies.
        """
        if isinstance(value, Point3):
            target = PartialPoint3.from_point(value)
            distances = [
                PartialPoint3.from_point(anchor.position).distance(target)
                for anchor in self._anchor_points
            ]
        elif isinstance(value, Hsl):
            target = PartialPoint3.from_hsl(value)
            distances = [
                PartialPoint3.from_hsl(anchor.color).distance(target, hue_mode=circular_hue)
                for anchor in self._anchor_points
            ]
        else:
            raise TypeError(f"Expected Point3 or Hsl, got {type(value).__name__}")

        if not distances:
            return None
        best = int(np.argmin(distances))
        if max_distance is not None and distances[best] > max_distance:
            return None
        return self._anchor_points[best].copy(), distances[best]

    def shift_hue(self, h_shift: float = DEFAULT_HUE_SHIFT) -> None:
        """Rotate every anchor's hue by ``h_shift`` degrees."""
        shifted = [anchor.copy() for anchor in self._anchor_points]
        for anchor in shifted:
            anchor.shift_hue(h_shift)
        with self._mutation():
            self._anchor_points = shifted

    # ------------------ SETTINGS ------------------
    @property
    def num_points(self) -> int:
        return self._num_points

    @num_points.setter
    def num_points(self, num_points: int) -> None:
        num_points = _validate_num_points(num_points)
        with self._mutation():
            self._num_points = num_points

    @property
    def position_function(self) -> AxisTransformers:
        """The (x, y, z) transformers."""
        return (self._position_fn_x, self._position_fn_y, self._position_fn_z)

    @position_function.setter
    def position_function(self, fns: AxisFunctionsLike) -> None:
        if isinstance(fns, (list, tuple)):
            if len(fns) != 3:
                raise ValueError(f"Expected one position function per axis (3), got {len(fns)}")
            resolved = tuple(resolve_position_function(fn) for fn in fns)
        else:
            resolved = (resolve_position_function(fns),) * 3
        with self._mutation():
            self._position_fn_x, self._position_fn_y, self._position_fn_z = resolved

    @property
    def position_function_x(self) -> Transformer:
        return self._position_fn_x

    @position_function_x.setter
    def position_function_x(self, fn: PositionFunctionLike) -> None:
        resolved = resolve_position_function(fn)
        with self._mutation():
            self._position_fn_x = resolved

    @property
    def position_function_y(self) -> Transformer:
        return self._position_fn_y

    @position_function_y.setter
    def position_function_y(self, fn: PositionFunctionLike) -> None:
        resolved = resolve_position_function(fn)
        with self._mutation():
            self._position_fn_y = resolved

    @property
    def position_function_z(self) -> Transformer:
        return self._position_fn_z

    @position_function_z.setter
    def position_function_z(self, fn: PositionFunctionLike) -> None:
        resolved = resolve_position_function(fn)
        with self._mutation():
            self._position_fn_z = resolved

    @property
    def closed_loop(self) -> bool:
        return self._closed_loop

    @closed_loop.setter
    def closed_loop(self, closed_loop: bool) -> None:
        with self._mutation():
            self._closed_loop = bool(closed_loop)

    @property
    def inverted(self) -> bool:
        return self._inverted

    @inverted.setter
    def inverted(self, inverted: bool) -> None:
        inverted = bool(inverted)
        reflagged = [anchor.copy() for anchor in self._anchor_points]
        for anchor in reflagged:
            anchor.inverted = inverted
        with self._mutation():
            self._inverted = inverted
            self._anchor_points = reflagged

    @property
    def settings(self) -> PolineSettings:
        return PolineSettings(
            num_points=self._num_points,
            closed_loop=self._closed_loop,
            inverted=self._inverted,
            position_function_x=self._position_fn_x,
            position_function_y=self._position_fn_y,
            position_function_z=self._position_fn_z,
            anchor_count=len(self._anchor_points),
        )

    # ------------------ OUTPUT ------------------
    @property
    def points(self) -> List[List[ColorPoint]]:
        """Per-segment points, junction anchors repeated."""
        return [[point.copy() for point in segment] for segment in self._points]

    @property
    def flattened_points(self) -> List[ColorPoint]:
        return [
            point.copy()
            for point in flatten_segments(self._points, self._num_points, self._closed_loop)
        ]

    @property
    def colors(self) -> List[Hsl]:
        return [point.color for point in flatten_segments(self._points, self._num_points, self._closed_loop)]

    @property
    def colors_css(self) -> List[str]:
        return [
            point.css_string()
            for point in flatten_segments(self._points, self._num_points, self._closed_loop)
        ]

    def __len__(self) -> int:
        return len(flatten_segments(self._points, self._num_points, self._closed_loop))

    def __repr__(self) -> str:
        return (
            f"Poline(anchors={len(self._anchor_points)}, num_points={self._num_points}, "
            f"closed_loop={self._closed_loop}, inverted={self._inverted})"
        )
