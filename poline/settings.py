"""
Default configuration for palettes and the settings snapshot type.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .transforms.position_functions import PositionFunction, position_function_name
from .types.transform_types import Transformer

DEFAULT_NUM_POINTS = 4
DEFAULT_HUE_SHIFT = 20.0
DEFAULT_POSITION_FUNCTION = PositionFunction.SINUSOIDAL
DEFAULT_CLOSED_LOOP = False
DEFAULT_INVERTED = False

MIN_ANCHORS = 2
# both endpoints of a segment are counted
MIN_POINTS_PER_SEGMENT = 2


@dataclass(frozen=True)
class PolineSettings:
    """Snapshot of a palette's configuration at the time it was taken."""
    num_points: int
    closed_loop: bool
    inverted: bool
    position_function_x: Transformer
    position_function_y: Transformer
    position_function_z: Transformer
    anchor_count: int

    @property
    def num_segments(self) -> int:
        return self.anchor_count if self.closed_loop else self.anchor_count - 1

    @property
    def position_function_names(self) -> tuple[Optional[str], Optional[str], Optional[str]]:
        return (
            position_function_name(self.position_function_x),
            position_function_name(self.position_function_y),
            position_function_name(self.position_function_z),
        )
