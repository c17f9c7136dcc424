from __future__ import annotations

from itertools import chain
from typing import List, Sequence, TypeVar

T = TypeVar('T')


def flatten_segments(segments: Sequence[Sequence[T]], num_points: int, closed_loop: bool = False) -> List[T]:
    """
    Join per-segment sequences into one palette sequence.

    Consecutive segments share their junction anchor, so every element whose
    flat index is a nonzero multiple of ``num_points`` is dropped. For a
    closed loop the last element repeats the first and is dropped as well.

    Args:
        segments: Per-segment sequences, each ``num_points`` long.
        num_points: Points per segment, both endpoints included.
        closed_loop: Whether the last segment returns to the first anchor.

    Returns:
        Flat list of ``len(segments) * (num_points - 1) + 1`` elements,
        one fewer for a closed loop.
    """
    flat = [
        item
        for i, item in enumerate(chain.from_iterable(segments))
        if i == 0 or i % num_points != 0
    ]
    if closed_loop and flat:
        flat.pop()
    return flat
