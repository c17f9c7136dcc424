"""
Exceptions raised by the palette engine.

All errors derive from ``PolineError`` and from the builtin exception that
best describes them, so callers may catch either.
"""


class PolineError(Exception):
    """Base class for palette engine errors."""


class InsufficientAnchorsError(PolineError, ValueError):
    """Raised when fewer than two anchor colors are supplied or would remain."""

    def __init__(self, count: int, minimum: int = 2):
        self.count = count
        self.minimum = minimum
        super().__init__(f"At least {minimum} anchor colors are required, got {count}")


class InvalidPointsPerSegmentError(PolineError, ValueError):
    """Raised when the requested number of points per segment cannot form a segment."""

    def __init__(self, num_points, minimum: int = 2):
        self.num_points = num_points
        self.minimum = minimum
        super().__init__(
            f"Points per segment must be an integer >= {minimum} "
            f"(both endpoints included), got {num_points!r}"
        )


class AnchorIndexError(PolineError, IndexError):
    """Raised when an anchor index is outside the anchor list."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Anchor index {index} out of range for {length} anchor points")
