"""
Position functions (easing curves) used to reshape interpolation progress.

Every function maps ``(t, inverted) -> factor`` where ``t`` is the progress
along a segment in ``[0, 1]``. With ``inverted=False`` the curve eases in;
``inverted=True`` eases out, using the reflection ``1 - f(1 - t)`` for the
power and sine curves and the quarter circle ``sqrt(1 - (1 - t)**2)`` for
arc. Linear and smooth-step are symmetric and ignore the flag.

All functions are written with numpy ufuncs, so ``t`` may be a float or an
ndarray of progress values.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Union

import numpy as np

from ..types.transform_types import Progress, Transformer

HALF_PI = np.pi / 2


def linear_fn(t: Progress, inverted: bool = False) -> Progress:
    return t


def _power(t: Progress, exponent: int, inverted: bool) -> Progress:
    if inverted:
        return 1 - np.power(1 - t, exponent)
    return np.power(t, exponent)


def quadratic_fn(t: Progress, inverted: bool = False) -> Progress:
    return _power(t, 2, inverted)


def cubic_fn(t: Progress, inverted: bool = False) -> Progress:
    return _power(t, 3, inverted)


def quartic_fn(t: Progress, inverted: bool = False) -> Progress:
    return _power(t, 4, inverted)


def quintic_fn(t: Progress, inverted: bool = False) -> Progress:
    return _power(t, 5, inverted)


def sinusoidal_fn(t: Progress, inverted: bool = False) -> Progress:
    if inverted:
        return 1 - np.sin((1 - t) * HALF_PI)
    return np.sin(t * HALF_PI)


def asinusoidal_fn(t: Progress, inverted: bool = False) -> Progress:
    """Arcsine ease; only defined for ``t`` in ``[-1, 1]``."""
    if inverted:
        return 1 - np.arcsin(1 - t) / HALF_PI
    return np.arcsin(t) / HALF_PI


def arc_fn(t: Progress, inverted: bool = False) -> Progress:
    """Quarter-circle ease. Ease-in by default, ease-out when inverted."""
    if inverted:
        return np.sqrt(1 - np.power(1 - t, 2))
    return 1 - np.sqrt(1 - t)


def smooth_step_fn(t: Progress, inverted: bool = False) -> Progress:
    return np.power(t, 2) * (3 - 2 * t)


class PositionFunction(str, Enum):
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    QUARTIC = "quartic"
    QUINTIC = "quintic"
    SINUSOIDAL = "sinusoidal"
    ASINUSOIDAL = "asinusoidal"
    ARC = "arc"
    SMOOTH_STEP = "smooth_step"

    def get_fn(self) -> Transformer:
        return position_functions[self]

    def __call__(self, t: Progress, inverted: bool = False) -> Progress:
        return position_functions[self](t, inverted)


position_functions: Dict[PositionFunction, Transformer] = {
    PositionFunction.LINEAR: linear_fn,
    PositionFunction.QUADRATIC: quadratic_fn,
    PositionFunction.CUBIC: cubic_fn,
    PositionFunction.QUARTIC: quartic_fn,
    PositionFunction.QUINTIC: quintic_fn,
    PositionFunction.SINUSOIDAL: sinusoidal_fn,
    PositionFunction.ASINUSOIDAL: asinusoidal_fn,
    PositionFunction.ARC: arc_fn,
    PositionFunction.SMOOTH_STEP: smooth_step_fn,
}

PositionFunctionLike = Union[PositionFunction, str, Transformer]


def resolve_position_function(fn: PositionFunctionLike) -> Transformer:
    """
    Normalize a position function given by enum, name or callable.

    Args:
        fn: A ``PositionFunction`` member, its string value (e.g. ``"arc"``),
            or any callable ``(t, inverted) -> factor``.

    Returns:
        The transformer callable. Named functions resolve to the module-level
        implementation so identity comparisons stay meaningful.
    """
    if isinstance(fn, PositionFunction):
        return fn.get_fn()
    if isinstance(fn, str):
        try:
            return PositionFunction(fn.lower()).get_fn()
        except ValueError:
            valid = ", ".join(member.value for member in PositionFunction)
            raise ValueError(f"Unknown position function {fn!r}; expected one of: {valid}") from None
    if callable(fn):
        return fn
    raise TypeError(f"Position function must be a PositionFunction, a name or a callable, got {type(fn).__name__}")


def position_function_name(fn: Transformer) -> str | None:
    """Return the name of a built-in transformer, or None for custom callables."""
    for member, impl in position_functions.items():
        if impl is fn:
            return member.value
    return None
