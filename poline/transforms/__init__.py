"""
Easing curves for palette interpolation.

Each curve maps ``(t, inverted) -> factor`` with ``t`` in ``[0, 1]``:

    - LINEAR: identity
    - QUADRATIC, CUBIC, QUARTIC, QUINTIC: power curves ``t**n``
    - SINUSOIDAL: ``sin(t * pi / 2)``
    - ASINUSOIDAL: ``asin(t) / (pi / 2)``
    - ARC: quarter circle ``1 - sqrt(1 - t)``
    - SMOOTH_STEP: ``t**2 * (3 - 2t)``

``inverted=True`` reflects power, sine, arcsine and arc curves as
``1 - f(1 - t)`` (arc uses ``sqrt(1 - (1 - t)**2)``), turning an ease-in
into an ease-out. Linear and smooth-step ignore the flag.
"""

from .position_functions import (
    PositionFunction,
    position_functions,
    resolve_position_function,
    position_function_name,
    linear_fn,
    quadratic_fn,
    cubic_fn,
    quartic_fn,
    quintic_fn,
    sinusoidal_fn,
    asinusoidal_fn,
    arc_fn,
    smooth_step_fn,
)

__all__ = [
    'PositionFunction',
    'position_functions',
    'resolve_position_function',
    'position_function_name',
    'linear_fn',
    'quadratic_fn',
    'cubic_fn',
    'quartic_fn',
    'quintic_fn',
    'sinusoidal_fn',
    'asinusoidal_fn',
    'arc_fn',
    'smooth_step_fn',
]
