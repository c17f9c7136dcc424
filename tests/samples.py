from poline import Hsl

# lightness stays away from 0 and 1 so the hue survives either inversion
sample_hsl = [
    Hsl(0.0, 0.5, 0.5),
    Hsl(30.0, 0.6, 0.7),
    Hsl(45.0, 1.0, 0.25),
    Hsl(123.4, 0.2, 0.9),
    Hsl(180.0, 0.0, 0.4),
    Hsl(270.0, 0.75, 0.6),
    Hsl(359.5, 0.33, 0.1),
]

hsl_tolerance = 1e-9


def hue_difference(a: float, b: float) -> float:
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def assert_hsl_close(actual, expected, tol: float = 1e-6):
    assert hue_difference(actual.h, expected.h) < tol
    assert abs(actual.s - expected.s) < tol
    assert abs(actual.l - expected.l) < tol
