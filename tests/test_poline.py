import math
import re

import numpy as np
import pytest

from poline import (
    AnchorIndexError,
    ColorPoint,
    Hsl,
    InsufficientAnchorsError,
    InvalidPointsPerSegmentError,
    Point3,
    Poline,
    PolineError,
    PositionFunction,
)
from poline.transforms import arc_fn, cubic_fn, linear_fn, quadratic_fn, sinusoidal_fn
from samples import assert_hsl_close, hue_difference

A = Hsl(30.0, 0.6, 0.7)
B = Hsl(150.0, 0.4, 0.5)
C = Hsl(270.0, 0.8, 0.6)

css_pattern = re.compile(r"^hsl\(\d{3}\.\d{2}, [-\d.]+%, [-\d.]+%\)$")


def make_palette(**kwargs):
    kwargs.setdefault("anchor_colors", [A, B, C])
    return Poline(**kwargs)


def snapshot(palette):
    return [anchor.color for anchor in palette.anchor_points], palette.colors, palette.settings


# ------------------ CONSTRUCTION ------------------
def test_defaults():
    palette = make_palette()
    settings = palette.settings
    assert settings.num_points == 4
    assert settings.closed_loop is False
    assert settings.inverted is False
    assert settings.anchor_count == 3
    assert palette.position_function == (sinusoidal_fn, sinusoidal_fn, sinusoidal_fn)
    assert settings.position_function_names == ("sinusoidal",) * 3


@pytest.mark.parametrize("anchors", [[], [A]])
def test_construction_needs_two_anchors(anchors):
    with pytest.raises(InsufficientAnchorsError):
        Poline(anchor_colors=anchors)


def test_errors_share_a_base():
    with pytest.raises(PolineError):
        Poline(anchor_colors=[A])
    with pytest.raises(ValueError):
        Poline(anchor_colors=[A, B], num_points=0)


@pytest.mark.parametrize("num_points", [0, 1, -3, 2.5, True])
def test_construction_rejects_bad_points_per_segment(num_points):
    with pytest.raises(InvalidPointsPerSegmentError):
        make_palette(num_points=num_points)


def test_random_default_anchors_are_reproducible():
    first = Poline(rng=np.random.default_rng(7))
    second = Poline(rng=np.random.default_rng(7))
    assert len(first.anchor_points) == 2
    assert [a.color for a in first.anchor_points] == [a.color for a in second.anchor_points]
    assert first.colors_css == second.colors_css


def test_anchor_inputs():
    point = Point3(0.5, 0.9, 0.3)
    palette = Poline(anchor_colors=[(10, 0.5, 0.5), point, ColorPoint.from_hsl(B, inverted=True)])
    anchors = palette.anchor_points
    assert anchors[0].color == Hsl(10.0, 0.5, 0.5)
    assert anchors[1].position == point
    # anchors always carry the palette's inversion
    assert anchors[2].inverted is False
    assert anchors[2].color == B


def test_anchor_input_type_errors():
    with pytest.raises(TypeError):
        Poline(anchor_colors=[A, "red"])
    with pytest.raises(ValueError):
        Poline(anchor_colors=[A, (1.0, 2.0)])


# ------------------ SEGMENTS AND OUTPUT ------------------
def test_open_palette_layout():
    palette = make_palette()
    assert len(palette.anchor_pairs) == 2
    assert [len(segment) for segment in palette.points] == [4, 4]

    colors = palette.colors
    assert len(colors) == 2 * 4 - 1
    assert len(palette) == 7
    assert_hsl_close(colors[0], A)
    assert_hsl_close(colors[3], B)
    assert_hsl_close(colors[6], C)


def test_closed_palette_layout():
    palette = make_palette(closed_loop=True)
    pairs = palette.anchor_pairs
    assert len(pairs) == 3
    assert pairs[-1][0].color == C
    assert pairs[-1][1].color == A

    assert sum(len(segment) for segment in palette.points) == 12
    colors = palette.colors
    assert len(colors) == 9
    assert_hsl_close(colors[0], A)
    assert_hsl_close(colors[3], B)
    assert_hsl_close(colors[6], C)
    # the loop does not repeat its first color at the end
    last = colors[-1]
    assert hue_difference(last.h, A.h) > 1e-3 or abs(last.l - A.l) > 1e-3
    assert len(palette.flattened_points) == len(palette.colors_css) == 9


def test_toggling_closed_loop_rebuilds():
    palette = make_palette()
    palette.closed_loop = True
    assert len(palette.colors) == 9
    palette.closed_loop = False
    assert len(palette.colors) == 7


def test_segment_easing_alternates_direction():
    palette = make_palette(position_function=PositionFunction.QUADRATIC)
    first, second = palette.points
    t = 1 / 3

    # even segments ease out, odd segments ease in
    f_first = 1 - (1 - t) ** 2
    p1, p2 = first[0].position, first[-1].position
    assert first[1].position.x == pytest.approx((1 - f_first) * p1.x + f_first * p2.x)

    f_second = t ** 2
    p1, p2 = second[0].position, second[-1].position
    assert second[1].position.x == pytest.approx((1 - f_second) * p1.x + f_second * p2.x)


def test_points_are_self_consistent():
    from poline.points.point import point_to_hsl

    for inverted in (False, True):
        palette = make_palette(inverted=inverted, closed_loop=True)
        for cp in palette.flattened_points:
            assert cp.inverted is inverted
            assert cp.color == point_to_hsl(cp.position, inverted)


def test_colors_css():
    palette = make_palette()
    css = palette.colors_css
    assert len(css) == 7
    assert all(css_pattern.match(entry) for entry in css)
    assert css[0] == palette.flattened_points[0].css_string()


def test_outputs_are_copies():
    palette = make_palette()
    before = palette.colors
    points = palette.flattened_points
    points[0].shift_hue(100.0)
    anchors = palette.anchor_points
    anchors[0].color = Hsl(0.0, 0.0, 0.0)
    assert palette.colors == before
    assert palette.anchor_points[0].color == A


def test_unvalidated_saturation_reaches_css():
    palette = Poline(anchor_colors=[Hsl(0.0, 1.5, 0.5), Hsl(90.0, 1.5, 0.5)], position_function="linear")
    assert palette.colors_css[0] == "hsl(000.00, 150%, 50%)"


# ------------------ SETTINGS ------------------
def test_set_num_points():
    palette = make_palette()
    palette.num_points = 6
    assert palette.num_points == 6
    assert len(palette.colors) == 2 * 6 - 1
    assert all(len(segment) == 6 for segment in palette.points)


@pytest.mark.parametrize("num_points", [0, 1, -1])
def test_failed_num_points_leaves_state(num_points):
    palette = make_palette()
    before = snapshot(palette)
    with pytest.raises(InvalidPointsPerSegmentError):
        palette.num_points = num_points
    assert snapshot(palette) == before


def test_position_function_setters():
    palette = make_palette()
    palette.position_function = "arc"
    assert palette.position_function == (arc_fn, arc_fn, arc_fn)

    palette.position_function = [PositionFunction.LINEAR, "cubic", quadratic_fn]
    assert palette.position_function == (linear_fn, cubic_fn, quadratic_fn)

    palette.position_function_y = PositionFunction.ARC
    palette.position_function_z = "smooth_step"
    palette.position_function_x = sinusoidal_fn
    assert palette.settings.position_function_names == ("sinusoidal", "arc", "smooth_step")


def test_per_axis_constructor_overrides():
    palette = make_palette(position_function="linear", position_function_z="cubic")
    assert palette.position_function == (linear_fn, linear_fn, cubic_fn)


def test_linear_easing_changes_output():
    eased = make_palette().colors
    linear = make_palette(position_function=PositionFunction.LINEAR).colors
    assert eased[1] != linear[1]
    assert_hsl_close(eased[3], linear[3])


def test_custom_position_function():
    calls = []

    def halfway(t, inverted):
        calls.append(inverted)
        return 0.5

    palette = Poline(anchor_colors=[A, B], num_points=3, position_function=halfway)
    assert set(calls) == {True}
    assert len(calls) == 3 * 3
    positions = [cp.position for cp in palette.flattened_points]
    assert positions[0] == positions[1] == positions[2]


def test_failed_position_function_leaves_state():
    palette = make_palette()
    before = snapshot(palette)
    with pytest.raises(ValueError):
        palette.position_function = "wobbly"
    with pytest.raises(ValueError):
        palette.position_function = ["linear", "arc"]
    with pytest.raises(ValueError):
        palette.position_function_x = "wobbly"
    assert snapshot(palette) == before


def test_scalar_position_functions():
    def step(t, inverted):
        return 0.0 if t < 0.5 else 1.0

    def sine(t, inverted):
        return math.sin(t * math.pi / 2)

    palette = make_palette(num_points=5, position_function=step)
    colors = palette.colors
    assert colors[1] == colors[0]
    assert_hsl_close(colors[0], A)
    assert colors[2] == colors[3] == colors[4]
    assert_hsl_close(colors[4], B)

    palette.position_function = [sine, "linear", step]
    assert palette.position_function == (sine, linear_fn, step)
    palette.position_function_x = lambda t, inverted: t * t
    assert len(palette.colors) == 2 * 5 - 1
    assert_hsl_close(palette.colors[-1], C)


def _fails_on_ease_in(t, inverted):
    # only the ease-in (odd) segments raise
    if not inverted:
        raise RuntimeError("transformer failed")
    return t


def test_raising_position_function_leaves_state():
    palette = make_palette()
    before = snapshot(palette)
    with pytest.raises(RuntimeError, match="transformer failed"):
        palette.position_function = _fails_on_ease_in
    with pytest.raises(RuntimeError):
        palette.position_function_z = _fails_on_ease_in
    assert snapshot(palette) == before
    assert palette.position_function == (sinusoidal_fn,) * 3

    # still fully usable afterwards
    palette.shift_hue(10.0)
    assert len(palette.colors) == 7


def test_raising_rebuild_rolls_back_setting_changes():
    palette = Poline(anchor_colors=[A, B], num_points=3, position_function=_fails_on_ease_in)
    before = snapshot(palette)

    with pytest.raises(RuntimeError):
        palette.closed_loop = True
    assert palette.closed_loop is False
    with pytest.raises(RuntimeError):
        palette.add_anchor_point(C)
    assert len(palette.anchor_points) == 2
    with pytest.raises(RuntimeError):
        palette.anchor_points = [A, B, C]
    assert snapshot(palette) == before
    assert len(palette.points) == 1


def test_raising_rebuild_rolls_back_num_points():
    def picky(t, inverted):
        if 0.0 < t < 0.5:
            raise ArithmeticError("no early progress")
        return t

    palette = Poline(anchor_colors=[A, B], num_points=2, position_function=picky)
    before = snapshot(palette)
    with pytest.raises(ArithmeticError):
        palette.num_points = 5
    assert palette.num_points == 2
    assert snapshot(palette) == before
    assert all(len(segment) == 2 for segment in palette.points)


def test_raising_position_function_in_constructor():
    def broken(t, inverted):
        raise RuntimeError("transformer failed")

    with pytest.raises(RuntimeError, match="transformer failed"):
        make_palette(position_function=broken)


def test_inverted_toggle_keeps_anchor_colors():
    palette = make_palette()
    positions = [anchor.position for anchor in palette.anchor_points]
    palette.inverted = True
    assert palette.inverted is True
    anchors = palette.anchor_points
    assert [anchor.color for anchor in anchors] == [A, B, C]
    assert all(anchor.inverted for anchor in anchors)
    assert [anchor.position for anchor in anchors] != positions
    assert_hsl_close(palette.colors[0], A)
    assert_hsl_close(palette.colors[-1], C)


# ------------------ ANCHOR EDITING ------------------
def test_add_anchor_point():
    palette = make_palette()
    added = palette.add_anchor_point(Hsl(90.0, 0.5, 0.5), at_index=1)
    assert added.color == Hsl(90.0, 0.5, 0.5)
    anchors = palette.anchor_points
    assert len(anchors) == 4
    assert anchors[1].color == Hsl(90.0, 0.5, 0.5)
    assert len(palette.colors) == 3 * 3 + 1

    palette.add_anchor_point(Point3(0.5, 0.2, 0.4))
    assert palette.anchor_points[-1].position == Point3(0.5, 0.2, 0.4)


def test_add_anchor_point_reflags_color_points():
    palette = make_palette()
    added = palette.add_anchor_point(ColorPoint.from_hsl(Hsl(90.0, 0.5, 0.5), inverted=True))
    assert added.inverted is False
    assert palette.anchor_points[-1].inverted is False


def test_add_anchor_point_bad_index():
    palette = make_palette()
    before = snapshot(palette)
    with pytest.raises(AnchorIndexError):
        palette.add_anchor_point(Hsl(90.0, 0.5, 0.5), at_index=10)
    assert snapshot(palette) == before


def test_remove_anchor_point():
    palette = make_palette(closed_loop=True)
    removed = palette.remove_anchor_point(1)
    assert removed.color == B
    assert [anchor.color for anchor in palette.anchor_points] == [A, C]
    # closed loop of two anchors has two segments
    assert len(palette.colors) == 2 * 4 - 2


def test_remove_anchor_point_keeps_two():
    palette = Poline(anchor_colors=[A, B])
    before = snapshot(palette)
    with pytest.raises(InsufficientAnchorsError):
        palette.remove_anchor_point(0)
    assert snapshot(palette) == before


def test_remove_anchor_point_bad_index():
    palette = make_palette()
    before = snapshot(palette)
    with pytest.raises(AnchorIndexError):
        palette.remove_anchor_point(3)
    with pytest.raises(IndexError):
        palette.remove_anchor_point(-4)
    assert snapshot(palette) == before


def test_update_anchor_point_with_color():
    palette = make_palette()
    new_color = Hsl(200.0, 0.3, 0.9)
    updated = palette.update_anchor_point(0, new_color)
    assert updated.color == new_color
    assert_hsl_close(palette.colors[0], new_color)


def test_update_anchor_point_with_position():
    palette = make_palette()
    point = Point3(0.6, 0.6, 0.5)
    updated = palette.update_anchor_point(2, point)
    assert updated.position == point
    assert palette.flattened_points[-1].position == pytest.approx(point)


def test_update_anchor_point_errors():
    palette = make_palette()
    before = snapshot(palette)
    with pytest.raises(AnchorIndexError):
        palette.update_anchor_point(5, Hsl(0.0, 0.5, 0.5))
    with pytest.raises(TypeError):
        palette.update_anchor_point(0, ColorPoint.from_hsl(A))
    with pytest.raises(TypeError):
        palette.update_anchor_point(0, "blue")
    assert snapshot(palette) == before


def test_replace_anchor_point():
    palette = make_palette()
    previous = palette.replace_anchor_point(1, ColorPoint.from_hsl(Hsl(0.0, 0.1, 0.2)))
    assert previous.color == B
    assert palette.anchor_points[1].color == Hsl(0.0, 0.1, 0.2)


def test_set_anchor_points():
    palette = make_palette()
    palette.anchor_points = [C, A]
    assert [anchor.color for anchor in palette.anchor_points] == [C, A]
    assert len(palette.colors) == 4

    before = snapshot(palette)
    with pytest.raises(InsufficientAnchorsError):
        palette.anchor_points = [B]
    assert snapshot(palette) == before


# ------------------ HUE SHIFT ------------------
def test_shift_hue_twice_by_half_turn_restores():
    palette = make_palette()
    palette.shift_hue(180.0)
    assert [round(anchor.color.h, 9) for anchor in palette.anchor_points] == [210.0, 330.0, 90.0]
    palette.shift_hue(180.0)
    for anchor, original in zip(palette.anchor_points, [A, B, C]):
        assert hue_difference(anchor.color.h, original.h) < 1e-9


def test_shift_hue_default_and_rebuild():
    palette = make_palette()
    palette.shift_hue()
    hues = [anchor.color.h for anchor in palette.anchor_points]
    assert hues == pytest.approx([50.0, 170.0, 290.0])
    assert palette.colors[0].h == pytest.approx(50.0)


# ------------------ NEAREST ANCHOR ------------------
def test_closest_anchor_uses_signed_hue_difference():
    palette = Poline(anchor_colors=[Hsl(0.0, 0.5, 0.5), Hsl(180.0, 0.5, 0.5)])
    anchor, dist = palette.get_closest_anchor_point(Hsl(170.0, 0.5, 0.5))
    assert anchor.color.h == 180.0
    assert dist == pytest.approx(10.0)


def test_closest_anchor_circular_mode():
    palette = Poline(anchor_colors=[Hsl(10.0, 0.5, 0.5), Hsl(300.0, 0.5, 0.5)])
    anchor, _ = palette.get_closest_anchor_point(Hsl(350.0, 0.5, 0.5))
    assert anchor.color.h == 300.0

    anchor, dist = palette.get_closest_anchor_point(Hsl(350.0, 0.5, 0.5), circular_hue=True)
    assert anchor.color.h == 10.0
    assert dist == pytest.approx(20.0 / 360.0)


def test_closest_anchor_by_position():
    palette = make_palette()
    target = palette.anchor_points[1].position
    anchor, dist = palette.get_closest_anchor_point(target)
    assert anchor.color == B
    assert dist == pytest.approx(0.0)


def test_closest_anchor_max_distance():
    palette = make_palette()
    assert palette.get_closest_anchor_point(Point3(5.0, 5.0, 5.0), max_distance=0.1) is None
    assert palette.get_closest_anchor_point(Point3(5.0, 5.0, 5.0)) is not None


def test_closest_anchor_rejects_other_types():
    with pytest.raises(TypeError):
        make_palette().get_closest_anchor_point((0.5, 0.5, 0.5))
