"""Basic Poline usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from poline import (
    Hsl,
    Point3,
    Poline,
    PositionFunction,
)


def demonstrate_palette() -> None:
    # Three anchors, six colors per segment, arc easing on every axis.
    palette = Poline(
        anchor_colors=[Hsl(20, 0.9, 0.85), Hsl(200, 0.6, 0.35), Hsl(300, 0.4, 0.7)],
        num_points=6,
        position_function=PositionFunction.ARC,
    )
    print("Open palette:", len(palette.colors), "colors")
    for css in palette.colors_css:
        print("  ", css)

    # Connect the last anchor back to the first for a cyclic palette.
    palette.closed_loop = True
    print("Closed palette:", len(palette.colors), "colors")


def demonstrate_editing() -> None:
    palette = Poline(rng=np.random.default_rng(2024))
    print("Random anchors:", [anchor.css_string() for anchor in palette.anchor_points])

    palette.add_anchor_point(Hsl(120, 0.5, 0.5), at_index=1)
    palette.position_function = [PositionFunction.LINEAR, PositionFunction.CUBIC, PositionFunction.SINUSOIDAL]
    palette.shift_hue(45)
    print("After editing:", palette)

    anchor, distance = palette.get_closest_anchor_point(Point3(0.5, 0.5, 0.5))
    print(f"Closest anchor to the center: {anchor.css_string()} at {distance:.3f}")


if __name__ == "__main__":
    demonstrate_palette()
    demonstrate_editing()
