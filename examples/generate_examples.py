#!/usr/bin/env python3

import os
import sys

# Allow running this script directly (sys.path[0] is examples/).
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import squirclegen as gen


def generate(out_dir: str):
    os.makedirs(out_dir, exist_ok=True)

    examples = [
        ("card_smooth.svg", {"width": 320, "height": 200, "corner_radius": 32, "corner_smoothing": 1.0}),
        ("card_circular.svg", {"width": 320, "height": 200, "corner_radius": 32, "corner_smoothing": 0.0}),
        ("tab_top_only.svg", {"width": 160, "height": 48, "corner_radius": 0, "top_corner_radius": 14,
                              "corner_smoothing": 0.8}),
        ("pill_starved.svg", {"width": 200, "height": 56, "corner_radius": 28, "corner_smoothing": 1.0}),
        (
            "pill_preserved.svg",
            {"width": 200, "height": 56, "corner_radius": 28, "corner_smoothing": 1.0, "preserve_smoothing": True},
        ),
        ("icon_square.svg", {"width": 120, "height": 120, "corner_radius": 27, "corner_smoothing": 0.6}),
    ]

    for filename, params in examples:
        res = gen.generate_svg({**params, "padding": 8})
        with open(os.path.join(out_dir, filename), "w", encoding="utf-8") as f:
            f.write(res["svg"])


if __name__ == "__main__":
    generate(os.path.join(os.path.dirname(__file__), "out"))
