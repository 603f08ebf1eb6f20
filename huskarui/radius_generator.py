"""Corner radius scale."""

from __future__ import annotations

from typing import List


def generate_radius(radius_base: int) -> List[int]:
    """Return ``[base, LG, SM, XS, outer]`` radii for ``radius_base``."""
    radius_lg = radius_base
    radius_sm = radius_base
    radius_xs = radius_base
    radius_outer = radius_base

    if 5 <= radius_base < 6:
        radius_lg = radius_base + 1
    elif 6 <= radius_base < 16:
        radius_lg = radius_base + 2
    elif radius_base >= 16:
        radius_lg = 16

    if 5 <= radius_base < 7:
        radius_sm = 4
    elif 7 <= radius_base < 8:
        radius_sm = 5
    elif 8 <= radius_base < 14:
        radius_sm = 6
    elif 14 <= radius_base < 16:
        radius_sm = 7
    elif radius_base >= 16:
        radius_sm = 8

    if 2 <= radius_base < 6:
        radius_xs = 1
    elif radius_base >= 6:
        radius_xs = 2

    if 4 < radius_base < 8:
        radius_outer = 4
    elif radius_base >= 8:
        radius_outer = 6

    return [radius_base, radius_lg, radius_sm, radius_xs, radius_outer]