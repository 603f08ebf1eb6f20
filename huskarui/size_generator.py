"""Font size and line height scales."""

from __future__ import annotations

import math
from typing import List


def generate_font_size(font_size_base: float) -> List[float]:
    """Return ten even font sizes on an exponential scale; index 1 is the base."""
    sizes: List[float] = []
    for index in range(10):
        i = index - 1
        base_size = font_size_base * math.exp(i / 5.0)
        int_size = math.floor(base_size) if i + 1 > 1 else math.ceil(base_size)
        sizes.append(float(math.floor(int_size / 2) * 2))
    sizes[1] = font_size_base
    return sizes


def generate_font_line_height(font_size_base: float) -> List[float]:
    """Return the line height ratio ``(size + 8) / size`` for each font size."""
    return [(size + 8) / size for size in generate_font_size(font_size_base)]