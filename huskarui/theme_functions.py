"""Functions available to theme token expressions."""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from .color import Color, from_rgb_f
from .color_generator import Preset, generate
from .radius_generator import generate_radius
from .size_generator import generate_font_line_height, generate_font_size


def gen_color(
    color: Union[Color, Preset, int],
    light: bool = True,
    background: Optional[Color] = None,
) -> List[Color]:
    """Generate a ten-step palette from a colour or preset number."""
    return generate(color, light, background)


def gen_color_string(
    color: Union[Color, Preset, int],
    light: bool = True,
    background: Optional[Color] = None,
) -> List[str]:
    """Generate a palette as ``#rrggbb`` strings."""
    return [shade.name() for shade in generate(color, light, background)]


def gen_font_size(font_size_base: float) -> List[float]:
    return generate_font_size(font_size_base)


def gen_font_line_height(font_size_base: float) -> List[float]:
    return generate_font_line_height(font_size_base)


def gen_radius(radius_base: int) -> List[int]:
    return generate_radius(radius_base)


def gen_font_family(family_base: str, available: Iterable[str]) -> str:
    """Pick the first family from a comma list that is available, else the first available."""
    families = list(available)
    for family in family_base.split(","):
        normalized = family.replace("'", "").replace('"', "").strip()
        if normalized in families:
            return normalized
    if not families:
        raise ValueError("no font families available")
    return families[0]


def darker(color: Color, factor: int = 140) -> Color:
    return color.darker(factor)


def lighter(color: Color, factor: int = 140) -> Color:
    return color.lighter(factor)


def alpha(color: Color, alpha: float = 0.5) -> Color:
    """Return ``color`` with its alpha set to the fraction ``alpha``."""
    return Color(color.red, color.green, color.blue, int(alpha * 255))


def on_background(color: Color, background: Color) -> Color:
    """Composite ``color`` over ``background``."""
    fg_a = color.alpha_f
    bg_a = background.alpha_f
    out_a = fg_a + bg_a * (1 - fg_a)

    def channel(fg: float, bg: float) -> float:
        return min(max(fg * fg_a + bg * bg_a * (1 - fg_a) / out_a, 0.0), 1.0)

    return from_rgb_f(
        channel(color.red_f, background.red_f),
        channel(color.green_f, background.green_f),
        channel(color.blue_f, background.blue_f),
        min(out_a, 1.0),
    )


def multiply(num1: float, num2: float) -> float:
    return num1 * num2