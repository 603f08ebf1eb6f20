"""Ten-step colour palettes derived from a base colour."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Tuple, Union

from .color import Color, from_hsv_f, from_rgb_f, parse_color

_HUE_STEP = 2
_SATURATION_STEP = 0.16
_SATURATION_STEP2 = 0.05
_BRIGHTNESS_STEP1 = 0.05
_BRIGHTNESS_STEP2 = 0.15
_LIGHT_COLOR_COUNT = 5
_DARK_COLOR_COUNT = 4

_DEFAULT_DARK_BACKGROUND = "#141414"

_DARK_COLOR_MAP: Tuple[Tuple[int, int], ...] = (
    (7, 15),
    (6, 25),
    (5, 30),
    (5, 45),
    (5, 65),
    (5, 85),
    (4, 90),
    (3, 95),
    (2, 97),
    (1, 98),
)


class Preset(IntEnum):
    RED = 1
    VOLCANO = 2
    ORANGE = 3
    GOLD = 4
    YELLOW = 5
    LIME = 6
    GREEN = 7
    CYAN = 8
    BLUE = 9
    GEEKBLUE = 10
    PURPLE = 11
    MAGENTA = 12
    GREY = 13


_PRESET_HEX = {
    Preset.RED: "#F5222D",
    Preset.VOLCANO: "#FA541C",
    Preset.ORANGE: "#FA8C16",
    Preset.GOLD: "#FAAD14",
    Preset.YELLOW: "#FADB14",
    Preset.LIME: "#A0D911",
    Preset.GREEN: "#52C41A",
    Preset.CYAN: "#13C2C2",
    Preset.BLUE: "#1677FF",
    Preset.GEEKBLUE: "#2F54EB",
    Preset.PURPLE: "#722ED1",
    Preset.MAGENTA: "#EB2F96",
    Preset.GREY: "#666666",
}

_PRESET_BY_NAME = {f"Preset_{preset.name.capitalize()}": preset for preset in Preset}


def reverse_color(color: Color) -> Color:
    """Invert the RGB channels, keeping alpha."""
    return Color(255 - color.red, 255 - color.green, 255 - color.blue, color.alpha)


def preset_to_color(preset: Union[Preset, int, str]) -> Color:
    """Look up a preset by member, number or name such as ``Preset_Blue``."""
    if isinstance(preset, str):
        try:
            member = _PRESET_BY_NAME[preset]
        except KeyError:
            raise ValueError(f"unknown preset: {preset!r}") from None
    else:
        member = Preset(preset)
    return parse_color(_PRESET_HEX[member])


def _mix(rgb1: Color, rgb2: Color, amount: int) -> Color:
    p = amount / 100.0
    return from_rgb_f(
        (rgb2.red_f - rgb1.red_f) * p + rgb1.red_f,
        (rgb2.green_f - rgb1.green_f) * p + rgb1.green_f,
        (rgb2.blue_f - rgb1.blue_f) * p + rgb1.blue_f,
    )


def _hue(hsv: Tuple[int, float, float], i: int, light: bool) -> float:
    hue = hsv[0]
    if 60 <= hue <= 240:
        result = hue - _HUE_STEP * i if light else hue + _HUE_STEP * i
    else:
        result = hue + _HUE_STEP * i if light else hue - _HUE_STEP * i
    if result < 0:
        result += 360
    elif result >= 360:
        result -= 360
    return result


def _saturation(hsv: Tuple[int, float, float], i: int, light: bool) -> float:
    hue, saturation, _ = hsv
    if hue == 0 and saturation == 0:
        return saturation
    if light:
        result = saturation - _SATURATION_STEP * i
    elif i == _DARK_COLOR_COUNT:
        result = saturation + _SATURATION_STEP
    else:
        result = saturation + _SATURATION_STEP2 * i
    result = min(result, 1.0)
    if light and i == _LIGHT_COLOR_COUNT and result > 0.1:
        result = 0.1
    return max(result, 0.06)


def _value(hsv: Tuple[int, float, float], i: int, light: bool) -> float:
    value = hsv[2]
    result = value + _BRIGHTNESS_STEP1 * i if light else value - _BRIGHTNESS_STEP2 * i
    return min(result, 1.0)


def _step(hsv: Tuple[int, float, float], i: int, light: bool) -> Color:
    return from_hsv_f(
        _hue(hsv, i, light) / 360.0,
        _saturation(hsv, i, light),
        max(_value(hsv, i, light), 0.0),
    )


def generate(
    color: Union[Color, Preset, int],
    light: bool = True,
    background: Optional[Color] = None,
) -> List[Color]:
    """Return ten shades around ``color``; dark mode blends them into ``background``."""
    if isinstance(color, int):
        color = preset_to_color(color)
    hsv = color.hsv()
    patterns = [_step(hsv, i, True) for i in range(_LIGHT_COLOR_COUNT, 0, -1)]
    patterns.append(parse_color(color.name()))
    patterns.extend(_step(hsv, i, False) for i in range(1, _DARK_COLOR_COUNT + 1))

    if light:
        return patterns

    base = background if background is not None else parse_color(_DEFAULT_DARK_BACKGROUND)
    return [_mix(base, patterns[index], amount) for index, amount in _DARK_COLOR_MAP]