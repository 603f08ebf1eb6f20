"""An 8-bit RGBA colour value with HSV helpers and string parsing."""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from typing import Optional, Tuple

_NAMED_COLORS = {
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "lime": (0, 255, 0, 255),
    "green": (0, 128, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    "cyan": (0, 255, 255, 255),
    "aqua": (0, 255, 255, 255),
    "magenta": (255, 0, 255, 255),
    "fuchsia": (255, 0, 255, 255),
    "gray": (128, 128, 128, 255),
    "grey": (128, 128, 128, 255),
    "silver": (192, 192, 192, 255),
    "maroon": (128, 0, 0, 255),
    "olive": (128, 128, 0, 255),
    "navy": (0, 0, 128, 255),
    "purple": (128, 0, 128, 255),
    "teal": (0, 128, 128, 255),
    "orange": (255, 165, 0, 255),
    "transparent": (0, 0, 0, 0),
}

_HEX_DIGITS = set(string.hexdigits)


def _to_byte(fraction: float) -> int:
    return int(fraction * 255 + 0.5)


def _check_unit(label: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{label} must be within [0, 1], got {value}")


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for label, value in (
            ("red", self.red),
            ("green", self.green),
            ("blue", self.blue),
            ("alpha", self.alpha),
        ):
            if not 0 <= value <= 255:
                raise ValueError(f"{label} must be within [0, 255], got {value}")

    @property
    def red_f(self) -> float:
        return self.red / 255

    @property
    def green_f(self) -> float:
        return self.green / 255

    @property
    def blue_f(self) -> float:
        return self.blue / 255

    @property
    def alpha_f(self) -> float:
        return self.alpha / 255

    def name(self) -> str:
        """Return the ``#rrggbb`` form, without alpha."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def _hsv_exact(self) -> Tuple[Optional[float], float, float]:
        r, g, b = self.red_f, self.green_f, self.blue_f
        high = max(r, g, b)
        low = min(r, g, b)
        delta = high - low
        if delta == 0:
            return None, 0.0, high
        saturation = delta / high
        if r == high:
            hue = (g - b) / delta
        elif g == high:
            hue = 2 + (b - r) / delta
        else:
            hue = 4 + (r - g) / delta
        hue *= 60
        if hue < 0:
            hue += 360
        return hue, saturation, high

    def hsv(self) -> Tuple[int, float, float]:
        """Return (hue in whole degrees or -1 if achromatic, saturation, value)."""
        hue, saturation, value = self._hsv_exact()
        whole_hue = -1 if hue is None else int(hue * 100 + 0.5) // 100
        return whole_hue, saturation, value

    def darker(self, factor: int = 200) -> "Color":
        """Divide the HSV value by ``factor / 100``."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.lighter(10000 // factor)
        hue, saturation, value = self._hsv_exact()
        return _from_hsv(hue, saturation, value * 100 / factor, self.alpha)

    def lighter(self, factor: int = 150) -> "Color":
        """Multiply the HSV value by ``factor / 100``, desaturating on overflow."""
        if factor <= 0:
            return self
        if factor < 100:
            return self.darker(10000 // factor)
        hue, saturation, value = self._hsv_exact()
        value = value * factor / 100
        if value > 1.0:
            saturation = max(saturation - (value - 1.0), 0.0)
            value = 1.0
        return _from_hsv(hue, saturation, value, self.alpha)

    def with_alpha_f(self, alpha: float) -> "Color":
        """Return a copy with alpha given as a fraction in [0, 1]."""
        _check_unit("alpha", alpha)
        return replace(self, alpha=_to_byte(alpha))


def _from_hsv(hue: Optional[float], saturation: float, value: float, alpha: int) -> Color:
    if hue is None or saturation == 0:
        channel = _to_byte(value)
        return Color(channel, channel, channel, alpha)
    sector = hue / 60
    index = int(sector)
    fraction = sector - index
    p = value * (1 - saturation)
    q = value * (1 - saturation * fraction)
    t = value * (1 - saturation * (1 - fraction))
    r, g, b = {
        0: (value, t, p),
        1: (q, value, p),
        2: (p, value, t),
        3: (p, q, value),
        4: (t, p, value),
        5: (value, p, q),
    }[index % 6]
    return Color(_to_byte(r), _to_byte(g), _to_byte(b), alpha)


def from_rgb_f(red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
    """Build a colour from fractional channels in [0, 1]."""
    for label, value in (("red", red), ("green", green), ("blue", blue), ("alpha", alpha)):
        _check_unit(label, value)
    return Color(_to_byte(red), _to_byte(green), _to_byte(blue), _to_byte(alpha))


def from_hsv_f(hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
    """Build a colour from fractional HSV; a hue of -1 means achromatic."""
    if hue != -1:
        _check_unit("hue", hue)
    _check_unit("saturation", saturation)
    _check_unit("value", value)
    _check_unit("alpha", alpha)
    return _from_hsv(None if hue == -1 else hue * 360, saturation, value, _to_byte(alpha))


def _parse_hex(digits: str) -> Color:
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex colour: #{digits}")
    length = len(digits)
    if length == 3:
        r, g, b = (int(ch, 16) * 17 for ch in digits)
        return Color(r, g, b)
    if length == 6:
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    if length == 8:
        a, r, g, b = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
        return Color(r, g, b, a)
    if length in (9, 12):
        width = length // 3
        top = (1 << (4 * width)) - 1
        r, g, b = (int(int(digits[i : i + width], 16) * 255 / top + 0.5) for i in range(0, length, width))
        return Color(r, g, b)
    raise ValueError(f"invalid hex colour length: #{digits}")


def parse_color(text: str) -> Color:
    """Parse ``#rgb``, ``#rrggbb``, ``#aarrggbb``, 12/16-bit hex or a colour name."""
    if text.startswith("#"):
        return _parse_hex(text[1:])
    key = text.replace(" ", "").lower()
    try:
        return Color(*_NAMED_COLORS[key])
    except KeyError:
        raise ValueError(f"unknown colour: {text!r}") from None