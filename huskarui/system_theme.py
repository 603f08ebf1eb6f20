"""Query the desktop's accent colour and light/dark preference."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Any, Callable, Optional

from .color import Color
from .signals import Signal

_DWM_KEY = r"Software\Microsoft\Windows\DWM"
_PERSONALIZE_KEY = r"Software\Microsoft\Windows\CurrentVersion\Themes\Personalize"
_DEFAULT_HIGHLIGHT = Color(0x30, 0x8C, 0xC6)


class ColorScheme(IntEnum):
    NONE = 0
    DARK = 1
    LIGHT = 2


def _registry_value(key_path: str, name: str) -> Optional[Any]:
    """Read a value from the current user's registry hive, or None if unavailable."""
    try:
        import winreg
    except ImportError:
        return None
    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key_path) as key:
            value, _ = winreg.QueryValueEx(key, name)
    except OSError:
        return None
    return value


def _default_theme_color() -> Color:
    value = _registry_value(_DWM_KEY, "ColorizationColor")
    if value is None:
        return _DEFAULT_HIGHLIGHT
    rgb = int(value) & 0xFFFFFF
    return Color((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


def _default_color_scheme() -> ColorScheme:
    value = _registry_value(_PERSONALIZE_KEY, "AppsUseLightTheme")
    if value is not None:
        return ColorScheme.LIGHT if value else ColorScheme.DARK
    gtk_theme = os.environ.get("GTK_THEME", "").lower()
    return ColorScheme.DARK if "dark" in gtk_theme else ColorScheme.LIGHT


class SystemThemeHelper:
    """Tracks the system theme colour and colour scheme, signalling on change.

    ``refresh`` is meant to be called periodically; the properties refresh
    the cached value before returning it.
    """

    def __init__(
        self,
        theme_color_provider: Optional[Callable[[], Color]] = None,
        color_scheme_provider: Optional[Callable[[], ColorScheme]] = None,
    ) -> None:
        self._theme_color_provider = theme_color_provider or _default_theme_color
        self._color_scheme_provider = color_scheme_provider or _default_color_scheme
        self.theme_color_changed = Signal()
        self.color_scheme_changed = Signal()
        self._theme_color = self.get_theme_color()
        self._color_scheme = self.get_color_scheme()

    def get_theme_color(self) -> Color:
        """Read the current theme colour without updating the cached value."""
        return self._theme_color_provider()

    def get_color_scheme(self) -> ColorScheme:
        """Read the current colour scheme without updating the cached value."""
        return ColorScheme(self._color_scheme_provider())

    @property
    def theme_color(self) -> Color:
        self._update_theme_color()
        return self._theme_color

    @property
    def color_scheme(self) -> ColorScheme:
        self._update_color_scheme()
        return self._color_scheme

    def refresh(self) -> None:
        """Re-read both values, emitting a signal for each that changed."""
        self._update_theme_color()
        self._update_color_scheme()

    def _update_theme_color(self) -> None:
        current = self.get_theme_color()
        if current != self._theme_color:
            self._theme_color = current
            self.theme_color_changed.emit(current)

    def _update_color_scheme(self) -> None:
        current = self.get_color_scheme()
        if current != self._color_scheme:
            self._color_scheme = current
            self.color_scheme_changed.emit(current)


def set_window_title_bar_mode(window: Any, is_dark: bool) -> bool:
    """Request a dark or light native title bar; reports False as it is not supported."""
    if window is None:
        raise TypeError("window must not be None")
    return False