"""Theme state built from an index JSON file and per-component JSON files."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterable, List, MutableMapping, Optional, Union

from .color import Color
from .signals import Signal
from .system_theme import ColorScheme, SystemThemeHelper
from .theme_expr import ExpressionEvaluator

_log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

COMPONENT_NAMES = (
    "HusButton",
    "HusIconText",
    "HusCopyableText",
    "HusCaptionButton",
    "HusTour",
    "HusMenu",
    "HusDivider",
    "HusSwitch",
    "HusScrollBar",
    "HusSlider",
    "HusTabView",
    "HusToolTip",
    "HusSelect",
    "HusInput",
    "HusRate",
    "HusRadio",
    "HusCheckBox",
    "HusTimePicker",
    "HusDrawer",
    "HusCollapse",
    "HusCard",
    "HusPagination",
    "HusPopup",
    "HusTimeline",
    "HusTag",
    "HusTableView",
    "HusMessage",
    "HusAutoComplete",
    "HusDatePicker",
    "HusProgress",
    "HusCarousel",
    "HusBreadcrumb",
)

_INDEX_SECTIONS = (
    "%VariableTable%",
    "primaryColorStyle",
    "primaryFontStyle",
    "primaryRadius",
    "primaryAnimation",
)


class DarkMode(IntEnum):
    LIGHT = 0
    DARK = 1
    SYSTEM = 2


class TextRenderType(IntEnum):
    QT_RENDERING = 0
    NATIVE_RENDERING = 1
    CURVE_RENDERING = 2


@dataclass
class _ComponentTheme:
    path: str
    token_map: MutableMapping[str, Any]
    install_tokens: Dict[str, str] = field(default_factory=dict)


@dataclass
class _ThemeData:
    theme_object: Any
    components: Dict[str, _ComponentTheme] = field(default_factory=dict)


def _simplified(text: str) -> str:
    return " ".join(text.split())


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_object(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}


class Theme:
    """Resolved theme tokens for the index table and every known component.

    Relative component theme paths in the index file are resolved against
    the directory of the index file.
    """

    def __init__(
        self,
        index_path: Optional[PathLike] = None,
        system_helper: Optional[SystemThemeHelper] = None,
        font_families: Optional[Iterable[str]] = None,
    ) -> None:
        self.is_dark_changed = Signal()
        self.dark_mode_changed = Signal()
        self.text_render_type_changed = Signal()
        self.animation_enabled_changed = Signal()
        self.primary_changed = Signal()
        self.component_changed = Signal()

        self._dark_mode = DarkMode.LIGHT
        self._text_render_type = TextRenderType.QT_RENDERING
        self._animation_enabled = True
        self._index_path: Optional[str] = os.fspath(index_path) if index_path is not None else None
        self._index: Optional[Dict[str, Any]] = None
        self._tokens: Dict[str, Any] = {}
        self._primary: Dict[str, Any] = {}
        self._components: Dict[str, Dict[str, Any]] = {name: {} for name in COMPONENT_NAMES}
        self._default_theme: Dict[int, _ThemeData] = {}
        self._custom_theme: Dict[int, _ThemeData] = {}
        self._font_families: Optional[List[str]] = (
            list(font_families) if font_families is not None else None
        )
        self._helper = system_helper if system_helper is not None else SystemThemeHelper()
        self._helper.color_scheme_changed.connect(self._on_system_scheme_changed)

    # Properties ---------------------------------------------------------

    @property
    def is_dark(self) -> bool:
        if self._dark_mode is DarkMode.SYSTEM:
            return self._helper.get_color_scheme() == ColorScheme.DARK
        return self._dark_mode is DarkMode.DARK

    @property
    def dark_mode(self) -> DarkMode:
        return self._dark_mode

    @dark_mode.setter
    def dark_mode(self, mode: DarkMode) -> None:
        mode = DarkMode(mode)
        if mode == self._dark_mode:
            return
        old_is_dark = self.is_dark
        self._dark_mode = mode
        if old_is_dark != self.is_dark:
            if self._index is not None:
                self._reload_all()
            self.is_dark_changed.emit()
        self.dark_mode_changed.emit()

    @property
    def text_render_type(self) -> TextRenderType:
        return self._text_render_type

    @text_render_type.setter
    def text_render_type(self, render_type: TextRenderType) -> None:
        render_type = TextRenderType(render_type)
        if render_type != self._text_render_type:
            self._text_render_type = render_type
            self.text_render_type_changed.emit()

    @property
    def animation_enabled(self) -> bool:
        return self._animation_enabled

    @animation_enabled.setter
    def animation_enabled(self, enabled: bool) -> None:
        if enabled != self._animation_enabled:
            self._animation_enabled = enabled
            self.animation_enabled_changed.emit()

    @property
    def primary(self) -> Dict[str, Any]:
        """All tokens resolved from the index file."""
        return dict(self._primary)

    def component(self, name: str) -> Dict[str, Any]:
        """Return the resolved tokens of a built-in component."""
        try:
            return dict(self._components[name])
        except KeyError:
            raise KeyError(f"unknown component: {name!r}") from None

    # Registration and loading ------------------------------------------

    def register_custom_component_theme(
        self,
        theme_object: Any,
        component: str,
        theme_map: MutableMapping[str, Any],
        theme_path: PathLike,
    ) -> None:
        """Register a component theme file whose tokens are written into ``theme_map``."""
        if theme_object is None or theme_map is None:
            return
        self._register(theme_object, component, theme_map, os.fspath(theme_path), self._custom_theme)

    def reload_theme(self) -> None:
        """Read the index file again and recompute every token."""
        if self._index_path is None:
            raise RuntimeError("no index theme path installed")
        with open(self._index_path, "r", encoding="utf-8") as handle:
            index = json.load(handle)
        if not isinstance(index, dict):
            raise ValueError(f"index theme {self._index_path!r} is not a JSON object")
        self._index = index
        self._reload_all()

    def install_theme_color_text_base(self, light_and_dark: str) -> None:
        """Set ``colorTextBase`` as ``light|dark``."""
        self._require_index()["colorTextBase"] = _simplified(light_and_dark)
        self._reload_all()

    def install_theme_color_bg_base(self, light_and_dark: str) -> None:
        """Set ``colorBgBase`` as ``light|dark``."""
        self._require_index()["colorBgBase"] = _simplified(light_and_dark)
        self._reload_all()

    def install_theme_primary_color_base(self, color_base: Color) -> None:
        self.install_index_token("colorPrimaryBase", f"$genColor({color_base.name()})")

    def install_theme_primary_font_size_base(self, font_size_base: int) -> None:
        self.install_index_token("fontSizeBase", f"$genFontSize({int(font_size_base)})")

    def install_theme_primary_font_families_base(self, families_base: str) -> None:
        self.install_index_token("fontFamilyBase", f"$genFontFamily({families_base})")

    def install_theme_primary_radius_base(self, radius_base: int) -> None:
        self.install_index_token("radiusBase", f"$genRadius({int(radius_base)})")

    def install_theme_primary_animation_base(
        self, duration_fast: int, duration_mid: int, duration_slow: int
    ) -> None:
        """Set the animation durations in milliseconds."""
        index = self._require_index()
        animation = _as_object(index.get("primaryAnimation"))
        animation["durationFast"] = str(int(duration_fast))
        animation["durationMid"] = str(int(duration_mid))
        animation["durationSlow"] = str(int(duration_slow))
        index["primaryAnimation"] = animation
        self._reload_all()

    def install_index_theme(self, theme_path: PathLike) -> None:
        self._index_path = os.fspath(theme_path)
        self.reload_theme()

    def install_index_token(self, token: str, value: str) -> None:
        """Set a variable of the index table; generator functions are allowed."""
        index = self._require_index()
        table = _as_object(index.get("%VariableTable%"))
        table[token] = _simplified(value)
        index["%VariableTable%"] = table
        self._reload_all()

    def install_component_theme(self, component: str, theme_path: PathLike) -> None:
        """Replace the theme file of a component listed in the index file."""
        index = self._require_index()
        style = _as_object(index.get("componentStyle"))
        if component not in style:
            raise KeyError(f"component {component!r} not found")
        style[component] = os.fspath(theme_path)
        index["componentStyle"] = style
        self._register_default(component, style[component])
        self._reload_components(self._default_theme)

    def install_component_token(self, component: str, token: str, value: str) -> None:
        """Add or override one token of a component and reload that component."""
        data = self._default_theme.get(id(self))
        if data is None or component not in data.components:
            raise KeyError(f"component {component!r} not found")
        entry = data.components[component]
        entry.install_tokens[token] = value
        self._reload_component_file(data.theme_object, component, entry)

    # Internals ----------------------------------------------------------

    def _require_index(self) -> Dict[str, Any]:
        if self._index is None:
            raise RuntimeError("no index theme loaded")
        return self._index

    def _evaluator(self) -> ExpressionEvaluator:
        return ExpressionEvaluator(self._tokens, self.is_dark, self._font_families)

    def _reload_all(self) -> None:
        self._reload_index()
        self._reload_components(self._default_theme)
        self._reload_components(self._custom_theme)

    def _on_system_scheme_changed(self, *_args: Any) -> None:
        if self._dark_mode is DarkMode.SYSTEM:
            if self._index is not None:
                self._reload_all()
            self.is_dark_changed.emit()

    def _split_light_dark(self, key: str) -> str:
        raw = _as_text(self._require_index().get(key))
        parts = raw.split("|")
        if len(parts) != 2:
            raise ValueError(f"{key}({raw}) must be in light:color|dark:color format")
        return parts[1] if self.is_dark else parts[0]

    def _reload_index(self) -> None:
        index = self._require_index()
        text_base = self._split_light_dark("colorTextBase")
        bg_base = self._split_light_dark("colorBgBase")
        self._tokens.clear()
        self._primary.clear()
        self._tokens["colorTextBase"] = text_base
        self._tokens["colorBgBase"] = bg_base

        evaluator = self._evaluator()
        for section in _INDEX_SECTIONS:
            entries = _as_object(index.get(section))
            for name in sorted(entries):
                expr = _simplified(_as_text(entries[name]))
                try:
                    evaluator.parse_index_expr(name, expr)
                except ValueError as exc:
                    _log.warning("index token %s: %s", name, exc)

        self._primary.update(self._tokens)
        self.primary_changed.emit()

        style = _as_object(index.get("componentStyle"))
        for component in sorted(style):
            self._register_default(component, _as_text(style[component]))

    def _resolve_component_path(self, path: str) -> str:
        if os.path.isabs(path) or self._index_path is None:
            return path
        return os.path.join(os.path.dirname(os.path.abspath(self._index_path)), path)

    def _register_default(self, component: str, path: str) -> None:
        if component in self._components:
            self._register(
                self,
                component,
                self._components[component],
                self._resolve_component_path(path),
                self._default_theme,
            )

    @staticmethod
    def _register(
        theme_object: Any,
        component: str,
        theme_map: MutableMapping[str, Any],
        path: str,
        data_map: Dict[int, _ThemeData],
    ) -> None:
        data = data_map.setdefault(id(theme_object), _ThemeData(theme_object))
        data.theme_object = theme_object
        entry = data.components.get(component)
        if entry is None:
            data.components[component] = _ComponentTheme(path, theme_map)
        else:
            entry.path = path
            entry.token_map = theme_map

    def _reload_components(self, data_map: Dict[int, _ThemeData]) -> None:
        for data in list(data_map.values()):
            for name, entry in list(data.components.items()):
                self._reload_component_file(data.theme_object, name, entry)

    def _reload_component_file(self, theme_object: Any, component: str, entry: _ComponentTheme) -> None:
        try:
            with open(entry.path, "r", encoding="utf-8") as handle:
                tokens = json.load(handle)
        except (OSError, ValueError) as exc:
            _log.warning("cannot load theme %s: %s", entry.path, exc)
            return
        if not isinstance(tokens, dict):
            _log.warning("theme %s is not a JSON object", entry.path)
            return

        evaluator = self._evaluator()
        pairs = [(name, _as_text(tokens[name])) for name in sorted(tokens)]
        pairs += [(name, entry.install_tokens[name]) for name in sorted(entry.install_tokens)]
        for name, expr in pairs:
            try:
                evaluator.parse_component_expr(entry.token_map, name, expr)
            except ValueError as exc:
                _log.warning("component %s token %s: %s", component, name, exc)

        if theme_object is self:
            self.component_changed.emit(component)
        else:
            changed = getattr(theme_object, "component_changed", None)
            if isinstance(changed, Signal):
                changed.emit(component)