"""Evaluation of theme token expressions such as ``@ref``, ``#color`` and ``$func(args)``."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Iterable, List, MutableMapping, Optional

from .color import Color, parse_color
from .color_generator import preset_to_color
from .theme_functions import (
    alpha,
    darker,
    gen_color,
    gen_font_family,
    gen_font_line_height,
    gen_font_size,
    gen_radius,
    lighter,
    multiply,
    on_background,
)

_FUNC_RE = re.compile(r"\$([^)]+)\(")
_ARGS_RE = re.compile(r"\(([^)]+)\)")


class TokenFunction(Enum):
    """Functions callable from a ``$name(args)`` expression."""

    GEN_COLOR = "genColor"
    GEN_FONT_FAMILY = "genFontFamily"
    GEN_FONT_SIZE = "genFontSize"
    GEN_FONT_LINE_HEIGHT = "genFontLineHeight"
    GEN_RADIUS = "genRadius"
    DARKER = "darker"
    LIGHTER = "lighter"
    ALPHA = "alpha"
    ON_BACKGROUND = "onBackground"
    MULTIPLY = "multiply"


def _to_color(value: Any) -> Optional[Color]:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return parse_color(value)
        except ValueError:
            return None
    return None


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, (bool, int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _store_series(out: MutableMapping[str, Any], token_name: str, values: Iterable[Any]) -> None:
    for number, value in enumerate(values, start=1):
        out[f"{token_name}-{number}"] = value


class ExpressionEvaluator:
    """Resolves token expressions against a table of index tokens.

    ``tokens`` is the index token table that ``@name`` references read from
    and that :meth:`parse_index_expr` writes to. ``font_families`` lists the
    installed font families; when it is None any requested family is taken
    as available.
    """

    def __init__(
        self,
        tokens: Optional[Dict[str, Any]] = None,
        is_dark: bool = False,
        font_families: Optional[Iterable[str]] = None,
    ) -> None:
        self.tokens: Dict[str, Any] = tokens if tokens is not None else {}
        self.is_dark = is_dark
        self.font_families: Optional[List[str]] = (
            list(font_families) if font_families is not None else None
        )

    def color_from_table(self, token_name: str) -> Color:
        """Resolve ``@ref``, ``#Preset_Name`` or a colour literal to a colour."""
        name = token_name.strip()
        if name.startswith("@"):
            ref = name[1:]
            if ref not in self.tokens:
                raise ValueError(f"index token {ref!r} not found")
            color = _to_color(self.tokens[ref])
            if color is None:
                raise ValueError(f"token {token_name!r} is not a colour")
            return color
        if name.startswith("#Preset_"):
            return preset_to_color(name[1:])
        return parse_color(name)

    def number_from_table(self, token_name: str) -> float:
        """Resolve ``@ref`` or a numeric literal to a number."""
        name = token_name.strip()
        if name.startswith("@"):
            ref = name[1:]
            if ref not in self.tokens:
                raise ValueError(f"index token {ref!r} not found")
            number = _to_number(self.tokens[ref])
            if number is None:
                raise ValueError(f"token {ref!r} is not a number")
            return number
        number = _to_number(name)
        if number is None:
            raise ValueError(f"token {token_name!r} is not a number")
        return number

    def _font_family(self, args: str) -> str:
        requested = [f.replace("'", "").replace('"', "").strip() for f in args.split(",")]
        available = self.font_families if self.font_families is not None else requested
        return gen_font_family(args, available)

    def evaluate_function(self, out: MutableMapping[str, Any], token_name: str, expr: str) -> None:
        """Evaluate a ``$func(args)`` expression, writing its results into ``out``."""
        func_match = _FUNC_RE.search(expr)
        if func_match is None:
            raise ValueError(f"unknown expression: {expr!r}")
        args_match = _ARGS_RE.search(expr)
        args = args_match.group(1) if args_match else ""
        name = func_match.group(1)
        try:
            func = TokenFunction(name)
        except ValueError:
            raise ValueError(f"unknown function name: {name!r}") from None

        if func is TokenFunction.GEN_COLOR:
            color = self.color_from_table(args)
            background = _to_color(self.tokens.get("colorBgBase"))
            colors = gen_color(color, not self.is_dark, background)
            if self.is_dark:
                colors.append(colors[0])
                colors.reverse()
            _store_series(out, token_name, colors)
        elif func is TokenFunction.GEN_FONT_FAMILY:
            out["fontFamilyBase"] = self._font_family(args.strip())
        elif func is TokenFunction.GEN_FONT_SIZE:
            _store_series(out, token_name, gen_font_size(self._float_arg(name, args)))
        elif func is TokenFunction.GEN_FONT_LINE_HEIGHT:
            _store_series(out, token_name, gen_font_line_height(self._float_arg(name, args)))
        elif func is TokenFunction.GEN_RADIUS:
            try:
                base = int(args.strip())
            except ValueError:
                raise ValueError(f"{name}() invalid size: {args!r}") from None
            _store_series(out, token_name, gen_radius(base))
        elif func in (TokenFunction.DARKER, TokenFunction.LIGHTER, TokenFunction.ALPHA):
            arg_list = args.split(",")
            if len(arg_list) not in (1, 2):
                raise ValueError(f"{name}() only accepts 1/2 parameters: {args!r}")
            color = self.color_from_table(arg_list[0])
            operation = {
                TokenFunction.DARKER: darker,
                TokenFunction.LIGHTER: lighter,
            }.get(func)
            if len(arg_list) == 1:
                out[token_name] = operation(color) if operation else alpha(color)
            else:
                number = self.number_from_table(arg_list[1])
                if operation:
                    out[token_name] = operation(color, int(number))
                else:
                    out[token_name] = alpha(color, number)
        elif func is TokenFunction.ON_BACKGROUND:
            arg_list = args.split(",")
            if len(arg_list) != 2:
                raise ValueError(f"{name}() only accepts 2 parameters: {args!r}")
            out[token_name] = on_background(
                self.color_from_table(arg_list[0].strip()),
                self.color_from_table(arg_list[1].strip()),
            )
        else:
            arg_list = args.split(",")
            if len(arg_list) != 2:
                raise ValueError(f"{name}() only accepts 2 parameters: {args!r}")
            out[token_name] = multiply(
                self.number_from_table(arg_list[0]),
                self.number_from_table(arg_list[1]),
            )

    @staticmethod
    def _float_arg(name: str, args: str) -> float:
        try:
            return float(args)
        except ValueError:
            raise ValueError(f"{name}() invalid size: {args!r}") from None

    def _resolve(self, out: MutableMapping[str, Any], token_name: str, expr: str) -> None:
        if expr.startswith("@"):
            ref = expr[1:]
            if ref not in self.tokens:
                raise ValueError(f"token {token_name!r}: reference {ref!r} not found")
            out[token_name] = self.tokens[ref]
        elif expr.startswith("$"):
            self.evaluate_function(out, token_name, expr)
        elif expr.startswith("#"):
            out[token_name] = self.color_from_table(expr)
        else:
            out[token_name] = expr

    def parse_index_expr(self, token_name: str, expr: str) -> None:
        """Evaluate ``expr`` and store the result in the index token table."""
        self._resolve(self.tokens, token_name, expr)

    def parse_component_expr(self, out: MutableMapping[str, Any], token_name: str, expr: str) -> None:
        """Evaluate ``expr`` against the index tokens and store the result in ``out``."""
        self._resolve(out, token_name, expr)