# huskarui

A design-token theme engine. It starts from a few base values: a primary
colour, a font size and a corner radius. From these it derives full palettes
and scales. It also reads theme files written in a small expression language
(`@reference`, `#colour`, `$function(args)`) and turns them into token maps
for each component, in light or dark mode.

Python 3.10 or later. There are no third-party dependencies.

## Colours

`huskarui.color.Color` is a frozen RGBA value with 8-bit channels. It has the
following methods and properties:

- `name()` returns `#rrggbb`.
- `hsv()` returns a tuple of whole-degree hue (`-1` if achromatic), saturation and value.
- `darker(factor)` and `lighter(factor)` change the colour's value.
- `with_alpha_f(alpha)` returns the colour with a new alpha, given as a fraction.
- The channel fractions are available as `red_f`, `green_f`, `blue_f` and `alpha_f`.

Colours are built with these functions:

- `parse_color(text)` accepts `#rgb`, `#rrggbb`, `#aarrggbb`, 12- and 16-bit hex, and a small set of colour names. It raises `ValueError` on anything else.
- `from_rgb_f(...)` builds a colour from RGB fractions.
- `from_hsv_f(...)` builds a colour from HSV fractions.

## Palettes

```python
from huskarui.color import parse_color
from huskarui.color_generator import Preset, generate, preset_to_color, reverse_color

blue = preset_to_color(Preset.BLUE)          # also "Preset_Blue" or 9
light = generate(blue, True, None)           # ten shades, the base colour sixth
dark = generate(blue, False, None)           # ten shades blended onto #141414
print([c.name() for c in light])

red = parse_color("#f5222d")
inverse = reverse_color(red)
```

In dark mode the shades are blended into `background` when you give one.

## Sizes and radii

```python
from huskarui.size_generator import generate_font_size, generate_font_line_height
from huskarui.radius_generator import generate_radius

generate_font_size(14)         # ten even font sizes, index 1 is the base
generate_font_line_height(14)  # (size + 8) / size for each size
generate_radius(6)             # [base, LG, SM, XS, outer]
```

## Theme functions

`huskarui.theme_functions` holds the functions that theme expressions call:

- `gen_color` and `gen_color_string`
- `gen_font_size`, `gen_font_line_height` and `gen_radius`
- `gen_font_family(family_base, available)`, which picks the first family in a comma-separated list that is in `available`. Otherwise it returns the first available family.
- `darker`, `lighter`, `alpha` and `on_background` (alpha compositing)
- `multiply`

## Expressions

`huskarui.theme_expr.ExpressionEvaluator` resolves token expressions against
a table of index tokens. The expression forms are:

- `@name` copies another token.
- `#...` is a colour literal. `#Preset_Name` names a preset.
- `$func(args)` calls a function. The names are listed in `TokenFunction`: `genColor`, `genFontFamily`, `genFontSize`, `genFontLineHeight`, `genRadius`, `darker`, `lighter`, `alpha`, `onBackground` and `multiply`.
- Anything else is kept as a string.

Generator functions write numbered tokens `name-1`, `name-2`, and so on.
Errors raise `ValueError`.

## Themes

`huskarui.theme.Theme` reads an index JSON file. That file holds:

- `colorTextBase` and `colorBgBase`, each written as `light|dark`.
- The sections `%VariableTable%`, `primaryColorStyle`, `primaryFontStyle`, `primaryRadius` and `primaryAnimation`.
- A `componentStyle` map from component names to theme JSON files. Relative paths are taken from the index file's directory.

```python
from huskarui.color import parse_color
from huskarui.theme import DarkMode, Theme

theme = Theme(font_families=["Arial", "Segoe UI"])
theme.install_index_theme("theme/Index.json")
button = theme.component("HusButton")
primary = theme.primary

theme.dark_mode = DarkMode.DARK              # re-evaluates everything
theme.install_theme_primary_color_base(parse_color("#f5222d"))
theme.install_component_token("HusButton", "colorText", "@colorPrimary")
```

The following methods replace base values and recompute the tokens:

- `install_theme_color_text_base`
- `install_theme_color_bg_base`
- `install_theme_primary_font_size_base`
- `install_theme_primary_font_families_base`
- `install_theme_primary_radius_base`
- `install_theme_primary_animation_base`
- `install_index_token`
- `install_component_theme`

`register_custom_component_theme` adds your own component files, which are
resolved into a mapping you supply.

Index tokens that fail to evaluate are logged as warnings and skipped. With
`DarkMode.SYSTEM` the theme follows the `SystemThemeHelper` it was given.

Changes are announced through `huskarui.signals.Signal` objects, for example
`is_dark_changed`, `primary_changed` and `component_changed`. A signal calls
every connected callable on `emit`.

## Other utilities

- `huskarui.hasher.AsyncHasher` computes an upper-case hex digest with a chosen `Algorithm`. The input is whichever of `source_text`, `source_data`, `source_object` or `source` (a local path, `file:` URL or other URL) was set last. In asynchronous mode the work runs on a thread and signals are emitted from that thread. `wait(timeout)` blocks until the job is done. `cancel()` drops the result.
- `huskarui.system_theme.SystemThemeHelper` reports the accent colour and the `ColorScheme`. `refresh()` emits a signal when either changes. It reads the registry on Windows and `GTK_THEME` elsewhere, and you can pass your own providers.
- `huskarui.api` has `read_file_to_string` and `get_week_number` (ISO week).

## What it does not do

The package has no widgets, windows or rendering. It computes theme values
only. It does not enumerate installed fonts: pass the list yourself.
`set_window_title_bar_mode` always returns `False`. There is no clipboard
access.