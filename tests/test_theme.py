import json

import pytest

from huskarui.color import Color
from huskarui.signals import Signal
from huskarui.system_theme import ColorScheme, SystemThemeHelper
from huskarui.theme import DarkMode, TextRenderType, Theme

BLUE = "#1677ff"


def _helper(state=None):
    state = state if state is not None else {"scheme": ColorScheme.LIGHT}
    return SystemThemeHelper(
        theme_color_provider=lambda: Color(0, 0, 0),
        color_scheme_provider=lambda: state["scheme"],
    )


@pytest.fixture
def index_path(tmp_path):
    index = {
        "colorTextBase": "#000000|#ffffff",
        "colorBgBase": "#ffffff|#000000",
        "%VariableTable%": {
            "colorPrimaryBase": f"$genColor({BLUE})",
            "fontSizeBase": "$genFontSize(14)",
            "radiusBase": "$genRadius(6)",
        },
        "primaryColorStyle": {"colorPrimary": "@colorPrimaryBase-6"},
        "primaryAnimation": {"durationFast": "100"},
        "componentStyle": {"HusButton": "HusButton.json"},
    }
    (tmp_path / "HusButton.json").write_text(
        json.dumps({"colorText": "@colorTextBase", "colorBg": "#ff0000", "radius": "@radiusBase-1"}),
        encoding="utf-8",
    )
    path = tmp_path / "Index.json"
    path.write_text(json.dumps(index), encoding="utf-8")
    return path


@pytest.fixture
def theme(index_path):
    t = Theme(index_path, system_helper=_helper(), font_families=["Arial"])
    t.reload_theme()
    return t


def test_primary_tokens(theme):
    primary = theme.primary
    assert primary["colorTextBase"] == "#000000"
    assert primary["colorPrimary"] == Color(0x16, 0x77, 0xFF)
    assert primary["fontSizeBase-2"] == 14
    assert primary["radiusBase-1"] == 6
    assert primary["durationFast"] == "100"


def test_component_tokens(theme):
    button = theme.component("HusButton")
    assert button["colorText"] == "#000000"
    assert button["colorBg"] == Color(255, 0, 0)
    assert button["radius"] == 6


def test_unknown_component_raises(theme):
    with pytest.raises(KeyError):
        theme.component("Nope")


def test_dark_mode_switch(theme):
    events = []
    theme.is_dark_changed.connect(lambda: events.append("dark"))
    theme.dark_mode_changed.connect(lambda: events.append("mode"))
    theme.dark_mode = DarkMode.DARK
    assert theme.is_dark is True
    assert events == ["dark", "mode"]
    assert theme.primary["colorTextBase"] == "#ffffff"
    assert theme.component("HusButton")["colorText"] == "#ffffff"
    assert "colorPrimaryBase-11" in theme.primary


def test_light_palette_has_ten_steps(theme):
    assert "colorPrimaryBase-10" in theme.primary
    assert "colorPrimaryBase-11" not in theme.primary


def test_system_mode_follows_helper(index_path):
    state = {"scheme": ColorScheme.LIGHT}
    helper = _helper(state)
    t = Theme(index_path, system_helper=helper)
    t.reload_theme()
    t.dark_mode = DarkMode.SYSTEM
    assert t.is_dark is False
    events = []
    t.is_dark_changed.connect(lambda: events.append(1))
    state["scheme"] = ColorScheme.DARK
    helper.refresh()
    assert events == [1]
    assert t.primary["colorTextBase"] == "#ffffff"


def test_install_component_token(theme):
    changed = []
    theme.component_changed.connect(changed.append)
    theme.install_component_token("HusButton", "colorBg", "#00ff00")
    assert theme.component("HusButton")["colorBg"] == Color(0, 255, 0)
    assert changed == ["HusButton"]
    theme.reload_theme()
    assert theme.component("HusButton")["colorBg"] == Color(0, 255, 0)


def test_install_component_token_unknown(theme):
    with pytest.raises(KeyError):
        theme.install_component_token("HusMenu", "x", "y")


def test_install_component_theme(theme, tmp_path):
    (tmp_path / "Other.json").write_text(json.dumps({"colorBg": "#0000ff"}), encoding="utf-8")
    theme.install_component_theme("HusButton", str(tmp_path / "Other.json"))
    assert theme.component("HusButton")["colorBg"] == Color(0, 0, 255)
    with pytest.raises(KeyError):
        theme.install_component_theme("HusMenu", str(tmp_path / "Other.json"))


def test_install_radius_base(theme):
    theme.install_theme_primary_radius_base(8)
    assert theme.primary["radiusBase-1"] == 8
    assert theme.component("HusButton")["radius"] == 8


def test_install_primary_color_base(theme):
    color = Color(0xF5, 0x22, 0x2D)
    theme.install_theme_primary_color_base(color)
    assert theme.primary["colorPrimaryBase-6"] == color
    assert theme.primary["colorPrimary"] == color


def test_install_font_size_and_family(theme):
    theme.install_theme_primary_font_size_base(16)
    assert theme.primary["fontSizeBase-2"] == 16
    theme.install_theme_primary_font_families_base("'Foo', Arial")
    assert theme.primary["fontFamilyBase"] == "Arial"


def test_install_animation_base(theme):
    theme.install_theme_primary_animation_base(1, 2, 3)
    primary = theme.primary
    assert (primary["durationFast"], primary["durationMid"], primary["durationSlow"]) == ("1", "2", "3")


def test_install_color_bases(theme):
    theme.install_theme_color_text_base("#111111 | #eeeeee")
    assert theme.primary["colorTextBase"] == "#111111 "
    theme.install_theme_color_bg_base("#fafafa|#101010")
    assert theme.primary["colorBgBase"] == "#fafafa"


def test_bad_light_dark_format(theme):
    with pytest.raises(ValueError):
        theme.install_theme_color_text_base("#000000")


def test_install_before_load():
    t = Theme(system_helper=_helper())
    with pytest.raises(RuntimeError):
        t.install_index_token("x", "1")
    with pytest.raises(RuntimeError):
        t.reload_theme()


def test_missing_index_file(tmp_path):
    t = Theme(system_helper=_helper())
    with pytest.raises(FileNotFoundError):
        t.install_index_theme(tmp_path / "missing.json")


def test_bad_token_is_skipped(theme):
    theme.install_index_token("broken", "$nope(1)")
    primary = theme.primary
    assert "broken" not in primary
    assert primary["radiusBase-1"] == 6


def test_custom_component_theme(theme, tmp_path):
    class Custom:
        def __init__(self):
            self.component_changed = Signal()

    (tmp_path / "Custom.json").write_text(json.dumps({"radius": "@radiusBase-1"}), encoding="utf-8")
    custom = Custom()
    seen = []
    custom.component_changed.connect(seen.append)
    tokens = {}
    theme.register_custom_component_theme(custom, "MyWidget", tokens, tmp_path / "Custom.json")
    theme.reload_theme()
    assert tokens == {"radius": 6}
    assert seen == ["MyWidget"]


def test_text_render_type_and_animation(theme):
    events = []
    theme.text_render_type_changed.connect(lambda: events.append("render"))
    theme.animation_enabled_changed.connect(lambda: events.append("anim"))
    assert theme.animation_enabled is True
    theme.text_render_type = TextRenderType.NATIVE_RENDERING
    theme.text_render_type = TextRenderType.NATIVE_RENDERING
    theme.animation_enabled = False
    assert theme.text_render_type is TextRenderType.NATIVE_RENDERING
    assert events == ["render", "anim"]