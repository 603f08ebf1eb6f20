import pytest

from huskarui.color import Color
from huskarui.system_theme import (
    ColorScheme,
    SystemThemeHelper,
    set_window_title_bar_mode,
)


class _Source:
    def __init__(self, color, scheme):
        self.color = color
        self.scheme = scheme


@pytest.fixture
def source():
    return _Source(Color(1, 2, 3), ColorScheme.LIGHT)


@pytest.fixture
def helper(source):
    return SystemThemeHelper(lambda: source.color, lambda: source.scheme)


def test_initial_values_come_from_providers(helper, source):
    assert helper.theme_color == source.color
    assert helper.color_scheme is ColorScheme.LIGHT


def test_refresh_emits_theme_color_change_once(helper, source):
    seen = []
    helper.theme_color_changed.connect(seen.append)
    source.color = Color(10, 20, 30)
    helper.refresh()
    helper.refresh()
    assert seen == [Color(10, 20, 30)]


def test_refresh_emits_color_scheme_change(helper, source):
    seen = []
    helper.color_scheme_changed.connect(seen.append)
    source.scheme = ColorScheme.DARK
    helper.refresh()
    assert seen == [ColorScheme.DARK]


def test_no_signal_without_change(helper):
    seen = []
    helper.theme_color_changed.connect(seen.append)
    helper.color_scheme_changed.connect(seen.append)
    helper.refresh()
    assert seen == []


def test_property_read_updates_cache(helper, source):
    seen = []
    helper.color_scheme_changed.connect(seen.append)
    source.scheme = ColorScheme.DARK
    assert helper.color_scheme is ColorScheme.DARK
    assert seen == [ColorScheme.DARK]


def test_get_methods_do_not_emit(helper, source):
    seen = []
    helper.theme_color_changed.connect(seen.append)
    source.color = Color(9, 9, 9)
    assert helper.get_theme_color() == Color(9, 9, 9)
    assert seen == []


def test_provider_integer_is_converted():
    helper = SystemThemeHelper(lambda: Color(0, 0, 0), lambda: 1)
    assert helper.get_color_scheme() is ColorScheme.DARK


def test_default_scheme_is_dark_or_light():
    helper = SystemThemeHelper()
    assert helper.get_color_scheme() in (ColorScheme.DARK, ColorScheme.LIGHT)


def test_title_bar_mode_unsupported():
    assert set_window_title_bar_mode(object(), True) is False


def test_title_bar_mode_requires_window():
    with pytest.raises(TypeError):
        set_window_title_bar_mode(None, False)