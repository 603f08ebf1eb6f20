import pytest

from huskarui.color import parse_color
from huskarui.color_generator import Preset, generate, preset_to_color, reverse_color


@pytest.mark.parametrize(
    "preset, hex_value",
    [
        (Preset.RED, "#f5222d"),
        (Preset.VOLCANO, "#fa541c"),
        (Preset.ORANGE, "#fa8c16"),
        (Preset.GOLD, "#faad14"),
        (Preset.YELLOW, "#fadb14"),
        (Preset.LIME, "#a0d911"),
        (Preset.GREEN, "#52c41a"),
        (Preset.CYAN, "#13c2c2"),
        (Preset.BLUE, "#1677ff"),
        (Preset.GEEKBLUE, "#2f54eb"),
        (Preset.PURPLE, "#722ed1"),
        (Preset.MAGENTA, "#eb2f96"),
        (Preset.GREY, "#666666"),
    ],
)
def test_preset_table(preset, hex_value):
    assert preset_to_color(preset).name() == hex_value


def test_preset_by_name_matches_member():
    assert preset_to_color("Preset_Geekblue") == preset_to_color(Preset.GEEKBLUE)
    assert preset_to_color("Preset_Red") == preset_to_color(Preset.RED)


def test_unknown_preset_raises():
    with pytest.raises(ValueError):
        preset_to_color("Preset_Nope")
    with pytest.raises(ValueError):
        preset_to_color(99)


def test_reverse_twice_is_identity_and_keeps_alpha():
    color = parse_color("#801677ff")
    assert reverse_color(reverse_color(color)) == color
    assert reverse_color(color).alpha == color.alpha
    assert reverse_color(parse_color("#ffffff")) == parse_color("#000000")


def test_light_palette_shape():
    base = parse_color("#1677ff")
    palette = generate(base)
    assert len(palette) == 10
    assert palette[5] == base


def test_first_light_step_saturation_capped():
    palette = generate(parse_color("#1677ff"))
    assert palette[0].hsv()[1] <= 0.1 + 0.02


def test_light_side_saturation_grows_towards_base():
    palette = generate(parse_color("#1677ff"))
    saturations = [c.hsv()[1] for c in palette[:6]]
    assert saturations == sorted(saturations)


def test_dark_side_value_falls():
    palette = generate(parse_color("#1677ff"))
    values = [c.hsv()[2] for c in palette[5:]]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_preset_and_colour_give_same_palette():
    assert generate(Preset.BLUE) == generate(preset_to_color(Preset.BLUE))


def test_grey_palette_keeps_base():
    palette = generate(Preset.GREY)
    assert palette[5].name() == "#666666"
    assert len(palette) == 10


def test_dark_palette_default_background():
    base = parse_color("#1677ff")
    assert generate(base, False) == generate(base, False, parse_color("#141414"))
    assert len(generate(base, False)) == 10


def test_dark_palette_blends_between_background_and_pattern():
    base = parse_color("#1677ff")
    background = parse_color("#000000")
    light = generate(base)
    first = generate(base, False, background)[0]
    target = light[7]
    for mixed, bg, fg in (
        (first.red, background.red, target.red),
        (first.green, background.green, target.green),
        (first.blue, background.blue, target.blue),
    ):
        assert min(bg, fg) - 1 <= mixed <= max(bg, fg) + 1