import pytest

from huskarui.radius_generator import generate_radius


@pytest.mark.parametrize("base", range(0, 30))
def test_shape_and_first_is_base(base):
    radii = generate_radius(base)
    assert len(radii) == 5
    assert radii[0] == base
    assert radii[3] <= 2


@pytest.mark.parametrize("base", [16, 20, 64])
def test_large_bases_are_capped(base):
    radii = generate_radius(base)
    assert radii[1] == 16
    assert radii[2] == 8
    assert radii[4] == 6


def test_default_base():
    assert generate_radius(6) == [6, 8, 4, 2, 4]


def test_cap_threshold():
    assert generate_radius(16) == [16, 16, 8, 2, 6]