import pytest

from huskarui.size_generator import generate_font_line_height, generate_font_size


def test_ten_sizes_with_base_second():
    sizes = generate_font_size(14)
    assert len(sizes) == 10
    assert sizes[1] == 14


def test_sizes_other_than_base_are_even():
    sizes = generate_font_size(15)
    assert all(size % 2 == 0 for index, size in enumerate(sizes) if index != 1)


def test_sizes_are_non_decreasing():
    sizes = generate_font_size(14)
    assert sizes == sorted(sizes)


def test_smallest_size_for_default_base():
    assert generate_font_size(14)[0] == 12


def test_fractional_base_kept():
    assert generate_font_size(13.5)[1] == 13.5


def test_line_heights_add_eight_pixels():
    sizes = generate_font_size(14)
    heights = generate_font_line_height(14)
    assert len(heights) == 10
    for size, height in zip(sizes, heights):
        assert height * size - size == pytest.approx(8)