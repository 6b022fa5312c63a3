import pytest

from solong.colors import COLOR_TABLE, convert_color, lookup_color, text_to_rgb

RGB565 = (11, 5, 5, 6, 0, 5)
RGB555 = (10, 5, 5, 5, 0, 5)
RGB888 = (16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
        ("none", -1),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("GhostWhite") == 0xF8F8FF
    assert lookup_color("RED") == 0xFF0000


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_is_none():
    assert lookup_color("no such colour") is None


def test_table_ends_with_none_entry():
    first_name, first_value = COLOR_TABLE[0]
    last_name, last_value = COLOR_TABLE[-1]
    assert (first_name, first_value) == ("snow", 0xFFFAFA)
    assert (last_name, last_value) == ("none", -1)
    assert lookup_color(first_name) == 0xFFFAFA
    assert lookup_color(last_name) == -1


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("#00ff99", None) == 0x00FF99


def test_text_to_rgb_hex_stops_at_non_digit():
    assert text_to_rgb("#1Ag") == 0x1A


def test_text_to_rgb_invalid_hex_is_zero():
    assert text_to_rgb("#zz") == 0


def test_text_to_rgb_named():
    assert text_to_rgb("tomato") == 0xFF6347


def test_text_to_rgb_joins_two_words():
    assert text_to_rgb("light", "green") == 0x90EE90
    assert text_to_rgb("Sky", "Blue") == 0x87CEEB


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("mystery") == 0
    assert text_to_rgb("mystery", "shade") == 0


def test_text_to_rgb_none_is_transparent():
    assert text_to_rgb("None") == -1


@pytest.mark.parametrize("color", [0xFF99FF, 0x00FFFF, 0x123456, 0])
def test_deep_visual_keeps_color(color):
    # The test program writes these strings in colours on a 24-bit visual.
    assert convert_color(color, 24, RGB888) == color
    assert convert_color(color, 32, RGB565) == color


def test_rgb565_primaries():
    assert convert_color(0xFFFFFF, 16, RGB565) == 0xFFFF
    assert convert_color(0xFF0000, 16, RGB565) == 0xF800
    assert convert_color(0x00FF00, 16, RGB565) == 0x07E0
    assert convert_color(0x0000FF, 16, RGB565) == 0x001F
    assert convert_color(0x000000, 16, RGB565) == 0


def test_rgb555_white():
    assert convert_color(0xFFFFFF, 15, RGB555) == 0x7FFF


def test_convert_rejects_wrong_shift_count():
    with pytest.raises(ValueError):
        convert_color(0xFFFFFF, 16, (11, 5, 5))