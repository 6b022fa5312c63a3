import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    find_unquoted,
    parse_xpm,
    quoted_lines,
    read_xpm_file,
    split_words,
    strip_comments,
    xpm_from_data,
)

SMALL = [
    "2 2 3 1",
    ". c #FF0000",
    "# c None",
    "x c red",
    ".#",
    "x.",
]


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_find_unquoted_skips_quoted_match():
    assert find_unquoted('"/*" /*', "/*") == 5


def test_find_unquoted_missing():
    assert find_unquoted("abc", "x") == -1
    assert find_unquoted("a", "abc") == -1


def test_find_unquoted_empty_pattern():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_strip_comments_keeps_length_and_quoted_text():
    text = '/* c */ "a/*b*/" // tail\n"c"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/* c */" not in result
    assert "tail" not in result
    assert '"a/*b*/"' in result
    assert list(quoted_lines(result)) == ["a/*b*/", "c"]


def test_quoted_lines_ignores_unterminated():
    assert list(quoted_lines('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_parse_small_image():
    image = xpm_from_data(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(0, 1) == image.pixel(0, 0)
    assert image.pixel(1, 1) == 0xFF0000


def test_transparent_value():
    image = parse_xpm(["1 1 1 1", "a c None", "a"])
    assert image.pixel(0, 0) == 0xFF000000


def test_pixel_out_of_range():
    image = xpm_from_data(SMALL)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == 0xADD8E6


def test_three_chars_per_pixel():
    image = parse_xpm(["2 1 2 3", "aaa c #00FF00", "bbb c #0000FF", "bbbaaa"])
    assert image.pixels == (0x0000FF, 0x00FF00)


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.pixels == (0,)


@pytest.mark.parametrize("big_endian", [True, False])
def test_to_bytes_round_trip(big_endian):
    image = xpm_from_data(SMALL)
    raw = image.to_bytes(big_endian)
    order = "big" if big_endian else "little"
    assert len(raw) == 4 * image.width * image.height
    values = [int.from_bytes(raw[i : i + 4], order) for i in range(0, len(raw), 4)]
    assert values == [p & 0xFFFFFFFF for p in image.pixels]


def test_image_size_mismatch():
    with pytest.raises(ValueError):
        XpmImage(2, 2, (0, 0, 0))


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_invalid_data(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_read_file(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "// width height colours cpp\n"
        '"2 1 2 1",\n'
        '"a c #FF0000", /* red */\n'
        '"b c None",\n'
        '"ab"\n'
        "};\n"
    )
    image = read_xpm_file(path)
    assert image.pixels == (0xFF0000, TRANSPARENT)


def test_read_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "absent.xpm")