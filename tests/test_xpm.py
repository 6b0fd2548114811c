import pytest

from solong.colors import lookup_color
from solong.xpm import (
    TRANSPARENT_PIXEL,
    XpmError,
    find_unquoted,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = ["3 2 2 1", ". c #FF0000", "# c blue", ".#.", "#.#"]


def test_find_unquoted_skips_quoted_text():
    text = 'a "/*" b /* c'
    assert find_unquoted(text, "/*") == text.rindex("/*")


def test_find_unquoted_missing():
    assert find_unquoted('"//"', "//") == -1


def test_find_unquoted_empty_needle():
    with pytest.raises(ValueError):
        find_unquoted("abc", "")


def test_split_words():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_strings():
    text = '/* XPM */\nstatic char *x[] = {\n"1 1 1 1", // header\n"a c red",\n"a"};\n'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "/*" not in stripped and "//" not in stripped and "header" not in stripped
    assert list(quoted_lines(stripped)) == ["1 1 1 1", "a c red", "a"]


def test_strip_comments_ignores_markers_in_quotes():
    text = '"a /* b */ c"'
    assert strip_comments(text) == text


def test_strip_comments_unterminated():
    with pytest.raises(XpmError):
        strip_comments("x /* never closed")


def test_quoted_lines():
    assert list(quoted_lines('{"ab", "c d",\n"" "unterminated')) == ["ab", "c d", ""]


def test_text_to_rgb_hex():
    assert text_to_rgb("#00FF00") == 0x00FF00


def test_text_to_rgb_names():
    assert text_to_rgb("Red") == lookup_color("red")
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    rows = [
        [image.get_pixel(x, y) for x in range(3)] for y in range(2)
    ]
    red, blue = 0xFF0000, lookup_color("blue")
    assert rows == [[red, blue, red], [blue, red, blue]]


def test_parse_two_chars_per_pixel_with_none():
    image = parse_xpm(["2 1 2 2", "aa c #010203", "bb c None", "aabb"])
    assert image.get_pixel(0, 0) == 0x010203
    assert image.get_pixel(1, 0) == TRANSPARENT_PIXEL


def test_short_keys_later_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_undefined_colour_is_black():
    image = parse_xpm(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 2 1", ". c red", "# c blue", ".#", "#."],
        ["3 2"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 2 1 1", "a c red", "aa"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "tile.xpm"
    body = ",\n".join(f'"{line}"' for line in SAMPLE)
    path.write_text(f"/* XPM */\nstatic char *tile[] = {{\n// pixels\n{body}\n}};\n")
    loaded = load_xpm(path)
    parsed = parse_xpm(SAMPLE)
    assert (loaded.width, loaded.height) == (parsed.width, parsed.height)
    assert loaded.data == parsed.data


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")