import pytest

from gold_digger import xpm
from gold_digger.xpm import (
    XpmError,
    load_xpm,
    parse_xpm,
    quoted_strings,
    split_words,
    strip_comments,
    text_to_rgb,
)


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_words_blank_line():
    assert split_words(" \t  ") == []


def test_strip_block_comment_keeps_length():
    text = "a/*x*/b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == "a" + " " * 5 + "b"


def test_strip_comments_ignores_quoted_markers():
    text = '"/*x*/" "//y"'
    assert strip_comments(text) == text


def test_strip_line_comment_removes_newline_too():
    text = "a // hi\nb"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "hi" not in result
    assert "\n" not in result
    assert result.endswith("b")


def test_quoted_strings():
    assert list(quoted_strings('x "ab" y "c d" "')) == ["ab", "c d"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00", None) == 0x00FF00


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_text_to_rgb_wide_hex_wraps_to_transparent_marker():
    assert text_to_rgb("#FFFFFFFF", None) == -1


def test_parse_simple_image():
    image = parse_xpm(["2 2 2 1", ". c #000000", "# c #FFFFFF", ".#", "#."])
    assert image.width == 2
    assert image.height == 2
    assert image.pixels == ((0, 0xFFFFFF), (0xFFFFFF, 0))


def test_none_colour_becomes_transparent():
    image = parse_xpm(["1 1 1 1", "  c None", " "])
    assert image.pixels == ((xpm.TRANSPARENT,),)


def test_short_key_palette_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == ((0x000002,),)


def test_long_key_palette_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == ((0x000001,),)


def test_unknown_pixel_key_is_zero():
    image = parse_xpm(["2 1 1 1", "a c #123456", "ab"])
    assert image.pixels == ((0x123456, 0),)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1 ",\n'
        '"r c red",\n'
        '"n c None",\n'
        '// pixels\n'
        '"rn"\n'
        "};\n",
        encoding="latin-1",
    )
    image = load_xpm(path)
    assert image.width == 2
    assert image.height == 1
    assert image.pixels == ((0xFF0000, xpm.TRANSPARENT),)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")