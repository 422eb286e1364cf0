import pytest

from wolfcast.colors import lookup_color
from wolfcast.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    parse_xpm,
    parse_xpm_text,
    quoted_lines,
    read_xpm_file,
    split_words,
    strip_comments,
)

SAMPLE = (
    "/* XPM */\n"
    "static char *img[] = {\n"
    '"2 2 2 1",\n'
    '"a c #FF0000",\n'
    '"b c None",\n'
    '"ab",\n'
    '"ba"\n'
    "};\n"
)


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = "a /* x */ b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "x" not in result
    assert result.startswith("a") and result.endswith("b")


def test_strip_comment_inside_quotes_is_kept():
    text = '"/* keep */"'
    assert strip_comments(text) == text


def test_strip_line_comment_swallows_newline():
    text = "x // y\nz"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result and "y" not in result
    assert result[0] == "x" and result[-1] == "z"


def test_quoted_lines():
    assert list(quoted_lines('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_parse_sample():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(1, 1) == 0xFF0000


def test_transparent_is_not_positive():
    image = parse_xpm_text(SAMPLE)
    assert image.pixel(1, 0) <= 0


def test_pixel_out_of_range():
    image = parse_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == lookup_color("light blue")


def test_named_colour():
    image = parse_xpm(["1 1 1 1", "a c red", "a"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_unknown_key_in_row_gives_zero():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.pixels == (0,)


def test_direct_table_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_wide_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_pixel_count_matches_size():
    image = parse_xpm(["3 2 1 1", "a c white", "aaa", "aaa"])
    assert len(image.pixels) == image.width * image.height
    assert set(image.pixels) == {lookup_color("white")}


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        [],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    assert read_xpm_file(path) == parse_xpm_text(SAMPLE)


def test_read_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "missing.xpm")


def test_image_equality_is_value_based():
    assert XpmImage(1, 1, (5,)) == parse_xpm(["1 1 1 1", "a c #5", "a"])