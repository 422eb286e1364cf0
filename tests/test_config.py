import pytest

from wolfcast.config import (
    ConfigError,
    Direction,
    MapConfig,
    check_map,
    fill_map_config,
    is_valid_rgb,
    parse_rgb,
    read_source,
    split_join_sep,
)

SAMPLE = (
    "NO ./n.xpm\n"
    "SO ./s.xpm\n"
    "WE ./w.xpm\n"
    "EA ./e.xpm\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "1111\n"
    "1N01\n"
    "1111\n"
)

MAP_ROWS = ["1111", "1N01", "1111"]


def test_fill_reads_textures():
    config = fill_map_config(SAMPLE)
    assert config.textures == {
        Direction.NORTH: "./n.xpm",
        Direction.SOUTH: "./s.xpm",
        Direction.WEST: "./w.xpm",
        Direction.EAST: "./e.xpm",
    }


def test_fill_reads_colours():
    config = fill_map_config(SAMPLE)
    assert config.floor >> 16 == 220
    assert (config.floor >> 8) & 0xFF == 100
    assert config.floor & 0xFF == 0
    assert config.ceiling >> 16 == 225
    assert (config.ceiling >> 8) & 0xFF == 30


def test_fill_complete():
    assert fill_map_config(SAMPLE).is_complete() is True


def test_offset_stops_after_header():
    config = fill_map_config(SAMPLE)
    assert SAMPLE[config.offset:].lstrip("\n").startswith("1111")


def test_missing_floor_is_incomplete():
    text = SAMPLE.replace("F 220,100,0\n", "")
    assert fill_map_config(text).is_complete() is False


def test_texture_without_xpm_is_ignored():
    config = fill_map_config(SAMPLE.replace("./n.xpm", "./n.png"))
    assert Direction.NORTH not in config.textures
    assert config.is_complete() is False


def test_invalid_colour_leaves_it_unset():
    config = fill_map_config(SAMPLE.replace("220,100,0", "300,0,0"))
    assert config.floor is None
    assert config.is_complete() is False


def test_empty_config_is_incomplete():
    assert MapConfig().is_complete() is False


def test_parse_rgb_white():
    assert parse_rgb("255,255,255") == 0xFFFFFF


def test_parse_rgb_channels():
    value = parse_rgb("1,2,3")
    assert (value >> 16, (value >> 8) & 0xFF, value & 0xFF) == (1, 2, 3)


def test_parse_rgb_skips_empty_fields():
    assert parse_rgb("1,,2,3") == parse_rgb("1,2,3")


@pytest.mark.parametrize("text", ["256,0,0", "1,2", "a,b,c", "1234,0,0", "1,2,3,4", "", "-1,0,0"])
def test_parse_rgb_rejects(text):
    with pytest.raises(ConfigError):
        parse_rgb(text)


def test_is_valid_rgb():
    assert is_valid_rgb(["1", "22", "255"]) is True
    assert is_valid_rgb(["1", "22"]) is False
    assert is_valid_rgb(["1", "", "2"]) is False
    assert is_valid_rgb(["1", "2x", "3"]) is False


def test_split_join_sep():
    assert split_join_sep("a,,b", ",") == ["a\n", "b\n"]


def test_split_join_sep_empty():
    assert split_join_sep(",,", ",") == []


def test_read_source_appends_newline(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("abc")
    assert read_source(path) == "abc\n"


def test_read_source_stops_at_nul(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_bytes(b"ab\x00cd")
    assert read_source(path) == "ab\n"


def test_check_map_finds_direction():
    config = fill_map_config(SAMPLE)
    assert check_map(config, MAP_ROWS) is Direction.NORTH
    assert config.start_direction is Direction.NORTH


def test_check_map_rejects_bad_character():
    config = fill_map_config(SAMPLE)
    with pytest.raises(ConfigError):
        check_map(config, ["1111", "1N21", "1111"])


@pytest.mark.parametrize("rows", [["1111", "1001"], ["1NS1"]])
def test_check_map_needs_one_start(rows):
    with pytest.raises(ConfigError):
        check_map(fill_map_config(SAMPLE), rows)


def test_check_map_rejects_split_map():
    text = SAMPLE.replace("1111\n1N01", "1111\n\n1N01")
    with pytest.raises(ConfigError):
        check_map(fill_map_config(text), MAP_ROWS)


def test_check_map_allows_trailing_blank_lines():
    config = fill_map_config(SAMPLE + "\n\n\n")
    assert check_map(config, MAP_ROWS) is Direction.NORTH