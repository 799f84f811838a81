import pytest

from gold_digger.mapcheck import (
    GameMap,
    MapError,
    check_characters,
    check_rectangular,
    check_unwanted,
    check_walls,
    count_tile,
    load_lines,
    load_map,
    validate_map,
)

VALID = "11111\n1PCE1\n10001\n11111"


def _write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text, encoding="latin-1", newline="")
    return path


def _lines(text):
    return text.splitlines(keepends=True)


def test_load_lines_keeps_newlines(tmp_path):
    path = _write(tmp_path, VALID)
    assert load_lines(path) == ["11111\n", "1PCE1\n", "10001\n", "11111"]


def test_load_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="no map with the requested name"):
        load_lines(tmp_path / "absent.ber")


def test_load_lines_empty_file(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(MapError, match="only NULL characters"):
        load_lines(path)


def test_load_map_valid(tmp_path):
    game_map = load_map(_write(tmp_path, VALID))
    assert game_map.rows == ["11111", "1PCE1", "10001", "11111"]
    assert game_map.coins == 1
    assert game_map.width == len("11111")
    assert game_map.height == 4


def test_validate_map_counts_coins():
    game_map = validate_map(_lines("1111111\n1PCCCE1\n1000001\n1111111"))
    assert game_map.coins == 3
    assert isinstance(game_map, GameMap)


def test_validate_map_empty():
    with pytest.raises(MapError, match="only NULL characters"):
        validate_map([])


def test_trailing_newline_breaks_bottom_wall():
    with pytest.raises(MapError, match="Bot wall"):
        check_walls(_lines(VALID + "\n"))


@pytest.mark.parametrize(
    "text, message",
    [
        ("01111\n1PCE1\n10001\n11111", "type1:Top wall"),
        ("11011\n1PCE1\n10001\n11111", "type2:Top wall"),
        ("11111\n0PCE1\n10001\n11111", "Middle wall"),
        ("11111\n1PCE0\n10001\n11111", "Middle wall"),
        ("11111\n1PCE1\n10001\n11101", "Bot wall"),
    ],
)
def test_wall_errors(text, message):
    with pytest.raises(MapError, match=message):
        check_walls(_lines(text))


def test_walls_accept_valid_map():
    lines = _lines(VALID)
    check_walls(lines)
    assert validate_map(lines).rows[0] == "11111"


def test_not_rectangular():
    with pytest.raises(MapError, match="not rectangular"):
        check_rectangular(_lines("11111\n1PCE01\n10001\n11111"))


def test_short_last_line_not_rectangular():
    with pytest.raises(MapError, match="not rectangular"):
        check_rectangular(_lines("11111\n1PCE1\n10001\n1111"))


def test_count_tile_ignores_border_rows():
    lines = _lines("1CCC1\n1PCE1\n10001\n1CCC1")
    assert count_tile(lines, "C") == 1
    assert count_tile(lines, "X") == 0


@pytest.mark.parametrize(
    "text, letter",
    [
        ("11111\n1PC01\n10001\n11111", "'E'"),
        ("11111\n10CE1\n10001\n11111", "'P'"),
        ("11111\n1PCE1\n1P001\n11111", "'P'"),
        ("11111\n1PCE1\n1CCC1\n11111", "'0'"),
        ("11111\n1P0E1\n10001\n11111", "'C'"),
    ],
)
def test_character_errors(text, letter):
    with pytest.raises(MapError, match=letter):
        check_characters(_lines(text))


def test_unwanted_character():
    lines = _lines("11111\n1PXE1\n10C01\n11111")
    assert check_characters(lines) == 1
    with pytest.raises(MapError, match="UNWANTED"):
        check_unwanted(lines)


def test_unwanted_character_via_load(tmp_path):
    path = _write(tmp_path, "11111\n1PXE1\n10C01\n11111")
    with pytest.raises(MapError, match="UNWANTED"):
        load_map(path)


def test_walls_checked_before_characters(tmp_path):
    path = _write(tmp_path, "11111\n0PXE1\n10001\n11111")
    with pytest.raises(MapError, match="Middle wall"):
        load_map(path)