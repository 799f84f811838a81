import pytest

from gold_digger.app import SPRITE_PATHS, check_sprites, main
from gold_digger.game import Sprite
from gold_digger.xpm import XpmError

XPM_TEXT = '/* XPM */\nstatic char *img[] = {\n"1 1 1 1",\n"a c #FF0000",\n"a"\n};\n'


def write_sprites(directory, skip=None):
    paths = {}
    for sprite in Sprite:
        path = directory / f"{sprite.value}.xpm"
        if sprite is not skip:
            path.write_text(XPM_TEXT)
        paths[sprite] = path
    return paths


def test_no_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error\nThe number of ARGC is not enough!"


def test_too_many_arguments(capsys):
    assert main(["a.ber", "b.ber"]) == 1
    assert "ARGC" in capsys.readouterr().out


def test_wrong_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == "Error\nThe file named '.BER' was not found!"


def test_missing_map_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error\n")
    assert "There is no map with the requested name!" in out


def test_invalid_map_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("111\n1P1\n101")
    assert main([str(path)]) == 1
    assert "Bot wall check failed!" in capsys.readouterr().out


def test_check_sprites_loads_every_image(tmp_path):
    paths = write_sprites(tmp_path)
    images = check_sprites(paths)
    assert set(images) == set(Sprite)
    assert all(img.pixels == ((0xFF0000,),) for img in images.values())


def test_check_sprites_missing_file(tmp_path):
    paths = write_sprites(tmp_path, skip=Sprite.WALL)
    with pytest.raises(XpmError, match="There is no XPM FILE!"):
        check_sprites(paths)


def test_default_sprite_paths_cover_all_sprites():
    assert set(SPRITE_PATHS) == set(Sprite)
    assert all(str(path).endswith(".xpm") for path in SPRITE_PATHS.values())