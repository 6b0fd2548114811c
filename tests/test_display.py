import pygame
import pytest

from solong.display import Renderer, main, message_position, translate_key
from solong.game import Game, Key, Outcome
from solong.gamemap import TILE_SIZE, parse_map
from solong.xpm import XpmError

MAP = [
    "1111111111",
    "1P0C0000E1",
    "100X000001",
    "1111111111",
]

COLORS = {
    "0": (10, 20, 30),
    "1": (200, 0, 0),
    "P": (0, 200, 0),
    "C": (0, 0, 200),
    "E": (200, 200, 0),
    "X": (0, 200, 200),
}


def solid_tiles():
    tiles = {}
    for tile, color in COLORS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        tiles[tile] = surface
    return tiles


def make_game():
    return Game(parse_map(MAP).validate())


def center_color(surface, x, y):
    point = (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)
    return tuple(surface.get_at(point))[:3]


def test_translate_key():
    assert translate_key(pygame.K_ESCAPE) == Key.ESC
    assert translate_key(pygame.K_w) == Key.W
    assert translate_key(pygame.K_d) == Key.D


def test_message_position_centres_text():
    assert message_position(320, 128, "") == (160, 64)
    short = message_position(320, 128, "ab")
    longer = message_position(320, 128, "abc")
    assert short[0] - longer[0] == 5
    assert short[1] == longer[1]


def test_draw_places_each_tile():
    renderer = Renderer(make_game(), tiles=solid_tiles())
    surface = renderer.draw()
    assert surface.get_size() == (10 * TILE_SIZE, 4 * TILE_SIZE)
    assert center_color(surface, 1, 1) == COLORS["P"]
    assert center_color(surface, 2, 1) == COLORS["0"]
    assert center_color(surface, 3, 1) == COLORS["C"]
    assert center_color(surface, 8, 1) == COLORS["E"]
    assert center_color(surface, 3, 2) == COLORS["X"]
    assert center_color(surface, 0, 3) == COLORS["1"]


def test_draw_follows_player_moves():
    game = make_game()
    renderer = Renderer(game, tiles=solid_tiles())
    game.handle_key(Key.D)
    surface = renderer.draw()
    assert center_color(surface, 1, 1) == COLORS["0"]
    assert center_color(surface, 2, 1) == COLORS["P"]


def test_end_message_is_drawn_in_white():
    game = make_game()
    renderer = Renderer(game, tiles=solid_tiles())
    playing = renderer.draw().copy()
    game.outcome = Outcome.LOST
    ended = renderer.draw()
    width, height = ended.get_size()
    rows = range(height // 2 - 16, height // 2 + 4)
    white = [
        (x, y) for y in rows for x in range(width)
        if tuple(ended.get_at((x, y)))[:3] == (255, 255, 255)
    ]
    assert white
    assert all(tuple(playing.get_at(p))[:3] != (255, 255, 255) for p in white)


def test_missing_tile_images_rejected():
    tiles = solid_tiles()
    del tiles["X"]
    with pytest.raises(ValueError):
        Renderer(make_game(), tiles=tiles)


def _xpm(hex_color):
    return 'static char *t[] = {\n"1 1 1 1",\n"a c #' + hex_color + '",\n"a"\n};\n'


def test_textures_loaded_from_xpm_files(tmp_path):
    files = {
        "player.xpm": "00C800",
        "wall.xpm": "C80000",
        "collectible.xpm": "0000C8",
        "exit.xpm": "C8C800",
        "floor.xpm": "0A141E",
        "enemy.xpm": "00C8C8",
    }
    for name, color in files.items():
        (tmp_path / name).write_text(_xpm(color))
    renderer = Renderer(make_game(), texture_dir=tmp_path)
    surface = renderer.draw()
    assert tuple(surface.get_at((TILE_SIZE, TILE_SIZE)))[:3] == COLORS["P"]
    assert tuple(surface.get_at((2 * TILE_SIZE, TILE_SIZE)))[:3] == COLORS["0"]


def test_missing_texture_dir_raises(tmp_path):
    with pytest.raises(XpmError):
        Renderer(make_game(), texture_dir=tmp_path)


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert main(["a.ber", "b.ber"]) == 1
    assert "Error: wrong number of arguments" in capsys.readouterr().out


def test_main_missing_map_file(tmp_path):
    assert main([str(tmp_path / "none.ber")]) == 1


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1PX1\n1111\n")
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert "Error: No collectibles found" in out
    assert "Error: invalid map" in out


def test_main_without_textures(tmp_path, capsys, monkeypatch):
    path = tmp_path / "ok.ber"
    path.write_text("\n".join(MAP) + "\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert "Map stats: 1 collectibles, 1 exits, 1 players" in out
    assert "Error: failed to initialize game" in out