"""Drawing the game with pygame and the command that starts it."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Game, Key, Outcome  # noqa: E402
from solong.gamemap import FLOOR, TILE_SIZE, MapError, load_map  # noqa: E402
from solong.window import (  # noqa: E402
    KEY_PRESS_MASK,
    NO_EVENT_MASK,
    Connection,
    EventType,
    Window,
)
from solong.ximage import Image  # noqa: E402
from solong.xpm import XpmError, load_xpm  # noqa: E402

TITLE = "So Long"
TEXT_COLOR = (255, 255, 255)
_FONT_SIZE = 16

_TEXTURES = {
    "P": "player.xpm",
    "1": "wall.xpm",
    "C": "collectible.xpm",
    "E": "exit.xpm",
    FLOOR: "floor.xpm",
    "X": "enemy.xpm",
}

_MESSAGES = {
    Outcome.LOST: "Game Over! Press ESC to exit",
    Outcome.WON: "Victory! Press ESC to exit",
}


def message_position(width: int, height: int, message: str) -> tuple[int, int]:
    """Return the (x, baseline y) of a message centred in a window of that size."""
    return width // 2 - len(message) * 5, height // 2


def translate_key(key: int) -> int:
    """Turn a pygame key code into the key symbol the game expects."""
    if key == pygame.K_ESCAPE:
        return int(Key.ESC)
    return key


def _image_to_surface(image: Image) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height))
    for y in range(image.height):
        for x in range(image.width):
            value = image.get_pixel(x, y)
            surface.set_at((x, y), ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))
    return surface


def _load_tiles(texture_dir: Union[str, Path]) -> dict[str, pygame.Surface]:
    base = Path(texture_dir)
    return {tile: _image_to_surface(load_xpm(base / name)) for tile, name in _TEXTURES.items()}


class Renderer:
    """Draws a game into a surface and runs it in a window."""

    def __init__(
        self,
        game: Game,
        tiles: Optional[Mapping[str, pygame.Surface]] = None,
        texture_dir: Union[str, Path] = "textures",
    ) -> None:
        self.game = game
        self.tiles = dict(tiles) if tiles is not None else _load_tiles(texture_dir)
        missing = set(_TEXTURES) - set(self.tiles)
        if missing:
            raise ValueError(f"missing tile images: {''.join(sorted(missing))}")
        size = (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        self.surface = pygame.Surface(size)
        self.screen: Optional[pygame.Surface] = None
        self.connection: Optional[Connection] = None
        self.window: Optional[Window] = None
        self._font: Optional[pygame.font.Font] = None

    def _text(self, text: str, position: tuple[int, int]) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        rendered = self._font.render(text, True, TEXT_COLOR)
        x, baseline = position
        self.surface.blit(rendered, (x, baseline - self._font.get_ascent()))

    def draw(self) -> pygame.Surface:
        """Draw the map, the score and any end message; return the surface."""
        self.surface.fill((0, 0, 0))
        floor = self.tiles[FLOOR]
        for y, row in enumerate(self.game.map.grid):
            for x, tile in enumerate(row):
                position = (x * TILE_SIZE, y * TILE_SIZE)
                self.surface.blit(floor, position)
                if tile != FLOOR and tile in self.tiles:
                    self.surface.blit(self.tiles[tile], position)
        self._text(self.game.status_text(), (10, 20))
        message = _MESSAGES.get(self.game.outcome)
        if message is not None:
            width, height = self.surface.get_size()
            self._text(message, message_position(width, height, message))
        return self.surface

    def _present(self) -> None:
        self.draw()
        if self.screen is not None:
            self.screen.blit(self.surface, (0, 0))
            pygame.display.flip()

    def _close(self) -> None:
        if self.connection is not None:
            if self.window is not None:
                self.connection.destroy_window(self.window)
            self.connection.end_loop()

    def _on_key(self, keycode: int) -> None:
        redraw = self.game.handle_key(keycode)
        if self.game.closed:
            self._close()
        elif redraw:
            self._present()

    def _on_frame(self) -> None:
        if self.game.handle_frame():
            self._present()

    def _events(self):
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    yield (self.window, EventType.CLIENT_MESSAGE)
                elif event.type == pygame.KEYDOWN:
                    yield (self.window, EventType.KEY_PRESS, translate_key(event.key))
            yield None

    def run(self) -> int:
        """Open the window and play until it is closed; return 0."""
        pygame.init()
        try:
            width, height = self.surface.get_size()
            self.screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(TITLE)
            self.connection = Connection()
            self.window = self.connection.new_window(width, height, TITLE)
            self.window.hook(EventType.KEY_PRESS, KEY_PRESS_MASK, self._on_key)
            self.window.hook(EventType.DESTROY_NOTIFY, NO_EVENT_MASK, self._close)
            self.connection.set_loop_hook(self._on_frame)
            self._present()
            self.connection.loop(self._events())
        finally:
            self.screen = None
            pygame.quit()
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: wrong number of arguments")
        return 1
    print("Starting game...")
    print("Parsing map...")
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print(f"Failed to load map: {exc}")
        return 1
    print("Validating map...")
    try:
        game_map.validate()
    except MapError as exc:
        for problem in game_map.errors or [str(exc)]:
            print(f"Error: {problem}")
        print("Error: invalid map")
        return 1
    print(
        f"Map stats: {game_map.collectibles} collectibles, "
        f"{game_map.exits} exits, {game_map.players} players"
    )
    print("Initializing game...")
    try:
        renderer = Renderer(Game(game_map))
    except (XpmError, MapError, ValueError) as exc:
        print(exc)
        print("Error: failed to initialize game")
        return 1
    print("Setting up hooks...")
    print("Starting game loop...")
    return renderer.run()