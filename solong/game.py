"""Game state and rules: player moves, enemies and the end of a game."""

from __future__ import annotations

from enum import IntEnum

from solong.gamemap import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError

ENEMY_PERIOD = 9000


class Outcome(IntEnum):
    """Whether the game is running, lost or won."""

    PLAYING = 0
    LOST = 1
    WON = 2


class Key(IntEnum):
    """Key symbols the game reacts to."""

    ESC = 65307
    W = 119
    S = 115
    A = 97
    D = 100


# Enemy directions in order: up, down, left, right.
_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_KEY_STEPS = {Key.W: (0, -1), Key.S: (0, 1), Key.A: (-1, 0), Key.D: (1, 0)}


class Game:
    """A game played on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.player_x = 0
        self.player_y = 0
        self.find_player()
        self.moves = 0
        self.outcome = Outcome.PLAYING
        self.frame_count = 0
        self.closed = False

    def find_player(self) -> tuple[int, int]:
        """Set and return the player position; raises MapError if there is none."""
        position = self.map.find(PLAYER)
        if position is None:
            raise MapError("map has no player")
        self.player_x, self.player_y = position
        return position

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= y < self.map.height and 0 <= x < len(self.map.grid[y])

    def move_player(self, new_x: int, new_y: int) -> bool:
        """Try to move the player to (new_x, new_y); return whether it happened.

        Walls block, and so does the exit while collectibles remain.
        Stepping on an enemy loses the game; reaching the exit with every
        collectible taken wins it. Raises IndexError outside the map.
        """
        if not self._inside(new_x, new_y):
            raise IndexError(f"position ({new_x},{new_y}) is outside the map")
        target = self.map.grid[new_y][new_x]
        if target == WALL:
            return False
        if target == EXIT and self.map.collectibles > 0:
            return False
        self.map.grid[self.player_y][self.player_x] = FLOOR
        if target == COLLECTIBLE:
            self.map.collectibles -= 1
        if target == ENEMY:
            self.outcome = Outcome.LOST
            return True
        if target == EXIT and self.map.collectibles == 0:
            self.outcome = Outcome.WON
            return True
        self.map.grid[new_y][new_x] = PLAYER
        self.player_x, self.player_y = new_x, new_y
        self.moves += 1
        return True

    def _direction(self) -> int:
        return (self.frame_count * self.player_x + self.player_y) % 4

    def _try_move_enemy(self, x: int, y: int, new_x: int, new_y: int) -> bool:
        if not self._inside(new_x, new_y):
            return False
        target = self.map.grid[new_y][new_x]
        if target == FLOOR:
            self.map.grid[y][x] = FLOOR
            self.map.grid[new_y][new_x] = ENEMY
            return True
        if target == PLAYER:
            self.outcome = Outcome.LOST
            return True
        return False

    def move_enemies(self) -> bool:
        """Step every enemy one tile, scanning rows top to bottom.

        All enemies share a direction drawn from the frame count and the
        player position. An enemy reaching the player loses the game.
        Returns whether anything changed.
        """
        moved = False
        for y in range(self.map.height):
            for x in range(self.map.width):
                if self.map.grid[y][x] != ENEMY:
                    continue
                dx, dy = _DIRECTIONS[self._direction()]
                moved |= self._try_move_enemy(x, y, x + dx, y + dy)
        return moved

    def handle_key(self, keycode: int) -> bool:
        """React to a key; return whether the screen should be redrawn.

        ESC marks the game closed. After the game has ended every other
        key is ignored.
        """
        if self.outcome is not Outcome.PLAYING:
            if keycode == Key.ESC:
                self.closed = True
            return False
        if keycode == Key.ESC:
            self.closed = True
            return False
        step = _KEY_STEPS.get(keycode)
        if step is not None:
            self.move_player(self.player_x + step[0], self.player_y + step[1])
        return True

    def handle_frame(self) -> bool:
        """Count a frame; enemies move every ENEMY_PERIOD frames while playing.

        Returns whether the screen should be redrawn.
        """
        self.frame_count += 1
        if self.frame_count % ENEMY_PERIOD == 0 and self.outcome is Outcome.PLAYING:
            return self.move_enemies()
        return False

    def status_text(self) -> str:
        """Return the score line shown in the window."""
        return f"Score: {self.moves}"