"""Real-time snake on a walled field, with a persistent high score."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple

WIDTH = 40
HEIGHT = 20
SNAKE_CHAR = "O"
FOOD_CHAR = "F"
BORDER_CHAR = "#"
DEFAULT_HIGH_SCORE_FILE = "highscore.txt"


class Point(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    """Heading of the snake as a (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Letters H, P, K and M carry the console scan codes of the arrow keys.
_KEY_DIRECTIONS = {
    "w": Direction.UP, "W": Direction.UP, "H": Direction.UP,
    "s": Direction.DOWN, "S": Direction.DOWN, "P": Direction.DOWN,
    "a": Direction.LEFT, "A": Direction.LEFT, "K": Direction.LEFT,
    "d": Direction.RIGHT, "D": Direction.RIGHT, "M": Direction.RIGHT,
}


class Snake:
    """The snake's body, head first, and where it is heading."""

    def __init__(self) -> None:
        self.body: list[Point] = [Point(WIDTH // 2, HEIGHT // 2)]
        self.direction = Direction.RIGHT
        self.grow = False

    def head(self) -> Point:
        return self.body[0]

    def update(self) -> None:
        """Advance one cell; the tail stays put once after eating."""
        head = self.head()
        self.body.insert(0, Point(head.x + self.direction.dx, head.y + self.direction.dy))
        if self.grow:
            self.grow = False
        else:
            self.body.pop()

    def change_direction(self, key: str) -> bool:
        """Turn for a movement key; reversing or same-axis turns are ignored."""
        target = _KEY_DIRECTIONS.get(key)
        if target is None:
            return False
        if target.dy != 0 and self.direction.dy != 0:
            return False
        if target.dx != 0 and self.direction.dx != 0:
            return False
        self.direction = target
        return True

    def is_collision(self) -> bool:
        head = self.head()
        if head.x <= 0 or head.x >= WIDTH - 1 or head.y <= 0 or head.y >= HEIGHT - 1:
            return True
        return head in self.body[1:]


@dataclass
class Food:
    """A single piece of food inside the walls."""

    x: int = 0
    y: int = 0

    def spawn(self, body: list[Point], rng: random.Random | None = None) -> None:
        """Move to a random free cell inside the walls."""
        rng = rng if rng is not None else random.Random()
        occupied = {(p[0], p[1]) for p in body}
        free = [
            (x, y)
            for y in range(1, HEIGHT - 1)
            for x in range(1, WIDTH - 1)
            if (x, y) not in occupied
        ]
        if not free:
            raise ValueError("no free cell left for food")
        self.x, self.y = rng.choice(free)


class HighScoreStore:
    """The best score, kept as a number in a text file."""

    def __init__(self, path: str | Path = DEFAULT_HIGH_SCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return 0
        tokens = text.split()
        if not tokens:
            return 0
        try:
            return int(tokens[0])
        except ValueError:
            return 0

    def save(self, score: int) -> None:
        try:
            self.path.write_text(str(score), encoding="utf-8")
        except OSError:
            pass


def tick_delay(score: int) -> int:
    """Milliseconds between moves: faster as the score rises, never below 50."""
    return max(50, 150 - score * 2)


class SnakeGame:
    """One session of play: snake, food, score and pause state."""

    def __init__(
        self,
        rng: random.Random | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.store = store if store is not None else HighScoreStore()
        self.high_score = self.store.load()
        self.reset()

    def reset(self) -> None:
        self.snake = Snake()
        self.food = Food()
        self.food.spawn(self.snake.body, self._rng)
        self.score = 0
        self.paused = False
        self.running = True

    def handle_key(self, key: str) -> None:
        if key in ("p", "P"):
            self.paused = not self.paused
        elif not self.paused:
            self.snake.change_direction(key)

    def step(self) -> bool:
        """Advance one tick; returns False once the snake has crashed."""
        if not self.running:
            return False
        if self.paused:
            return True
        self.snake.update()
        if self.snake.is_collision():
            self.running = False
            if self.score > self.high_score:
                self.store.save(self.score)
            return False
        head = self.snake.head()
        if head == (self.food.x, self.food.y):
            self.snake.grow = True
            self.food.spawn(self.snake.body, self._rng)
            self.score += 1
        return True

    def render(self) -> str:
        """The field with walls, food and snake, then the score line."""
        rows = [[" "] * WIDTH for _ in range(HEIGHT)]
        for x in range(WIDTH):
            rows[0][x] = rows[HEIGHT - 1][x] = BORDER_CHAR
        for row in rows:
            row[0] = row[WIDTH - 1] = BORDER_CHAR
        rows[self.food.y][self.food.x] = FOOD_CHAR
        for point in self.snake.body:
            if 0 <= point.x < WIDTH and 0 <= point.y < HEIGHT:
                rows[point.y][point.x] = SNAKE_CHAR
        lines = ["".join(row) for row in rows]
        lines.append(f"Score: {self.score}  High Score: {self.high_score}")
        return "\n".join(lines) + "\n"


def _translate(key: int) -> str | None:
    import curses

    arrows = {
        curses.KEY_UP: "w",
        curses.KEY_DOWN: "s",
        curses.KEY_LEFT: "a",
        curses.KEY_RIGHT: "d",
    }
    if key in arrows:
        return arrows[key]
    if 0 <= key < 256:
        return chr(key)
    return None


def _put(stdscr, y: int, x: int, text: str, attr: int = 0) -> None:
    import curses

    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        pass


def _draw(stdscr, game: SnakeGame, colours: dict[str, int]) -> None:
    stdscr.erase()
    lines = game.render().splitlines()
    for y, line in enumerate(lines[:HEIGHT]):
        _put(stdscr, y, 0, line)
    _put(stdscr, HEIGHT, 0, lines[HEIGHT], colours["cyan"])
    _put(stdscr, game.food.y, game.food.x, FOOD_CHAR, colours["red"])
    for index, point in enumerate(game.snake.body):
        attr = colours["green"] if index and index % 2 == 0 else colours["light_green"]
        _put(stdscr, point.y, point.x, SNAKE_CHAR, attr)
    stdscr.refresh()


def _colours() -> dict[str, int]:
    import curses

    names = ("red", "green", "light_green", "cyan")
    if not curses.has_colors():
        return {name: 0 for name in names}
    curses.start_color()
    curses.init_pair(1, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(2, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(3, curses.COLOR_CYAN, curses.COLOR_BLACK)
    return {
        "red": curses.color_pair(1) | curses.A_BOLD,
        "green": curses.color_pair(2),
        "light_green": curses.color_pair(2) | curses.A_BOLD,
        "cyan": curses.color_pair(3) | curses.A_BOLD,
    }


def _play_round(stdscr, game: SnakeGame, colours: dict[str, int]) -> None:
    import curses

    game.reset()
    stdscr.nodelay(True)
    stdscr.erase()
    while True:
        curses.napms(tick_delay(game.score))
        code = stdscr.getch()
        if code != -1:
            key = _translate(code)
            if key is not None:
                game.handle_key(key)
        if game.paused:
            continue
        before = game.score
        if not game.step():
            break
        if game.score > before:
            curses.beep()
        _draw(stdscr, game, colours)
    stdscr.nodelay(False)


def _wait_for(stdscr, keys: str) -> str:
    while True:
        code = stdscr.getch()
        if 0 <= code < 256 and chr(code) in keys:
            return chr(code).lower()


def _run(stdscr, game: SnakeGame) -> None:
    import curses

    try:
        curses.curs_set(0)
    except curses.error:
        pass
    colours = _colours()
    while True:
        stdscr.erase()
        _put(stdscr, 2, 8, "=== SNAKE GAME ===", colours["cyan"])
        _put(stdscr, 4, 8, "[1] Start Game")
        _put(stdscr, 5, 8, "[2] Quit")
        _put(stdscr, 7, 8, "Use Arrow Keys or WASD to move")
        stdscr.refresh()
        if _wait_for(stdscr, "12") == "2":
            return
        while True:
            _play_round(stdscr, game, colours)
            stdscr.erase()
            _put(stdscr, 2, 8, "=== GAME OVER ===", colours["cyan"])
            _put(stdscr, 4, 8, f"Your Score: {game.score}")
            _put(stdscr, 5, 8, f"High Score: {game.high_score}")
            _put(stdscr, 7, 8, "Press R to Restart or Q to Quit")
            stdscr.refresh()
            if _wait_for(stdscr, "rRqQ") == "q":
                return
            break


def main(argv: list[str] | None = None) -> int:
    import curses

    parser = argparse.ArgumentParser(prog="snake", description="Play snake in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--high-score-file",
        default=DEFAULT_HIGH_SCORE_FILE,
        help="file holding the high score",
    )
    args = parser.parse_args(argv)
    game = SnakeGame(random.Random(args.seed), HighScoreStore(args.high_score_file))
    try:
        curses.wrapper(_run, game)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())