"""Sea battle: find ships hidden on a grid by firing shots at it."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable
from enum import Enum

DEFAULT_SIZE = 10
DEFAULT_SHIPS = 5

RESET = "\033[0m"
CYAN = "\033[36;40m"
YELLOW = "\033[33;40m"
WHITE = "\033[37;40m"
GREEN = "\033[32;40m"
RED = "\033[31;40m"
CLEAR = "\033[2J\033[H"


class Cell(Enum):
    """State of one square of the sea."""

    EMPTY = 0
    SHIP = 1
    HIT = 2
    MISS = 3


class ShotResult(Enum):
    """What a shot did, with the message announcing it."""

    HIT = "Hit!"
    MISS = "Miss!"
    ALREADY_SHOT = "You already shot here!"


_RESULT_COLOURS = {
    ShotResult.HIT: GREEN,
    ShotResult.MISS: RED,
    ShotResult.ALREADY_SHOT: YELLOW,
}

_CELL_TEXT = {
    Cell.EMPTY: "\033[34;44m  ",
    Cell.SHIP: "\033[34;44m  ",
    Cell.HIT: "\033[31;47mX ",
    Cell.MISS: "\033[30;47mO ",
}


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_pair(read: Callable[[], str]) -> tuple[str, str]:
    tokens: list[str] = []
    while len(tokens) < 2:
        tokens.extend(read().split())
    return tokens[0], tokens[1]


class SeaBattle:
    """The sea grid with hidden ships, hits and misses."""

    def __init__(
        self,
        rng: random.Random | None = None,
        size: int = DEFAULT_SIZE,
        ships: int = DEFAULT_SHIPS,
    ) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        if not 0 <= ships <= size * size:
            raise ValueError("ship count does not fit on the board")
        rng = rng if rng is not None else random.Random()
        self.size = size
        self.board = [[Cell.EMPTY] * size for _ in range(size)]
        cells = [(row, col) for row in range(size) for col in range(size)]
        for row, col in rng.sample(cells, ships):
            self.board[row][col] = Cell.SHIP

    def shoot(self, row: int, col: int) -> ShotResult:
        """Fire at a 0-based cell; raises ValueError when it is off the grid."""
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Invalid coordinates! Use numbers from 0 to {self.size - 1}.")
        cell = self.board[row][col]
        if cell is Cell.SHIP:
            self.board[row][col] = Cell.HIT
            return ShotResult.HIT
        if cell is Cell.EMPTY:
            self.board[row][col] = Cell.MISS
            return ShotResult.MISS
        return ShotResult.ALREADY_SHOT

    def ships_remaining(self) -> int:
        return sum(cell is Cell.SHIP for row in self.board for cell in row)

    def render(self) -> str:
        """The coloured grid, ships hidden as open water."""
        parts = [
            CYAN,
            "===========================\n",
            "       SEA BATTLE GAME\n",
            "===========================\n",
            RESET,
            YELLOW + "  ",
            "".join(f"{index} " for index in range(self.size)),
            "\n",
        ]
        for index, row in enumerate(self.board):
            parts.append(f"{YELLOW}{index} ")
            parts.extend(_CELL_TEXT[cell] for cell in row)
            parts.append("\n")
        parts.append(RESET)
        return "".join(parts)


def play(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
    rng: random.Random | None = None,
) -> int:
    """Play until every ship is sunk; returns the number of hits and misses fired."""
    game = SeaBattle(rng)
    shots = 0
    while True:
        write(CLEAR + game.render())
        remaining = game.ships_remaining()
        if remaining == 0:
            write(f"{GREEN}\nCongratulations! You sank all the ships!\n{RESET}")
            return shots
        write(f"{YELLOW}\nShips remaining: {remaining}\n")
        write(f"{WHITE}Enter shot coordinates (row column): ")
        row_text, col_text = _read_pair(read)
        try:
            result = game.shoot(int(row_text), int(col_text))
        except ValueError:
            write(
                f"{RED}Invalid coordinates! Use numbers from 0 to {game.size - 1}.\n{RESET}"
            )
        else:
            if result is not ShotResult.ALREADY_SHOT:
                shots += 1
            write(f"{_RESULT_COLOURS[result]}{result.value}\n{RESET}")
        write("Press Enter to continue...")
        read()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="seabattle", description="Play sea battle.")
    parser.add_argument("--seed", type=int, default=None, help="seed for ship placement")
    args = parser.parse_args(argv)
    try:
        play(rng=random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())