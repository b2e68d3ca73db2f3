"""Minesweeper on a square board with randomly placed mines."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator

DEFAULT_SIZE = 10
DEFAULT_MINES = 15

Cell = tuple[int, int]


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _tokens(read: Callable[[], str]) -> Iterator[str]:
    while True:
        try:
            line = read()
        except EOFError:
            return
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError("input ended")
    return token


class Minesweeper:
    """Mines, revealed cells and the count of safe cells still hidden."""

    def __init__(
        self,
        rng: random.Random | None = None,
        size: int = DEFAULT_SIZE,
        mines: int = DEFAULT_MINES,
    ) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        if not 0 <= mines <= size * size:
            raise ValueError("mine count does not fit on the board")
        rng = rng if rng is not None else random.Random()
        self.size = size
        cells = [(row, col) for row in range(size) for col in range(size)]
        self.mine_cells: frozenset[Cell] = frozenset(rng.sample(cells, mines))
        self.revealed: set[Cell] = set()
        self.remaining = size * size - mines

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _neighbourhood(self, row: int, col: int) -> Iterator[Cell]:
        """The cell and every cell touching it, clipped to the board."""
        for r in range(max(0, row - 1), min(self.size - 1, row + 1) + 1):
            for c in range(max(0, col - 1), min(self.size - 1, col + 1) + 1):
                yield r, c

    def adjacent_mines(self, row: int, col: int) -> int:
        return sum(cell in self.mine_cells for cell in self._neighbourhood(row, col))

    def reveal(self, row: int, col: int) -> bool:
        """Uncover a cell; returns True if it held a mine."""
        if not self._in_bounds(row, col) or (row, col) in self.revealed:
            return False
        self.revealed.add((row, col))
        if (row, col) in self.mine_cells:
            return True
        self.remaining -= 1
        pending = [(row, col)] if self.adjacent_mines(row, col) == 0 else []
        while pending:
            for cell in self._neighbourhood(*pending.pop()):
                if cell in self.revealed:
                    continue
                self.revealed.add(cell)
                self.remaining -= 1
                if self.adjacent_mines(*cell) == 0:
                    pending.append(cell)
        return False

    def is_won(self) -> bool:
        return self.remaining == 0

    def render(self, show_mines: bool = False) -> str:
        parts = ["  ", "".join(f"{index} " for index in range(self.size)), "\n"]
        for row in range(self.size):
            parts.append(f"{row} ")
            for col in range(self.size):
                if show_mines and (row, col) in self.mine_cells:
                    parts.append("* ")
                elif (row, col) in self.revealed:
                    count = self.adjacent_mines(row, col)
                    parts.append(f"{count or ' '} ")
                else:
                    parts.append("# ")
            parts.append("\n")
        return "".join(parts)


def play(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
    rng: random.Random | None = None,
) -> bool:
    """Play one game; returns True when every safe cell is uncovered."""
    game = Minesweeper(rng)
    tokens = _tokens(read)
    while True:
        write(game.render())
        write("Enter coordinates (row column): ")
        row_text, col_text = _next(tokens), _next(tokens)
        try:
            row, col = int(row_text), int(col_text)
        except ValueError:
            continue
        if game.reveal(row, col):
            write("Game Over! You hit a mine.\n")
            write(game.render(show_mines=True))
            return False
        if game.is_won():
            write("Congratulations! You won!\n")
            write(game.render(show_mines=True))
            return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minesweeper", description="Play minesweeper.")
    parser.add_argument("--seed", type=int, default=None, help="seed for mine placement")
    args = parser.parse_args(argv)
    try:
        play(rng=random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())