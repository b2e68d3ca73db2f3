"""Sudoku puzzles generated from a randomly seeded, backtracking-solved grid."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator
from enum import IntEnum

SIZE = 9
SUBGRID = 3
EMPTY = 0

Grid = list[list[int]]


class SudokuMoveError(ValueError):
    """Raised when a move cannot be placed on the board."""


class Difficulty(IntEnum):
    """Puzzle difficulty as chosen from the menu."""

    EASY = 1
    MEDIUM = 2
    HARD = 3


_CELLS_TO_REMOVE = {Difficulty.EASY: 40, Difficulty.MEDIUM: 50}


def cells_to_remove(difficulty: int) -> int:
    """Number of cells blanked for a difficulty; anything not easy or medium is hard."""
    return _CELLS_TO_REMOVE.get(int(difficulty), 60)


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


def _next_int(tokens: Iterator[str]) -> int | None:
    """Next token as an integer, or None when it is not one."""
    try:
        return int(_next(tokens))
    except ValueError:
        return None


def _with_bars(texts: list[str]) -> str:
    return "".join(
        text + ("| " if (index + 1) % SUBGRID == 0 and index != SIZE - 1 else "")
        for index, text in enumerate(texts)
    )


def _cells() -> Iterator[tuple[int, int]]:
    for row in range(SIZE):
        for col in range(SIZE):
            yield row, col


class Sudoku:
    """A puzzle board, its solution and the cells that may not be changed."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.board: Grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.fixed: list[list[bool]] = [[False] * SIZE for _ in range(SIZE)]
        self.solution: Grid | None = None

    def generate_puzzle(self, difficulty: int = Difficulty.EASY) -> None:
        """Build a fresh solved grid, then blank cells according to difficulty."""
        self.board = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.fixed = [[False] * SIZE for _ in range(SIZE)]
        for box in range(0, SIZE, SUBGRID):
            self._fill_subgrid(box, box)
        self.solve()
        self.solution = [row[:] for row in self.board]
        positions = list(_cells())
        for row, col in self._rng.sample(positions, cells_to_remove(difficulty)):
            self.board[row][col] = EMPTY
            self.fixed[row][col] = False

    def _fill_subgrid(self, row: int, col: int) -> None:
        nums = list(range(1, SIZE + 1))
        self._rng.shuffle(nums)
        cells = ((row + i, col + j) for i in range(SUBGRID) for j in range(SUBGRID))
        for (r, c), num in zip(cells, nums):
            self.board[r][c] = num
            self.fixed[r][c] = True

    def is_valid(self, row: int, col: int, num: int) -> bool:
        """True if num appears nowhere in the row, column or box of the cell."""
        if num in self.board[row]:
            return False
        if any(self.board[r][col] == num for r in range(SIZE)):
            return False
        start_row, start_col = row - row % SUBGRID, col - col % SUBGRID
        return all(
            self.board[r][c] != num
            for r in range(start_row, start_row + SUBGRID)
            for c in range(start_col, start_col + SUBGRID)
        )

    def solve(self) -> bool:
        """Fill every empty cell by backtracking; False if no solution exists."""
        empty = next(((r, c) for r, c in _cells() if self.board[r][c] == EMPTY), None)
        if empty is None:
            return True
        row, col = empty
        for num in range(1, SIZE + 1):
            if self.is_valid(row, col, num):
                self.board[row][col] = num
                if self.solve():
                    return True
                self.board[row][col] = EMPTY
        return False

    def is_fixed(self, row: int, col: int) -> bool:
        return self.fixed[row][col]

    def make_move(self, row: int, col: int, num: int) -> None:
        """Place num at a 0-based cell, raising SudokuMoveError when not allowed."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise SudokuMoveError("Invalid position. Please try again.")
        if self.fixed[row][col]:
            raise SudokuMoveError("This cell is fixed. You can't change it.")
        if not 1 <= num <= SIZE:
            raise SudokuMoveError("Invalid number. Please enter a number between 1 and 9.")
        if not self.is_valid(row, col, num):
            raise SudokuMoveError("Invalid move. This number conflicts with existing numbers.")
        self.board[row][col] = num

    def is_complete(self) -> bool:
        """True when every cell is filled and no value conflicts with another."""
        for row, col in _cells():
            value = self.board[row][col]
            if value == EMPTY:
                return False
            self.board[row][col] = EMPTY
            try:
                valid = self.is_valid(row, col, value)
            finally:
                self.board[row][col] = value
            if not valid:
                return False
        return True

    def reset(self) -> None:
        """Clear every cell that is not fixed."""
        for row, col in _cells():
            if not self.fixed[row][col]:
                self.board[row][col] = EMPTY

    def render(self) -> str:
        rule = "  -------------------------\n"
        parts = ["   ", _with_bars([f"{col + 1} " for col in range(SIZE)]), "\n", rule]
        for row in range(SIZE):
            texts = ["  " if value == EMPTY else f"{value} " for value in self.board[row]]
            parts.append(f"{row + 1} |{_with_bars(texts)}\n")
            if (row + 1) % SUBGRID == 0 and row != SIZE - 1:
                parts.append(rule)
        return "".join(parts)

    def render_solution(self) -> str:
        if self.solution is None:
            raise RuntimeError("no puzzle has been generated")
        parts = []
        for row in range(SIZE):
            parts.append(_with_bars([f"{value} " for value in self.solution[row]]) + "\n")
            if (row + 1) % SUBGRID == 0 and row != SIZE - 1:
                parts.append("------+-------+------\n")
        return "".join(parts)


def play(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
    rng: random.Random | None = None,
) -> bool:
    """Play one puzzle from the arcade; returns True when it is solved."""
    tokens = _tokens(read)
    game = Sudoku(rng)
    write("=== SUDOKU ===\n\n")
    write("Select difficulty:\n1. Easy\n2. Medium\n3. Hard\nChoice: ")
    difficulty = _next_int(tokens)
    game.generate_puzzle(difficulty if difficulty is not None else Difficulty.HARD)

    while True:
        write("=== SUDOKU ===\n\n" + game.render())
        if game.is_complete():
            write("\nCongratulations! Puzzle solved!\n")
            return True
        write(
            "\nOptions:\n1. Make move\n2. Show solution\n3. Reset board\n"
            "4. Back to menu\nChoice: "
        )
        choice = _next_int(tokens)
        if choice == 1:
            write("Enter row (1-9), column (1-9), number (1-9): ")
            row, col, num = _next_int(tokens), _next_int(tokens), _next_int(tokens)
            if row is None or col is None or num is None:
                write("Invalid position. Please try again.\n")
                continue
            try:
                game.make_move(row - 1, col - 1, num)
            except SudokuMoveError as error:
                write(f"{error}\n")
        elif choice == 2:
            write("\nSolution:\n" + game.render_solution())
            return False
        elif choice == 3:
            game.reset()
            write("Board reset.\n")
        elif choice == 4:
            return False


_MENU = (
    "\nSudoku Game Menu:\n"
    "1. New Game (Easy)\n"
    "2. New Game (Medium)\n"
    "3. New Game (Hard)\n"
    "4. Make a Move\n"
    "5. Show Solution\n"
    "6. Reset Board\n"
    "7. Check Completion\n"
    "8. Exit\n"
    "Enter your choice: "
)


def _console(
    read: Callable[[], str],
    write: Callable[[str], None],
    rng: random.Random | None,
) -> None:
    tokens = _tokens(read)
    game = Sudoku(rng)
    in_progress = False
    write("Welcome to Sudoku!\n")
    while True:
        write(_MENU)
        choice = _next_int(tokens)
        if choice in (1, 2, 3):
            game.generate_puzzle(choice)
            write(game.render())
            in_progress = True
        elif choice == 8:
            write("Thanks for playing Sudoku!\n")
            return
        elif choice in (4, 5, 6, 7):
            if not in_progress:
                write("Please start a new game first.\n")
            elif choice == 4:
                write("Enter row (1-9), column (1-9), and number (1-9): ")
                row, col, num = _next_int(tokens), _next_int(tokens), _next_int(tokens)
                if row is None or col is None or num is None:
                    write("Invalid position. Please try again.\n")
                    continue
                try:
                    game.make_move(row - 1, col - 1, num)
                except SudokuMoveError as error:
                    write(f"{error}\n")
                else:
                    write(game.render())
            elif choice == 5:
                write("\nSolution:\n" + game.render_solution())
            elif choice == 6:
                game.reset()
                write("Board has been reset.\n" + game.render())
            elif game.is_complete():
                write("Congratulations! You've solved the Sudoku!\n")
            else:
                write("The board is not complete yet. Keep trying!\n")
        else:
            write("Invalid choice. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sudoku", description="Play sudoku.")
    parser.add_argument("--seed", type=int, default=None, help="seed for puzzle generation")
    args = parser.parse_args(argv)
    try:
        _console(input, _write, random.Random(args.seed))
    except (EOFError, KeyboardInterrupt):
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())