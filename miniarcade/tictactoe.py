"""Two-player tic-tac-toe on a 3x3 board."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

SIZE = 3
EMPTY = " "
PLAYERS = ("X", "O")


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


class InvalidMoveError(ValueError):
    """Raised for a move off the board or onto a taken square."""


class TicTacToe:
    """Board state and turn order of one game."""

    def __init__(self) -> None:
        self.board = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.current_player = PLAYERS[0]

    def make_move(self, row: int, col: int) -> None:
        """Mark a square (0-based) for the current player."""
        if not (0 <= row < SIZE and 0 <= col < SIZE) or self.board[row][col] != EMPTY:
            raise InvalidMoveError("Invalid move. Try again.")
        self.board[row][col] = self.current_player

    def _lines(self) -> Iterator[Sequence[str]]:
        yield from self.board
        yield from zip(*self.board)
        yield [self.board[i][i] for i in range(SIZE)]
        yield [self.board[i][SIZE - 1 - i] for i in range(SIZE)]

    def check_win(self, player: str) -> bool:
        return any(all(cell == player for cell in line) for line in self._lines())

    def is_game_over(self) -> bool:
        if self.winner() is not None:
            return True
        return all(cell != EMPTY for row in self.board for cell in row)

    def switch_player(self) -> None:
        self.current_player = PLAYERS[1] if self.current_player == PLAYERS[0] else PLAYERS[0]

    def winner(self) -> str | None:
        return next((player for player in PLAYERS if self.check_win(player)), None)

    def render(self) -> str:
        separator = "\n" + "-" * (4 * SIZE - 3) + "\n"
        return separator.join(" | ".join(row) for row in self.board) + "\n"


def play(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
) -> str | None:
    """Play one game; returns the winner or None for a draw."""
    game = TicTacToe()
    tokens = _tokens(read)
    while not game.is_game_over():
        write(game.render())
        write(f"Player {game.current_player}, enter row (1-3) and column (1-3): ")
        row_text, col_text = _next(tokens), _next(tokens)
        try:
            game.make_move(int(row_text) - 1, int(col_text) - 1)
        except ValueError:
            write("Invalid move. Try again.\n")
            continue
        if not game.is_game_over():
            game.switch_player()
    write(game.render())
    winner = game.winner()
    write(f"Player {winner} wins!\n" if winner else "It's a draw!\n")
    return winner


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tictactoe", description="Play tic-tac-toe.")
    parser.parse_args(argv)
    try:
        play()
    except (EOFError, KeyboardInterrupt):
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())