"""Menu that launches the arcade's console games."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from miniarcade import blackjack, minesweeper, seabattle, sudoku, tictactoe

CLEAR = "\033[2J\033[H"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def menu_text() -> str:
    return (
        "=================================\n"
        "          MINI ARCADE           \n"
        "=================================\n"
        "1. Blackjack (21)\n"
        "2. Sudoku\n"
        "3. Minesweeper\n"
        "4. SeaBattle\n"
        "5. Tic-Tac-Toe\n"
        "6. Exit\n"
        "=================================\n"
        "Enter your choice (1-6): "
    )


def _press_enter(read: Callable[[], str], write: Callable[[str], None]) -> None:
    write("\nPress Enter to continue...")
    read()


def _parse_choice(line: str) -> int | None:
    tokens = line.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def run_menu(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _write,
    rng: random.Random | None = None,
) -> None:
    """Show the menu and run games until Exit is chosen or input ends."""
    rng = rng if rng is not None else random.Random()
    try:
        while True:
            write(CLEAR + menu_text())
            choice = _parse_choice(read())
            if choice == 1:
                write(CLEAR + "=== BLACKJACK ===\n\n")
                blackjack.play(read, write, rng)
                _press_enter(read, write)
            elif choice == 2:
                write(CLEAR)
                sudoku.play(read, write, rng)
                _press_enter(read, write)
            elif choice == 3:
                write(CLEAR + "=== MINESWEEPER ===\n\n")
                minesweeper.play(read, write, rng)
                _press_enter(read, write)
            elif choice == 4:
                seabattle.play(read, write, rng)
                write("Press Enter to return to menu...")
                read()
            elif choice == 5:
                write(CLEAR + "=== TIC-TAC-TOE ===\n\n")
                tictactoe.play(read, write)
                _press_enter(read, write)
            elif choice == 6:
                write("Thanks for playing! Goodbye!\n")
                return
            else:
                write("Invalid choice. Please try again.\n")
                _press_enter(read, write)
    except EOFError:
        write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="arcade", description="Pick a console game to play.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the games' randomness")
    args = parser.parse_args(argv)
    try:
        run_menu(input, _write, random.Random(args.seed))
    except KeyboardInterrupt:
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())