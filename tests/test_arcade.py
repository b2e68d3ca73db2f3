import io
import random

from miniarcade import blackjack
from miniarcade.arcade import main, menu_text, run_menu


def scripted(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def run(lines, seed=0):
    out = []
    run_menu(scripted(lines), out.append, random.Random(seed))
    return "".join(out)


def test_menu_lists_every_game():
    text = menu_text()
    assert "MINI ARCADE" in text
    for entry in ("1. Blackjack (21)", "2. Sudoku", "3. Minesweeper",
                  "4. SeaBattle", "5. Tic-Tac-Toe", "6. Exit"):
        assert entry in text
    assert text.endswith("Enter your choice (1-6): ")


def test_exit_says_goodbye():
    output = run(["6"])
    assert output.endswith("Thanks for playing! Goodbye!\n")
    assert output.count("MINI ARCADE") == 1


def test_invalid_choice_then_exit():
    output = run(["9", "", "abc", "", "6"])
    assert output.count("Invalid choice. Please try again.") == 2
    assert "Thanks for playing! Goodbye!" in output


def test_input_ending_stops_menu():
    output = run([])
    assert "MINI ARCADE" in output
    assert "Goodbye" not in output


def test_tic_tac_toe_from_menu():
    output = run(["5", "1 1", "2 1", "1 2", "2 2", "1 3", "", "6"])
    assert "=== TIC-TAC-TOE ===" in output
    assert "Player X wins!" in output
    assert output.endswith("Thanks for playing! Goodbye!\n")


def test_blackjack_from_menu_reports_outcome():
    output = run(["1", "s", "", "6"], seed=3)
    assert "=== BLACKJACK ===" in output
    assert any(outcome.value in output for outcome in blackjack.Outcome)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n"))
    assert main(["--seed", "1"]) == 0
    assert "Thanks for playing! Goodbye!" in capsys.readouterr().out