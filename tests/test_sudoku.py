import io
import random

import pytest

from miniarcade.sudoku import (
    Difficulty,
    Sudoku,
    SudokuMoveError,
    cells_to_remove,
    main,
    play,
)

DIGITS = set(range(1, 10))


def _reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def _puzzle(seed=7, difficulty=Difficulty.EASY):
    game = Sudoku(random.Random(seed))
    game.generate_puzzle(difficulty)
    return game


def _empty_cells(game):
    return [(r, c) for r in range(9) for c in range(9) if game.board[r][c] == 0]


def _assert_solved_grid(grid):
    for row in grid:
        assert set(row) == DIGITS
    for col in zip(*grid):
        assert set(col) == DIGITS
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)}
            assert box == DIGITS


@pytest.mark.parametrize(
    "difficulty, expected",
    [(Difficulty.EASY, 40), (Difficulty.MEDIUM, 50), (Difficulty.HARD, 60), (7, 60)],
)
def test_cells_to_remove(difficulty, expected):
    assert cells_to_remove(difficulty) == expected


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_blanks_expected_number_of_cells(difficulty):
    game = _puzzle(3, difficulty)
    assert len(_empty_cells(game)) == cells_to_remove(difficulty)


def test_solution_is_a_valid_grid_matching_the_clues():
    game = _puzzle()
    _assert_solved_grid(game.solution)
    for r in range(9):
        for c in range(9):
            if game.board[r][c]:
                assert game.board[r][c] == game.solution[r][c]


def test_fixed_cells_are_given_clues_in_diagonal_boxes():
    game = _puzzle()
    fixed = [(r, c) for r in range(9) for c in range(9) if game.is_fixed(r, c)]
    assert fixed
    for r, c in fixed:
        assert r // 3 == c // 3
        assert game.board[r][c] != 0


def test_same_seed_gives_same_puzzle():
    first = _puzzle(11)
    second = _puzzle(11)
    assert len(_empty_cells(first)) == 40
    assert first.board == second.board
    assert first.solution == second.solution
    _assert_solved_grid(first.solution)


def test_solve_empty_board():
    game = Sudoku(random.Random(0))
    assert game.solve() is True
    _assert_solved_grid(game.board)
    assert game.is_complete()


def test_make_move_places_solution_value():
    game = _puzzle()
    r, c = _empty_cells(game)[0]
    game.make_move(r, c, game.solution[r][c])
    assert game.board[r][c] == game.solution[r][c]


def test_make_move_rejects_out_of_bounds():
    game = _puzzle()
    with pytest.raises(SudokuMoveError, match="Invalid position"):
        game.make_move(9, 0, 1)
    with pytest.raises(SudokuMoveError, match="Invalid position"):
        game.make_move(0, -1, 1)


def test_make_move_rejects_fixed_cell():
    game = _puzzle()
    r, c = next((r, c) for r in range(9) for c in range(9) if game.is_fixed(r, c))
    with pytest.raises(SudokuMoveError, match="fixed"):
        game.make_move(r, c, game.solution[r][c])


def test_make_move_rejects_bad_number():
    game = _puzzle()
    r, c = _empty_cells(game)[0]
    for num in (0, 10):
        with pytest.raises(SudokuMoveError, match="between 1 and 9"):
            game.make_move(r, c, num)


def test_make_move_rejects_conflict():
    game = _puzzle()
    r, c = next((r, c) for r, c in _empty_cells(game) if any(game.board[r]))
    clash = next(v for v in game.board[r] if v)
    with pytest.raises(SudokuMoveError, match="conflicts"):
        game.make_move(r, c, clash)
    assert game.board[r][c] == 0


def test_filling_solution_completes_puzzle():
    game = _puzzle()
    assert not game.is_complete()
    for r, c in _empty_cells(game):
        game.make_move(r, c, game.solution[r][c])
    assert game.is_complete()
    assert game.board == game.solution


def test_reset_clears_player_moves_only():
    game = _puzzle()
    before = [row[:] for row in game.board]
    for r, c in _empty_cells(game)[:5]:
        game.make_move(r, c, game.solution[r][c])
    game.reset()
    for r in range(9):
        for c in range(9):
            if game.is_fixed(r, c):
                assert game.board[r][c] == before[r][c]
            else:
                assert game.board[r][c] == 0


def test_render_layout():
    game = _puzzle()
    lines = game.render().splitlines()
    assert lines[0] == "   1 2 3 | 4 5 6 | 7 8 9 "
    assert lines[1] == "  -------------------------"
    assert len(lines) == 13
    assert lines[2].startswith("1 |")


def test_render_solution_layout():
    game = _puzzle()
    lines = game.render_solution().splitlines()
    assert lines[3] == "------+-------+------"
    digits = [int(ch) for ch in lines[0] if ch.isdigit()]
    assert digits == game.solution[0]


def test_render_solution_before_generation_raises():
    with pytest.raises(RuntimeError):
        Sudoku().render_solution()


def test_play_solves_scripted_puzzle():
    reference = _puzzle(5, Difficulty.EASY)
    lines = ["1"]
    for r, c in _empty_cells(reference):
        lines += ["1", f"{r + 1} {c + 1} {reference.solution[r][c]}"]
    out = []
    assert play(_reader(lines), out.append, random.Random(5)) is True
    assert "Congratulations! Puzzle solved!" in "".join(out)


def test_play_back_to_menu():
    out = []
    assert play(_reader(["2", "4"]), out.append, random.Random(1)) is False
    assert "=== SUDOKU ===" in "".join(out)


def test_play_reports_move_error():
    out = []
    with pytest.raises(EOFError):
        play(_reader(["1", "1", "0 0 5"]), out.append, random.Random(1))
    assert "Invalid position. Please try again." in "".join(out)


def test_main_requires_game_before_move(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n8\n"))
    assert main(["--seed", "1"]) == 0
    text = capsys.readouterr().out
    assert "Please start a new game first." in text
    assert "Thanks for playing Sudoku!" in text