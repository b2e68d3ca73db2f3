"""Small terminal games: Blackjack, Sudoku, Minesweeper, Sea Battle, Tic-Tac-Toe and Snake, with an arcade menu."""

__version__ = "0.1.0"