[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniarcade"
version = "0.1.0"
description = "Small terminal games: Blackjack, Sudoku, Minesweeper, Sea Battle, Tic-Tac-Toe and Snake."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "blackjack", "sudoku", "minesweeper", "tictactoe", "snake", "battleship"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miniarcade = "miniarcade.arcade:main"
miniarcade-blackjack = "miniarcade.blackjack:main"
miniarcade-tictactoe = "miniarcade.tictactoe:main"
miniarcade-minesweeper = "miniarcade.minesweeper:main"
miniarcade-sudoku = "miniarcade.sudoku:main"
miniarcade-seabattle = "miniarcade.seabattle:main"
miniarcade-snake = "miniarcade.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["miniarcade"]

[tool.pytest.ini_options]
addopts = "-ra"
