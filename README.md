# miniarcade

A handful of small games that run in your terminal:

- **Blackjack (21)**: one hand against a dealer who draws until reaching 17.
- **Sudoku**: a generated puzzle at easy, medium or hard difficulty (40, 50 or 60
  cells blanked).
- **Minesweeper**: a 10×10 field that hides 15 mines.
- **Sea Battle**: five one-square ships hidden on a 10×10 sea.
- **Tic-Tac-Toe**: two players share one keyboard.
- **Snake**: eat the food, grow longer, and stay off the walls and your own tail.

## Installation

```
pip install .
```

miniarcade needs Python 3.10 or newer and has no third-party dependencies.

## Playing

Start the arcade menu and pick a game by its number (1 to 5, 6 to exit):

```
miniarcade
```

Each game also has its own command:

```
miniarcade-blackjack
miniarcade-sudoku
miniarcade-minesweeper
miniarcade-seabattle
miniarcade-tictactoe
miniarcade-snake
```

Every command except `miniarcade-tictactoe` accepts `--seed N` to make the shuffle,
puzzle, mine, ship or food placement repeatable. `miniarcade-snake` also accepts
`--high-score-file PATH`.

### Controls

- **Blackjack**: type `h` to hit. Anything else stands.
- **Sudoku**: give a row, a column and a number, each from 1 to 9. Cells that came
  with the puzzle cannot be changed. From the arcade menu you play one puzzle with the
  options make move, show solution, reset board and back to menu. `miniarcade-sudoku`
  has its own menu for new games at each difficulty, moves, showing the solution,
  resetting the board and checking whether the puzzle is complete.
- **Minesweeper**: give a row and a column, each from 0 to 9. Revealing a cell with no
  neighbouring mines also opens the cells around it.
- **Sea Battle**: give a row and a column, each from 0 to 9, then press Enter after
  each shot. `X` marks a hit and `O` marks a miss.
- **Tic-Tac-Toe**: players take turns giving a row and a column, each from 1 to 3.
- **Snake**: steer with WASD or the arrow keys and press `P` to pause. The snake speeds
  up as your score rises (150 ms per move, 2 ms faster per point, never below 50 ms).
  After a crash, press `R` to play again or `Q` to quit. A new best score is written to
  `highscore.txt` in the current directory unless `--high-score-file` names another
  file.

## Using the games from Python

Each game keeps its rules apart from input and output, so it can be driven from code:

```python
import random
from miniarcade.tictactoe import TicTacToe, InvalidMoveError
from miniarcade.minesweeper import Minesweeper
from miniarcade.sudoku import Sudoku, Difficulty
from miniarcade.seabattle import SeaBattle

game = TicTacToe()
game.make_move(0, 0)          # raises InvalidMoveError for a bad square
print(game.render())

field = Minesweeper(random.Random(1))
hit_mine = field.reveal(0, 0)  # True if the cell held a mine

puzzle = Sudoku(random.Random(1))
puzzle.generate_puzzle(Difficulty.MEDIUM)
print(puzzle.render())

sea = SeaBattle(random.Random(1))
print(sea.shoot(3, 4))         # ShotResult.HIT, MISS or ALREADY_SHOT
```

The console games also expose `play(read, write, ...)`, which takes a function that
returns one line of input and a function that writes text, so a whole game can be run
against scripted input.

## Limitations

- Snake draws with the standard `curses` module, which a stock Python on Windows does
  not include; there `miniarcade-snake` will not start. The other games need only plain
  text input and output.
- Nothing is saved between sessions except Snake's high score.
- Sea Battle ships each occupy a single square; there is no second player or computer
  opponent.

## Running the tests

```
pip install .[test]
pytest
```