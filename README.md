# blockfall

The rules of a falling-block puzzle game, with no engine or renderer
attached. The package covers the board, the seven four-block pieces and
their rotations, collision checks, line clearing, scoring and levels.

## Installation

```
pip install .
```

The package uses only the standard library.

## Overview

- `blockfall.shapes`: `Vec2` for integer grid coordinates (x to the right,
  y downwards), `BlockType` (I, J, L, O, S, T, Z and `EMPTY`, whose integer
  values 0 to 7 are the codes in grid data), `RotationDirection`, and the
  fixed rotation tables, looked up with `template_for`.
- `blockfall.piece`: `Piece` holds a block type, a position and a rotation
  state. It computes the board cells the piece fills, its pivot position,
  and the rotation state after one turn.
- `blockfall.grid`: `Grid(width, height)` is a board of cells. Any
  coordinate outside the board counts as occupied. `clear_lines` removes
  full rows, shifts the rows above them down, and returns the number of
  rows removed. `GRID_WIDTH` and `GRID_HEIGHT` (10 and 20) give the size a
  game uses.
- `blockfall.game`: `Game` brings these together. It has a `GameState`
  (playing, paused, game over) and reacts to each `Action`.

## Usage

```python
import random

from blockfall.game import Action, Game, GameState
from blockfall.shapes import Vec2

game = Game(random.Random(42))  # any object with randrange(stop) will do
game.spawn_piece()

game.handle_input(Action.MOVE_LEFT)
game.handle_input(Action.ROTATE_CW)
game.try_move(Vec2(1, 0))

# Call once per frame with the seconds since the last frame.
game.update(0.016)

game.handle_input(Action.HARD_DROP)

print(game.score, game.level, game.state)
cells = game.grid_data()  # row-major block-type codes; 7 marks an empty cell
if game.current_piece is not None:
    print(game.piece_positions(game.current_piece))

if game.state is GameState.GAME_OVER:
    game.handle_input(Action.RESUME)  # starts a fresh game
```

A new `Game` has no falling piece. Call `spawn_piece()` (or `reset()`) to
start. Each piece spawns at the top of the board at column
`width // 2 - 1`. If it does not fit there, the game is over and
`spawn_piece()` returns `False`.

### Gravity

`update(delta_time)` adds up elapsed time. When the total reaches the
gravity interval of one second, the timer resets and the current piece
moves down one row. If the piece cannot move, it locks in place.
`update` returns `False` when the game is not in play or no piece is
falling. The interval stays the same at every level.

### Locking

A locked piece's blocks go into the grid, full rows are cleared, the score
is updated and the next piece spawns. `MOVE_DOWN` locks the piece when it
cannot move down. `HARD_DROP` moves it as far down as it will go, then
locks it.

### Scoring

Clearing 1, 2, 3 or 4 lines at once scores 100, 300, 500 or 800 points,
multiplied by the current level. A hard drop adds one point for each row
dropped. The level starts at 1 and goes up by one for every 10 lines
cleared.

### Pausing and restarting

`Action.PAUSE` pauses a game in play. `Action.RESUME` continues a paused
game, or starts a new one after game over. While the game is not in play,
moves, rotations and gravity do nothing. `MOVE_DOWN` and `HARD_DROP` still
lock the current piece.

## What the package does not do

It has no drawing, key handling, frame loop or command to run. A front
end reads `grid_data()`, `current_piece`, `next_piece`, `score`, `level`
and `state`, turns key presses into `Action` values, and calls `update`
every frame.

## Running the tests

```
pip install ".[test]"
pytest
```