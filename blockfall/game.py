"""Game rules: spawning, moving, rotating and locking pieces, scoring and levels."""

from __future__ import annotations

import dataclasses
import enum
import random
from typing import Protocol

from .grid import GRID_HEIGHT, GRID_WIDTH, Grid
from .piece import Piece
from .shapes import BlockType, Rotation, RotationDirection, Vec2

_LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}
_LEFT = Vec2(-1, 0)
_RIGHT = Vec2(1, 0)
_DOWN = Vec2(0, 1)


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class GameState(enum.Enum):
    PLAYING = 0
    PAUSED = 1
    GAME_OVER = 2


class Action(enum.Enum):
    PAUSE = "pause"
    RESUME = "resume"
    MOVE_RIGHT = "move_right"
    MOVE_LEFT = "move_left"
    MOVE_DOWN = "move_down"
    HARD_DROP = "hard_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"


class Game:
    """A single game: the field, the falling piece, the next piece and the score."""

    def __init__(self, rng: _RandomSource | None = None) -> None:
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self._start()

    def _start(self) -> None:
        self.grid = Grid(GRID_WIDTH, GRID_HEIGHT)
        self.current_piece: Piece | None = None
        self.next_piece: Piece = self._generate_piece()
        self._score = 0
        self._level = 1
        self._state = GameState.PLAYING
        self._gravity_timer = 0.0
        self._gravity_interval = 1.0
        self._lines_cleared = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        return self._level

    @property
    def lines_cleared(self) -> int:
        return self._lines_cleared

    @property
    def gravity_timer(self) -> float:
        return self._gravity_timer

    @property
    def gravity_interval(self) -> float:
        return self._gravity_interval

    @property
    def grid_width(self) -> int:
        return self.grid.width

    @property
    def grid_height(self) -> int:
        return self.grid.height

    def grid_data(self) -> list[int]:
        """Integer codes of all grid cells, row by row from the top."""
        return self.grid.cell_data()

    def piece_positions(self, piece: Piece) -> Rotation:
        """Board coordinates of the blocks of a piece."""
        return piece.absolute_block_positions()

    def spawn_piece(self) -> bool:
        """Bring the next piece onto the field; end the game if it does not fit."""
        spawn_pos = Vec2(self.grid.width // 2 - 1, 0)
        new_piece = dataclasses.replace(self.next_piece, pos=spawn_pos, rot_state=0)

        if self._collides(new_piece, new_piece.pos, new_piece.rot_state):
            self._state = GameState.GAME_OVER
            return False

        self.current_piece = new_piece
        self.next_piece = self._generate_piece()
        return True

    def try_move(self, delta: Vec2) -> bool:
        """Shift the current piece by delta if the game is running and it fits."""
        piece = self.current_piece
        if self._state is not GameState.PLAYING or piece is None:
            return False
        target = piece.pos + delta
        if self._collides(piece, target, piece.rot_state):
            return False
        piece.pos = target
        return True

    def try_rotate(self, direction: RotationDirection) -> bool:
        """Turn the current piece once if the game is running and it fits."""
        piece = self.current_piece
        if self._state is not GameState.PLAYING or piece is None:
            return False
        next_state = piece.next_rotation_state(direction)
        if self._collides(piece, piece.pos, next_state):
            return False
        piece.rot_state = next_state
        return True

    def handle_input(self, action: Action) -> None:
        """Apply a player action."""
        if action is Action.PAUSE:
            if self._state is GameState.PLAYING:
                self._state = GameState.PAUSED
        elif action is Action.RESUME:
            if self._state is GameState.PAUSED:
                self._state = GameState.PLAYING
            elif self._state is GameState.GAME_OVER:
                self.reset()
        elif action is Action.MOVE_LEFT:
            self.try_move(_LEFT)
        elif action is Action.MOVE_RIGHT:
            self.try_move(_RIGHT)
        elif action is Action.MOVE_DOWN:
            if not self._try_move_down():
                self._lock_piece()
        elif action is Action.HARD_DROP:
            rows_dropped = 0
            while self._try_move_down():
                rows_dropped += 1
            if rows_dropped:
                self._update_score(0, rows_dropped)
            self._lock_piece()
        elif action is Action.ROTATE_CW:
            self.try_rotate(RotationDirection.CLOCKWISE)
        elif action is Action.ROTATE_CCW:
            self.try_rotate(RotationDirection.COUNTER_CLOCKWISE)

    def update(self, delta_time: float) -> bool:
        """Advance gravity by delta_time seconds; False if nothing is falling."""
        if self._state is not GameState.PLAYING or self.current_piece is None:
            return False
        self._gravity_timer += delta_time
        if self._gravity_timer >= self._gravity_interval:
            self._gravity_timer = 0.0
            if not self._try_move_down():
                self._lock_piece()
        return True

    def reset(self) -> None:
        """Start a fresh game and spawn its first piece."""
        self._start()
        self.spawn_piece()

    def _generate_piece(self) -> Piece:
        block_type = BlockType.from_index(self._rng.randrange(7))
        return Piece(block_type, Vec2(GRID_WIDTH + 2, 2))

    def _collides(self, piece: Piece, position: Vec2, rotation_state: int) -> bool:
        return any(
            self.grid.is_coord_occupied(block)
            for block in piece.absolute_block_positions_at(position, rotation_state)
        )

    def _lock_piece(self) -> None:
        piece = self.current_piece
        if piece is None:
            return
        self.current_piece = None
        for block in piece.absolute_block_positions():
            if not self.grid.is_coord_within_bounds(block):
                self._state = GameState.GAME_OVER
                return
            self.grid.set_cell(block.x, block.y, piece.block_type)
        cleared = self.grid.clear_lines()
        self._update_score(cleared, 0)
        self.spawn_piece()

    def _update_score(self, lines_cleared: int, rows_dropped: int) -> None:
        if lines_cleared == 0 and rows_dropped == 0:
            return
        line_score = _LINE_SCORES.get(lines_cleared, 0) * self._level
        self._score += line_score + rows_dropped
        self._lines_cleared += lines_cleared
        self._level = self._lines_cleared // 10 + 1

    def _try_move_down(self) -> bool:
        return self.try_move(_DOWN)