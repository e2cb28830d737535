"""The playing field: a rectangle of cells holding block types."""

from __future__ import annotations

from .shapes import BlockType, Vec2

GRID_WIDTH = 10
GRID_HEIGHT = 20


class Grid:
    """A width x height field of cells, stored row by row from the top."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells: list[BlockType] = [BlockType.EMPTY] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not self.is_within_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return y * self.width + x

    def cell_data(self) -> list[int]:
        """Integer codes of all cells, row by row from the top."""
        return [int(block) for block in self._cells]

    def cell(self, x: int, y: int) -> BlockType:
        """Block type at (x, y); raise IndexError outside the grid."""
        return self._cells[self._index(x, y)]

    def set_cell(self, x: int, y: int, block_type: BlockType) -> None:
        """Store a block type at (x, y); raise IndexError outside the grid."""
        self._cells[self._index(x, y)] = block_type

    def is_cell_occupied(self, x: int, y: int) -> bool:
        """True if the cell holds a block or lies outside the grid."""
        if not self.is_within_bounds(x, y):
            return True
        return self._cells[y * self.width + x] is not BlockType.EMPTY

    def is_within_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_coord_within_bounds(self, coord: Vec2) -> bool:
        return self.is_within_bounds(coord.x, coord.y)

    def is_coord_occupied(self, coord: Vec2) -> bool:
        return self.is_cell_occupied(coord.x, coord.y)

    def _rows(self) -> list[list[BlockType]]:
        return [
            self._cells[y * self.width : (y + 1) * self.width]
            for y in range(self.height)
        ]

    def clear_lines(self) -> int:
        """Remove full rows, drop the rows above them, and return how many went."""
        kept = [
            row for row in self._rows() if any(b is BlockType.EMPTY for b in row)
        ]
        cleared = self.height - len(kept)
        if cleared:
            empty_rows = [BlockType.EMPTY] * (cleared * self.width)
            self._cells = empty_rows + [block for row in kept for block in row]
        return cleared