import pytest

from blockfall.grid import GRID_HEIGHT, GRID_WIDTH, Grid
from blockfall.shapes import BlockType, Vec2


def _fill_row(grid, y, block=BlockType.I):
    for x in range(grid.width):
        grid.set_cell(x, y, block)


def test_grid_new():
    grid = Grid(GRID_WIDTH, GRID_HEIGHT)
    assert grid.width == GRID_WIDTH
    assert grid.height == GRID_HEIGHT
    data = grid.cell_data()
    assert len(data) == GRID_WIDTH * GRID_HEIGHT
    assert all(code == 7 for code in data)


@pytest.mark.parametrize(
    "x, y, index",
    [(0, 0, 0), (9, 0, 9), (0, 1, 10), (9, 19, 10 * 19 + 9)],
)
def test_grid_cell_data_layout(x, y, index):
    grid = Grid(10, 20)
    grid.set_cell(x, y, BlockType.S)
    data = grid.cell_data()
    assert data[index] == int(BlockType.S)
    assert sum(1 for code in data if code != 7) == 1


@pytest.mark.parametrize("x, y", [(10, 0), (0, 20), (-1, 0)])
def test_grid_index_out_of_range(x, y):
    grid = Grid(10, 20)
    with pytest.raises(IndexError):
        grid.cell(x, y)
    with pytest.raises(IndexError):
        grid.set_cell(x, y, BlockType.I)


def test_grid_get_cell():
    grid = Grid(5, 5)
    assert grid.cell(0, 0) is BlockType.EMPTY
    assert grid.cell(4, 4) is BlockType.EMPTY
    with pytest.raises(IndexError):
        grid.cell(5, 0)
    grid.set_cell(2, 2, BlockType.I)
    assert grid.cell(2, 2) is BlockType.I


def test_grid_is_cell_occupied_within_bounds():
    grid = Grid(5, 5)
    assert not grid.is_cell_occupied(0, 0)
    grid.set_cell(2, 2, BlockType.L)
    assert grid.is_within_bounds(2, 2)
    assert grid.is_cell_occupied(2, 2)
    assert grid.is_coord_occupied(Vec2(2, 2))
    assert not grid.is_coord_occupied(Vec2(1, 2))


def test_grid_is_cell_occupied_out_of_bounds():
    grid = Grid(5, 5)
    assert grid.is_cell_occupied(-1, 0)
    assert grid.is_cell_occupied(5, 0)
    assert grid.is_coord_occupied(Vec2(0, 5))


def test_grid_is_within_bounds():
    grid = Grid(10, 20)
    assert grid.is_within_bounds(0, 0)
    assert grid.is_within_bounds(9, 19)
    assert grid.is_within_bounds(5, 10)
    assert not grid.is_within_bounds(-1, 0)
    assert not grid.is_within_bounds(10, 0)
    assert not grid.is_within_bounds(0, -1)
    assert not grid.is_within_bounds(0, 20)
    assert not grid.is_within_bounds(10, 20)
    assert grid.is_coord_within_bounds(Vec2(9, 19))
    assert not grid.is_coord_within_bounds(Vec2(10, 19))


def test_clear_lines_none_full():
    grid = Grid(4, 4)
    grid.set_cell(0, 3, BlockType.T)
    before = grid.cell_data()
    assert grid.clear_lines() == 0
    assert grid.cell_data() == before


def test_clear_single_line_drops_rows_above():
    grid = Grid(4, 4)
    _fill_row(grid, 3)
    grid.set_cell(1, 2, BlockType.Z)
    assert grid.clear_lines() == 1
    assert grid.cell(1, 3) is BlockType.Z
    assert not any(grid.is_cell_occupied(x, 2) for x in range(4))
    assert sum(1 for code in grid.cell_data() if code != 7) == 1


def test_clear_non_adjacent_lines():
    grid = Grid(3, 5)
    _fill_row(grid, 4)
    _fill_row(grid, 2)
    grid.set_cell(0, 3, BlockType.J)
    grid.set_cell(2, 1, BlockType.O)
    assert grid.clear_lines() == 2
    assert grid.cell(0, 4) is BlockType.J
    assert grid.cell(2, 3) is BlockType.O
    assert all(grid.cell(x, y) is BlockType.EMPTY for y in range(3) for x in range(3))


def test_clear_all_lines():
    grid = Grid(2, 3)
    for y in range(3):
        _fill_row(grid, y, BlockType.S)
    assert grid.clear_lines() == 3
    assert grid.cell_data() == [7] * 6