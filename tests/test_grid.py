import pytest

from ringrun.grid import Cell, ObstacleGrid


def test_new_grid_is_empty():
    grid = ObstacleGrid(5, 3)
    assert all(cell is Cell.EMPTY for row in grid for cell in row)
    assert len(list(grid)) == 3
    assert all(len(row) == 5 for row in grid)


def test_place_and_check_with_char():
    grid = ObstacleGrid(10, 4)
    grid.place(2, 7, "w")
    assert grid.check(2, 7, "w")
    assert grid.check(2, 7, Cell.WALL)
    assert not grid.check(2, 7, "s")
    assert grid.cell(2, 7) is Cell.WALL


def test_place_replaces_previous():
    grid = ObstacleGrid(4, 4)
    grid.place(1, 1, Cell.SPIKE)
    grid.place(1, 1, Cell.PIT)
    assert grid.cell(1, 1) is Cell.PIT


def test_cell_letters():
    assert Cell("h") is Cell.PIT
    assert Cell("b") is Cell.BREAKABLE
    assert Cell("p") is Cell.PLATFORM


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 5)])
def test_out_of_bounds(row, col):
    grid = ObstacleGrid(5, 3)
    with pytest.raises(IndexError):
        grid.cell(row, col)
    with pytest.raises(IndexError):
        grid.place(row, col, "w")


def test_unknown_kind_rejected():
    grid = ObstacleGrid(2, 2)
    with pytest.raises(ValueError):
        grid.place(0, 0, "x")


def test_bad_dimensions():
    with pytest.raises(ValueError):
        ObstacleGrid(0, 3)