import pytest

from blockfall_grid import Grid, blank_row
from blockfall_piece import SHAPES, Part


def assert_borders(grid):
    assert all(grid.cells[r][0] == 1 for r in range(grid.rows))
    assert all(grid.cells[r][grid.cols - 1] == 1 for r in range(grid.rows))
    assert all(grid.cells[grid.rows - 1])


def fill_row(grid, r):
    grid.cells[r] = [1] * grid.cols


def test_initialize_walls_and_floor():
    g = Grid.initialize(21, 12)
    assert len(g.cells) == 21 and all(len(row) == 12 for row in g.cells)
    assert_borders(g)
    assert g.cells[0] == [1] + [0] * 10 + [1]
    assert g.occupancy_at(20, 5) == 1
    assert g.occupancy_at(10, 5) == 0


@pytest.mark.parametrize("rows,cols", [(0, 12), (21, 0), (-1, 5)])
def test_initialize_rejects_bad_size(rows, cols):
    with pytest.raises(ValueError):
        Grid.initialize(rows, cols)


def test_blank_row():
    assert blank_row(5) == [1, 0, 0, 0, 1]
    assert blank_row(5, floor=True) == [1, 1, 1, 1, 1]


def test_merge_ors_mask_into_grid():
    g = Grid.initialize(21, 12)
    p = Part(SHAPES["O"], 0, 4, 10)
    g.merge(p)
    assert g.cells[10][5:7] == [1, 1]
    assert g.cells[11][5:7] == [1, 1]
    assert sum(map(sum, g.cells)) == sum(map(sum, Grid.initialize(21, 12).cells)) + 4
    assert_borders(g)


def test_merge_skips_cells_above_grid():
    g = Grid.initialize(21, 12)
    # I vertical occupies mask column 2, rows 0..3; only rows 0 and 1 land on the grid
    p = Part(SHAPES["I"], 1, 3, -2)
    g.merge(p)
    assert g.cells[0][5] == 1
    assert g.cells[1][5] == 1
    assert g.cells[2][5] == 0


def test_merge_skips_cells_right_of_grid():
    g = Grid.initialize(6, 6)
    p = Part(SHAPES["I"], 0, 4, 2)
    g.merge(p)
    assert g.cells[3] == [1, 0, 0, 0, 1, 1]
    assert len(g.cells[3]) == 6


def test_clear_no_rows():
    g = Grid.initialize(21, 12)
    assert g.clear_completed_rows() == 0
    assert g.cells == Grid.initialize(21, 12).cells


def test_clear_counts_and_compacts():
    g = Grid.initialize(10, 6)
    fill_row(g, 8)
    fill_row(g, 5)
    g.cells[7][2] = 1    # partial row above the cleared one must drop by one
    g.cells[4][3] = 1    # partial row above both drops by two
    assert g.clear_completed_rows() == 2
    assert len(g.cells) == 10
    assert_borders(g)
    assert g.cells[8] == [1, 0, 1, 0, 0, 1]
    assert g.cells[6] == [1, 0, 0, 1, 0, 1]
    assert g.cells[0] == blank_row(6)
    assert g.cells[1] == blank_row(6)
    assert sum(all(row) for row in g.cells) == 1


def test_clear_never_counts_floor_and_inserts_walled_rows():
    g = Grid.initialize(5, 4)
    for r in range(4):
        fill_row(g, r)
    assert g.clear_completed_rows() == 4
    assert g.cells[:4] == [blank_row(4)] * 4
    assert g.cells[4] == [1, 1, 1, 1]


def test_snapshot_is_a_copy():
    g = Grid.initialize(4, 4)
    snap = g.snapshot()
    g.cells[0][1] = 1
    assert snap[0] == (1, 0, 0, 1)
