
"""Collision tests and speculative moves"""
from blockfall_grid import Grid
from blockfall_piece import Part


def collides(grid: Grid, part: Part) -> bool:
    """True if any set mask bit lands on an occupied grid cell.

    Bits that map outside the grid, above it included, never collide. Walls
    and floor are ordinary occupied cells.
    """
    for y, x in part.cells():
        if y < 0 or y >= grid.rows or x < 0 or x >= grid.cols:
            continue
        if grid.occupancy_at(y, x):
            return True
    return False


def try_move(grid: Grid, part: Part, dx: int, dy: int) -> bool:
    part.translate(dx, dy)
    if collides(grid, part):
        part.translate(-dx, -dy)
        return False
    return True


def try_rotate(grid: Grid, part: Part, reverse: bool = False) -> bool:
    part.rotate(reverse)
    if collides(grid, part):
        part.rotate(not reverse)
        return False
    return True
