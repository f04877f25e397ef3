
"""Grid model: walls, floor, merge, row clearing"""
import logging
from dataclasses import dataclass
from typing import List, Tuple

log = logging.getLogger(__name__)

Cells = List[List[int]]


def blank_row(cols: int, floor: bool = False) -> List[int]:
    return [int(c == 0 or c == cols - 1 or floor) for c in range(cols)]


@dataclass
class Grid:
    rows: int
    cols: int
    cells: Cells

    @classmethod
    def initialize(cls, rows: int, cols: int) -> "Grid":
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid size must be positive, got {rows}x{cols}")
        cells = [blank_row(cols, r == rows - 1) for r in range(rows)]
        return cls(rows, cols, cells)

    def occupancy_at(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def merge(self, part) -> None:
        """OR the part's mask into the grid, skipping cells that fall outside it."""
        for y, x in part.cells():
            if 0 <= y < self.rows and 0 <= x < self.cols:
                self.cells[y][x] = 1

    def clear_completed_rows(self) -> int:
        # the floor row is never a candidate
        complete = [r for r in range(self.rows - 2, -1, -1) if all(self.cells[r])]
        if not complete:
            return 0
        doomed = set(complete)
        kept = [row for r, row in enumerate(self.cells) if r not in doomed]
        self.cells = [blank_row(self.cols) for _ in complete] + kept
        log.info("cleared %d row(s)", len(complete))
        return len(complete)

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.cells)
