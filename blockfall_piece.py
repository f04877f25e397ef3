
"""Piece catalog and the falling part"""
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

Mask = Tuple[Tuple[int, ...], ...]

SPAWN_Y = -4   # one full mask height above the visible top


def _mask(*rows: str) -> Mask:
    return tuple(tuple(int(ch == "#") for ch in row) for row in rows)


@dataclass(frozen=True)
class Shape:
    name: str
    rotations: Tuple[Mask, ...]


SHAPES: Dict[str, Shape] = {
    "I": Shape("I", (
        _mask("....", "####", "....", "...."),
        _mask("..#.", "..#.", "..#.", "..#."),
    )),
    "J": Shape("J", (
        _mask("#...", "###.", "....", "...."),
        _mask(".##.", ".#..", ".#..", "...."),
        _mask("....", "###.", "..#.", "...."),
        _mask(".#..", ".#..", "##..", "...."),
    )),
    "L": Shape("L", (
        _mask("..#.", "###.", "....", "...."),
        _mask(".#..", ".#..", ".##.", "...."),
        _mask("....", "###.", "#...", "...."),
        _mask("##..", ".#..", ".#..", "...."),
    )),
    "O": Shape("O", (
        _mask(".##.", ".##.", "....", "...."),
    )),
    "S": Shape("S", (
        _mask(".##.", "##..", "....", "...."),
        _mask("#...", "##..", ".#..", "...."),
    )),
    "T": Shape("T", (
        _mask(".#..", "###.", "....", "...."),
        _mask(".#..", ".##.", ".#..", "...."),
        _mask("....", "###.", ".#..", "...."),
        _mask(".#..", "##..", ".#..", "...."),
    )),
    "Z": Shape("Z", (
        _mask("##..", ".##.", "....", "...."),
        _mask("..#.", ".##.", ".#..", "...."),
    )),
}
SHAPE_NAMES = tuple(sorted(SHAPES))


@dataclass
class Part:
    shape: Shape
    rotation: int
    x: int
    y: int

    @staticmethod
    def spawn(cols: int, rng) -> "Part":
        """New part at rotation 0, near the middle, entirely above the grid.

        The horizontal jitter is one cell; the result is clamped so the 4x4
        mask stays between the side walls.
        """
        shape = SHAPES[rng.choice(SHAPE_NAMES)]
        x = (cols - 4) // 2 + rng.randrange(2)
        x = max(1, min(x, cols - 5))
        return Part(shape, 0, x, SPAWN_Y)

    @property
    def mask(self) -> Mask:
        return self.shape.rotations[self.rotation]

    def rotate(self, reverse: bool = False):
        n = len(self.shape.rotations)
        self.rotation = (self.rotation + (-1 if reverse else 1)) % n

    def translate(self, dx: int, dy: int):
        self.x += dx
        self.y += dy

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Grid (row, col) of every set mask bit, bounds unchecked."""
        for r, line in enumerate(self.mask):
            for c, v in enumerate(line):
                if v:
                    yield self.y + r, self.x + c
