"""A braille dot canvas: each terminal cell holds a 2x4 grid of dots."""

from __future__ import annotations

from .attributes import Cell
from .buffer import Buffer

BRAILLE_BASE = 0x2800

# Dot bits by (row % 4, column % 2):
#   1 4
#   2 5
#   3 6
#   7 8
_DOT_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)


def _locate(x: int, y: int) -> tuple[tuple[int, int], int]:
    if x < 0 or y < 0:
        raise ValueError(f"canvas coordinates must be non-negative: ({x}, {y})")
    return (y // 4, x // 2), _DOT_BITS[y % 4][x % 2]


class Canvas:
    """Dots in virtual coordinates, stored as braille offsets per cell key."""

    def __init__(self) -> None:
        self.cells: dict[tuple[int, int], int] = {}

    def set(self, x: int, y: int) -> None:
        """Turn on the dot at (x, y)."""
        key, bit = _locate(x, y)
        self.cells[key] = self.cells.get(key, 0) | bit

    def unset(self, x: int, y: int) -> None:
        """Turn off the dot at (x, y)."""
        key, bit = _locate(x, y)
        self.cells[key] = self.cells.get(key, 0) & ~bit

    def buffer(self) -> Buffer:
        """Unstyled braille cells, placed at the stored keys."""
        buf = Buffer()
        for (i, j), bits in self.cells.items():
            buf.set(i, j, Cell(chr(BRAILLE_BASE + bits)))
        return buf