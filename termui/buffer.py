"""A sparse, renderable container of cells."""

from __future__ import annotations

from .attributes import Cell
from .geometry import Point, Rectangle

_BLANK = Cell("\x00")


class Buffer:
    """Cells keyed by position, together with the area they are drawn in."""

    def __init__(self, area: Rectangle | None = None) -> None:
        self.area = area if area is not None else Rectangle()
        self.cells: dict[Point, Cell] = {}

    def at(self, x: int, y: int) -> Cell:
        """The cell at (x, y), or a blank cell when nothing is set there."""
        return self.cells.get(Point(x, y), _BLANK)

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Put ``cell`` at (x, y)."""
        self.cells[Point(x, y)] = cell

    def bounds(self) -> Rectangle:
        """Rectangle covering every set cell and the origin."""
        x0 = y0 = x1 = y1 = 0
        for p in self.cells:
            x0 = min(x0, p.x)
            x1 = max(x1, p.x)
            y0 = min(y0, p.y)
            y1 = max(y1, p.y)
        return Rectangle(x0, y0, x1 + 1, y1 + 1)

    def sync(self) -> None:
        """Make the drawing area match the buffer's bounds."""
        self.area = self.bounds()

    def merge(self, *buffers: Buffer) -> None:
        """Copy the cells of ``buffers`` on top of this one and grow the area."""
        for other in buffers:
            self.cells.update(other.cells)
            self.area = self.area.union(other.area)

    def fill(self, ch: str, fg: int, bg: int) -> None:
        """Set every cell of the area to ``ch`` with the given colours."""
        cell = Cell(ch, fg, bg)
        for x in range(self.area.x0, self.area.x1):
            for y in range(self.area.y0, self.area.y1):
                self.cells[Point(x, y)] = cell


def filled_buffer(x0: int, y0: int, x1: int, y1: int, ch: str, fg: int, bg: int) -> Buffer:
    """A buffer over [x0, x1) x [y0, y1) filled with ``ch``."""
    buf = Buffer(Rectangle(x0, y0, x1, y1))
    buf.fill(ch, fg, bg)
    return buf