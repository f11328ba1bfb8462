"""A table of strings with optional row separators."""

from __future__ import annotations

from .attributes import COLOR_DEFAULT, COLOR_WHITE, Cell
from .block import Block
from .buffer import Buffer
from .geometry import Align
from .textbuilder import DEFAULT_TEXT_BUILDER


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cells_width(cells: list[Cell]) -> int:
    return sum(cell.width() for cell in cells)


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


class Table(Block):
    """Rows of marked-up strings laid out in columns.

    Per-row colours in ``fg_colors`` and ``bg_colors`` that are 0 fall back
    to ``fg_color`` and ``bg_color``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.rows: list[list[str]] = []
        self.cell_width: list[int] = []
        self.fg_color = COLOR_WHITE
        self.bg_color = COLOR_DEFAULT
        self.fg_colors: list[int] = []
        self.bg_colors: list[int] = []
        self.separator = True
        self.text_align = Align.NONE

    def analysis(self) -> list[list[Cell]]:
        """Cells of every table entry, row by row; also sets column widths."""
        if not self.rows:
            return []
        if not self.fg_colors:
            self.fg_colors = [0] * len(self.rows)
        if not self.bg_colors:
            self.bg_colors = [0] * len(self.rows)

        widths = [0] * len(self.rows[0])
        row_cells: list[list[Cell]] = []
        for y, row in enumerate(self.rows):
            if self.fg_colors[y] == 0:
                self.fg_colors[y] = self.fg_color
            if self.bg_colors[y] == 0:
                self.bg_colors[y] = self.bg_color
            for x, text in enumerate(row):
                cells = DEFAULT_TEXT_BUILDER.build(text, self.fg_colors[y], self.bg_colors[y])
                widths[x] = max(widths[x], _cells_width(cells))
                row_cells.append(cells)
        self.cell_width = widths
        return row_cells

    def set_size(self) -> None:
        """Size the block to fit the rows and the computed column widths."""
        length = len(self.rows)
        self.height = length * 2 + 1 if self.separator else length + 2
        self.width = 2
        if length:
            self.width += sum(w + 3 for w in self.cell_width)

    def calculate_position(self, x: int, y: int, cell_start: int) -> tuple[int, int, int]:
        """Text column, row and cell start of entry (x, y).

        ``cell_start`` is the start of the previous cell in the row; it is
        ignored for the first column.
        """
        inner = self.inner_area
        coordinate_y = inner.y0 + y * 2 if self.separator else inner.y0 + y
        if x == 0:
            cell_start = inner.x0
        else:
            cell_start += self.cell_width[x - 1] + 3

        slack = self.cell_width[x] - _byte_len(self.rows[y][x])
        if self.text_align == Align.RIGHT:
            coordinate_x = cell_start + slack + 2
        elif self.text_align == Align.CENTER:
            coordinate_x = cell_start + _tdiv(slack, 2) + 2
        else:
            coordinate_x = cell_start + 2
        return coordinate_x, coordinate_y, cell_start

    def buffer(self) -> Buffer:
        """The block with every entry, column divider and separator drawn."""
        buf = super().buffer()
        row_cells = self.analysis()
        pointer_y = self.inner_area.y0
        cell_start = self.inner_area.x0

        for y, row in enumerate(self.rows):
            bg_row = self.bg_colors[y] if self.bg_colors else self.bg_color
            fg_row = self.fg_colors[y] if self.fg_colors else self.fg_color
            for x in range(len(row)):
                pointer_x, pointer_y, cell_start = self.calculate_position(x, y, cell_start)
                background = DEFAULT_TEXT_BUILDER.build(
                    " " * (self.cell_width[x] + 3), bg_row, bg_row
                )
                for i, cell in enumerate(background):
                    buf.set(cell_start + i, pointer_y, cell)

                column = pointer_x
                for cell in row_cells[y * len(row) + x]:
                    buf.set(column, pointer_y, cell)
                    column += cell.width()

                if x != 0:
                    for cell in DEFAULT_TEXT_BUILDER.build("|", fg_row, bg_row):
                        buf.set(cell_start, pointer_y, cell)

            if self.separator:
                border = DEFAULT_TEXT_BUILDER.build(
                    "─" * (self.width - 2), self.fg_color, self.bg_color
                )
                for i, cell in enumerate(border):
                    buf.set(i + 1, pointer_y + 1, cell)
        return buf