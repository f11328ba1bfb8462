"""A paragraph of text."""

from __future__ import annotations

from .attributes import DOT, Cell
from .block import Block
from .buffer import Buffer
from .textbuilder import DEFAULT_TEXT_BUILDER, wrap_cells
from .theme import theme_attr


class Paragraph(Block):
    """Marked-up text drawn inside a block, optionally word-wrapped.

    A positive ``wrap_length`` wraps at that many characters; a negative one
    wraps at the block width less two.
    """

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text
        self.text_fg_color = theme_attr("par.text.fg")
        self.text_bg_color = theme_attr("par.text.bg")
        self.wrap_length = 0

    def buffer(self) -> Buffer:
        """The block with the text laid out row by row."""
        buf = super().buffer()
        fg, bg = self.text_fg_color, self.text_bg_color
        cells = DEFAULT_TEXT_BUILDER.build(self.text, fg, bg)
        if self.wrap_length < 0:
            cells = wrap_cells(cells, self.width - 2)
        elif self.wrap_length > 0:
            cells = wrap_cells(cells, self.wrap_length)

        inner = self.inner_area
        dx, dy = inner.dx(), inner.dy()
        x = y = n = 0
        while y < dy and n < len(cells):
            cell = cells[n]
            w = cell.width()
            if cell.ch == "\n" or x + w > dx:
                y += 1
                x = 0
                if cell.ch == "\n":
                    n += 1
                if y >= dy:
                    buf.set(inner.x0 + dx - 1, inner.y0 + dy - 1, Cell(DOT, fg, bg))
                    break
                continue
            buf.set(inner.x0 + x, inner.y0 + y, cell)
            n += 1
            x += w
        return buf