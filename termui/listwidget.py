"""A list of text items."""

from __future__ import annotations

from .block import Block
from .buffer import Buffer
from .attributes import dtrim_cells
from .textbuilder import DEFAULT_TEXT_BUILDER
from .theme import theme_attr


class List(Block):
    """Items drawn one per row.

    With ``overflow`` set to ``"hidden"`` long items are trimmed with an
    ellipsis; with ``"wrap"`` they continue on the next row.
    """

    def __init__(self) -> None:
        super().__init__()
        self.items: list[str] = []
        self.overflow = "hidden"
        self.item_fg_color = theme_attr("list.item.fg")
        self.item_bg_color = theme_attr("list.item.bg")

    def buffer(self) -> Buffer:
        """The block with the items drawn inside."""
        buf = super().buffer()
        inner = self.inner_area
        dx, dy = inner.dx(), inner.dy()
        fg, bg = self.item_fg_color, self.item_bg_color

        if self.overflow == "wrap":
            cells = DEFAULT_TEXT_BUILDER.build("\n".join(self.items), fg, bg)
            row = col = k = 0
            while row < dy and k < len(cells):
                cell = cells[k]
                if cell.ch == "\n" or col + cell.width() > dx:
                    row += 1
                    col = 0
                    if cell.ch == "\n":
                        k += 1
                    continue
                buf.set(inner.x0 + col, inner.y0 + row, cell)
                k += 1
                col += 1
        elif self.overflow == "hidden":
            for row, item in enumerate(self.items[: max(dy, 0)]):
                cells = dtrim_cells(DEFAULT_TEXT_BUILDER.build(item, fg, bg), dx)
                col = 0
                for cell in cells:
                    buf.set(inner.x0 + col, inner.y0 + row, cell)
                    col += cell.width()
        return buf