"""The block: the box model every widget is drawn on."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .attributes import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    COLOR_DEFAULT,
    HORIZONTAL_LINE,
    TOP_LEFT,
    TOP_RIGHT,
    VERTICAL_LINE,
    Cell,
    dtrim_cells,
)
from .buffer import Buffer, filled_buffer
from .geometry import Align, Rectangle, align_area, move_area, term_rect
from .textbuilder import DEFAULT_TEXT_BUILDER
from .theme import theme_attr
from .widget import DEFAULT_WIDGET_MANAGER, generate_id


@dataclass
class HLine:
    """A horizontal line of ``length`` cells starting at (x, y)."""

    x: int
    y: int
    length: int
    fg: int = 0
    bg: int = 0

    def buffer(self) -> Buffer:
        if self.length <= 0:
            return Buffer()
        return filled_buffer(
            self.x, self.y, self.x + self.length, self.y + 1, HORIZONTAL_LINE, self.fg, self.bg
        )


@dataclass
class VLine:
    """A vertical line of ``length`` cells starting at (x, y)."""

    x: int
    y: int
    length: int
    fg: int = 0
    bg: int = 0

    def buffer(self) -> Buffer:
        if self.length <= 0:
            return Buffer()
        return filled_buffer(
            self.x, self.y, self.x + 1, self.y + self.length, VERTICAL_LINE, self.fg, self.bg
        )


class Block:
    """A bordered, padded rectangle; the base of all widgets."""

    def __init__(self) -> None:
        self.area = Rectangle()
        self.inner_area = Rectangle()
        self.x = 0
        self.y = 0
        self.border = True
        self.border_left = True
        self.border_right = True
        self.border_top = True
        self.border_bottom = True
        self.border_fg = theme_attr("border.fg")
        self.border_bg = theme_attr("border.bg")
        self.border_label = ""
        self.border_label_fg = theme_attr("label.fg")
        self.border_label_bg = theme_attr("label.bg")
        self.display = True
        self.bg = theme_attr("block.bg")
        self.width = 2
        self.height = 2
        self.padding_top = 0
        self.padding_bottom = 0
        self.padding_left = 0
        self.padding_right = 0
        self.float_align = Align.NONE
        self._id = generate_id()

    @property
    def id(self) -> str:
        return self._id

    @property
    def inner_width(self) -> int:
        return self.inner_area.dx()

    @property
    def inner_height(self) -> int:
        return self.inner_area.dy()

    @property
    def inner_x(self) -> int:
        return self.inner_area.x0

    @property
    def inner_y(self) -> int:
        return self.inner_area.y0

    def align(self) -> None:
        """Compute the outer area and the inner area after padding and border."""
        area = Rectangle(0, 0, self.width, self.height)
        area = align_area(term_rect(), area, self.float_align)
        self.area = move_area(area, self.x, self.y)

        x0 = self.area.x0 + self.padding_left
        y0 = self.area.y0 + self.padding_top
        x1 = self.area.x1 - self.padding_right
        y1 = self.area.y1 - self.padding_bottom
        if self.border:
            if self.border_left:
                x0 += 1
            if self.border_right:
                x1 -= 1
            if self.border_top:
                y0 += 1
            if self.border_bottom:
                y1 -= 1
        self.inner_area = Rectangle(x0, y0, x1, y1)

    def inner_bounds(self) -> Rectangle:
        """The inner area after aligning the block."""
        self.align()
        return self.inner_area

    def _draw_border(self, buf: Buffer) -> None:
        if not self.border:
            return
        x0, y0 = self.area.x0, self.area.y0
        x1, y1 = self.area.x1 - 1, self.area.y1 - 1
        fg, bg = self.border_fg, self.border_bg

        if self.border_top:
            buf.merge(HLine(x0, y0, x1 - x0, fg, bg).buffer())
        if self.border_bottom:
            buf.merge(HLine(x0, y1, x1 - x0, fg, bg).buffer())
        if self.border_left:
            buf.merge(VLine(x0, y0, y1 - y0, fg, bg).buffer())
        if self.border_right:
            buf.merge(VLine(x1, y0, y1 - y0, fg, bg).buffer())

        dx, dy = self.area.dx(), self.area.dy()
        if self.border_top and self.border_left and dx > 0 and dy > 0:
            buf.set(x0, y0, Cell(TOP_LEFT, fg, bg))
        if self.border_top and self.border_right and dx > 1 and dy > 0:
            buf.set(x1, y0, Cell(TOP_RIGHT, fg, bg))
        if self.border_bottom and self.border_left and dx > 0 and dy > 1:
            buf.set(x0, y1, Cell(BOTTOM_LEFT, fg, bg))
        if self.border_bottom and self.border_right and dx > 1 and dy > 1:
            buf.set(x1, y1, Cell(BOTTOM_RIGHT, fg, bg))

    def _draw_border_label(self, buf: Buffer) -> None:
        cells = DEFAULT_TEXT_BUILDER.build(
            self.border_label, self.border_label_fg, self.border_label_bg
        )
        offset = 0
        for cell in dtrim_cells(cells, self.area.dx() - 2):
            buf.set(self.area.x0 + 1 + offset, self.area.y0, cell)
            offset += cell.width()

    def buffer(self) -> Buffer:
        """Background, border and border label of the block."""
        self.align()
        buf = Buffer(self.area)
        buf.fill(" ", COLOR_DEFAULT, self.bg)
        self._draw_border(buf)
        self._draw_border_label(buf)
        return buf

    def handle(self, path: str, handler: Callable[[Any], None]) -> None:
        """Attach an event handler for ``path`` to this block."""
        if self.id not in DEFAULT_WIDGET_MANAGER:
            DEFAULT_WIDGET_MANAGER.add_widget(self)
        DEFAULT_WIDGET_MANAGER.add_handler(self.id, path, handler)