"""A progress-bar widget."""

from __future__ import annotations

from .attributes import ATTR_REVERSE, COLOR_DEFAULT, Cell, string_width
from .block import Block
from .buffer import Buffer
from .geometry import Align
from .theme import theme_attr

COLOR_UNDEF = 0xFFFF


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Gauge(Block):
    """A bar filled to ``percent`` with a label that may mention the value."""

    def __init__(self) -> None:
        super().__init__()
        self.percent = 0
        self.bar_color = theme_attr("gauge.bar.bg")
        self.percent_color = theme_attr("gauge.percent.fg")
        self.percent_color_highlighted = COLOR_UNDEF
        self.label = "{{percent}}%"
        self.label_align = Align.CENTER
        self.width = 12
        self.height = 5

    def _bar_bg(self) -> int:
        if self.bar_color == COLOR_DEFAULT:
            return self.bar_color | ATTR_REVERSE
        return self.bar_color

    def buffer(self) -> Buffer:
        """The block with the bar and the label drawn inside."""
        buf = super().buffer()
        inner = self.inner_area
        dx, dy = inner.dx(), inner.dy()
        filled = _tdiv(self.percent * dx, 100)
        bar_bg = self._bar_bg()

        for i in range(dy):
            for j in range(filled):
                buf.set(inner.x0 + j, inner.y0 + i, Cell(" ", 0, bar_bg))

        text = self.label.replace("{{percent}}", str(self.percent))
        row = inner.y0 + _tdiv(dy, 2)
        if self.label_align == Align.CENTER:
            pos = _tdiv(dx - string_width(text), 2)
        elif self.label_align == Align.RIGHT:
            pos = dx - string_width(text) - 1
        else:
            pos = 0
        pos += inner.x0

        for i, ch in enumerate(text):
            if filled + inner.x0 > pos + i:
                fg = self.percent_color
                if self.percent_color_highlighted != COLOR_UNDEF:
                    fg = self.percent_color_highlighted
                cell = Cell(ch, fg, bar_bg)
            else:
                cell = Cell(ch, self.percent_color, self.bg)
            buf.set(1 + pos + i, row, cell)
        return buf