"""Sparklines: compact bar graphs of non-negative integers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .attributes import Cell, char_width, trim_str_to_runes
from .block import Block
from .buffer import Buffer
from .theme import theme_attr

SPARKS = "▁▂▃▄▅▆▇█"


@dataclass
class Sparkline:
    """One line of data with an optional title; drawn inside Sparklines."""

    data: list[int] = field(default_factory=list)
    height: int = 1
    title: str = ""
    title_color: int = field(default_factory=lambda: theme_attr("sparkline.title.fg"))
    line_color: int = field(default_factory=lambda: theme_attr("sparkline.line.fg"))

    @property
    def display_height(self) -> int:
        """Rows taken by the line including its title."""
        return self.height + 1 if self.title else self.height


class Sparklines(Block):
    """A block stacking sparklines from the top; those that do not fit are hidden."""

    def __init__(self, *lines: Sparkline) -> None:
        super().__init__()
        self.lines: list[Sparkline] = list(lines)

    def add(self, line: Sparkline) -> None:
        """Append a sparkline."""
        self.lines.append(line)

    def _visible(self) -> list[Sparkline]:
        limit = self.inner_area.dy()
        shown: list[Sparkline] = []
        used = 0
        for line in self.lines:
            if used + line.display_height > limit:
                break
            shown.append(line)
            used += line.display_height
        return shown

    def buffer(self) -> Buffer:
        """The block with every visible sparkline drawn."""
        buf = super().buffer()
        inner = self.inner_area
        dx = inner.dx()
        off_y = 0
        for line in self._visible():
            peak = max([0, *line.data])
            scale = 8 * line.height / peak if peak else 0.0
            data = line.data
            if len(data) > dx:
                data = data[len(data) - dx:]

            if line.title:
                off_x = 0
                for ch in trim_str_to_runes(line.title, dx):
                    buf.set(inner.x0 + off_x, inner.y0 + off_y,
                            Cell(ch, line.title_color, self.bg))
                    off_x += char_width(ch)

            for j, value in enumerate(data):
                h = 0 if value < 0 else int(value * scale + 0.5)
                full, rest = divmod(h, 8)
                x = inner.x0 + j
                base = inner.y0 + off_y + line.height
                for k in range(full):
                    buf.set(x, base - k, Cell(" ", 0, line.line_color))
                if rest:
                    buf.set(x, base - full, Cell(SPARKS[rest - 1], line.line_color, self.bg))

            off_y += line.display_height
        return buf