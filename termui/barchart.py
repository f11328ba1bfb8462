"""Bar charts: plain bars and stacked, multi-coloured bars."""

from __future__ import annotations

import itertools
import math

from .attributes import (
    ATTR_REVERSE,
    COLOR_BLACK,
    COLOR_DEFAULT,
    NUMBER_OF_COLORS,
    Cell,
    char_width,
    trim_str_to_runes,
)
from .block import Block
from .buffer import Buffer
from .theme import theme_attr

_UNSET_MIN_LENGTH = 9999


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _fdiv(a: float, b: float) -> float:
    """Floating division following IEEE rules for a zero divisor."""
    if b == 0:
        if a == 0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _scaled(value: int, scale: float) -> int:
    """Height in cells of ``value`` at ``scale``; 0 when it is not finite."""
    q = _fdiv(value, scale)
    return int(q) if math.isfinite(q) else 0


def _with_reverse(color: int) -> int:
    """A space drawn in the default colour is invisible, so reverse it."""
    return color | ATTR_REVERSE if color == COLOR_DEFAULT else color


class BarChart(Block):
    """One bar per data value, labelled below and numbered at its foot."""

    def __init__(self) -> None:
        super().__init__()
        self.bar_color = theme_attr("barchart.bar.bg")
        self.num_color = theme_attr("barchart.num.fg")
        self.text_color = theme_attr("barchart.text.fg")
        self.data: list[int] = []
        self.data_labels: list[str] = []
        self.bar_width = 3
        self.bar_gap = 1
        self.cell_char = " "
        self._max = 0

    def set_max(self, value: int) -> None:
        """Fix the value drawn at full height; non-positive values are ignored."""
        if value > 0:
            self._max = value

    def _layout(self) -> tuple[list[str], list[str], float]:
        inner = self.inner_area
        num_bar = _tdiv(inner.dx(), self.bar_gap + self.bar_width)
        count = max(0, min(num_bar, len(self.data_labels), len(self.data)))
        labels = [trim_str_to_runes(label, self.bar_width) for label in self.data_labels[:count]]
        numbers = [trim_str_to_runes(str(n), self.bar_width) for n in self.data[:count]]
        if self._max == 0:
            self._max = -1
        self._max = max([self._max, *self.data])
        scale = _fdiv(self._max, inner.dy() - 1)
        return labels, numbers, scale

    def buffer(self) -> Buffer:
        """The block with bars, labels and values drawn."""
        buf = super().buffer()
        labels, numbers, scale = self._layout()
        inner = self.inner_area
        dy = inner.dy()
        step = self.bar_width + self.bar_gap

        if self.cell_char == " ":
            bar_bg = _with_reverse(self.bar_color)
            bar_fg = COLOR_DEFAULT
        else:
            bar_bg = self.bg
            bar_fg = self.bar_color
        bar_cell = Cell(self.cell_char, bar_fg, bar_bg)

        for i, (label, number) in enumerate(zip(labels, numbers)):
            h = _scaled(self.data[i], scale)
            off_x = i * step

            for j in range(self.bar_width):
                for k in range(h):
                    buf.set(inner.x0 + off_x + j, inner.y0 + dy - 2 - k, bar_cell)

            col = 0
            for ch in label:
                buf.set(inner.x0 + off_x + col, inner.y0 + dy - 1,
                        Cell(ch, self.text_color, self.bg))
                col += char_width(ch)

            num_bg = self.bg if h == 0 else bar_bg
            start = inner.x0 + off_x + _tdiv(self.bar_width - len(number), 2)
            for j, ch in enumerate(number):
                buf.set(start + j, inner.y0 + dy - 2, Cell(ch, self.num_color, num_bg))
        return buf


class MultiBarChart(Block):
    """Bars stacked from up to eight data series.

    ``data`` holds one series per slot; the series in use are those before
    the first ``None``. Only as many bars are drawn as the shortest series
    has values. Series whose bar and number colours are both left at the
    default get colours picked automatically.
    """

    def __init__(self) -> None:
        super().__init__()
        self.bar_color = [COLOR_DEFAULT] * NUMBER_OF_COLORS
        self.num_color = [COLOR_DEFAULT] * NUMBER_OF_COLORS
        self.bar_color[0] = theme_attr("mbarchart.bar.bg")
        self.num_color[0] = theme_attr("mbarchart.num.fg")
        self.text_color = theme_attr("mbarchart.text.fg")
        self.data: list[list[int] | None] = [None] * NUMBER_OF_COLORS
        self.data_labels: list[str] = []
        self.bar_width = 3
        self.bar_gap = 1
        self.show_scale = False
        self._max = 0

    def set_max(self, value: int) -> None:
        """Fix the total drawn at full height; non-positive values are ignored."""
        if value > 0:
            self._max = value

    def _stacks(self) -> list[list[int]]:
        return list(itertools.takewhile(lambda s: s is not None, self.data[:NUMBER_OF_COLORS]))

    def _pick_colors(self, stacks: list[list[int]]) -> None:
        for i in range(len(stacks)):
            if self.bar_color[i] == COLOR_DEFAULT and self.num_color[i] == COLOR_DEFAULT:
                if i == 0:
                    self.bar_color[i] = COLOR_BLACK
                else:
                    self.bar_color[i] = self.bar_color[i - 1] + 1
                    if self.bar_color[i] > NUMBER_OF_COLORS:
                        self.bar_color[i] = COLOR_BLACK
                self.num_color[i] = NUMBER_OF_COLORS + 1 - self.bar_color[i]

    def _layout(self):
        inner = self.inner_area
        num_bar = _tdiv(inner.dx(), self.bar_gap + self.bar_width)
        stacks = self._stacks()
        min_len = min((len(s) for s in stacks), default=_UNSET_MIN_LENGTH)
        label_len = min(len(self.data_labels), min_len)

        labels = [""] * max(num_bar, 0)
        for i in range(max(0, min(label_len, num_bar))):
            labels[i] = trim_str_to_runes(self.data_labels[i], self.bar_width)

        numbers: list[list[str]] = []
        for i, stack in enumerate(stacks):
            row = [""] * len(stack)
            if i < num_bar:
                for j in range(label_len):
                    row[j] = trim_str_to_runes(str(stack[j]), self.bar_width)
            numbers.append(row)
        self._pick_colors(stacks)

        if self._max == 0:
            self._max = -1
        for i in range(min(min_len, label_len)):
            self._max = max(self._max, sum(stack[i] for stack in stacks))

        max_scale = ""
        if self.show_scale:
            text = str(self._max)
            max_scale = trim_str_to_runes(text, len(text))
            scale = _fdiv(self._max, inner.dy() - 2)
        else:
            scale = _fdiv(self._max, inner.dy() - 1)
        return num_bar, stacks, labels, numbers, min_len, scale, max_scale

    def buffer(self) -> Buffer:
        """The block with stacked bars, labels, values and optional scale."""
        buf = super().buffer()
        num_bar, stacks, labels, numbers, min_len, scale, max_scale = self._layout()
        inner = self.inner_area
        dy = inner.dy()
        step = self.bar_width + self.bar_gap

        for i in range(max(0, min(num_bar, min_len, len(self.data_labels)))):
            off_x = i * step

            stacked = 0
            for s, stack in enumerate(stacks):
                h = _scaled(stack[i], scale)
                cell = Cell(" ", 0, _with_reverse(self.bar_color[s]))
                for j in range(self.bar_width):
                    for k in range(h):
                        buf.set(inner.x0 + off_x + j, inner.y0 + dy - 2 - k - stacked, cell)
                stacked += h

            label = labels[i]
            col = 0
            for ch in label:
                x = inner.x1 + off_x + _tdiv(self.bar_width - len(label), 2) + col
                buf.set(x, inner.y0 + dy - 1, Cell(ch, self.text_color, self.bg))
                col += char_width(ch)

            stacked = 0
            for s, stack in enumerate(stacks):
                h = _scaled(stack[i], scale)
                if h > 0:
                    number = numbers[s][i]
                    start = inner.x0 + off_x + _tdiv(self.bar_width - len(number), 2)
                    bg = _with_reverse(self.bar_color[s])
                    for j, ch in enumerate(number):
                        buf.set(start + j, inner.y0 + dy - 2 - stacked,
                                Cell(ch, self.num_color[s], bg))
                stacked += h

        if self.show_scale:
            buf.set(self.x, inner.y0 + dy - 2, Cell("0", self.text_color, self.bg))
            for i, ch in enumerate(max_scale):
                buf.set(self.x + i, inner.y0, Cell(ch, self.text_color, self.bg))
        return buf