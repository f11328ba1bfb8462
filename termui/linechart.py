"""A line chart drawn with braille characters or single dots."""

from __future__ import annotations

import math

from .attributes import HDASH, ORIGIN, VDASH, Cell, string_width
from .block import Block
from .buffer import Buffer
from .theme import theme_attr

# Braille glyph for two points in one cell, keyed by their sub-row levels.
_BRAILLE_PATTERNS = {
    (0, 0): "⣀",
    (0, 1): "⡠",
    (0, 2): "⡐",
    (0, 3): "⡈",
    (1, 0): "⢄",
    (1, 1): "⠤",
    (1, 2): "⠔",
    (1, 3): "⠌",
    (2, 0): "⢂",
    (2, 1): "⠢",
    (2, 2): "⠒",
    (2, 3): "⠊",
    (3, 0): "⢁",
    (3, 1): "⠡",
    (3, 2): "⠑",
    (3, 3): "⠉",
}

_LEFT_SINGLE = ("\u2840", "⠄", "⠂", "⠁")
_RIGHT_SINGLE = ("\u2880", "⠠", "⠐", "⠈")


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _fdiv(a: float, b: float) -> float:
    """Floating division following IEEE rules for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def shorten_float(x: float) -> str:
    """Compact label for ``x``: two decimals, or exponent form for large positives."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    s = f"{x:.2f}"
    if len(s) - 3 > 3:
        s = f"{x:.2e}"
    if x < 0:
        s = f"{x:.2f}"
    return s


class LineChart(Block):
    """A chart of float values along x and y axes.

    ``mode`` is ``"braille"`` (two data points per cell) or ``"dot"`` (one
    ``dot_style`` character per point). When ``data_labels`` is empty the data
    indices are used as labels. The vertical range only ever grows, so the
    axis does not jump as data changes.
    """

    def __init__(self) -> None:
        super().__init__()
        self.data: list[float] = []
        self.data_labels: list[str] = []
        self.mode = "braille"
        self.dot_style = "•"
        self.line_color = theme_attr("linechart.line.fg")
        self.axes_color = theme_attr("linechart.axes.fg")
        self._axis_x_label_gap = 2
        self._axis_y_label_gap = 1
        self._bottom = math.inf
        self._top = -math.inf
        self._auto_labels = False
        self._scale = 0.0
        self._axis_y_height = 0
        self._axis_x_width = 0
        self._label_y_space = 0
        self._labels_x: list[str] = []
        self._labels_y: list[str] = []

    def _calc_labels_y(self) -> None:
        span = self._top - self._bottom
        self._scale = _fdiv(span, self._axis_y_height)
        n = max(_tdiv(1 + self._axis_y_height, self._axis_y_label_gap + 1), 0)
        self._labels_y = [shorten_float(self._bottom + i * span / n) for i in range(n)]
        self._label_y_space = max((len(s) for s in self._labels_y), default=0)

    def _calc_labels_x(self) -> None:
        self._labels_x = []
        step = 1 if self.mode == "dot" else 2
        pos = 0
        for _ in self.data_labels:
            if pos >= self._axis_x_width or step * pos >= len(self.data_labels):
                break
            label = self.data_labels[step * pos]
            w = string_width(label)
            if pos + w <= self._axis_x_width:
                self._labels_x.append(label)
            pos += w + self._axis_x_label_gap

    def _calc_layout(self) -> None:
        if not self.data_labels or self._auto_labels:
            self._auto_labels = True
            self.data_labels = [str(i) for i in range(len(self.data))]

        inner = self.inner_area
        visible = inner.dx() * 2 if self.mode == "braille" else inner.dx()
        visible = max(min(visible, len(self.data)), 0)
        values = [self.data[0], *self.data[:visible]]
        min_y, max_y = min(values), max(values)
        span = max_y - min_y
        if min_y < self._bottom:
            self._bottom = min_y - 0.2 * span
        if max_y > self._top:
            self._top = max_y + 0.2 * span

        self._axis_y_height = inner.dy() - 2
        self._calc_labels_y()
        self._axis_x_width = inner.dx() - 1 - self._label_y_space
        self._calc_labels_x()

    def _plot_axes(self) -> Buffer:
        buf = Buffer()
        inner = self.inner_area
        orig_y = inner.y0 + inner.dy() - 2
        orig_x = inner.x0 + self._label_y_space
        fg, bg = self.axes_color, self.bg

        buf.set(orig_x, orig_y, Cell(ORIGIN, fg, bg))
        for x in range(orig_x + 1, orig_x + self._axis_x_width):
            buf.set(x, orig_y, Cell(HDASH, fg, bg))
        for dy in range(1, self._axis_y_height + 1):
            buf.set(orig_x, orig_y - dy, Cell(VDASH, fg, bg))

        offset = 0
        label_row = inner.y0 + inner.dy() - 1
        for label in self._labels_x:
            if offset + len(label) > self._axis_x_width:
                break
            for j, ch in enumerate(label):
                buf.set(orig_x + offset + j, label_row, Cell(ch, fg, bg))
            offset += len(label) + self._axis_x_label_gap

        for i, label in enumerate(self._labels_y):
            row = orig_y - i * (self._axis_y_label_gap + 1)
            for j, ch in enumerate(label):
                buf.set(inner.x0 + j, row, Cell(ch, fg, bg))
        return buf

    def _braille_position(self, value: float) -> tuple[int, int] | None:
        """Cell row and sub-row level of ``value``, or None when undefined."""
        q = _fdiv(value - self._bottom, self._scale / 4) + 0.5
        if not math.isfinite(q):
            return None
        count = int(q)
        row = _tdiv(count, 4)
        return row, count - 4 * row

    def _render_braille(self) -> Buffer:
        buf = Buffer()
        inner = self.inner_area
        base_y = inner.y0 + inner.dy() - 3
        base_x = inner.x0 + self._label_y_space + 1
        for i in range(min(len(self.data) // 2, self._axis_x_width)):
            first = self._braille_position(self.data[2 * i])
            second = self._braille_position(self.data[2 * i + 1])
            x = base_x + i
            if first is not None and second is not None and first[0] == second[0]:
                ch = _BRAILLE_PATTERNS[(first[1], second[1])]
                buf.set(x, base_y - first[0], Cell(ch, self.line_color, self.bg))
                continue
            if first is not None:
                buf.set(x, base_y - first[0],
                        Cell(_LEFT_SINGLE[first[1]], self.line_color, self.bg))
            if second is not None:
                buf.set(x, base_y - second[0],
                        Cell(_RIGHT_SINGLE[second[1]], self.line_color, self.bg))
        return buf

    def _render_dots(self) -> Buffer:
        buf = Buffer()
        inner = self.inner_area
        base_y = inner.y0 + inner.dy() - 3
        base_x = inner.x0 + self._label_y_space + 1
        cell = Cell(self.dot_style, self.line_color, self.bg)
        for i in range(min(len(self.data), self._axis_x_width)):
            q = _fdiv(self.data[i] - self._bottom, self._scale) + 0.5
            if not math.isfinite(q):
                continue
            buf.set(base_x + i, base_y - int(q), cell)
        return buf

    def buffer(self) -> Buffer:
        """The block with axes, labels and the plotted data."""
        buf = super().buffer()
        if not self.data:
            return buf
        self._calc_layout()
        buf.merge(self._plot_axes())
        if self.mode == "dot":
            buf.merge(self._render_dots())
        else:
            buf.merge(self._render_braille())
        return buf