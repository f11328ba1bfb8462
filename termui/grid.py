"""A twelve-column grid layout for widgets."""

from __future__ import annotations

from typing import Any

from .buffer import Buffer

_COLUMNS = 12


class Row:
    """A node of the layout tree: a row of columns, a column, or a widget holder.

    ``span`` and ``offset`` are measured in twelfths of the parent's width.
    Setting ``x``, ``y`` or ``width`` also sets them on the held widget.
    """

    def __init__(
        self,
        span: int = 0,
        offset: int = 0,
        widget: Any = None,
        cols: list[Row] | None = None,
    ) -> None:
        self.cols: list[Row] = list(cols) if cols else []
        self.widget = widget
        self.span = span
        self.offset = offset
        self.height = 0
        self._x = 0
        self._y = 0
        self._width = 0

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int) -> None:
        self._x = value
        if self.widget is not None:
            self.widget.x = value

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int) -> None:
        self._y = value
        if self.widget is not None:
            self.widget.y = value

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value
        if self.widget is not None:
            self.widget.width = value

    def _is_leaf(self) -> bool:
        return not self.cols

    def _is_renderable_leaf(self) -> bool:
        return self._is_leaf() and self.widget is not None

    def calc_layout(self) -> None:
        """Lay out the whole subtree from this row's width and position."""
        self.assign_width(self.width)
        self.height = self.solve_height()
        self.assign_x(self.x)
        self.assign_y(self.y)

    def assign_width(self, width: int) -> None:
        """Set this row's width and share it out among its columns."""
        self.width = width
        total_span = 0
        prev_width = 0
        prev_start = 0
        last = len(self.cols) - 1
        for i, col in enumerate(self.cols):
            total_span += col.span + col.offset
            col_width = int(col.span * self.width / 12.0)
            start = 0
            if i >= 1:
                prev_offset = int(self.cols[i - 1].offset * self.width / 12.0)
                start = prev_start + prev_width + prev_offset
            if i == last and total_span == _COLUMNS:
                col_width = self.width - start
            col.assign_width(col_width)
            prev_width, prev_start = col_width, start

    def solve_height(self) -> int:
        """Compute and return the height of this subtree, bottom up."""
        if self._is_renderable_leaf():
            self.height = self.widget.height
            return self.height
        tallest = 0
        for col in self.cols:
            h = col.solve_height()
            if self.widget is not None:
                h += self.widget.height
            tallest = max(tallest, h)
        self.height = tallest
        return tallest

    def assign_x(self, x: int) -> None:
        """Place this row at column ``x`` and its columns after one another."""
        self.x = x
        acc = 0
        for col in self.cols:
            if col.offset:
                acc += int(col.offset * self.width / 12.0)
            col.assign_x(x + acc)
            acc += col.width

    def assign_y(self, y: int) -> None:
        """Place this row at row ``y``; columns go below its own widget."""
        self.y = y
        below = self.widget.height if self.widget is not None else 0
        for col in self.cols:
            col.assign_y(y + below)

    def buffer(self) -> Buffer:
        """The widgets of this subtree merged into one buffer."""
        if self._is_renderable_leaf():
            return self.widget.buffer()
        merged = Buffer()
        if self.widget is not None:
            merged.merge(self.widget.buffer())
        for col in self.cols:
            merged.merge(col.buffer())
        return merged


class Grid:
    """Rows stacked top to bottom over a given width."""

    def __init__(self, *rows: Row) -> None:
        self.rows: list[Row] = list(rows)
        self.width = 0
        self.x = 0
        self.y = 0
        self.bg_color = 0

    def add_rows(self, *rows: Row) -> None:
        """Append rows to the grid."""
        self.rows.extend(rows)

    def align(self) -> None:
        """Compute the layout of every row."""
        h = 0
        for row in self.rows:
            row.width = self.width
            row.x = self.x
            row.y = self.y + h
            row.calc_layout()
            h += row.height

    def buffer(self) -> Buffer:
        """All rows merged into one buffer."""
        buf = Buffer()
        for row in self.rows:
            buf.merge(row.buffer())
        return buf


def new_row(*cols: Row) -> Row:
    """A full-width row made of the given columns."""
    return Row(span=_COLUMNS, cols=list(cols))


def new_col(span: int, offset: int, *widgets: Any) -> Row:
    """A column holding one widget, the columns of one row, or widgets stacked up."""
    col = Row(span=span, offset=offset)
    if len(widgets) == 1:
        widget = widgets[0]
        if isinstance(widget, Row):
            col.cols = widget.cols
        else:
            col.widget = widget
        return col

    holder = col
    for widget in widgets:
        nested = Row(span=_COLUMNS, widget=widget)
        holder.cols = [nested]
        holder = nested
    return col