"""A row of selectable tabs, each showing its own widgets below the row."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any

from .attributes import HORIZONTAL_LINE, VERTICAL_LINE, Cell
from .block import Block
from .buffer import Buffer
from .theme import theme_attr

_HORIZONTAL_DOWN = "┬"
_HORIZONTAL_UP = "┴"
_QUOTE_LEFT = "«"
_QUOTE_RIGHT = "»"


def _cells(buf: Buffer) -> Iterator[tuple[int, int, Cell]]:
    """Every drawn cell of ``buf`` with its position."""
    bounds = buf.bounds()
    for y in range(bounds.y0, bounds.y1):
        for x in range(bounds.x0, bounds.x1):
            try:
                cell = buf.at(x, y)
            except KeyError:
                continue
            if cell is not None and cell.ch not in ("", "\x00"):
                yield x, y, cell


class Tab:
    """A labelled page of widgets."""

    def __init__(self, label: str) -> None:
        self.label = label
        self.rune_len = len(label)
        self.blocks: list[Any] = []

    def add_blocks(self, *blocks: Any) -> None:
        """Append widgets to the page."""
        self.blocks.extend(blocks)

    def buffer(self) -> Buffer:
        """The page's widgets merged in order."""
        buf = Buffer()
        for block in self.blocks:
            buf.merge(block.buffer())
        return buf


@dataclass
class _Point:
    x: int = 0
    y: int = 0
    ch: str = " "
    fg: int = 0
    bg: int = 0


class Tabpane(Block):
    """Tab labels in one row; the active tab's widgets are drawn beneath it.

    When the labels do not fit, the row scrolls so the active tab stays
    visible and arrows mark the hidden sides.
    """

    def __init__(self) -> None:
        super().__init__()
        self.tabs: list[Tab] = []
        self.active_tab_bg = theme_attr("bg.tab.active")
        self._active = 0
        self._offset = 0
        self._positions: list[int] = [-1]

    @property
    def active_index(self) -> int:
        """Index of the active tab."""
        return self._active

    def set_tabs(self, *tabs: Tab) -> None:
        """Replace the tabs."""
        self.tabs = list(tabs)
        positions: list[int] = []
        offset = 0
        for tab in self.tabs:
            positions.append(offset)
            offset += tab.rune_len + 1
        positions.append(offset - 1)
        self._positions = positions

    @property
    def _total(self) -> int:
        return self._positions[len(self.tabs)]

    def set_active_left(self) -> None:
        """Activate the tab to the left, if any."""
        if self._active == 0:
            return
        self._active -= 1
        if self._positions[self._active] < self._offset:
            self._offset = self._positions[self._active]

    def set_active_right(self) -> None:
        """Activate the tab to the right, if any."""
        if self._active == len(self.tabs) - 1:
            return
        self._active += 1
        end = self._positions[self._active] + self.tabs[self._active].rune_len
        if end + self._offset > self.inner_width:
            self._offset = end - self.inner_width

    def _check_alignment(self) -> int:
        """-1 when only the left is hidden, 1 when only the right, 0 for both."""
        side = -1 if self._offset > 0 else 0
        if self._offset + self.inner_width < self._total:
            side += 1
        return side

    def _fits_width(self) -> bool:
        return self.inner_width >= self._total

    def _pad_if_needed(self) -> None:
        if not self._fits_width() and not self.border:
            self.padding_left += 1
            self.padding_right += 1
            self.align()

    def _with_border(self, p: _Point, ch: str, border_ch: str, down: str, up: str) -> list[_Point]:
        out: list[_Point] = []
        if self.border:
            out.append(replace(p, ch=down, y=self.inner_y - 1))
            out.append(replace(p, ch=up, y=self.inner_y + 1))
            ch = border_ch
        out.append(replace(p, ch=ch, y=self.inner_y))
        return out

    def buffer(self) -> Buffer:
        """The tab row and, beneath it, the active tab's widgets."""
        self.height = 3 if self.border else 1
        if self.width > self._total + 2:
            self.width = self._total + 2
        buf = super().buffer()

        self._pad_if_needed()
        if self.inner_height <= 0 or self.inner_width <= 0:
            return Buffer()

        points: list[_Point] = []
        off_x = self.inner_x
        char_offset = 0

        def add(*new: _Point) -> None:
            nonlocal off_x, char_offset
            if self._offset <= char_offset <= self._offset + self.inner_width:
                points.extend(replace(p, x=off_x) for p in new)
                off_x += 1
            char_offset += 1

        pt = _Point(fg=self.border_fg, bg=self.border_bg)
        fits = self._fits_width()
        edge = VERTICAL_LINE if self.border else "*"

        for i, tab in enumerate(self.tabs):
            active = i == self._active
            if i:
                pt.x = off_x
                pt.y = self.inner_y
                add(*self._with_border(pt, " ", VERTICAL_LINE, _HORIZONTAL_DOWN, _HORIZONTAL_UP))

            if active:
                pt.bg = self.active_tab_bg
            for ch in tab.label:
                new: list[_Point] = []
                if active and self.border:
                    pt.ch = " "
                    pt.y = self.inner_y + 1
                    pt.bg = self.border_bg
                    new.append(replace(pt))
                    pt.bg = self.active_tab_bg
                pt.y = self.inner_y
                pt.ch = ch
                new.append(replace(pt))
                add(*new)
            pt.bg = self.border_bg

            if not fits:
                side = self._check_alignment()
                pt.x = self.inner_x - 1
                pt.ch = edge
                points.append(replace(pt))
                if side <= 0:
                    points.extend(
                        self._with_border(pt, "<", _QUOTE_LEFT, HORIZONTAL_LINE, HORIZONTAL_LINE)
                    )
                pt.x = self.inner_x + self.inner_width
                pt.ch = edge
                points.append(replace(pt))
                if side >= 0:
                    points.extend(
                        self._with_border(pt, ">", _QUOTE_RIGHT, HORIZONTAL_LINE, HORIZONTAL_LINE)
                    )

            if active:
                shift = self.height + self.y
                points.extend(
                    _Point(x, y + shift, cell.ch, cell.fg, cell.bg)
                    for x, y, cell in _cells(tab.buffer())
                )

        for p in points:
            buf.set(p.x, p.y, Cell(p.ch, p.fg, p.bg))
        buf.sync()
        return buf