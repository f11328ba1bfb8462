"""Points, rectangles and alignment of areas on the terminal grid."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True, slots=True)
class Point:
    """A cell position on the terminal grid."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True, slots=True)
class Rectangle:
    """A half-open rectangle covering columns [x0, x1) and rows [y0, y1)."""

    x0: int = 0
    y0: int = 0
    x1: int = 0
    y1: int = 0

    @property
    def min(self) -> Point:
        return Point(self.x0, self.y0)

    @property
    def max(self) -> Point:
        return Point(self.x1, self.y1)

    def dx(self) -> int:
        """Width of the rectangle."""
        return self.x1 - self.x0

    def dy(self) -> int:
        """Height of the rectangle."""
        return self.y1 - self.y0

    def empty(self) -> bool:
        """True when the rectangle contains no cells."""
        return self.x0 >= self.x1 or self.y0 >= self.y1

    def union(self, other: Rectangle) -> Rectangle:
        """Smallest rectangle holding both; an empty side is ignored."""
        if self.empty():
            return other
        if other.empty():
            return self
        return Rectangle(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def contains(self, point: Point) -> bool:
        """True when the point lies inside the rectangle."""
        return self.x0 <= point.x < self.x1 and self.y0 <= point.y < self.y1

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)


class Align(enum.IntFlag):
    """Positions an area can be aligned to within its parent."""

    NONE = 0
    LEFT = 1 << 1
    RIGHT = 1 << 2
    BOTTOM = 1 << 3
    TOP = 1 << 4
    CENTER_VERTICAL = 1 << 5
    CENTER_HORIZONTAL = 1 << 6
    CENTER = CENTER_VERTICAL | CENTER_HORIZONTAL


def align_area(parent: Rectangle, child: Rectangle, align: int) -> Rectangle:
    """Return ``child`` moved inside ``parent`` according to ``align``.

    ``Align.TOP`` is accepted but leaves the vertical position unchanged.
    """
    align = Align(align)
    w, h = child.dx(), child.dy()
    pcx = parent.x0 + _tdiv(parent.dx(), 2)
    pcy = parent.y0 + _tdiv(parent.dy(), 2)
    ccx = child.x0 + _tdiv(child.dx(), 2)
    ccy = child.y0 + _tdiv(child.dy(), 2)

    x0, y0, x1, y1 = child.x0, child.y0, child.x1, child.y1

    if align & Align.LEFT:
        x0 = parent.x0
        x1 = x0 + w
    if align & Align.RIGHT:
        x1 = parent.x1
        x0 = x1 - w
    if align & Align.BOTTOM:
        y1 = parent.y1
        y0 = y1 - h
    if align & Align.CENTER_HORIZONTAL:
        x0 += pcx - ccx
        x1 = x0 + w
    if align & Align.CENTER_VERTICAL:
        y0 += pcy - ccy
        y1 = y0 + h

    return Rectangle(x0, y0, x1, y1)


def move_area(area: Rectangle, dx: int, dy: int) -> Rectangle:
    """Return ``area`` shifted by ``dx`` columns and ``dy`` rows."""
    return Rectangle(area.x0 + dx, area.y0 + dy, area.x1 + dx, area.y1 + dy)


@dataclass
class _TermSize:
    width: int = 0
    height: int = 0


_term_size = _TermSize()


def set_term_size(width: int, height: int) -> None:
    """Record the current terminal size."""
    _term_size.width = width
    _term_size.height = height


def term_rect() -> Rectangle:
    """The whole terminal as a rectangle anchored at the origin."""
    return Rectangle(0, 0, _term_size.width, _term_size.height)