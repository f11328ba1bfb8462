"""Cell attributes, colours, box glyphs and width-aware text helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from wcwidth import wcwidth

COLOR_DEFAULT = 0
COLOR_BLACK = 1
COLOR_RED = 2
COLOR_GREEN = 3
COLOR_YELLOW = 4
COLOR_BLUE = 5
COLOR_MAGENTA = 6
COLOR_CYAN = 7
COLOR_WHITE = 8

NUMBER_OF_COLORS = 8

ATTR_BOLD = 1 << 9
ATTR_UNDERLINE = 1 << 10
ATTR_REVERSE = 1 << 11

TOP_RIGHT = "┐"
VERTICAL_LINE = "│"
HORIZONTAL_LINE = "─"
TOP_LEFT = "┌"
BOTTOM_RIGHT = "┘"
BOTTOM_LEFT = "└"
VERTICAL_LEFT = "┤"
VERTICAL_RIGHT = "├"
HORIZONTAL_DOWN = "┬"
HORIZONTAL_UP = "┴"
QUOTA_LEFT = "«"
QUOTA_RIGHT = "»"

VDASH = "┊"
HDASH = "┈"
ORIGIN = "└"

DOT = "…"


def char_width(ch: str) -> int:
    """Columns the character occupies on screen; control characters take none."""
    return max(wcwidth(ch), 0)


def string_width(s: str) -> int:
    """Columns the string occupies on screen."""
    return sum(char_width(ch) for ch in s)


DOT_WIDTH = string_width(DOT)


@dataclass(frozen=True, slots=True)
class Cell:
    """One character with its foreground and background attributes."""

    ch: str
    fg: int = 0
    bg: int = 0

    def width(self) -> int:
        """Columns this cell occupies (usually 1 or 2)."""
        return char_width(self.ch)


def _truncate(s: str, width: int, tail: str) -> str:
    if string_width(s) <= width:
        return s
    room = width - string_width(tail)
    used = 0
    kept = []
    for ch in s:
        w = char_width(ch)
        if used + w > room:
            break
        used += w
        kept.append(ch)
    return "".join(kept) + tail


def trim_str_to_runes(s: str, width: int) -> str:
    """Cut ``s`` to ``width`` columns ending in an ellipsis when it is wider."""
    if width <= 0:
        return ""
    if string_width(s) > width:
        return _truncate(s, width, DOT)
    return s


def trim_str_if_appropriate(s: str, width: int) -> str:
    """Return ``s`` unchanged if it fits in ``width`` columns, else trimmed with an ellipsis."""
    if width <= 0:
        return ""
    if string_width(s) > width:
        return _truncate(s, width, DOT)
    return s


_WHITESPACE = re.compile(r"\s")

_ATTRIBUTE_NAMES = {
    "reset": COLOR_DEFAULT,
    "default": COLOR_DEFAULT,
    "black": COLOR_BLACK,
    "red": COLOR_RED,
    "green": COLOR_GREEN,
    "yellow": COLOR_YELLOW,
    "blue": COLOR_BLUE,
    "magenta": COLOR_MAGENTA,
    "cyan": COLOR_CYAN,
    "white": COLOR_WHITE,
    "bold": ATTR_BOLD,
    "underline": ATTR_UNDERLINE,
    "reverse": ATTR_REVERSE,
}


def string_to_attribute(text: str) -> int:
    """Combine comma-separated names such as ``"red, bold"`` into one attribute.

    Case and whitespace are ignored; unknown names contribute nothing.
    """
    result = 0
    for name in _WHITESPACE.sub("", text.lower()).split(","):
        result |= _ATTRIBUTE_NAMES.get(name, 0)
    return result


def text_cells(s: str, fg: int, bg: int) -> list[Cell]:
    """One cell per character of ``s``, all with the given colours."""
    return [Cell(ch, fg, bg) for ch in s]


def trim_cells(cells: list[Cell], width: int) -> list[Cell]:
    """Keep at most ``width`` cells."""
    if len(cells) <= width:
        return cells
    if width < 0:
        raise ValueError(f"negative width: {width}")
    return cells[:width]


def dtrim_cells(cells: list[Cell], width: int) -> list[Cell]:
    """Trim cells to fit ``width`` columns, ending the result with an ellipsis.

    The ellipsis takes the place of the first cell that would reach the limit.
    """
    result: list[Cell] = []
    used = 0
    for cell in cells:
        w = cell.width()
        if used + w < width:
            result.append(cell)
            used += w
        else:
            result.append(Cell(DOT, cell.fg, cell.bg))
            break
    return result


def cells_to_str(cells: list[Cell]) -> str:
    """The characters of the cells joined into a string."""
    return "".join(cell.ch for cell in cells)