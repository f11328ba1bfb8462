"""Inline markup for coloured text and word wrapping of cell sequences.

Text such as ``"[hello](fg-red,bg-white) world"`` becomes the plain text
``"hello world"`` with the first five cells coloured as requested.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .attributes import (
    ATTR_BOLD,
    ATTR_REVERSE,
    ATTR_UNDERLINE,
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_CYAN,
    COLOR_DEFAULT,
    COLOR_GREEN,
    COLOR_MAGENTA,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    Cell,
    cells_to_str,
)

_COLORS = {
    "red": COLOR_RED,
    "blue": COLOR_BLUE,
    "black": COLOR_BLACK,
    "cyan": COLOR_CYAN,
    "yellow": COLOR_YELLOW,
    "white": COLOR_WHITE,
    "default": COLOR_DEFAULT,
    "green": COLOR_GREEN,
    "magenta": COLOR_MAGENTA,
}

_STYLES = {
    "bold": ATTR_BOLD,
    "underline": ATTR_UNDERLINE,
    "reverse": ATTR_REVERSE,
}


@dataclass(frozen=True, slots=True)
class Marker:
    """Colours applied to the plain-text range [start, end)."""

    start: int
    end: int
    fg: int
    bg: int


def _apply(attr: int, names: list[str]) -> int:
    for name in names:
        if name in _COLORS:
            attr = (attr & 0xFF00) | _COLORS[name]
        if name in _STYLES:
            attr |= _STYLES[name]
    return attr


def read_attr(spec: str, base_fg: int, base_bg: int) -> tuple[int, int]:
    """Turn a spec like ``"fg-red,fg-bold,bg-white"`` into (fg, bg).

    Colour names replace the colour of the base attribute; style names are
    added to it.
    """
    fgs: list[str] = []
    bgs: list[str] = []
    for item in spec.split(","):
        parts = item.split("-")
        if len(parts) > 1:
            if parts[0] == "fg":
                fgs.append(parts[1])
            elif parts[0] == "bg":
                bgs.append(parts[1])
    return _apply(base_fg, fgs), _apply(base_bg, bgs)


def parse_markdown(s: str, base_fg: int, base_bg: int) -> tuple[str, list[Marker]]:
    """Split marked-up text into its plain text and the colour markers."""
    text: list[str] = []
    markers: list[Marker] = []
    square: list[str] = []
    bracket: list[str] = []
    in_square = False
    in_bracket = False
    depth = 0
    last = len(s) - 1

    def reset() -> None:
        nonlocal in_square, in_bracket, depth
        square.clear()
        bracket.clear()
        in_square = False
        in_bracket = False
        depth = 0

    def rollback() -> None:
        text.extend(square)
        text.extend(bracket)
        reset()

    for i, ch in enumerate(s):
        if in_bracket:
            bracket.append(ch)
            if ch == ")":
                fg, bg = read_attr("".join(bracket[1:-1]), base_fg, base_bg)
                start = len(text)
                markers.append(Marker(start, start + len(square) - 2, fg, bg))
                text.extend(square[1:-1])
                reset()
            elif i == last:
                rollback()
        elif in_square:
            if depth == 0 and ch == "(":
                in_bracket = True
                bracket.append("(")
            elif depth == 0:
                rollback()
                if ch == "[":
                    in_square = True
                    depth = 1
                    bracket.append("[")
                else:
                    text.append(ch)
            elif i == last:
                square.append(ch)
                rollback()
            elif ch == "[":
                depth += 1
                square.append(ch)
            elif ch == "]":
                depth -= 1
                square.append(ch)
            else:
                square.append(ch)
        elif ch == "[":
            in_square = True
            depth = 1
            square.append("[")
        else:
            text.append(ch)

    return "".join(text), markers


def _is_break_space(ch: str) -> bool:
    return ch.isspace() and ch != "\u00a0"


def wrap_text(s: str, width: int) -> str:
    """Word-wrap ``s`` so lines stay within ``width`` characters where possible.

    Words longer than the limit are left whole. A negative width means no
    limit.
    """
    limit = sys.maxsize if width < 0 else width
    out: list[str] = []
    word: list[str] = []
    space: list[str] = []
    current = 0

    for ch in s:
        if ch == "\n":
            if not word:
                if current + len(space) <= limit:
                    out.extend(space)
            else:
                out.extend(space)
                out.extend(word)
                word.clear()
            space.clear()
            out.append(ch)
            current = 0
        elif _is_break_space(ch):
            if not space or word:
                current += len(space) + len(word)
                out.extend(space)
                out.extend(word)
                space.clear()
                word.clear()
            space.append(ch)
        else:
            word.append(ch)
            if current + len(space) + len(word) > limit and len(word) < limit:
                out.append("\n")
                current = 0
                space.clear()

    if not word:
        if current + len(space) <= limit:
            out.extend(space)
    else:
        out.extend(space)
        out.extend(word)

    return "".join(out)


def wrap_cells(cells: list[Cell], width: int) -> list[Cell]:
    """Replace the cells where wrapped lines break with newline cells."""
    result = list(cells)
    wrapped = wrap_text(cells_to_str(cells), width)
    current = list(cells_to_str(cells))

    changed = True
    while changed:
        changed = False
        for i, ch in enumerate(current):
            if i >= len(wrapped):
                break
            target = wrapped[i]
            if ch == target:
                continue
            if target == "\n":
                if i < len(result):
                    result[i] = Cell("\n", 0, 0)
                current.insert(i, "\n")
                changed = True
                break
            if i > 0 and wrapped[i - 1] == "\n" and ch == " ":
                del current[i]
                changed = True
                break
    return result


class MarkdownTextBuilder:
    """Builds coloured cells from text using the bracket markup."""

    def build(self, s: str, fg: int, bg: int) -> list[Cell]:
        """Cells for ``s`` in the base colours, with marked ranges recoloured."""
        text, markers = parse_markdown(s, fg, bg)
        cells = [Cell(ch, fg, bg) for ch in text]
        for marker in markers:
            for i in range(marker.start, marker.end):
                cells[i] = Cell(cells[i].ch, marker.fg, marker.bg)
        return cells


DEFAULT_TEXT_BUILDER = MarkdownTextBuilder()