"""Theme colour lookup by dotted names."""

from __future__ import annotations

from .attributes import (
    COLOR_DEFAULT,
    COLOR_GREEN,
    COLOR_WHITE,
    COLOR_YELLOW,
)

COLOR_MAP: dict[str, int] = {
    "fg": COLOR_WHITE,
    "bg": COLOR_DEFAULT,
    "border.fg": COLOR_WHITE,
    "label.fg": COLOR_GREEN,
    "par.fg": COLOR_YELLOW,
    "par.label.bg": COLOR_WHITE,
}


def theme_attr(name: str) -> int:
    """Attribute for a dotted theme name such as ``"border.fg"``."""
    return look_up_attr(COLOR_MAP, name)


def look_up_attr(color_map: dict[str, int], name: str) -> int:
    """Look ``name`` up in ``color_map``.

    When it is missing, ever shorter dotted suffixes of the name are tried
    against the global theme map; 0 is returned when nothing matches.
    """
    if name in color_map:
        return color_map[name]
    parts = name.split(".")
    for start in range(len(parts)):
        suffix = ".".join(parts[start:])
        if suffix in COLOR_MAP:
            return COLOR_MAP[suffix]
    return 0


def color_rgb(r: int, g: int, b: int) -> int:
    """256-colour attribute for components in 0..5; values are clamped."""

    def within(n: int) -> int:
        return min(max(n, 0), 5)

    return 0x0F + 36 * within(r) + 6 * within(g) + within(b)