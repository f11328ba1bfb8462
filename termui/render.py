"""Drawing widgets on the terminal and the library's start-up and shut-down."""

from __future__ import annotations

import contextlib
import queue
import sys
import threading
import time
import traceback
from collections.abc import Iterator
from typing import Any

import blessed

from .attributes import ATTR_BOLD, ATTR_REVERSE, ATTR_UNDERLINE
from .events import (
    DEFAULT_EVENT_STREAM,
    DEFAULT_HANDLER,
    USER_EVENTS,
    Event,
    KeyboardEvent,
    WindowEvent,
    key_string,
    timer_channel,
)
from .geometry import Rectangle, set_term_size
from .grid import Grid
from .theme import theme_attr
from .widget import DEFAULT_WIDGET_MANAGER

_NAMED_KEYS = {
    "KEY_INSERT": "<insert>",
    "KEY_DELETE": "<delete>",
    "KEY_HOME": "<home>",
    "KEY_END": "<end>",
    "KEY_PGUP": "<previous>",
    "KEY_PGDOWN": "<next>",
    "KEY_UP": "<up>",
    "KEY_DOWN": "<down>",
    "KEY_LEFT": "<left>",
    "KEY_RIGHT": "<right>",
    "KEY_ENTER": "<enter>",
    "KEY_ESCAPE": "<escape>",
    "KEY_BACKSPACE": "<backspace>",
    "KEY_TAB": "<tab>",
}

body: Grid | None = None


class _Screen:
    """A terminal with a back buffer that is flushed as differences."""

    def __init__(self, terminal: blessed.Terminal) -> None:
        self.terminal = terminal
        self.back: dict[tuple[int, int], tuple[str, int, int]] = {}
        self.front: dict[tuple[int, int], tuple[str, int, int]] = {}
        self.lock = threading.Lock()
        self.stack = contextlib.ExitStack()
        self.stop = threading.Event()
        self.events: queue.Queue[Event | None] = queue.Queue()
        self.reader: threading.Thread | None = None

    def open(self) -> None:
        self.stack.enter_context(self.terminal.fullscreen())
        self.stack.enter_context(self.terminal.hidden_cursor())
        self.stack.enter_context(self.terminal.cbreak())

    def size(self) -> tuple[int, int]:
        return self.terminal.width, self.terminal.height

    def set_cell(self, x: int, y: int, ch: str, fg: int, bg: int) -> None:
        self.back[(x, y)] = (ch, fg, bg)

    def sync(self) -> tuple[int, int]:
        with self.lock:
            self.front.clear()
            return self.size()

    def _style(self, fg: int, bg: int) -> str:
        t = self.terminal
        parts = [t.normal]
        if fg & 0xFF:
            parts.append(t.color((fg & 0xFF) - 1))
        if bg & 0xFF:
            parts.append(t.on_color((bg & 0xFF) - 1))
        if fg & ATTR_BOLD:
            parts.append(t.bold)
        if fg & ATTR_UNDERLINE:
            parts.append(t.underline)
        if (fg | bg) & ATTR_REVERSE:
            parts.append(t.reverse)
        return "".join(parts)

    def flush(self) -> None:
        t = self.terminal
        with self.lock:
            width, height = self.size()
            out: list[str] = []
            for pos in sorted(self.back, key=lambda p: (p[1], p[0])):
                x, y = pos
                if not (0 <= x < width and 0 <= y < height):
                    continue
                value = self.back[pos]
                if self.front.get(pos) == value:
                    continue
                ch, fg, bg = value
                if ch in ("", "\x00"):
                    ch = " "
                out.append(t.move_xy(x, y) + self._style(fg, bg) + ch)
                self.front[pos] = value
            if out:
                out.append(t.normal)
                t.stream.write("".join(out))
                t.stream.flush()

    def close(self) -> None:
        self.stop.set()
        if self.reader is not None:
            self.reader.join(timeout=1.0)
        else:
            self.events.put(None)
        self.stack.close()
        self.terminal.stream.flush()


_screen: _Screen | None = None


def _key_name(key: Any) -> str | None:
    if key.is_sequence:
        name = key.name or ""
        if name in _NAMED_KEYS:
            return _NAMED_KEYS[name]
        if name.startswith("KEY_F") and name[5:].isdigit():
            return f"<f{int(name[5:])}>"
        if len(str(key)) != 1:
            return None
    text = str(key)
    if not text:
        return None
    code = ord(text[0])
    if code <= 0x20 or code == 0x7F:
        return key_string(0, code, False)
    return key_string(code, 0, False)


def _read_input(screen: _Screen) -> None:
    size = screen.size()
    while not screen.stop.is_set():
        key = screen.terminal.inkey(timeout=0.1)
        now = int(time.time())
        name = _key_name(key) if key else None
        if name is not None:
            screen.events.put(
                Event(type="keyboard", path="/sys/kbd/" + name, origin="/sys",
                      data=KeyboardEvent(name), time=now)
            )
        current = screen.size()
        if current != size:
            size = current
            screen.events.put(
                Event(type="window", path="/sys/wnd/resize", origin="/sys",
                      data=WindowEvent(*current), time=now)
            )
    screen.events.put(None)


def _require() -> _Screen:
    if _screen is None:
        raise RuntimeError("terminal is not initialised")
    return _screen


def init() -> None:
    """Take over the terminal and start the default event sources.

    Must be paired with :func:`close`.
    """
    global _screen, body
    if _screen is not None:
        raise RuntimeError("terminal is already initialised")
    terminal = blessed.Terminal()
    screen = _Screen(terminal)
    screen.open()
    _screen = screen

    grid = Grid()
    grid.bg_color = theme_attr("bg")
    grid.width = term_width()
    body = grid

    DEFAULT_EVENT_STREAM.init()
    DEFAULT_EVENT_STREAM.merge("terminal", screen.events)
    DEFAULT_EVENT_STREAM.merge("timer", timer_channel(1.0))
    DEFAULT_EVENT_STREAM.merge("custom", USER_EVENTS)

    def on_resize(event: Event) -> None:
        grid.width = event.data.width

    DEFAULT_EVENT_STREAM.handle("/", DEFAULT_HANDLER)
    DEFAULT_EVENT_STREAM.handle("/sys/wnd/resize", on_resize)

    DEFAULT_WIDGET_MANAGER.clear()
    DEFAULT_EVENT_STREAM.hook(DEFAULT_WIDGET_MANAGER.handlers_hook())

    if terminal.is_a_tty and sys.stdin.isatty():
        screen.reader = threading.Thread(
            target=_read_input, args=(screen,), daemon=True, name="terminal-input"
        )
        screen.reader.start()


def close() -> None:
    """Give the terminal back; does nothing when not initialised."""
    global _screen
    screen, _screen = _screen, None
    if screen is not None:
        screen.close()


def _sync() -> tuple[int, int]:
    width, height = _require().sync()
    set_term_size(width, height)
    return width, height


def term_width() -> int:
    """Current width of the terminal in cells."""
    return _sync()[0]


def term_height() -> int:
    """Current height of the terminal in cells."""
    return _sync()[1]


def _area_cells(buf: Any) -> Iterator[tuple[int, int, Any]]:
    area = buf.area
    for y in range(area.y0, area.y1):
        for x in range(area.x0, area.x1):
            try:
                cell = buf.at(x, y)
            except KeyError:
                continue
            if cell is not None and cell.ch not in ("", "\x00"):
                yield x, y, cell


def render(*bufferers: Any) -> None:
    """Draw the widgets in order; later ones overlap earlier ones.

    If drawing fails the terminal is restored, the traceback printed and the
    process exits with status 1.
    """
    screen = _require()
    try:
        for item in bufferers:
            buf = item.buffer()
            for x, y, cell in _area_cells(buf):
                screen.set_cell(x, y, cell.ch, cell.fg, cell.bg)
    except Exception as exc:
        close()
        print(
            f"Captured an exception (value={exc!r}) when rendering. "
            "Exit and clean terminal...\nPrint stack trace:\n",
            file=sys.stderr,
        )
        traceback.print_exc()
        raise SystemExit(1) from exc
    screen.flush()


def clear() -> None:
    """Blank the whole back buffer in the theme background; not flushed."""
    screen = _require()
    bg = theme_attr("bg")
    width, height = screen.size()
    with screen.lock:
        screen.back.clear()
        for y in range(height):
            for x in range(width):
                screen.set_cell(x, y, " ", 0, bg)


def clear_area(rect: Rectangle, bg: int) -> None:
    """Blank ``rect`` in background ``bg`` and flush."""
    screen = _require()
    for x in range(rect.x0, rect.x1):
        for y in range(rect.y0, rect.y1):
            screen.set_cell(x, y, " ", 0, bg)
    screen.flush()


@contextlib.contextmanager
def session() -> Iterator[Grid | None]:
    """Initialise the terminal for the block and close it afterwards."""
    init()
    try:
        yield body
    finally:
        close()