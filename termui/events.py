"""Events, the event stream that dispatches them, and event sources."""

from __future__ import annotations

import dataclasses
import queue
import threading
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .paths import clean_path, find_match

Handler = Callable[["Event"], None]

_STOP_PATH = "/sig/stoploop"

_KEY_MAX = 0xFFFF
_SPECIAL_KEYS = (
    "<insert>",
    "<delete>",
    "<home>",
    "<end>",
    "<previous>",
    "<next>",
    "<up>",
    "<down>",
    "<left>",
    "<right>",
)
_CONTROL_KEYS = {
    0x00: ("C-", "<space>"),
    0x08: ("", "<backspace>"),
    0x09: ("", "<tab>"),
    0x0D: ("", "<enter>"),
    0x1B: ("", "<escape>"),
    0x1C: ("C-", "\\"),
    0x1F: ("C-", "/"),
    0x20: ("", "<space>"),
    0x7F: ("C-", "8"),
}


@dataclass(frozen=True)
class Event:
    """Something that happened, addressed by a slash-separated path."""

    type: str = ""
    path: str = ""
    origin: str = ""
    to: str = ""
    data: Any = None
    time: int = 0


@dataclass(frozen=True)
class KeyboardEvent:
    """A key press, described as e.g. ``"q"``, ``"C-c"`` or ``"<enter>"``."""

    key_str: str


@dataclass(frozen=True)
class WindowEvent:
    """The terminal was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at a cell position."""

    x: int
    y: int
    press: str = ""


@dataclass(frozen=True)
class TimerEvent:
    """The ``count``-th tick of a timer firing every ``duration`` seconds."""

    duration: float
    count: int


def key_string(ch: int, key: int, alt: bool) -> str:
    """Describe a key press given its character code, key code and Alt state."""
    k = chr(ch)
    prefix = ""
    modifier = "M-" if alt else ""
    if ch == 0:
        if key > _KEY_MAX - 12:
            k = f"<f{_KEY_MAX - key + 1}>"
        elif key > _KEY_MAX - 25:
            index = _KEY_MAX - key - 12
            if index >= len(_SPECIAL_KEYS):
                raise ValueError(f"unknown key code: {key:#x}")
            k = _SPECIAL_KEYS[index]
        if key <= 0x7F:
            prefix = "C-"
            k = chr(ord("a") - 1 + key)
            if key in _CONTROL_KEYS:
                prefix, k = _CONTROL_KEYS[key]
    return prefix + modifier + k


def _drain(source: Any) -> Iterator[Event]:
    if isinstance(source, queue.Queue):
        while True:
            item = source.get()
            if item is None:
                return
            yield item
    else:
        yield from source


def _ignore(event: Event) -> None:
    """Handler that does nothing."""


DEFAULT_HANDLER: Handler = _ignore


class EventStream:
    """Merges event sources and dispatches each event to its best handler.

    A source is an iterable of events or a queue; a queue is read until it
    yields ``None``.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.sources: dict[str, Any] = {}
        self.handlers: dict[str, Handler] = {}
        self._stream: queue.Queue[Event] = queue.Queue()
        self._stop_signal: queue.Queue[Event | None] = queue.Queue()
        self._hook: Handler | None = None

    def init(self) -> None:
        """Connect the internal source that carries the stop signal."""
        self.merge("internal", self._stop_signal)

    def merge(self, name: str, source: Iterable[Event] | queue.Queue) -> None:
        """Feed the events of ``source`` into the stream, tagged with ``name``."""
        with self._lock:
            self.sources[name] = source
        threading.Thread(
            target=self._pump, args=(name, source), daemon=True, name=f"events-{name}"
        ).start()

    def _pump(self, name: str, source: Any) -> None:
        for event in _drain(source):
            self._stream.put(dataclasses.replace(event, origin=name))

    def handle(self, path: str, handler: Handler) -> None:
        """Call ``handler`` for events whose path starts with ``path``."""
        with self._lock:
            self.handlers[clean_path(path)] = handler

    def reset_handlers(self) -> None:
        """Remove every handler."""
        with self._lock:
            self.handlers.clear()

    def hook(self, func: Handler) -> None:
        """Call ``func`` for every event after its handler has run."""
        self._hook = func

    def loop(self) -> None:
        """Dispatch events until the stop signal arrives."""
        while True:
            event = self._stream.get()
            if event.path == _STOP_PATH:
                return
            with self._lock:
                pattern = find_match(self.handlers, event.path)
                if pattern:
                    self.handlers[pattern](event)
            if self._hook is not None:
                self._hook(event)

    def stop_loop(self) -> None:
        """Ask a running loop to return."""
        self._stop_signal.put(Event(path=_STOP_PATH))


def _duration_fraction(value: int, unit: int) -> str:
    whole, part = divmod(value, unit)
    if not part:
        return str(whole)
    digits = str(part).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def _format_duration(seconds: float) -> str:
    ns = round(seconds * 1e9)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return sign + _duration_fraction(ns, 1_000) + "µs"
    if ns < 1_000_000_000:
        return sign + _duration_fraction(ns, 1_000_000) + "ms"
    hours, rest = divmod(ns, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    secs = _duration_fraction(rest, 10**9) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}"
    if minutes:
        return f"{sign}{minutes}m{secs}"
    return sign + secs


def timer_channel(interval: float) -> queue.Queue[Event]:
    """A queue receiving a timer event every ``interval`` seconds."""
    channel: queue.Queue[Event] = queue.Queue(maxsize=1)
    path = "/timer/" + _format_duration(interval)

    def tick() -> None:
        count = 0
        while True:
            count += 1
            time.sleep(interval)
            channel.put(
                Event(
                    type="timer",
                    path=path,
                    time=int(time.time()),
                    data=TimerEvent(interval, count),
                )
            )

    threading.Thread(target=tick, daemon=True, name=f"timer-{path}").start()
    return channel


USER_EVENTS: queue.Queue[Event] = queue.Queue()

DEFAULT_EVENT_STREAM = EventStream()


@dataclass
class _Unused:
    placeholder: list[int] = field(default_factory=list)


def send_custom_event(path: str, data: Any) -> None:
    """Queue a user event for the custom event source."""
    USER_EVENTS.put(Event(path=path, data=data, time=int(time.time())))


def merge(name: str, source: Iterable[Event] | queue.Queue) -> None:
    """Merge ``source`` into the default stream."""
    DEFAULT_EVENT_STREAM.merge(name, source)


def handle(path: str, handler: Handler) -> None:
    """Register ``handler`` on the default stream."""
    DEFAULT_EVENT_STREAM.handle(path, handler)


def reset_handlers() -> None:
    """Remove every handler from the default stream."""
    DEFAULT_EVENT_STREAM.reset_handlers()


def loop() -> None:
    """Run the default stream's loop."""
    DEFAULT_EVENT_STREAM.loop()


def stop_loop() -> None:
    """Stop the default stream's loop."""
    DEFAULT_EVENT_STREAM.stop_loop()