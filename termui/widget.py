"""Widget identifiers and per-widget event handler registration."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from .paths import find_match

Handler = Callable[[Any], None]

_ids = itertools.count(1)
_id_lock = threading.Lock()


def generate_id() -> str:
    """A new process-wide unique widget identifier."""
    with _id_lock:
        return str(next(_ids))


class Widget(Protocol):
    @property
    def id(self) -> str: ...


@dataclass
class WidgetInfo:
    """A registered widget and the handlers attached to it by path."""

    widget: Widget
    id: str
    handlers: dict[str, Handler] = field(default_factory=dict)


class WidgetManager:
    """Registry of widgets that receive events through their own handlers."""

    def __init__(self) -> None:
        self._widgets: dict[str, WidgetInfo] = {}

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._widgets

    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[WidgetInfo]:
        return iter(list(self._widgets.values()))

    def __getitem__(self, widget_id: str) -> WidgetInfo:
        return self._widgets[widget_id]

    def add_widget(self, widget: Widget) -> None:
        """Register ``widget``, replacing any earlier entry and its handlers."""
        self._widgets[widget.id] = WidgetInfo(widget, widget.id)

    def remove_widget(self, widget: Widget) -> None:
        """Forget ``widget``."""
        self.remove_widget_by_id(widget.id)

    def remove_widget_by_id(self, widget_id: str) -> None:
        """Forget the widget with the given id, if registered."""
        self._widgets.pop(widget_id, None)

    def add_handler(self, widget_id: str, path: str, handler: Handler) -> None:
        """Attach ``handler`` for ``path`` to a registered widget."""
        info = self._widgets.get(widget_id)
        if info is not None:
            info.handlers[path] = handler

    def remove_handler(self, widget_id: str, path: str) -> None:
        """Detach the handler for ``path`` from a registered widget."""
        info = self._widgets.get(widget_id)
        if info is not None:
            info.handlers.pop(path, None)

    def clear(self) -> None:
        """Forget every widget."""
        self._widgets.clear()

    def handlers_hook(self) -> Callable[[Any], None]:
        """A callable dispatching an event to each widget's best-matching handler."""

        def hook(event: Any) -> None:
            for info in list(self._widgets.values()):
                pattern = find_match(info.handlers, event.path)
                if pattern:
                    info.handlers[pattern](event)

        return hook


DEFAULT_WIDGET_MANAGER = WidgetManager()