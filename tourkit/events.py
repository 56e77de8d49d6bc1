"""Typed events and a target that routes them to registered listeners."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

__all__ = ["EventType", "Event", "EventTarget", "Listener"]


class EventType(Enum):
    WINDOW_CLOSE = auto()
    WINDOW_RESIZE = auto()
    MOUSE_WHEEL = auto()
    MOUSE_PRESS = auto()
    MOUSE_RELEASE = auto()
    MOUSE_MOVE = auto()
    KEY_PRESS = auto()
    TEXT_ENTER = auto()


@dataclass(frozen=True)
class Event:
    """An event of a given type with an optional payload."""

    type: EventType
    data: Any = None


Listener = Callable[[Event], None]


class EventTarget:
    """Keeps listeners per event type and calls them in registration order."""

    def __init__(self) -> None:
        self._listeners: defaultdict[EventType, list[Listener]] = defaultdict(list)

    def on(self, event_type: EventType, callback: Listener) -> Listener:
        """Register ``callback`` for ``event_type`` and return it."""
        self._listeners[event_type].append(callback)
        return callback

    def dispatch_event(self, event: Optional[Event], *args: EventType) -> None:
        """Call the listeners registered for the event's type.

        When event types are given, only events of one of those types are
        dispatched. A missing event (``None``) is ignored.
        """
        if event is None:
            return
        if args and event.type not in args:
            return
        for listener in list(self._listeners.get(event.type, ())):
            listener(event)