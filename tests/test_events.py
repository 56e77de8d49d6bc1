import pytest

from tourkit.events import Event, EventTarget, EventType


def test_listeners_called_in_registration_order():
    target = EventTarget()
    calls = []
    target.on(EventType.KEY_PRESS, lambda e: calls.append(("first", e.data)))
    target.on(EventType.KEY_PRESS, lambda e: calls.append(("second", e.data)))
    target.dispatch_event(Event(EventType.KEY_PRESS, "a"))
    assert calls == [("first", "a"), ("second", "a")]


def test_only_matching_type_listeners_called():
    target = EventTarget()
    seen = []
    target.on(EventType.MOUSE_PRESS, lambda e: seen.append("press"))
    target.on(EventType.MOUSE_MOVE, lambda e: seen.append("move"))
    target.dispatch_event(Event(EventType.MOUSE_MOVE))
    assert seen == ["move"]


def test_filter_excludes_unlisted_types():
    target = EventTarget()
    seen = []
    target.on(EventType.WINDOW_CLOSE, seen.append)
    event = Event(EventType.WINDOW_CLOSE)
    target.dispatch_event(event, EventType.KEY_PRESS, EventType.TEXT_ENTER)
    assert seen == []
    target.dispatch_event(event, EventType.KEY_PRESS, EventType.WINDOW_CLOSE)
    assert seen == [event]


def test_none_event_is_ignored():
    target = EventTarget()
    seen = []
    target.on(EventType.KEY_PRESS, seen.append)
    target.dispatch_event(None, EventType.KEY_PRESS)
    assert seen == []


def test_on_returns_callback():
    target = EventTarget()

    def handler(event):
        pass

    assert target.on(EventType.TEXT_ENTER, handler) is handler


def test_listener_exception_propagates():
    target = EventTarget()

    def boom(event):
        raise RuntimeError("listener failed")

    target.on(EventType.WINDOW_RESIZE, boom)
    with pytest.raises(RuntimeError, match="listener failed"):
        target.dispatch_event(Event(EventType.WINDOW_RESIZE, (800, 600)))


def test_no_listeners_registered_is_harmless():
    target = EventTarget()
    seen = []
    target.on(EventType.KEY_PRESS, seen.append)
    target.dispatch_event(Event(EventType.MOUSE_WHEEL, 1.0))
    assert seen == []