"""Per-window event hooks and the dispatch of events to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from functools import reduce
from operator import or_
from typing import Any, Callable, Optional

__all__ = ["EventType", "EventMask", "Event", "HookTable", "MAX_EVENT"]


class EventType(IntEnum):
    """Window-system event numbers."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36


class EventMask(IntFlag):
    """Bits selecting which events a window receives."""

    NONE = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """An event delivered to one window.

    ``delete_window`` marks a client message asking to close the window.
    """

    type: int
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_window: bool = False


@dataclass
class _Hook:
    func: Optional[Callable[..., Any]] = None
    param: Any = None
    mask: int = 0


class HookTable:
    """The hooks installed on one window, one slot per event type."""

    def __init__(self) -> None:
        self._hooks = [_Hook() for _ in range(MAX_EVENT)]

    def hook(
        self,
        event: int,
        mask: int,
        func: Optional[Callable[..., Any]],
        param: Any = None,
    ) -> None:
        """Install ``func`` for ``event``; ``mask`` selects what is delivered."""
        if not 0 <= event < MAX_EVENT:
            raise ValueError(f"event type out of range: {event}")
        self._hooks[event] = _Hook(func, param, int(mask))

    def key_hook(self, func: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``func(keysym, param)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, func, param)

    def mouse_hook(self, func: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``func(button, x, y, param)`` when a button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, func, param)

    def expose_hook(self, func: Optional[Callable[..., Any]], param: Any = None) -> None:
        """Call ``func(param)`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, func, param)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        return reduce(or_, (entry.mask for entry in self._hooks), 0)

    def dispatch(self, event: Event) -> bool:
        """Run the hooks that ``event`` calls for; True if any was called.

        A close request also runs the destroy hook, if one is installed.
        """
        handled = False
        if event.type == EventType.CLIENT_MESSAGE and event.delete_window:
            destroy = self._hooks[EventType.DESTROY_NOTIFY]
            if destroy.func is not None:
                destroy.func(destroy.param)
                handled = True
        if 0 <= event.type < MAX_EVENT:
            entry = self._hooks[event.type]
            if entry.func is not None and self._call(event, entry):
                handled = True
        return handled

    @staticmethod
    def _call(event: Event, entry: _Hook) -> bool:
        kind = event.type
        func = entry.func
        assert func is not None
        if kind < EventType.KEY_PRESS:
            return False
        if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            func(event.key, entry.param)
        elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            func(event.button, event.x, event.y, entry.param)
        elif kind == EventType.MOTION_NOTIFY:
            func(event.x, event.y, entry.param)
        elif kind == EventType.EXPOSE:
            if event.count:
                return False
            func(entry.param)
        else:
            func(entry.param)
        return True