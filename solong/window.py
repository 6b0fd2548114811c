"""Windows, event hooks and the event loop of the display connection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional, Union


class EventType(IntEnum):
    """Event numbers a window can hook."""

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


NO_EVENT_MASK = 0
KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
POINTER_MOTION_MASK = 1 << 6
EXPOSURE_MASK = 1 << 15
STRUCTURE_NOTIFY_MASK = 1 << 17

Hook = Callable[..., Any]

# Number of arguments each event hands to its hook; others take none.
_ARITY = {
    EventType.KEY_PRESS: 1,
    EventType.KEY_RELEASE: 1,
    EventType.BUTTON_PRESS: 3,
    EventType.BUTTON_RELEASE: 3,
    EventType.MOTION_NOTIFY: 2,
}


@dataclass(frozen=True)
class _Registration:
    mask: int
    func: Optional[Hook]


@dataclass(eq=False)
class Window:
    """A window of a connection and the hooks installed on it."""

    width: int
    height: int
    title: str
    hooks: dict[EventType, _Registration] = field(default_factory=dict, repr=False)

    def hook(self, event: Union[EventType, int], mask: int, func: Optional[Hook]) -> None:
        """Install func for event, selecting the events in mask."""
        self.hooks[EventType(event)] = _Registration(mask, func)

    def key_hook(self, func: Optional[Hook]) -> None:
        """Call func(keycode) when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func)

    def mouse_hook(self, func: Optional[Hook]) -> None:
        """Call func(button, x, y) when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func)

    def expose_hook(self, func: Optional[Hook]) -> None:
        """Call func() when the window needs repainting."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func)

    def event_mask(self) -> int:
        """Return the union of the masks of every installed hook."""
        mask = NO_EVENT_MASK
        for registration in self.hooks.values():
            mask |= registration.mask
        return mask


_DONE = object()


class Connection:
    """A display connection owning windows and running the event loop."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self._loop_hook: Optional[Hook] = None
        self._ended = False

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Create a window; the newest window comes first in windows."""
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        window = Window(width, height, title)
        self.windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Remove window from the connection; unknown windows are ignored."""
        self.windows = [w for w in self.windows if w is not window]

    def set_loop_hook(self, func: Optional[Hook]) -> None:
        """Call func() once per loop pass, after the pending events."""
        self._loop_hook = func

    def dispatch(self, window: Window, event: Union[EventType, int], *args: Any) -> Any:
        """Deliver one event to window and return what its hook returned.

        Key events take (keycode), button events (button, x, y), motion
        events (x, y) and expose events an optional pending count; the hook
        of an expose event runs only when that count is 0. A client message
        is a request to close the window: it runs the destroy hook first.
        Raises ValueError for a window not owned here and TypeError for
        the wrong number of arguments.
        """
        if window not in self.windows:
            raise ValueError("window does not belong to this connection")
        event = EventType(event)
        result = None
        if event is EventType.CLIENT_MESSAGE:
            closer = window.hooks.get(EventType.DESTROY_NOTIFY)
            if closer is not None and closer.func is not None:
                result = closer.func()
            if window not in self.windows:
                return result
        registration = window.hooks.get(event)
        if event is EventType.EXPOSE:
            if len(args) > 1:
                raise TypeError(f"{event.name} takes at most one argument, got {len(args)}")
            if args and args[0]:
                return result
            args = ()
        elif len(args) != _ARITY.get(event, 0):
            raise TypeError(f"{event.name} takes {_ARITY.get(event, 0)} arguments, got {len(args)}")
        if registration is None or registration.func is None:
            return result
        return registration.func(*args)

    def loop(self, events: Iterable[Optional[tuple]]) -> None:
        """Run the event loop over events.

        Each item is (window, event, *args), or None when nothing is
        pending. With a loop hook, None ends a pass and the hook runs;
        without one, None is skipped. Events for windows that no longer
        exist are dropped. The loop stops when no window is left, when
        end_loop has been called, or when events run out.
        """
        source = iter(events)
        while self.windows and not self._ended:
            while not self._ended:
                item = next(source, _DONE)
                if item is _DONE:
                    return
                if item is None:
                    if self._loop_hook is not None:
                        break
                    continue
                window, event, *args = item
                if window in self.windows:
                    self.dispatch(window, event, *args)
            if self._loop_hook is not None:
                self._loop_hook()

    def end_loop(self) -> bool:
        """Ask the running loop to stop."""
        self._ended = True
        return True