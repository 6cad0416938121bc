"""A first-in, first-out queue of player events and the handlers that react to them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Callable

Handler = Callable[[], None]


class EventType(enum.Enum):
    """Kinds of events the user interface can raise."""

    PLAY = "Play"
    PAUSE = "Pause"
    STOP = "Stop"
    VOLUME_CHANGE = "VolumeChange"
    TRACK_CHANGE = "TrackChange"
    QUIT = "Quit"


class EventSystem:
    """Collects events and dispatches each to at most one registered handler."""

    def __init__(self) -> None:
        self._queue: deque[EventType] = deque()
        self._handlers: dict[EventType, Handler] = {}

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def pending(self) -> tuple[EventType, ...]:
        """Events waiting to be processed, oldest first."""
        return tuple(self._queue)

    def handler_for(self, event_type: EventType) -> Handler | None:
        """Return the handler registered for ``event_type``, if any."""
        return self._handlers.get(event_type)

    def process_events(self) -> None:
        """Dispatch queued events in order until the queue is empty.

        Events queued by a handler while processing are dispatched in the
        same call. An event with no handler is reported on standard output.
        """
        while self._queue:
            event_type = self._queue.popleft()
            handler = self._handlers.get(event_type)
            if handler is None:
                print(f"{event_type.value} event received but no handler registered.")
            else:
                handler()

    def query_event(self, event_type: EventType) -> None:
        """Append an event to the queue."""
        self._queue.append(event_type)

    def register_event_handler(self, event_type: EventType, handler: Handler) -> None:
        """Set the handler for ``event_type``, replacing any earlier one."""
        self._handlers[event_type] = handler

    def unregister_event_handler(self, event_type: EventType) -> None:
        """Remove the handler for ``event_type``; nothing happens if there is none."""
        self._handlers.pop(event_type, None)

    def clear_event_queue(self) -> None:
        """Drop every pending event."""
        self._queue.clear()

    def clear_event_handlers(self) -> None:
        """Forget every registered handler."""
        self._handlers.clear()

    def clear_all(self) -> None:
        """Drop pending events and forget all handlers."""
        self.clear_event_queue()
        self.clear_event_handlers()