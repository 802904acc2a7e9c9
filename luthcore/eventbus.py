"""Queued event dispatch on separate buses."""

from __future__ import annotations

import enum
from collections import defaultdict, deque
from typing import Callable

from luthcore.events import Event

EventHandler = Callable[[Event], None]


class BusType(enum.Enum):
    """The buses an application dispatches on."""

    MAIN_THREAD = 0
    RENDER_THREAD = 1


class BusInstance:
    """A queue of events and the handlers subscribed to each event type."""

    def __init__(self):
        self._queue: deque[Event] = deque()
        self._subscribers: dict[type, list[EventHandler]] = defaultdict(list)

    def enqueue(self, event: Event) -> None:
        """Queue ``event`` for the next call to :meth:`process_events`."""
        if not isinstance(event, Event):
            raise TypeError(f"expected an Event, got {type(event).__name__}")
        self._queue.append(event)

    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """Call ``handler`` for every queued event of exactly ``event_type``."""
        if not (isinstance(event_type, type) and issubclass(event_type, Event)):
            raise TypeError("event_type must be a subclass of Event")
        self._subscribers[event_type].append(handler)

    def process_events(self) -> None:
        """Dispatch queued events in order, including ones queued meanwhile."""
        while self._queue:
            event = self._queue.popleft()
            for handler in self._subscribers.get(type(event), ()):
                if event.handled:
                    break
                handler(event)


class EventBus:
    """One :class:`BusInstance` for each :class:`BusType`."""

    def __init__(self):
        self._buses = {bus_type: BusInstance() for bus_type in BusType}

    def bus(self, bus_type: BusType) -> BusInstance:
        return self._buses[bus_type]

    def enqueue(self, bus_type: BusType, event: Event) -> None:
        self.bus(bus_type).enqueue(event)

    def subscribe(self, bus_type: BusType, event_type: type, handler: EventHandler) -> None:
        self.bus(bus_type).subscribe(event_type, handler)

    def process_events(self, bus_type: BusType) -> None:
        self.bus(bus_type).process_events()