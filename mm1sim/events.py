"""Time-ordered future event list for the queue simulation."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from enum import IntEnum
from operator import attrgetter
from typing import Iterator


class EventKind(IntEnum):
    """Kinds of event the simulation schedules."""

    ARRIVAL = 0
    SERVICE = 1
    DEPARTURE = 2


@dataclass(frozen=True)
class Event:
    """A scheduled event: what happens and when."""

    kind: EventKind
    time: float

    def __str__(self) -> str:
        return f"event: {int(self.kind)}, time: {self.time:.3f} -> "


class FutureEventList:
    """Events kept in increasing time order; equal times keep insertion order."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def push(self, kind: EventKind | int, time: float) -> Event:
        """Schedule an event after every event with a time not later than ``time``."""
        event = Event(EventKind(kind), float(time))
        bisect.insort(self._events, event, key=attrgetter("time"))
        return event

    def pop(self) -> Event:
        """Remove and return the earliest event."""
        if not self._events:
            raise IndexError("pop from empty event list")
        return self._events.pop(0)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def describe(self) -> str:
        """Render the list as a chain of events, earliest first."""
        return "".join(str(event) for event in self._events)