"""Event scheduler ordered by time, state and patient id."""

from __future__ import annotations

from .event import Event
from .state import SERVICE_STATES


def event_precedes(a: Event, b: Event) -> bool:
    """Whether ``a`` goes before ``b``: earlier time, then service states, then lower id."""
    if a.time != b.time:
        return a.time < b.time
    if a.state != b.state:
        return a.state in SERVICE_STATES
    return a.patient.patient_id < b.patient.patient_id


class Scheduler:
    """Keeps pending events so that the earliest one comes out first."""

    def __init__(self):
        self._events: list[Event] = []

    def push(self, event: Event) -> None:
        """Add an event."""
        events = self._events
        events.append(event)
        index = len(events) - 1
        while index > 0:
            before = index - 1
            if not event_precedes(events[index], events[before]):
                break
            events[index], events[before] = events[before], events[index]
            index = before

    def pop(self) -> Event:
        """Remove and return the first event."""
        if not self._events:
            raise IndexError("Escalonador vazio")
        first = self._events[0]
        last = self._events.pop()
        if self._events:
            self._events[0] = last
            self._sift_down(0)
        return first

    def _sift_down(self, index: int) -> None:
        events = self._events
        while True:
            smallest = index
            for candidate in (index + 1, index + 2):
                if candidate < len(events) and event_precedes(events[candidate], events[smallest]):
                    smallest = candidate
            if smallest == index:
                return
            events[index], events[smallest] = events[smallest], events[index]
            index = smallest

    def peek(self) -> Event:
        """The first event, left in place."""
        if not self._events:
            raise IndexError("Escalonador vazio")
        return self._events[0]

    def is_empty(self) -> bool:
        return not self._events

    def __len__(self) -> int:
        return len(self._events)

    def describe(self) -> str:
        """Pending patients level by level, blank line between levels."""
        parts = []
        level = 0
        count = 1
        for position, event in enumerate(self._events, start=1):
            parts.append(event.patient.heap_line() + "\n")
            if position == count:
                parts.append("\n")
                level += 1
                count += 1 << level
        parts.append("Acabou aqui\n")
        return "".join(parts)