"""Calendar moments expressed in local time, with hour arithmetic."""

from __future__ import annotations

import time
from functools import total_ordering

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@total_ordering
class Moment:
    """An immutable point in local time, resolved through ``mktime``."""

    __slots__ = ("_fields",)

    def __init__(self, year, month, day, hour):
        # year, month, day, hour, minute, second, isdst
        self._fields = (year, month, day, hour, 0, 0, 0)

    @classmethod
    def _from_struct(cls, st: time.struct_time) -> Moment:
        moment = cls.__new__(cls)
        moment._fields = (
            st.tm_year, st.tm_mon, st.tm_mday,
            st.tm_hour, st.tm_min, st.tm_sec, st.tm_isdst,
        )
        return moment

    def timestamp(self) -> int:
        """Seconds since the epoch for this local time."""
        year, month, day, hour, minute, second, isdst = self._fields
        return int(time.mktime((year, month, day, hour, minute, second, 0, 0, isdst)))

    def hours_between(self, other: Moment) -> float:
        """Absolute distance to ``other`` in hours."""
        return abs(other.timestamp() - self.timestamp()) / 3600.0

    def add_hours(self, hours: float) -> Moment:
        """Return a new moment ``hours`` later, truncated to whole seconds."""
        seconds = int(hours * 3600)
        stamp = self.timestamp() + seconds
        try:
            local = time.localtime(stamp)
        except (OverflowError, OSError) as exc:
            raise ValueError("cannot compute the new date and time") from exc
        return Moment._from_struct(local)

    def format(self) -> str:
        """Render as `` Www Mmm dd hh:mm:ss yyyy``, snapping stray seconds."""
        stamp = self.timestamp()
        local = time.localtime(stamp)
        if local.tm_sec > 57:
            local = time.localtime(stamp + 1)
        elif local.tm_sec < 5:
            stamp = int(time.mktime((
                local.tm_year, local.tm_mon, local.tm_mday,
                local.tm_hour, local.tm_min, 0, 0, 0, local.tm_isdst,
            )))
            local = time.localtime(stamp)
        return (
            f" {_WEEKDAYS[local.tm_wday]} {_MONTHS[local.tm_mon - 1]} "
            f"{local.tm_mday:02d} {local.tm_hour:02d}:{local.tm_min:02d}:"
            f"{local.tm_sec:02d} {local.tm_year}"
        )

    def __eq__(self, other):
        if not isinstance(other, Moment):
            return NotImplemented
        return self.timestamp() == other.timestamp()

    def __lt__(self, other):
        if not isinstance(other, Moment):
            return NotImplemented
        return self.timestamp() < other.timestamp()

    def __hash__(self):
        return hash(self.timestamp())

    def __repr__(self):
        year, month, day, hour, minute, second, _ = self._fields
        return (
            f"Moment({year:04d}-{month:02d}-{day:02d} "
            f"{hour:02d}:{minute:02d}:{second:02d})"
        )