"""Move-to-front list reporting how far back each value was last seen."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Iterator

DEFAULT_SIZE = 1000

_HEX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1


class RecencyList:
    """A fixed-size list of values, most recent first, initially all zeros."""

    def __init__(self, size=DEFAULT_SIZE):
        self._items = [0] * size

    def touch(self, element: int) -> int:
        """Move ``element`` to the front; return its 1-based former position, or 0."""
        items = self._items
        try:
            index = items.index(element)
        except ValueError:
            distance = 0
            if items:
                items.pop()
        else:
            distance = index + 1
            del items[index]
        items.insert(0, element)
        return distance

    def describe(self) -> str:
        """The non-zero values, most recent first."""
        return "Vector: " + "".join(f"{value} " for value in self._items if value != 0)


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, 16) if digits else 0
    if sign == "-":
        value = -value
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def distances(lines: Iterable[str]) -> Iterator[int]:
    """Yield the recency distance of each hex address, in 4-byte words from the first."""
    recency = RecencyList()
    offset = 0
    for line in lines:
        value = _parse_hex(line.split("\n", 1)[0])
        if not offset:
            offset = value
        yield recency.touch(_truncating_div(value - offset, 4) + 1)


def main(argv=None) -> int:
    """Read hex addresses from standard input and print each distance."""
    for distance in distances(sys.stdin):
        print(distance)
    return 0