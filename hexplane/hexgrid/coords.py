"""Axial hex coordinates and the six lattice directions.

The coordinates of a :class:`Hex` are ``(q, r)``, which run east and
south-east on a grid of pointy-top hexes (straight sides running
north-south). The third cube coordinate ``s`` is always derived.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

_HEX_PATTERN = re.compile(r"^\(?\s*(-?\d+)\s*[, ]\s*(-?\d+)\s*\)?$")


class Direction(IntEnum):
    """Neighbour directions, clockwise from east."""

    E = 0
    SE = 1
    SW = 2
    W = 3
    NW = 4
    NE = 5

    @property
    def unit(self) -> "Hex":
        """Unit offset travelled by one step in this direction."""

        return UNIT_OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 3) % 6)

    @staticmethod
    def parse(value: "Direction | int | str") -> "Direction":
        """Return the direction for a member, an index in [0, 6) or a name.

        Raises ``ValueError`` for anything else; indices are never wrapped.
        """

        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            try:
                return Direction[name]
            except KeyError as exc:
                raise ValueError(f"Unknown direction: {value!r}") from exc
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"direction must be an int in [0, 6), got {value!r}")
        # IntEnum lookup raises ValueError for out-of-range indices.
        return Direction(value)


@dataclass(frozen=True, slots=True)
class Hex:
    q: int
    r: int

    @property
    def s(self) -> int:
        """The third, redundant cube coordinate. q + r + s = 0."""

        return -self.q - self.r

    def cube(self) -> Tuple[int, int, int]:
        return self.q, self.r, self.s

    def add(self, other: "Hex") -> "Hex":
        return Hex(self.q + other.q, self.r + other.r)

    def __add__(self, other: object) -> "Hex":
        if not isinstance(other, Hex):
            return NotImplemented
        return self.add(other)

    def neighbor(self, direction: "Direction | int | str") -> "Hex":
        return self.add(Direction.parse(direction).unit)

    def neighbors(self) -> Tuple["Hex", ...]:
        """All six neighbours, clockwise from east."""

        return tuple(self.add(unit) for unit in UNIT_OFFSETS)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"

    @classmethod
    def parse(cls, text: str) -> "Hex":
        """Parse ``"(q, r)"``, ``"q,r"`` or ``"q r"`` back into a hex."""

        match = _HEX_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Cannot parse hex coordinate from {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))


UNIT_OFFSETS: Tuple[Hex, ...] = (
    Hex(1, 0),  # E
    Hex(0, 1),  # SE
    Hex(-1, 1),  # SW
    Hex(-1, 0),  # W
    Hex(0, -1),  # NW
    Hex(1, -1),  # NE
)


__all__ = ["Direction", "Hex", "UNIT_OFFSETS"]
