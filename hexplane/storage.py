"""Containers associating a :class:`~hexplane.hexgrid.coords.Hex` with a payload.

Two implementations share the :class:`HexCollection` contract: a dense
:class:`HexArray` for rectangular boards anchored at ``(0, 0)`` and a sparse
:class:`HexMap` for unbounded ones. Lookups of hexes that hold nothing (or
lie outside a dense board) return ``None`` so callers can range-check
cheaply.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Generic, Iterable, Iterator, List, Tuple, TypeVar

from .hexgrid.coords import Direction, Hex

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import GridConfig


class Tile:
    """Base class for payloads stored per hex."""


T = TypeVar("T")


class HexCollection(ABC, Generic[T]):
    """Common lookup and neighbour-query contract for hex storage."""

    @abstractmethod
    def get(self, h: Hex) -> T | None:
        """Return the payload at ``h`` or ``None``."""

    @abstractmethod
    def set(self, h: Hex, value: T) -> None:
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Hex, T]]:
        ...

    def get_many(self, hexes: Iterable[Hex]) -> List[T | None]:
        return [self.get(h) for h in hexes]

    def neighbors(self, h: Hex) -> List[T | None]:
        """Payloads of the six neighbours of ``h``, clockwise from east."""

        return self.get_many(h.neighbors())

    def neighbor(self, h: Hex, direction: Direction | int | str) -> T | None:
        return self.get(h.neighbor(direction))

    def __contains__(self, h: object) -> bool:
        return isinstance(h, Hex) and self.get(h) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self)


class HexArray(HexCollection[T]):
    """Dense storage for ``0 <= q < q_max`` and ``0 <= r < r_max``."""

    def __init__(self, q_max: int, r_max: int, fill: T | None = None) -> None:
        if q_max <= 0 or r_max <= 0:
            raise ValueError("q_max and r_max must be positive")
        self.q_max = q_max
        self.r_max = r_max
        self._grid: List[List[T | None]] = [[fill] * r_max for _ in range(q_max)]

    @classmethod
    def from_config(cls, config: GridConfig, fill: T | None = None) -> "HexArray[T]":
        return cls(config.q_max, config.r_max, fill=fill)

    def in_bounds(self, h: Hex) -> bool:
        return 0 <= h.q < self.q_max and 0 <= h.r < self.r_max

    def get(self, h: Hex) -> T | None:
        if not self.in_bounds(h):
            return None
        return self._grid[h.q][h.r]

    def set(self, h: Hex, value: T) -> None:
        if not self.in_bounds(h):
            raise IndexError(f"{h} is outside a {self.q_max}x{self.r_max} hex array")
        self._grid[h.q][h.r] = value

    def __iter__(self) -> Iterator[Tuple[Hex, T]]:
        for q, column in enumerate(self._grid):
            for r, value in enumerate(column):
                if value is not None:
                    yield Hex(q, r), value


class HexMap(HexCollection[T]):
    """Hashmap-style ``{hex: payload}`` store."""

    def __init__(self) -> None:
        self._store: Dict[Hex, T] = {}

    def get(self, h: Hex) -> T | None:
        return self._store.get(h)

    def set(self, h: Hex, value: T) -> None:
        self._store[h] = value

    def __iter__(self) -> Iterator[Tuple[Hex, T]]:
        yield from self._store.items()

    def __contains__(self, h: object) -> bool:
        return h in self._store

    def __len__(self) -> int:
        return len(self._store)


__all__ = ["HexArray", "HexCollection", "HexMap", "Tile"]
