r"""Planar x-y coordinates for a board of pointy-top hexagons.

Everything here is derived from a single value, ``hex_width``: the distance
between the two vertical (north-south) sides of a hex. Hex ``(0, 0)`` is
centred on the plane origin, x grows to the right and y grows downwards.

::

          hex_width
      |<----------->|
            /\                 hex_height     = (2 / sqrt(3)) * hex_width
          /    \               side length    = hex_height / 2
         |      |              row_separation = (sqrt(3) / 2) * hex_width
         |  *   |                             = 3/4 * hex_height
         |      |
          \    /
            \/

Odd and even rows are staggered by half a hex width.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple

from .hexgrid.coords import Hex

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import PlaneConfig

logger = logging.getLogger(__name__)

ROOT3 = math.sqrt(3.0)


class LatticeInvariantError(AssertionError):
    """Raised when rounded cube coordinates do not sum to zero."""


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle; ``(x, y)`` is the upper-left corner."""

    x: float
    y: float
    w: float
    h: float

    @staticmethod
    def from_origin_size(origin: Point, size: Point) -> "Rectangle":
        return Rectangle(origin.x, origin.y, size.x, size.y)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def upper_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def lower_right(self) -> Point:
        return Point(self.right, self.bottom)

    def offset(self, p: Point) -> "Rectangle":
        """Return a new rectangle displaced by ``p``."""

        return Rectangle(self.x + p.x, self.y + p.y, self.w, self.h)

    def intersects(self, other: "Rectangle") -> bool:
        """Strict overlap test; rectangles that only share an edge do not intersect."""

        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


def cube_round(q: float, r: float) -> Hex:
    """Round fractional axial coordinates to the nearest lattice hex.

    All three cube coordinates are rounded independently, then the one that
    moved furthest is recomputed from the other two so that q + r + s = 0.
    """

    s = -q - r
    rq, rr, rs = round(q), round(r), round(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)
    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    else:
        rs = -rq - rr
    if rq + rr + rs != 0:
        raise LatticeInvariantError(
            f"cube coordinates ({rq}, {rr}, {rs}) rounded from ({q}, {r}, {s}) do not sum to zero"
        )
    return Hex(rq, rr)


def _vertex_vectors(hex_width: float) -> Tuple[Point, ...]:
    a = hex_width / 2  # half width
    b = hex_width / (2 * ROOT3)  # quarter height = half side length
    return (
        Point(a, -b),  # NE
        Point(a, b),  # SE
        Point(0.0, 2 * b),  # S
        Point(-a, b),  # SW
        Point(-a, -b),  # NW
        Point(0.0, -2 * b),  # N
    )


def _local_bounding_box(hex_width: float) -> Rectangle:
    a = hex_width / 2
    b = hex_width / ROOT3  # half height = side length
    return Rectangle(-a, -b, hex_width, 2 * b)


class HexPlane:
    """Translates between the hex lattice and the x-y plane.

    A plane is configured once with ``hex_width``; all derived quantities are
    computed in the constructor and never change afterwards, so a single
    instance can be shared between threads.
    """

    __slots__ = ("_hex_width", "_hex_height", "_row_separation", "_vertex_vectors", "_bbox")

    def __init__(self, hex_width: float) -> None:
        if not math.isfinite(hex_width) or hex_width <= 0:
            raise ValueError("hex_width must be positive")
        self._hex_width = float(hex_width)
        self._hex_height = (2 / ROOT3) * self._hex_width
        self._row_separation = (ROOT3 / 2) * self._hex_width
        self._vertex_vectors = _vertex_vectors(self._hex_width)
        self._bbox = _local_bounding_box(self._hex_width)
        logger.debug(
            "HexPlane(hex_width=%s): hex_height=%s row_separation=%s",
            self._hex_width,
            self._hex_height,
            self._row_separation,
        )

    @classmethod
    def from_config(cls, config: PlaneConfig) -> "HexPlane":
        return cls(config.hex_width)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(hex_width={self._hex_width!r})"

    @property
    def hex_width(self) -> float:
        """Face-to-face diameter of a hex."""

        return self._hex_width

    @property
    def hex_height(self) -> float:
        """Vertex-to-vertex diameter of a hex."""

        return self._hex_height

    @property
    def row_separation(self) -> float:
        """Vertical distance between the centres of adjacent rows."""

        return self._row_separation

    @property
    def vertex_vectors(self) -> Tuple[Point, ...]:
        """Centre-to-vertex offsets, clockwise from north-east."""

        return self._vertex_vectors

    @property
    def local_bounding_box(self) -> Rectangle:
        return self._bbox

    # ------------------------------------------------------------------
    # Lattice <-> plane

    def center(self, h: Hex) -> Point:
        """Centre of ``h`` on the plane: (q, r) => (x, y)."""

        return Point((h.q + h.r / 2) * self._hex_width, h.r * self._row_separation)

    def hex(self, p: Point) -> Hex:
        """The hex whose region contains ``p``.

        Inverts the linear map used by :meth:`center` to get fractional axial
        coordinates, then snaps them with :func:`cube_round`.
        """

        r = p.y / self._row_separation
        q = p.x / self._hex_width - r / 2
        return cube_round(q, r)

    def vertices(self, h: Hex) -> Tuple[Point, ...]:
        p = self.center(h)
        return tuple(p.add(v) for v in self._vertex_vectors)

    def bounding_box(self, h: Hex) -> Rectangle:
        """An axis-aligned rectangle completely containing ``h``."""

        return self._bbox.offset(self.center(h))

    # ------------------------------------------------------------------
    # Viewport culling

    def _grid_index(self, p: Point) -> Tuple[int, int]:
        # (i, j) cells run right and down, unlike q and r which are sheared.
        # Each cell is half a hex wide and spans from the NE-NW vertex line
        # of a hex down to its S vertex, so there are two cells per hex.
        i = math.floor(2 * p.x / self._hex_width)
        j = math.floor(p.y / self._row_separation + 1 / 3)
        return i, j

    def iter_visible(self, rect: Rectangle) -> Iterator[Hex]:
        """Yield every hex that may intersect ``rect``.

        The result over-approximates: every hex whose bounding box overlaps
        ``rect`` is included, along with a few extra hexes along the top and
        bottom edges. Post-filter with :meth:`bounding_box` when an exact set
        is required.
        """

        i_min, j_min = self._grid_index(rect.upper_left)
        i_max, j_max = self._grid_index(rect.lower_right)

        # Only every other i is visited. Widening to an even span keeps the
        # trailing half hex of each row; the extra row catches hexes whose
        # north tip pokes over the bottom edge.
        if (i_max - i_min) % 2:
            i_max += 1
        j_max += 1
        logger.debug("visible span i=[%d, %d] j=[%d, %d] for %s", i_min, i_max, j_min, j_max, rect)

        for i in range(i_min, i_max + 1, 2):
            for j in range(j_min, j_max + 1):
                yield Hex(math.ceil((i - j) / 2), j)

    def get_visible(self, rect: Rectangle) -> List[Hex]:
        return list(self.iter_visible(rect))


__all__ = [
    "HexPlane",
    "LatticeInvariantError",
    "Point",
    "Rectangle",
    "ROOT3",
    "cube_round",
]
