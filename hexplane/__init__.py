"""Hex grid geometry: lattice coordinates, plane mapping and viewport culling."""

from .geometry import HexPlane, LatticeInvariantError, Point, Rectangle, cube_round
from .hexgrid import Direction, Hex, hex_distance
from .storage import HexArray, HexCollection, HexMap, Tile

__version__ = "0.3.0"

__all__ = [
    "Direction",
    "Hex",
    "HexArray",
    "HexCollection",
    "HexMap",
    "HexPlane",
    "LatticeInvariantError",
    "Point",
    "Rectangle",
    "Tile",
    "__version__",
    "cube_round",
    "hex_distance",
]
