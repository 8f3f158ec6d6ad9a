from .coords import UNIT_OFFSETS, Direction, Hex
from .heuristics import hex_distance

__all__ = [
    "Direction",
    "Hex",
    "UNIT_OFFSETS",
    "hex_distance",
]
