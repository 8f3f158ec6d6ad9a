"""Command line entry point for querying a hex plane."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import PlaneConfig, load_config
from .geometry import HexPlane, Point, Rectangle
from .hexgrid.coords import Hex
from .storage import HexArray


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexplane", description=__doc__)
    parser.add_argument("--config", help="TOML or JSON config file")
    parser.add_argument("--hex-width", type=float, help="override the configured hex width")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("center", "plane coordinates of a hex centre"),
        ("vertices", "the six vertices of a hex"),
        ("bbox", "bounding box of a hex"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("q", type=int)
        sub.add_argument("r", type=int)

    locate = commands.add_parser("locate", help="hex containing a point")
    locate.add_argument("x", type=float)
    locate.add_argument("y", type=float)

    visible = commands.add_parser("visible", help="hexes overlapping a rectangle")
    for field in ("x", "y", "w", "h"):
        visible.add_argument(field, type=float)
    visible.add_argument(
        "--exact",
        action="store_true",
        help="drop hexes whose bounding box does not overlap the rectangle",
    )
    visible.add_argument(
        "--board",
        action="store_true",
        help="keep only hexes on the configured q_max x r_max board",
    )
    return parser


def _resolve(args: argparse.Namespace) -> tuple[HexPlane, HexArray[bool]]:
    config = load_config(args.config)
    plane_config = config.plane
    if args.hex_width is not None:
        plane_config = PlaneConfig(hex_width=args.hex_width)
    return HexPlane.from_config(plane_config), HexArray.from_config(config.grid, fill=True)


def _points_table(title: str, points: Sequence[tuple[str, Point]]) -> Table:
    table = Table(title=title)
    table.add_column("")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for label, p in points:
        table.add_row(label, f"{p.x:.4f}", f"{p.y:.4f}")
    return table


def _render(args: argparse.Namespace, plane: HexPlane, board: HexArray[bool]) -> Table:
    if args.command == "center":
        h = Hex(args.q, args.r)
        return _points_table(f"center {h}", [("center", plane.center(h))])
    if args.command == "vertices":
        h = Hex(args.q, args.r)
        labels = ("NE", "SE", "S", "SW", "NW", "N")
        return _points_table(f"vertices {h}", list(zip(labels, plane.vertices(h))))
    if args.command == "bbox":
        h = Hex(args.q, args.r)
        box = plane.bounding_box(h)
        return _points_table(
            f"bounding box {h}",
            [("upper left", box.upper_left), ("lower right", box.lower_right)],
        )
    if args.command == "locate":
        h = plane.hex(Point(args.x, args.y))
        table = Table(title=f"hex at ({args.x}, {args.y})")
        table.add_column("hex")
        table.add_column("q", justify="right")
        table.add_column("r", justify="right")
        table.add_column("s", justify="right")
        table.add_row(str(h), str(h.q), str(h.r), str(h.s))
        return table

    rect = Rectangle(args.x, args.y, args.w, args.h)
    hexes = plane.get_visible(rect)
    if args.exact:
        hexes = [h for h in hexes if plane.bounding_box(h).intersects(rect)]
    if args.board:
        hexes = [h for h in hexes if h in board]
    table = Table(title=f"{len(hexes)} visible hexes")
    table.add_column("hex")
    table.add_column("center x", justify="right")
    table.add_column("center y", justify="right")
    for h in hexes:
        p = plane.center(h)
        table.add_row(str(h), f"{p.x:.4f}", f"{p.y:.4f}")
    return table


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """Run the ``hexplane`` command line tool and return its exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if console is None:
        console = Console()

    try:
        plane, board = _resolve(args)
    except (OSError, ValueError, ValidationError) as exc:
        print(f"hexplane: {exc}", file=sys.stderr)
        return 2

    console.print(_render(args, plane, board))
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
