import math
from types import GeneratorType

import numpy as np
import pytest

from hexplane import HexPlane, Point, Rectangle
from hexplane.hexgrid import Hex


def _overlaps(box: Rectangle, rect: Rectangle, eps: float = 1e-7) -> bool:
    return (
        box.x < rect.right - eps
        and rect.x < box.right - eps
        and box.y < rect.bottom - eps
        and rect.y < box.bottom - eps
    )


def _candidates(plane: HexPlane, rect: Rectangle):
    """All hexes near ``rect``, found by brute force."""

    r_lo = math.floor(rect.y / plane.row_separation) - 2
    r_hi = math.ceil(rect.bottom / plane.row_separation) + 2
    for r in range(r_lo, r_hi + 1):
        q_lo = math.floor(rect.x / plane.hex_width - r / 2) - 2
        q_hi = math.ceil(rect.right / plane.hex_width - r / 2) + 2
        for q in range(q_lo, q_hi + 1):
            yield Hex(q, r)


def test_tiny_rectangle_inside_origin_hex():
    plane = HexPlane(2.0)
    visible = plane.get_visible(Rectangle(0.2, 0.1, 0.1, 0.1))
    # The extra row below is the documented slack.
    assert visible == [Hex(0, 0), Hex(0, 1)]


def test_rectangle_covering_one_bounding_box():
    plane = HexPlane(2.0)
    h = Hex(0, 0)
    visible = plane.get_visible(plane.bounding_box(h))
    assert h in visible
    assert 0 < len(visible) <= 12


@pytest.mark.parametrize("h", [Hex(5, -3), Hex(-7, 4), Hex(0, 9), Hex(-2, -11)])
def test_rectangle_covering_other_bounding_boxes(h):
    plane = HexPlane(24.0)
    visible = plane.get_visible(plane.bounding_box(h))
    assert h in visible
    assert len(visible) <= 12


def test_iter_visible_is_lazy_and_matches_list():
    plane = HexPlane(3.0)
    rect = Rectangle(-10.0, -7.5, 25.0, 13.0)
    it = plane.iter_visible(rect)
    assert isinstance(it, GeneratorType)
    assert list(it) == plane.get_visible(rect)


def test_no_duplicates():
    plane = HexPlane(1.0)
    visible = plane.get_visible(Rectangle(-3.3, 2.1, 8.7, 5.2))
    assert len(visible) == len(set(visible))


@pytest.mark.parametrize("width", [1.0, 2.0, 17.0])
def test_visible_is_sound(width):
    plane = HexPlane(width)
    rng = np.random.default_rng(int(width * 100))
    for _ in range(300):
        x, y = rng.uniform(-20 * width, 20 * width, size=2)
        w, h = rng.uniform(0.05 * width, 6 * width, size=2)
        rect = Rectangle(float(x), float(y), float(w), float(h))
        visible = set(plane.get_visible(rect))
        for candidate in _candidates(plane, rect):
            if _overlaps(plane.bounding_box(candidate), rect):
                assert candidate in visible, f"{candidate} missing for {rect}"


@pytest.mark.parametrize("width", [1.0, 5.0])
def test_visible_is_bounded(width):
    plane = HexPlane(width)
    hex_area = plane.hex_width * plane.row_separation
    rng = np.random.default_rng(3)
    for _ in range(100):
        x, y = rng.uniform(-50 * width, 50 * width, size=2)
        w, h = rng.uniform(4 * width, 30 * width, size=2)
        rect = Rectangle(float(x), float(y), float(w), float(h))
        count = len(plane.get_visible(rect))
        ratio = (rect.w * rect.h) / hex_area
        assert ratio <= count <= 3 * ratio


def test_post_filter_by_bounding_box():
    plane = HexPlane(2.0)
    rect = Rectangle(0.2, 0.1, 0.1, 0.1)
    exact = [h for h in plane.get_visible(rect) if plane.bounding_box(h).intersects(rect)]
    assert exact == [Hex(0, 0)]


def test_visible_hexes_cover_rectangle_corners():
    plane = HexPlane(4.0)
    rect = Rectangle(-13.3, 6.1, 21.7, 9.45)
    visible = set(plane.get_visible(rect))
    for corner in (
        rect.upper_left,
        rect.lower_right,
        Point(rect.right, rect.y),
        Point(rect.x, rect.bottom),
    ):
        assert plane.hex(corner) in visible
