import math

import numpy as np
import pytest

from segshift.geometry import bounding_box, create_complex_poly
from segshift.models import Obstacle, Point


def test_complex_poly_vertex_count_and_radius_range():
    center = Point(220.0, 200.0)
    poly = create_complex_poly(center, 12, 40.0, np.random.default_rng(0))
    assert len(poly) == 12
    for v in poly:
        r = math.hypot(v.x - center.x, v.y - center.y)
        assert 20.0 - 1e-9 <= r <= 60.0 + 1e-9


def test_complex_poly_vertices_are_in_angular_order():
    center = Point(0.0, 0.0)
    poly = create_complex_poly(center, 8, 50.0, np.random.default_rng(3))
    for i, v in enumerate(poly):
        expected = i * 2.0 * math.pi / 8
        angle = math.atan2(v.y, v.x) % (2.0 * math.pi)
        assert angle == pytest.approx(expected, abs=1e-9)


def test_complex_poly_is_reproducible_with_seed():
    a = create_complex_poly(Point(0, 0), 15, 60.0, np.random.default_rng(7))
    b = create_complex_poly(Point(0, 0), 15, 60.0, np.random.default_rng(7))
    assert a == b


def test_complex_poly_needs_three_sides():
    with pytest.raises(ValueError):
        create_complex_poly(Point(0, 0), 2, 10.0)


def test_bounding_box():
    obstacles = [
        Obstacle((Point(0, 5), Point(3, 1), Point(2, 8))),
        Obstacle((Point(-4, 2), Point(1, 1), Point(0, 0))),
    ]
    assert bounding_box(obstacles) == (-4, 0, 3, 8)
    assert bounding_box([]) is None
