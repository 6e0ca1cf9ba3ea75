import math
from typing import Iterable, List, Optional

import numpy as np

from .models import Obstacle, Point


def create_complex_poly(
    center: Point,
    sides: int,
    avg_radius: float,
    rng: Optional[np.random.Generator] = None,
) -> Obstacle:
    """Build an irregular polygon around center.

    Vertices sit at evenly spaced angles; each radius is avg_radius scaled by a
    random factor in [0.5, 1.5] so the outline gets concave notches.

    Args:
        center: Polygon center.
        sides: Number of vertices (at least 3).
        avg_radius: Mean distance from center to a vertex.
        rng: Random generator. A fresh unseeded one is used if None.

    Returns:
        Obstacle with `sides` vertices in angular order.
    """
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
    if rng is None:
        rng = np.random.default_rng()

    # Integer percent in [0, 100], inclusive on both ends
    jitter = rng.integers(0, 101, size=sides)
    angles = np.arange(sides) * (2.0 * math.pi / sides)
    radii = avg_radius * (0.5 + jitter / 100.0)

    xs = center.x + radii * np.cos(angles)
    ys = center.y + radii * np.sin(angles)
    return Obstacle(tuple(Point(float(x), float(y)) for x, y in zip(xs, ys)))


def bounding_box(obstacles: Iterable[Obstacle]) -> Optional[tuple[float, float, float, float]]:
    """Return (x_min, y_min, x_max, y_max) over all vertices, or None if empty."""
    xs: List[float] = []
    ys: List[float] = []
    for obs in obstacles:
        for v in obs:
            xs.append(v.x)
            ys.append(v.y)
    if not xs:
        return None
    return (min(xs), min(ys), max(xs), max(ys))
