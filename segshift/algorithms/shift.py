from typing import Iterable, Iterator, Optional, Tuple

from ..models import Obstacle, Point, Segment, SEGMENT_EPS


def shift_candidates(
    segment: Segment,
    obstacles: Iterable[Obstacle],
    margin: float,
    detection_range: float,
) -> Iterator[Tuple[Point, float]]:
    """Yield (vertex, required push) for every vertex that passes both gates.

    A vertex counts when its foot on the segment lies within [0, length] and
    its lateral distance along the heading lies in (-margin, detection_range).
    The required push is the lateral distance plus the margin.
    """
    seg_len = segment.length()
    if seg_len < SEGMENT_EPS:
        return

    direction = segment.direction()
    heading = segment.heading

    for obs in obstacles:
        for v in obs:
            to_start = v - segment.start
            proj = to_start.dot(direction)
            if proj < 0 or proj > seg_len:
                continue

            d = to_start.dot(heading)
            # Lower bound is -margin so obstacles slightly behind still register
            if d < detection_range and d > -margin:
                yield v, d + margin


def compute_shift(
    segment: Segment,
    obstacles: Iterable[Obstacle],
    margin: float,
    detection_range: float,
) -> float:
    """Return the push along the heading needed to clear every relevant vertex.

    Brute force over all vertices of all obstacles. The result is the largest
    candidate push, or 0.0 if no vertex passes the gates (including the case of
    a zero-length segment).
    """
    max_shift: Optional[float] = None
    for _, push in shift_candidates(segment, obstacles, margin, detection_range):
        if max_shift is None or push > max_shift:
            max_shift = push
    return 0.0 if max_shift is None else max_shift
