import math
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


# Below this length a segment has no defined direction
SEGMENT_EPS = 1e-6

# Tolerance when checking that the heading is a unit vector
UNIT_TOL = 1e-6


class ShiftConfigError(ValueError):
    """Raised when shift configuration values are out of range."""
    pass


def is_unit(v: "Point", tol: float = UNIT_TOL) -> bool:
    return abs(v.norm() - 1.0) <= tol


@dataclass(frozen=True)
class Point:
    """Represents a 2D point or displacement."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)


@dataclass(frozen=True)
class Segment:
    """A segment that can only be pushed along a fixed heading.

    Attributes:
        start: First endpoint.
        end: Second endpoint.
        heading: Unit push direction. Configuration, not derived from the endpoints.
    """

    start: Point
    end: Point
    heading: Point

    def length(self) -> float:
        return (self.end - self.start).norm()

    def direction(self) -> Point:
        """Unit vector from start to end, or (0, 0) for a degenerate segment."""
        d = self.end - self.start
        length = d.norm()
        if length > SEGMENT_EPS:
            return Point(d.x / length, d.y / length)
        return Point(0.0, 0.0)

    def shifted(self, amount: float) -> "Segment":
        """Return the segment translated by heading * amount."""
        offset = self.heading * amount
        return Segment(self.start + offset, self.end + offset, self.heading)


@dataclass(frozen=True)
class Obstacle:
    """Closed polygon; edge i connects vertex i to vertex (i + 1) mod n."""

    vertices: Tuple[Point, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of points but store an immutable tuple
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def edges(self) -> Iterator[Tuple[Point, Point]]:
        n = len(self.vertices)
        for i in range(n):
            yield self.vertices[i], self.vertices[(i + 1) % n]

    def translated(self, dx: float, dy: float) -> "Obstacle":
        return Obstacle(tuple(Point(v.x + dx, v.y + dy) for v in self.vertices))


@dataclass(frozen=True)
class ShiftConfig:
    """Fixed parameters of the shift computation and the tick loop.

    Attributes:
        margin: Minimum clearance kept along the heading.
        detection_range: How far ahead of the ideal line vertices are considered.
        heading: Unit push direction.
        alpha: Smoothing factor applied every tick, in (0, 1].
        min_length: Lower clamp for the segment length.
        length_step: Length change per key press in the interactive viewer.
    """

    margin: float = 25.0
    detection_range: float = 600.0
    heading: Point = Point(1.0, 0.0)
    alpha: float = 0.2
    min_length: float = 10.0
    length_step: float = 2.0

    def __post_init__(self) -> None:
        if not self.margin >= 0:
            raise ShiftConfigError(f"margin must be non-negative, got {self.margin}")
        if not self.detection_range > 0:
            raise ShiftConfigError(
                f"detection_range must be positive, got {self.detection_range}"
            )
        if not is_unit(self.heading):
            raise ShiftConfigError(
                f"heading must be a unit vector, got ({self.heading.x}, {self.heading.y}) "
                f"with norm {self.heading.norm():.6f}"
            )
        if not 0 < self.alpha <= 1:
            raise ShiftConfigError(f"alpha must be in (0, 1], got {self.alpha}")
        if not self.min_length > 0:
            raise ShiftConfigError(f"min_length must be positive, got {self.min_length}")
        if self.length_step < 0:
            raise ShiftConfigError(
                f"length_step must be non-negative, got {self.length_step}"
            )


@dataclass
class Scenario:
    """Initial state of a shift simulation.

    Attributes:
        base: Ideal (un-shifted) position of the segment start.
        length: Initial segment length; the segment runs from base along +y.
        config: Shift parameters.
        obstacles: Static obstacle polygons.
    """

    base: Point
    length: float
    config: ShiftConfig = field(default_factory=ShiftConfig)
    obstacles: List[Obstacle] = field(default_factory=list)

    @property
    def n_vertices(self) -> int:
        return sum(len(obs) for obs in self.obstacles)
