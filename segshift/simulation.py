import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .algorithms.shift import shift_candidates
from .algorithms.smoothing import ShiftState
from .geometry import create_complex_poly
from .models import Obstacle, Point, Scenario, Segment, ShiftConfig

log = logging.getLogger(__name__)


@dataclass
class PointerObstacle:
    """Obstacle template that follows an external pointer.

    The polygon keeps its shape and is moved by the pointer delta between
    ticks. With last_pointer unset the first reading only anchors it.
    """

    polygon: Obstacle
    last_pointer: Optional[Point] = None

    def follow(self, pointer: Point) -> Obstacle:
        if self.last_pointer is not None:
            dx = pointer.x - self.last_pointer.x
            dy = pointer.y - self.last_pointer.y
            if dx or dy:
                self.polygon = self.polygon.translated(dx, dy)
        self.last_pointer = pointer
        return self.polygon


@dataclass
class TickResult:
    ideal: Segment
    pushed: Segment
    target: float
    shift: float
    obstacles: List[Obstacle]
    active: List[Point] = field(default_factory=list)

    @property
    def length(self) -> float:
        return self.ideal.length()


class ShiftSimulator:
    """Per-tick driver: segment length, pointer obstacle and smoothed shift."""

    def __init__(self, scenario: Scenario, pointer_obstacle: Optional[PointerObstacle] = None):
        self.scenario = scenario
        self.config: ShiftConfig = scenario.config
        self.length = max(self.config.min_length, scenario.length)
        self.pointer_obstacle = pointer_obstacle
        self.state = ShiftState()
        self.history_target: List[float] = []
        self.history_shift: List[float] = []

    def ideal_segment(self) -> Segment:
        base = self.scenario.base
        return Segment(base, Point(base.x, base.y + self.length), self.config.heading)

    def world(self, pointer: Optional[Point] = None) -> List[Obstacle]:
        obstacles = list(self.scenario.obstacles)
        if self.pointer_obstacle is not None:
            if pointer is not None:
                obstacles.append(self.pointer_obstacle.follow(pointer))
            else:
                obstacles.append(self.pointer_obstacle.polygon)
        return obstacles

    def step(self, pointer: Optional[Point] = None, length_delta: float = 0.0) -> TickResult:
        if length_delta:
            self.length = max(self.config.min_length, self.length + length_delta)

        ideal = self.ideal_segment()
        obstacles = self.world(pointer)

        cfg = self.config
        candidates = list(shift_candidates(ideal, obstacles, cfg.margin, cfg.detection_range))
        target = max((push for _, push in candidates), default=0.0)
        shift = self.state.advance(target, cfg.alpha)

        self.history_target.append(target)
        self.history_shift.append(shift)
        log.debug("tick %d: length=%.1f target=%.3f shift=%.3f",
                  self.state.ticks, self.length, target, shift)

        return TickResult(
            ideal=ideal,
            pushed=ideal.shifted(shift),
            target=target,
            shift=shift,
            obstacles=obstacles,
            active=[v for v, _ in candidates],
        )


def make_demo_scenario(seed: Optional[int] = None) -> tuple[Scenario, PointerObstacle]:
    """Default layout: a vertical segment with two static blobs and a pointer blob."""
    rng = np.random.default_rng(seed)
    obstacles = [
        create_complex_poly(Point(220.0, 200.0), 12, 40.0, rng),
        create_complex_poly(Point(240.0, 450.0), 8, 50.0, rng),
    ]
    scenario = Scenario(
        base=Point(250.0, 150.0),
        length=300.0,
        config=ShiftConfig(
            margin=25.0,
            detection_range=600.0,
            heading=Point(1.0, 0.0),
            alpha=0.2,
        ),
        obstacles=obstacles,
    )
    # Parked off to the right until the first pointer reading centers it there
    parked = Point(700.0, 350.0)
    pointer = PointerObstacle(create_complex_poly(parked, 15, 60.0, rng), last_pointer=parked)
    return scenario, pointer
