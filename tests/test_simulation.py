import pytest

from segshift.algorithms.shift import compute_shift, shift_candidates
from segshift.models import Obstacle, Point, Scenario, ShiftConfig
from segshift.simulation import PointerObstacle, ShiftSimulator, make_demo_scenario

TRIANGLE = Obstacle((Point(0, -5), Point(5, 5), Point(-5, 5)))


def make_scenario(alpha: float = 0.2, obstacles=None) -> Scenario:
    return Scenario(
        base=Point(0.0, 0.0),
        length=100.0,
        config=ShiftConfig(margin=30.0, detection_range=600.0, alpha=alpha),
        obstacles=obstacles or [],
    )


def test_pointer_obstacle_first_reading_anchors():
    pointer = PointerObstacle(TRIANGLE)
    assert pointer.follow(Point(40, 40)) == TRIANGLE
    moved = pointer.follow(Point(50, 30))
    assert moved == TRIANGLE.translated(10, -10)


def test_pointer_obstacle_jumps_to_first_reading_when_parked():
    pointer = PointerObstacle(TRIANGLE, last_pointer=Point(0, 0))
    assert pointer.follow(Point(20, 50)) == TRIANGLE.translated(20, 50)


def test_step_without_obstacles():
    sim = ShiftSimulator(make_scenario())
    tick = sim.step()
    assert tick.target == 0.0
    assert tick.shift == 0.0
    assert tick.pushed == tick.ideal
    assert tick.active == []


def test_step_smooths_toward_target():
    obstacles = [Obstacle((Point(20, 50), Point(25, 60), Point(15, 60)))]
    sim = ShiftSimulator(make_scenario(alpha=0.5, obstacles=obstacles))
    first = sim.step()
    assert first.target == 55.0
    assert first.shift == pytest.approx(27.5)
    second = sim.step()
    assert second.shift == pytest.approx(41.25)
    assert second.pushed.start == Point(second.shift, 0.0)
    assert second.pushed.end == Point(second.shift, 100.0)
    assert sim.history_target == [55.0, 55.0]
    assert sim.history_shift == [first.shift, second.shift]
    assert set(second.active) == set(obstacles[0].vertices)


def test_target_matches_calculator():
    scenario, pointer = make_demo_scenario(seed=5)
    sim = ShiftSimulator(scenario, pointer)
    tick = sim.step(Point(300, 300))
    cfg = scenario.config
    assert tick.target == compute_shift(tick.ideal, tick.obstacles, cfg.margin, cfg.detection_range)


def test_target_is_largest_push_among_active_vertices():
    near = Obstacle((Point(20, 40), Point(25, 60), Point(15, 60)))
    far = Obstacle((Point(700, 10), Point(710, 20), Point(690, 20)))
    sim = ShiftSimulator(make_scenario(alpha=1.0, obstacles=[near, far]))
    tick = sim.step()
    pushes = dict(shift_candidates(tick.ideal, tick.obstacles, 30.0, 600.0))
    assert set(tick.active) == set(near.vertices)
    assert tick.target == max(pushes.values()) == 55.0


def test_target_is_zero_without_active_vertices():
    sim = ShiftSimulator(make_scenario())
    tick = sim.step()
    assert tick.active == []
    assert tick.target == 0.0


def test_pointer_obstacle_is_part_of_the_world():
    pointer = PointerObstacle(TRIANGLE, last_pointer=Point(0, 0))
    sim = ShiftSimulator(make_scenario(alpha=1.0), pointer)
    tick = sim.step(Point(20, 50))
    assert len(tick.obstacles) == 1
    assert tick.target == 55.0
    assert tick.shift == 55.0

    # pointer moves out of the detection window
    tick = sim.step(Point(1000, 50))
    assert tick.target == 0.0

    # no reading keeps the polygon where it was
    tick = sim.step()
    assert tick.obstacles[0] == TRIANGLE.translated(1000, 50)


def test_length_changes_are_clamped():
    sim = ShiftSimulator(make_scenario())
    tick = sim.step(length_delta=2.0)
    assert tick.length == pytest.approx(102.0)
    tick = sim.step(length_delta=-1000.0)
    assert tick.length == pytest.approx(sim.config.min_length)
    assert sim.length == sim.config.min_length


def test_initial_length_below_minimum_is_clamped():
    scenario = make_scenario()
    scenario.length = 1.0
    sim = ShiftSimulator(scenario)
    assert sim.length == scenario.config.min_length


def test_demo_scenario_layout():
    scenario, pointer = make_demo_scenario(seed=1)
    assert scenario.base == Point(250.0, 150.0)
    assert scenario.length == 300.0
    assert scenario.config.margin == 25.0
    assert scenario.config.detection_range == 600.0
    assert scenario.config.alpha == 0.2
    assert [len(o) for o in scenario.obstacles] == [12, 8]
    assert len(pointer.polygon) == 15


def test_demo_scenario_is_reproducible():
    a, pa = make_demo_scenario(seed=9)
    b, pb = make_demo_scenario(seed=9)
    assert a.obstacles == b.obstacles
    assert pa.polygon == pb.polygon
