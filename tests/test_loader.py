import pytest

from segshift.loader import ScenarioParseError, ScenarioValidationError, load_scenario
from segshift.models import Obstacle, Point

VALID = """\
# comment line
250 150      # base
300
1 0
25 600 0.2
3  10 10  20 10  15 20
4  0 0  1 0  1 1  0 1
"""


def test_load_valid_scenario(write_scenario):
    scenario = load_scenario(write_scenario(VALID))
    assert scenario.base == Point(250, 150)
    assert scenario.length == 300
    assert scenario.config.heading == Point(1, 0)
    assert scenario.config.margin == 25
    assert scenario.config.detection_range == 600
    assert scenario.config.alpha == 0.2
    assert len(scenario.obstacles) == 2
    assert scenario.obstacles[0] == Obstacle((Point(10, 10), Point(20, 10), Point(15, 20)))
    assert scenario.n_vertices == 7


def test_load_without_obstacles(write_scenario):
    scenario = load_scenario(write_scenario("0 0\n50\n0 1\n0 10 1\n"))
    assert scenario.obstacles == []
    assert scenario.config.margin == 0


def test_bundled_scenarios_load(scenarios_dir):
    files = sorted(scenarios_dir.glob("*.txt"))
    assert files
    for path in files:
        load_scenario(path)


def test_missing_file(tmp_path):
    with pytest.raises(ScenarioParseError, match="not found"):
        load_scenario(tmp_path / "nope.txt")


def test_empty_file(write_scenario):
    with pytest.raises(ScenarioParseError, match="empty"):
        load_scenario(write_scenario("# only a comment\n\n"))


def test_invalid_token(write_scenario):
    with pytest.raises(ScenarioParseError, match="Invalid number"):
        load_scenario(write_scenario("0 0\n50\n1 zero\n10 100 0.2\n"))


def test_short_header(write_scenario):
    with pytest.raises(ScenarioParseError, match="Not enough values"):
        load_scenario(write_scenario("0 0 50 1 0 10 100\n"))


def test_truncated_obstacle(write_scenario):
    with pytest.raises(ScenarioParseError, match="expected 8 coordinates"):
        load_scenario(write_scenario("0 0 50 1 0 10 100 0.2  4 0 0 1 0 1 1\n"))


def test_fractional_vertex_count(write_scenario):
    with pytest.raises(ScenarioParseError, match="integer"):
        load_scenario(write_scenario("0 0 50 1 0 10 100 0.2  3.5 0 0 1 0 1 1\n"))


def test_too_few_vertices(write_scenario):
    with pytest.raises(ScenarioValidationError, match="at least 3"):
        load_scenario(write_scenario("0 0 50 1 0 10 100 0.2  2 0 0 1 0\n"))


@pytest.mark.parametrize(
    "header, message",
    [
        ("0 0 0 1 0 10 100 0.2", "length must be positive"),
        ("0 0 50 1 1 10 100 0.2", "unit vector"),
        ("0 0 50 1 0 -1 100 0.2", "margin"),
        ("0 0 50 1 0 10 0 0.2", "detection_range"),
        ("0 0 50 1 0 10 100 0", "alpha"),
        ("0 0 50 1 0 10 100 1.2", "alpha"),
    ],
)
def test_invalid_values(write_scenario, header, message):
    with pytest.raises(ScenarioValidationError, match=message):
        load_scenario(write_scenario(header + "\n"))


@pytest.mark.parametrize("count", ["nan", "inf", "-inf"])
def test_non_finite_vertex_count(write_scenario, count):
    with pytest.raises(ScenarioParseError, match="must be finite"):
        load_scenario(write_scenario(f"0 0 50 1 0 10 100 0.2  {count} 0 0 1 0 1 1\n"))


@pytest.mark.parametrize(
    "text",
    [
        "nan 0 50 1 0 10 100 0.2\n",
        "0 inf 50 1 0 10 100 0.2\n",
        "0 0 nan 1 0 10 100 0.2\n",
        "0 0 inf 1 0 10 100 0.2\n",
        "0 0 50 1 0 10 inf 0.2\n",
        "0 0 50 1 0 10 100 0.2  3 0 0 nan 0 1 1\n",
        "0 0 50 1 0 10 100 0.2  3 0 0 1 0 1 -inf\n",
    ],
)
def test_non_finite_values_are_rejected(write_scenario, text):
    with pytest.raises(ScenarioValidationError, match="must be finite"):
        load_scenario(write_scenario(text))


def test_short_length_is_left_for_the_simulator_to_clamp(write_scenario):
    from segshift.simulation import ShiftSimulator

    scenario = load_scenario(write_scenario("0 0 5 1 0 10 100 0.2\n"))
    assert scenario.length == 5
    assert ShiftSimulator(scenario).length == scenario.config.min_length
