import logging
import math
from pathlib import Path
from typing import List

from .models import Obstacle, Point, Scenario, ShiftConfig, ShiftConfigError

log = logging.getLogger(__name__)

# base(2) + length(1) + heading(2) + margin, detection_range, alpha
HEADER_FIELDS = 8

MIN_POLY_VERTICES = 3


class ScenarioValidationError(Exception):
    """Raised when scenario validation fails."""
    pass


class ScenarioParseError(Exception):
    """Raised when scenario file cannot be parsed."""
    pass


def _strip_comments(content: str) -> str:
    return "\n".join(line.split("#", 1)[0] for line in content.splitlines())


def _parse_values(filepath: Path) -> List[float]:
    """Parse file content into list of floats."""
    try:
        content = filepath.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ScenarioParseError(f"File not found: {filepath}")
    except PermissionError:
        raise ScenarioParseError(f"Permission denied: {filepath}")

    content = _strip_comments(content)
    if not content.strip():
        raise ScenarioParseError(f"File is empty: {filepath}")

    values: List[float] = []
    for i, token in enumerate(content.split()):
        try:
            values.append(float(token))
        except ValueError:
            raise ScenarioParseError(
                f"Invalid number at position {i}: '{token}' in {filepath}"
            )

    return values


def _validate_field_count(values: List[float], filepath: Path) -> None:
    if len(values) < HEADER_FIELDS:
        raise ScenarioParseError(
            f"Not enough values in {filepath}: expected at least {HEADER_FIELDS}, got {len(values)}"
        )


def _parse_obstacles(values: List[float], start: int, filepath: Path) -> List[Obstacle]:
    """Read [n x1 y1 ... xn yn] records until the end of values."""
    obstacles: List[Obstacle] = []
    i = start
    while i < len(values):
        count = values[i]
        if not math.isfinite(count):
            raise ScenarioParseError(
                f"Obstacle {len(obstacles)} in {filepath}: vertex count must be finite, got {count}"
            )
        if count != int(count):
            raise ScenarioParseError(
                f"Obstacle {len(obstacles)} in {filepath}: vertex count must be an integer, got {count}"
            )
        n = int(count)
        if n < MIN_POLY_VERTICES:
            raise ScenarioValidationError(
                f"Obstacle {len(obstacles)}: needs at least {MIN_POLY_VERTICES} vertices, got {n}"
            )
        i += 1
        if i + 2 * n > len(values):
            raise ScenarioParseError(
                f"Obstacle {len(obstacles)} in {filepath}: expected {2 * n} coordinates, "
                f"got {len(values) - i}"
            )
        vertices = tuple(Point(values[i + 2 * k], values[i + 2 * k + 1]) for k in range(n))
        obstacles.append(Obstacle(vertices))
        i += 2 * n
    return obstacles


def _validate_length(length: float) -> None:
    if length <= 0:
        raise ScenarioValidationError(f"Segment length must be positive, got {length}")


def _validate_finite(values: List[float]) -> None:
    """Reject nan and inf anywhere in the header or vertex data."""
    for i, v in enumerate(values):
        if not math.isfinite(v):
            raise ScenarioValidationError(f"Value at position {i} must be finite, got {v}")


def load_scenario(filepath: str | Path) -> Scenario:
    """Load a scenario from file.

    Args:
        filepath: Path to the scenario file.

    Returns:
        Scenario object with all data.

    Raises:
        ScenarioParseError: If file cannot be parsed.
        ScenarioValidationError: If a value violates the shift constraints.

    File format (whitespace-separated values, '#' starts a comment):
        base_x base_y
        length
        heading_x heading_y
        margin detection_range alpha
        [n x1 y1 ... xn yn] ...  (0 or more obstacles)

    A positive length below config.min_length is kept as written;
    ShiftSimulator clamps it.
    """
    filepath = Path(filepath)

    values = _parse_values(filepath)
    _validate_field_count(values, filepath)

    base = Point(values[0], values[1])
    length = values[2]
    heading = Point(values[3], values[4])
    margin, detection_range, alpha = values[5], values[6], values[7]

    obstacles = _parse_obstacles(values, HEADER_FIELDS, filepath)

    _validate_finite(values)
    _validate_length(length)
    try:
        config = ShiftConfig(
            margin=margin,
            detection_range=detection_range,
            heading=heading,
            alpha=alpha,
        )
    except ShiftConfigError as e:
        raise ScenarioValidationError(str(e)) from e

    scenario = Scenario(base=base, length=length, config=config, obstacles=obstacles)
    log.info("Loaded %s: %d obstacles, %d vertices",
             filepath.name, len(obstacles), scenario.n_vertices)
    return scenario
