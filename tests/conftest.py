import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import pytest

from segshift.models import Point, Segment

SCENARIOS_DIR = Path(__file__).resolve().parent.parent / "scenarios"


@pytest.fixture
def vertical_segment() -> Segment:
    """Segment (0,0)-(0,100) pushed along +x."""
    return Segment(Point(0.0, 0.0), Point(0.0, 100.0), Point(1.0, 0.0))


@pytest.fixture
def scenarios_dir() -> Path:
    return SCENARIOS_DIR


@pytest.fixture
def write_scenario(tmp_path):
    def _write(text: str, name: str = "scenario.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
