"""SegShift - keep a segment clear of polygonal obstacles by pushing it along a heading."""

from .loader import load_scenario, ScenarioValidationError, ScenarioParseError
from .models import Obstacle, Point, Scenario, Segment, ShiftConfig, ShiftConfigError, is_unit
from .geometry import (
    create_complex_poly,
    bounding_box,
)
from .simulation import (
    PointerObstacle,
    ShiftSimulator,
    TickResult,
    make_demo_scenario,
)
from .visualization import plot_frame, draw_frame, run_interactive

# Algorithms
from .algorithms import (
    compute_shift,
    shift_candidates,
    advance,
    steps_to_within,
    ShiftState,
)

# Utils
from .utils import (
    ExperimentResult,
    run_experiment,
    run_all_experiments,
    save_results_csv,
    print_results_summary,
    plot_shift_history,
    setup_logging,
)
