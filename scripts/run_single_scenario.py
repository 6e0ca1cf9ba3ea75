"""Run a single scenario file with a scripted pointer (edit settings at top)."""
import sys
from pathlib import Path

_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from segshift.utils.experiments import run_experiment
from segshift.utils.log import setup_logging

# Edit: which scenario (index into sorted scenarios/*.txt) and run settings
SCENARIO_INDEX = 0
N_TICKS = 240
SEED = 42
OUTPUT_DIR = _project_root / "output" / "results"
SAVE_PLOTS = True

def main():
    setup_logging()
    scenarios_dir = _project_root / "scenarios"
    scenario_files = sorted(scenarios_dir.glob("*.txt"))
    if not scenario_files or SCENARIO_INDEX < 0 or SCENARIO_INDEX >= len(scenario_files):
        print(f"SCENARIO_INDEX must be 0..{len(scenario_files) - 1}")
        return
    scenario_path = scenario_files[SCENARIO_INDEX]
    print("=" * 50)
    print(f"Scenario: {scenario_path.name}")
    print("=" * 50)
    result = run_experiment(
        scenario_path,
        n_ticks=N_TICKS,
        output_dir=OUTPUT_DIR if SAVE_PLOTS else None,
        save_plots=SAVE_PLOTS,
        verbose=True,
        seed=SEED,
    )
    print("\nDone.")
    return result

if __name__ == "__main__":
    main()
