"""Experiment utilities for scripted shift simulations."""

import csv
import logging
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from ..algorithms.smoothing import steps_to_within
from ..geometry import create_complex_poly
from ..loader import load_scenario
from ..models import Point, Scenario
from ..simulation import PointerObstacle, ShiftSimulator
from ..visualization import plot_frame
from .plotting import plot_shift_history

log = logging.getLogger(__name__)

# Distance from the final target at which the shift counts as settled
SETTLE_EPS = 0.5


@dataclass
class ExperimentResult:
    scenario_name: str
    n_obstacles: int
    n_vertices: int
    ticks: int
    peak_target: float
    final_target: float
    final_shift: float
    max_lag: float
    settle_ticks: int
    cpu_time: float


def pointer_orbit(scenario: Scenario, n_ticks: int, radius: Optional[float] = None) -> np.ndarray:
    """Circular pointer path around the middle of the ideal segment.

    Returns:
        Array of shape (n_ticks, 2) with one pointer position per tick.
    """
    if radius is None:
        radius = 0.75 * scenario.length
    mid_x = scenario.base.x
    mid_y = scenario.base.y + scenario.length / 2.0
    angles = np.linspace(0.0, 2.0 * np.pi, n_ticks, endpoint=False)
    return np.column_stack((mid_x + radius * np.cos(angles), mid_y + radius * np.sin(angles)))


def run_experiment(
    scenario_path: Path,
    n_ticks: int = 240,
    output_dir: Optional[Path] = None,
    save_plots: bool = True,
    verbose: bool = True,
    seed: Optional[int] = 42,
) -> ExperimentResult:
    """Run one scenario with a pointer obstacle orbiting the segment."""
    scenario_id = scenario_path.stem

    if verbose:
        print(f"\nProcessing {scenario_path.name}...")

    scenario = load_scenario(scenario_path)
    cfg = scenario.config

    if verbose:
        print(f"  Segment: base ({scenario.base.x}, {scenario.base.y}), length {scenario.length}")
        print(f"  Obstacles: {len(scenario.obstacles)} ({scenario.n_vertices} vertices)")
        print(f"  Margin: {cfg.margin}, detection range: {cfg.detection_range}, alpha: {cfg.alpha}")

    path = pointer_orbit(scenario, n_ticks)
    rng = np.random.default_rng(seed)
    first = Point(float(path[0, 0]), float(path[0, 1]))
    pointer = PointerObstacle(create_complex_poly(first, 15, 60.0, rng), last_pointer=first)
    sim = ShiftSimulator(scenario, pointer)

    t0 = time.perf_counter()
    tick = None
    max_lag = 0.0
    for px, py in path:
        tick = sim.step(Point(float(px), float(py)))
        max_lag = max(max_lag, abs(tick.target - tick.shift))
    cpu_time = time.perf_counter() - t0

    final_target = tick.target if tick is not None else 0.0
    final_shift = tick.shift if tick is not None else 0.0
    settle = steps_to_within(final_shift, final_target, cfg.alpha, SETTLE_EPS)
    log.debug("%s: %d ticks in %.4fs", scenario_path.name, n_ticks, cpu_time)

    if verbose:
        print(f"  Ticks: {n_ticks}")
        print(f"  CPU Time: {cpu_time:.3f}s")
        print(f"  Peak target: {max(sim.history_target, default=0.0):.2f}")
        print(f"  Final shift: {final_shift:.2f} (target {final_target:.2f})")

    if save_plots and output_dir and tick is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

        frame_file = output_dir / f"{scenario_id}_frame.png"
        fig, _ = plot_frame(tick, cfg, save_to=frame_file, show=False)
        plt.close(fig)
        if verbose:
            print(f"  Saved: {frame_file.name}")

        history_file = output_dir / f"{scenario_id}_history.png"
        plot_shift_history(sim.history_target, sim.history_shift, scenario_id, history_file)
        if verbose:
            print(f"  Saved: {history_file.name}")

    return ExperimentResult(
        scenario_name=scenario_path.name,
        n_obstacles=len(scenario.obstacles),
        n_vertices=scenario.n_vertices,
        ticks=n_ticks,
        peak_target=max(sim.history_target, default=0.0),
        final_target=final_target,
        final_shift=final_shift,
        max_lag=max_lag,
        settle_ticks=settle,
        cpu_time=cpu_time,
    )


def run_all_experiments(
    scenarios_dir: Path,
    n_ticks: int = 240,
    output_dir: Optional[Path] = None,
    save_plots: bool = True,
    verbose: bool = True,
    seed: Optional[int] = 42,
) -> List[ExperimentResult]:
    """Run every *.txt scenario in a directory.

    Args:
        scenarios_dir: Directory containing scenario files.
        n_ticks: Ticks per scenario.
        output_dir: Directory to save output files.
        save_plots: Whether to save plots.
        verbose: Whether to print progress.
        seed: Seed for the pointer obstacle shape.

    Returns:
        List of ExperimentResult for all scenarios.
    """
    scenario_files = sorted(scenarios_dir.glob("*.txt"))

    if verbose:
        print(f"Found {len(scenario_files)} scenarios: {[f.stem for f in scenario_files]}")

    results = []
    for scenario_file in scenario_files:
        result = run_experiment(
            scenario_file, n_ticks, output_dir, save_plots, verbose, seed
        )
        results.append(result)

    if verbose:
        print(f"\n{'='*60}")
        print(f"Completed {len(results)} experiments.")

    return results


def save_results_csv(
    results: List[ExperimentResult],
    output_path: Path,
) -> None:
    """Save experiment results to CSV file."""
    if not results:
        return

    fieldnames = [
        "scenario_name", "n_obstacles", "n_vertices", "ticks",
        "peak_target", "final_target", "final_shift", "max_lag",
        "settle_ticks", "cpu_time",
    ]

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for r in results:
            writer.writerow(asdict(r))


def print_results_summary(results: List[ExperimentResult]) -> None:
    """Print formatted summary table of results."""
    print("\n" + "=" * 90)
    print("SEGMENT SHIFT RESULTS SUMMARY")
    print("=" * 90)
    print()

    header = (f"{'Scenario':<18} {'Obs':>4} {'Verts':>6} {'Ticks':>6} "
              f"{'Peak':>9} {'Final':>9} {'MaxLag':>9} {'Settle':>6} {'CPU(s)':>7}")
    print(header)
    print("-" * len(header))

    for r in results:
        print(f"{r.scenario_name:<18} {r.n_obstacles:>4} {r.n_vertices:>6} {r.ticks:>6} "
              f"{r.peak_target:>9.2f} {r.final_shift:>9.2f} {r.max_lag:>9.2f} "
              f"{r.settle_ticks:>6} {r.cpu_time:>7.3f}")

    print("-" * len(header))
    print(f"\nTotal scenarios: {len(results)}")
    if results:
        print(f"Avg CPU time: {sum(r.cpu_time for r in results)/len(results):.3f}s")
