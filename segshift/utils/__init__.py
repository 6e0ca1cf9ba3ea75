"""Utility functions for experiments, plotting and logging."""

from .experiments import (
    ExperimentResult,
    run_experiment,
    run_all_experiments,
    save_results_csv,
    print_results_summary,
)
from .log import setup_logging
from .plotting import plot_shift_history

__all__ = [
    "ExperimentResult",
    "run_experiment",
    "run_all_experiments",
    "save_results_csv",
    "print_results_summary",
    "setup_logging",
    "plot_shift_history",
]
