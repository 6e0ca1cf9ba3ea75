"""Plotting utilities for experiments."""

from pathlib import Path
from typing import List

import matplotlib.pyplot as plt


def plot_shift_history(
    targets: List[float],
    shifts: List[float],
    scenario_id: str,
    save_to: Path,
    fontsize: int = 16,
) -> None:
    """Plot the raw target push against the smoothed shift, one point per tick."""
    fig, ax = plt.subplots(figsize=(10, 6))
    x = list(range(len(targets)))

    ax.plot(x, targets, linewidth=1, color="coral", alpha=0.8, label="Target")
    ax.plot(x, shifts, linewidth=2, color="darkblue", label="Smoothed shift")

    ax.set_xlabel("Tick", fontsize=fontsize)
    ax.set_ylabel("Shift", fontsize=fontsize)
    ax.set_title(f"Segment Shift - Scenario {scenario_id}", fontsize=fontsize + 2)
    ax.tick_params(axis="both", labelsize=fontsize - 2)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", fontsize=fontsize - 2)

    fig.tight_layout()
    fig.savefig(save_to, dpi=150, bbox_inches="tight")
    plt.close(fig)
