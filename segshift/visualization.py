import logging
from pathlib import Path
from typing import Optional, Set, Tuple

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .geometry import bounding_box
from .models import Point, ShiftConfig
from .simulation import ShiftSimulator, TickResult

log = logging.getLogger(__name__)

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 700
TARGET_FPS = 60


def draw_frame(ax: Axes, tick: TickResult, config: ShiftConfig, fontsize: int = 12) -> None:
    """Draw one tick onto ax (screen coordinates, y grows downward)."""
    ideal, pushed = tick.ideal, tick.pushed
    heading = config.heading

    # Ideal path reference line
    ax.plot(
        [ideal.start.x, ideal.end.x], [ideal.start.y, ideal.end.y],
        color="gray",
        alpha=0.3,
        linewidth=1,
    )

    # Margin box trailing the pushed segment, opposite to the heading
    back = pushed.start - heading * config.margin
    corners = [pushed.start, pushed.end, pushed.end - heading * config.margin, back]
    margin_box = patches.Polygon(
        [(p.x, p.y) for p in corners],
        closed=True,
        facecolor="skyblue",
        edgecolor="none",
        alpha=0.15,
    )
    ax.add_patch(margin_box)

    # Actual segment
    ax.plot(
        [pushed.start.x, pushed.end.x], [pushed.start.y, pushed.end.y],
        color="darkblue",
        linewidth=4,
        marker="o",
        markersize=6,
        zorder=5,
    )

    # Obstacles
    for obs in tick.obstacles:
        outline = patches.Polygon(
            [(v.x, v.y) for v in obs],
            closed=True,
            fill=False,
            edgecolor="maroon",
            linewidth=2,
        )
        ax.add_patch(outline)

    if tick.active:
        ax.scatter(
            [v.x for v in tick.active], [v.y for v in tick.active],
            s=12,
            color="orange",
            zorder=6,
        )

    ax.set_title(
        f"Length: {tick.length:.1f}   Target: {tick.target:.1f}   Shift: {tick.shift:.1f}",
        fontsize=fontsize,
    )


def _setup_axes(ax: Axes, tick: TickResult) -> None:
    bbox = bounding_box(tick.obstacles)
    x_max, y_max = SCREEN_WIDTH, SCREEN_HEIGHT
    if bbox is not None:
        x_max = max(x_max, bbox[2])
        y_max = max(y_max, bbox[3])
    ax.set_xlim(0, x_max)
    ax.set_ylim(y_max, 0)
    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3)


def plot_frame(
    tick: TickResult,
    config: ShiftConfig,
    save_to: Optional[str | Path] = None,
    show: bool = True,
) -> Tuple[Figure, Axes]:
    """Plot a single tick: ideal line, margin box, pushed segment and obstacles."""
    fig, ax = plt.subplots(figsize=(10, 7))
    _setup_axes(ax, tick)
    draw_frame(ax, tick, config)

    if save_to:
        fig.savefig(save_to, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig, ax


class InteractiveViewer:
    """Matplotlib window driving a ShiftSimulator.

    The pointer obstacle follows the mouse; holding the up/down arrow keys
    grows or shrinks the segment by config.length_step per frame.
    """

    def __init__(self, simulator: ShiftSimulator):
        self.simulator = simulator
        self.pointer: Optional[Point] = None
        self.keys_down: Set[str] = set()
        self.fig, self.ax = plt.subplots(figsize=(SCREEN_WIDTH / 100, SCREEN_HEIGHT / 100))
        self.fig.canvas.manager.set_window_title("Complex Obstacles & Dynamic Segment")
        self.fig.canvas.mpl_connect("motion_notify_event", self.on_move)
        self.fig.canvas.mpl_connect("key_press_event", self.on_key_press)
        self.fig.canvas.mpl_connect("key_release_event", self.on_key_release)

    def on_move(self, event) -> None:
        if event.inaxes is self.ax and event.xdata is not None:
            self.pointer = Point(float(event.xdata), float(event.ydata))

    def on_key_press(self, event) -> None:
        if event.key in ("up", "down"):
            self.keys_down.add(event.key)

    def on_key_release(self, event) -> None:
        self.keys_down.discard(event.key)

    def length_delta(self) -> float:
        step = self.simulator.config.length_step
        delta = 0.0
        if "up" in self.keys_down:
            delta += step
        if "down" in self.keys_down:
            delta -= step
        return delta

    def update(self, _frame: int) -> None:
        tick = self.simulator.step(self.pointer, self.length_delta())
        self.ax.clear()
        _setup_axes(self.ax, tick)
        draw_frame(self.ax, tick, self.simulator.config)
        self.ax.text(
            10, 20, "Use UP/DOWN arrows to change Segment Length",
            fontsize=10,
            color="dimgray",
        )

    def run(self) -> None:
        log.info("Starting interactive viewer at %d fps", TARGET_FPS)
        plt.ion()
        frame = 0
        while plt.fignum_exists(self.fig.number):
            self.update(frame)
            self.fig.canvas.draw_idle()
            self.fig.canvas.flush_events()
            plt.pause(1.0 / TARGET_FPS)
            frame += 1
        log.info("Viewer closed after %d frames", frame)


def run_interactive(simulator: ShiftSimulator) -> None:
    InteractiveViewer(simulator).run()
