import argparse
from pathlib import Path

from segshift.loader import load_scenario
from segshift.models import Point
from segshift.simulation import ShiftSimulator, make_demo_scenario
from segshift.visualization import plot_frame

def main():
    parser = argparse.ArgumentParser(description="Render one frame of the segment shift")
    parser.add_argument("scenario", type=str, nargs="?", help="Path to scenario file (default: random demo)")
    parser.add_argument("--ticks", type=int, default=60, help="Ticks to simulate before rendering")
    parser.add_argument("--pointer", type=float, nargs=2, metavar=("X", "Y"), default=None,
                        help="Hold the pointer obstacle at this position")
    parser.add_argument("--grow", type=float, default=0.0, help="Length change applied each tick")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--out", type=str, default="shift_frame.png", help="Output filename for plot")

    args = parser.parse_args()

    scenario, pointer_obs = make_demo_scenario(args.seed)
    if args.scenario:
        scenario_path = Path(args.scenario)
        if not scenario_path.exists():
            print(f"Error: Scenario file {scenario_path} not found.")
            return
        print(f"Loading scenario from {scenario_path}...")
        scenario = load_scenario(scenario_path)

    pointer = Point(*args.pointer) if args.pointer else None
    sim = ShiftSimulator(scenario, pointer_obs if pointer else None)

    tick = None
    for _ in range(args.ticks):
        tick = sim.step(pointer, args.grow)

    if tick is None:
        print("Nothing to render (--ticks must be positive).")
        return

    print(f"Length: {tick.length:.1f}")
    print(f"Target shift: {tick.target:.4f}")
    print(f"Current shift: {tick.shift:.4f}")
    print(f"Active vertices: {len(tick.active)}")

    plot_frame(tick, scenario.config, save_to=args.out, show=False)
    print(f"Result saved to {args.out}")

if __name__ == "__main__":
    main()
