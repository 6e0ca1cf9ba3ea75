"""Main entry point for SegShift."""
import argparse
import logging
from pathlib import Path

from .loader import load_scenario, ScenarioParseError, ScenarioValidationError
from .simulation import ShiftSimulator, make_demo_scenario
from .utils.experiments import (
    run_all_experiments,
    run_experiment,
    print_results_summary,
    save_results_csv,
)
from .utils.log import setup_logging
from .visualization import run_interactive

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Segment shift around polygonal obstacles")
    parser.add_argument("scenario", nargs="?", type=str,
                        help="Scenario file or directory of scenario files (default: random demo)")
    parser.add_argument("--ticks", type=int, default=240, help="Ticks per scripted run")
    parser.add_argument("--out", type=str, default=None, help="Directory for plots and results.csv")
    parser.add_argument("--interactive", action="store_true",
                        help="Open a window: mouse moves an obstacle, UP/DOWN change the length")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for generated polygons")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper())

    if args.interactive:
        scenario, pointer = make_demo_scenario(args.seed)
        if args.scenario:
            try:
                scenario = load_scenario(args.scenario)
            except (ScenarioParseError, ScenarioValidationError) as e:
                log.error("%s", e)
                return 1
        run_interactive(ShiftSimulator(scenario, pointer))
        return 0

    if not args.scenario:
        print("Error: a scenario file or directory is required without --interactive.")
        return 2

    target = Path(args.scenario)
    output_dir = Path(args.out) if args.out else None
    save_plots = output_dir is not None

    print("SegShift - Segment Shift Around Obstacles")
    print("=" * 40)

    try:
        if target.is_dir():
            results = run_all_experiments(target, args.ticks, output_dir, save_plots,
                                          seed=args.seed)
        else:
            results = [run_experiment(target, args.ticks, output_dir, save_plots,
                                      seed=args.seed)]
    except (ScenarioParseError, ScenarioValidationError) as e:
        log.error("%s", e)
        return 1

    print_results_summary(results)
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        save_results_csv(results, output_dir / "results.csv")
        print(f"Results saved to {output_dir / 'results.csv'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
