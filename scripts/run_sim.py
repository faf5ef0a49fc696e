"""Command line harness for the Monty Hall simulator."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "simulation_logs" / "latest_run.json"
EXIT_ALLOCATION_FAILURE = 3

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from monty_sim import DEFAULT_SEED, ConfigError, RngId, SimConfig, run_monty_sim
from monty_sim.prng import RNG_CHOICES
from monty_sim.report import format_report

logger = logging.getLogger("monty_sim.cli")

BANNER = "Monty Hall Simulator\n"


def _parse_rng(value: str) -> RngId:
    try:
        return RngId(value.strip().lower())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Unknown RNG '{value}'. Choose from: {', '.join(RNG_CHOICES)}"
        ) from exc


def _prompt(
    label: str,
    default,
    convert: Callable,
    input_fn: Callable[[str], str] = input,
):
    """Ask for one value; blank input keeps ``default``."""

    raw = input_fn(f"{label} [{default}]: ").strip()
    if not raw:
        return default
    try:
        return convert(raw)
    except (ValueError, argparse.ArgumentTypeError) as exc:
        raise argparse.ArgumentTypeError(f"Invalid value for {label.lower()}: {raw}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the generalized Monty Hall simulator")
    parser.add_argument("--runs", type=int, default=1, help="Number of independent runs")
    parser.add_argument("--trials", type=int, default=10_000, help="Games played per run")
    parser.add_argument("--doors", type=int, default=3, help="Number of doors (3..64)")
    parser.add_argument(
        "--rng",
        type=_parse_rng,
        default=RngId.MCG128,
        help=f"PRNG engine: {', '.join(RNG_CHOICES)}",
    )
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=DEFAULT_SEED,
        help="Engine seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for runs, games per run, doors and RNG; blank answers keep the flag values",
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON report instead of text")
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "simulation_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    return parser


def _apply_prompts(args: argparse.Namespace, input_fn: Callable[[str], str]) -> None:
    print(BANNER)
    args.runs = _prompt("Enter number of runs", args.runs, int, input_fn)
    args.trials = _prompt("Enter N (games per run)", args.trials, int, input_fn)
    args.doors = _prompt("Enter number of doors", args.doors, int, input_fn)
    args.rng = _prompt(
        f"Enter RNG ({'/'.join(RNG_CHOICES)})", args.rng.value, _parse_rng, input_fn
    )
    if isinstance(args.rng, str):
        args.rng = _parse_rng(args.rng)


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.interactive:
        try:
            _apply_prompts(args, input_fn)
        except argparse.ArgumentTypeError as exc:
            parser.error(str(exc))

    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.trials < 1:
        parser.error("--trials must be at least 1")

    cfg = SimConfig(
        num_doors=args.doors,
        runs=args.runs,
        trials_per_run=args.trials,
        rng=args.rng,
        seed=args.seed,
    )
    try:
        result = run_monty_sim(cfg)
    except ConfigError as exc:
        parser.error(str(exc))
    except MemoryError:
        logger.error("out of memory allocating %d runs", cfg.runs)
        return EXIT_ALLOCATION_FAILURE

    log_path: Optional[Path] = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("wrote report to %s", log_path)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print(format_report(result), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
